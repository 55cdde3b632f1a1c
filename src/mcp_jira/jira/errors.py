"""Reshape backend failures into tool error payloads."""

import logging
import traceback
from typing import Any

from requests.exceptions import HTTPError

logger = logging.getLogger("mcp-jira.jira.errors")

EXISTING_LINK_MESSAGE = "link already exists"


def _response_body(error: Exception) -> dict[str, Any]:
    """Return the decoded JSON body of an HTTP error, or an empty dict."""
    if not isinstance(error, HTTPError) or error.response is None:
        return {}
    try:
        body = error.response.json()
    except ValueError:
        logger.debug("Error response body is not JSON")
        return {}
    return body if isinstance(body, dict) else {}


def build_error_response(error: Exception, include_trace: bool = False) -> dict[str, Any]:
    """
    Build the error payload returned to the tool caller.

    Args:
        error: The exception raised while handling the call
        include_trace: Whether to include the formatted traceback

    Returns:
        A dictionary with ``error`` and ``message`` keys, plus ``jiraErrors``
        and ``fieldErrors`` when Jira reported them
    """
    payload: dict[str, Any] = {
        "error": "Operation failed",
        "message": str(error) or "An unexpected error occurred",
    }

    body = _response_body(error)
    jira_errors = body.get("errorMessages")
    if isinstance(jira_errors, list) and jira_errors:
        payload["jiraErrors"] = jira_errors
    field_errors = body.get("errors")
    if isinstance(field_errors, dict) and field_errors:
        payload["fieldErrors"] = field_errors

    if include_trace:
        payload["trace"] = "".join(traceback.format_exception(error))

    logger.error(f"Jira operation failed: {payload['message']}")
    return payload


def is_existing_link_error(error: Exception) -> bool:
    """Check if `error` is Jira refusing to create a link that already exists."""
    if not isinstance(error, HTTPError) or error.response is None:
        return False
    if error.response.status_code != 400:
        return False
    messages = _response_body(error).get("errorMessages")
    return isinstance(messages, list) and EXISTING_LINK_MESSAGE in messages
