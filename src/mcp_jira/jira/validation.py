"""Primitive validation of tool arguments before they reach Jira."""

import math
import re
from numbers import Real
from typing import Any

from ..exceptions import MCPJiraValidationError

ISSUE_KEY_RE = re.compile(r"^[A-Z][A-Z0-9_]*-\d+$")
PROJECT_KEY_RE = re.compile(r"^[A-Z][A-Z0-9_]{1,9}$")
UNSAFE_PARAM_RE = re.compile(r"[/\\]")

MAX_JQL_LENGTH = 5000
MAX_LABEL_LENGTH = 255
MAX_RESULTS_CAP = 100
MAX_STORY_POINTS = 1000


def validate_issue_key(key: Any) -> str:
    """Validate an issue key such as ``PROJ-123``."""
    if not key or not isinstance(key, str):
        raise MCPJiraValidationError("Invalid issue key: must be a string")
    if not ISSUE_KEY_RE.match(key):
        raise MCPJiraValidationError(
            f"Invalid issue key format: {key}. Expected format: PROJECT-123"
        )
    return key


def validate_project_key(key: Any) -> str:
    """Validate a project key: 2-10 upper-case alphanumeric characters."""
    if not key or not isinstance(key, str):
        raise MCPJiraValidationError("Invalid project key: must be a string")
    if not PROJECT_KEY_RE.match(key):
        raise MCPJiraValidationError(
            f"Invalid project key format: {key}. "
            "Expected 2-10 uppercase alphanumeric characters"
        )
    return key


def validate_jql(jql: Any) -> str:
    if not jql or not isinstance(jql, str):
        raise MCPJiraValidationError("Invalid JQL query: must be a string")
    if len(jql) > MAX_JQL_LENGTH:
        raise MCPJiraValidationError(
            f"JQL query too long: maximum {MAX_JQL_LENGTH} characters"
        )
    return jql


def sanitize_string(value: Any, max_length: int = 1000, field_name: str = "input") -> str:
    """Check a required short string and return it stripped."""
    if not value or not isinstance(value, str):
        raise MCPJiraValidationError(f"Invalid {field_name}: must be a string")
    if len(value) > max_length:
        raise MCPJiraValidationError(
            f"{field_name} exceeds maximum length of {max_length} characters"
        )
    return value.strip()


def validate_safe_param(value: Any, field_name: str, max_length: int = 100) -> str:
    """Check a name that ends up in a URL path or lookup (issue type, priority, ...)."""
    if not value or not isinstance(value, str):
        raise MCPJiraValidationError(f"Invalid {field_name}: must be a non-empty string")
    if len(value) > max_length:
        raise MCPJiraValidationError(
            f"{field_name} exceeds maximum length of {max_length} characters"
        )
    if UNSAFE_PARAM_RE.search(value):
        raise MCPJiraValidationError(f"Invalid {field_name}: contains unsafe characters")
    return value.strip()


def validate_markdown_text(value: Any, max_length: int, field_name: str) -> str | None:
    """
    Check a free-text Markdown field (description, comment).

    The text is returned unmodified; line trimming is left to the converter.

    Args:
        value: The user supplied text, or None
        max_length: Maximum number of characters
        field_name: Name used in error messages

    Returns:
        The text as given, or None when no text was given

    Raises:
        MCPJiraValidationError: If the value is not a string or is too long
    """
    if value is None:
        return None
    if not isinstance(value, str):
        raise MCPJiraValidationError(f"Invalid {field_name}: must be a string")
    if len(value) > max_length:
        raise MCPJiraValidationError(
            f"{field_name} exceeds maximum length of {max_length} characters"
        )
    return value


def validate_max_results(max_results: Any) -> int:
    """Check a page size and cap it at 100."""
    if isinstance(max_results, bool) or not isinstance(max_results, int) or max_results < 1:
        raise MCPJiraValidationError("maxResults must be a positive integer")
    return min(max_results, MAX_RESULTS_CAP)


def validate_story_points(points: Any) -> float | int:
    if (
        isinstance(points, bool)
        or not isinstance(points, Real)
        or math.isnan(points)
        or points < 0
        or points > MAX_STORY_POINTS
    ):
        raise MCPJiraValidationError(
            f"Story points must be a number between 0 and {MAX_STORY_POINTS}"
        )
    return points


def validate_labels(labels: Any) -> list[str]:
    if not isinstance(labels, list):
        raise MCPJiraValidationError("Labels must be an array")
    for index, label in enumerate(labels):
        if not isinstance(label, str):
            raise MCPJiraValidationError(f"Label at index {index} must be a string")
        if len(label) > MAX_LABEL_LENGTH:
            raise MCPJiraValidationError(
                f"Label at index {index} exceeds maximum length of {MAX_LABEL_LENGTH} characters"
            )
    return list(labels)
