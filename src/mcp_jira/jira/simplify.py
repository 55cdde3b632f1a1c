"""Reshape Jira REST v3 responses for tool output.

Every rich text field (description, comment body, worklog comment) is
rendered from ADF to Markdown; absent documents become empty strings.
"""

from typing import TYPE_CHECKING, Any

from ..formatting.converter import adf_to_markdown
from ..formatting.options import ConversionOptions

if TYPE_CHECKING:
    from ..config import ConverterConfig


def issue_url(base_url: str | None, issue_key: str | None) -> str | None:
    """Return the browse URL for an issue, or None without a site URL."""
    if not base_url or not issue_key:
        return None
    return f"{base_url.rstrip('/')}/browse/{issue_key}"


def _name(value: Any, key: str = "name") -> str | None:
    return value.get(key) if isinstance(value, dict) else None


def _user(value: Any) -> dict[str, Any] | None:
    if not isinstance(value, dict):
        return None
    return {"displayName": value.get("displayName"), "accountId": value.get("accountId")}


def _fields(issue: dict[str, Any]) -> dict[str, Any]:
    fields = issue.get("fields")
    return fields if isinstance(fields, dict) else {}


def simplify_issue(issue: dict[str, Any], config: "ConverterConfig") -> dict[str, Any]:
    """
    Reshape a ``GET /issue/{key}`` response.

    Args:
        issue: The raw issue
        config: Converter configuration

    Returns:
        A flat dictionary with the description rendered as Markdown
    """
    fields = _fields(issue)
    key = issue.get("key")
    return {
        "key": key,
        "summary": fields.get("summary"),
        "description": adf_to_markdown(fields.get("description"), config.to_options()),
        "status": _name(fields.get("status")),
        "assignee": _user(fields.get("assignee")),
        "reporter": _name(fields.get("reporter"), "displayName"),
        "priority": _name(fields.get("priority")),
        "issueType": _name(fields.get("issuetype")),
        "labels": fields.get("labels") or [],
        "storyPoints": fields.get(config.story_points_field),
        "parent": _name(fields.get("parent"), "key"),
        "created": fields.get("created"),
        "updated": fields.get("updated"),
        "url": issue_url(config.base_url, key),
    }


def simplify_search_results(
    results: dict[str, Any], config: "ConverterConfig"
) -> dict[str, Any]:
    """Reshape a ``POST /search`` response."""
    issues = results.get("issues")
    simplified = []
    for issue in issues if isinstance(issues, list) else []:
        if not isinstance(issue, dict):
            continue
        fields = _fields(issue)
        simplified.append(
            {
                "key": issue.get("key"),
                "summary": fields.get("summary"),
                "status": _name(fields.get("status")),
                "assignee": _user(fields.get("assignee")),
                "priority": _name(fields.get("priority")),
                "issueType": _name(fields.get("issuetype")),
                "labels": fields.get("labels") or [],
                "parent": _name(fields.get("parent"), "key"),
                "url": issue_url(config.base_url, issue.get("key")),
            }
        )
    return {"total": results.get("total"), "issues": simplified}


def simplify_comments(
    issue_key: str,
    response: dict[str, Any],
    options: ConversionOptions | None = None,
) -> dict[str, Any]:
    """Reshape a ``GET /issue/{key}/comment`` response."""
    comments = response.get("comments")
    return {
        "issueKey": issue_key,
        "total": response.get("total"),
        "comments": [
            {
                "id": comment.get("id"),
                "author": _name(comment.get("author"), "displayName"),
                "body": adf_to_markdown(comment.get("body"), options),
                "created": comment.get("created"),
                "updated": comment.get("updated"),
            }
            for comment in (comments if isinstance(comments, list) else [])
            if isinstance(comment, dict)
        ],
    }


def simplify_worklogs(
    issue_key: str,
    response: dict[str, Any],
    options: ConversionOptions | None = None,
) -> dict[str, Any]:
    """Reshape a ``GET /issue/{key}/worklog`` response."""
    worklogs = response.get("worklogs")
    return {
        "issueKey": issue_key,
        "total": response.get("total"),
        "worklogs": [
            {
                "id": worklog.get("id"),
                "author": _name(worklog.get("author"), "displayName"),
                "timeSpent": worklog.get("timeSpent"),
                "timeSpentSeconds": worklog.get("timeSpentSeconds"),
                "started": worklog.get("started"),
                "comment": adf_to_markdown(worklog.get("comment"), options),
            }
            for worklog in (worklogs if isinstance(worklogs, list) else [])
            if isinstance(worklog, dict)
        ],
    }
