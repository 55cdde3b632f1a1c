"""Request bodies for Jira REST v3 write operations.

Descriptions, comments and worklog comments are accepted as Markdown and
converted to ADF here, after length validation, without other changes.
"""

import logging
from typing import TYPE_CHECKING, Any

from ..formatting.converter import markdown_to_adf
from .validation import (
    sanitize_string,
    validate_issue_key,
    validate_jql,
    validate_labels,
    validate_markdown_text,
    validate_max_results,
    validate_project_key,
    validate_safe_param,
    validate_story_points,
)

if TYPE_CHECKING:
    from ..config import ConverterConfig

logger = logging.getLogger("mcp-jira.jira.payloads")

SEARCH_FIELDS = [
    "summary",
    "status",
    "assignee",
    "priority",
    "created",
    "updated",
    "issuetype",
    "parent",
    "labels",
]
MAX_TIME_SPENT_LENGTH = 50


def _rich_text(config: "ConverterConfig", text: Any, field_name: str) -> dict[str, Any]:
    markdown = validate_markdown_text(text, config.max_text_length, field_name)
    return markdown_to_adf(markdown, config.to_options())


def build_create_issue_payload(
    config: "ConverterConfig",
    summary: str,
    description: str | None = None,
    project_key: str | None = None,
    issue_type: str = "Task",
    priority: str = "Medium",
    labels: list[str] | None = None,
    story_points: float | None = None,
    parent_key: str | None = None,
) -> dict[str, Any]:
    """
    Build the body of ``POST /issue``.

    Args:
        config: Converter configuration
        summary: Issue summary
        description: Issue description in Markdown
        project_key: Project key, defaults to the configured project
        issue_type: Issue type name
        priority: Priority name
        labels: Labels to set
        story_points: Story points, written to the configured custom field
        parent_key: Parent issue key for subtasks

    Returns:
        The request body

    Raises:
        MCPJiraValidationError: If any argument is invalid
    """
    fields: dict[str, Any] = {
        "project": {
            "key": validate_project_key(project_key) if project_key else config.project_key
        },
        "summary": sanitize_string(summary, config.max_summary_length, "summary"),
        "description": _rich_text(config, description, "description"),
        "issuetype": {"name": validate_safe_param(issue_type, "issueType")},
        "priority": {"name": validate_safe_param(priority, "priority")},
    }
    if labels is not None:
        fields["labels"] = validate_labels(labels)
    if story_points is not None:
        fields[config.story_points_field] = validate_story_points(story_points)
    if parent_key is not None:
        fields["parent"] = {"key": validate_issue_key(parent_key)}

    logger.debug(f"Built create payload for project {fields['project']['key']}")
    return {"fields": fields}


def build_subtask_payload(
    config: "ConverterConfig",
    parent_key: str,
    summary: str,
    description: str | None = None,
    project_key: str | None = None,
    priority: str = "Medium",
) -> dict[str, Any]:
    """Build the body of ``POST /issue`` for a subtask of `parent_key`."""
    return build_create_issue_payload(
        config,
        summary,
        description=description,
        project_key=project_key,
        issue_type="Subtask",
        priority=priority,
        parent_key=parent_key,
    )


def build_update_issue_payload(
    config: "ConverterConfig",
    summary: str | None = None,
    description: str | None = None,
) -> dict[str, Any]:
    """
    Build the body of ``PUT /issue/{key}``.

    Only provided values are included; an empty ``fields`` map means there
    is nothing to update.
    """
    fields: dict[str, Any] = {}
    if summary:
        fields["summary"] = sanitize_string(summary, config.max_summary_length, "summary")
    if description:
        fields["description"] = _rich_text(config, description, "description")
    return {"fields": fields}


def build_comment_payload(config: "ConverterConfig", comment: str | None) -> dict[str, Any]:
    """Build the body of ``POST /issue/{key}/comment``."""
    return {"body": _rich_text(config, comment, "comment")}


def build_worklog_payload(
    config: "ConverterConfig",
    time_spent: str,
    comment: str | None = None,
    started: str | None = None,
) -> dict[str, Any]:
    """Build the body of ``POST /issue/{key}/worklog``."""
    payload: dict[str, Any] = {
        "timeSpent": sanitize_string(time_spent, MAX_TIME_SPENT_LENGTH, "timeSpent")
    }
    if comment:
        payload["comment"] = _rich_text(config, comment, "comment")
    if started:
        payload["started"] = started
    return payload


def build_link_payload(
    inward_issue: str, outward_issue: str, link_type: str = "Relates"
) -> dict[str, Any]:
    """Build the body of ``POST /issueLink``."""
    return {
        "type": {"name": validate_safe_param(link_type, "linkType")},
        "inwardIssue": {"key": validate_issue_key(inward_issue)},
        "outwardIssue": {"key": validate_issue_key(outward_issue)},
    }


def build_search_payload(jql: str, max_results: int = 50) -> dict[str, Any]:
    """Build the body of ``POST /search``."""
    return {
        "jql": validate_jql(jql),
        "maxResults": validate_max_results(max_results),
        "fields": list(SEARCH_FIELDS),
    }
