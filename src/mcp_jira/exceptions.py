class MCPJiraError(Exception):
    """Base exception for MCP-Jira errors."""

    pass


class MCPJiraValidationError(MCPJiraError, ValueError):
    """Raised when a tool argument fails primitive validation."""

    pass
