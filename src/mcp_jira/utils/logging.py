"""Logging utilities for MCP Jira.

Configures the root handler for the package loggers and provides helpers
for logging configuration values without leaking secrets.
"""

import logging

from .env import is_env_truthy

LOG_FORMAT = "%(levelname)s - %(name)s - %(message)s"


def get_log_level_from_env() -> int:
    """Return DEBUG when MCP_VERBOSE is truthy, WARNING otherwise."""
    return logging.DEBUG if is_env_truthy("MCP_VERBOSE") else logging.WARNING


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """
    Configure MCP-Jira logging.

    Args:
        level: The minimum logging level to display (default: WARNING)

    Returns:
        The configured logger instance
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to prevent duplication
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)

    for logger_name in ("mcp-jira", "mcp-jira.formatting", "mcp-jira.jira"):
        logging.getLogger(logger_name).setLevel(level)

    return logging.getLogger("mcp-jira")


def mask_sensitive(value: str | None, keep_chars: int = 4) -> str:
    """Masks sensitive strings for logging.

    Args:
        value: The string to mask
        keep_chars: Number of characters to keep visible at start and end

    Returns:
        Masked string with most characters replaced by asterisks
    """
    if not value:
        return "Not Provided"
    if len(value) <= keep_chars * 2:
        return "*" * len(value)
    return f"{value[:keep_chars]}{'*' * (len(value) - keep_chars * 2)}{value[-keep_chars:]}"


def log_config_param(
    logger: logging.Logger,
    service: str,
    param: str,
    value: str | None,
    sensitive: bool = False,
) -> None:
    """Logs a configuration parameter, masking if sensitive.

    Args:
        logger: The logger to use
        service: The service name
        param: The parameter name
        value: The parameter value
        sensitive: Whether the value should be masked
    """
    display_value = mask_sensitive(value) if sensitive else (value or "Not Provided")
    logger.info(f"{service} {param}: {display_value}")
