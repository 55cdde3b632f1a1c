"""
Utility functions for the MCP Jira integration.
This package provides environment and logging helpers used throughout the codebase.
"""

from .env import getenv, getenv_int, getenv_list, is_env_truthy, is_env_truthy_in
from .logging import (
    get_log_level_from_env,
    log_config_param,
    mask_sensitive,
    setup_logging,
)

__all__ = [
    "get_log_level_from_env",
    "getenv",
    "getenv_int",
    "getenv_list",
    "is_env_truthy",
    "is_env_truthy_in",
    "log_config_param",
    "mask_sensitive",
    "setup_logging",
]
