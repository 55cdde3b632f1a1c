"""Environment variable utility functions for MCP Jira."""

import os

TRUTHY_VALUES = ("true", "1", "yes")


def is_env_truthy(env_var_name: str, default: str = "") -> bool:
    """Check if environment variable is set to a standard truthy value.

    Considers 'true', '1', 'yes' as truthy values (case-insensitive).

    Args:
        env_var_name: Name of the environment variable to check
        default: Default value if environment variable is not set

    Returns:
        True if the environment variable is set to a truthy value, False otherwise
    """
    return os.getenv(env_var_name, default).lower() in TRUTHY_VALUES


def getenv(
    env: dict[str, str], env_var_name: str, default: str | None = None
) -> str | None:
    """Retrieve the value of an environment variable.

    The provided `env` mapping is checked first, then the process environment.
    Empty values are treated as unset.

    Args:
        env: A dictionary of overrides (for example values read from a .env file).
        env_var_name: The name of the environment variable to retrieve.
        default: Value returned when the variable is unset or empty.

    Returns:
        The value of the environment variable if found, otherwise `default`.
    """
    value = env.get(env_var_name)
    if value is None or value == "":
        value = os.getenv(env_var_name)
    if value is None or value == "":
        return default
    return value


def getenv_int(env: dict[str, str], env_var_name: str, default: int) -> int:
    """Retrieve an integer environment variable.

    Raises:
        ValueError: If the variable is set but is not a positive integer
    """
    raw = getenv(env, env_var_name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(f"{env_var_name} must be an integer, got {raw!r}") from e
    if value < 1:
        raise ValueError(f"{env_var_name} must be a positive integer, got {value}")
    return value


def getenv_list(env: dict[str, str], env_var_name: str) -> list[str]:
    """Retrieve a comma separated environment variable as a list of values."""
    raw = getenv(env, env_var_name)
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def is_env_truthy_in(
    env: dict[str, str], env_var_name: str, default: str = ""
) -> bool:
    """Check a truthy flag, reading the `env` mapping before the process environment.

    Args:
        env: A dictionary of overrides (for example values read from a .env file).
        env_var_name: Name of the environment variable to check
        default: Default value if the variable is unset or empty

    Returns:
        True if the value is 'true', '1' or 'yes' (case-insensitive)
    """
    return (getenv(env, env_var_name) or default).lower() in TRUTHY_VALUES
