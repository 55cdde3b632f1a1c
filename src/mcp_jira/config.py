"""Configuration for the Jira field conversion layer."""

import logging
from dataclasses import dataclass, field

from dotenv import dotenv_values

from .exceptions import MCPJiraValidationError
from .formatting.options import ConversionOptions
from .jira.validation import validate_project_key
from .models.constants import DEFAULT_MEDIA_PLACEHOLDER
from .utils.env import getenv, getenv_int, getenv_list, is_env_truthy_in
from .utils.logging import log_config_param

logger = logging.getLogger("mcp-jira.config")

DEFAULT_PROJECT_KEY = "PROJ"
DEFAULT_STORY_POINTS_FIELD = "customfield_10016"
DEFAULT_MAX_TEXT_LENGTH = 32767  # Jira rich text field limit
DEFAULT_MAX_SUMMARY_LENGTH = 500


@dataclass
class ConverterConfig:
    """Settings for building Jira payloads and reading Jira responses."""

    base_url: str | None = None  # Site URL used for browse links
    project_key: str = DEFAULT_PROJECT_KEY  # Used when a tool call names no project
    story_points_field: str = DEFAULT_STORY_POINTS_FIELD
    max_text_length: int = DEFAULT_MAX_TEXT_LENGTH  # Description and comment cap
    max_summary_length: int = DEFAULT_MAX_SUMMARY_LENGTH
    code_languages: list[str] = field(default_factory=list)  # Empty accepts any fence language
    media_placeholder: str = DEFAULT_MEDIA_PLACEHOLDER
    debug_errors: bool = False  # Include tracebacks in error payloads

    @classmethod
    def from_env(cls, env_file: str | None = None) -> "ConverterConfig":
        """Create configuration from environment variables.

        Args:
            env_file: Optional .env file whose values take precedence over
                the process environment

        Returns:
            ConverterConfig with values from the environment

        Raises:
            ValueError: If a variable holds an invalid value
        """
        env = (
            {k: v for k, v in dotenv_values(env_file).items() if v is not None}
            if env_file
            else {}
        )

        base_url = getenv(env, "JIRA_HOST") or getenv(env, "JIRA_URL")
        if base_url and not base_url.startswith("https://"):
            raise ValueError("JIRA_HOST must use HTTPS protocol")

        project_key = getenv(env, "JIRA_PROJECT_KEY", DEFAULT_PROJECT_KEY)
        try:
            validate_project_key(project_key)
        except MCPJiraValidationError as e:
            raise ValueError(f"JIRA_PROJECT_KEY is invalid: {e}") from e

        config = cls(
            base_url=base_url.rstrip("/") if base_url else None,
            project_key=project_key,
            story_points_field=getenv(
                env, "JIRA_STORY_POINTS_FIELD", DEFAULT_STORY_POINTS_FIELD
            ),
            max_text_length=getenv_int(
                env, "MCP_JIRA_MAX_TEXT_LENGTH", DEFAULT_MAX_TEXT_LENGTH
            ),
            max_summary_length=getenv_int(
                env, "MCP_JIRA_MAX_SUMMARY_LENGTH", DEFAULT_MAX_SUMMARY_LENGTH
            ),
            code_languages=getenv_list(env, "MCP_JIRA_CODE_LANGUAGES"),
            media_placeholder=getenv(
                env, "MCP_JIRA_MEDIA_PLACEHOLDER", DEFAULT_MEDIA_PLACEHOLDER
            ),
            debug_errors=is_env_truthy_in(env, "MCP_JIRA_DEBUG_ERRORS"),
        )
        config.log_settings()
        return config

    def log_settings(self) -> None:
        log_config_param(logger, "Jira", "URL", self.base_url)
        log_config_param(logger, "Jira", "default project", self.project_key)
        log_config_param(logger, "Jira", "story points field", self.story_points_field)
        log_config_param(
            logger, "Jira", "code languages", ",".join(self.code_languages) or "any"
        )

    def to_options(self) -> ConversionOptions:
        """Build the per-call conversion options for this configuration."""
        if self.code_languages:
            return ConversionOptions.with_languages(
                self.code_languages, media_placeholder=self.media_placeholder
            )
        return ConversionOptions(media_placeholder=self.media_placeholder)
