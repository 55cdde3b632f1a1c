"""Tests for the converter configuration."""

import logging

import pytest

from mcp_jira.config import (
    DEFAULT_MAX_SUMMARY_LENGTH,
    DEFAULT_MAX_TEXT_LENGTH,
    ConverterConfig,
)
from mcp_jira.formatting import ConversionOptions

CONFIG_VARS = [
    "JIRA_HOST",
    "JIRA_URL",
    "JIRA_PROJECT_KEY",
    "JIRA_STORY_POINTS_FIELD",
    "MCP_JIRA_MAX_TEXT_LENGTH",
    "MCP_JIRA_MAX_SUMMARY_LENGTH",
    "MCP_JIRA_CODE_LANGUAGES",
    "MCP_JIRA_MEDIA_PLACEHOLDER",
    "MCP_JIRA_DEBUG_ERRORS",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove configuration variables inherited from the environment."""
    for name in CONFIG_VARS:
        monkeypatch.delenv(name, raising=False)


class TestFromEnv:
    """Tests for ConverterConfig.from_env."""

    def test_defaults(self):
        """Test configuration with nothing set."""
        config = ConverterConfig.from_env()
        assert config.base_url is None
        assert config.project_key == "PROJ"
        assert config.story_points_field == "customfield_10016"
        assert config.max_text_length == DEFAULT_MAX_TEXT_LENGTH
        assert config.max_summary_length == DEFAULT_MAX_SUMMARY_LENGTH
        assert config.code_languages == []
        assert config.media_placeholder == "[media]"
        assert config.debug_errors is False

    def test_all_values(self, monkeypatch):
        """Test reading every variable."""
        monkeypatch.setenv("JIRA_HOST", "https://test.atlassian.net/")
        monkeypatch.setenv("JIRA_PROJECT_KEY", "TEST")
        monkeypatch.setenv("JIRA_STORY_POINTS_FIELD", "customfield_10028")
        monkeypatch.setenv("MCP_JIRA_MAX_TEXT_LENGTH", "1000")
        monkeypatch.setenv("MCP_JIRA_MAX_SUMMARY_LENGTH", "120")
        monkeypatch.setenv("MCP_JIRA_CODE_LANGUAGES", "python, js,,")
        monkeypatch.setenv("MCP_JIRA_MEDIA_PLACEHOLDER", "(image)")
        monkeypatch.setenv("MCP_JIRA_DEBUG_ERRORS", "Yes")

        config = ConverterConfig.from_env()
        assert config.base_url == "https://test.atlassian.net"
        assert config.project_key == "TEST"
        assert config.story_points_field == "customfield_10028"
        assert config.max_text_length == 1000
        assert config.max_summary_length == 120
        assert config.code_languages == ["python", "js"]
        assert config.media_placeholder == "(image)"
        assert config.debug_errors is True

    def test_jira_url_fallback(self, monkeypatch):
        """Test that JIRA_URL is read when JIRA_HOST is unset."""
        monkeypatch.setenv("JIRA_URL", "https://other.atlassian.net")
        assert ConverterConfig.from_env().base_url == "https://other.atlassian.net"

    def test_https_required(self, monkeypatch):
        """Test that plain HTTP sites are rejected."""
        monkeypatch.setenv("JIRA_HOST", "http://test.atlassian.net")
        with pytest.raises(ValueError, match="JIRA_HOST must use HTTPS protocol"):
            ConverterConfig.from_env()

    def test_invalid_project_key(self, monkeypatch):
        """Test that the default project key is validated."""
        monkeypatch.setenv("JIRA_PROJECT_KEY", "lower")
        with pytest.raises(ValueError, match="JIRA_PROJECT_KEY is invalid"):
            ConverterConfig.from_env()

    @pytest.mark.parametrize(
        "value, message",
        [
            pytest.param("lots", "must be an integer", id="not_a_number"),
            pytest.param("0", "must be a positive integer", id="zero"),
        ],
    )
    def test_invalid_lengths(self, monkeypatch, value, message):
        """Test that length limits must be positive integers."""
        monkeypatch.setenv("MCP_JIRA_MAX_TEXT_LENGTH", value)
        with pytest.raises(ValueError, match=message):
            ConverterConfig.from_env()

    def test_env_file_overrides_environment(self, monkeypatch, tmp_path):
        """Test that values from a .env file take precedence."""
        monkeypatch.setenv("JIRA_PROJECT_KEY", "ENVKEY")
        env_file = tmp_path / ".env"
        env_file.write_text("JIRA_PROJECT_KEY=FILEKEY\nMCP_JIRA_CODE_LANGUAGES=go\n")
        config = ConverterConfig.from_env(str(env_file))
        assert config.project_key == "FILEKEY"
        assert config.code_languages == ["go"]

    def test_debug_errors_from_env_file(self, monkeypatch, tmp_path):
        """Test that the debug flag in a .env file wins over the environment."""
        monkeypatch.setenv("MCP_JIRA_DEBUG_ERRORS", "false")
        env_file = tmp_path / ".env"
        env_file.write_text("MCP_JIRA_DEBUG_ERRORS=1\n")
        assert ConverterConfig.from_env(str(env_file)).debug_errors is True
        assert ConverterConfig.from_env().debug_errors is False

    def test_settings_are_logged(self, monkeypatch, caplog):
        """Test that settings are logged at info level."""
        monkeypatch.setenv("JIRA_HOST", "https://test.atlassian.net")
        with caplog.at_level(logging.INFO, logger="mcp-jira.config"):
            ConverterConfig.from_env()
        assert "Jira URL: https://test.atlassian.net" in caplog.text
        assert "Jira code languages: any" in caplog.text


class TestToOptions:
    """Tests for ConverterConfig.to_options."""

    def test_default_options(self):
        """Test that no language list accepts any fence language."""
        assert ConverterConfig().to_options() == ConversionOptions()

    def test_language_options(self):
        """Test that the language list is normalised."""
        options = ConverterConfig(code_languages=["Python"], media_placeholder="-").to_options()
        assert options.code_languages == frozenset({"python"})
        assert options.media_placeholder == "-"
        assert options.accepts_language("PYTHON")
        assert not options.accepts_language("js")
