"""
Test fixtures for Jira unit tests.

Provides converter configurations for the payload builders and response
simplifiers.
"""

import pytest

from mcp_jira.config import ConverterConfig


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def converter_config_factory():
    """
    Factory for creating ConverterConfig instances with customizable options.

    Returns:
        Callable: Function that creates ConverterConfig instances

    Example:
        def test_config(converter_config_factory):
            config = converter_config_factory(project_key="OTHER")
    """

    def _create_config(**overrides):
        defaults = {
            "base_url": "https://test.atlassian.net",
            "project_key": "TEST",
        }
        return ConverterConfig(**{**defaults, **overrides})

    return _create_config


@pytest.fixture
def converter_config(converter_config_factory):
    """
    Standard configuration pointing at a test Cloud site.

    Returns:
        ConverterConfig: Configuration with default limits
    """
    return converter_config_factory()
