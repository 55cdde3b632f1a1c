"""
MCP Jira: Markdown <-> Atlassian Document Format conversion for Jira tools.

Descriptions and comments written in Markdown are converted to ADF before
they are sent to Jira Cloud, and ADF fields read back are rendered to
Markdown.
"""

from .formatting import (
    ConversionOptions,
    MarkdownConverter,
    adf_to_markdown,
    markdown_to_adf,
    parse_markdown,
)
from .models import Document

__version__ = "1.0.0"

__all__ = [
    "ConversionOptions",
    "Document",
    "MarkdownConverter",
    "__version__",
    "adf_to_markdown",
    "markdown_to_adf",
    "parse_markdown",
]
