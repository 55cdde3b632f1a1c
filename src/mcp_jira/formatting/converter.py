"""
Markdown <-> ADF conversion entry points.

`markdown_to_adf` is used before sending a description or comment to Jira
Cloud; `adf_to_markdown` is used on every rich text field read back. Both
are pure: each call builds a new tree and nothing is shared between calls.
"""

import logging
from typing import Any

from ..models.adf import Document
from ..models.constants import EMPTY_STRING
from .blocks import build_blocks
from .options import DEFAULT_OPTIONS, ConversionOptions
from .render import render_document

logger = logging.getLogger("mcp-jira.formatting")


def parse_markdown(text: str | None, options: ConversionOptions | None = None) -> Document:
    """
    Parse Markdown into a document.

    Any input produces a valid document; empty, blank or non-string input
    gives a single empty paragraph.

    Args:
        text: Markdown text, passed through unmodified by the caller
        options: Conversion options

    Returns:
        A new Document
    """
    if not text or not isinstance(text, str):
        return Document.empty()

    blocks = build_blocks(text.split("\n"), options)
    if not blocks:
        return Document.empty()

    logger.debug(f"Parsed {len(text)} characters of Markdown into {len(blocks)} blocks")
    return Document(content=tuple(blocks))


def markdown_to_adf(text: str | None, options: ConversionOptions | None = None) -> dict[str, Any]:
    """
    Convert Markdown into an ADF document dictionary ready for the REST API.

    Args:
        text: Markdown text
        options: Conversion options

    Returns:
        ``{"type": "doc", "version": 1, "content": [...]}``
    """
    return parse_markdown(text, options).to_adf()


def adf_to_markdown(
    adf_content: Document | dict[str, Any] | str | None,
    options: ConversionOptions | None = None,
) -> str:
    """
    Convert an ADF document back to Markdown.

    Jira Server/Data Center returns plain strings for rich text fields, so
    strings are returned unchanged. None, and anything that is not a
    ``doc`` node with a content list, converts to an empty string.

    Args:
        adf_content: A Document, an ADF dictionary, a string or None
        options: Conversion options

    Returns:
        Markdown text
    """
    if adf_content is None:
        return EMPTY_STRING
    if isinstance(adf_content, str):
        return adf_content
    if isinstance(adf_content, Document):
        return render_document(adf_content, options)
    if not isinstance(adf_content, dict):
        logger.debug(f"Cannot render ADF content of type {type(adf_content).__name__}")
        return EMPTY_STRING

    document = Document.from_adf(adf_content)
    if document is None:
        logger.debug("ADF content is not a doc node, rendering as empty text")
        return EMPTY_STRING
    return render_document(document, options)


class MarkdownConverter:
    """
    Stateless converter bound to a set of conversion options.

    Example:
        >>> converter = MarkdownConverter()
        >>> converter.to_markdown(converter.to_adf("**done**"))
        '**done**'
    """

    def __init__(self, options: ConversionOptions | None = None) -> None:
        self.options = options or DEFAULT_OPTIONS

    def to_document(self, markdown: str | None) -> Document:
        return parse_markdown(markdown, self.options)

    def to_adf(self, markdown: str | None) -> dict[str, Any]:
        return markdown_to_adf(markdown, self.options)

    def to_markdown(self, adf_content: Document | dict[str, Any] | str | None) -> str:
        return adf_to_markdown(adf_content, self.options)
