"""Markdown <-> Atlassian Document Format conversion."""

from .blocks import BlockBuilder, build_blocks
from .converter import MarkdownConverter, adf_to_markdown, markdown_to_adf, parse_markdown
from .inline import apply_marks, render_inline, tokenize_inline
from .options import DEFAULT_OPTIONS, ConversionOptions
from .render import render_block, render_document

__all__ = [
    "BlockBuilder",
    "ConversionOptions",
    "DEFAULT_OPTIONS",
    "MarkdownConverter",
    "adf_to_markdown",
    "apply_marks",
    "build_blocks",
    "markdown_to_adf",
    "parse_markdown",
    "render_block",
    "render_document",
    "render_inline",
    "tokenize_inline",
]
