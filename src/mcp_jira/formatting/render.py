"""Block renderer and text assembler: ADF blocks back to Markdown."""

import logging

from ..models.adf import (
    Block,
    Blockquote,
    BulletList,
    CodeBlock,
    Document,
    Heading,
    Inline,
    ListItem,
    Media,
    Node,
    OrderedList,
    Paragraph,
    Rule,
    Table,
    TableCell,
    TableRow,
    UnknownBlock,
)
from ..models.constants import EMPTY_STRING
from .blocks import FENCE
from .inline import render_inline, render_inline_node
from .options import DEFAULT_OPTIONS, ConversionOptions

logger = logging.getLogger("mcp-jira.formatting.render")

BLOCK_SEPARATOR = "\n\n"


def render_block(block: Block, options: ConversionOptions | None = None) -> str:
    """
    Render one block to Markdown.

    Never raises: unrecognized blocks render their nested content, or nothing.
    """
    options = options or DEFAULT_OPTIONS
    match block:
        case Heading(level=level, content=content):
            return "#" * level + " " + render_inline(content)
        case Paragraph(content=content):
            return render_inline(content)
        case BulletList(items=items):
            return "\n".join("- " + _render_list_item(item, options) for item in items)
        case OrderedList(items=items):
            return "\n".join(
                f"{position}. " + _render_list_item(item, options)
                for position, item in enumerate(items, start=1)
            )
        case Blockquote(content=content):
            return "\n".join(
                _quote(render_block(child, options)) for child in content
            )
        case CodeBlock(language=language, text=text):
            return f"{FENCE}{language or EMPTY_STRING}\n{text or EMPTY_STRING}\n{FENCE}"
        case Rule():
            return "---"
        case Table(rows=rows):
            return "\n".join(_render_row(row, options) for row in rows)
        case Media():
            return options.media_placeholder
        case UnknownBlock(type=unknown_type, content=content):
            logger.debug(f"Rendering unknown block '{unknown_type}' from nested content")
            return _render_nested(content, options)
        case _:
            logger.debug(f"Skipping unrenderable block: {type(block).__name__}")
            return EMPTY_STRING


def _render_list_item(item: ListItem, options: ConversionOptions) -> str:
    return "\n".join(render_block(child, options) for child in item.content)


def _quote(text: str) -> str:
    return "\n".join(f"> {line}" for line in text.split("\n"))


def _render_row(row: TableRow, options: ConversionOptions) -> str:
    cells = [_render_cell(cell, options) for cell in row.cells]
    return "| " + " | ".join(cells) + " |"


def _render_cell(cell: TableCell, options: ConversionOptions) -> str:
    return " ".join(render_block(child, options) for child in cell.content)


def _render_nested(content: tuple[Node, ...], options: ConversionOptions) -> str:
    """Render mixed inline/block children: inline runs are joined, blocks get their own line."""
    segments: list[str] = []
    inline_run: list[str] = []
    for child in content:
        if isinstance(child, Inline):
            inline_run.append(render_inline_node(child))
            continue
        if inline_run:
            segments.append("".join(inline_run))
            inline_run = []
        segments.append(render_block(child, options))
    if inline_run:
        segments.append("".join(inline_run))
    return "\n".join(segments)


def render_document(document: Document, options: ConversionOptions | None = None) -> str:
    """
    Render a document, separating blocks with a blank line.

    Args:
        document: The document to render
        options: Conversion options

    Returns:
        Markdown text
    """
    return BLOCK_SEPARATOR.join(
        render_block(block, options) for block in document.content
    )
