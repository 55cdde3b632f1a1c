"""
ADF data models for the MCP Jira integration.

This package provides frozen Pydantic models for the Atlassian Document
Format nodes exchanged with Jira Cloud.
"""

from .adf import (
    BLOCK_TYPES,
    CODE,
    EMPHASIS,
    INLINE_TYPES,
    STRIKE,
    STRONG,
    Block,
    Blockquote,
    BulletList,
    CodeBlock,
    Document,
    Emoji,
    HardBreak,
    Heading,
    Inline,
    InlineCard,
    ListItem,
    Mark,
    Media,
    Mention,
    Node,
    OrderedList,
    Paragraph,
    Rule,
    Table,
    TableCell,
    TableRow,
    Text,
    UnknownBlock,
    UnknownInline,
    block_from_adf,
    inline_from_adf,
    link,
    ordered_marks,
)
from .base import AdfModel

__all__ = [
    "AdfModel",
    "BLOCK_TYPES",
    "Block",
    "Blockquote",
    "BulletList",
    "CODE",
    "CodeBlock",
    "Document",
    "EMPHASIS",
    "Emoji",
    "HardBreak",
    "Heading",
    "INLINE_TYPES",
    "Inline",
    "InlineCard",
    "ListItem",
    "Mark",
    "Media",
    "Mention",
    "Node",
    "OrderedList",
    "Paragraph",
    "Rule",
    "STRIKE",
    "STRONG",
    "Table",
    "TableCell",
    "TableRow",
    "Text",
    "UnknownBlock",
    "UnknownInline",
    "block_from_adf",
    "inline_from_adf",
    "link",
    "ordered_marks",
]
