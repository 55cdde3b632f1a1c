"""
Atlassian Document Format (ADF) node models.

This module provides the closed set of nodes the Markdown converter builds
and renders, plus defensive readers for documents returned by Jira Cloud.
Unrecognized wire nodes are kept as `UnknownBlock` / `UnknownInline` so
their nested content can still be rendered.
"""

import logging
from typing import Any, Literal

from pydantic import Field

from .base import AdfModel, node_attrs, node_content, node_type
from .constants import (
    ADF_DOC_TYPE,
    ADF_VERSION,
    EMPTY_STRING,
    MARK_LINK,
    MARK_ORDER,
    MAX_HEADING_LEVEL,
    MEDIA_NODE_TYPES,
    MIN_HEADING_LEVEL,
)

logger = logging.getLogger("mcp-jira.models.adf")

MarkType = Literal["strong", "em", "strike", "code", "link"]


class Mark(AdfModel):
    """A formatting attribute attached to a text run."""

    type: MarkType
    href: str | None = None

    @property
    def rank(self) -> int:
        """Position of this mark in the fixed delimiter order."""
        return MARK_ORDER.index(self.type)

    @classmethod
    def from_adf(cls, data: dict[str, Any]) -> "Mark | None":
        mark_type = node_type(data)
        if mark_type not in MARK_ORDER:
            logger.debug(f"Dropping unsupported mark type: {mark_type}")
            return None
        if mark_type == MARK_LINK:
            href = node_attrs(data).get("href")
            return cls(type=MARK_LINK, href=href if isinstance(href, str) else "")
        return cls(type=mark_type)

    def to_adf(self) -> dict[str, Any]:
        if self.type == MARK_LINK:
            return {"type": MARK_LINK, "attrs": {"href": self.href or EMPTY_STRING}}
        return {"type": self.type}


STRONG = Mark(type="strong")
EMPHASIS = Mark(type="em")
STRIKE = Mark(type="strike")
CODE = Mark(type="code")


def link(href: str) -> Mark:
    """Build a link mark."""
    return Mark(type="link", href=href)


def ordered_marks(marks: frozenset[Mark]) -> list[Mark]:
    """Return marks sorted in the fixed delimiter order."""
    return sorted(marks, key=lambda mark: (mark.rank, mark.href or EMPTY_STRING))


# =========================================================================
# Inline nodes
# =========================================================================


class Text(AdfModel):
    """A run of text carrying a set of marks."""

    type: Literal["text"] = "text"
    text: str = EMPTY_STRING
    marks: frozenset[Mark] = frozenset()

    def has_mark(self, mark_type: str) -> bool:
        return any(mark.type == mark_type for mark in self.marks)

    def with_mark(self, mark: Mark) -> "Text":
        """Return a copy of this run with `mark` added.

        A run never carries two links; an existing link wins.
        """
        if mark.type == MARK_LINK and self.has_mark(MARK_LINK):
            return self
        return Text(text=self.text, marks=self.marks | {mark})

    @classmethod
    def from_adf(cls, data: dict[str, Any]) -> "Text":
        text = data.get("text")
        raw_marks = data.get("marks")
        marks: set[Mark] = set()
        if isinstance(raw_marks, list):
            for raw_mark in raw_marks:
                mark = Mark.from_adf(raw_mark) if isinstance(raw_mark, dict) else None
                if mark is not None:
                    marks.add(mark)
        return cls(
            text=text if isinstance(text, str) else EMPTY_STRING,
            marks=frozenset(marks),
        )

    def to_adf(self) -> dict[str, Any]:
        node: dict[str, Any] = {"type": "text", "text": self.text}
        if self.marks:
            node["marks"] = [mark.to_adf() for mark in ordered_marks(self.marks)]
        return node


class HardBreak(AdfModel):
    type: Literal["hardBreak"] = "hardBreak"

    @classmethod
    def from_adf(cls, data: dict[str, Any]) -> "HardBreak":
        return cls()

    def to_adf(self) -> dict[str, Any]:
        return {"type": "hardBreak"}


class Mention(AdfModel):
    """A user mention. `label` travels as the `text` attribute on the wire."""

    type: Literal["mention"] = "mention"
    id: str = EMPTY_STRING
    label: str | None = None

    @classmethod
    def from_adf(cls, data: dict[str, Any]) -> "Mention":
        attrs = node_attrs(data)
        label = attrs.get("text")
        return cls(
            id=str(attrs.get("id") or EMPTY_STRING),
            label=label if isinstance(label, str) and label else None,
        )

    def to_adf(self) -> dict[str, Any]:
        attrs: dict[str, Any] = {"id": self.id}
        if self.label:
            attrs["text"] = self.label
        return {"type": "mention", "attrs": attrs}


class InlineCard(AdfModel):
    type: Literal["inlineCard"] = "inlineCard"
    url: str = EMPTY_STRING

    @classmethod
    def from_adf(cls, data: dict[str, Any]) -> "InlineCard":
        url = node_attrs(data).get("url")
        return cls(url=url if isinstance(url, str) else EMPTY_STRING)

    def to_adf(self) -> dict[str, Any]:
        return {"type": "inlineCard", "attrs": {"url": self.url}}


class Emoji(AdfModel):
    type: Literal["emoji"] = "emoji"
    short_name: str = EMPTY_STRING

    @classmethod
    def from_adf(cls, data: dict[str, Any]) -> "Emoji":
        short_name = node_attrs(data).get("shortName")
        return cls(short_name=short_name if isinstance(short_name, str) else EMPTY_STRING)

    def to_adf(self) -> dict[str, Any]:
        return {"type": "emoji", "attrs": {"shortName": self.short_name}}


class UnknownInline(AdfModel):
    """An inline node type this package does not model (status, date, ...)."""

    type: str
    content: tuple["Inline", ...] = ()

    @classmethod
    def from_adf(cls, data: dict[str, Any]) -> "UnknownInline":
        return cls(
            type=node_type(data) or EMPTY_STRING,
            content=inlines_from_adf(node_content(data)),
        )

    def to_adf(self) -> dict[str, Any]:
        node: dict[str, Any] = {"type": self.type}
        if self.content:
            node["content"] = [child.to_adf() for child in self.content]
        return node


Inline = Text | HardBreak | Mention | InlineCard | Emoji | UnknownInline

UnknownInline.model_rebuild()

INLINE_TYPES: dict[str, type[AdfModel]] = {
    "text": Text,
    "hardBreak": HardBreak,
    "mention": Mention,
    "inlineCard": InlineCard,
    "emoji": Emoji,
}


def inline_from_adf(data: dict[str, Any]) -> Inline:
    """Read one inline wire node."""
    model = INLINE_TYPES.get(node_type(data) or EMPTY_STRING, UnknownInline)
    return model.from_adf(data)  # type: ignore[return-value]


def inlines_from_adf(nodes: list[dict[str, Any]]) -> tuple[Inline, ...]:
    return tuple(inline_from_adf(node) for node in nodes)


# =========================================================================
# Block nodes
# =========================================================================


class Paragraph(AdfModel):
    type: Literal["paragraph"] = "paragraph"
    content: tuple[Inline, ...] = ()

    @classmethod
    def from_adf(cls, data: dict[str, Any]) -> "Paragraph":
        return cls(content=inlines_from_adf(node_content(data)))

    def to_adf(self) -> dict[str, Any]:
        return {
            "type": "paragraph",
            "content": [child.to_adf() for child in self.content],
        }


class Heading(AdfModel):
    type: Literal["heading"] = "heading"
    level: int = Field(default=MIN_HEADING_LEVEL, ge=MIN_HEADING_LEVEL, le=MAX_HEADING_LEVEL)
    content: tuple[Inline, ...] = ()

    @classmethod
    def from_adf(cls, data: dict[str, Any]) -> "Heading":
        return cls(
            level=clamp_heading_level(node_attrs(data).get("level")),
            content=inlines_from_adf(node_content(data)),
        )

    def to_adf(self) -> dict[str, Any]:
        return {
            "type": "heading",
            "attrs": {"level": self.level},
            "content": [child.to_adf() for child in self.content],
        }


def clamp_heading_level(value: Any) -> int:
    """Coerce a wire heading level into [1, 6]; anything unreadable becomes 1."""
    if isinstance(value, bool):
        return MIN_HEADING_LEVEL
    try:
        level = int(value)
    except OverflowError:
        # Infinite floats
        return MAX_HEADING_LEVEL if value > 0 else MIN_HEADING_LEVEL
    except (TypeError, ValueError):
        return MIN_HEADING_LEVEL
    clamped = max(MIN_HEADING_LEVEL, min(MAX_HEADING_LEVEL, level))
    if clamped != level:
        logger.debug(f"Clamped heading level {level} to {clamped}")
    return clamped


class ListItem(AdfModel):
    """One list entry. Parsed items hold exactly one paragraph."""

    type: Literal["listItem"] = "listItem"
    content: tuple["Block", ...] = ()

    @classmethod
    def from_adf(cls, data: dict[str, Any]) -> "ListItem":
        return cls(content=blocks_from_adf(node_content(data)))

    def to_adf(self) -> dict[str, Any]:
        return {
            "type": "listItem",
            "content": [child.to_adf() for child in self.content],
        }


def _list_items_from_adf(data: dict[str, Any]) -> tuple[ListItem, ...]:
    return tuple(
        ListItem.from_adf(child)
        for child in node_content(data)
        if node_type(child) == "listItem"
    )


class BulletList(AdfModel):
    type: Literal["bulletList"] = "bulletList"
    items: tuple[ListItem, ...] = Field(min_length=1)

    @classmethod
    def from_adf(cls, data: dict[str, Any]) -> "BulletList | None":
        items = _list_items_from_adf(data)
        return cls(items=items) if items else None

    def to_adf(self) -> dict[str, Any]:
        return {
            "type": "bulletList",
            "content": [item.to_adf() for item in self.items],
        }


class OrderedList(AdfModel):
    type: Literal["orderedList"] = "orderedList"
    items: tuple[ListItem, ...] = Field(min_length=1)

    @classmethod
    def from_adf(cls, data: dict[str, Any]) -> "OrderedList | None":
        items = _list_items_from_adf(data)
        return cls(items=items) if items else None

    def to_adf(self) -> dict[str, Any]:
        return {
            "type": "orderedList",
            "content": [item.to_adf() for item in self.items],
        }


class Blockquote(AdfModel):
    """Quoted blocks. Parsed quotes hold paragraphs only."""

    type: Literal["blockquote"] = "blockquote"
    content: tuple["Block", ...] = ()

    @classmethod
    def from_adf(cls, data: dict[str, Any]) -> "Blockquote":
        return cls(content=blocks_from_adf(node_content(data)))

    def to_adf(self) -> dict[str, Any]:
        return {
            "type": "blockquote",
            "content": [child.to_adf() for child in self.content],
        }


class CodeBlock(AdfModel):
    type: Literal["codeBlock"] = "codeBlock"
    language: str | None = None
    text: str | None = None

    @classmethod
    def from_adf(cls, data: dict[str, Any]) -> "CodeBlock":
        language = node_attrs(data).get("language")
        text = "".join(
            child.get("text") or EMPTY_STRING
            for child in node_content(data)
            if node_type(child) == "text" and isinstance(child.get("text"), str)
        )
        return cls(
            language=language if isinstance(language, str) and language else None,
            text=text or None,
        )

    def to_adf(self) -> dict[str, Any]:
        node: dict[str, Any] = {"type": "codeBlock"}
        if self.language:
            node["attrs"] = {"language": self.language}
        if self.text:
            node["content"] = [{"type": "text", "text": self.text}]
        return node


class Rule(AdfModel):
    type: Literal["rule"] = "rule"

    @classmethod
    def from_adf(cls, data: dict[str, Any]) -> "Rule":
        return cls()

    def to_adf(self) -> dict[str, Any]:
        return {"type": "rule"}


class TableCell(AdfModel):
    type: Literal["tableCell", "tableHeader"] = "tableCell"
    content: tuple["Block", ...] = ()

    @classmethod
    def from_adf(cls, data: dict[str, Any]) -> "TableCell":
        cell_type = "tableHeader" if node_type(data) == "tableHeader" else "tableCell"
        return cls(type=cell_type, content=blocks_from_adf(node_content(data)))

    def to_adf(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "content": [child.to_adf() for child in self.content],
        }


class TableRow(AdfModel):
    type: Literal["tableRow"] = "tableRow"
    cells: tuple[TableCell, ...] = ()

    @classmethod
    def from_adf(cls, data: dict[str, Any]) -> "TableRow":
        return cls(
            cells=tuple(
                TableCell.from_adf(child)
                for child in node_content(data)
                if node_type(child) in ("tableCell", "tableHeader")
            )
        )

    def to_adf(self) -> dict[str, Any]:
        return {
            "type": "tableRow",
            "content": [cell.to_adf() for cell in self.cells],
        }


class Table(AdfModel):
    """A table. Only produced when reading documents, never parsed from Markdown."""

    type: Literal["table"] = "table"
    rows: tuple[TableRow, ...] = ()

    @classmethod
    def from_adf(cls, data: dict[str, Any]) -> "Table":
        return cls(
            rows=tuple(
                TableRow.from_adf(child)
                for child in node_content(data)
                if node_type(child) == "tableRow"
            )
        )

    def to_adf(self) -> dict[str, Any]:
        return {"type": "table", "content": [row.to_adf() for row in self.rows]}


class Media(AdfModel):
    """Placeholder for media containers; their payload is not kept."""

    type: Literal["mediaSingle", "mediaGroup"] = "mediaSingle"

    @classmethod
    def from_adf(cls, data: dict[str, Any]) -> "Media":
        return cls(type=node_type(data))

    def to_adf(self) -> dict[str, Any]:
        return {"type": self.type}


class UnknownBlock(AdfModel):
    """A block node type this package does not model (panel, expand, ...)."""

    type: str
    content: tuple["Node", ...] = ()

    @classmethod
    def from_adf(cls, data: dict[str, Any]) -> "UnknownBlock":
        children: list[Node] = []
        for child in node_content(data):
            child_type = node_type(child)
            if child_type in INLINE_TYPES:
                children.append(inline_from_adf(child))
            else:
                block = block_from_adf(child)
                if block is not None:
                    children.append(block)
        return cls(type=node_type(data) or EMPTY_STRING, content=tuple(children))

    def to_adf(self) -> dict[str, Any]:
        node: dict[str, Any] = {"type": self.type}
        if self.content:
            node["content"] = [child.to_adf() for child in self.content]
        return node


Block = (
    Heading
    | Paragraph
    | BulletList
    | OrderedList
    | Blockquote
    | CodeBlock
    | Rule
    | Table
    | Media
    | UnknownBlock
)
Node = Block | Inline

BLOCK_TYPES: dict[str, type[AdfModel]] = {
    "heading": Heading,
    "paragraph": Paragraph,
    "bulletList": BulletList,
    "orderedList": OrderedList,
    "blockquote": Blockquote,
    "codeBlock": CodeBlock,
    "rule": Rule,
    "table": Table,
    **{media_type: Media for media_type in MEDIA_NODE_TYPES},
}


def block_from_adf(data: dict[str, Any]) -> Block | None:
    """Read one block wire node. Returns None for nodes that hold nothing."""
    model = BLOCK_TYPES.get(node_type(data) or EMPTY_STRING, UnknownBlock)
    return model.from_adf(data)  # type: ignore[return-value]


def blocks_from_adf(nodes: list[dict[str, Any]]) -> tuple[Block, ...]:
    blocks = (block_from_adf(node) for node in nodes)
    return tuple(block for block in blocks if block is not None)


# =========================================================================
# Document
# =========================================================================


class Document(AdfModel):
    """Root of an ADF tree. Always holds at least one block."""

    type: Literal["doc"] = "doc"
    version: Literal[1] = ADF_VERSION
    content: tuple[Block, ...] = Field(default=(Paragraph(),), min_length=1)

    @classmethod
    def empty(cls) -> "Document":
        """A document holding a single empty paragraph."""
        return cls(content=(Paragraph(),))

    @classmethod
    def from_adf(cls, data: dict[str, Any]) -> "Document | None":
        """
        Read a document returned by the backend.

        Args:
            data: The ADF document

        Returns:
            The document, or None if `data` is not a `doc` node with a content list
        """
        if node_type(data) != ADF_DOC_TYPE or not isinstance(data.get("content"), list):
            return None
        blocks = blocks_from_adf(node_content(data))
        return cls(content=blocks) if blocks else cls.empty()

    def to_adf(self) -> dict[str, Any]:
        return {
            "type": ADF_DOC_TYPE,
            "version": ADF_VERSION,
            "content": [block.to_adf() for block in self.content],
        }


ListItem.model_rebuild()
BulletList.model_rebuild()
OrderedList.model_rebuild()
Blockquote.model_rebuild()
TableCell.model_rebuild()
TableRow.model_rebuild()
Table.model_rebuild()
UnknownBlock.model_rebuild()
Document.model_rebuild()
