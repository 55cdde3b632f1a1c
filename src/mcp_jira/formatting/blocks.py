"""Block builder: classifies Markdown lines into ADF blocks.

Lines are read one at a time. List items and quote lines are merged into
the block emitted just before them when it is of the same kind, so a blank
line between two bullets does not split the list.
"""

import logging
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from ..models.adf import (
    Block,
    Blockquote,
    BulletList,
    CodeBlock,
    Heading,
    ListItem,
    OrderedList,
    Paragraph,
    Rule,
)
from .inline import tokenize_inline
from .options import DEFAULT_OPTIONS, ConversionOptions

logger = logging.getLogger("mcp-jira.formatting.blocks")

LEGACY_HEADING_RE = re.compile(r"^h([1-6])\.\s+(.+)")
HEADING_RE = re.compile(r"^(#{1,6})\s+(.+)")
ORDERED_ITEM_RE = re.compile(r"^\d+\.\s+")
BULLET_PREFIXES = ("* ", "- ")
QUOTE_PREFIX = "> "
RULE_LINES = ("---", "----")
FENCE = "```"


@dataclass
class _Run:
    """A list or quote still open for merging."""

    kind: type[BulletList] | type[OrderedList] | type[Blockquote]
    children: list[ListItem | Paragraph] = field(default_factory=list)

    def close(self) -> Block:
        if self.kind is Blockquote:
            return Blockquote(content=tuple(self.children))
        return self.kind(items=tuple(self.children))


class BlockBuilder:
    """
    Accumulates blocks line by line.

    The builder is single use: feed it lines with `add_line` (or
    `consume`), then call `build` once to get immutable blocks.
    """

    def __init__(self, options: ConversionOptions | None = None) -> None:
        self.options = options or DEFAULT_OPTIONS
        self._emitted: list[Block | _Run] = []

    def consume(self, lines: Iterable[str]) -> "BlockBuilder":
        """Classify every line, capturing fenced code as it goes."""
        line_iter = iter(lines)
        for raw_line in line_iter:
            line = raw_line.strip()
            if line.startswith(FENCE):
                self._emit(self._capture_fence(line, line_iter))
            else:
                self.add_line(line)
        return self

    def add_line(self, line: str) -> None:
        """Classify one trimmed, non-fence line."""
        if not line:
            return

        legacy_heading = LEGACY_HEADING_RE.match(line)
        heading = HEADING_RE.match(line)
        if legacy_heading:
            self._emit(
                Heading(
                    level=int(legacy_heading.group(1)),
                    content=tokenize_inline(legacy_heading.group(2)),
                )
            )
        elif heading:
            self._emit(
                Heading(
                    level=len(heading.group(1)),
                    content=tokenize_inline(heading.group(2)),
                )
            )
        elif line.startswith(BULLET_PREFIXES):
            self._append_to_run(BulletList, _list_item(line[2:]))
        elif ORDERED_ITEM_RE.match(line):
            self._append_to_run(OrderedList, _list_item(ORDERED_ITEM_RE.sub("", line, count=1)))
        elif line.startswith(QUOTE_PREFIX):
            self._append_to_run(
                Blockquote, Paragraph(content=tokenize_inline(line[len(QUOTE_PREFIX) :]))
            )
        elif line in RULE_LINES:
            self._emit(Rule())
        else:
            self._emit(Paragraph(content=tokenize_inline(line)))

    def build(self) -> list[Block]:
        """Close any open run and return the finished blocks."""
        return [
            item.close() if isinstance(item, _Run) else item for item in self._emitted
        ]

    def _emit(self, block: Block) -> None:
        self._emitted.append(block)

    def _append_to_run(
        self,
        kind: type[BulletList] | type[OrderedList] | type[Blockquote],
        child: ListItem | Paragraph,
    ) -> None:
        last = self._emitted[-1] if self._emitted else None
        if isinstance(last, _Run) and last.kind is kind:
            last.children.append(child)
        else:
            self._emitted.append(_Run(kind=kind, children=[child]))

    def _capture_fence(self, opening: str, line_iter: Iterator[str]) -> CodeBlock:
        """Collect raw lines up to a closing fence or the end of input."""
        language = opening[len(FENCE) :].strip() or None
        if language and not self.options.accepts_language(language):
            logger.debug(f"Dropping code block language not in allow-list: {language}")
            language = None

        code_lines: list[str] = []
        closed = False
        for raw_line in line_iter:
            if raw_line.strip() == FENCE:
                closed = True
                break
            code_lines.append(raw_line)
        if not closed:
            logger.debug("Unterminated code fence, captured to end of input")

        code_text = "\n".join(code_lines)
        return CodeBlock(language=language, text=code_text or None)


def _list_item(text: str) -> ListItem:
    return ListItem(content=(Paragraph(content=tokenize_inline(text)),))


def build_blocks(
    lines: Iterable[str], options: ConversionOptions | None = None
) -> list[Block]:
    """
    Convert Markdown lines into ADF blocks.

    Args:
        lines: Source lines, without trailing newlines
        options: Conversion options

    Returns:
        The blocks in source order; empty when every line is blank
    """
    return BlockBuilder(options).consume(lines).build()
