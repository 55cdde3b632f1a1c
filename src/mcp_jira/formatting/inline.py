"""Inline tokenizer and renderer.

The tokenizer scans one line for emphasis, link and code spans and returns
text runs in source order. The renderer is its inverse: it re-applies the
delimiters of each run's marks in a fixed order.
"""

import logging
import re
from collections.abc import Iterable

from ..models.adf import (
    CODE,
    EMPHASIS,
    STRIKE,
    STRONG,
    Emoji,
    HardBreak,
    Inline,
    InlineCard,
    Mark,
    Mention,
    Text,
    UnknownInline,
    link,
    ordered_marks,
)
from ..models.constants import EMPTY_STRING, MARK_CODE, MARK_LINK

logger = logging.getLogger("mcp-jira.formatting.inline")

# First match wins, so the alternation order resolves ambiguity:
# "**" is tried before "*", and "[text](url)" before "[text|url]".
INLINE_SPAN_RE = re.compile(
    r"\*\*(?P<strong>[^*]+)\*\*"
    r"|~~(?P<strike>[^~]+)~~"
    r"|\*(?P<em>[^*]+)\*"
    r"|\[(?P<link_text>[^\]]+)\]\((?P<link_href>[^)]+)\)"
    r"|\[(?P<pipe_text>[^\]]+)\|(?P<pipe_href>[^\]]+)\]"
    r"|`(?P<code>[^`]+)`"
)


def tokenize_inline(text: str | None) -> tuple[Inline, ...]:
    """
    Split a line of Markdown into inline nodes.

    Text that does not form a complete span is kept as an unmarked run, so
    malformed markup never aborts conversion.

    Args:
        text: A single line of text

    Returns:
        Inline nodes in source order; empty for empty input
    """
    if not text:
        return ()

    runs: list[Inline] = []
    last_index = 0
    for match in INLINE_SPAN_RE.finditer(text):
        if match.start() > last_index:
            runs.append(Text(text=text[last_index : match.start()]))
        runs.extend(_span_runs(match))
        last_index = match.end()

    if last_index < len(text):
        runs.append(Text(text=text[last_index:]))

    return tuple(runs)


def _span_runs(match: re.Match[str]) -> tuple[Inline, ...]:
    groups = match.groupdict()
    if groups["strong"] is not None:
        return _marked(groups["strong"], STRONG)
    if groups["strike"] is not None:
        return _marked(groups["strike"], STRIKE)
    if groups["em"] is not None:
        return _marked(groups["em"], EMPHASIS)
    if groups["link_text"] is not None:
        return _marked(groups["link_text"], link(groups["link_href"]))
    if groups["pipe_text"] is not None:
        return _marked(groups["pipe_text"], link(groups["pipe_href"]))
    # Code spans are literal
    return (Text(text=groups["code"], marks=frozenset({CODE})),)


def _marked(body: str, mark: Mark) -> tuple[Inline, ...]:
    """Tokenize a span body and add the span's mark to every run inside it.

    Code runs only ever combine with a link, so an outer strong, em or
    strike span leaves them untouched.
    """
    return tuple(
        run.with_mark(mark) if _accepts_mark(run, mark) else run
        for run in tokenize_inline(body)
    )


def _accepts_mark(run: Inline, mark: Mark) -> bool:
    if not isinstance(run, Text):
        return False
    return mark.type == MARK_LINK or not run.has_mark(MARK_CODE)


def apply_marks(text: str, marks: frozenset[Mark]) -> str:
    """Wrap `text` in the delimiters of `marks`, innermost first.

    Order is strong, em, strike, code, link, so a strong link renders as
    ``[**text**](href)``.
    """
    for mark in ordered_marks(marks):
        if mark.type == "strong":
            text = f"**{text}**"
        elif mark.type == "em":
            text = f"*{text}*"
        elif mark.type == "strike":
            text = f"~~{text}~~"
        elif mark.type == "code":
            text = f"`{text}`"
        elif mark.type == "link":
            text = f"[{text}]({mark.href or EMPTY_STRING})"
    return text


def render_inline_node(node: Inline) -> str:
    """Render a single inline node. Unrecognized nodes render as nested text or nothing."""
    match node:
        case Text(text=text, marks=marks):
            return apply_marks(text, marks)
        case HardBreak():
            return "\n"
        case Mention(id=mention_id, label=label):
            # Jira labels already carry the "@"
            name = (label or EMPTY_STRING).removeprefix("@") or mention_id
            return f"@{name}"
        case InlineCard(url=url):
            return url
        case Emoji(short_name=short_name):
            return short_name
        case UnknownInline(content=content):
            return render_inline(content)
        case _:
            logger.debug(f"Skipping unrenderable inline node: {type(node).__name__}")
            return EMPTY_STRING


def render_inline(nodes: Iterable[Inline] | None) -> str:
    """Render a sequence of inline nodes back to Markdown."""
    if not nodes:
        return EMPTY_STRING
    return "".join(render_inline_node(node) for node in nodes)
