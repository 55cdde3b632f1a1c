"""Tests for the Markdown block builder."""

import pytest

from mcp_jira.formatting.blocks import BlockBuilder, build_blocks
from mcp_jira.formatting.options import ConversionOptions
from mcp_jira.models import (
    STRONG,
    Blockquote,
    BulletList,
    CodeBlock,
    Heading,
    ListItem,
    OrderedList,
    Paragraph,
    Rule,
    Text,
)


def blocks(markdown: str, options: ConversionOptions | None = None) -> list:
    return build_blocks(markdown.split("\n"), options)


def item(text: str) -> ListItem:
    return ListItem(content=(Paragraph(content=(Text(text=text),)),))


class TestHeadings:
    """Tests for heading classification."""

    @pytest.mark.parametrize(
        "line, level, text",
        [
            pytest.param("# Title", 1, "Title", id="h1"),
            pytest.param("### Three", 3, "Three", id="h3"),
            pytest.param("###### Six", 6, "Six", id="h6"),
            pytest.param("h2. Legacy", 2, "Legacy", id="legacy_h2"),
            pytest.param("h6. Deep", 6, "Deep", id="legacy_h6"),
            pytest.param("   # Indented", 1, "Indented", id="leading_whitespace"),
        ],
    )
    def test_heading_levels(self, line, level, text):
        """Test both heading forms and their levels."""
        assert blocks(line) == [Heading(level=level, content=(Text(text=text),))]

    @pytest.mark.parametrize(
        "line",
        [
            pytest.param("####### Seven", id="too_many_hashes"),
            pytest.param("#NoSpace", id="no_space"),
            pytest.param("h7. Seven", id="legacy_out_of_range"),
            pytest.param("h1.NoSpace", id="legacy_no_space"),
        ],
    )
    def test_not_headings(self, line):
        """Test that lines that look almost like headings become paragraphs."""
        assert blocks(line) == [Paragraph(content=(Text(text=line),))]

    def test_heading_content_is_tokenized(self):
        """Test that inline markup inside headings is parsed."""
        assert blocks("## **Bold** title") == [
            Heading(
                level=2,
                content=(Text(text="Bold", marks=frozenset({STRONG})), Text(text=" title")),
            )
        ]

    def test_legacy_heading_wins_over_markdown_heading(self):
        """Test classification priority when both heading forms could apply."""
        assert blocks("h1. # inner") == [
            Heading(level=1, content=(Text(text="# inner"),))
        ]


class TestLists:
    """Tests for bullet and ordered list merging."""

    def test_bullets_merge(self):
        """Test that consecutive bullets form one list."""
        assert blocks("- a\n- b") == [BulletList(items=(item("a"), item("b")))]

    def test_both_bullet_markers_merge(self):
        """Test that '*' and '-' bullets belong to the same list."""
        assert blocks("* a\n- b") == [BulletList(items=(item("a"), item("b")))]

    def test_blank_line_does_not_split_list(self):
        """Test that blank lines are skipped without closing a list."""
        assert blocks("- a\n\n\n- b") == [BulletList(items=(item("a"), item("b")))]

    def test_kinds_never_merge(self):
        """Test that a bullet followed by an ordered item yields two lists."""
        assert blocks("- a\n1. b") == [
            BulletList(items=(item("a"),)),
            OrderedList(items=(item("b"),)),
        ]

    def test_ordered_numbers_are_discarded(self):
        """Test that source numbering does not reach the model."""
        assert blocks("3. a\n7. b") == [OrderedList(items=(item("a"), item("b")))]

    def test_paragraph_splits_list(self):
        """Test that a paragraph between bullets produces two lists."""
        assert blocks("- a\ntext\n- b") == [
            BulletList(items=(item("a"),)),
            Paragraph(content=(Text(text="text"),)),
            BulletList(items=(item("b"),)),
        ]

    def test_bullet_prefix_beats_heading_text(self):
        """Test that only the first matching rule applies to a line."""
        assert blocks("- # not a heading") == [
            BulletList(items=(item("# not a heading"),))
        ]

    def test_bare_marker_is_paragraph(self):
        """Test that a marker with nothing after it is plain text."""
        assert blocks("-\n1.") == [
            Paragraph(content=(Text(text="-"),)),
            Paragraph(content=(Text(text="1."),)),
        ]


class TestBlockquotes:
    """Tests for quote merging."""

    def test_quote_lines_merge(self):
        """Test that consecutive quote lines share one blockquote."""
        assert blocks("> a\n> b") == [
            Blockquote(
                content=(
                    Paragraph(content=(Text(text="a"),)),
                    Paragraph(content=(Text(text="b"),)),
                )
            )
        ]

    def test_quote_interrupted(self):
        """Test that a paragraph between quote lines splits the quote."""
        result = blocks("> a\ntext\n> b")
        assert [type(block) for block in result] == [Blockquote, Paragraph, Blockquote]


class TestRules:
    """Tests for horizontal rules."""

    @pytest.mark.parametrize(
        "line, expected",
        [
            pytest.param("---", [Rule()], id="three_dashes"),
            pytest.param("----", [Rule()], id="four_dashes"),
            pytest.param("-----", [Paragraph(content=(Text(text="-----"),))], id="five_dashes"),
        ],
    )
    def test_rule_lines(self, line, expected):
        """Test that only three or four dashes form a rule."""
        assert blocks(line) == expected

    def test_rules_do_not_merge(self):
        """Test that every rule line emits its own block."""
        assert blocks("---\n---") == [Rule(), Rule()]


class TestCodeFences:
    """Tests for fenced code capture."""

    def test_fence_with_language(self):
        """Test a closed fence with a language tag."""
        assert blocks("```js\nx=1\n```") == [CodeBlock(language="js", text="x=1")]

    def test_unterminated_fence(self):
        """Test that an unterminated fence consumes the rest of the input."""
        assert blocks("```\nunterminated") == [CodeBlock(text="unterminated")]

    def test_unterminated_fence_swallows_markup(self):
        """Test that lines after an open fence are never classified."""
        assert blocks("```\n# not heading\n- not list") == [
            CodeBlock(text="# not heading\n- not list")
        ]

    def test_empty_fence(self):
        """Test that an empty body leaves the code block without text."""
        assert blocks("```\n```") == [CodeBlock()]

    def test_body_is_verbatim(self):
        """Test that indentation and markup inside the fence are kept."""
        source = "```python\ndef f():\n    return **1**\n```"
        assert blocks(source) == [
            CodeBlock(language="python", text="def f():\n    return **1**")
        ]

    def test_closing_fence_may_be_indented(self):
        """Test that the closing fence is matched after trimming."""
        assert blocks("```\nx\n   ```   \nafter") == [
            CodeBlock(text="x"),
            Paragraph(content=(Text(text="after"),)),
        ]

    def test_fence_closes_open_list(self):
        """Test that a fence between bullets splits the list."""
        result = blocks("- a\n```\ncode\n```\n- b")
        assert [type(block) for block in result] == [BulletList, CodeBlock, BulletList]

    def test_language_allow_list(self):
        """Test that unlisted fence languages are dropped."""
        options = ConversionOptions.with_languages(["python", "java"])
        assert blocks("```js\nx\n```", options) == [CodeBlock(text="x")]
        assert blocks("```Python\nx\n```", options) == [
            CodeBlock(language="Python", text="x")
        ]


class TestBlockBuilder:
    """Tests for the builder object itself."""

    def test_blank_input_builds_nothing(self):
        """Test that whitespace-only lines emit no blocks."""
        assert blocks("   \n\t\n") == []

    def test_add_line_then_build(self):
        """Test feeding trimmed lines one at a time."""
        builder = BlockBuilder()
        builder.add_line("- a")
        builder.add_line("")
        builder.add_line("- b")
        builder.add_line("plain")
        assert builder.build() == [
            BulletList(items=(item("a"), item("b"))),
            Paragraph(content=(Text(text="plain"),)),
        ]

    def test_builders_are_independent(self):
        """Test that separate builders share no state."""
        first = BlockBuilder().consume(["- a"]).build()
        second = BlockBuilder().consume(["- b"]).build()
        assert first == [BulletList(items=(item("a"),))]
        assert second == [BulletList(items=(item("b"),))]
