"""Token stream tests for single lines.

Each test feeds one line through a fresh Tokenizer and checks the
complete token sequence up to the sentinel.
"""

from __future__ import annotations

import pytest

from linemark.lexer import Tokenizer
from linemark.tokens import Token, TokenType


def _tokens(line: str) -> list[Token]:
    return list(Tokenizer().tokenize(line))


class TestBlankLines:
    """Empty lines produce a single BLANK."""

    def test_blank_then_sentinel(self) -> None:
        tokenizer = Tokenizer()
        tokenizer.set_line("")
        assert tokenizer.next() == Token.blank()
        assert tokenizer.next() is None

    def test_whitespace_only_is_not_blank(self) -> None:
        """A line of spaces has characters, so it is a paragraph."""
        assert _tokens("   ") == [Token.paragraph(), Token.literal("   ")]


class TestHorizontalRules:
    """Only the three canonical 3-character lines are rules."""

    @pytest.mark.parametrize("line", ["---", "___", "***"])
    def test_rule(self, line: str) -> None:
        assert _tokens(line) == [Token.horizontal_rule()]

    def test_four_dashes_is_not_rule(self) -> None:
        assert _tokens("----") == [Token.paragraph(), Token.literal("----")]

    def test_trailing_space_is_not_rule(self) -> None:
        """Rules compare the whole line verbatim, without trimming."""
        assert _tokens("--- ") == [Token.paragraph(), Token.literal("--- ")]

    def test_four_asterisks_are_bold_pairs(self) -> None:
        assert _tokens("****") == [Token.paragraph(), Token.bold(), Token.bold()]


class TestHeaders:
    """Header recognition and level counting."""

    def test_level_one(self) -> None:
        assert _tokens("# Hello World") == [Token.header(1), Token.literal("Hello World")]

    @pytest.mark.parametrize("level", range(1, 7))
    def test_levels_one_to_six(self, level: int) -> None:
        line = "#" * level + " Title"
        assert _tokens(line) == [Token.header(level), Token.literal("Title")]

    def test_seven_hashes_is_paragraph(self) -> None:
        line = "####### Hello World"
        assert _tokens(line) == [Token.paragraph(), Token.literal(line)]

    def test_header_with_bold(self) -> None:
        assert _tokens("# **Hello World**") == [
            Token.header(1),
            Token.bold(),
            Token.literal("Hello World"),
            Token.bold(),
        ]

    def test_extra_whitespace_consumed(self) -> None:
        assert _tokens("##   spaced") == [Token.header(2), Token.literal("spaced")]

    def test_no_space_after_marker(self) -> None:
        """The character after the marker run only has to be a non-#."""
        assert _tokens("#ab") == [Token.header(1), Token.literal("ab")]

    def test_too_short_is_paragraph(self) -> None:
        assert _tokens("#a") == [Token.paragraph(), Token.literal("#a")]
        assert _tokens("# ") == [Token.paragraph(), Token.literal("# ")]

    def test_hashes_only_is_paragraph(self) -> None:
        assert _tokens("###") == [Token.paragraph(), Token.literal("###")]

    def test_header_of_only_whitespace(self) -> None:
        """Marker plus whitespace is a header with no text after it."""
        assert _tokens("#  ") == [Token.header(1)]

    @pytest.mark.parametrize("space", ["\u00a0", "\u3000", "\t"])
    def test_unicode_whitespace_after_marker(self, space: str) -> None:
        assert _tokens(f"#{space}Title") == [Token.header(1), Token.literal("Title")]


class TestUnorderedLists:
    """List item recognition for each marker."""

    @pytest.mark.parametrize("marker", ["-", "+", "*"])
    def test_marker(self, marker: str) -> None:
        assert _tokens(f"{marker} Hello World") == [
            Token.unordered_list(),
            Token.literal("Hello World"),
        ]

    def test_indented_item(self) -> None:
        assert _tokens("  - nested") == [Token.unordered_list(), Token.literal("nested")]

    def test_tab_after_marker(self) -> None:
        assert _tokens("-\titem") == [Token.unordered_list(), Token.literal("item")]

    @pytest.mark.parametrize("space", ["\u00a0", "\u3000"])
    def test_unicode_whitespace_after_marker(self, space: str) -> None:
        assert _tokens(f"-{space}item") == [Token.unordered_list(), Token.literal("item")]

    def test_unicode_indent_before_marker(self) -> None:
        assert _tokens(" \u00a0* item") == [Token.unordered_list(), Token.literal("item")]

    def test_marker_without_space_is_paragraph(self) -> None:
        assert _tokens("-item") == [Token.paragraph(), Token.literal("-item")]

    def test_item_with_italic(self) -> None:
        assert _tokens("* an *item*") == [
            Token.unordered_list(),
            Token.literal("an "),
            Token.italic(),
            Token.literal("item"),
            Token.italic(),
        ]

    def test_marker_and_space_only(self) -> None:
        assert _tokens("- ") == [Token.unordered_list()]


class TestParagraphs:
    """Lines with no structural prefix."""

    def test_plain_text(self) -> None:
        assert _tokens("Hello World") == [Token.paragraph(), Token.literal("Hello World")]

    def test_paragraph_does_not_advance_cursor(self) -> None:
        tokenizer = Tokenizer("text")
        assert tokenizer.next() == Token.paragraph()
        assert tokenizer.cursor == 0

    def test_single_backtick_is_text(self) -> None:
        assert _tokens("`code`") == [Token.paragraph(), Token.literal("`code`")]


class TestInlineDelimiters:
    """The doubling rule for *, _ and ~."""

    def test_bold_asterisks(self) -> None:
        assert _tokens("**b**") == [
            Token.paragraph(),
            Token.bold(),
            Token.literal("b"),
            Token.bold(),
        ]

    def test_bold_underscores(self) -> None:
        assert _tokens("a __b__") == [
            Token.paragraph(),
            Token.literal("a "),
            Token.bold(),
            Token.literal("b"),
            Token.bold(),
        ]

    def test_italic(self) -> None:
        assert _tokens("a _b_ c") == [
            Token.paragraph(),
            Token.literal("a "),
            Token.italic(),
            Token.literal("b"),
            Token.italic(),
            Token.literal(" c"),
        ]

    def test_strikethrough(self) -> None:
        assert _tokens("~~gone~~") == [
            Token.paragraph(),
            Token.strikethrough(),
            Token.literal("gone"),
            Token.strikethrough(),
        ]

    def test_single_tilde_is_italic(self) -> None:
        assert _tokens("a~b") == [
            Token.paragraph(),
            Token.literal("a"),
            Token.italic(),
            Token.literal("b"),
        ]

    def test_mixed_markers_do_not_double(self) -> None:
        """``*_`` is two italics, not a bold."""
        assert _tokens("x*_") == [
            Token.paragraph(),
            Token.literal("x"),
            Token.italic(),
            Token.italic(),
        ]

    def test_triple_asterisk(self) -> None:
        assert _tokens("x***") == [
            Token.paragraph(),
            Token.literal("x"),
            Token.bold(),
            Token.italic(),
        ]

    def test_delimiter_offsets(self) -> None:
        tokens = _tokens("a **b**")
        assert [t.offset for t in tokens] == [0, 0, 2, 4, 5]


class TestExhaustion:
    """The sentinel is sticky until the next set_line."""

    @pytest.mark.parametrize("line", ["", "---", "# Title", "plain", "**"])
    def test_repeated_next_after_sentinel(self, line: str) -> None:
        tokenizer = Tokenizer(line)
        while tokenizer.next() is not None:
            pass
        for _ in range(5):
            assert tokenizer.next() is None

    def test_set_line_rearms(self) -> None:
        tokenizer = Tokenizer("one")
        assert list(tokenizer) == [Token.paragraph(), Token.literal("one")]
        assert list(tokenizer) == []
        tokenizer.set_line("two")
        assert list(tokenizer) == [Token.paragraph(), Token.literal("two")]


class TestTokenRepr:
    """Tagged-value repr."""

    def test_repr(self) -> None:
        assert repr(Token.header(2)) == "Header(2)"
        assert repr(Token.literal("x")) == "Literal('x')"
        assert repr(Token.code_block("rust")) == "CodeBlock('rust')"
        assert repr(Token.bold()) == "Bold"
        assert repr(Token.horizontal_rule()) == "HorizontalRule"

    def test_offset_not_compared(self) -> None:
        assert Token.literal("x", offset=3) == Token.literal("x")
        assert Token(TokenType.ITALIC, offset=9) == Token.italic()
