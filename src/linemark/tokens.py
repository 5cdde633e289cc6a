"""Token and TokenType definitions for the linemark tokenizer.

The tokenizer produces, per line, a sequence of Token objects terminated by
``None`` (the sentinel). Each Token is a tagged value: a type plus the
payload that type carries (header level, code block label, literal text).

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class TokenType(Enum):
    """Token types produced by the tokenizer.

    Organized by category:
    - Line structure (BLANK, HORIZONTAL_RULE, UNORDERED_LIST, HEADER, PARAGRAPH)
    - Paired inline delimiters (BOLD, ITALIC, STRIKETHROUGH)
    - Fenced code (CODE_BLOCK)
    - Text (LITERAL)

    """

    # Line structure
    BLANK = auto()
    HORIZONTAL_RULE = auto()  # ---, ___, ***
    UNORDERED_LIST = auto()  # -, *, +
    HEADER = auto()  # # .. ######
    PARAGRAPH = auto()

    # Paired delimiters (same tag opens and closes)
    BOLD = auto()  # ** or __
    ITALIC = auto()  # * or _ (or a lone ~)
    STRIKETHROUGH = auto()  # ~~

    # Fenced code: opens with a label, closes with ""
    CODE_BLOCK = auto()

    LITERAL = auto()


# Display names used by Token.__repr__
_DISPLAY_NAMES: dict[TokenType, str] = {
    TokenType.BLANK: "Blank",
    TokenType.HORIZONTAL_RULE: "HorizontalRule",
    TokenType.UNORDERED_LIST: "UnorderedList",
    TokenType.HEADER: "Header",
    TokenType.PARAGRAPH: "Paragraph",
    TokenType.BOLD: "Bold",
    TokenType.ITALIC: "Italic",
    TokenType.STRIKETHROUGH: "Strikethrough",
    TokenType.CODE_BLOCK: "CodeBlock",
    TokenType.LITERAL: "Literal",
}


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the tokenizer.

    Attributes:
        type: The token type (from TokenType enum)
        value: Literal text for LITERAL, label for CODE_BLOCK, "" otherwise
        level: Header level (1-6) for HEADER, 0 otherwise
        offset: Position in the line where the token's source text starts.
            Not part of equality, so tokens compare as plain tagged values.

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    type: TokenType
    value: str = ""
    level: int = 0
    offset: int = field(default=0, compare=False, hash=False)

    @classmethod
    def blank(cls) -> Token:
        return cls(TokenType.BLANK)

    @classmethod
    def horizontal_rule(cls) -> Token:
        return cls(TokenType.HORIZONTAL_RULE)

    @classmethod
    def unordered_list(cls) -> Token:
        return cls(TokenType.UNORDERED_LIST)

    @classmethod
    def header(cls, level: int, offset: int = 0) -> Token:
        return cls(TokenType.HEADER, level=level, offset=offset)

    @classmethod
    def paragraph(cls) -> Token:
        return cls(TokenType.PARAGRAPH)

    @classmethod
    def bold(cls, offset: int = 0) -> Token:
        return cls(TokenType.BOLD, offset=offset)

    @classmethod
    def italic(cls, offset: int = 0) -> Token:
        return cls(TokenType.ITALIC, offset=offset)

    @classmethod
    def strikethrough(cls, offset: int = 0) -> Token:
        return cls(TokenType.STRIKETHROUGH, offset=offset)

    @classmethod
    def code_block(cls, label: str = "", offset: int = 0) -> Token:
        return cls(TokenType.CODE_BLOCK, value=label, offset=offset)

    @classmethod
    def literal(cls, text: str, offset: int = 0) -> Token:
        return cls(TokenType.LITERAL, value=text, offset=offset)

    @property
    def is_delimiter(self) -> bool:
        """True for the paired inline delimiter tokens."""
        return self.type in (TokenType.BOLD, TokenType.ITALIC, TokenType.STRIKETHROUGH)

    @property
    def is_structural(self) -> bool:
        """True for tokens that can only appear first on their line."""
        return self.type in (
            TokenType.BLANK,
            TokenType.HORIZONTAL_RULE,
            TokenType.UNORDERED_LIST,
            TokenType.HEADER,
            TokenType.PARAGRAPH,
        )

    def __repr__(self) -> str:
        """Tagged-value repr: ``Header(1)``, ``Literal('x')``, ``Bold``."""
        name = _DISPLAY_NAMES[self.type]
        if self.type is TokenType.HEADER:
            return f"{name}({self.level})"
        if self.type in (TokenType.LITERAL, TokenType.CODE_BLOCK):
            return f"{name}({self.value!r})"
        return name
