"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from linemark.charsets import INLINE_DELIMITERS

    if char in INLINE_DELIMITERS:
        ...
"""

# ASCII whitespace fast path
ASCII_WHITESPACE: frozenset[str] = frozenset(" \t\n\r\f\v")


def is_whitespace(char: str) -> bool:
    """Check if character is whitespace, Unicode included.

    Covers NBSP, U+3000 and the other Zs characters as well as ASCII
    whitespace, matching what a regex `\\s` accepts.

    """
    return char in ASCII_WHITESPACE or char.isspace()


# Characters that start a header attempt
HEADER_MARKER = "#"

# Headers deeper than this are ordinary text
MAX_HEADER_LEVEL = 6

# Characters that send the START state to the rule / list recognizers
RULE_OR_LIST_START: frozenset[str] = frozenset(" \t-_*+")

# A horizontal rule is the whole line, compared verbatim
HORIZONTAL_RULES: frozenset[str] = frozenset({"---", "___", "***"})

# List marker characters
UNORDERED_LIST_MARKERS: frozenset[str] = frozenset("-*+")

# Inline delimiter characters
INLINE_DELIMITERS: frozenset[str] = frozenset("_*~")

# Inline delimiters without strikethrough
EMPHASIS_DELIMITERS: frozenset[str] = frozenset("_*")

# Code fence sequence (opening and closing)
FENCE = "```"
