"""
linemark: incremental line-at-a-time Markdown tokenizer

Classifies lines into structural tokens (headers, rules, list items,
paragraphs, fenced code) and inline delimiter tokens (bold, italic,
strikethrough) with literal text runs between them. Fenced code blocks
persist across lines. Zero runtime dependencies.

Quick Start:
    >>> from linemark import Tokenizer
    >>> tokenizer = Tokenizer()
    >>> list(tokenizer.tokenize("# **Hello World**"))
    [Header(1), Bold, Literal('Hello World'), Bold]

    >>> # Or tokenize a whole source at once
    >>> from linemark import tokenize
    >>> tokenize("```rust\\nfn main() {}\\n```")
    [[CodeBlock('rust')], [Literal('fn main() {}')], [CodeBlock('')]]

Installation:
    pip install linemark
"""

from collections.abc import Iterable

from linemark.config import (
    TokenizerConfig,
    get_tokenizer_config,
    reset_tokenizer_config,
    set_tokenizer_config,
    tokenizer_config_context,
)
from linemark.errors import ConfigError, LinemarkError
from linemark.lexer import Tokenizer, TokenizerMode
from linemark.serialization import from_dict, from_json, to_dict, to_json
from linemark.tokens import Token, TokenType

__version__ = "0.1.0"


def _split_lines(text: str) -> list[str]:
    """Split on "\\n" only, dropping a "\\r" before it and a final empty segment."""
    lines = [line.removesuffix("\r") for line in text.split("\n")]
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def tokenize(
    source: str | Iterable[str],
    *,
    config: TokenizerConfig | None = None,
) -> list[list[Token]]:
    """Tokenize a sequence of lines with one shared Tokenizer.

    Args:
        source: Text (split on "\\n", a trailing "\\r" stripped from each
            line) or an iterable of already-split lines without terminators.
        config: Tokenizer configuration (defaults to the active context config)

    Returns:
        One token list per line, in input order.

    Example:
        >>> tokenize(["- one", "", "---"])
        [[UnorderedList, Literal('one')], [Blank], [HorizontalRule]]
    """
    lines = _split_lines(source) if isinstance(source, str) else source
    tokenizer = Tokenizer(config=config)
    return [list(tokenizer.tokenize(line)) for line in lines]


__all__ = [
    # Tokenizer
    "Tokenizer",
    "TokenizerMode",
    "tokenize",
    # Tokens
    "Token",
    "TokenType",
    # Configuration
    "TokenizerConfig",
    "get_tokenizer_config",
    "reset_tokenizer_config",
    "set_tokenizer_config",
    "tokenizer_config_context",
    # Errors
    "ConfigError",
    "LinemarkError",
    # Serialization
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
    "__version__",
]
