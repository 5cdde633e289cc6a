"""Incremental line tokenizer with O(n) per-line scanning.

The caller feeds one line at a time with set_line() and pulls tokens with
next() until it returns None. The only state that outlives a line is code
block mode, so a fenced block stays coherent across set_line() calls.

No regex. Recognizers are anchored hand-written scanners.

Thread Safety:
Tokenizer instances are not shareable across threads. Create one per
document. All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from linemark.charsets import EMPHASIS_DELIMITERS, INLINE_DELIMITERS
from linemark.config import TokenizerConfig, get_tokenizer_config
from linemark.lexer.classifiers import (
    FenceClassifierMixin,
    HeadingClassifierMixin,
    ListClassifierMixin,
    ThematicClassifierMixin,
)
from linemark.lexer.modes import TokenizerMode
from linemark.lexer.scanners import (
    FenceScannerMixin,
    InlineScannerMixin,
    LineScannerMixin,
)
from linemark.tokens import Token


class Tokenizer(
    # Classifiers (pure logic, no cursor mutation)
    HeadingClassifierMixin,
    ThematicClassifierMixin,
    ListClassifierMixin,
    FenceClassifierMixin,
    # Scanners (mode-specific scanning logic)
    LineScannerMixin,
    InlineScannerMixin,
    FenceScannerMixin,
):
    """Stateful tokenizer bound to the current line.

    Usage:
            >>> tokenizer = Tokenizer()
            >>> tokenizer.set_line("# **Hello**")
            >>> while (token := tokenizer.next()) is not None:
            ...     print(token)
        Header(1)
        Bold
        Literal('Hello')
        Bold

    Lines inside a fenced code block come back as a single Literal each:

            >>> for line in ["```rust", "fn main() {", "```"]:
            ...     print(list(tokenizer.tokenize(line)))
        [CodeBlock('rust')]
        [Literal('fn main() {')]
        [CodeBlock('')]

    """

    __slots__ = (
        "_line",
        "_line_len",  # Cached len(line)
        "_cursor",
        "_mode",
        "_line_consumed",  # Code block line already emitted
        "_config",
        "_delimiters",
    )

    def __init__(self, line: str = "", *, config: TokenizerConfig | None = None) -> None:
        """Initialize tokenizer, optionally with a first line.

        Args:
            line: Initial current line
            config: Tokenizer configuration (defaults to the active context config)
        """
        self._config = config if config is not None else get_tokenizer_config()
        self._delimiters = (
            INLINE_DELIMITERS if self._config.strikethrough_enabled else EMPHASIS_DELIMITERS
        )
        self._mode = TokenizerMode.START
        self.set_line(line)

    @property
    def line(self) -> str:
        return self._line

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def mode(self) -> TokenizerMode:
        return self._mode

    @property
    def in_code_block(self) -> bool:
        """True while a fenced code block is open."""
        return self._mode is TokenizerMode.CODE_BLOCK

    @property
    def config(self) -> TokenizerConfig:
        return self._config

    def set_line(self, text: str) -> None:
        """Replace the current line and rewind the cursor.

        Mode resets to START unless a code block is open (and the config
        keeps code blocks across lines).

        Args:
            text: Line content without its line terminator
        """
        self._line = text
        self._line_len = len(text)
        self._cursor = 0
        self._line_consumed = False
        if self._mode is not TokenizerMode.CODE_BLOCK or not self._config.persist_code_blocks:
            self._mode = TokenizerMode.START

    def next(self) -> Token | None:
        """Return the next token of the current line.

        Returns:
            The next Token, or None once the line is exhausted. Further
            calls keep returning None until set_line() is called.
        """
        mode = self._mode
        if mode is TokenizerMode.START:
            return self._scan_start()
        if mode is TokenizerMode.CODE_BLOCK:
            return self._scan_code_block()
        if mode is TokenizerMode.END:
            return None
        return self._scan_inline()

    def tokenize(self, text: str) -> Iterator[Token]:
        """Set the current line and yield its tokens.

        Yields:
            Token objects up to (not including) the sentinel

        Complexity: O(n) where n = len(text)
        """
        self.set_line(text)
        while (token := self.next()) is not None:
            yield token

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.next()
        if token is None:
            raise StopIteration
        return token

    def __repr__(self) -> str:
        return f"Tokenizer(mode={self._mode.name}, cursor={self._cursor}, line={self._line!r})"
