"""Inline scanner mixin: delimiters and literal runs."""

from __future__ import annotations

from linemark.lexer.modes import TokenizerMode
from linemark.tokens import Token


class InlineScannerMixin:
    """Mixin providing PROCESS / TEXT mode scanning.

    Delimiters follow the doubling rule: ``~~`` is strikethrough, ``**``
    and ``__`` are bold, any undoubled delimiter is italic. Open and close
    share one tag; nesting is not tracked.

    """

    __slots__ = ()

    # These will be set by the Tokenizer class
    _line: str
    _line_len: int
    _cursor: int
    _mode: TokenizerMode
    _delimiters: frozenset[str]

    def _scan_inline(self) -> Token | None:
        """Emit the next delimiter or literal run, or the sentinel at end of line."""
        pos = self._cursor
        if pos >= self._line_len:
            self._mode = TokenizerMode.END
            return None

        char = self._line[pos]
        if char in self._delimiters:
            return self._scan_delimiter(char, pos)

        self._mode = TokenizerMode.TEXT
        return self._scan_text(pos)

    def _scan_delimiter(self, char: str, pos: int) -> Token:
        """Apply the doubling rule at a delimiter position."""
        following = self._line[pos + 1] if pos + 1 < self._line_len else ""
        self._mode = TokenizerMode.PROCESS

        if following == char:
            self._cursor = pos + 2
            if char == "~":
                return Token.strikethrough(offset=pos)
            return Token.bold(offset=pos)

        self._cursor = pos + 1
        return Token.italic(offset=pos)

    def _scan_text(self, start: int) -> Token:
        """Consume a literal run up to the next delimiter or end of line."""
        line = self._line
        line_len = self._line_len
        delimiters = self._delimiters

        pos = start
        while pos < line_len and line[pos] not in delimiters:
            pos += 1

        self._cursor = pos
        self._mode = TokenizerMode.PROCESS if pos < line_len else TokenizerMode.END
        return Token.literal(line[start:pos], offset=start)
