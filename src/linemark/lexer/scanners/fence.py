"""Fenced code mode scanner mixin."""

from __future__ import annotations

from linemark.charsets import FENCE
from linemark.lexer.modes import TokenizerMode
from linemark.tokens import Token
from linemark.utils.logger import get_logger

logger = get_logger(__name__)


class FenceScannerMixin:
    """Mixin providing CODE_BLOCK mode scanning.

    Every interior line is one opaque LITERAL. The closing fence line
    yields CODE_BLOCK with an empty label and ends the block.

    """

    __slots__ = ()

    # These will be set by the Tokenizer class
    _line: str
    _line_len: int
    _cursor: int
    _mode: TokenizerMode
    _line_consumed: bool

    def _is_closing_fence(self, line: str) -> bool:
        """Check for closing fence. Implemented by FenceClassifierMixin."""
        raise NotImplementedError

    def _scan_code_block(self) -> Token | None:
        """Emit the single token for a line inside a code block.

        Returns:
            LITERAL of the whole line, CODE_BLOCK("") for the closing
            fence, or None once the line has been consumed.
        """
        if self._line_consumed:
            return None

        line = self._line
        self._cursor = self._line_len
        self._line_consumed = True

        if self._is_closing_fence(line):
            self._mode = TokenizerMode.END
            logger.debug("Closed code block")
            return Token.code_block("", offset=self._line_len - len(FENCE))

        return Token.literal(line)
