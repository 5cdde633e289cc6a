"""Start-of-line scanner mixin."""

from __future__ import annotations

from linemark.charsets import HEADER_MARKER, RULE_OR_LIST_START
from linemark.lexer.modes import TokenizerMode
from linemark.tokens import Token
from linemark.utils.logger import get_logger

logger = get_logger(__name__)


class LineScannerMixin:
    """Mixin providing START mode scanning.

    Decides the structural prefix of a line. Recognizers are consulted
    in priority order (header, horizontal rule, unordered list, fence);
    when none matches the line is a paragraph and the cursor stays put.

    """

    __slots__ = ()

    # These will be set by the Tokenizer class
    _line: str
    _line_len: int
    _cursor: int
    _mode: TokenizerMode
    _line_consumed: bool

    def _match_header(self, line: str) -> tuple[int, int] | None:
        """Match header prefix. Implemented by HeadingClassifierMixin."""
        raise NotImplementedError

    def _is_horizontal_rule(self, line: str) -> bool:
        """Match horizontal rule. Implemented by ThematicClassifierMixin."""
        raise NotImplementedError

    def _match_list_marker(self, line: str) -> int | None:
        """Match list prefix. Implemented by ListClassifierMixin."""
        raise NotImplementedError

    def _match_fence_open(self, line: str) -> str | None:
        """Match opening fence. Implemented by FenceClassifierMixin."""
        raise NotImplementedError

    def _scan_start(self) -> Token:
        """Classify the current line and emit its first token.

        Returns:
            BLANK, HEADER, HORIZONTAL_RULE, UNORDERED_LIST, CODE_BLOCK
            or PARAGRAPH. Never the sentinel.
        """
        line = self._line
        if not line:
            self._mode = TokenizerMode.END
            return Token.blank()

        char = line[0]

        if char == HEADER_MARKER:
            self._mode = TokenizerMode.PROCESS
            match = self._match_header(line)
            if match is None:
                return Token.paragraph()
            level, content_start = match
            self._cursor = content_start
            return Token.header(level)

        if char in RULE_OR_LIST_START:
            if self._is_horizontal_rule(line):
                self._cursor = self._line_len
                self._mode = TokenizerMode.END
                return Token.horizontal_rule()
            self._mode = TokenizerMode.PROCESS
            content_start = self._match_list_marker(line)
            if content_start is None:
                return Token.paragraph()
            self._cursor = content_start
            return Token.unordered_list()

        label = self._match_fence_open(line)
        if label is not None:
            self._cursor = self._line_len
            self._line_consumed = True
            self._mode = TokenizerMode.CODE_BLOCK
            logger.debug("Opened code block (label=%r)", label)
            return Token.code_block(label)

        self._mode = TokenizerMode.PROCESS
        return Token.paragraph()
