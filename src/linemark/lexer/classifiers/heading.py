"""Header classifier mixin."""

from __future__ import annotations

from linemark.charsets import HEADER_MARKER, MAX_HEADER_LEVEL, is_whitespace


class HeadingClassifierMixin:
    """Mixin providing header classification."""

    __slots__ = ()

    def _match_header(self, line: str) -> tuple[int, int] | None:
        """Try to classify line as a header.

        A header is 1-6 ``#`` characters, then a non-``#`` character,
        then optional whitespace, then at least one more character.
        A run of 7 or more ``#`` is never a header.

        Args:
            line: Full line content

        Returns:
            (level, content_start) if the line is a header, None otherwise.
            content_start is the position after the marker run and the
            whitespace that follows it.
        """
        line_len = len(line)
        level = 0
        while level < line_len and line[level] == HEADER_MARKER:
            level += 1

        if level == 0 or level > MAX_HEADER_LEVEL:
            return None

        # One non-# character plus at least one more
        if line_len < level + 2:
            return None

        pos = level
        while pos < line_len and is_whitespace(line[pos]):
            pos += 1
        return level, pos
