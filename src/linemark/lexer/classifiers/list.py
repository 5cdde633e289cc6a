"""Unordered list marker classifier mixin."""

from __future__ import annotations

from linemark.charsets import UNORDERED_LIST_MARKERS, is_whitespace


class ListClassifierMixin:
    """Mixin providing unordered list marker classification."""

    __slots__ = ()

    def _match_list_marker(self, line: str) -> int | None:
        """Try to classify line as an unordered list item.

        Matches optional leading whitespace, one of ``-``, ``*``, ``+``,
        then one or more whitespace characters.

        Args:
            line: Full line content

        Returns:
            Position after the matched prefix, or None if no match.
        """
        line_len = len(line)
        pos = 0
        while pos < line_len and is_whitespace(line[pos]):
            pos += 1

        if pos >= line_len or line[pos] not in UNORDERED_LIST_MARKERS:
            return None
        pos += 1

        content_start = pos
        while pos < line_len and is_whitespace(line[pos]):
            pos += 1
        if pos == content_start:
            return None
        return pos
