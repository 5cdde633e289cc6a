"""Fenced code block classifier mixin."""

from __future__ import annotations

from linemark.charsets import FENCE


class FenceClassifierMixin:
    """Mixin providing fenced code block classification."""

    __slots__ = ()

    def _match_fence_open(self, line: str) -> str | None:
        """Try to classify line as an opening fence.

        Args:
            line: Full line content

        Returns:
            The language label (text after the fence, stripped; may be
            empty) if the line opens a block, None otherwise.
        """
        if not line.startswith(FENCE):
            return None
        return line[len(FENCE) :].strip()

    def _is_closing_fence(self, line: str) -> bool:
        """Check if line closes the current code block.

        Any line whose last three characters are the fence closes it,
        including a line that is only the fence.
        """
        return line.endswith(FENCE)
