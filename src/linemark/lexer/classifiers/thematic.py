"""Horizontal rule classifier mixin."""

from __future__ import annotations

from linemark.charsets import HORIZONTAL_RULES


class ThematicClassifierMixin:
    """Mixin providing horizontal rule classification."""

    __slots__ = ()

    def _is_horizontal_rule(self, line: str) -> bool:
        """Check if line is a horizontal rule.

        The whole line must equal ``---``, ``___`` or ``***``. Longer runs and
        lines with surrounding whitespace are not rules.
        """
        return line in HORIZONTAL_RULES
