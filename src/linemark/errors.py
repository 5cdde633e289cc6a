"""Exception classes for linemark.

The tokenizer itself accepts every string and never raises; these cover
the ancillary surfaces (configuration).
"""

from __future__ import annotations


class LinemarkError(Exception):
    """Base exception for all linemark errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(LinemarkError):
    """Invalid tokenizer configuration.

    Raised for unknown keys in strict mode and for flag values
    that are not booleans.
    """

    def __init__(self, message: str, key: str | None = None) -> None:
        """Initialize config error.

        Args:
            message: Description of the problem
            key: Offending configuration key (optional)
        """
        self.key = key
        prefix = f"'{key}': " if key else ""
        super().__init__(f"{prefix}{message}")
