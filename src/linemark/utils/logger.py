"""Logger lookup for linemark modules.

Every module logs under the ``linemark`` namespace so callers can enable
tokenizer debug output with a single ``logging.getLogger("linemark")``.
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return the stdlib logger for ``name`` inside the linemark namespace.

    Module names already under ``linemark`` are used as-is; anything else
    is nested beneath it (``"scanner"`` becomes ``"linemark.scanner"``).
    """
    if name != "linemark" and not name.startswith("linemark."):
        name = f"linemark.{name}"
    return logging.getLogger(name)
