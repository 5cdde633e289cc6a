"""Tokenizer operating modes.

This module defines the finite state machine modes for the tokenizer.
"""

from __future__ import annotations

from enum import Enum, auto


class TokenizerMode(Enum):
    """Tokenizer operating modes.

    The tokenizer switches between modes while scanning a line:
    - START: Nothing consumed yet; structural prefix not decided
    - PROCESS: Between inline elements, looking for a delimiter or text
    - TEXT: Inside a literal run
    - CODE_BLOCK: Inside a fenced code block (survives set_line)
    - END: Line exhausted; only the sentinel remains

    """

    START = auto()
    PROCESS = auto()
    TEXT = auto()
    CODE_BLOCK = auto()
    END = auto()
