"""Incremental line tokenizer for linemark.

Architecture:
lexer/
├── __init__.py          # Re-exports Tokenizer, TokenizerMode
├── core.py              # Tokenizer class (mixin composition + driver)
├── modes.py             # TokenizerMode enum
├── classifiers/         # Line-start recognizers
│   ├── heading.py       # # headers
│   ├── thematic.py      # ---, ___, ***
│   ├── list.py          # -, *, + list items
│   └── fence.py         # ``` open / close
└── scanners/            # Mode-specific scanners
    ├── line.py          # START mode
    ├── inline.py        # PROCESS / TEXT modes
    └── fence.py         # CODE_BLOCK mode

Usage:
    >>> from linemark.lexer import Tokenizer
    >>> tokenizer = Tokenizer()
    >>> list(tokenizer.tokenize("- Hello World"))
    [UnorderedList, Literal('Hello World')]

"""

from linemark.lexer.core import Tokenizer
from linemark.lexer.modes import TokenizerMode

__all__ = ["Tokenizer", "TokenizerMode"]
