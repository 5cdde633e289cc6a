"""Mode-specific scanners for the linemark tokenizer."""

from linemark.lexer.scanners.fence import FenceScannerMixin
from linemark.lexer.scanners.inline import InlineScannerMixin
from linemark.lexer.scanners.line import LineScannerMixin

__all__ = [
    "FenceScannerMixin",
    "InlineScannerMixin",
    "LineScannerMixin",
]
