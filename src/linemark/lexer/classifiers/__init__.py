"""Line-start classifiers for the linemark tokenizer.

Each classifier is a mixin providing one anchored recognizer. Classifiers
are pure: they inspect the whole line and report a match without moving
the cursor.
"""

from linemark.lexer.classifiers.fence import FenceClassifierMixin
from linemark.lexer.classifiers.heading import HeadingClassifierMixin
from linemark.lexer.classifiers.list import ListClassifierMixin
from linemark.lexer.classifiers.thematic import ThematicClassifierMixin

__all__ = [
    "FenceClassifierMixin",
    "HeadingClassifierMixin",
    "ListClassifierMixin",
    "ThematicClassifierMixin",
]
