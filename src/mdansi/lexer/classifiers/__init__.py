"""Multi-character classifiers for the mdansi lexer.

Each classifier is a mixin that recognizes one family of constructs at
the cursor and advances past it, or returns None and leaves the cursor
untouched.
"""

from mdansi.lexer.classifiers.fence import (
    FenceClassifierMixin,
)
from mdansi.lexer.classifiers.link import (
    LinkClassifierMixin,
)
from mdansi.lexer.classifiers.thematic import (
    ThematicClassifierMixin,
)

__all__ = [
    "FenceClassifierMixin",
    "LinkClassifierMixin",
    "ThematicClassifierMixin",
]
