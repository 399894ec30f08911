"""Scanners for the mdansi lexer.

Each scanner is a mixin that consumes input at the cursor once the
multi-character classifiers have declined it.
"""

from __future__ import annotations

from mdansi.lexer.scanners.inline import InlineScannerMixin
from mdansi.lexer.scanners.text import TextScannerMixin

__all__ = [
    "InlineScannerMixin",
    "TextScannerMixin",
]
