"""Incremental lexer for mdansi.

This package provides a pull lexer over a growing buffer: text is appended
in chunks and tokens are pulled one at a time with ``next()``.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LinkState
├── core.py              # Lexer class (mixin composition + buffer management)
├── modes.py             # LinkState enum, transition tables, character sets
├── classifiers/         # Multi-character constructs
│   ├── thematic.py      # Thematic break
│   ├── fence.py         # Code fence and **
│   └── link.py          # Link/image sub-state machine
└── scanners/            # Single characters and text runs
    ├── inline.py        # Markers, whitespace, newline
    └── text.py          # Text runs, fence language, paren splitting

Usage:
    >>> from mdansi.lexer import Lexer
    >>> lexer = Lexer()
    >>> lexer.append("[a](b)")
    >>> for token in lexer.tokenize():
    ...     print(token)
Token(LINK_OPEN_BRACKET, '[', @0)
Token(LINK_TEXT, 'a', @1)
Token(LINK_CLOSE_BRACKET, ']', @2)
Token(LINK_OPEN_PAREN, '(', @3)
Token(LINK_URL, 'b', @4)
Token(LINK_CLOSE_PAREN, ')', @5)
Token(EOF, '', @6)

"""

from mdansi.lexer.core import Lexer
from mdansi.lexer.modes import LinkState

__all__ = ["Lexer", "LinkState"]
