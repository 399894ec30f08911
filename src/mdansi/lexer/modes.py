"""Lexer sub-states and character constants.

This module defines the link/image finite state machine and the
character sets the lexer uses to classify input.
"""

from __future__ import annotations

from enum import Enum, auto

from mdansi.tokens import TokenType


class LinkState(Enum):
    """Position inside a ``[text](url)`` or ``![alt](url)`` construct.

    The lexer only ever moves a state forward along its chain or back to
    NONE. A newline always resets to NONE: links never span lines.

    """

    NONE = auto()

    LINK_TEXT = auto()  # after [
    LINK_CLOSE_BRACKET = auto()  # after link text
    LINK_OPEN_PAREN = auto()  # after ]
    LINK_URL = auto()  # after (
    LINK_CLOSE_PAREN = auto()  # after url

    IMAGE_ALT_TEXT = auto()  # after ![
    IMAGE_CLOSE_BRACKET = auto()
    IMAGE_OPEN_PAREN = auto()
    IMAGE_URL = auto()
    IMAGE_CLOSE_PAREN = auto()


# Structural character transitions: state -> (emitted token, next state).
# Any (state, char) pair missing here demotes the character to TEXT.
CLOSE_BRACKET_TRANSITIONS: dict[LinkState, tuple[TokenType, LinkState]] = {
    LinkState.LINK_CLOSE_BRACKET: (TokenType.LINK_CLOSE_BRACKET, LinkState.LINK_OPEN_PAREN),
    LinkState.IMAGE_CLOSE_BRACKET: (TokenType.IMAGE_CLOSE_BRACKET, LinkState.IMAGE_OPEN_PAREN),
}

OPEN_PAREN_TRANSITIONS: dict[LinkState, tuple[TokenType, LinkState]] = {
    LinkState.LINK_OPEN_PAREN: (TokenType.LINK_OPEN_PAREN, LinkState.LINK_URL),
    LinkState.IMAGE_OPEN_PAREN: (TokenType.IMAGE_OPEN_PAREN, LinkState.IMAGE_URL),
}

CLOSE_PAREN_TRANSITIONS: dict[LinkState, tuple[TokenType, LinkState]] = {
    LinkState.LINK_CLOSE_PAREN: (TokenType.LINK_CLOSE_PAREN, LinkState.NONE),
    LinkState.IMAGE_CLOSE_PAREN: (TokenType.IMAGE_CLOSE_PAREN, LinkState.NONE),
}

# Text runs inside a construct: state -> (token type, next state).
# The "awaiting close" states keep the field kind for runs that continue
# a field after whitespace.
FIELD_TRANSITIONS: dict[LinkState, tuple[TokenType, LinkState]] = {
    LinkState.LINK_TEXT: (TokenType.LINK_TEXT, LinkState.LINK_CLOSE_BRACKET),
    LinkState.LINK_CLOSE_BRACKET: (TokenType.LINK_TEXT, LinkState.LINK_CLOSE_BRACKET),
    LinkState.LINK_URL: (TokenType.LINK_URL, LinkState.LINK_CLOSE_PAREN),
    LinkState.LINK_CLOSE_PAREN: (TokenType.LINK_URL, LinkState.LINK_CLOSE_PAREN),
    LinkState.IMAGE_ALT_TEXT: (TokenType.IMAGE_ALT_TEXT, LinkState.IMAGE_CLOSE_BRACKET),
    LinkState.IMAGE_CLOSE_BRACKET: (TokenType.IMAGE_ALT_TEXT, LinkState.IMAGE_CLOSE_BRACKET),
    LinkState.IMAGE_URL: (TokenType.IMAGE_URL, LinkState.IMAGE_CLOSE_PAREN),
    LinkState.IMAGE_CLOSE_PAREN: (TokenType.IMAGE_URL, LinkState.IMAGE_CLOSE_PAREN),
}

# Characters that end a text run because they may begin a structural token
SENTINEL_CHARS: frozenset[str] = frozenset(">#*`[]!")

# Extra run terminators while inside a link or image construct
PAREN_CHARS: frozenset[str] = frozenset("()")

THEMATIC_BREAK_CHARS: tuple[str, ...] = ("-", "*", "_")

INLINE_WHITESPACE: frozenset[str] = frozenset(" \t")

FENCE = "```"
STRONG = "**"
IMAGE_OPEN = "!["

# Leading spaces tolerated before a thematic break
MAX_BREAK_INDENT = 3
