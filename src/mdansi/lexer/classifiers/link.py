"""Link and image sub-state machine mixin.

Tracks where the lexer is inside ``[text](url)`` and ``![alt](url)``
constructs. Transitions live in ``mdansi.lexer.modes`` as lookup tables;
any structural character that does not fit the current state is demoted
to plain text.
"""

from __future__ import annotations

from mdansi.lexer.modes import (
    CLOSE_BRACKET_TRANSITIONS,
    CLOSE_PAREN_TRANSITIONS,
    FIELD_TRANSITIONS,
    IMAGE_OPEN,
    OPEN_PAREN_TRANSITIONS,
    LinkState,
)
from mdansi.tokens import Token, TokenType


class LinkClassifierMixin:
    """Mixin providing link/image classification."""

    # These will be set by the Lexer class
    _buffer: str
    _pos: int
    _at_line_start: bool
    _link_state: LinkState

    def _make_token(self, token_type: TokenType, value: str, start_pos: int) -> Token:
        """Create token at a buffer position. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_image_open(self) -> Token | None:
        """Classify ``![`` at the cursor and enter the image chain."""
        if not self._buffer.startswith(IMAGE_OPEN, self._pos):
            return None

        token = self._make_token(TokenType.IMAGE_OPEN_BRACKET, IMAGE_OPEN, self._pos)
        self._pos += len(IMAGE_OPEN)
        self._at_line_start = False
        self._link_state = LinkState.IMAGE_ALT_TEXT
        return token

    def _open_link(self, start: int) -> Token:
        """Enter the link chain on ``[``."""
        self._link_state = LinkState.LINK_TEXT
        return self._make_token(TokenType.LINK_OPEN_BRACKET, "[", start)

    def _close_bracket(self, start: int) -> Token:
        """Resolve ``]``; a stray bracket abandons the construct."""
        transition = CLOSE_BRACKET_TRANSITIONS.get(self._link_state)
        if transition is None:
            self._link_state = LinkState.NONE
            return self._make_token(TokenType.TEXT, "]", start)
        token_type, self._link_state = transition
        return self._make_token(token_type, "]", start)

    def _open_paren(self, start: int) -> Token:
        """Resolve ``(``; outside its slot it is plain text."""
        transition = OPEN_PAREN_TRANSITIONS.get(self._link_state)
        if transition is None:
            return self._make_token(TokenType.TEXT, "(", start)
        token_type, self._link_state = transition
        return self._make_token(token_type, "(", start)

    def _close_paren(self, start: int) -> Token:
        """Resolve ``)``; outside its slot it is plain text."""
        transition = CLOSE_PAREN_TRANSITIONS.get(self._link_state)
        if transition is None:
            return self._make_token(TokenType.TEXT, ")", start)
        token_type, self._link_state = transition
        return self._make_token(token_type, ")", start)

    def _field_token(self, value: str, start: int) -> Token:
        """Classify a text run by the field the construct is waiting for.

        Runs that continue a field after whitespace keep the field's kind.
        Between ``]`` and ``(`` there is no field, so the run is plain text.
        """
        transition = FIELD_TRANSITIONS.get(self._link_state)
        if transition is None:
            return self._make_token(TokenType.TEXT, value, start)
        token_type, self._link_state = transition
        return self._make_token(token_type, value, start)
