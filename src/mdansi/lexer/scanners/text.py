"""Text run scanner mixin."""

from __future__ import annotations

from mdansi.lexer.modes import PAREN_CHARS, SENTINEL_CHARS, LinkState
from mdansi.tokens import Token, TokenType


class TextScannerMixin:
    """Mixin collecting runs of ordinary characters.

    A run always takes its first character, then extends until whitespace,
    a sentinel character, or (inside a link/image construct) a parenthesis.

    """

    # These will be set by the Lexer class
    _buffer: str
    _pos: int
    _awaiting_fence_language: bool
    _link_state: LinkState

    def _make_token(self, token_type: TokenType, value: str, start_pos: int) -> Token:
        """Create token at a buffer position. Implemented by Lexer."""
        raise NotImplementedError

    # Link transitions (provided by LinkClassifierMixin)
    def _open_paren(self, start: int) -> Token:
        raise NotImplementedError

    def _close_paren(self, start: int) -> Token:
        raise NotImplementedError

    def _field_token(self, value: str, start: int) -> Token:
        raise NotImplementedError

    def _scan_text_run(self) -> Token:
        """Scan a text run starting at the cursor.

        Returns:
            CODE_FENCE_LANGUAGE for the first run after an opening fence,
            a paren token when the run opens with a structural paren,
            otherwise a field or TEXT token chosen by the link state.
        """
        buffer = self._buffer
        start = self._pos
        end = len(buffer)
        in_construct = self._link_state is not LinkState.NONE

        index = start + 1
        while index < end:
            char = buffer[index]
            if char.isspace() or char in SENTINEL_CHARS:
                break
            if in_construct and char in PAREN_CHARS:
                break
            index += 1

        value = buffer[start:index]
        self._pos = index

        if self._awaiting_fence_language:
            self._awaiting_fence_language = False
            return self._make_token(TokenType.CODE_FENCE_LANGUAGE, value, start)

        if in_construct:
            # A run only holds a paren as its first character; emit it alone
            # and leave the rest for the next call
            if value[0] == "(":
                self._pos = start + 1
                return self._open_paren(start)
            if value[0] == ")":
                self._pos = start + 1
                return self._close_paren(start)

        return self._field_token(value, start)
