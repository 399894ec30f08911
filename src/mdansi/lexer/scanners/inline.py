"""Single-character scanner mixin.

Classifies the character at the cursor once no multi-character construct
matched. Inside a code fence almost everything is text; outside, the
markdown marker characters become their own tokens.
"""

from __future__ import annotations

from mdansi.lexer.modes import INLINE_WHITESPACE, LinkState
from mdansi.tokens import Token, TokenType

# Marker characters that map directly to a token outside code fences
_MARKER_TOKENS: dict[str, TokenType] = {
    ">": TokenType.BLOCK_QUOTE_MARKER,
    "#": TokenType.HEADING_MARKER,
    "*": TokenType.EMPHASIS_MARKER,
    "`": TokenType.CODE_MARKER,
}


class InlineScannerMixin:
    """Mixin providing single-character classification."""

    # These will be set by the Lexer class
    _buffer: str
    _pos: int
    _at_line_start: bool
    _awaiting_fence_language: bool
    _link_state: LinkState

    def _make_token(self, token_type: TokenType, value: str, start_pos: int) -> Token:
        """Create token at a buffer position. Implemented by Lexer."""
        raise NotImplementedError

    # Provided by LinkClassifierMixin / TextScannerMixin
    def _open_link(self, start: int) -> Token:
        raise NotImplementedError

    def _close_bracket(self, start: int) -> Token:
        raise NotImplementedError

    def _scan_text_run(self) -> Token:
        raise NotImplementedError

    def _scan_fence_char(self) -> Token:
        """Classify the cursor character inside a code fence."""
        char = self._buffer[self._pos]
        if char == "\n":
            return self._scan_newline()
        if char in INLINE_WHITESPACE:
            return self._scan_whitespace(char)
        self._at_line_start = False
        return self._scan_text_run()

    def _scan_inline_char(self) -> Token:
        """Classify the cursor character outside a code fence."""
        start = self._pos
        char = self._buffer[start]

        if char == "\n":
            return self._scan_newline()
        if char in INLINE_WHITESPACE:
            return self._scan_whitespace(char)

        self._at_line_start = False

        token_type = _MARKER_TOKENS.get(char)
        if token_type is not None:
            self._pos += 1
            return self._make_token(token_type, char, start)
        if char == "[":
            self._pos += 1
            return self._open_link(start)
        if char == "]":
            self._pos += 1
            return self._close_bracket(start)

        return self._scan_text_run()

    def _scan_newline(self) -> Token:
        """Consume a newline: ends any pending fence language and link."""
        token = self._make_token(TokenType.NEWLINE, "\n", self._pos)
        self._pos += 1
        self._awaiting_fence_language = False
        self._link_state = LinkState.NONE
        self._at_line_start = True
        return token

    def _scan_whitespace(self, char: str) -> Token:
        """Consume one space or tab. Line start is unaffected."""
        token = self._make_token(TokenType.WHITESPACE, char, self._pos)
        self._pos += 1
        return token
