"""Thematic break classifier mixin."""

from __future__ import annotations

from mdansi.lexer.modes import MAX_BREAK_INDENT, THEMATIC_BREAK_CHARS
from mdansi.tokens import Token, TokenType


class ThematicClassifierMixin:
    """Mixin providing thematic break classification."""

    # These will be set by the Lexer class
    _buffer: str
    _pos: int
    _at_line_start: bool
    _in_code_fence: bool

    def _make_token(self, token_type: TokenType, value: str, start_pos: int) -> Token:
        """Create token at a buffer position. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_thematic_break(self) -> Token | None:
        """Try to classify the buffer at the cursor as a thematic break.

        A break is up to three spaces, then a run of 3+ identical ``-``,
        ``*`` or ``_``, then optional spaces, then a newline or the end of
        the buffer. Only lines that start at the cursor qualify.

        The leading spaces and the run are consumed; the token value is the
        run alone. Trailing spaces are left for whitespace tokens.

        Returns:
            Token if the cursor sits on a break, None otherwise.
        """
        if not self._at_line_start or self._in_code_fence:
            return None

        buffer = self._buffer
        end = len(buffer)
        start = self._pos

        for char in THEMATIC_BREAK_CHARS:
            index = start
            while index < end and index - start < MAX_BREAK_INDENT and buffer[index] == " ":
                index += 1

            run_start = index
            while index < end and buffer[index] == char:
                index += 1

            if index - run_start < 3:
                continue

            tail = index
            while tail < end and buffer[tail] == " ":
                tail += 1

            if tail == end or buffer[tail] == "\n":
                token = self._make_token(TokenType.THEMATIC_BREAK, buffer[run_start:index], run_start)
                self._pos = index
                self._at_line_start = False
                return token

        return None
