"""Code fence and strong marker classifier mixin."""

from mdansi.lexer.modes import FENCE, STRONG
from mdansi.tokens import Token, TokenType


class FenceClassifierMixin:
    """Mixin providing fenced code and ``**`` classification."""

    # These will be set by the Lexer class
    _buffer: str
    _pos: int
    _at_line_start: bool
    _in_code_fence: bool
    _awaiting_fence_language: bool

    def _make_token(self, token_type: TokenType, value: str, start_pos: int) -> Token:
        """Create token at a buffer position. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_code_fence(self) -> Token | None:
        """Try to classify three backticks at the cursor as a fence.

        An opening fence must start a line. Once inside a fence, a closing
        fence is recognized anywhere on a line, so indented closers and
        shell transcripts still terminate the block.

        Returns:
            CODE_FENCE token, or None if the cursor is not on a fence.
        """
        if not self._buffer.startswith(FENCE, self._pos):
            return None

        if not (self._at_line_start or self._in_code_fence):
            return None

        token = self._make_token(TokenType.CODE_FENCE, FENCE, self._pos)
        self._pos += len(FENCE)
        self._at_line_start = False
        self._in_code_fence = not self._in_code_fence
        # Only an opening fence carries a language word
        self._awaiting_fence_language = self._in_code_fence
        return token

    def _try_classify_strong(self) -> Token | None:
        """Classify ``**`` at the cursor, wherever it appears."""
        if not self._buffer.startswith(STRONG, self._pos):
            return None

        token = self._make_token(TokenType.STRONG_MARKER, STRONG, self._pos)
        self._pos += len(STRONG)
        self._at_line_start = False
        return token
