"""Incremental pull lexer.

The lexer owns a growing text buffer and a cursor. Callers append chunks
as they arrive and pull tokens with ``next()`` until EOF, which only means
"end of input so far": more text may be appended and tokenizing resumes
where it stopped.

No regex in the hot path. Every call to ``next()`` either returns EOF or
advances the cursor by at least one character.

Thread Safety:
Lexer instances are owned by one caller. All state is instance-local;
no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from mdansi.lexer.classifiers import (
    FenceClassifierMixin,
    LinkClassifierMixin,
    ThematicClassifierMixin,
)
from mdansi.lexer.modes import LinkState
from mdansi.lexer.scanners import InlineScannerMixin, TextScannerMixin
from mdansi.tokens import Token, TokenType


class Lexer(
    # Classifiers (multi-character constructs)
    ThematicClassifierMixin,
    FenceClassifierMixin,
    LinkClassifierMixin,
    # Scanners (text runs before the single-character scanner that calls them)
    TextScannerMixin,
    InlineScannerMixin,
):
    """Incremental markdown lexer.

    Recognition order for each token:
    1. Multi-character constructs: thematic break, code fence, ``**``, ``![``
    2. Single characters, branching on whether a code fence is open
    3. Text runs

    Usage:
            >>> lexer = Lexer()
            >>> lexer.append("# Hel")
            >>> [t.type.name for t in lexer.tokenize()]
            ['HEADING_MARKER', 'WHITESPACE', 'TEXT', 'EOF']
            >>> lexer.append("lo")
            >>> lexer.next()
            Token(TEXT, 'lo', @5)

    Delimiters are classified greedily: a ``*`` at the end of a chunk is an
    emphasis marker even if the next chunk starts with another ``*``.

    The buffer is a single string, so every ``append`` copies the retained
    text. Long streams should call ``clear_processed()`` between chunks to
    keep appends linear; ``StreamFormatter`` does this once its configured
    ``compact_threshold`` of consumed characters is reached.

    """

    __slots__ = (
        "_buffer",
        "_pos",
        "_discarded",  # Characters dropped by compaction, for absolute offsets
        "_at_line_start",
        "_in_code_fence",
        "_awaiting_fence_language",
        "_link_state",
    )

    def __init__(self, text: str = "") -> None:
        """Initialize lexer, optionally with initial text.

        Args:
            text: Markdown already available when the session starts
        """
        self._buffer = text
        self._pos = 0
        self._discarded = 0
        self._at_line_start = True
        self._in_code_fence = False
        self._awaiting_fence_language = False
        self._link_state = LinkState.NONE

    @property
    def buffer(self) -> str:
        """Retained buffer text, including the consumed prefix."""
        return self._buffer

    @property
    def cursor(self) -> int:
        """Read position within the retained buffer."""
        return self._pos

    @property
    def link_state(self) -> LinkState:
        """Current position inside a link or image construct."""
        return self._link_state

    @property
    def in_code_fence(self) -> bool:
        return self._in_code_fence

    @property
    def at_line_start(self) -> bool:
        return self._at_line_start

    def append(self, text: str) -> None:
        """Append text to the buffer. Emitted tokens are never revisited.

        Copies the retained buffer; see ``clear_processed``.
        """
        self._buffer += text

    def has_more_tokens(self) -> bool:
        """Whether unconsumed characters remain.

        This is a capacity check: it says nothing about whether the pending
        characters form a complete construct.
        """
        return self._pos < len(self._buffer)

    def next(self) -> Token:
        """Return the next token, or EOF when the buffer is exhausted."""
        if self._pos >= len(self._buffer):
            return self._make_token(TokenType.EOF, "", self._pos)

        for classify in (
            self._try_classify_thematic_break,
            self._try_classify_code_fence,
            self._try_classify_strong,
            self._try_classify_image_open,
        ):
            token = classify()
            if token is not None:
                return token

        if self._in_code_fence:
            return self._scan_fence_char()
        return self._scan_inline_char()

    def tokenize(self) -> Iterator[Token]:
        """Drain every currently available token.

        Yields:
            Token objects, ending with exactly one EOF
        """
        while True:
            token = self.next()
            yield token
            if token.type is TokenType.EOF:
                return

    def clear_processed(self) -> int:
        """Drop the consumed prefix of the buffer.

        All flags describing consumed context (line start, fence, pending
        language, link state) are kept, so the classification of the
        remaining text is unchanged.

        Returns:
            Number of characters dropped.
        """
        dropped = self._pos
        if dropped:
            self._buffer = self._buffer[dropped:]
            self._discarded += dropped
            self._pos = 0
        return dropped

    def rewind(self) -> None:
        """Restart tokenization from the start of the retained buffer."""
        self._pos = 0
        self._reset_flags()

    def clear_buffer(self) -> None:
        """Discard all text and return every flag to its initial value."""
        self._buffer = ""
        self._pos = 0
        self._discarded = 0
        self._reset_flags()

    def reset(self) -> None:
        """Start a new session. Same as ``clear_buffer()``."""
        self.clear_buffer()

    def _reset_flags(self) -> None:
        self._at_line_start = True
        self._in_code_fence = False
        self._awaiting_fence_language = False
        self._link_state = LinkState.NONE

    def _make_token(self, token_type: TokenType, value: str, start_pos: int) -> Token:
        """Create a Token for a buffer position.

        Args:
            token_type: The token type.
            value: The raw string value.
            start_pos: Position of the first character in the retained buffer.

        Returns:
            Token carrying the absolute stream offset.
        """
        return Token(type=token_type, value=value, offset=self._discarded + start_pos)
