"""Token and TokenType definitions for the mdansi lexer.

The lexer produces a stream of Token objects that formatters consume.
Each Token has a type, string value, and absolute stream offset.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

Ownership:
Token.value is an owned ``str`` copied out of the lexer buffer, so tokens
stay valid after the buffer is compacted or cleared.

"""

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Token types produced by the lexer.

    Organized by category for clarity:
    - Stream structure (EOF, NEWLINE, WHITESPACE, TEXT)
    - Block markers (headings, quotes, fences, thematic breaks)
    - Inline markers (emphasis, code)
    - Link and image sub-tokens

    """

    # Block markers
    HEADING_MARKER = auto()  # #
    BLOCK_QUOTE_MARKER = auto()  # >
    THEMATIC_BREAK = auto()  # ---, ***, ___
    CODE_FENCE = auto()  # ```
    CODE_FENCE_LANGUAGE = auto()  # info word after an opening fence

    # Inline markers
    EMPHASIS_MARKER = auto()  # *
    STRONG_MARKER = auto()  # **
    CODE_MARKER = auto()  # `

    # Links: [text](url)
    LINK_OPEN_BRACKET = auto()
    LINK_TEXT = auto()
    LINK_CLOSE_BRACKET = auto()
    LINK_OPEN_PAREN = auto()
    LINK_URL = auto()
    LINK_CLOSE_PAREN = auto()

    # Images: ![alt](url)
    IMAGE_OPEN_BRACKET = auto()
    IMAGE_ALT_TEXT = auto()
    IMAGE_CLOSE_BRACKET = auto()
    IMAGE_OPEN_PAREN = auto()
    IMAGE_URL = auto()
    IMAGE_CLOSE_PAREN = auto()

    # Stream structure
    TEXT = auto()
    WHITESPACE = auto()  # single space or tab
    NEWLINE = auto()
    EOF = auto()


# Token types that make up a link or image construct
LINK_TOKEN_TYPES: frozenset[TokenType] = frozenset(
    {
        TokenType.LINK_OPEN_BRACKET,
        TokenType.LINK_TEXT,
        TokenType.LINK_CLOSE_BRACKET,
        TokenType.LINK_OPEN_PAREN,
        TokenType.LINK_URL,
        TokenType.LINK_CLOSE_PAREN,
    }
)

IMAGE_TOKEN_TYPES: frozenset[TokenType] = frozenset(
    {
        TokenType.IMAGE_OPEN_BRACKET,
        TokenType.IMAGE_ALT_TEXT,
        TokenType.IMAGE_CLOSE_BRACKET,
        TokenType.IMAGE_OPEN_PAREN,
        TokenType.IMAGE_URL,
        TokenType.IMAGE_CLOSE_PAREN,
    }
)


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: The raw string value from the stream
        offset: Absolute position of the first character in the stream
            appended since the last reset. Unaffected by buffer compaction.

    """

    type: TokenType
    value: str
    offset: int

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, @{self.offset})"

    @property
    def end_offset(self) -> int:
        """Offset one past the last character of the token value."""
        return self.offset + len(self.value)
