"""ANSI formatter — renders markdown tokens as styled terminal text.

Each TokenType has exactly one handler. Handlers write escape sequences and
text to the sink and update FormattingState for the tokens that follow.

Nested constructs that need a full reset (inline code, quote glyphs, link
colors) re-emit whatever outer styling is still active afterwards, so
``**bold `code` bold**`` stays bold on both sides of the code span.

Example:
    >>> from mdansi import AnsiFormatter, MemorySink
    >>> formatter = AnsiFormatter(MemorySink())
    >>> formatter.append("**hi**")
    >>> formatter.render()
    >>> formatter.get_captured_output()
    '\\x1b[1mhi\\x1b[22m'

"""

from __future__ import annotations

from collections.abc import Callable

from mdansi import ansi
from mdansi.config import FormatterConfig
from mdansi.formatters.base import StreamFormatter
from mdansi.formatters.state import FormattingState
from mdansi.lexer import LinkState
from mdansi.sinks import OutputSink
from mdansi.tokens import IMAGE_TOKEN_TYPES, LINK_TOKEN_TYPES, Token, TokenType

# Heading colors for levels 1-5; deeper levels share the fallback
HEADING_COLORS: tuple[str, ...] = (
    ansi.BRIGHT_RED,
    ansi.BRIGHT_YELLOW,
    ansi.BRIGHT_GREEN,
    ansi.BRIGHT_CYAN,
    ansi.BRIGHT_BLUE,
)
HEADING_FALLBACK_COLOR = ansi.BRIGHT_MAGENTA

CODE_STYLE = ansi.CYAN + ansi.DIM
CODE_BLOCK_STYLE = ansi.BRIGHT_BLACK + ansi.DIM
FENCE_LABEL_STYLE = ansi.BRIGHT_RED
RULE_STYLE = ansi.BRIGHT_BLACK + ansi.DIM
QUOTE_STYLE = ansi.BRIGHT_BLACK
LINK_STYLE = ansi.BLUE + ansi.UNDERLINE
IMAGE_STYLE = ansi.MAGENTA

RULE_CHAR = "─"

# Tokens that leave a counted heading pending; every other token applies it
_HEADING_PENDING_TYPES = frozenset(
    {TokenType.HEADING_MARKER, TokenType.WHITESPACE, TokenType.NEWLINE, TokenType.EOF}
)


def heading_style(level: int) -> str:
    """Bold plus the color for a heading level (1-based)."""
    if level <= len(HEADING_COLORS):
        return ansi.BOLD + HEADING_COLORS[level - 1]
    return ansi.BOLD + HEADING_FALLBACK_COLOR


class AnsiFormatter(StreamFormatter):
    """Render streamed markdown with ANSI escape sequences.

    Usage:
        formatter = AnsiFormatter()  # writes to stdout
        for chunk in chunks:
            formatter.append(chunk)
            formatter.render()
        formatter.finish()

    """

    __slots__ = ("_state", "_dispatch")

    def __init__(
        self,
        sink: OutputSink | None = None,
        *,
        config: FormatterConfig | None = None,
    ) -> None:
        super().__init__(sink, config=config)
        self._state = FormattingState()
        self._dispatch: dict[TokenType, Callable[[Token], None]] = {
            TokenType.HEADING_MARKER: self._handle_heading_marker,
            TokenType.BLOCK_QUOTE_MARKER: self._handle_block_quote,
            TokenType.THEMATIC_BREAK: self._handle_thematic_break,
            TokenType.CODE_FENCE: self._handle_code_fence,
            TokenType.CODE_FENCE_LANGUAGE: self._handle_code_fence_language,
            TokenType.EMPHASIS_MARKER: self._handle_emphasis,
            TokenType.STRONG_MARKER: self._handle_strong,
            TokenType.CODE_MARKER: self._handle_code,
            TokenType.LINK_OPEN_BRACKET: self._handle_link_part,
            TokenType.LINK_TEXT: self._handle_link_part,
            TokenType.LINK_CLOSE_BRACKET: self._handle_link_part,
            TokenType.LINK_OPEN_PAREN: self._handle_link_part,
            TokenType.LINK_URL: self._handle_link_part,
            TokenType.LINK_CLOSE_PAREN: self._handle_link_part,
            TokenType.IMAGE_OPEN_BRACKET: self._handle_image_part,
            TokenType.IMAGE_ALT_TEXT: self._handle_image_part,
            TokenType.IMAGE_CLOSE_BRACKET: self._handle_image_part,
            TokenType.IMAGE_OPEN_PAREN: self._handle_image_part,
            TokenType.IMAGE_URL: self._handle_image_part,
            TokenType.IMAGE_CLOSE_PAREN: self._handle_image_part,
            TokenType.TEXT: self._handle_text,
            TokenType.WHITESPACE: self._handle_whitespace,
            TokenType.NEWLINE: self._handle_newline,
            TokenType.EOF: self._handle_eof,
        }

    @property
    def state(self) -> FormattingState:
        return self._state

    def _handle(self, token: Token) -> None:
        state = self._state
        token_type = token.type
        # EOF only ends the available input; held output waits for more
        if token_type is not TokenType.EOF:
            if state.construct_style and not self._continues_construct(token):
                self._close_construct_style()
            if state.fence_language and token_type is not TokenType.TEXT:
                self._flush_fence_language()
        if state.heading_level and token_type not in _HEADING_PENDING_TYPES:
            self._apply_heading()
        self._dispatch[token_type](token)

    def _reset_state(self) -> None:
        self._state.reset()

    def _finish(self) -> None:
        state = self._state
        if state.heading_level:
            self._flush_heading_prefix()
        if state.fence_language:
            self._flush_fence_language()
        if state.has_active_style:
            # Leave the terminal clean; state is kept until reset()
            self._write(ansi.RESET)

    # =========================================================================
    # Block markers
    # =========================================================================

    def _handle_heading_marker(self, token: Token) -> None:
        state = self._state
        if state.at_line_start and not state.active_heading:
            state.heading_level += 1
            state.heading_prefix += token.value
        else:
            self._write(token.value)

    def _handle_block_quote(self, token: Token) -> None:
        state = self._state
        if not state.at_line_start or state.in_code_block:
            self._write(token.value)
            return

        state.in_block_quote = True
        self._write(QUOTE_STYLE)
        self._write(self._config.quote_glyph)
        self._write(ansi.RESET)
        self._restore_active_formatting()

    def _handle_thematic_break(self, token: Token) -> None:
        state = self._state
        if state.in_code_block:
            self._write(token.value)
            return

        if not state.at_line_start:
            self._write("\n")
        self._write(RULE_STYLE)
        self._write(RULE_CHAR * self._config.thematic_break_width)
        self._write(ansi.RESET)
        self._restore_active_formatting()
        state.at_line_start = False

    def _handle_code_fence(self, token: Token) -> None:
        state = self._state
        state.in_code_block = not state.in_code_block
        if state.in_code_block:
            if not state.at_line_start:
                self._write("\n")
            self._write(CODE_BLOCK_STYLE)
        else:
            self._write(ansi.RESET)
            self._write("\n")
            self._restore_active_formatting()
        state.at_line_start = not state.in_code_block

    def _handle_code_fence_language(self, token: Token) -> None:
        state = self._state
        state.at_line_start = False
        if not state.in_code_block:
            self._write(token.value)
            return

        # Written once a token outside the word arrives
        state.fence_language += token.value

    # =========================================================================
    # Inline markers
    # =========================================================================

    def _handle_emphasis(self, token: Token) -> None:
        state = self._state
        state.at_line_start = False
        if state.in_code or state.in_code_block:
            self._write(token.value)
            return

        state.in_emphasis = not state.in_emphasis
        self._write(ansi.ITALIC if state.in_emphasis else ansi.RESET_ITALIC)

    def _handle_strong(self, token: Token) -> None:
        state = self._state
        state.at_line_start = False
        if state.in_code or state.in_code_block:
            self._write(token.value)
            return

        state.in_strong = not state.in_strong
        self._write(ansi.BOLD if state.in_strong else ansi.RESET_BOLD)

    def _handle_code(self, token: Token) -> None:
        state = self._state
        state.at_line_start = False
        if state.in_code_block:
            self._write(token.value)
            return

        state.in_code = not state.in_code
        self._write(ansi.RESET)
        if state.in_code:
            self._write(CODE_STYLE)
        else:
            self._restore_active_formatting()

    def _handle_link_part(self, token: Token) -> None:
        self._write_wrapped(token.value, LINK_STYLE)

    def _handle_image_part(self, token: Token) -> None:
        self._write_wrapped(token.value, IMAGE_STYLE)

    # =========================================================================
    # Text and structure
    # =========================================================================

    def _handle_text(self, token: Token) -> None:
        state = self._state
        if state.fence_language:
            # Continuation of a language word split across chunks
            state.fence_language += token.value
            return

        self._write(token.value)
        state.at_line_start = False

    def _handle_whitespace(self, token: Token) -> None:
        state = self._state
        if state.heading_level:
            state.heading_prefix += token.value
        else:
            self._write(token.value)

    def _handle_newline(self, token: Token) -> None:
        state = self._state
        if state.heading_level:
            self._flush_heading_prefix()

        if state.in_block_quote or state.active_heading:
            self._write(ansi.RESET)
            state.in_block_quote = False
            state.active_heading = 0
            self._restore_active_formatting()

        self._write(token.value)
        state.at_line_start = True
        state.heading_level = 0

    def _handle_eof(self, token: Token) -> None:
        """End of available input; held heading markers wait for more."""

    # =========================================================================
    # Helpers
    # =========================================================================

    def _apply_heading(self) -> None:
        """Write the heading style for the counted level, then the held markers."""
        state = self._state
        level = state.heading_level
        self._write(heading_style(level))
        if self._config.heading_markers:
            self._write(state.heading_prefix)
        state.heading_prefix = ""
        state.heading_level = 0
        state.active_heading = level

    def _flush_heading_prefix(self) -> None:
        """Write held markers unstyled: the line never got heading text."""
        state = self._state
        if self._config.heading_markers:
            self._write(state.heading_prefix)
        state.heading_prefix = ""
        state.heading_level = 0

    def _write_wrapped(self, text: str, style: str) -> None:
        """Write one link or image part, opening the construct style if needed.

        The style stays open for the construct's following parts and is
        closed by the first token outside it, so a part split across chunks
        renders the same as an unsplit one.
        """
        state = self._state
        state.at_line_start = False
        if state.in_code or state.in_code_block:
            self._write(text)
            return

        if state.construct_style != style:
            if state.construct_style:
                self._close_construct_style()
            self._write(style)
            state.construct_style = style
        self._write(text)

    def _continues_construct(self, token: Token) -> bool:
        if token.type in LINK_TOKEN_TYPES or token.type in IMAGE_TOKEN_TYPES:
            return True
        # Spaces inside link text or alt text stay styled
        return (
            token.type is TokenType.WHITESPACE
            and self._lexer.link_state is not LinkState.NONE
        )

    def _close_construct_style(self) -> None:
        self._state.construct_style = ""
        self._write(ansi.RESET)
        self._restore_active_formatting()

    def _flush_fence_language(self) -> None:
        state = self._state
        self._write(FENCE_LABEL_STYLE)
        self._write(self._config.fence_label_prefix)
        self._write(state.fence_language)
        self._write(ansi.RESET)
        self._write(CODE_BLOCK_STYLE)
        state.fence_language = ""

    def _restore_active_formatting(self) -> None:
        """Re-emit styles still in effect after a full reset.

        Order is fixed: heading, then bold, then italic.
        """
        state = self._state
        if state.active_heading:
            self._write(heading_style(state.active_heading))
        if state.in_strong:
            self._write(ansi.BOLD)
        if state.in_emphasis:
            self._write(ansi.ITALIC)
