"""Formatting state carried between tokens by the ANSI formatter."""

from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass(slots=True)
class FormattingState:
    """Mutable per-formatter styling state.

    Line start is re-derived from the tokens the formatter sees rather than
    shared with the lexer.

    Attributes:
        in_emphasis: Italic is on
        in_strong: Bold is on
        in_code: Inside an inline code span
        in_code_block: Inside a fenced code block
        in_block_quote: Current line started with a quote marker
        heading_level: ``#`` markers counted on this line, not yet applied
        at_line_start: No text has been written since the last newline
        heading_prefix: Markers and spacing held until the level is known
        active_heading: Level of the heading style applied to this line (0 = none)
        construct_style: Link or image style left open across that
            construct's consecutive tokens ("" = none)
        fence_language: Language word held until a token that is not part
            of it arrives, so a word split across chunks is labeled once

    """

    in_emphasis: bool = False
    in_strong: bool = False
    in_code: bool = False
    in_code_block: bool = False
    in_block_quote: bool = False
    heading_level: int = 0
    at_line_start: bool = True
    heading_prefix: str = ""
    active_heading: int = 0
    construct_style: str = ""
    fence_language: str = ""

    def reset(self) -> None:
        """Return every field to its initial value."""
        for f in fields(self):
            setattr(self, f.name, f.default)

    @property
    def has_active_style(self) -> bool:
        """Whether any escape sequence is currently in effect."""
        return (
            self.in_emphasis
            or self.in_strong
            or self.in_code
            or self.in_code_block
            or self.in_block_quote
            or self.active_heading > 0
            or bool(self.construct_style)
        )
