"""Raw formatter — writes tokens back out as the markdown they came from.

Used as a round-trip oracle: any character the lexer dropped or reordered
shows up as a difference between the input and the raw output.
"""

from __future__ import annotations

from mdansi.formatters.base import StreamFormatter
from mdansi.tokens import Token


class RawFormatter(StreamFormatter):
    """Pass tokens through unchanged."""

    __slots__ = ()

    def _handle(self, token: Token) -> None:
        # EOF carries an empty value
        self._write(token.value)
