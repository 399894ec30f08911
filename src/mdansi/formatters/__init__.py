"""mdansi formatters.

Formatters pull tokens from an incremental Lexer and write to an OutputSink.

Available Formatters:
- AnsiFormatter: Renders markdown as ANSI-styled terminal text
- RawFormatter: Writes the markdown back unchanged (round-trip oracle)

Thread Safety:
Formatters hold per-stream state. Create one per output stream.

"""

from mdansi.formatters.ansi import AnsiFormatter
from mdansi.formatters.base import StreamFormatter
from mdansi.formatters.protocol import MarkdownFormatter
from mdansi.formatters.raw import RawFormatter
from mdansi.formatters.state import FormattingState

__all__ = [
    "AnsiFormatter",
    "FormattingState",
    "MarkdownFormatter",
    "RawFormatter",
    "StreamFormatter",
]
