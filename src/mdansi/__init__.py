"""
mdansi — Streaming Markdown to ANSI terminal text

Formats markdown as it arrives, chunk by chunk, without waiting for the
whole document. Styling that is open when a chunk ends (bold, italics,
code blocks) carries over into the next chunk.

Quick Start:
    >>> from mdansi import render_ansi, strip_ansi
    >>> strip_ansi(render_ansi("# Hello **World**"))
    '# Hello World'

    >>> # Or stream chunks yourself
    >>> from mdansi import AnsiFormatter
    >>> formatter = AnsiFormatter()  # writes to stdout
    >>> for chunk in ("Hello *wor", "ld*\\n"):
    ...     formatter.append(chunk)
    ...     formatter.render()
    >>> formatter.finish()

Zero runtime dependencies.
"""

from collections.abc import Iterable

from mdansi.ansi import strip_ansi
from mdansi.config import (
    FormatterConfig,
    formatter_config_context,
    get_formatter_config,
    reset_formatter_config,
    set_formatter_config,
)
from mdansi.errors import ConfigError, MdAnsiError, SinkError
from mdansi.formatters import (
    AnsiFormatter,
    FormattingState,
    MarkdownFormatter,
    RawFormatter,
    StreamFormatter,
)
from mdansi.lexer import Lexer, LinkState
from mdansi.sinks import ConsoleSink, MemorySink, OutputSink
from mdansi.tokens import Token, TokenType

__version__ = "0.1.0"


def render_ansi(text: str, *, config: FormatterConfig | None = None) -> str:
    """Format a complete markdown string as ANSI text.

    Args:
        text: Markdown source
        config: Optional formatter config (context default if None)

    Returns:
        Styled text

    Example:
        >>> render_ansi("*hi*")
        '\\x1b[3mhi\\x1b[23m'
    """
    sink = MemorySink()
    formatter = AnsiFormatter(sink, config=config)
    formatter.append(text)
    formatter.finish()
    return sink.getvalue()


def render_raw(text: str) -> str:
    """Tokenize and write back a markdown string unchanged."""
    sink = MemorySink()
    formatter = RawFormatter(sink)
    formatter.append(text)
    formatter.finish()
    return sink.getvalue()


def format_stream(
    chunks: Iterable[str],
    *,
    sink: OutputSink | None = None,
    config: FormatterConfig | None = None,
    raw: bool = False,
) -> str | None:
    """Format an iterable of markdown chunks as they arrive.

    Each chunk is appended and rendered immediately, so output for a chunk
    reaches the sink before the next chunk is requested.

    Args:
        chunks: Markdown chunks, e.g. from a streaming API response
        sink: Output destination (stdout if None)
        config: Optional formatter config
        raw: Use RawFormatter instead of AnsiFormatter

    Returns:
        Captured output if ``sink`` is a MemorySink, else None.
    """
    formatter_cls = RawFormatter if raw else AnsiFormatter
    formatter = formatter_cls(sink, config=config)
    for chunk in chunks:
        formatter.append(chunk)
        formatter.render()
    formatter.finish()
    return formatter.get_captured_output()


__all__ = [
    # Convenience
    "format_stream",
    "render_ansi",
    "render_raw",
    "strip_ansi",
    # Lexer
    "Lexer",
    "LinkState",
    "Token",
    "TokenType",
    # Formatters
    "AnsiFormatter",
    "FormattingState",
    "MarkdownFormatter",
    "RawFormatter",
    "StreamFormatter",
    # Sinks
    "ConsoleSink",
    "MemorySink",
    "OutputSink",
    # Config
    "FormatterConfig",
    "formatter_config_context",
    "get_formatter_config",
    "reset_formatter_config",
    "set_formatter_config",
    # Errors
    "ConfigError",
    "MdAnsiError",
    "SinkError",
]
