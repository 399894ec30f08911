"""MarkdownFormatter protocol — stable interface for streaming formatters.

Any formatter that accepts chunks with ``append`` and writes output on
``render`` conforms to this protocol. ``AnsiFormatter`` and ``RawFormatter``
are the built-in implementations.

Example:
    from mdansi.formatters.protocol import MarkdownFormatter

    def pump(formatter: MarkdownFormatter, chunks: Iterable[str]) -> None:
        for chunk in chunks:
            formatter.append(chunk)
            formatter.render()
        formatter.finish()

"""

from typing import Protocol

from mdansi.sinks import OutputSink


class MarkdownFormatter(Protocol):
    """Protocol for incremental markdown formatters."""

    def append(self, text: str) -> None:
        """Queue markdown text for formatting."""
        ...

    def render(self) -> None:
        """Format every token currently available and write it to the sink."""
        ...

    def finish(self) -> None:
        """Flush held output at the end of the stream."""
        ...

    def reset(self) -> None:
        """Discard buffered input and formatting state."""
        ...

    def get_captured_output(self) -> str | None:
        """Captured text for in-memory sinks, None otherwise."""
        ...

    def set_output_sink(self, sink: OutputSink) -> None:
        """Redirect subsequent output."""
        ...

    def clear_processed_buffer(self) -> None:
        """Drop already-consumed input from the lexer buffer."""
        ...
