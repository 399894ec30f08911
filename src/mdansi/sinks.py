"""Output sinks — destinations for formatted text.

A sink is anything with ``write(text) -> None``. Formatters depend only on
the ``OutputSink`` protocol; two implementations ship with mdansi:

- ConsoleSink: writes straight to a text stream (stdout by default)
- MemorySink: accumulates output in memory for tests and one-shot rendering

Example:
    from mdansi.sinks import MemorySink

    sink = MemorySink()
    sink.write("hello")
    sink.getvalue()  # 'hello'

"""

from __future__ import annotations

import sys
from typing import Protocol, TextIO, runtime_checkable


@runtime_checkable
class OutputSink(Protocol):
    """Protocol for formatter output destinations."""

    def write(self, text: str) -> None:
        """Write text to the destination.

        Args:
            text: Formatted text, possibly containing escape sequences.

        """
        ...


class ConsoleSink:
    """Write directly to a terminal stream, flushing after each write.

    The stream is looked up at write time when none was given, so
    redirections of ``sys.stdout`` (including pytest's capture) are honored.
    """

    __slots__ = ("_stream",)

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write(self, text: str) -> None:
        stream = self.stream
        stream.write(text)
        stream.flush()


class MemorySink:
    """Accumulate written text in memory.

    Appends to a list, joins on read. O(n) total vs O(n²) for repeated
    string concatenation.

    Usage:
            >>> sink = MemorySink()
            >>> sink.write("a")
            >>> sink.write("b")
            >>> sink.getvalue()
            'ab'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def write(self, text: str) -> None:
        """Record text (empty strings are skipped)."""
        if text:
            self._parts.append(text)

    def getvalue(self) -> str:
        """Return everything written so far."""
        if len(self._parts) > 1:
            # Collapse so repeated reads stay cheap
            self._parts[:] = ["".join(self._parts)]
        return self._parts[0] if self._parts else ""

    def clear(self) -> None:
        """Discard captured output."""
        self._parts.clear()
