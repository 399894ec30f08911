"""Shared driver for streaming formatters.

StreamFormatter owns a Lexer, an output sink and a config. It pulls tokens
on ``render()`` and hands each one to ``_handle``; subclasses decide what
to write.

Thread Safety:
A formatter is owned by one caller. Create one per output stream.

"""

from __future__ import annotations

from mdansi.config import FormatterConfig, get_formatter_config
from mdansi.errors import SinkError
from mdansi.lexer import Lexer
from mdansi.sinks import ConsoleSink, MemorySink, OutputSink
from mdansi.tokens import Token, TokenType
from mdansi.utils.logger import get_logger

logger = get_logger(__name__)


class StreamFormatter:
    """Base class: append chunks, render what is available.

    Subclasses implement ``_handle(token)`` and, when they keep state,
    ``_reset_state()`` and ``_finish()``.

    """

    __slots__ = ("_lexer", "_sink", "_config")

    def __init__(
        self,
        sink: OutputSink | None = None,
        *,
        config: FormatterConfig | None = None,
    ) -> None:
        """Initialize formatter.

        Args:
            sink: Output destination (console when omitted)
            config: Formatter config (context default when omitted)
        """
        self._lexer = Lexer()
        self._sink: OutputSink = sink if sink is not None else ConsoleSink()
        self._config = config if config is not None else get_formatter_config()

    @property
    def lexer(self) -> Lexer:
        return self._lexer

    @property
    def output_sink(self) -> OutputSink:
        return self._sink

    @property
    def config(self) -> FormatterConfig:
        return self._config

    def append(self, text: str) -> None:
        """Queue markdown text; nothing is written until ``render()``."""
        self._lexer.append(text)

    def render(self) -> None:
        """Drain every token currently available and write the output.

        Intended to be called once per ``append``. EOF here means "end of
        input so far".
        """
        lexer = self._lexer
        while True:
            token = lexer.next()
            self._handle(token)
            if token.type is TokenType.EOF:
                break

        threshold = self._config.compact_threshold
        if threshold is not None and lexer.cursor >= threshold:
            self.clear_processed_buffer()

    def finish(self) -> None:
        """Mark the end of the stream, flushing anything held back."""
        self.render()
        self._finish()

    def reset(self) -> None:
        """Clear formatting state and the lexer buffer.

        A MemorySink is swapped for a fresh one so captured output from the
        previous session cannot leak into the next. Other sinks stay attached.
        """
        self._reset_state()
        self._lexer.reset()
        if isinstance(self._sink, MemorySink):
            self._sink = MemorySink()
            logger.debug("Formatter reset; replaced memory sink")
        else:
            logger.debug("Formatter reset")

    def get_captured_output(self) -> str | None:
        """Return captured text when writing to a MemorySink, else None."""
        if isinstance(self._sink, MemorySink):
            return self._sink.getvalue()
        return None

    def set_output_sink(self, sink: OutputSink) -> None:
        """Redirect subsequent output to ``sink``.

        Raises:
            SinkError: If ``sink`` has no callable ``write``.
        """
        if not callable(getattr(sink, "write", None)):
            raise SinkError(f"{type(sink).__name__} has no callable write()")
        self._sink = sink

    def clear_processed_buffer(self) -> None:
        """Drop consumed input from the lexer buffer."""
        dropped = self._lexer.clear_processed()
        if dropped:
            logger.debug("Compacted lexer buffer: dropped %d characters", dropped)

    def _write(self, text: str) -> None:
        self._sink.write(text)

    def _handle(self, token: Token) -> None:
        """Write output for one token. Implemented by subclasses."""
        raise NotImplementedError

    def _reset_state(self) -> None:
        """Clear subclass formatting state."""

    def _finish(self) -> None:
        """Flush subclass state at end of stream."""
