"""ContextVar-based formatter configuration for mdansi.

A formatter reads its configuration once, at construction. The default
comes from a ContextVar (PEP 567), so an application can set it once per
thread or task; an explicit ``config=`` argument always wins.

Usage:
    from mdansi import AnsiFormatter
    from mdansi.config import FormatterConfig, formatter_config_context

    with formatter_config_context(FormatterConfig(heading_markers=False)):
        formatter = AnsiFormatter()  # picks up heading_markers=False

    formatter = AnsiFormatter(config=FormatterConfig(thematic_break_width=80))

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields

from mdansi.errors import ConfigError


@dataclass(frozen=True, slots=True)
class FormatterConfig:
    """Immutable formatter configuration.

    Attributes:
        heading_markers: Keep the ``#`` markers (and the spacing after them)
            in heading output. When False they are dropped and only the
            styled heading text is written.
        thematic_break_width: Number of ``─`` characters in a rendered rule
        quote_glyph: Indicator written in place of a block-quote ``>``
        fence_label_prefix: Written before a code fence's language word
        compact_threshold: When set, ``render()`` drops the consumed lexer
            buffer once at least this many characters have been consumed.
            None leaves compaction to the caller (see ``Lexer.append``).

    """

    heading_markers: bool = True
    thematic_break_width: int = 50
    quote_glyph: str = "▎"
    fence_label_prefix: str = "——"
    compact_threshold: int | None = 4096

    def __post_init__(self) -> None:
        if self.thematic_break_width < 0:
            raise ConfigError("thematic_break_width", "must be >= 0")
        if self.compact_threshold is not None and self.compact_threshold < 1:
            raise ConfigError("compact_threshold", "must be >= 1 or None")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "FormatterConfig":
        """Create FormatterConfig from dictionary.

        Only includes keys that are valid FormatterConfig fields; unknown
        keys are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                FormatterConfig attribute names.

        Returns:
            New FormatterConfig instance with values from dict.

        Example:
            >>> config = FormatterConfig.from_dict({
            ...     "thematic_break_width": 72,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.thematic_break_width
            72

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: FormatterConfig = FormatterConfig()

_formatter_config: ContextVar[FormatterConfig] = ContextVar(
    "formatter_config",
    default=_DEFAULT_CONFIG,
)


def get_formatter_config() -> FormatterConfig:
    """Get current formatter configuration for this context."""
    return _formatter_config.get()


def set_formatter_config(config: FormatterConfig) -> None:
    """Set formatter configuration for current context.

    Args:
        config: FormatterConfig instance to use for this context.

    """
    _formatter_config.set(config)


def reset_formatter_config() -> None:
    """Reset to default configuration."""
    _formatter_config.set(_DEFAULT_CONFIG)


@contextmanager
def formatter_config_context(config: FormatterConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Args:
        config: FormatterConfig to use within the context.

    Yields:
        None

    """
    previous = _formatter_config.get()
    _formatter_config.set(config)
    try:
        yield
    finally:
        _formatter_config.set(previous)


__all__ = [
    "FormatterConfig",
    "get_formatter_config",
    "set_formatter_config",
    "reset_formatter_config",
    "formatter_config_context",
]
