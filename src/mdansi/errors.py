"""Exception classes for mdansi.

Tokenizing and formatting never raise: malformed markdown degrades to
plain text. Exceptions are reserved for misuse of the API.
"""

from __future__ import annotations


class MdAnsiError(Exception):
    """Base exception for all mdansi errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(MdAnsiError):
    """Invalid formatter configuration value."""

    def __init__(self, field: str, message: str) -> None:
        """Initialize config error.

        Args:
            field: Name of the offending FormatterConfig field
            message: Description of the problem
        """
        self.field = field
        super().__init__(f"Invalid config '{field}': {message}")


class SinkError(MdAnsiError):
    """Object given as an output sink cannot accept writes."""

    pass
