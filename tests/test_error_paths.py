"""Tests for exception types and degradation on malformed input."""

import pytest

from mdansi import ConfigError, MdAnsiError, SinkError, render_ansi, render_raw


class TestExceptionHierarchy:
    def test_config_error_is_mdansi_error(self) -> None:
        assert issubclass(ConfigError, MdAnsiError)

    def test_sink_error_is_mdansi_error(self) -> None:
        assert issubclass(SinkError, MdAnsiError)

    def test_config_error_message(self) -> None:
        error = ConfigError("quote_glyph", "must not be empty")
        assert error.field == "quote_glyph"
        assert str(error) == "Invalid config 'quote_glyph': must not be empty"

    def test_catch_all_with_base_class(self) -> None:
        with pytest.raises(MdAnsiError):
            raise SinkError("no write")


class TestMalformedInputNeverRaises:
    """Broken markdown degrades to text instead of raising."""

    @pytest.mark.parametrize(
        "source",
        [
            "**unclosed",
            "*unclosed",
            "`unclosed",
            "```\nnever closed",
            "[text](",
            "![alt",
            "] ( ) [",
            ")))(((",
            "####### too deep",
            "> > >",
            "\x00\x1b[31m",
        ],
    )
    def test_malformed(self, source: str) -> None:
        assert render_raw(source) == source
        render_ansi(source)

