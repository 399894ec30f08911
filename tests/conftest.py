"""Shared fixtures for mdansi tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from mdansi import AnsiFormatter, MemorySink, RawFormatter
from mdansi.config import FormatterConfig


@pytest.fixture
def render() -> Callable[..., str]:
    """Render markdown chunks through an AnsiFormatter without finishing.

    Usage:
        def test_bold(render):
            assert render("**hi**") == BOLD + "hi" + RESET_BOLD
    """

    def _render(*chunks: str, config: FormatterConfig | None = None) -> str:
        formatter = AnsiFormatter(MemorySink(), config=config)
        for chunk in chunks:
            formatter.append(chunk)
            formatter.render()
        output = formatter.get_captured_output()
        assert output is not None
        return output

    return _render


@pytest.fixture
def render_raw_chunks() -> Callable[..., str]:
    """Render chunks through a RawFormatter and finish."""

    def _render(*chunks: str) -> str:
        formatter = RawFormatter(MemorySink())
        for chunk in chunks:
            formatter.append(chunk)
            formatter.render()
        formatter.finish()
        output = formatter.get_captured_output()
        assert output is not None
        return output

    return _render
