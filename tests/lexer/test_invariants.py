"""Property-based tests for lexer invariants.

Uses Hypothesis to check that the lexer terminates, never loses
characters, and behaves the same whether or not the buffer is compacted.
"""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from mdansi.lexer import Lexer
from mdansi.tokens import TokenType

# Markdown-heavy alphabets. Leading spaces before a thematic break are
# consumed without a token, so round-trip alphabets avoid mixing spaces
# with break characters.
MARKUP_NO_SPACES = "ab#>`[]()!*-_\t\n"
MARKUP_NO_BREAKS = "ab #>`[]()!\t\n"

markdown_text = st.text(alphabet=MARKUP_NO_SPACES + " ", max_size=200)


def drain_values(lexer: Lexer) -> list[str]:
    return [t.value for t in lexer.tokenize()]


def chunked(source: str, cuts: list[int]) -> list[str]:
    """Split source at the given (unsorted, possibly repeated) positions."""
    points = sorted({min(c, len(source)) for c in cuts})
    pieces = []
    last = 0
    for point in points:
        pieces.append(source[last:point])
        last = point
    pieces.append(source[last:])
    return pieces


class TestTermination:
    """The lexer always makes progress and ends with EOF."""

    @given(st.text(max_size=200))
    @settings(max_examples=200)
    def test_ends_with_single_eof(self, source: str) -> None:
        tokens = list(Lexer(source).tokenize())
        assert tokens[-1].type == TokenType.EOF
        assert sum(1 for t in tokens if t.type == TokenType.EOF) == 1

    @given(markdown_text)
    @settings(max_examples=200)
    def test_non_eof_tokens_are_non_empty(self, source: str) -> None:
        for token in list(Lexer(source).tokenize())[:-1]:
            assert token.value

    @given(markdown_text)
    @settings(max_examples=200)
    def test_offsets_are_ordered_and_in_bounds(self, source: str) -> None:
        tokens = list(Lexer(source).tokenize())
        previous_end = 0
        for token in tokens:
            assert token.offset >= previous_end
            assert source[token.offset : token.end_offset] == token.value
            previous_end = token.end_offset
        assert tokens[-1].offset == len(source)

    @given(markdown_text)
    @settings(max_examples=100)
    def test_deterministic(self, source: str) -> None:
        assert list(Lexer(source).tokenize()) == list(Lexer(source).tokenize())


class TestRoundTrip:
    """Token values concatenate back to the input."""

    @given(st.text(alphabet=MARKUP_NO_SPACES, max_size=200))
    @settings(max_examples=200)
    def test_markup_without_spaces(self, source: str) -> None:
        assert "".join(drain_values(Lexer(source))) == source

    @given(st.text(alphabet=MARKUP_NO_BREAKS, max_size=200))
    @settings(max_examples=200)
    def test_markup_without_break_characters(self, source: str) -> None:
        assert "".join(drain_values(Lexer(source))) == source

    @given(
        st.text(alphabet=MARKUP_NO_SPACES, max_size=200),
        st.lists(st.integers(min_value=0, max_value=200), max_size=10),
    )
    @settings(max_examples=200)
    def test_any_chunking(self, source: str, cuts: list[int]) -> None:
        lexer = Lexer()
        values = []
        for piece in chunked(source, cuts):
            lexer.append(piece)
            values.extend(drain_values(lexer))
        assert "".join(values) == source


class TestCompactionTransparency:
    """Compacting between chunks never changes the token stream."""

    @given(
        markdown_text,
        st.lists(st.integers(min_value=0, max_value=200), max_size=10),
    )
    @settings(max_examples=200)
    def test_same_tokens_with_and_without_compaction(
        self, source: str, cuts: list[int]
    ) -> None:
        plain = Lexer()
        compacted = Lexer()
        plain_tokens = []
        compacted_tokens = []
        for piece in chunked(source, cuts):
            plain.append(piece)
            compacted.append(piece)
            plain_tokens.extend(plain.tokenize())
            compacted_tokens.extend(compacted.tokenize())
            compacted.clear_processed()
        assert compacted_tokens == plain_tokens
        assert compacted.buffer == ""


class TestLineChunking:
    """Feeding whole lines gives the same tokens as feeding the document."""

    @given(markdown_text)
    @settings(max_examples=200)
    def test_line_chunks_match_whole_document(self, source: str) -> None:
        whole = [t for t in Lexer(source).tokenize() if t.type != TokenType.EOF]

        lexer = Lexer()
        streamed = []
        for line in source.split("\n")[:-1]:
            lexer.append(line + "\n")
            streamed.extend(t for t in lexer.tokenize() if t.type != TokenType.EOF)
        lexer.append(source.split("\n")[-1])
        streamed.extend(t for t in lexer.tokenize() if t.type != TokenType.EOF)

        assert streamed == whole
