"""Tests for single-chunk tokenization.

Covers the marker characters, whitespace handling, and text runs.
"""

from __future__ import annotations

from mdansi.lexer import Lexer
from mdansi.tokens import Token, TokenType


def lex(source: str) -> list[tuple[TokenType, str]]:
    """Tokenize source and return (type, value) pairs without the EOF."""
    tokens = list(Lexer(source).tokenize())
    assert tokens[-1].type == TokenType.EOF
    return [(t.type, t.value) for t in tokens[:-1]]


class TestTextAndWhitespace:
    """Plain text runs, whitespace and newlines."""

    def test_words_and_offsets(self) -> None:
        tokens = list(Lexer("hello world").tokenize())
        assert tokens == [
            Token(TokenType.TEXT, "hello", 0),
            Token(TokenType.WHITESPACE, " ", 5),
            Token(TokenType.TEXT, "world", 6),
            Token(TokenType.EOF, "", 11),
        ]

    def test_each_space_and_tab_is_its_own_token(self) -> None:
        assert lex("a\tb  c") == [
            (TokenType.TEXT, "a"),
            (TokenType.WHITESPACE, "\t"),
            (TokenType.TEXT, "b"),
            (TokenType.WHITESPACE, " "),
            (TokenType.WHITESPACE, " "),
            (TokenType.TEXT, "c"),
        ]

    def test_newline(self) -> None:
        assert lex("line1\nline2") == [
            (TokenType.TEXT, "line1"),
            (TokenType.NEWLINE, "\n"),
            (TokenType.TEXT, "line2"),
        ]

    def test_empty_input_is_eof(self) -> None:
        lexer = Lexer()
        assert lexer.next().type == TokenType.EOF
        lexer.append("")
        assert lexer.next().type == TokenType.EOF

    def test_sentinel_ends_text_run(self) -> None:
        assert lex("Hi! there") == [
            (TokenType.TEXT, "Hi"),
            (TokenType.TEXT, "!"),
            (TokenType.WHITESPACE, " "),
            (TokenType.TEXT, "there"),
        ]

    def test_bang_starts_a_run(self) -> None:
        assert lex("a!b") == [(TokenType.TEXT, "a"), (TokenType.TEXT, "!b")]

    def test_special_characters_kept_in_text(self) -> None:
        assert lex("Text & < characters") == [
            (TokenType.TEXT, "Text"),
            (TokenType.WHITESPACE, " "),
            (TokenType.TEXT, "&"),
            (TokenType.WHITESPACE, " "),
            (TokenType.TEXT, "<"),
            (TokenType.WHITESPACE, " "),
            (TokenType.TEXT, "characters"),
        ]


class TestMarkers:
    """Single-character and double-character markers."""

    def test_heading(self) -> None:
        assert lex("# Heading") == [
            (TokenType.HEADING_MARKER, "#"),
            (TokenType.WHITESPACE, " "),
            (TokenType.TEXT, "Heading"),
        ]

    def test_each_hash_is_a_marker(self) -> None:
        assert lex("## Level 2")[:3] == [
            (TokenType.HEADING_MARKER, "#"),
            (TokenType.HEADING_MARKER, "#"),
            (TokenType.WHITESPACE, " "),
        ]

    def test_emphasis(self) -> None:
        assert lex("*italic* text") == [
            (TokenType.EMPHASIS_MARKER, "*"),
            (TokenType.TEXT, "italic"),
            (TokenType.EMPHASIS_MARKER, "*"),
            (TokenType.WHITESPACE, " "),
            (TokenType.TEXT, "text"),
        ]

    def test_strong(self) -> None:
        assert lex("**bold** text") == [
            (TokenType.STRONG_MARKER, "**"),
            (TokenType.TEXT, "bold"),
            (TokenType.STRONG_MARKER, "**"),
            (TokenType.WHITESPACE, " "),
            (TokenType.TEXT, "text"),
        ]

    def test_triple_star_after_text_is_strong_then_emphasis(self) -> None:
        assert lex("text ***") == [
            (TokenType.TEXT, "text"),
            (TokenType.WHITESPACE, " "),
            (TokenType.STRONG_MARKER, "**"),
            (TokenType.EMPHASIS_MARKER, "*"),
        ]

    def test_triple_star_with_text_at_line_start(self) -> None:
        assert lex("***bold***") == [
            (TokenType.STRONG_MARKER, "**"),
            (TokenType.EMPHASIS_MARKER, "*"),
            (TokenType.TEXT, "bold"),
            (TokenType.STRONG_MARKER, "**"),
            (TokenType.EMPHASIS_MARKER, "*"),
        ]

    def test_block_quote(self) -> None:
        assert lex("> Quote text")[:3] == [
            (TokenType.BLOCK_QUOTE_MARKER, ">"),
            (TokenType.WHITESPACE, " "),
            (TokenType.TEXT, "Quote"),
        ]

    def test_inline_code(self) -> None:
        assert lex("`code` here") == [
            (TokenType.CODE_MARKER, "`"),
            (TokenType.TEXT, "code"),
            (TokenType.CODE_MARKER, "`"),
            (TokenType.WHITESPACE, " "),
            (TokenType.TEXT, "here"),
        ]

    def test_mixed_content(self) -> None:
        types = [t for t, _ in lex("# **Bold Heading**\n> Quote with *emphasis*")]
        assert types == [
            TokenType.HEADING_MARKER,
            TokenType.WHITESPACE,
            TokenType.STRONG_MARKER,
            TokenType.TEXT,
            TokenType.WHITESPACE,
            TokenType.TEXT,
            TokenType.STRONG_MARKER,
            TokenType.NEWLINE,
            TokenType.BLOCK_QUOTE_MARKER,
            TokenType.WHITESPACE,
            TokenType.TEXT,
            TokenType.WHITESPACE,
            TokenType.TEXT,
            TokenType.WHITESPACE,
            TokenType.EMPHASIS_MARKER,
            TokenType.TEXT,
            TokenType.EMPHASIS_MARKER,
        ]


class TestTokenRepr:
    """Token convenience accessors."""

    def test_repr_is_compact(self) -> None:
        assert repr(Token(TokenType.TEXT, "hi", 3)) == "Token(TEXT, 'hi', @3)"

    def test_repr_truncates_long_values(self) -> None:
        assert "..." in repr(Token(TokenType.TEXT, "x" * 40, 0))

    def test_end_offset(self) -> None:
        assert Token(TokenType.TEXT, "abc", 4).end_offset == 7


class TestMixinComposition:
    """Stub declarations in one mixin never shadow another mixin's method."""

    def test_text_runs_resolve_to_text_scanner(self) -> None:
        from mdansi.lexer.scanners import TextScannerMixin

        assert Lexer._scan_text_run is TextScannerMixin._scan_text_run

    def test_link_transitions_resolve_to_link_classifier(self) -> None:
        from mdansi.lexer.classifiers import LinkClassifierMixin

        for name in ("_open_link", "_close_bracket", "_open_paren", "_close_paren", "_field_token"):
            assert getattr(Lexer, name) is getattr(LinkClassifierMixin, name)

    def test_token_factory_defined_on_lexer(self) -> None:
        assert "_make_token" in vars(Lexer)

    def test_plain_word(self) -> None:
        assert lex("hello") == [(TokenType.TEXT, "hello")]
