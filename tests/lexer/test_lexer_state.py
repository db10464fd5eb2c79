"""Tests ensuring lexer state is consistent between calls.

The only state carried across calls is the cursor and the line counter;
the mode reflects the scanner used for the most recent call.
"""

from __future__ import annotations

from papyrus.config import LexConfig, lex_config_context
from papyrus.errors import TokenizeError
from papyrus.lexer import Lexer, LexerMode
from papyrus.tokens import Token


class TestModeTransitions:
    """Verify the lexer reports the scanner it last used."""

    def test_empty_source_starts_at_eof(self) -> None:
        assert Lexer("")._mode == LexerMode.EOF

    def test_text_then_tag_then_eof(self) -> None:
        lexer = Lexer("a[user:1]")

        lexer.next_token()
        assert lexer._mode == LexerMode.TEXT
        lexer.next_token()
        assert lexer._mode == LexerMode.TAG
        lexer.next_token()
        assert lexer._mode == LexerMode.EOF

    def test_dispatch_follows_mode(self) -> None:
        """The scanner is chosen by the mode, not by re-reading the source."""
        lexer = Lexer("[user:1]")
        lexer._advance()

        lexer._mode = LexerMode.TEXT
        assert lexer._dispatch_mode(lexer.position) == Token.text("[user:1]")

    def test_eof_mode_dispatches_nothing(self) -> None:
        lexer = Lexer("abc")
        lexer._mode = LexerMode.EOF

        assert lexer._dispatch_mode(lexer.position) is None
        assert lexer._pos == 0

    def test_failed_tag_leaves_tag_mode(self) -> None:
        lexer = Lexer("[bad]")
        try:
            lexer.next_token()
        except TokenizeError:
            pass
        assert lexer._mode == LexerMode.TAG


class TestCursor:
    """Verify the cursor advances past every consumed character."""

    def test_closing_bracket_consumed(self) -> None:
        lexer = Lexer("[user:1]rest")
        lexer.next_token()
        assert lexer._pos == len("[user:1]")

    def test_text_stops_before_bracket(self) -> None:
        lexer = Lexer("abc[user:1]")
        lexer.next_token()
        assert lexer._pos == 3

    def test_cursor_at_end_after_unterminated_tag(self) -> None:
        lexer = Lexer("[user:1")
        lexer.next_token()
        assert lexer._pos == len("[user:1")


class TestConfigSnapshot:
    """The lexer keeps the config that was active when it was built."""

    def test_picks_up_context_config(self) -> None:
        config = LexConfig(strict_brackets=True)
        with lex_config_context(config):
            lexer = Lexer("[user:1")
        assert lexer._config is config

    def test_explicit_config_wins(self) -> None:
        explicit = LexConfig(max_id=5)
        with lex_config_context(LexConfig(max_id=10)):
            lexer = Lexer("", config=explicit)
        assert lexer._config is explicit
