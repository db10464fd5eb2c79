"""Tests for ContextVar-based lexer configuration.

Validates thread isolation, context manager behavior, and the effect of
each option on lexing.
"""

from threading import Thread

import pytest

from papyrus import (
    LexConfig,
    Lexer,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
    tokenize,
)
from papyrus.config import DEFAULT_MAX_ID
from papyrus.errors import CaptureParseError, TokenizeError, UnterminatedTagError
from papyrus.location import Position
from papyrus.tags import Tag
from papyrus.tokens import Token


class TestLexConfigDataclass:
    """Test LexConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = LexConfig()
        assert config.max_id == DEFAULT_MAX_ID == 2**64 - 1
        assert config.strict_brackets is False

    def test_immutability(self) -> None:
        config = LexConfig()
        with pytest.raises(AttributeError):
            config.strict_brackets = True  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = LexConfig.from_dict({"max_id": 10, "unknown_key": "ignored"})
        assert config == LexConfig(max_id=10)

    def test_from_dict_empty(self) -> None:
        assert LexConfig.from_dict({}) == LexConfig()


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def teardown_method(self) -> None:
        """Reset config after each test."""
        reset_lex_config()

    def test_default_config(self) -> None:
        assert get_lex_config() == LexConfig()

    def test_set_and_get(self) -> None:
        custom = LexConfig(strict_brackets=True)
        set_lex_config(custom)
        assert get_lex_config() is custom

    def test_reset_restores_default(self) -> None:
        set_lex_config(LexConfig(max_id=1))
        reset_lex_config()
        assert get_lex_config().max_id == DEFAULT_MAX_ID


class TestLexConfigContext:
    """Test lex_config_context context manager."""

    def test_context_sets_config(self) -> None:
        with lex_config_context(LexConfig(strict_brackets=True)):
            assert get_lex_config().strict_brackets is True
        assert get_lex_config().strict_brackets is False

    def test_nested_contexts(self) -> None:
        with lex_config_context(LexConfig(max_id=10)):
            with lex_config_context(LexConfig(strict_brackets=True)):
                assert get_lex_config().max_id == DEFAULT_MAX_ID
                assert get_lex_config().strict_brackets is True
            assert get_lex_config().max_id == 10
        assert get_lex_config() == LexConfig()

    def test_context_restores_on_exception(self) -> None:
        with pytest.raises(ValueError, match="test"):
            with lex_config_context(LexConfig(max_id=1)):
                raise ValueError("test")
        assert get_lex_config().max_id == DEFAULT_MAX_ID


class TestConfigEffects:
    """Options change how tags are accepted."""

    def test_max_id_from_context(self) -> None:
        with lex_config_context(LexConfig(max_id=100)):
            results = tokenize("[user:100][user:101]")

        assert results == [
            Token.tag(Tag.user(100)),
            TokenizeError(Position(1), CaptureParseError("101")),
        ]

    def test_strict_brackets_from_context(self) -> None:
        with lex_config_context(LexConfig(strict_brackets=True)):
            results = tokenize("[user:5")

        assert results == [TokenizeError(Position(1), UnterminatedTagError("[user:5"))]

    def test_explicit_config_argument(self) -> None:
        assert tokenize("[user:5", config=LexConfig(strict_brackets=True)) == [
            TokenizeError(Position(1), UnterminatedTagError("[user:5"))
        ]


class TestThreadIsolation:
    """Test thread-local configuration isolation."""

    def test_thread_isolation(self) -> None:
        """Each thread sees its own config."""
        results: dict[int, list] = {}

        def worker(thread_id: int, config: LexConfig) -> None:
            set_lex_config(config)
            results[thread_id] = list(Lexer("[article:50]").tokenize())

        configs = [LexConfig(max_id=10), LexConfig(max_id=100)]
        threads = [Thread(target=worker, args=(i, c)) for i, c in enumerate(configs)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results[0] == [TokenizeError(Position(1), CaptureParseError("50"))]
        assert results[1] == [Token.tag(Tag.article(50))]
        assert get_lex_config() == LexConfig()
