"""Tests for ContextVar-based lexer configuration.

Validates thread isolation, context manager behavior, and how the
lexer and tokenize() pick up the active config.
"""

from threading import Thread

import pytest

from parlex import (
    LexConfig,
    LexicalError,
    Lexer,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
    tokenize,
)


@pytest.fixture(autouse=True)
def _clean_config():
    reset_lex_config()
    yield
    reset_lex_config()


class TestLexConfigDataclass:
    """Test LexConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = LexConfig()
        assert config.encoding == "utf-8"
        assert config.strict is False

    def test_immutability(self) -> None:
        config = LexConfig()
        with pytest.raises(AttributeError):
            config.strict = True  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = LexConfig.from_dict({"strict": True, "unknown_key": 1})
        assert config.strict is True
        assert config.encoding == "utf-8"


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def test_get_returns_default(self) -> None:
        assert get_lex_config() == LexConfig()

    def test_set_and_reset(self) -> None:
        set_lex_config(LexConfig(strict=True))
        assert get_lex_config().strict is True
        reset_lex_config()
        assert get_lex_config().strict is False

    def test_context_manager_restores(self) -> None:
        with lex_config_context(LexConfig(encoding="latin-1")):
            assert get_lex_config().encoding == "latin-1"
        assert get_lex_config().encoding == "utf-8"

    def test_context_manager_restores_on_exception(self) -> None:
        with pytest.raises(RuntimeError):
            with lex_config_context(LexConfig(strict=True)):
                raise RuntimeError("boom")
        assert get_lex_config().strict is False

    def test_thread_isolation(self) -> None:
        seen: list[bool] = []

        def worker() -> None:
            seen.append(get_lex_config().strict)

        set_lex_config(LexConfig(strict=True))
        thread = Thread(target=worker)
        thread.start()
        thread.join()

        assert seen == [False]
        assert get_lex_config().strict is True


class TestConfigEffects:
    """The lexer and tokenize() honour the active config."""

    def test_encoding_applies_to_str_input(self) -> None:
        with lex_config_context(LexConfig(encoding="latin-1")):
            results = list(Lexer("é").tokenize())
        assert len(results) == 1
        assert results[0].raw == b"\xe9"

    def test_explicit_encoding_wins(self) -> None:
        with lex_config_context(LexConfig(encoding="latin-1")):
            results = list(Lexer("é", encoding="utf-8").tokenize())
        assert len(results) == 2

    def test_strict_from_config(self) -> None:
        with lex_config_context(LexConfig(strict=True)):
            with pytest.raises(LexicalError):
                list(tokenize("a ="))

    def test_explicit_strict_false_overrides_config(self) -> None:
        with lex_config_context(LexConfig(strict=True)):
            assert len(list(tokenize("a =", strict=False))) == 2
