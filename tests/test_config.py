"""Tests for ContextVar-based tokenizer configuration.

Validates field validation, thread isolation, and context manager behavior.
"""

from threading import Thread

import pytest

from orgtok import (
    ConfigError,
    ItemKind,
    LexConfig,
    Tokenizer,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from orgtok.charsets import DEFAULT_WHITESPACE


class TestLexConfigDataclass:
    """Test LexConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = LexConfig()
        assert config.whitespace == DEFAULT_WHITESPACE
        assert config.strict is False

    def test_immutability(self) -> None:
        config = LexConfig()
        with pytest.raises(AttributeError):
            config.strict = True  # type: ignore[misc]

    def test_whitespace_string_is_coerced(self) -> None:
        config = LexConfig(whitespace=" \t")  # type: ignore[arg-type]
        assert config.whitespace == frozenset(" \t")

    @pytest.mark.parametrize("bad", ["\n", "*", "|", "é", ["  "], "ab", "\u00a0"])
    def test_invalid_whitespace_rejected(self, bad: object) -> None:
        with pytest.raises(ConfigError) as exc_info:
            LexConfig(whitespace=bad)  # type: ignore[arg-type]
        assert exc_info.value.option == "whitespace"

    @pytest.mark.parametrize("bad", ["", " ", "\t", " \r\f\v", "\t\r"])
    def test_space_and_tab_required(self, bad: str) -> None:
        with pytest.raises(ConfigError, match="must include"):
            LexConfig(whitespace=bad)  # type: ignore[arg-type]

    def test_letters_rejected(self) -> None:
        with pytest.raises(ConfigError, match="not a whitespace character"):
            LexConfig(whitespace=" \tab")  # type: ignore[arg-type]

    def test_bytes_whitespace_rejected(self) -> None:
        with pytest.raises(ConfigError):
            LexConfig(whitespace=b" ")  # type: ignore[arg-type]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = LexConfig.from_dict({"strict": True, "unknown_key": "ignored"})
        assert config.strict is True
        assert config.whitespace == DEFAULT_WHITESPACE

    def test_from_dict_coerces_whitespace(self) -> None:
        config = LexConfig.from_dict({"whitespace": [" ", "\t"]})
        assert config.whitespace == frozenset(" \t")


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def test_default_config(self) -> None:
        reset_lex_config()
        assert get_lex_config() == LexConfig()

    def test_set_and_reset(self) -> None:
        set_lex_config(LexConfig(strict=True))
        try:
            assert get_lex_config().strict is True
        finally:
            reset_lex_config()
        assert get_lex_config().strict is False

    def test_context_manager_restores(self) -> None:
        with lex_config_context(LexConfig(strict=True)):
            assert get_lex_config().strict is True
        assert get_lex_config().strict is False

    def test_context_manager_restores_on_exception(self) -> None:
        with pytest.raises(RuntimeError):
            with lex_config_context(LexConfig(strict=True)):
                raise RuntimeError("boom")
        assert get_lex_config().strict is False


class TestConfigAffectsTokenizer:
    """The whitespace set drives SPACE classification."""

    def test_optional_whitespace_can_be_dropped(self) -> None:
        with lex_config_context(LexConfig(whitespace=" \t")):  # type: ignore[arg-type]
            items = list(Tokenizer("a\rb \tc").tokenize())
        assert [(i.kind, i.value) for i in items] == [
            (ItemKind.WORD, "a\rb"),
            (ItemKind.SPACE, " \t"),
            (ItemKind.WORD, "c"),
            (ItemKind.EOF, ""),
        ]

    def test_space_and_tab_always_split_words(self) -> None:
        config = LexConfig(whitespace=" \t\f")  # type: ignore[arg-type]
        items = list(Tokenizer("a b\tc", config=config).tokenize())
        assert [i.kind for i in items] == [
            ItemKind.WORD,
            ItemKind.SPACE,
            ItemKind.WORD,
            ItemKind.SPACE,
            ItemKind.WORD,
            ItemKind.EOF,
        ]

    def test_explicit_config_beats_context(self) -> None:
        with lex_config_context(LexConfig(whitespace=" \t")):  # type: ignore[arg-type]
            tokenizer = Tokenizer("a\rb", config=LexConfig())
        assert tokenizer.next_item().value == "a"

    def test_config_read_at_construction(self) -> None:
        tokenizer = Tokenizer("a\rb")
        with lex_config_context(LexConfig(whitespace=" \t")):  # type: ignore[arg-type]
            items = list(tokenizer.tokenize())
        assert items[1].kind == ItemKind.SPACE


class TestThreadIsolation:
    """Config set in one thread is invisible to another."""

    def test_threads_have_independent_config(self) -> None:
        seen: dict[str, bool] = {}

        def worker(name: str, strict: bool) -> None:
            set_lex_config(LexConfig(strict=strict))
            seen[name] = get_lex_config().strict

        threads = [Thread(target=worker, args=(f"t{i}", i % 2 == 0)) for i in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert seen == {"t0": True, "t1": False, "t2": True, "t3": False}
        assert get_lex_config().strict is False
