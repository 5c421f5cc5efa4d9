"""ContextVar-based tokenizer configuration for orgtok.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Tokenizer reads the active config once, at construction.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from orgtok.config import LexConfig, lex_config_context

    with lex_config_context(LexConfig(strict=True)):
        items = orgtok.tokenize(source)  # raises EncodingError on bad bytes

"""

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from orgtok.charsets import DEFAULT_WHITESPACE, NEWLINE, REQUIRED_WHITESPACE
from orgtok.errors import ConfigError


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable tokenizer configuration.

    Note: source_file is intentionally excluded. It is per-document state
    and stays on the Tokenizer instance.

    Attributes:
        whitespace: ASCII whitespace that coalesces into SPACE items. Space
            and tab are always included; carriage return, form feed and
            vertical tab are optional. Accepts any iterable of single
            characters (a plain string works).
        strict: Raise EncodingError from orgtok.tokenize() instead of
            returning a stream that ends with an ERROR item

    """

    whitespace: frozenset[str] = DEFAULT_WHITESPACE
    strict: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.whitespace, frozenset):
            object.__setattr__(self, "whitespace", _coerce_charset(self.whitespace))
        for char in self.whitespace:
            if not isinstance(char, str) or len(char) != 1:
                raise ConfigError("whitespace", f"expected single characters, got {char!r}")
            if not char.isascii():
                raise ConfigError("whitespace", f"{char!r} is not an ASCII character")
            if char == NEWLINE:
                raise ConfigError("whitespace", "newline is always its own item")
            if not char.isspace():
                raise ConfigError("whitespace", f"{char!r} is not a whitespace character")
        missing = REQUIRED_WHITESPACE - self.whitespace
        if missing:
            raise ConfigError("whitespace", f"must include {sorted(missing)!r}")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LexConfig":
        """Create LexConfig from dictionary.

        Only includes keys that are valid LexConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = LexConfig.from_dict({"whitespace": " \\t", "other": 1})
            >>> sorted(config.whitespace)
            ['\\t', ' ']

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


def _coerce_charset(chars: Iterable[str]) -> frozenset[str]:
    if isinstance(chars, (bytes, bytearray)):
        raise ConfigError("whitespace", "expected str characters, got bytes")
    try:
        return frozenset(chars)
    except TypeError as exc:
        raise ConfigError("whitespace", f"expected an iterable of characters, got {chars!r}") from exc


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexConfig = LexConfig()

_lex_config: ContextVar[LexConfig] = ContextVar(
    "lex_config",
    default=_DEFAULT_CONFIG,
)


def get_lex_config() -> LexConfig:
    """Get current tokenizer configuration (thread-local)."""
    return _lex_config.get()


def set_lex_config(config: LexConfig) -> None:
    """Set tokenizer configuration for current context.

    Args:
        config: LexConfig instance to use for this context.

    """
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton.

    """
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with lex_config_context(LexConfig(whitespace=" \\t")):
        ...     items = list(Tokenizer("a\\rb").tokenize())
        >>> # Automatically reset to previous config

    """
    previous = _lex_config.get()
    _lex_config.set(config)
    try:
        yield
    finally:
        _lex_config.set(previous)


__all__ = [
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
]
