"""
orgtok — Tokenizer for Org-style plain-text markup

Turns a document into a flat, lossless stream of typed items (words,
whitespace runs, newlines, and single-character markup punctuation) for a
downstream parser to interpret. Zero runtime dependencies.

Quick Start:
    >>> from orgtok import tokenize
    >>> [item.kind.name for item in tokenize("#+BEGIN_SRC sh\\n")]
    ['HASH', 'PLUS', 'WORD', 'UNDERSCORE', 'WORD', 'SPACE', 'WORD', 'NEWLINE', 'EOF']

    >>> # Or pull items one at a time
    >>> from orgtok import Tokenizer
    >>> tokenizer = Tokenizer("this is *bold*")
    >>> tokenizer.next_item()
    Item(WORD, 'this', 1:1)

Installation:
    pip install orgtok
"""

from orgtok.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from orgtok.errors import ConfigError, EncodingError, OrgtokError
from orgtok.lexer import Tokenizer
from orgtok.location import SourceLocation
from orgtok.tokens import Item, ItemKind
from orgtok.utils.logger import get_logger

__version__ = "0.1.0"

logger = get_logger(__name__)


def tokenize(
    source: str | bytes,
    *,
    source_file: str | None = None,
    config: LexConfig | None = None,
) -> list[Item]:
    """Tokenize a whole document into a list of items.

    The list always ends with exactly one terminal item. In strict mode
    an ERROR item is raised as EncodingError instead of being returned.

    Args:
        source: Document text (str, or UTF-8 bytes)
        source_file: Optional source file path for diagnostics
        config: Tokenizer config (defaults to the active context config)

    Returns:
        Items in source order, ending with EOF or ERROR.

    Raises:
        EncodingError: source is not valid UTF-8 and config.strict is set.

    Example:
        >>> [item.value for item in tokenize("uni-gopher")]
        ['uni', '-', 'gopher', '']
    """
    tokenizer = Tokenizer(source, source_file=source_file, config=config)
    items = list(tokenizer.tokenize())

    last = items[-1]
    if last.kind is ItemKind.ERROR and tokenizer.config.strict:
        logger.debug("Strict mode: raising on ERROR item at byte %d", last.start)
        raise EncodingError(
            last.message or "invalid UTF-8",
            lineno=last.lineno,
            col_offset=last.col,
            offset=last.start,
            source_file=source_file,
        )
    return items


__all__ = [
    # Main API
    "tokenize",
    "Tokenizer",
    "__version__",
    # Items
    "Item",
    "ItemKind",
    "SourceLocation",
    # Configuration
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
    # Errors
    "OrgtokError",
    "EncodingError",
    "ConfigError",
]
