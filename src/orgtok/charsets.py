"""Character sets and the byte classification table.

Every reserved character is ASCII, and in UTF-8 no byte of a multi-byte
sequence falls in the ASCII range, so the tokenizer classifies the
encoded buffer one byte at a time. Bytes >= 0x80 are always word bytes.

Usage:
    from orgtok.charsets import build_byte_table, DEFAULT_WHITESPACE

    table = build_byte_table(DEFAULT_WHITESPACE)
    if table[buf[pos]] is ItemKind.WORD:  # O(1) lookup
        ...
"""

from __future__ import annotations

from functools import lru_cache

from orgtok.tokens import ItemKind

NEWLINE = "\n"

# Non-newline whitespace that coalesces into SPACE items
DEFAULT_WHITESPACE: frozenset[str] = frozenset(" \t\r\f\v")

# Members every configured whitespace set must keep
REQUIRED_WHITESPACE: frozenset[str] = frozenset(" \t")

# Reserved punctuation, one item per character
PUNCTUATION_KINDS: dict[str, ItemKind] = {
    "*": ItemKind.ASTERISK,
    "#": ItemKind.HASH,
    "+": ItemKind.PLUS,
    "/": ItemKind.SLASH,
    "=": ItemKind.EQUAL,
    "~": ItemKind.TILDE,
    "-": ItemKind.DASH,
    "_": ItemKind.UNDERSCORE,
    ":": ItemKind.COLON,
    "[": ItemKind.BRACKET_LEFT,
    "]": ItemKind.BRACKET_RIGHT,
    "|": ItemKind.PIPE,
}

RESERVED_PUNCTUATION: frozenset[str] = frozenset(PUNCTUATION_KINDS)


@lru_cache(maxsize=16)
def build_byte_table(whitespace: frozenset[str]) -> tuple[ItemKind, ...]:
    """Build the 256-entry byte -> ItemKind dispatch table.

    Entries are NEWLINE, SPACE, a punctuation kind, or WORD for every
    byte that starts or continues a word.

    Args:
        whitespace: ASCII characters treated as non-newline whitespace

    Returns:
        Tuple indexed by byte value.
    """
    table = [ItemKind.WORD] * 256
    for char in whitespace:
        table[ord(char)] = ItemKind.SPACE
    table[ord(NEWLINE)] = ItemKind.NEWLINE
    for char, kind in PUNCTUATION_KINDS.items():
        table[ord(char)] = kind
    return tuple(table)
