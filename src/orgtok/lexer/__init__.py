"""Pull-based tokenizer for orgtok.

Architecture:
lexer/
├── __init__.py          # Re-exports Tokenizer
└── core.py              # Tokenizer class (scan loop + item bookkeeping)

The classification table lives in orgtok.charsets so that configuration
validation can share it without importing the tokenizer.

Usage:
    >>> from orgtok.lexer import Tokenizer
    >>> for item in Tokenizer("uni-gopher").tokenize():
    ...     print(item)
Item(WORD, 'uni', 1:1)
Item(DASH, '-', 1:4)
Item(WORD, 'gopher', 1:5)
Item(EOF, '', 1:11)

"""

from orgtok.lexer.core import Tokenizer

__all__ = ["Tokenizer"]
