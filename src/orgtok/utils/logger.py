"""Logging helpers for orgtok.

All package loggers live under the "orgtok" namespace. The namespace root
carries a NullHandler, so records are dropped quietly until the application
configures logging; they still propagate to any handlers it installs.

Example:
    >>> import logging
    >>> logging.basicConfig(level=logging.DEBUG)
    >>> list(Tokenizer(b"\\xff").tokenize())  # logs "Tokenizer stopped at byte 0 ..."
"""

from __future__ import annotations

import logging

LOGGER_NAMESPACE = "orgtok"

logging.getLogger(LOGGER_NAMESPACE).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return the logger for name, placed under the orgtok namespace.

    Module names inside the package ("orgtok.lexer.core") are used as-is;
    any other name is nested below the root ("mymodule" -> "orgtok.mymodule").
    """
    if name != LOGGER_NAMESPACE and not name.startswith(LOGGER_NAMESPACE + "."):
        name = f"{LOGGER_NAMESPACE}.{name}"
    return logging.getLogger(name)
