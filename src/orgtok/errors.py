"""Exception classes for orgtok.

The tokenizer itself never raises while scanning; malformed input ends
the stream with an ERROR item. These exceptions are raised by the
convenience API (strict mode) and by configuration validation.
"""

from __future__ import annotations


class OrgtokError(Exception):
    """Base exception for all orgtok errors.

    Subclass this for specific error categories.
    """

    pass


class EncodingError(OrgtokError):
    """Source text is not valid UTF-8.

    Raised in strict mode when the tokenizer emits an ERROR item.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize encoding error with optional location.

        Args:
            message: Error description
            lineno: Line number of the malformed bytes (1-indexed)
            col_offset: Column of the malformed bytes (1-indexed)
            offset: Byte offset of the malformed bytes
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.offset = offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class ConfigError(OrgtokError):
    """Invalid tokenizer configuration value."""

    def __init__(self, option: str, message: str) -> None:
        """Initialize config error.

        Args:
            option: Name of the offending LexConfig field
            message: Description of the problem
        """
        self.option = option
        super().__init__(f"Config option '{option}': {message}")
