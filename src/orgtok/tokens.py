"""Item and ItemKind definitions for the orgtok tokenizer.

The tokenizer produces a flat stream of Item objects that an external
parser consumes. Each Item has a kind, the verbatim text it covers, and
the byte offsets of that text in the UTF-8 encoded source.

Thread Safety:
Item is frozen (immutable) and safe to share across threads.
ItemKind is an enum (inherently immutable).

Performance Note:
Item stores raw coordinates and lazily creates SourceLocation on demand,
so items whose location is never inspected cost no extra allocation.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from orgtok.location import SourceLocation


class ItemKind(Enum):
    """Kinds of items produced by the tokenizer.

    The member set is closed: parsers switch on these exact tags, so
    adding, removing, or renaming a member is a breaking change.

    """

    # Terminal items
    EOF = auto()
    ERROR = auto()

    # Runs
    WORD = auto()
    SPACE = auto()
    NEWLINE = auto()

    # Reserved punctuation (always one character per item)
    ASTERISK = auto()  # *
    HASH = auto()  # #
    PLUS = auto()  # +
    SLASH = auto()  # /
    EQUAL = auto()  # =
    TILDE = auto()  # ~
    DASH = auto()  # -
    UNDERSCORE = auto()  # _
    COLON = auto()  # :
    BRACKET_LEFT = auto()  # [
    BRACKET_RIGHT = auto()  # ]
    PIPE = auto()  # |

    @property
    def is_terminal(self) -> bool:
        """True for kinds that end the stream (EOF and ERROR)."""
        return self is ItemKind.EOF or self is ItemKind.ERROR


@dataclass(frozen=True, slots=True)
class Item:
    """A single classified, positioned unit of the tokenized stream.

    Attributes:
        kind: The item kind (from ItemKind enum)
        value: The exact source text consumed, never trimmed or folded
        start: Byte offset where value starts in the encoded source
        end: Byte offset just past value
        message: Description of the problem (ERROR items only)
        _lineno: Start line number (1-indexed)
        _col: Start column (1-indexed, counted in characters)
        _end_lineno: Line number just past the item
        _end_col: Column just past the item
        _source_file: Optional source file path

    """

    kind: ItemKind
    value: str
    start: int
    end: int
    message: str | None = None
    _lineno: int = 1
    _col: int = 1
    _end_lineno: int | None = None
    _end_col: int | None = None
    _source_file: str | None = None
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        from orgtok.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self.start,
            end_offset=self.end,
            end_lineno=self._end_lineno,
            end_col_offset=self._end_col,
            source_file=self._source_file,
        )
        # Idempotent write to the frozen cache field
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Item({self.kind.name}, {val!r}, {self._lineno}:{self._col})"

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Column offset (convenience accessor)."""
        return self._col

    @property
    def is_terminal(self) -> bool:
        return self.kind.is_terminal
