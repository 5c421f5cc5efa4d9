"""Pull-based tokenizer with O(n) guaranteed performance.

Each call to next_item() makes one classification decision at the cursor,
extends the run if the category coalesces, then commits the cursor. The
cursor never moves backwards and never rescans a byte.

No regex in the hot path. Classification is a single table lookup per byte.

Thread Safety:
Tokenizer instances are single-use. Create one per source document.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from orgtok.charsets import build_byte_table
from orgtok.config import LexConfig, get_lex_config
from orgtok.tokens import Item, ItemKind
from orgtok.utils.logger import get_logger

logger = get_logger(__name__)


class Tokenizer:
    """Context-free tokenizer for Org-style markup.

    Classification at the cursor:
    1. End of input: terminal EOF item
    2. Newline: one NEWLINE item per newline character
    3. Whitespace: one SPACE item for the whole run
    4. Reserved punctuation: one item per character, never merged
    5. Anything else: one WORD item for the maximal run
    6. Malformed UTF-8: terminal ERROR item covering the bad bytes

    Usage:
            >>> tokenizer = Tokenizer("**** foo\\n")
            >>> [item.kind.name for item in tokenizer.tokenize()]
        ['ASTERISK', 'ASTERISK', 'ASTERISK', 'ASTERISK', 'SPACE', 'WORD', 'NEWLINE', 'EOF']

    Thread Safety:
        Tokenizer instances are single-use and must be driven by one
        consumer at a time.

    """

    __slots__ = (
        "_buf",
        "_buf_len",  # Cached len(buf)
        "_limit",  # End of the valid UTF-8 prefix
        "_decode_error",  # UnicodeDecodeError at _limit, if any
        "_pos",
        "_lineno",
        "_col",
        "_source_file",
        "_config",
        "_table",
        "_terminal",  # EOF or ERROR item once emitted
    )

    def __init__(
        self,
        source: str | bytes | bytearray | memoryview,
        source_file: str | None = None,
        config: LexConfig | None = None,
    ) -> None:
        """Initialize tokenizer with source text.

        Args:
            source: Document text. str is encoded to UTF-8; bytes must
                already be UTF-8.
            source_file: Optional source file path for diagnostics
            config: Tokenizer config (defaults to the active context config)

        Raises:
            TypeError: source is neither str nor bytes-like.
        """
        if isinstance(source, str):
            # Lone surrogates become invalid bytes and surface as ERROR
            buf = source.encode("utf-8", "surrogatepass")
        elif isinstance(source, (bytes, bytearray, memoryview)):
            buf = bytes(source)
        else:
            raise TypeError(
                f"source must be str or bytes-like, not {type(source).__name__}"
            )

        self._buf = buf
        self._buf_len = len(buf)
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._source_file = source_file
        self._config = config if config is not None else get_lex_config()
        self._table = build_byte_table(self._config.whitespace)
        self._terminal: Item | None = None

        try:
            buf.decode("utf-8")
        except UnicodeDecodeError as exc:
            self._limit = exc.start
            self._decode_error: UnicodeDecodeError | None = exc
        else:
            self._limit = self._buf_len
            self._decode_error = None

    @property
    def config(self) -> LexConfig:
        return self._config

    @property
    def source_file(self) -> str | None:
        return self._source_file

    @property
    def exhausted(self) -> bool:
        """True once a terminal (EOF or ERROR) item has been emitted."""
        return self._terminal is not None

    def __iter__(self) -> Iterator[Item]:
        return self.tokenize()

    def tokenize(self) -> Iterator[Item]:
        """Tokenize source into an item stream.

        Yields:
            Item objects one at a time, ending with exactly one terminal item.

        Complexity: O(n) where n = len(source)
        Memory: O(1) iterator (items yielded, not accumulated)
        """
        while True:
            item = self.next_item()
            yield item
            if item.kind.is_terminal:
                return

    def next_item(self) -> Item:
        """Classify and consume the next item at the cursor.

        Once the stream has ended, every call returns the same terminal item.

        Returns:
            The next Item in the stream.
        """
        if self._terminal is not None:
            return self._terminal

        pos = self._pos
        if pos >= self._limit:
            if self._decode_error is not None:
                return self._emit_error(self._decode_error)
            return self._emit_terminal(self._make_item(ItemKind.EOF, "", pos, pos))

        kind = self._table[self._buf[pos]]
        if kind is ItemKind.SPACE or kind is ItemKind.WORD:
            end = self._scan_run(pos + 1, kind)
        else:
            # NEWLINE and reserved punctuation are always one byte
            end = pos + 1
        return self._commit(kind, end)

    # =========================================================================
    # Scanning helpers
    # =========================================================================

    def _scan_run(self, pos: int, kind: ItemKind) -> int:
        """Extend a run while bytes keep classifying as kind.

        Stops at the end of the valid prefix, so a word never swallows
        malformed bytes.

        Returns:
            Position just past the run.
        """
        buf = self._buf
        table = self._table
        limit = self._limit
        while pos < limit and table[buf[pos]] is kind:
            pos += 1
        return pos

    def _commit(self, kind: ItemKind, end: int) -> Item:
        """Build the item for [cursor, end) and advance the cursor past it."""
        start = self._pos
        # Runs only stop at ASCII bytes or at _limit, both character boundaries
        value = self._buf[start:end].decode("utf-8")
        item = self._make_item(kind, value, start, end)
        self._pos = end
        return item

    # =========================================================================
    # Item construction
    # =========================================================================

    def _make_item(
        self,
        kind: ItemKind,
        value: str,
        start: int,
        end: int,
        *,
        message: str | None = None,
    ) -> Item:
        """Create an Item at the current line/column, then advance them.

        Args:
            kind: The item kind.
            value: The verbatim source text.
            start: Start byte offset.
            end: End byte offset.
            message: Problem description for ERROR items.

        Returns:
            Item with raw coordinates for lazy location creation.
        """
        lineno = self._lineno
        col = self._col
        if kind is ItemKind.NEWLINE:
            self._lineno += 1
            self._col = 1
        else:
            self._col += len(value)

        return Item(
            kind=kind,
            value=value,
            start=start,
            end=end,
            message=message,
            _lineno=lineno,
            _col=col,
            _end_lineno=self._lineno,
            _end_col=self._col,
            _source_file=self._source_file,
        )

    def _emit_error(self, exc: UnicodeDecodeError) -> Item:
        """Emit the terminal ERROR item for the malformed bytes at the cursor."""
        bad = self._buf[exc.start : exc.end]
        message = f"invalid UTF-8 sequence {bad!r}: {exc.reason}"
        item = self._make_item(ItemKind.ERROR, "", exc.start, exc.end, message=message)
        logger.debug(
            "Tokenizer stopped at byte %d (%s:%d:%d): %s",
            exc.start,
            self._source_file or "<string>",
            item.lineno,
            item.col,
            message,
        )
        return self._emit_terminal(item)

    def _emit_terminal(self, item: Item) -> Item:
        self._terminal = item
        return item
