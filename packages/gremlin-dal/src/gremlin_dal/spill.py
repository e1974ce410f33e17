"""In-memory block spiller.

Rows are written into fixed-field `Block`s through a row-writer callback.
The spiller owns chunking: writers see one block and one row number per
call and report how many rows they produced.
"""

from collections.abc import Iterator, Mapping, Sequence
from typing import Any, ClassVar

from gremlin_dal.errors import DalError, ErrorKind
from gremlin_dal.logging import get_logger
from gremlin_dal.models.schema import Row, TableSchema
from gremlin_dal.protocols import RowWriter

logger = get_logger(__name__)

# Writers producing more rows than this per call take block sizing away from the spiller.
MAX_ROWS_PER_CALL = 10

DEFAULT_MAX_BLOCK_ROWS = 4096


class Block:
    """A chunk of output rows sharing one field list."""

    __slots__: ClassVar[tuple[str, str]] = ("_fields", "_rows")

    _fields: tuple[str, ...]
    _rows: list[Row]

    def __init__(self, fields: Sequence[str]) -> None:
        self._fields = tuple(fields)
        self._rows = []

    @property
    def fields(self) -> tuple[str, ...]:
        return self._fields

    @property
    def row_count(self) -> int:
        return len(self._rows)

    @property
    def rows(self) -> list[Row]:
        return list(self._rows)

    def set_row(self, row_num: int, values: Mapping[str, Any]) -> None:
        """Store `values` at `row_num`, matching them to fields by name.

        Fields missing from `values` are stored as None. Row numbers must
        be contiguous: writing past the end of the block is an error.
        """
        if row_num < 0 or row_num > len(self._rows):
            msg = f"Row {row_num} is out of range for a block of {len(self._rows)} rows"
            raise IndexError(msg)
        row = {name: values.get(name) for name in self._fields}
        if row_num == len(self._rows):
            self._rows.append(row)
        else:
            self._rows[row_num] = row


class InMemoryBlockSpiller:
    """Spiller that keeps sealed blocks in memory."""

    __slots__: ClassVar[tuple[str, ...]] = ("_blocks", "_current", "_fields", "_max_block_rows")

    _blocks: list[Block]
    _current: Block
    _fields: tuple[str, ...]
    _max_block_rows: int

    def __init__(self, table_schema: TableSchema, max_block_rows: int = DEFAULT_MAX_BLOCK_ROWS) -> None:
        if max_block_rows < 1:
            msg = "max_block_rows must be at least 1"
            raise ValueError(msg)
        self._fields = tuple(f.name for f in table_schema.fields)
        self._max_block_rows = max_block_rows
        self._blocks = []
        self._current = Block(self._fields)

    def write_rows(self, row_writer: RowWriter) -> None:
        """Run `row_writer` against the current block, sealing the block once it is full.

        A call that writes several rows may leave the sealed block up to
        `MAX_ROWS_PER_CALL - 1` rows past `max_block_rows`.
        """
        start = self._current.row_count
        written = row_writer(self._current, start)
        if written < 0 or written > MAX_ROWS_PER_CALL:
            msg = f"Row writer reported {written} rows, expected 0 to {MAX_ROWS_PER_CALL}"
            raise DalError(msg, kind=ErrorKind.SINK)
        if self._current.row_count != start + written:
            msg = (
                f"Row writer reported {written} rows but the block grew by "
                f"{self._current.row_count - start}"
            )
            raise DalError(msg, kind=ErrorKind.SINK)
        if self._current.row_count >= self._max_block_rows:
            self._seal()

    def _seal(self) -> None:
        logger.debug("block_sealed", rows=self._current.row_count)
        self._blocks.append(self._current)
        self._current = Block(self._fields)

    @property
    def blocks(self) -> list[Block]:
        """Sealed blocks followed by the current one when it holds rows."""
        if self._current.row_count:
            return [*self._blocks, self._current]
        return list(self._blocks)

    @property
    def row_count(self) -> int:
        return sum(block.row_count for block in self.blocks)

    def rows(self) -> Iterator[Row]:
        for block in self.blocks:
            yield from block.rows
