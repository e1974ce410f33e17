"""Drains a result cursor into a block spiller."""

from collections.abc import Iterable
from typing import Any

from gremlin_dal.logging import get_logger
from gremlin_dal.propertygraph.rowwriters import RowProjector
from gremlin_dal.protocols import BlockSpiller, QueryStatusChecker
from gremlin_dal.spill import Block

logger = get_logger(__name__)


def stream_rows(
    cursor: Iterable[Any],
    projector: RowProjector,
    spiller: BlockSpiller,
    status_checker: QueryStatusChecker,
) -> int:
    """Write one candidate row per cursor record until exhaustion or cancellation.

    The status checker is polled before every pull, so a cancelled query
    stops pulling between records. Each record goes to the spiller in its
    own `write_rows` call, in cursor order.

    Returns the number of records pulled, including rows a constraint skipped.
    """
    records = iter(cursor)
    pulled = 0
    written = 0
    exhausted = False

    while status_checker.is_query_running():
        try:
            record = next(records)
        except StopIteration:
            exhausted = True
            break
        pulled += 1

        def write(block: Block, row_num: int, record: Any = record) -> int:
            nonlocal written
            row = projector.project(record)
            if row is None:
                return 0
            block.set_row(row_num, row)
            written += 1
            return 1

        spiller.write_rows(write)

    logger.info("rows_streamed", rows_pulled=pulled, rows_written=written, cancelled=not exhausted)
    return pulled
