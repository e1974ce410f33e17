"""Stored-query execution for view tables."""

from collections.abc import Iterator
from itertools import chain
from typing import Any

from gremlin_dal.logging import get_logger
from gremlin_dal.protocols import GraphClient

logger = get_logger(__name__)


def run_view_query(client: GraphClient, query: str) -> Iterator[Any]:
    """Submit `query` verbatim and iterate its results one at a time.

    The query is sent immediately. The driver hands results back in server
    batches; these are flattened lazily, one batch at a time.
    """
    logger.debug("view_query_submitted", query=query)
    return chain.from_iterable(client.submit(query))
