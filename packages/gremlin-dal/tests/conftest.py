"""Shared pytest fixtures for all tests."""

from collections.abc import Callable, Iterator
from typing import Any

import pytest
from gremlin_python.process.traversal import Direction, T

from gremlin_dal.models import Field, FieldType, ReadRequest, TableName, TableSchema
from gremlin_dal.spill import InMemoryBlockSpiller

VERTICES: list[dict[Any, Any]] = [
    {T.id: 1, T.label: "Person", "name": ["Ann"], "age": [34]},
    {T.id: 2, T.label: "Person", "name": ["Bob"]},
    {T.id: 3, T.label: "person", "name": ["lowercase"]},
    {T.id: 4, T.label: "Software", "name": ["gremlin"], "lang": ["java"]},
]

EDGES: list[dict[Any, Any]] = [
    {
        T.id: "e1",
        T.label: "knows",
        Direction.OUT: {T.id: 1, T.label: "Person"},
        Direction.IN: {T.id: 2, T.label: "Person"},
        "since": 2010,
    },
    {
        T.id: "e2",
        T.label: "created",
        Direction.OUT: {T.id: 1, T.label: "Person"},
        Direction.IN: {T.id: 4, T.label: "Software"},
        "weight": 0.4,
    },
]


class FakeTraversal:
    """Stands in for a remote GraphTraversal over in-memory records."""

    def __init__(self, start: str, records: list[dict[Any, Any]]) -> None:
        self.steps: list[tuple[Any, ...]] = [(start,)]
        self._records = records
        self._iter: Iterator[dict[Any, Any]] | None = None
        self.pulled = 0

    def hasLabel(self, label: str) -> "FakeTraversal":  # noqa: N802
        self.steps.append(("hasLabel", label))
        self._records = [r for r in self._records if r[T.label] == label]
        return self

    def valueMap(self) -> "FakeTraversal":  # noqa: N802
        self.steps.append(("valueMap",))
        return self

    def elementMap(self) -> "FakeTraversal":  # noqa: N802
        self.steps.append(("elementMap",))
        return self

    def with_(self, option: str) -> "FakeTraversal":
        self.steps.append(("with", option))
        return self

    def __iter__(self) -> "FakeTraversal":
        return self

    def __next__(self) -> dict[Any, Any]:
        if self._iter is None:
            self._iter = iter(self._records)
        record = next(self._iter)
        self.pulled += 1
        return record


class FakeTraversalSource:
    def __init__(self, vertices: list[dict[Any, Any]], edges: list[dict[Any, Any]]) -> None:
        self._vertices = vertices
        self._edges = edges
        self.traversals: list[FakeTraversal] = []

    def V(self) -> FakeTraversal:  # noqa: N802
        traversal = FakeTraversal("V", self._vertices)
        self.traversals.append(traversal)
        return traversal

    def E(self) -> FakeTraversal:  # noqa: N802
        traversal = FakeTraversal("E", self._edges)
        self.traversals.append(traversal)
        return traversal


class FakeGraphClient:
    """In-memory GraphClient: traversals over fixed records, canned script results."""

    def __init__(
        self,
        vertices: list[dict[Any, Any]] | None = None,
        edges: list[dict[Any, Any]] | None = None,
        script_results: list[list[Any]] | None = None,
    ) -> None:
        self.source = FakeTraversalSource(
            VERTICES if vertices is None else vertices,
            EDGES if edges is None else edges,
        )
        self.script_results = script_results or []
        self.submitted: list[str] = []

    def traversal_source(self) -> FakeTraversalSource:
        return self.source

    def submit(self, query: str) -> Iterator[list[Any]]:
        self.submitted.append(query)
        return iter([list(batch) for batch in self.script_results])


class StatusChecker:
    """Reports the query running for the first `limit` polls (forever when None)."""

    def __init__(self, limit: int | None = None) -> None:
        self.limit = limit
        self.polls = 0

    def is_query_running(self) -> bool:
        self.polls += 1
        return self.limit is None or self.polls <= self.limit


@pytest.fixture
def graph_client() -> FakeGraphClient:
    return FakeGraphClient()


@pytest.fixture
def make_client() -> type[FakeGraphClient]:
    return FakeGraphClient


@pytest.fixture
def running() -> StatusChecker:
    return StatusChecker()


@pytest.fixture
def make_checker() -> type[StatusChecker]:
    return StatusChecker


@pytest.fixture
def make_request() -> Callable[..., ReadRequest]:
    """Factory for read requests: fields are (name, type) pairs or bare names."""

    def factory(
        table: str,
        fields: list[str | tuple[str, FieldType]],
        constraints: dict[str, Any] | None = None,
        **metadata: str,
    ) -> ReadRequest:
        schema_fields = tuple(
            Field(name=f) if isinstance(f, str) else Field(name=f[0], type=f[1]) for f in fields
        )
        return ReadRequest(
            table_name=TableName(schema_name="graph", table_name=table),
            table_schema=TableSchema(fields=schema_fields, custom_metadata=metadata),
            constraints=constraints or {},
        )

    return factory


@pytest.fixture
def make_spiller() -> Callable[[ReadRequest], InMemoryBlockSpiller]:
    def factory(request: ReadRequest, max_block_rows: int = 4096) -> InMemoryBlockSpiller:
        return InMemoryBlockSpiller(request.table_schema, max_block_rows=max_block_rows)

    return factory
