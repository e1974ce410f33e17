"""Core protocols for the collaborators of a read."""

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, Protocol, Self, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from gremlin_python.process.graph_traversal import GraphTraversalSource

    from gremlin_dal.spill import Block

Cred_contra = TypeVar("Cred_contra", contravariant=True)
Params_contra = TypeVar("Params_contra", contravariant=True)

# Writes rows into a block starting at the given row number and returns how many it wrote.
type RowWriter = Callable[["Block", int], int]


@runtime_checkable
class QueryStatusChecker(Protocol):
    """Liveness signal for the query a read belongs to."""

    def is_query_running(self) -> bool:
        """Return False once the query no longer wants rows.

        Polled between records; must have no side effects.
        """
        ...


@runtime_checkable
class BlockSpiller(Protocol):
    """Protocol for the size-bounded row sink."""

    def write_rows(self, row_writer: RowWriter) -> None:
        """Invoke `row_writer` against the current block.

        The sink owns chunking: it decides which block and row number
        the writer gets. Writers must not produce more than
        `MAX_ROWS_PER_CALL` rows per call.
        """
        ...


@runtime_checkable
class GraphClient(Protocol):
    """Protocol for the remote graph store a read runs against."""

    def traversal_source(self) -> "GraphTraversalSource":
        """Return a traversal source bound to the remote store."""
        ...

    def submit(self, query: str) -> Iterable[list[Any]]:
        """Submit a Gremlin script and return its result batches."""
        ...


@runtime_checkable
class Provider(Protocol[Cred_contra, Params_contra]):
    """Protocol for provider lifecycle management."""

    @classmethod
    def connect(cls, credentials: Cred_contra, params: Params_contra) -> Self:
        """Establish connection to the external service."""
        ...

    def disconnect(self) -> None:
        """Release resources and close connections."""
        ...
