"""Reads property graph tables.

A table's `componenttype` metadata decides how it is read:
- vertex: scan vertices carrying the table's label
- edge: scan edges carrying the table's label
- view: run the Gremlin query stored in the table's `query` metadata

Results are streamed row by row into the caller's spiller until the
cursor is exhausted or the query stops running.
"""

from collections.abc import Iterable, Mapping
from typing import Any, ClassVar, Self, assert_never

from gremlin_dal.config import Settings
from gremlin_dal.errors import DalError, ErrorKind
from gremlin_dal.logging import get_logger, log_context
from gremlin_dal.models.schema import MetadataKey, QueryKind, ReadRequest
from gremlin_dal.propertygraph.rowwriters import build_projector
from gremlin_dal.propertygraph.streamer import stream_rows
from gremlin_dal.propertygraph.traversal import build_edge_scan, build_vertex_scan
from gremlin_dal.propertygraph.view import run_view_query
from gremlin_dal.protocols import BlockSpiller, GraphClient, QueryStatusChecker

logger = get_logger(__name__)


class PropertyGraphHandler:
    """Dispatches table reads to a vertex scan, an edge scan or a view query."""

    __slots__: ClassVar[tuple[str, str]] = ("_client", "_strict_component_type")

    _client: GraphClient
    _strict_component_type: bool

    def __init__(self, client: GraphClient, *, strict_component_type: bool = False) -> None:
        self._client = client
        self._strict_component_type = strict_component_type

    @classmethod
    def from_settings(cls, client: GraphClient, settings: Settings) -> Self:
        return cls(client, strict_component_type=settings.strict_component_type)

    def execute_query(
        self,
        request: ReadRequest,
        status_checker: QueryStatusChecker,
        spiller: BlockSpiller,
        config_options: Mapping[str, str] | None = None,
    ) -> int:
        """Read the table described by `request` into `spiller`.

        Args:
            request: Table, schema and constraints of the partition to read.
            status_checker: Polled between records; reading stops once it
                reports the query is no longer running.
            spiller: Sink that receives one candidate row per call.
            config_options: Passed through to the vertex and edge row rules.

        Returns:
            Number of records pulled from the graph store.

        Raises:
            DalError: The component type is unknown and strict mode is on,
                or a view table has no query.
        """
        raw_kind = request.metadata(MetadataKey.COMPONENT_TYPE)
        kind = QueryKind.parse(raw_kind)
        table = request.table_name.table_name

        with log_context(table=table, label=request.label, component_type=raw_kind):
            if kind is None:
                if self._strict_component_type:
                    msg = f"Unrecognized componenttype {raw_kind!r} for table '{table}'"
                    raise DalError(msg, kind=ErrorKind.UNSUPPORTED)
                logger.warning("unrecognized_component_type")
                return 0

            cursor = self._open_cursor(kind, request)
            projector = build_projector(
                kind,
                request.table_schema.fields,
                request.constraints,
                config_options,
            )
            return stream_rows(cursor, projector, spiller, status_checker)

    def _open_cursor(self, kind: QueryKind, request: ReadRequest) -> Iterable[Any]:
        match kind:
            case QueryKind.VERTEX:
                logger.debug("vertex_scan")
                return build_vertex_scan(self._client.traversal_source(), request.label)
            case QueryKind.EDGE:
                logger.debug("edge_scan")
                return build_edge_scan(self._client.traversal_source(), request.label)
            case QueryKind.VIEW:
                query = request.query
                if query is None:
                    msg = f"View table '{request.table_name.table_name}' has no query metadata"
                    raise DalError(msg, kind=ErrorKind.INVALID_INPUT)
                return run_view_query(self._client, query)
            case _:
                assert_never(kind)
