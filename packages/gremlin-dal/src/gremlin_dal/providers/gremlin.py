"""Gremlin graph store provider using gremlinpython."""

from collections.abc import Iterable
from types import TracebackType
from typing import TYPE_CHECKING, Any, ClassVar, Self

from pydantic import BaseModel

from gremlin_dal.config import Settings
from gremlin_dal.errors import DalError, ErrorKind
from gremlin_dal.logging import get_logger
from gremlin_dal.models.params import GraphParams

if TYPE_CHECKING:
    from gremlin_python.process.graph_traversal import GraphTraversalSource

try:
    from gremlin_python.driver.client import Client
    from gremlin_python.driver.driver_remote_connection import DriverRemoteConnection
    from gremlin_python.process.anonymous_traversal import traversal
except ImportError as e:
    _msg = "gremlinpython is required for Gremlin support. Install with: pip install gremlinpython"
    raise ImportError(_msg) from e

logger = get_logger(__name__)


class GremlinCredentials(BaseModel, frozen=True):
    """Location of a Gremlin server or Neptune cluster endpoint."""

    host: str
    port: int = 8182


class GremlinParams(GraphParams, frozen=True):
    """Parameters for Gremlin server connections.

    Inherits `traversal_source`, `use_ssl` and `pool_size` from GraphParams.
    """

    path: str = "/gremlin"
    """Websocket path the server listens on."""


def endpoint_url(credentials: GremlinCredentials, params: GremlinParams) -> str:
    scheme = "wss" if params.use_ssl else "ws"
    return f"{scheme}://{credentials.host}:{credentials.port}{params.path}"


class GremlinProvider:
    """Gremlin provider for property graph reads.

    Holds a raw script client for view queries and a remote connection
    backing traversal sources for vertex and edge scans.
    """

    __slots__: ClassVar[tuple[str, str, str]] = ("_client", "_connection", "_params")

    _client: "Client"
    _connection: "DriverRemoteConnection"
    _params: GremlinParams

    def __init__(
        self,
        client: "Client",
        connection: "DriverRemoteConnection",
        params: GremlinParams,
    ) -> None:
        self._client = client
        self._connection = connection
        self._params = params

    @classmethod
    def connect(cls, credentials: GremlinCredentials, params: GremlinParams) -> Self:
        """Open the script client and the traversal connection."""
        url = endpoint_url(credentials, params)
        try:
            client = Client(url, params.traversal_source, pool_size=params.pool_size)
        except Exception as e:
            msg = f"Failed to connect to Gremlin server at {url}: {e}"
            raise DalError(msg, kind=ErrorKind.CONNECTION, source=e) from e

        try:
            connection = DriverRemoteConnection(
                url,
                params.traversal_source,
                pool_size=params.pool_size,
            )
        except Exception as e:
            client.close()
            msg = f"Failed to connect to Gremlin server at {url}: {e}"
            raise DalError(msg, kind=ErrorKind.CONNECTION, source=e) from e

        logger.info("gremlin_connected", url=url, traversal_source=params.traversal_source)
        return cls(client, connection, params)

    @classmethod
    def from_settings(cls, settings: Settings) -> Self:
        """Connect using package settings."""
        credentials = GremlinCredentials(host=settings.host, port=settings.port)
        params = GremlinParams(
            traversal_source=settings.traversal_source,
            use_ssl=settings.use_ssl,
            pool_size=settings.pool_size,
        )
        return cls.connect(credentials, params)

    def disconnect(self) -> None:
        """Close the traversal connection and the script client."""
        try:
            self._connection.close()
        finally:
            self._client.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.disconnect()

    def traversal_source(self) -> "GraphTraversalSource":
        """Return a traversal source bound to the remote connection."""
        return traversal().with_remote(self._connection)

    def submit(self, query: str) -> Iterable[list[Any]]:
        """Submit a Gremlin script; the result set yields server batches."""
        return self._client.submit(query)


Provider = GremlinProvider
