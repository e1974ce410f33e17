"""Row streaming reads of property graph tables from Gremlin stores."""

from gremlin_dal.errors import DalError, ErrorKind
from gremlin_dal.propertygraph import PropertyGraphHandler
from gremlin_dal.protocols import BlockSpiller, GraphClient, Provider, QueryStatusChecker
from gremlin_dal.spill import MAX_ROWS_PER_CALL, Block, InMemoryBlockSpiller

__all__ = [
    "MAX_ROWS_PER_CALL",
    "Block",
    "BlockSpiller",
    "DalError",
    "ErrorKind",
    "GraphClient",
    "InMemoryBlockSpiller",
    "PropertyGraphHandler",
    "Provider",
    "QueryStatusChecker",
]
