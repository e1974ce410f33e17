"""Types describing graph table reads."""

from gremlin_dal.models.params import GraphParams
from gremlin_dal.models.schema import (
    Field,
    FieldType,
    MetadataKey,
    QueryKind,
    ReadRequest,
    Row,
    TableName,
    TableSchema,
    ValueSet,
)

__all__ = [
    # Params (configuration)
    "GraphParams",
    # Request types
    "Field",
    "FieldType",
    "MetadataKey",
    "QueryKind",
    "ReadRequest",
    "Row",
    "TableName",
    "TableSchema",
    "ValueSet",
]
