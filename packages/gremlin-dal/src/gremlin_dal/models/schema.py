"""Data types describing a read of one graph-backed table.

These types carry what the catalog knows about a table:
- `Field` and `TableSchema` for the columns and their custom metadata
- `ValueSet` for per-column constraint summaries
- `ReadRequest` for one partition read
- `QueryKind` for the query shape selected from the metadata
"""

from enum import StrEnum
from typing import Any, Self

from pydantic import BaseModel, Field as ModelField

# Row values keyed by field name.
type Row = dict[str, Any]


class FieldType(StrEnum):
    """Semantic type of an output column."""

    BIT = "bit"
    VARCHAR = "varchar"
    INT = "int"
    BIGINT = "bigint"
    FLOAT4 = "float4"
    FLOAT8 = "float8"
    DATEMILLI = "datemilli"


class MetadataKey(StrEnum):
    """Custom table metadata keys recognized by the dispatcher."""

    COMPONENT_TYPE = "componenttype"
    LABEL = "glabel"
    QUERY = "query"


class QueryKind(StrEnum):
    """Query shape used to read a table."""

    VERTEX = "vertex"
    EDGE = "edge"
    VIEW = "view"

    @classmethod
    def parse(cls, raw: str | None) -> Self | None:
        """Resolve a metadata marker, ignoring case and surrounding blanks.

        Returns None when the marker is missing or unknown.
        """
        if raw is None:
            return None
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


class Field(BaseModel, frozen=True):
    """One output column."""

    name: str
    """Column name, matched against source record keys."""

    type: FieldType = FieldType.VARCHAR
    """Semantic type the extracted value is coerced to."""


class TableName(BaseModel, frozen=True):
    """Fully qualified name of a catalog table."""

    schema_name: str
    """Database (schema) the table lives in."""

    table_name: str
    """Table name as the catalog reports it, possibly lower-cased."""


class TableSchema(BaseModel, frozen=True):
    """Columns and custom metadata of a table."""

    fields: tuple[Field, ...] = ()
    """Ordered output columns."""

    custom_metadata: dict[str, str] = ModelField(default_factory=dict)
    """Table properties such as `componenttype`, `glabel` and `query`."""


class ValueSet(BaseModel, frozen=True):
    """Summary of the values a column may take for a row to be kept.

    `values` whitelists exact values; `low` and `high` bound the value
    inclusively. Unset parts do not restrict.
    """

    values: tuple[Any, ...] | None = None
    low: Any = None
    high: Any = None
    null_allowed: bool = False

    def contains(self, value: object) -> bool:
        if value is None:
            return self.null_allowed
        if self.values is not None and value not in self.values:
            return False
        try:
            if self.low is not None and value < self.low:
                return False
            if self.high is not None and value > self.high:
                return False
        except TypeError:
            return False
        return True


class ReadRequest(BaseModel, frozen=True):
    """A request to read one partition of a graph-backed table."""

    table_name: TableName
    """Table being read."""

    table_schema: TableSchema
    """Columns to produce and the table's custom metadata."""

    constraints: dict[str, ValueSet] = ModelField(default_factory=dict)
    """Per-column constraint summaries keyed by field name."""

    def metadata(self, key: MetadataKey) -> str | None:
        return self.table_schema.custom_metadata.get(key)

    @property
    def component_type(self) -> QueryKind | None:
        return QueryKind.parse(self.metadata(MetadataKey.COMPONENT_TYPE))

    @property
    def label(self) -> str:
        """Graph label to filter on.

        Catalogs may lower-case table names, so an explicit `glabel`
        holding the store's real label casing takes precedence.
        """
        glabel = self.metadata(MetadataKey.LABEL)
        if glabel is not None and glabel.strip():
            return glabel
        return self.table_name.table_name

    @property
    def query(self) -> str | None:
        query = self.metadata(MetadataKey.QUERY)
        if query is None or not query.strip():
            return None
        return query
