"""Row projection shared by the vertex, edge and view rule sets.

A `RowProjector` holds one extractor per output field. Extractors are
registered once through `RowProjectorBuilder` before streaming starts and
then applied to every source record.
"""

from collections.abc import Callable, Mapping, Sequence
from datetime import UTC, datetime
from typing import Any, ClassVar, Self

from gremlin_dal.logging import get_logger
from gremlin_dal.models.schema import Field, FieldType, Row, ValueSet

logger = get_logger(__name__)

# Config option controlling case-insensitive property lookup for vertex and edge tables.
CASE_INSENSITIVE_MATCH = "enable_caseinsensitivematch"

# Normalizes one source record into a map keyed by column name.
type ContextAsMap = Callable[[Any], Mapping[str, Any]]

# Pulls one field's raw value out of a normalized record.
type Extractor = Callable[[Mapping[str, Any]], Any]


def case_insensitive(config_options: Mapping[str, str] | None) -> bool:
    """Whether property lookup ignores case; on unless explicitly disabled."""
    if not config_options:
        return True
    raw = config_options.get(CASE_INSENSITIVE_MATCH)
    if raw is None:
        return True
    return raw.strip().lower() == "true"


def first_value(value: Any) -> Any:
    """Unwrap list-valued and vertex-property values to a single value."""
    if isinstance(value, list | tuple):
        if not value:
            return None
        value = value[0]
    # VertexProperty and Property elements carry the value on `.value`
    if hasattr(value, "key") and hasattr(value, "value"):
        return value.value
    return value


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "1"):
            return True
        if lowered in ("false", "0"):
            return False
        msg = f"not a boolean: {value!r}"
        raise ValueError(msg)
    return bool(value)


def _to_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, bool):
        msg = f"not a timestamp: {value!r}"
        raise TypeError(msg)
    if isinstance(value, int | float):
        try:
            return datetime.fromtimestamp(value / 1000, tz=UTC)
        except (OverflowError, OSError) as e:
            msg = f"timestamp out of range: {value!r}"
            raise ValueError(msg) from e
    if isinstance(value, str):
        return datetime.fromisoformat(value)
    msg = f"not a timestamp: {value!r}"
    raise TypeError(msg)


_COERCERS: dict[FieldType, Callable[[Any], Any]] = {
    FieldType.BIT: _to_bool,
    FieldType.VARCHAR: str,
    FieldType.INT: int,
    FieldType.BIGINT: int,
    FieldType.FLOAT4: float,
    FieldType.FLOAT8: float,
    FieldType.DATEMILLI: _to_datetime,
}


def coerce(field_type: FieldType, value: Any) -> Any:
    """Convert a raw graph value to the Python type backing `field_type`."""
    value = first_value(value)
    if value is None:
        return None
    return _COERCERS[field_type](value)


def lookup(key: str) -> Extractor:
    """Extractor reading `key` from a normalized record."""

    def extract(source: Mapping[str, Any]) -> Any:
        return source.get(key)

    return extract


class RowProjector:
    """Projects source records into output rows."""

    __slots__: ClassVar[tuple[str, str, str]] = ("_constraints", "_context_as_map", "_extractors")

    _constraints: Mapping[str, ValueSet]
    _context_as_map: ContextAsMap
    _extractors: tuple[tuple[Field, Extractor], ...]

    def __init__(
        self,
        context_as_map: ContextAsMap,
        extractors: Sequence[tuple[Field, Extractor]],
        constraints: Mapping[str, ValueSet],
    ) -> None:
        self._context_as_map = context_as_map
        self._extractors = tuple(extractors)
        self._constraints = constraints

    @property
    def fields(self) -> tuple[Field, ...]:
        return tuple(field for field, _ in self._extractors)

    def project(self, record: Any) -> Row | None:
        """Build the output row for `record`, or None if a constraint rejects it.

        A field that cannot be extracted or coerced is left as None.
        """
        source = self._context_as_map(record)
        row: Row = {}
        for field, extract in self._extractors:
            value = self._extract(field, extract, source)
            value_set = self._constraints.get(field.name)
            if value_set is not None and not value_set.contains(value):
                return None
            row[field.name] = value
        return row

    @staticmethod
    def _extract(field: Field, extract: Extractor, source: Mapping[str, Any]) -> Any:
        try:
            return coerce(field.type, extract(source))
        except (TypeError, ValueError, KeyError, OverflowError) as e:
            logger.debug("field_extract_failed", field=field.name, type=field.type, error=str(e))
            return None


class RowProjectorBuilder:
    """Collects per-field extractors for a `RowProjector`."""

    __slots__: ClassVar[tuple[str, str, str]] = ("_constraints", "_context_as_map", "_extractors")

    _constraints: Mapping[str, ValueSet]
    _context_as_map: ContextAsMap
    _extractors: list[tuple[Field, Extractor]]

    def __init__(
        self,
        context_as_map: ContextAsMap,
        constraints: Mapping[str, ValueSet] | None = None,
    ) -> None:
        self._context_as_map = context_as_map
        self._constraints = constraints or {}
        self._extractors = []

    def with_extractor(self, field: Field, extractor: Extractor) -> Self:
        self._extractors.append((field, extractor))
        return self

    def build(self) -> RowProjector:
        return RowProjector(self._context_as_map, self._extractors, self._constraints)
