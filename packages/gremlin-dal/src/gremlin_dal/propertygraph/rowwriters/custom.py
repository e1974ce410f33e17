"""Row rules for view tables backed by a stored Gremlin query.

View results are whatever the query returns: maps (from `project`,
`valueMap`, `elementMap`, `group`...), graph elements, or bare scalars.
Column names are matched exactly.
"""

from collections.abc import Mapping
from typing import Any

from gremlin_python.process.traversal import T
from gremlin_python.structure.graph import Element

from gremlin_dal.models.schema import Field
from gremlin_dal.propertygraph.rowwriters.base import RowProjectorBuilder, lookup
from gremlin_dal.propertygraph.rowwriters.edge import ENDPOINTS, ID, LABEL, endpoint_id

_TOKENS = {T.id: ID, T.label: LABEL}


def _element_as_map(element: Element) -> dict[str, Any]:
    source: dict[str, Any] = {}
    for prop in getattr(element, "properties", None) or ():
        source.setdefault(prop.key, prop.value)
    source[ID] = element.id
    source[LABEL] = element.label
    return source


def _mapping_as_map(record: Mapping[Any, Any]) -> dict[str, Any]:
    source: dict[str, Any] = {}
    for key, value in record.items():
        if key in _TOKENS:
            source[_TOKENS[key]] = value
        elif key in ENDPOINTS:
            source[ENDPOINTS[key]] = endpoint_id(value)
        else:
            source[str(key)] = value
    return source


def context_as_map(record: Any, scalar_field: str | None) -> dict[str, Any]:
    """Key a view result by column name.

    Results that are neither maps nor elements fill `scalar_field`, which
    is set only when the view has a single column.
    """
    if isinstance(record, Mapping):
        return _mapping_as_map(record)
    if isinstance(record, Element):
        return _element_as_map(record)
    if scalar_field is not None:
        return {scalar_field: record}
    return {}


def write_row_template(builder: RowProjectorBuilder, field: Field) -> None:
    builder.with_extractor(field, lookup(field.name))
