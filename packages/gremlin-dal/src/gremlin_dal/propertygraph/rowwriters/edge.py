"""Row rules for edge tables.

Edge records come from `elementMap()`: scalar property values plus the
`T.id` and `T.label` tokens and one nested map per endpoint under
`Direction.OUT` and `Direction.IN`.
"""

from collections.abc import Mapping
from typing import Any

from gremlin_python.process.traversal import Direction, T

from gremlin_dal.models.schema import Field
from gremlin_dal.propertygraph.rowwriters.base import RowProjectorBuilder, case_insensitive, lookup

ID = "id"
LABEL = "label"
OUT = "out"
IN = "in"

_TOKENS = {T.id: ID, T.label: LABEL}
ENDPOINTS = {Direction.OUT: OUT, Direction.IN: IN}


def endpoint_id(endpoint: Any) -> Any:
    """Id of an edge endpoint given as an id/label map or a detached vertex."""
    if isinstance(endpoint, Mapping):
        return endpoint.get(T.id, endpoint.get(ID))
    # Detached vertices expose the id directly
    return getattr(endpoint, "id", endpoint)


def context_as_map(record: Mapping[Any, Any], ignore_case: bool) -> dict[str, Any]:
    """Key an element map by column name, reducing endpoints to their ids."""
    source: dict[str, Any] = {}
    tokens: dict[str, Any] = {}
    for key, value in record.items():
        if key in _TOKENS:
            tokens[_TOKENS[key]] = value
        elif key in ENDPOINTS:
            tokens[ENDPOINTS[key]] = endpoint_id(value)
        else:
            name = str(key)
            source[name.lower() if ignore_case else name] = value
    source.update(tokens)
    return source


def write_row_template(
    builder: RowProjectorBuilder,
    field: Field,
    config_options: Mapping[str, str] | None,
) -> None:
    name = field.name.lower() if case_insensitive(config_options) else field.name
    builder.with_extractor(field, lookup(name))
