"""Row rules for vertex tables.

Vertex records come from `valueMap().with_(WithOptions.tokens)`: property
values are lists, and the vertex id and label sit under the `T.id` and
`T.label` tokens.
"""

from collections.abc import Mapping
from typing import Any

from gremlin_python.process.traversal import T

from gremlin_dal.models.schema import Field
from gremlin_dal.propertygraph.rowwriters.base import RowProjectorBuilder, case_insensitive, lookup

ID = "id"
LABEL = "label"

_TOKENS = {T.id: ID, T.label: LABEL}


def context_as_map(record: Mapping[Any, Any], ignore_case: bool) -> dict[str, Any]:
    """Key a value map by column name.

    Tokens are applied after properties so `id` and `label` always refer to
    the element, even when it has a property with the same name.
    """
    source: dict[str, Any] = {}
    tokens: dict[str, Any] = {}
    for key, value in record.items():
        if key in _TOKENS:
            tokens[_TOKENS[key]] = value
            continue
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
