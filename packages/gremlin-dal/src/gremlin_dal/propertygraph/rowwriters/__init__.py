"""Row projectors for vertex, edge and view tables."""

from collections.abc import Mapping, Sequence
from functools import partial
from typing import assert_never

from gremlin_dal.models.schema import Field, QueryKind, ValueSet
from gremlin_dal.propertygraph.rowwriters import custom, edge, vertex
from gremlin_dal.propertygraph.rowwriters.base import (
    CASE_INSENSITIVE_MATCH,
    RowProjector,
    RowProjectorBuilder,
    case_insensitive,
)


def build_projector(
    kind: QueryKind,
    fields: Sequence[Field],
    constraints: Mapping[str, ValueSet] | None = None,
    config_options: Mapping[str, str] | None = None,
) -> RowProjector:
    """Resolve one extraction rule per field for the record shape of `kind`."""
    match kind:
        case QueryKind.VERTEX:
            builder = RowProjectorBuilder(
                partial(vertex.context_as_map, ignore_case=case_insensitive(config_options)),
                constraints,
            )
            for field in fields:
                vertex.write_row_template(builder, field, config_options)
        case QueryKind.EDGE:
            builder = RowProjectorBuilder(
                partial(edge.context_as_map, ignore_case=case_insensitive(config_options)),
                constraints,
            )
            for field in fields:
                edge.write_row_template(builder, field, config_options)
        case QueryKind.VIEW:
            scalar_field = fields[0].name if len(fields) == 1 else None
            builder = RowProjectorBuilder(
                partial(custom.context_as_map, scalar_field=scalar_field),
                constraints,
            )
            for field in fields:
                custom.write_row_template(builder, field)
        case _:
            assert_never(kind)
    return builder.build()


__all__ = [
    "CASE_INSENSITIVE_MATCH",
    "RowProjector",
    "RowProjectorBuilder",
    "build_projector",
]
