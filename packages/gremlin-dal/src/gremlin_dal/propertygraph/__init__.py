"""Property graph table reads."""

from gremlin_dal.propertygraph.handler import PropertyGraphHandler
from gremlin_dal.propertygraph.rowwriters import RowProjector, build_projector
from gremlin_dal.propertygraph.streamer import stream_rows
from gremlin_dal.propertygraph.traversal import build_edge_scan, build_vertex_scan
from gremlin_dal.propertygraph.view import run_view_query

__all__ = [
    "PropertyGraphHandler",
    "RowProjector",
    "build_edge_scan",
    "build_projector",
    "build_vertex_scan",
    "run_view_query",
    "stream_rows",
]
