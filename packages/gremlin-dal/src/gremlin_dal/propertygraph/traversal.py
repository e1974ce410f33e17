"""Traversals for vertex and edge table scans.

The returned traversals are lazy: nothing is sent to the server until the
first record is pulled, and records are then pulled one at a time.
"""

from gremlin_python.process.graph_traversal import GraphTraversal, GraphTraversalSource
from gremlin_python.process.traversal import WithOptions


def build_vertex_scan(g: GraphTraversalSource, label: str) -> GraphTraversal:
    """All vertices labelled `label`, as value maps including id and label tokens."""
    return g.V().hasLabel(label).valueMap().with_(WithOptions.tokens)


def build_edge_scan(g: GraphTraversalSource, label: str) -> GraphTraversal:
    """All edges labelled `label`, as element maps including endpoint ids."""
    return g.E().hasLabel(label).elementMap()
