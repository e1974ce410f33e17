"""Provider implementations for graph stores.

Each provider module exports a `Provider` class alias for the main provider class,
along with its credentials and params types.

Available providers:
- gremlin: Gremlin server / Amazon Neptune via gremlinpython
"""

from gremlin_dal.providers import gremlin

__all__ = [
    "gremlin",
]
