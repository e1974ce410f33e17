"""Parameter types for graph store configuration.

Params define how a provider talks to the store, while credentials say
where the store is.
"""

from pydantic import BaseModel, Field


class GraphParams(BaseModel, frozen=True):
    """Common parameters for Gremlin-compatible graph stores."""

    traversal_source: str = "g"
    """Name of the traversal source bound on the server."""

    use_ssl: bool = True
    """Connect over `wss://` instead of `ws://`."""

    pool_size: int = Field(default=4, ge=1)
    """Number of connections the driver keeps open."""
