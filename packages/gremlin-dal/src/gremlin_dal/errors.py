"""Error types for graph table reads."""

from enum import StrEnum
from typing import final


class ErrorKind(StrEnum):
    """Classification of read errors."""

    CONNECTION = "connection"
    """The graph store could not be reached."""

    INVALID_INPUT = "invalid_input"
    """The read request is missing metadata it needs."""

    UNSUPPORTED = "unsupported"
    """The table's component type is not one this package can read."""

    SINK = "sink"
    """A row writer broke the sink's sizing contract."""

    PROVIDER = "provider"
    """The graph store or its driver failed while serving a request."""


@final
class DalError(Exception):
    """Base error for graph table reads."""

    __slots__ = ("kind", "message", "source")

    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.PROVIDER,
        source: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.source = source

    def __repr__(self) -> str:
        return f"DalError({self.message!r}, kind={self.kind!r})"
