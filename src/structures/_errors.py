"""Exceptions raised by the structures package."""


class StructuresError(Exception):
    """Base class for errors raised by structures."""


class InvalidWeightError(StructuresError, ValueError):
    """A shortest-path query was made on a graph holding a negative edge weight."""

    def __init__(self, source: object, target: object, weight: object) -> None:
        self.source = source
        self.target = target
        self.weight = weight
        msg = f"Edge {source!r} -> {target!r} has negative weight {weight!r}"
        super().__init__(msg)


class StaleIteratorError(StructuresError, RuntimeError):
    """A container was modified while an iterator over it was still in use."""


class CapacityError(StructuresError, ValueError):
    """A cache was given a capacity it cannot hold."""
