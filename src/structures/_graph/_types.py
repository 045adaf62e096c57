"""Value types returned by graph queries."""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, NamedTuple


class Edge(NamedTuple):
    """A directed, weighted edge."""

    source: Any
    target: Any
    weight: Any


@dataclass(frozen=True, slots=True)
class ShortestPath[T]:
    """A minimum-weight route between two vertices.

    Attributes:
        weight: Sum of the edge weights along the route.
        vertices: The route, starting at the source and ending at the target.

    """

    weight: Any
    vertices: tuple[T, ...]

    @property
    def source(self) -> T:
        return self.vertices[0]

    @property
    def target(self) -> T:
        return self.vertices[-1]

    def __iter__(self) -> Iterator[T]:
        return iter(self.vertices)

    def __len__(self) -> int:
        return len(self.vertices)
