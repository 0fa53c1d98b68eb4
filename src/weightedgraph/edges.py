from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import Any, Hashable, Iterable, Protocol

import numpy as np


class Edge(Protocol):
    """Undirected weighted edge as consumed by :class:`weightedgraph.Graph`.

    Implementations must be hashable and totally ordered; the order is what
    the spanning-tree heap uses, so it should compare weights first.
    """

    @property
    def vertex1(self) -> Any: ...

    @property
    def vertex2(self) -> Any: ...

    @property
    def weight(self) -> float: ...

    def other_vertex(self, vertex: Any) -> Any: ...

    def __lt__(self, other: Any) -> bool: ...


@total_ordering
@dataclass(frozen=True)
class WeightedEdge:
    vertex1: Hashable
    vertex2: Hashable
    weight: float

    def __lt__(self, other: WeightedEdge) -> bool:
        if not isinstance(other, WeightedEdge):
            return NotImplemented
        if self.weight != other.weight:
            return self.weight < other.weight
        # Ties fall back to the endpoints so heap order is reproducible.
        try:
            return (self.vertex1, self.vertex2) < (other.vertex1, other.vertex2)
        except TypeError:
            return self._fallback_key() < other._fallback_key()

    def _fallback_key(self) -> tuple[tuple[str, str], tuple[str, str]]:
        # Vertices only promise equality and hashing.
        return (
            (type(self.vertex1).__qualname__, repr(self.vertex1)),
            (type(self.vertex2).__qualname__, repr(self.vertex2)),
        )

    def other_vertex(self, vertex: Hashable) -> Hashable:
        if vertex == self.vertex1:
            return self.vertex2
        if vertex == self.vertex2:
            return self.vertex1
        raise ValueError(f"{vertex!r} is not an endpoint of {self!r}")


def total_weight(edges: Iterable[Edge]) -> float:
    weights = np.fromiter((edge.weight for edge in edges), dtype=np.float64)
    return float(weights.sum())


__all__ = ["Edge", "WeightedEdge", "total_weight"]
