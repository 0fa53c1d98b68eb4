from __future__ import annotations

import heapq
import itertools
import math
from dataclasses import dataclass
from typing import Generic, Hashable, Iterable, Mapping, Sequence, TypeVar

from .edges import Edge
from .errors import NoPathExistsError
from .union_find import ArrayDisjointSet

V = TypeVar("V", bound=Hashable)
E = TypeVar("E", bound=Edge)


@dataclass
class VertexInfo(Generic[V, E]):
    """Per-query bookkeeping for one vertex of a shortest-path search."""

    vertex: V
    distance: float = math.inf
    predecessor: E | None = None


def _kruskal_mst_from_edges(
    vertices: Iterable[V],
    edges: Sequence[E],
    components: ArrayDisjointSet[V],
    *,
    verbose: bool = False,
) -> set[E]:
    n_vertices = 0
    for vertex in vertices:
        components.make_set(vertex)
        n_vertices += 1
    heap = list(edges)
    heapq.heapify(heap)
    mst: set[E] = set()
    target = max(0, n_vertices - 1)
    discarded = 0
    while heap and len(mst) < target:
        edge = heapq.heappop(heap)
        if components.find_set(edge.vertex1) == components.find_set(edge.vertex2):
            discarded += 1
            continue
        mst.add(edge)
        components.union(edge.vertex1, edge.vertex2)
    if verbose:
        print(
            f"[MST] {len(mst)} edges kept, {discarded} discarded, "
            f"components: {components.count_sets()}"
        )
    return mst


def _dijkstra_path(
    incidence: Mapping[V, Iterable[E]],
    start: V,
    end: V,
    *,
    verbose: bool = False,
) -> list[E]:
    info: dict[V, VertexInfo[V, E]] = {vertex: VertexInfo(vertex) for vertex in incidence}
    info[start].distance = 0.0
    visited: set[V] = set()
    # The counter keeps vertices out of tuple comparisons.
    sequence = itertools.count()
    queue: list[tuple[float, int, V]] = [(0.0, next(sequence), start)]
    reached = False
    pops = 0
    while queue:
        distance, _, vertex = heapq.heappop(queue)
        pops += 1
        if vertex in visited or distance > info[vertex].distance:
            continue
        if vertex == end:
            reached = True
            break
        visited.add(vertex)
        for edge in incidence[vertex]:
            neighbour = edge.other_vertex(vertex)
            candidate = distance + edge.weight
            record = info[neighbour]
            if candidate < record.distance:
                record.distance = candidate
                record.predecessor = edge
                heapq.heappush(queue, (candidate, next(sequence), neighbour))
    if verbose:
        print(f"[PATH] {start!r} -> {end!r}: {pops} pops, {len(visited)} vertices settled")
    if not reached:
        raise NoPathExistsError(start, end)

    path: list[E] = []
    current = end
    while current != start:
        edge = info[current].predecessor
        path.append(edge)
        current = edge.other_vertex(current)
    path.reverse()
    return path


__all__ = ["VertexInfo"]
