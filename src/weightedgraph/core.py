from __future__ import annotations

import math
import os
from typing import Generic, Hashable, Iterable, Sequence, TypeVar

from joblib import Parallel, delayed

from .algorithms import _dijkstra_path, _kruskal_mst_from_edges
from .edges import Edge
from .union_find import ArrayDisjointSet

N_CPU = max(1, os.cpu_count() or 1)
N_JOBS = int(os.environ.get("WEIGHTEDGRAPH_N_JOBS", N_CPU))

V = TypeVar("V", bound=Hashable)
E = TypeVar("E", bound=Edge)


def _to_list(items: Iterable | None, what: str) -> list:
    if items is None:
        raise ValueError(f"{what} must not be None")
    output = list(items)
    if any(item is None for item in output):
        raise ValueError(f"{what} must not contain None")
    return output


class Graph(Generic[V, E]):
    """Undirected, weighted graph, possibly with self-loops, parallel edges
    and several connected components.

    The graph is immutable once built. Vertices may be any hashable value;
    edges follow the :class:`weightedgraph.edges.Edge` protocol. ``vertices``
    and ``edges`` may be any iterable, sets included.

    Raises ``ValueError`` if either collection is ``None`` or contains
    ``None``, if an edge weight is not a number, negative or NaN, or if an
    edge touches a vertex that is not in ``vertices``.
    """

    def __init__(self, vertices: Iterable[V], edges: Iterable[E]) -> None:
        vertex_list = _to_list(vertices, "vertices")
        edge_list = _to_list(edges, "edges")
        incidence: dict[V, set[E]] = {vertex: set() for vertex in vertex_list}
        for edge in edge_list:
            weight = edge.weight
            try:
                invalid = weight < 0 or math.isnan(weight)
            except TypeError:
                invalid = True
            if invalid:
                raise ValueError(f"edge {edge!r} has an invalid weight {weight!r}")
            if edge.vertex1 not in incidence or edge.vertex2 not in incidence:
                raise ValueError(f"edge {edge!r} references an unknown vertex")
            incidence[edge.vertex1].add(edge)
            incidence[edge.vertex2].add(edge)
        self._incidence = incidence
        self._edges = tuple(edge_list)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._incidence

    def num_vertices(self) -> int:
        return len(self._incidence)

    def num_edges(self) -> int:
        return len(self._edges)

    def vertices(self) -> tuple[V, ...]:
        return tuple(self._incidence)

    def edges(self) -> tuple[E, ...]:
        return self._edges

    def incident_edges(self, vertex: V) -> frozenset[E]:
        self._check_vertex(vertex, "vertex")
        return frozenset(self._incidence[vertex])

    def _check_vertex(self, vertex: V, what: str) -> None:
        if vertex is None:
            raise ValueError(f"{what} must not be None")
        if vertex not in self._incidence:
            raise ValueError(f"{what} {vertex!r} is not a vertex of this graph")

    def find_minimum_spanning_tree(self, *, verbose: bool = False) -> set[E]:
        """Kruskal's algorithm.

        On a disconnected graph this is a minimum spanning forest. When
        several trees share the minimum weight, the edges' own ordering
        decides which one is returned.
        """
        return _kruskal_mst_from_edges(
            self._incidence,
            self._edges,
            ArrayDisjointSet(),
            verbose=verbose,
        )

    def find_shortest_path_between(self, start: V, end: V, *, verbose: bool = False) -> list[E]:
        """Edges of a minimum-weight path from ``start`` to ``end``, in order.

        The first edge leaves ``start``; the last one reaches ``end``. Returns
        an empty list when both are the same vertex. Raises
        :class:`weightedgraph.NoPathExistsError` when ``end`` is unreachable.
        Search state is local to the call, so concurrent queries are safe.
        """
        self._check_vertex(start, "start")
        self._check_vertex(end, "end")
        if start == end:
            return []
        return _dijkstra_path(self._incidence, start, end, verbose=verbose)

    def find_shortest_paths_between(
        self,
        pairs: Iterable[tuple[V, V]],
        *,
        n_jobs: int | None = None,
        verbose: bool = False,
    ) -> list[list[E]]:
        pairs_list: Sequence[tuple[V, V]] = list(pairs)
        if not pairs_list:
            return []
        jobs = N_JOBS if n_jobs is None else n_jobs
        if verbose:
            print(f"[PATH] {len(pairs_list)} queries on {jobs} threads")
        return Parallel(n_jobs=jobs, prefer="threads")(
            delayed(self.find_shortest_path_between)(start, end, verbose=verbose)
            for start, end in pairs_list
        )


__all__ = ["Graph", "N_CPU", "N_JOBS"]
