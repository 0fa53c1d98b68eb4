"""Weighted undirected graphs: minimum spanning trees and shortest paths."""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "ArrayDisjointSet",
    "Edge",
    "Graph",
    "NoPathExistsError",
    "WeightedEdge",
    "total_weight",
]

_LOCATIONS = {
    "ArrayDisjointSet": "weightedgraph.union_find",
    "Edge": "weightedgraph.edges",
    "Graph": "weightedgraph.core",
    "NoPathExistsError": "weightedgraph.errors",
    "WeightedEdge": "weightedgraph.edges",
    "total_weight": "weightedgraph.edges",
}


def __getattr__(name: str) -> Any:  # pragma: no cover - simple lazy import shim
    if name in _LOCATIONS:
        module = import_module(_LOCATIONS[name])
        return getattr(module, name)
    raise AttributeError(f"module 'weightedgraph' has no attribute {name!r}")


def __dir__() -> list[str]:  # pragma: no cover - cosmetic helper
    return sorted(__all__)
