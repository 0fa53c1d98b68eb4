import pathlib
import sys

import pytest

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1] / "src"))

from weightedgraph.edges import WeightedEdge, total_weight


def test_other_vertex():
    edge = WeightedEdge("a", "b", 2.0)
    assert edge.other_vertex("a") == "b"
    assert edge.other_vertex("b") == "a"
    with pytest.raises(ValueError):
        edge.other_vertex("c")


def test_other_vertex_self_loop():
    edge = WeightedEdge("a", "a", 1.0)
    assert edge.other_vertex("a") == "a"


def test_order_is_by_weight_then_endpoints():
    heavy = WeightedEdge("a", "b", 5.0)
    light = WeightedEdge("z", "y", 1.0)
    tie_low = WeightedEdge("a", "c", 3.0)
    tie_high = WeightedEdge("b", "a", 3.0)
    assert sorted([heavy, tie_high, light, tie_low]) == [light, tie_low, tie_high, heavy]
    assert light <= heavy
    assert heavy > tie_high


def test_edges_are_hashable_values():
    assert WeightedEdge(1, 2, 0.5) == WeightedEdge(1, 2, 0.5)
    assert len({WeightedEdge(1, 2, 0.5), WeightedEdge(1, 2, 0.5)}) == 1


def test_total_weight():
    edges = [WeightedEdge(0, 1, 1.5), WeightedEdge(1, 2, 2.0), WeightedEdge(2, 2, 0.0)]
    assert total_weight(edges) == pytest.approx(3.5)
    assert total_weight([]) == 0.0


def test_order_with_unorderable_endpoints():
    a, b = object(), object()
    light = WeightedEdge(a, b, 1.0)
    heavy = WeightedEdge(b, a, 2.0)
    assert light < heavy
    tied = WeightedEdge(b, a, 1.0)
    assert (light < tied) != (tied < light)
    mixed = [WeightedEdge(1, "x", 1.0), WeightedEdge(1, 2, 1.0)]
    assert sorted(mixed) == sorted(reversed(mixed))
