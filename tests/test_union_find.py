import pathlib
import sys

import pytest

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1] / "src"))

from weightedgraph.union_find import ArrayDisjointSet


def test_union_joins_components():
    uf = ArrayDisjointSet()
    uf.make_set("a")
    uf.make_set("b")
    assert uf.find_set("a") != uf.find_set("b")
    assert uf.union("a", "b") is True
    assert uf.find_set("a") == uf.find_set("b")
    assert uf.connected("a", "b")
    assert uf.count_sets() == 1


def test_union_same_component_is_noop():
    uf = ArrayDisjointSet()
    for item in "abc":
        uf.make_set(item)
    uf.union("a", "b")
    root = uf.find_set("a")
    assert uf.union("b", "a") is False
    assert uf.find_set("b") == root
    assert uf.rank("a") == 1
    assert uf.count_sets() == 2


def test_make_set_twice_fails():
    uf = ArrayDisjointSet()
    uf.make_set(1)
    with pytest.raises(ValueError):
        uf.make_set(1)


def test_make_set_none_fails():
    uf = ArrayDisjointSet()
    with pytest.raises(ValueError):
        uf.make_set(None)


def test_unregistered_elements_fail():
    uf = ArrayDisjointSet()
    uf.make_set("a")
    with pytest.raises(ValueError):
        uf.find_set("z")
    with pytest.raises(ValueError):
        uf.union("a", "z")
    with pytest.raises(ValueError):
        uf.union("z", "a")


def test_storage_grows_past_initial_capacity():
    uf = ArrayDisjointSet()
    n = 5 * ArrayDisjointSet.INIT_CAPACITY + 3
    for i in range(n):
        uf.make_set((i, "item"))
    assert len(uf) == n
    assert uf.count_sets() == n
    for i in range(1, n):
        uf.union((0, "item"), (i, "item"))
    assert uf.count_sets() == 1
    assert len({uf.find_set((i, "item")) for i in range(n)}) == 1
    assert (n - 1, "item") in uf
    assert (n, "item") not in uf


def test_union_by_rank():
    uf = ArrayDisjointSet()
    for item in "abcde":
        uf.make_set(item)
    uf.union("a", "b")
    uf.union("c", "d")
    assert uf.rank("a") == 1
    uf.union("a", "c")
    assert uf.rank("a") == 2
    root = uf.find_set("a")
    # A singleton never becomes the parent of a taller tree.
    uf.union("e", "a")
    assert uf.find_set("e") == root
    assert uf.rank("e") == 2


def test_find_set_compresses_path():
    uf = ArrayDisjointSet()
    for item in "abcd":
        uf.make_set(item)
    uf.union("a", "b")
    uf.union("c", "d")
    uf.union("a", "c")
    root = uf.find_set("d")
    assert uf._pointers[0] != root
    assert uf.find_set("a") == root
    assert uf._pointers[0] == root
    for item in "abc":
        assert uf._pointers[uf._slots[item]] == root
