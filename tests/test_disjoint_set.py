import pytest

from contestkit.disjoint_set import (
    DisjointSet,
    count_acorns,
    forest_summary,
    network_sizes,
)


def test_initial_sets_are_singletons():
    d = DisjointSet(5)
    assert len(d) == 5
    assert d.components() == 5
    assert [d.find(i) for i in range(5)] == list(range(5))
    assert all(d.members(i) == 1 for i in range(5))


def test_union_merges_and_counts():
    d = DisjointSet(6)
    group = [0, 1, 2]
    assert d.union(0, 1) is True
    assert d.union(1, 2) is True
    assert d.find(0) == d.find(2)
    assert d.members(2) == len(group)
    assert d.components() == 6 - (len(group) - 1)


def test_union_of_same_set_is_noop():
    d = DisjointSet(3)
    d.union(0, 1)
    before = d.components()
    assert d.union(1, 0) is False
    assert d.components() == before
    assert d.members(0) == 2


def test_resize_and_clear_reset_state():
    d = DisjointSet(4)
    d.union(0, 3)
    d.resize(7)
    assert len(d) == 7
    assert d.components() == 7
    assert d.find(3) == 3
    d.clear()
    assert len(d) == 0
    assert d.components() == 0


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        DisjointSet(-1)


def test_count_acorns_counts_singletons():
    d = DisjointSet(5)
    d.union(0, 1)
    d.union(3, 1)
    assert count_acorns(d) == 2


def test_forest_summary_example():
    edges = [("A", "B"), ("B", "C"), ("D", "E")]
    nodes = ["A", "B", "C", "D", "E", "F", "G"]
    trees, acorns = forest_summary(edges, nodes)
    assert (trees, acorns) == (2, 2)


def test_forest_summary_no_edges_all_acorns():
    nodes = list("ABCD")
    assert forest_summary([], nodes) == (0, len(nodes))


def test_network_sizes_grow_with_unions():
    sizes = network_sizes([("fred", "barney"), ("barney", "betty"), ("betty", "wilma")])
    assert sizes == [2, 3, 4]


def test_network_sizes_separate_groups():
    sizes = network_sizes([("a", "b"), ("c", "d"), ("a", "b")])
    assert sizes[0] == sizes[1] == sizes[2]
    assert len(sizes) == 3