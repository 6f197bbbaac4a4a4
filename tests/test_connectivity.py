import random
from collections import deque

import pytest

from contestkit.connectivity import (
    articulation_points,
    biconnected_components,
    bridges,
)


def _components(n, edges, removed_node=None):
    adj = [[] for _ in range(n)]
    for u, v in edges:
        adj[u].append(v)
        adj[v].append(u)
    seen = [False] * n
    count = 0
    for s in range(n):
        if s == removed_node or seen[s]:
            continue
        count += 1
        seen[s] = True
        queue = deque([s])
        while queue:
            u = queue.popleft()
            for v in adj[u]:
                if v != removed_node and not seen[v]:
                    seen[v] = True
                    queue.append(v)
    return count


def _random_simple_graph(rng, n, p):
    return [(u, v) for u in range(n) for v in range(u + 1, n) if rng.random() < p]


SAMPLE_BRIDGE_EDGES = [(0, 1), (5, 0), (1, 2), (2, 3), (3, 4), (6, 7), (1, 3)]
SAMPLE_POINT_EDGES = [
    (1, 2), (1, 8), (8, 2), (2, 3), (3, 4), (2, 4), (3, 5), (5, 7), (5, 6),
]


def test_bridges_sample():
    assert bridges(8, SAMPLE_BRIDGE_EDGES) == [(0, 1), (0, 5), (3, 4), (6, 7)]


def test_articulation_points_sample():
    assert articulation_points(9, SAMPLE_POINT_EDGES) == [2, 3, 5]


def test_cycle_has_no_bridges_or_points():
    cycle = [(0, 1), (1, 2), (2, 3), (3, 0)]
    assert bridges(4, cycle) == []
    assert articulation_points(4, cycle) == []
    assert len(biconnected_components(4, cycle)) == 1


@pytest.mark.parametrize("seed", range(12))
def test_bridges_match_brute_force(seed):
    rng = random.Random(seed)
    n = rng.randint(2, 9)
    edges = _random_simple_graph(rng, n, 0.35)
    base = _components(n, edges)
    expected = sorted(
        (min(e), max(e))
        for i, e in enumerate(edges)
        if _components(n, edges[:i] + edges[i + 1:]) > base
    )
    assert bridges(n, edges) == expected


@pytest.mark.parametrize("seed", range(12))
def test_articulation_points_match_brute_force(seed):
    rng = random.Random(100 + seed)
    n = rng.randint(2, 9)
    edges = _random_simple_graph(rng, n, 0.35)
    base = _components(n, edges)
    expected = []
    for node in range(n):
        isolated = all(node not in e for e in edges)
        # removing a node drops it from the count; compare with one fewer
        after = _components(n, edges, removed_node=node)
        if not isolated and after > base:
            expected.append(node)
    assert articulation_points(n, edges) == expected


@pytest.mark.parametrize("seed", range(12))
def test_bcc_partitions_edges(seed):
    rng = random.Random(200 + seed)
    n = rng.randint(2, 9)
    edges = _random_simple_graph(rng, n, 0.4)
    components = biconnected_components(n, edges)
    collected = sorted((min(e), max(e)) for comp in components for e in comp)
    assert collected == sorted((min(e), max(e)) for e in edges)
    singles = sorted((min(c[0]), max(c[0])) for c in components if len(c) == 1)
    assert singles == bridges(n, edges)


def test_bcc_triangle_with_tail():
    edges = [(0, 1), (1, 2), (2, 0), (2, 3)]
    components = biconnected_components(4, edges)
    assert sorted(len(c) for c in components) == [1, 3]


def test_out_of_range_edge():
    with pytest.raises(IndexError):
        bridges(2, [(0, 5)])