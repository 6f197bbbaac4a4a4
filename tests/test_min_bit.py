import math
import random

import pytest

from contestkit.min_bit import MaxFenwick2D, min_key_distance


def _covered(x, y, r, c, rows_asc, cols_asc):
    row_ok = x <= r if rows_asc else x >= r
    col_ok = y <= c if cols_asc else y >= c
    return row_ok and col_ok


@pytest.mark.parametrize("rows_asc", [True, False])
@pytest.mark.parametrize("cols_asc", [True, False])
def test_query_matches_brute_force(rows_asc, cols_asc):
    rng = random.Random(hash((rows_asc, cols_asc)) & 0xFFFF)
    size = 9
    tree = MaxFenwick2D(size, rows_asc, cols_asc)
    points = []
    for _ in range(30):
        x, y, v = rng.randint(1, size), rng.randint(1, size), rng.randint(-50, 50)
        tree.update(x, y, v)
        points.append((x, y, v))
    for r in range(1, size + 1):
        for c in range(1, size + 1):
            expected = max(
                (v for x, y, v in points if _covered(x, y, r, c, rows_asc, cols_asc)),
                default=-math.inf,
            )
            assert tree.query(r, c) == expected


def test_reset_clears_all_updates():
    tree = MaxFenwick2D(5)
    updates = [(1, 1, 3), (2, 4, 7), (5, 5, 1)]
    for x, y, v in updates:
        tree.update(x, y, v)
    assert tree.query(5, 5) == max(v for _, _, v in updates)
    for x, y, _ in updates:
        tree.reset(x, y)
    assert all(tree.query(r, c) == -math.inf for r in range(1, 6) for c in range(1, 6))


def test_bounds_are_checked():
    tree = MaxFenwick2D(3)
    with pytest.raises(IndexError):
        tree.update(0, 1, 5)
    with pytest.raises(IndexError):
        tree.query(1, 4)
    with pytest.raises(ValueError):
        MaxFenwick2D(0)


def _brute(grid, keys):
    cells = {}
    for i, row in enumerate(grid, 1):
        for j, v in enumerate(row, 1):
            cells.setdefault(v, []).append((i, j))
    if keys not in cells:
        return -1
    prev = {c: c[0] + c[1] - 2 for c in cells.get(1, [])}
    for k in range(2, keys + 1):
        prev = {
            (x, y): min(
                (abs(x - a) + abs(y - b) + d for (a, b), d in prev.items()),
                default=math.inf,
            )
            for x, y in cells.get(k, [])
        }
    return prev[cells[keys][0]]


def test_small_grid_walk():
    assert min_key_distance([[1, 2], [3, 4]], 4) == 4


@pytest.mark.parametrize("seed", range(12))
def test_random_grids_match_brute_force(seed):
    rng = random.Random(seed)
    n, m = rng.randint(1, 6), rng.randint(1, 6)
    keys = rng.randint(1, 5)
    grid = [[rng.randint(1, keys) for _ in range(m)] for _ in range(n)]
    grid[rng.randrange(n)][rng.randrange(m)] = keys
    assert min_key_distance(grid, keys) == _brute(grid, keys)


def test_missing_target_gives_minus_one():
    assert min_key_distance([[1, 2]], 3) == -1


def test_missing_middle_key_is_unreachable():
    assert min_key_distance([[1, 3]], 3) == math.inf


def test_bad_grids_are_rejected():
    with pytest.raises(ValueError):
        min_key_distance([], 1)
    with pytest.raises(ValueError):
        min_key_distance([[1, 2], [3]], 3)
    with pytest.raises(ValueError):
        min_key_distance([[1]], 0)