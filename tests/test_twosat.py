import itertools

import pytest

from contestkit.twosat import TwoSat, negate, strongly_connected_components


def _add_clause(sat, a, b):
    sat.add_implication(negate(a), b)
    sat.add_implication(negate(b), a)


def _lit(var, value):
    return 2 * var if value else 2 * var + 1


def _holds(assignment, literal):
    value = assignment[literal // 2]
    return value if literal % 2 == 0 else not value


def test_negate_is_involution():
    for lit in range(10):
        assert negate(negate(lit)) == lit
        assert negate(lit) // 2 == lit // 2


def test_scc_groups_cycle():
    adj = [[1], [2], [0, 3], []]
    comp = strongly_connected_components(adj)
    assert comp[0] == comp[1] == comp[2]
    assert comp[3] != comp[0]
    # sink components are completed first
    assert comp[3] < comp[0]


def test_scc_dag_gives_distinct_ids():
    adj = [[1, 2], [3], [3], []]
    comp = strongly_connected_components(adj)
    assert len(set(comp)) == len(adj)
    for u, targets in enumerate(adj):
        for v in targets:
            assert comp[v] < comp[u]


def test_contradiction_is_unsatisfiable():
    sat = TwoSat(1)
    sat.add_implication(_lit(0, True), _lit(0, False))
    sat.add_implication(_lit(0, False), _lit(0, True))
    assert sat.solve() is None


def test_forced_value():
    sat = TwoSat(2)
    # x0 must be true: (x0 or x0)
    _add_clause(sat, _lit(0, True), _lit(0, True))
    result = sat.solve()
    assert result is not None
    assert result[0] is True


def test_solution_satisfies_all_clauses():
    clauses = [
        (_lit(0, True), _lit(1, False)),
        (_lit(1, True), _lit(2, True)),
        (_lit(2, False), _lit(0, False)),
        (_lit(3, True), _lit(1, True)),
    ]
    sat = TwoSat(4)
    for a, b in clauses:
        _add_clause(sat, a, b)
    result = sat.solve()
    assert result is not None
    assert len(result) == 4
    assert result[0] or not result[1]
    assert result[1] or result[2]
    assert not result[2] or not result[0]
    assert result[3] or result[1]


def test_unsat_matches_exhaustive_search():
    clauses = [
        (_lit(0, True), _lit(1, True)),
        (_lit(0, False), _lit(1, True)),
        (_lit(0, True), _lit(1, False)),
        (_lit(0, False), _lit(1, False)),
    ]
    sat = TwoSat(2)
    for a, b in clauses:
        _add_clause(sat, a, b)
    exists = any(
        all(_holds(list(bits), a) or _holds(list(bits), b) for a, b in clauses)
        for bits in itertools.product([False, True], repeat=2)
    )
    assert exists is False
    assert sat.solve() is None


def test_literal_out_of_range():
    sat = TwoSat(1)
    with pytest.raises(IndexError):
        sat.add_implication(0, 2)