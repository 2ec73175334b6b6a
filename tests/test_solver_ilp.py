# FILE: tests/test_solver_ilp.py
import numpy as np
import pytest

from match_core.constants import FORBIDDEN_COST, MAX_ATTENDEES
from match_core.errors import ResourceLimitError
from match_core.hungarian import assignment_cost, hungarian
from match_core.solver_ilp import solve_ilp


def test_ilp_matches_hungarian_cost():
    rng = np.random.default_rng(21)
    for n in (3, 6, 9):
        matrix = rng.integers(-32, 40, size=(n, n))
        np.fill_diagonal(matrix, FORBIDDEN_COST)
        assign, err = solve_ilp(matrix)
        assert err is None
        assert sorted(assign) == list(range(n))
        assert all(assign[i] != i for i in range(n))
        assert assignment_cost(matrix, assign) == assignment_cost(matrix, hungarian(matrix))


def test_ilp_reports_infeasible():
    assign, err = solve_ilp(np.full((3, 3), FORBIDDEN_COST))
    assert assign is None
    assert "forbidden" in err


def test_ilp_avoids_forbidden_entries():
    F = FORBIDDEN_COST
    matrix = [[F, 9 * 10 ** 8, 9 * 10 ** 8],
              [9 * 10 ** 8, F, -9 * 10 ** 8],
              [9 * 10 ** 8, -9 * 10 ** 8, F]]
    assign, err = solve_ilp(matrix)
    assert err is None
    assert assignment_cost(matrix, assign) == 9 * 10 ** 8


def test_ilp_size_limit():
    with pytest.raises(ResourceLimitError):
        solve_ilp(np.zeros((MAX_ATTENDEES + 1, MAX_ATTENDEES + 1), dtype=np.int64))
