# match_core/solver_ilp.py
from __future__ import annotations
from typing import List, Optional, Tuple, Union
import pulp

from .errors import InfeasibleAssignment
from .hungarian import DIAGONAL, _as_cost_array, _check_feasible, _resolve_forbidden


def solve_ilp(
    cost_matrix,
    forbidden: Union[float, str, None] = DIAGONAL,
) -> Tuple[Optional[List[int]], Optional[str]]:
    """Same problem as hungarian(), posed as a 0/1 program for CBC.

    Returns (assign, None) on success or (None, reason) otherwise.
    """
    cost = _as_cost_array(cost_matrix)
    n = cost.shape[0]
    forbidden = _resolve_forbidden(cost, forbidden)
    if forbidden is not None:
        try:
            _check_feasible(cost, forbidden)
        except InfeasibleAssignment as e:
            return None, str(e)

    prob = pulp.LpProblem("attendee_assignment", pulp.LpMinimize)

    # Decision variables x[i,j] in {0,1}; forbidden cells are left out
    X = {}
    for i in range(n):
        for j in range(n):
            if forbidden is not None and cost[i, j] >= forbidden:
                continue
            X[(i, j)] = pulp.LpVariable(f"x_{i}_{j}", cat="Binary")

    prob += pulp.lpSum(float(cost[i, j]) * var for (i, j), var in X.items())

    # Every row assigned once, every column taken once
    for i in range(n):
        prob += pulp.lpSum(X.get((i, j), 0) for j in range(n)) == 1, f"row_{i}"
    for j in range(n):
        prob += pulp.lpSum(X.get((i, j), 0) for i in range(n)) == 1, f"col_{j}"

    status = prob.solve(pulp.PULP_CBC_CMD(msg=False))
    if pulp.LpStatus[status] != "Optimal":
        return None, f"ILP solver status: {pulp.LpStatus[status]}"

    assign = [-1] * n
    for (i, j), var in X.items():
        if pulp.value(var) > 0.5:
            assign[i] = j
    return assign, None
