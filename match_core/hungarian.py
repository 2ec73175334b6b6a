# FILE: match_core/hungarian.py
"""
Readable O(n^3) Hungarian / Kuhn-Munkres implementation for square cost matrices.

- Minimizes total cost.
- Shortest augmenting path form: one dual potential per row and per column,
  one augmentation phase per row.
- Integer matrices are solved in int64 so potentials never drift.
- Returns a list 'assign' where assign[row] = col index chosen for that row.
"""
from __future__ import annotations
import logging
from typing import List, Sequence, Union
import numpy as np

from .constants import MAX_ATTENDEES
from .errors import InfeasibleAssignment, ResourceLimitError, ShapeError

logger = logging.getLogger(__name__)

# read the forbidding sentinel off the diagonal
DIAGONAL = "diagonal"


def _as_cost_array(cost_matrix) -> np.ndarray:
    try:
        cost = np.array(cost_matrix)
    except ValueError as e:
        raise ShapeError(f"Cost matrix is ragged: {e}") from e
    if cost.size == 0:
        raise ShapeError("Cost matrix is empty.")
    if cost.ndim != 2 or cost.shape[0] != cost.shape[1]:
        raise ShapeError(f"Cost matrix must be square, got shape {cost.shape}.")
    if cost.shape[0] > MAX_ATTENDEES:
        raise ResourceLimitError(
            f"Cost matrix of size {cost.shape[0]} exceeds the limit of {MAX_ATTENDEES}."
        )
    if cost.dtype.kind in "biu":
        cost = cost.astype(np.int64)
    elif cost.dtype.kind == "f":
        cost = cost.astype(np.float64)
        if not np.isfinite(cost).all():
            raise ShapeError("Cost matrix holds non-finite entries; use a finite sentinel.")
    else:
        raise ShapeError(f"Cost matrix must be numeric, got dtype {cost.dtype}.")
    return cost


def _resolve_forbidden(cost: np.ndarray, forbidden):
    """
    "diagonal": the diagonal value, when the diagonal is constant and no
    off-diagonal entry exceeds it (N >= 2); otherwise nothing is forbidden.
    None: nothing is forbidden. A number: entries >= it are forbidden.
    """
    if not isinstance(forbidden, str):
        return forbidden
    if forbidden != DIAGONAL:
        raise ValueError(f"Unknown forbidden mode: {forbidden!r}")
    n = cost.shape[0]
    if n < 2:
        return None
    diag = np.diag(cost)
    if not (diag == diag[0]).all():
        return None
    off = cost[~np.eye(n, dtype=bool)]
    if off.max() > diag[0]:
        return None
    return diag[0].item()


def _check_feasible(cost: np.ndarray, forbidden) -> None:
    blocked = cost >= forbidden
    rows = np.flatnonzero(blocked.all(axis=1))
    if rows.size:
        raise InfeasibleAssignment(f"Every entry of row {int(rows[0])} is forbidden.")
    cols = np.flatnonzero(blocked.all(axis=0))
    if cols.size:
        raise InfeasibleAssignment(f"Every entry of column {int(cols[0])} is forbidden.")


def _with_big_m(cost: np.ndarray, blocked: np.ndarray) -> np.ndarray:
    """
    Replace blocked entries by a cost large enough that a single one
    outweighs any matching of allowed entries.
    """
    n = cost.shape[0]
    legal = cost[~blocked]
    lo, hi = legal.min().item(), legal.max().item()
    big = hi + n * (hi - lo) + 1
    work = cost.copy()
    if work.dtype.kind == "i" and abs(big) * (n + 1) >= 2 ** 62:
        work = work.astype(np.float64)
    work[blocked] = big
    return work


def hungarian(
    cost_matrix: List[List[float]] | np.ndarray,
    forbidden: Union[float, str, None] = DIAGONAL,
) -> List[int]:
    """
    Exact minimum-cost perfect matching of an N x N cost matrix.

    Entries >= forbidden may not be part of the result. By default the
    forbidding sentinel is read off the diagonal (see _resolve_forbidden);
    pass None to treat every entry as allowed. The input is never modified.

    Raises:
        ShapeError: empty, non-square, ragged or non-finite matrix
        ResourceLimitError: N above MAX_ATTENDEES
        InfeasibleAssignment: every perfect matching uses a forbidden entry
    """
    cost = original = _as_cost_array(cost_matrix)
    n = cost.shape[0]
    forbidden = _resolve_forbidden(cost, forbidden)
    blocked = None
    if forbidden is not None:
        _check_feasible(cost, forbidden)
        blocked = cost >= forbidden
        if blocked.any():
            cost = _with_big_m(cost, blocked)

    dtype = cost.dtype
    inf = np.inf if dtype.kind == "f" else np.iinfo(np.int64).max

    # Columns are 1-based; column 0 is the virtual root of each alternating tree.
    u = np.zeros(n + 1, dtype=dtype)
    u[1:] = cost.min(axis=1)
    v = np.zeros(n + 1, dtype=dtype)
    owner = np.zeros(n + 1, dtype=np.int64)   # owner[j] = 1-based row matched to column j, 0 if free
    way = np.zeros(n + 1, dtype=np.int64)     # previous column on the augmenting path

    for i in range(1, n + 1):
        owner[0] = i
        j0 = 0
        minv = np.full(n + 1, inf, dtype=dtype)
        used = np.zeros(n + 1, dtype=bool)

        # Step 1: grow the tree of tight edges until it reaches a free column
        while True:
            used[j0] = True
            i0 = owner[j0]
            free = ~used
            reduced = cost[i0 - 1] - u[i0] - v[1:]
            better = free[1:] & (reduced < minv[1:])
            minv[1:] = np.where(better, reduced, minv[1:])
            way[1:] = np.where(better, j0, way[1:])

            slack = np.where(free, minv, inf)
            j1 = int(np.argmin(slack))
            delta = slack[j1]

            # Step 2: tighten potentials so column j1 becomes tight
            u[owner[used]] += delta
            v[used] -= delta
            minv[free] -= delta

            j0 = j1
            if owner[j0] == 0:
                break

        # Step 3: flip the matching along the augmenting path
        while j0:
            j1 = way[j0]
            owner[j0] = owner[j1]
            j0 = j1

    assign = [-1] * n
    for j in range(1, n + 1):
        assign[owner[j] - 1] = j - 1

    if forbidden is not None:
        bad = [i for i, j in enumerate(assign) if blocked[i, j]]
        if bad:
            raise InfeasibleAssignment(
                f"No perfect matching avoids forbidden entries (row {bad[0]} forced)."
            )

    logger.debug(f"Solved {n}x{n} assignment, total cost {assignment_cost(original, assign)}")
    return assign


def assignment_cost(cost_matrix: List[List[float]] | np.ndarray, assign: Sequence[int]):
    cost = np.asarray(cost_matrix)
    total = cost[np.arange(len(assign)), list(assign)].sum()
    return total.item()
