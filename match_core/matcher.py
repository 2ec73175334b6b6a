# FILE: match_core/matcher.py
from __future__ import annotations
import logging
from typing import List, Literal, Optional, Sequence, Tuple

import numpy as np

from .config import default_scoring_config
from .cost_matrix import build_cost_matrix
from .errors import InfeasibleAssignment
from .hungarian import assignment_cost, hungarian
from .models import Attendee, MatchResult, Pair, ScoringConfig
from .solver_ilp import solve_ilp

logger = logging.getLogger(__name__)


def mutual_pairs(assignment: Sequence[int]) -> List[Tuple[int, int]]:
    """Index pairs (i, j), i < j, where i is assigned j and j is assigned i."""
    return [(i, j) for i, j in enumerate(assignment) if i < j and assignment[j] == i]


def pairs_from_assignment(
    attendees: Sequence[Attendee],
    assignment: Sequence[int],
    cost: np.ndarray,
    config: ScoringConfig,
) -> List[Pair]:
    pairs: List[Pair] = []
    for i, j in enumerate(assignment):
        c = cost[i, j].item()
        pairs.append(Pair(
            left_id=attendees[i].id,
            right_id=attendees[j].id,
            score=None if c >= config.high_cost else -c,
            mutual=assignment[j] == i,
        ))
    return pairs


def match_attendees(
    attendees: Sequence[Attendee],
    config: Optional[ScoringConfig] = None,
    method: Literal["hungarian", "ilp"] = "hungarian",
) -> MatchResult:
    """
    Build the cost matrix, solve it and return directed pairs.

    Every attendee gets exactly one partner as a row; the relation is not
    guaranteed to be symmetric (see MatchResult.mutual_pairs).
    """
    config = config or default_scoring_config()
    cost = build_cost_matrix(attendees, config)

    if method == "hungarian":
        assignment = hungarian(cost, forbidden=config.forbidden_cost)
    elif method == "ilp":
        assignment, err = solve_ilp(cost, forbidden=config.forbidden_cost)
        if assignment is None:
            raise InfeasibleAssignment(err)
    else:
        raise ValueError(f"Unknown method: {method}")

    pairs = pairs_from_assignment(attendees, assignment, cost, config)
    mutual = [(attendees[i].id, attendees[j].id) for i, j in mutual_pairs(assignment)]
    total_score = sum(p.score for p in pairs if p.score is not None)
    suppressed = sum(1 for p in pairs if p.score is None)

    logger.info(
        f"Matched {len(attendees)} attendees via {method}: total score {total_score}, "
        f"{len(mutual)} mutual pairs, {suppressed} below min score"
    )
    return MatchResult(
        assignment=list(assignment),
        pairs=pairs,
        total_cost=assignment_cost(cost, assignment),
        total_score=total_score,
        mutual_pairs=mutual,
        method=method,
    )
