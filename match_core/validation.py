# FILE: match_core/validation.py
from __future__ import annotations
from typing import Sequence


def is_permutation(assign: Sequence[int]) -> bool:
    """assign is a bijection on 0..N-1."""
    return sorted(assign) == list(range(len(assign)))


def has_self_match(assign: Sequence[int]) -> bool:
    return any(i == j for i, j in enumerate(assign))


def run_self_test():
    """
    Run a basic suite of self-tests.
    """
    results = {"tests": []}
    from match_core.hungarian import hungarian, assignment_cost
    matrix = [[4, 1, 3], [2, 0, 5], [3, 2, 2]]
    assignment = hungarian(matrix)
    results["tests"].append(("Hungarian full matching", is_permutation(assignment)))
    results["tests"].append(("Hungarian optimal cost", assignment_cost(matrix, assignment) == 5))

    from match_core.constants import FORBIDDEN_COST
    pair = hungarian([[FORBIDDEN_COST, -32], [-32, FORBIDDEN_COST]])
    results["tests"].append(("Two attendees pair up", pair == [1, 0]))

    from match_core.generator import generate_attendees
    from match_core.matcher import match_attendees
    result = match_attendees(generate_attendees(12, seed=0))
    results["tests"].append(("No attendee matched with themself", not has_self_match(result.assignment)))
    return results
