# FILE: match_core/__init__.py
"""
match_core package: attendee models, scoring rules, cost matrix builder,
Hungarian solver, matcher, IO and reports.
"""
from .cost_matrix import build_cost_matrix
from .hungarian import hungarian
from .errors import InfeasibleAssignment, InvalidInput, MatchError, ResourceLimitError, ShapeError

build = build_cost_matrix
solve = hungarian

__all__ = [
    "build",
    "solve",
    "build_cost_matrix",
    "hungarian",
    "MatchError",
    "InvalidInput",
    "ShapeError",
    "InfeasibleAssignment",
    "ResourceLimitError",
]
