# FILE: match_core/errors.py
"""Errors raised by the cost matrix builder and the assignment solver."""
from __future__ import annotations


class MatchError(ValueError):
    """Base class; all matching failures are deterministic and non-retryable."""


class InvalidInput(MatchError):
    """Empty or malformed attendee set, or scoring rules inconsistent with it."""


class ShapeError(MatchError):
    """Cost matrix is empty, not square, or holds non-finite entries."""


class InfeasibleAssignment(MatchError):
    """No perfect matching avoids the forbidden entries."""


class ResourceLimitError(MatchError):
    """Problem size exceeds MAX_ATTENDEES."""
