# match_core/generator.py
"""Synthetic attendees for demos and tests."""
from __future__ import annotations
from typing import List, Optional, Sequence

import numpy as np

from .constants import (
    COMPANY_SIZE_RANGES, COUNTRIES, DEFAULT_NUM_ATTENDEES, INDUSTRIES, INTERESTS, ROLES,
    company_size_category,
)
from .models import Attendee


def _pick(rng: np.random.Generator, values: Sequence[str]) -> str:
    return values[int(rng.integers(len(values)))]


def generate_attendees(
    n: int = DEFAULT_NUM_ATTENDEES,
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
) -> List[Attendee]:
    """
    n attendees with uniformly drawn interest, role, country and industry.
    Company size is a head count drawn from the full range, then bucketed,
    so larger buckets are proportionally more common.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    rng = rng if rng is not None else np.random.default_rng(seed)
    lo = min(r[0] for r in COMPANY_SIZE_RANGES.values())
    hi = max(r[1] for r in COMPANY_SIZE_RANGES.values())

    attendees = []
    for i in range(n):
        size = int(rng.integers(lo, hi, endpoint=True))
        attendees.append(Attendee(
            id=i,
            interest=_pick(rng, INTERESTS),
            role=_pick(rng, ROLES),
            country=_pick(rng, COUNTRIES),
            industry=_pick(rng, INDUSTRIES),
            company_size=company_size_category(size),
        ))
    return attendees
