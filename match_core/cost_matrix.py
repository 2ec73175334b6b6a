# FILE: match_core/cost_matrix.py
from __future__ import annotations
import logging
from typing import Optional, Sequence

import numpy as np

from .config import default_scoring_config
from .constants import MAX_ATTENDEES
from .errors import InvalidInput, ResourceLimitError
from .models import Attendee, ScoringConfig
from .scoring import compile_rules

logger = logging.getLogger(__name__)


def _check_attendees(attendees: Sequence[Attendee]) -> None:
    if not attendees:
        raise InvalidInput("No attendees to match.")
    if len(attendees) > MAX_ATTENDEES:
        raise ResourceLimitError(
            f"{len(attendees)} attendees exceeds the limit of {MAX_ATTENDEES}."
        )
    ids = [a.id for a in attendees]
    if len(set(ids)) != len(ids):
        seen, dupes = set(), []
        for i in ids:
            if i in seen:
                dupes.append(i)
            seen.add(i)
        raise InvalidInput(f"Duplicate attendee ids: {sorted(set(dupes))}")


def score_matrix(attendees: Sequence[Attendee], config: ScoringConfig) -> np.ndarray:
    """Raw compatibility score for every ordered pair; diagonal left as computed."""
    n = len(attendees)
    dtype = np.int64 if config.is_integral() else np.float64
    scores = np.zeros((n, n), dtype=dtype)
    for table in compile_rules(config):
        values = [a.attribute(table.name) for a in attendees]
        scores += table.contribution_matrix(values).astype(dtype)
    return scores


def build_cost_matrix(
    attendees: Sequence[Attendee],
    config: Optional[ScoringConfig] = None,
) -> np.ndarray:
    """
    Build the N x N cost matrix for the Hungarian solver:
    - maximize compatibility => minimize -score
    - scores below config.min_score cost config.high_cost
    - self-pairs cost config.forbidden_cost
    """
    config = config or default_scoring_config()
    _check_attendees(attendees)

    scores = score_matrix(attendees, config)
    suppressed = scores < config.min_score
    cost = np.where(suppressed, config.high_cost, -scores).astype(scores.dtype)
    np.fill_diagonal(cost, config.forbidden_cost)

    n = len(attendees)
    low = int(suppressed.sum() - np.diag(suppressed).sum())
    logger.info(f"Built {n}x{n} cost matrix; {low} of {n * (n - 1)} pairs below min score")
    return cost
