# FILE: tests/test_cost_matrix.py
import numpy as np
import pytest

from match_core.config import DEFAULT_SCORING, default_scoring_config, scoring_config_from_dict
from match_core.constants import FORBIDDEN_COST, HIGH_COST, MAX_ATTENDEES
from match_core.cost_matrix import build_cost_matrix, score_matrix
from match_core.errors import InvalidInput, ResourceLimitError
from match_core.generator import generate_attendees
from match_core.hungarian import hungarian
from match_core.scoring import score_pair
from match_core.test_helpers import quick_attendee, stranger


def _with_interest_weight(weight):
    obj = {**DEFAULT_SCORING, "rules": [dict(r) for r in DEFAULT_SCORING["rules"]]}
    obj["rules"][0]["exact_weight"] = weight
    return scoring_config_from_dict(obj)


def test_two_identical_attendees():
    cost = build_cost_matrix([quick_attendee(0), quick_attendee(1)])
    assert cost.tolist() == [[FORBIDDEN_COST, -32], [-32, FORBIDDEN_COST]]
    assert hungarian(cost) == [1, 0]


def test_low_score_suppressed():
    a = quick_attendee(0)
    b = stranger(1)  # Small vs Enterprise: score -10
    cost = build_cost_matrix([a, b])
    assert cost[0, 1] == HIGH_COST
    assert cost[1, 0] == HIGH_COST


def test_min_score_is_inclusive():
    a = quick_attendee(0, interest="AI", role="Dev", country="US", industry="Retail", company_size="Small")
    b = quick_attendee(1, interest="IoT", role="PM", country="UK", industry="Retail", company_size="Medium")
    assert score_pair(a, b, default_scoring_config()) == 5
    assert build_cost_matrix([a, b])[0, 1] == -5


def test_every_entry_follows_threshold_rule():
    cfg = default_scoring_config()
    attendees = generate_attendees(40, seed=1)
    cost = build_cost_matrix(attendees, cfg)
    scores = score_matrix(attendees, cfg)
    n = len(attendees)
    assert cost.shape == (n, n)
    assert cost.dtype == np.int64
    for i in range(n):
        for j in range(n):
            if i == j:
                assert cost[i, j] == FORBIDDEN_COST
            elif scores[i, j] < cfg.min_score:
                assert cost[i, j] == HIGH_COST
            else:
                assert cost[i, j] == -scores[i, j]


def test_deterministic_and_order_driven():
    attendees = generate_attendees(15, seed=2)
    first = build_cost_matrix(attendees)
    assert np.array_equal(first, build_cost_matrix(attendees))
    reversed_cost = build_cost_matrix(list(reversed(attendees)))
    assert np.array_equal(reversed_cost, first[::-1, ::-1])


def test_empty_rejected():
    with pytest.raises(InvalidInput):
        build_cost_matrix([])


def test_duplicate_ids_rejected():
    with pytest.raises(InvalidInput, match="Duplicate"):
        build_cost_matrix([quick_attendee(0), quick_attendee(1), quick_attendee(0)])


def test_undeclared_bucket_rejected():
    with pytest.raises(InvalidInput):
        build_cost_matrix([quick_attendee(0), quick_attendee(1, company_size="Mega")])


def test_size_limit():
    attendees = [quick_attendee(i) for i in range(MAX_ATTENDEES + 1)]
    with pytest.raises(ResourceLimitError):
        build_cost_matrix(attendees)


def test_fractional_weights_give_float_matrix():
    cost = build_cost_matrix([quick_attendee(0), quick_attendee(1)], _with_interest_weight(10.5))
    assert cost.dtype == np.float64
    assert cost[0, 1] == pytest.approx(-32.5)


def test_raising_exact_weight_never_lowers_shared_scores():
    attendees = generate_attendees(30, seed=4)
    shared = np.array([[a.interest == b.interest for b in attendees] for a in attendees])
    before = score_matrix(attendees, _with_interest_weight(10))
    after = score_matrix(attendees, _with_interest_weight(15))
    assert after[shared].sum() >= before[shared].sum()
    assert np.all(after[shared] >= before[shared])
    assert np.array_equal(after[~shared], before[~shared])
