# FILE: tests/test_scoring.py
import numpy as np
import pytest

from match_core.config import default_scoring_config
from match_core.errors import InvalidInput
from match_core.generator import generate_attendees
from match_core.models import AttributeRule, ScoringConfig
from match_core.scoring import RuleTable, compile_rules, pair_score, score_pair
from match_core.test_helpers import quick_attendee, stranger


def test_identical_attendees_score_maximum():
    cfg = default_scoring_config()
    a = quick_attendee(0)
    b = quick_attendee(1)
    assert score_pair(a, b, cfg) == 10 + 8 + 2 + 5 + 7
    assert cfg.max_score() >= score_pair(a, b, cfg)


def test_similar_role_and_industry_bonus():
    cfg = default_scoring_config()
    a = quick_attendee(0, role="Dev", industry="Tech")
    b = quick_attendee(1, role="Architect", industry="Finance")
    # interest 10 + similar role 5 + country 2 + similar industry 2 + size 7
    assert score_pair(a, b, cfg) == 26


def test_similarity_is_directed():
    cfg = ScoringConfig(rules=[
        AttributeRule(name="role", exact_weight=8, similar_weight=5, similar={"Dev": ["PM"]}),
    ])
    dev = quick_attendee(0, role="Dev")
    pm = quick_attendee(1, role="PM")
    assert score_pair(dev, pm, cfg) == 5
    assert score_pair(pm, dev, cfg) == 0


def test_company_size_gap_penalty():
    cfg = default_scoring_config()
    small = stranger(0).model_copy(update={"company_size": "Small"})
    medium = stranger(1).model_copy(update={"company_size": "Medium"})
    large = stranger(2).model_copy(update={"company_size": "Large"})
    # strangers share everything else: interest, role, country, industry
    base = 10 + 8 + 2 + 5
    assert score_pair(small, medium, cfg) == base
    assert score_pair(small, large, cfg) == base - 10
    assert score_pair(large, small, cfg) == base - 10


def test_unknown_bucket_rejected():
    table = RuleTable(AttributeRule(name="company_size", order=["Small", "Medium"], gap_penalty=10))
    with pytest.raises(InvalidInput):
        table.contribution("Small", "Huge")
    with pytest.raises(InvalidInput):
        table.contribution_matrix(["Small", "Huge"])


def test_rank_of_without_order():
    with pytest.raises(InvalidInput):
        RuleTable(AttributeRule(name="country")).rank_of("US")


def test_unknown_attribute_lookup():
    with pytest.raises(InvalidInput):
        quick_attendee(0).attribute("shoe_size")


def test_matrix_form_agrees_with_pairwise_scores():
    cfg = default_scoring_config()
    tables = compile_rules(cfg)
    attendees = generate_attendees(25, seed=5)
    total = np.zeros((25, 25), dtype=np.int64)
    for t in tables:
        total += t.contribution_matrix([a.attribute(t.name) for a in attendees])
    for i, a in enumerate(attendees):
        for j, b in enumerate(attendees):
            assert total[i, j] == pair_score(a, b, tables)
