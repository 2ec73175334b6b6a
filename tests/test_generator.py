# FILE: tests/test_generator.py
import numpy as np
import pytest

from match_core.constants import (
    COMPANY_SIZES, COUNTRIES, DEFAULT_NUM_ATTENDEES, INDUSTRIES, INTERESTS, ROLES,
    company_size_category,
)
from match_core.generator import generate_attendees


def test_default_count_and_ids():
    attendees = generate_attendees(seed=0)
    assert len(attendees) == DEFAULT_NUM_ATTENDEES
    assert [a.id for a in attendees] == list(range(DEFAULT_NUM_ATTENDEES))


def test_values_from_vocabularies():
    for a in generate_attendees(60, seed=3):
        assert a.interest in INTERESTS
        assert a.role in ROLES
        assert a.country in COUNTRIES
        assert a.industry in INDUSTRIES
        assert a.company_size in COMPANY_SIZES


def test_seed_reproducible():
    assert generate_attendees(30, seed=8) == generate_attendees(30, seed=8)
    assert generate_attendees(30, seed=8) != generate_attendees(30, seed=9)


def test_accepts_generator():
    rng = np.random.default_rng(8)
    assert generate_attendees(10, rng=rng) == generate_attendees(10, seed=8)


def test_company_size_buckets():
    assert company_size_category(1) == "Small"
    assert company_size_category(50) == "Small"
    assert company_size_category(51) == "Medium"
    assert company_size_category(500) == "Medium"
    assert company_size_category(5001) == "Enterprise"
    assert company_size_category(50000) == "Enterprise"
    with pytest.raises(ValueError):
        company_size_category(0)


def test_negative_count():
    with pytest.raises(ValueError):
        generate_attendees(-1)
