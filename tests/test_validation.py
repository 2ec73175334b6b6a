# FILE: tests/test_validation.py
from match_core.validation import has_self_match, is_permutation, run_self_test


def test_is_permutation():
    assert is_permutation([1, 0, 2])
    assert not is_permutation([1, 1, 2])
    assert not is_permutation([1, 2, 3])
    assert is_permutation([])


def test_has_self_match():
    assert has_self_match([0, 2, 1])
    assert not has_self_match([1, 2, 0])


def test_self_test_passes():
    results = run_self_test()
    assert results["tests"]
    assert all(ok for _, ok in results["tests"])
