import pytest
from hypothesis import given
from hypothesis import strategies as st

from fuzzmatch.indel import (
    CachedIndel,
    indel_distance,
    indel_normalized_distance,
    indel_normalized_similarity,
    indel_similarity,
    lcs_seq_similarity,
)

texts = st.text(alphabet="abcd", max_size=40)
long_texts = st.text(alphabet="ab", min_size=60, max_size=160)


def test_against_empty():
    assert indel_distance("", "abc") == 3
    assert indel_distance("abc", "") == 3
    assert indel_distance("", "") == 0


def test_single_substitution_costs_two():
    assert indel_distance("aaaa", "abaa") == 2


def test_lcs_of_identical():
    assert lcs_seq_similarity("abcdef", "abcdef") == 6


def test_lcs_cutoff_returns_zero():
    assert lcs_seq_similarity("abc", "xyz", score_cutoff=1) == 0


def test_distance_cutoff_caps():
    assert indel_distance("abcd", "wxyz", score_cutoff=2) == 3


def test_normalized_distance_above_cutoff_is_one():
    assert indel_normalized_distance("abcd", "wxyz", score_cutoff=0.5) == 1.0


def test_normalized_similarity_below_cutoff_is_zero():
    assert indel_normalized_similarity("abcd", "wxyz", score_cutoff=0.5) == 0.0


def test_normalized_similarity_empty():
    assert indel_normalized_similarity("", "") == 1.0


def test_similarity_cutoff_above_maximum():
    assert indel_similarity("ab", "ab", score_cutoff=5) == 0


def test_accepts_lists():
    assert indel_distance([1, 2, 3], [1, 3]) == indel_distance("abc", "ac")


@given(texts, texts)
def test_distance_and_lcs_relation(s1, s2):
    assert indel_distance(s1, s2) + 2 * lcs_seq_similarity(s1, s2) == len(s1) + len(s2)


@given(texts, texts)
def test_symmetric(s1, s2):
    assert indel_distance(s1, s2) == indel_distance(s2, s1)


@given(long_texts, long_texts)
def test_long_sequences_bounds(s1, s2):
    lcs = lcs_seq_similarity(s1, s2)
    assert lcs <= min(len(s1), len(s2))
    assert indel_distance(s1, s2) >= abs(len(s1) - len(s2))


@given(texts, texts)
def test_cached_matches_plain(s1, s2):
    cached = CachedIndel(s1)
    assert cached.distance(s2) == indel_distance(s1, s2)
    assert cached.similarity(s2) == indel_similarity(s1, s2)
    assert cached.normalized_distance(s2) == pytest.approx(indel_normalized_distance(s1, s2))
    assert cached.normalized_similarity(s2) == pytest.approx(indel_normalized_similarity(s1, s2))


@given(long_texts, long_texts)
def test_cached_long_matches_plain(s1, s2):
    assert CachedIndel(s1).distance(s2) == indel_distance(s1, s2)


@given(texts, texts, st.integers(min_value=0, max_value=10))
def test_cutoff_semantics(s1, s2, cutoff):
    full = indel_distance(s1, s2)
    assert indel_distance(s1, s2, cutoff) == (full if full <= cutoff else cutoff + 1)
    assert CachedIndel(s1).distance(s2, cutoff) == indel_distance(s1, s2, cutoff)


@given(texts, texts)
def test_normalized_sum_to_one(s1, s2):
    total = indel_normalized_distance(s1, s2) + indel_normalized_similarity(s1, s2)
    assert total == pytest.approx(1.0)