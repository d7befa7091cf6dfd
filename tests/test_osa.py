import pytest
from hypothesis import given
from hypothesis import strategies as st

from fuzzmatch.hamming import hamming_distance
from fuzzmatch.indel import indel_distance
from fuzzmatch.osa import (
    CachedOSA,
    osa_distance,
    osa_normalized_distance,
    osa_normalized_similarity,
    osa_similarity,
)

texts = st.text(alphabet="abc", max_size=40)
long_texts = st.text(alphabet="ab", min_size=60, max_size=160)


def checked_osa(s1, s2, cutoff=None):
    result = osa_distance(s1, s2, cutoff)
    scorer = CachedOSA(s1)
    assert scorer.distance(s2, cutoff) == result
    assert osa_distance(list(s1), list(s2), cutoff) == result
    assert osa_distance(iter(s1), iter(s2), cutoff) == result
    return result


def test_empty():
    assert checked_osa("", "") == 0


def test_against_empty():
    assert checked_osa("aaaa", "") == 4
    assert checked_osa("", "aaaa") == 4
    assert checked_osa("aaaa", "", 1) == 2
    assert checked_osa("", "aaaa", 1) == 2


def test_no_double_edit():
    assert checked_osa("CA", "ABC") == 3


def test_transposition():
    assert checked_osa("CA", "AC") == 1


def test_long_with_filler():
    filler = "a" * 64
    s1 = "a" + filler + "CA" + filler + "a"
    s2 = "b" + filler + "AC" + filler + "b"
    assert checked_osa(s1, s2) == 3


def test_normalized_above_cutoff():
    assert osa_normalized_distance("aaaa", "bbbb", score_cutoff=0.5) == 1.0
    assert osa_normalized_similarity("aaaa", "bbbb", score_cutoff=0.5) == 0.0


def test_similarity_cutoff_above_maximum():
    assert osa_similarity("ab", "ab", score_cutoff=3) == 0


@given(texts, texts)
def test_cached_agrees(s1, s2):
    scorer = CachedOSA(s1)
    assert scorer.distance(s2) == osa_distance(s1, s2)
    assert scorer.similarity(s2) == osa_similarity(s1, s2)
    assert scorer.normalized_distance(s2) == pytest.approx(osa_normalized_distance(s1, s2))
    assert scorer.normalized_similarity(s2) == pytest.approx(osa_normalized_similarity(s1, s2))


@given(long_texts, long_texts)
def test_cached_agrees_long(s1, s2):
    assert CachedOSA(s1).distance(s2) == osa_distance(s1, s2)


@given(texts, texts)
def test_bounds(s1, s2):
    dist = osa_distance(s1, s2)
    assert abs(len(s1) - len(s2)) <= dist <= max(len(s1), len(s2))
    assert dist <= indel_distance(s1, s2)
    assert dist == osa_distance(s2, s1)


@given(st.text(alphabet="abc", min_size=1, max_size=40))
def test_identity_and_transposed_prefix(s):
    assert osa_distance(s, s) == 0
    assert osa_distance("xy" + s, "yx" + s) == 1


@given(st.data())
def test_at_most_hamming(data):
    size = data.draw(st.integers(min_value=0, max_value=80))
    s1 = data.draw(st.text(alphabet="ab", min_size=size, max_size=size))
    s2 = data.draw(st.text(alphabet="ab", min_size=size, max_size=size))
    assert osa_distance(s1, s2) <= hamming_distance(s1, s2, pad=False)


@given(texts, texts, st.integers(min_value=0, max_value=10))
def test_cutoff_semantics(s1, s2, cutoff):
    full = osa_distance(s1, s2)
    assert checked_osa(s1, s2, cutoff) == (full if full <= cutoff else cutoff + 1)


@given(texts, texts)
def test_similarity_plus_distance(s1, s2):
    assert osa_similarity(s1, s2) + osa_distance(s1, s2) == max(len(s1), len(s2))