"""Indel distance: insertions and deletions only, computed through the LCS."""

from __future__ import annotations

import math
from collections.abc import Sequence

from fuzzmatch.common import remove_common_affix

_NORM_IMPRECISION = 0.00001


def _seq(s) -> Sequence:
    return s if isinstance(s, Sequence) else list(s)


def _pattern(s1: Sequence) -> dict:
    pattern: dict = {}
    for pos, ch in enumerate(s1):
        pattern[ch] = pattern.get(ch, 0) | (1 << pos)
    return pattern


def _lcs_bitparallel(pattern: dict, len1: int, s2: Sequence) -> int:
    if not len1:
        return 0
    full = (1 << len1) - 1
    state = full
    for ch in s2:
        matches = state & pattern.get(ch, 0)
        state = ((state + matches) | (state - matches)) & full
    return len1 - state.bit_count()


def _cap(dist: int, score_cutoff: int | None) -> int:
    if score_cutoff is None or dist <= score_cutoff:
        return dist
    return score_cutoff + 1


def lcs_seq_similarity(s1, s2, score_cutoff=0) -> int:
    """Length of the longest common subsequence, or 0 below ``score_cutoff``."""
    rest1, rest2, prefix, suffix = remove_common_affix(_seq(s1), _seq(s2))
    sim = prefix + suffix
    if rest1 and rest2:
        sim += _lcs_bitparallel(_pattern(rest1), len(rest1), rest2)
    return sim if sim >= score_cutoff else 0


def _distance(s1: Sequence, s2: Sequence, score_cutoff, lcs: int) -> int:
    return _cap(len(s1) + len(s2) - 2 * lcs, score_cutoff)


def indel_distance(s1, s2, score_cutoff=None) -> int:
    """Minimum number of insertions and deletions turning ``s1`` into ``s2``.

    A distance above ``score_cutoff`` is reported as ``score_cutoff + 1``.
    """
    s1, s2 = _seq(s1), _seq(s2)
    return _distance(s1, s2, score_cutoff, lcs_seq_similarity(s1, s2))


def _similarity(distance_fn, maximum: int, score_cutoff: int) -> int:
    if score_cutoff > maximum:
        return 0
    sim = maximum - distance_fn(maximum - score_cutoff)
    return sim if sim >= score_cutoff else 0


def _normalized_distance(distance_fn, maximum: int, score_cutoff: float) -> float:
    dist = distance_fn(math.ceil(maximum * score_cutoff))
    norm_dist = dist / maximum if maximum else 0.0
    return norm_dist if norm_dist <= score_cutoff else 1.0


def _normalized_similarity(distance_fn, maximum: int, score_cutoff: float) -> float:
    cutoff_score = min(1.0, 1.0 - score_cutoff + _NORM_IMPRECISION)
    norm_sim = 1.0 - _normalized_distance(distance_fn, maximum, cutoff_score)
    return norm_sim if norm_sim >= score_cutoff else 0.0


def indel_similarity(s1, s2, score_cutoff=0) -> int:
    """Combined length minus the Indel distance, or 0 below ``score_cutoff``."""
    s1, s2 = _seq(s1), _seq(s2)
    return _similarity(lambda cutoff: indel_distance(s1, s2, cutoff), len(s1) + len(s2), score_cutoff)


def indel_normalized_distance(s1, s2, score_cutoff=1.0) -> float:
    """Indel distance divided by the combined length, 1.0 above ``score_cutoff``."""
    s1, s2 = _seq(s1), _seq(s2)
    return _normalized_distance(
        lambda cutoff: indel_distance(s1, s2, cutoff), len(s1) + len(s2), score_cutoff
    )


def indel_normalized_similarity(s1, s2, score_cutoff=0.0) -> float:
    """One minus the normalized Indel distance, 0.0 below ``score_cutoff``."""
    s1, s2 = _seq(s1), _seq(s2)
    return _normalized_similarity(
        lambda cutoff: indel_distance(s1, s2, cutoff), len(s1) + len(s2), score_cutoff
    )


class CachedIndel:
    """Indel scorer with the first sequence prepared for repeated comparisons."""

    def __init__(self, s1):
        self.s1 = _seq(s1)
        self._pattern = _pattern(self.s1)

    def _maximum(self, s2: Sequence) -> int:
        return len(self.s1) + len(s2)

    def _lcs(self, s2: Sequence) -> int:
        return _lcs_bitparallel(self._pattern, len(self.s1), s2)

    def distance(self, s2, score_cutoff=None, score_hint=None) -> int:
        s2 = _seq(s2)
        return _distance(self.s1, s2, score_cutoff, self._lcs(s2))

    def similarity(self, s2, score_cutoff=0, score_hint=None) -> int:
        s2 = _seq(s2)
        return _similarity(lambda cutoff: self.distance(s2, cutoff), self._maximum(s2), score_cutoff)

    def normalized_distance(self, s2, score_cutoff=1.0, score_hint=None) -> float:
        s2 = _seq(s2)
        return _normalized_distance(
            lambda cutoff: self.distance(s2, cutoff), self._maximum(s2), score_cutoff
        )

    def normalized_similarity(self, s2, score_cutoff=0.0, score_hint=None) -> float:
        s2 = _seq(s2)
        return _normalized_similarity(
            lambda cutoff: self.distance(s2, cutoff), self._maximum(s2), score_cutoff
        )