"""Optimal string alignment distance: Levenshtein plus adjacent transpositions."""

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


def _cap(dist: int, score_cutoff: int | None) -> int:
    if score_cutoff is None or dist <= score_cutoff:
        return dist
    return score_cutoff + 1


def _osa_bitparallel(pattern: dict, len1: int, s2: Sequence) -> int:
    """Bit-parallel OSA distance for a non-empty first sequence of length ``len1``."""
    full = (1 << len1) - 1
    vp = full
    vn = 0
    d0 = 0
    pm_old = 0
    dist = len1
    last = 1 << (len1 - 1)

    for ch in s2:
        pm_j = pattern.get(ch, 0)
        tr = ((~d0 & pm_j) << 1) & pm_old
        d0 = ((((pm_j & vp) + vp) ^ vp) | pm_j | vn | tr) & full

        hp = (vn | ~(d0 | vp)) & full
        hn = d0 & vp

        dist += bool(hp & last)
        dist -= bool(hn & last)

        hp = ((hp << 1) | 1) & full
        hn = (hn << 1) & full

        vp = (hn | ~(d0 | hp)) & full
        vn = hp & d0
        pm_old = pm_j

    return dist


def _distance(s1: Sequence, s2: Sequence, score_cutoff: int | None) -> int:
    if len(s2) < len(s1):
        s1, s2 = s2, s1
    s1, s2, _, _ = remove_common_affix(s1, s2)
    if not s1:
        return _cap(len(s2), score_cutoff)
    return _cap(_osa_bitparallel(_pattern(s1), len(s1), s2), score_cutoff)


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


def osa_distance(s1, s2, score_cutoff=None) -> int:
    """Minimum insertions, deletions, substitutions and adjacent transpositions.

    No substring is edited more than once. A distance above ``score_cutoff``
    is reported as ``score_cutoff + 1``.
    """
    return _distance(_seq(s1), _seq(s2), score_cutoff)


def osa_similarity(s1, s2, score_cutoff=0) -> int:
    """Length of the longer sequence minus the OSA distance."""
    s1, s2 = _seq(s1), _seq(s2)
    return _similarity(lambda cutoff: _distance(s1, s2, cutoff), max(len(s1), len(s2)), score_cutoff)


def osa_normalized_distance(s1, s2, score_cutoff=1.0) -> float:
    """OSA distance divided by the length of the longer sequence."""
    s1, s2 = _seq(s1), _seq(s2)
    return _normalized_distance(
        lambda cutoff: _distance(s1, s2, cutoff), max(len(s1), len(s2)), score_cutoff
    )


def osa_normalized_similarity(s1, s2, score_cutoff=0.0) -> float:
    """One minus the normalized OSA distance."""
    s1, s2 = _seq(s1), _seq(s2)
    return _normalized_similarity(
        lambda cutoff: _distance(s1, s2, cutoff), max(len(s1), len(s2)), score_cutoff
    )


class CachedOSA:
    """OSA scorer with the first sequence prepared for repeated comparisons."""

    def __init__(self, s1):
        self.s1 = _seq(s1)
        self._pattern = _pattern(self.s1)

    def _maximum(self, s2: Sequence) -> int:
        return max(len(self.s1), len(s2))

    def distance(self, s2, score_cutoff=None) -> int:
        s2 = _seq(s2)
        if not self.s1:
            return _cap(len(s2), score_cutoff)
        return _cap(_osa_bitparallel(self._pattern, len(self.s1), s2), score_cutoff)

    def similarity(self, s2, score_cutoff=0) -> int:
        s2 = _seq(s2)
        return _similarity(lambda cutoff: self.distance(s2, cutoff), self._maximum(s2), score_cutoff)

    def normalized_distance(self, s2, score_cutoff=1.0) -> float:
        s2 = _seq(s2)
        return _normalized_distance(
            lambda cutoff: self.distance(s2, cutoff), self._maximum(s2), score_cutoff
        )

    def normalized_similarity(self, s2, score_cutoff=0.0) -> float:
        s2 = _seq(s2)
        return _normalized_similarity(
            lambda cutoff: self.distance(s2, cutoff), self._maximum(s2), score_cutoff
        )