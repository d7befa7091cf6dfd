"""Levenshtein distance with optional weights for insertion, deletion and substitution."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from fuzzmatch.common import remove_common_affix
from fuzzmatch.indel import indel_distance

_NORM_IMPRECISION = 0.00001


@dataclass(frozen=True)
class LevenshteinWeightTable:
    """Costs of the three edit operations."""

    insert_cost: int = 1
    delete_cost: int = 1
    replace_cost: int = 1

    def __post_init__(self):
        if min(self.insert_cost, self.delete_cost, self.replace_cost) < 0:
            raise ValueError("weights must not be negative")


def _weights(weights) -> LevenshteinWeightTable:
    if weights is None:
        return LevenshteinWeightTable()
    if isinstance(weights, LevenshteinWeightTable):
        return weights
    return LevenshteinWeightTable(*weights)


def _seq(s) -> Sequence:
    return s if isinstance(s, Sequence) else list(s)


def _cap(dist: int, score_cutoff: int | None) -> int:
    if score_cutoff is None or dist <= score_cutoff:
        return dist
    return score_cutoff + 1


def _ceil_div(value: int | None, divisor: int) -> int | None:
    if value is None:
        return None
    return -(-value // divisor)


def _pattern(s1: Sequence) -> dict:
    pattern: dict = {}
    for pos, ch in enumerate(s1):
        pattern[ch] = pattern.get(ch, 0) | (1 << pos)
    return pattern


def _maximum(len1: int, len2: int, weights: LevenshteinWeightTable) -> int:
    max_dist = len1 * weights.delete_cost + len2 * weights.insert_cost
    if len1 >= len2:
        return min(max_dist, len2 * weights.replace_cost + (len1 - len2) * weights.delete_cost)
    return min(max_dist, len1 * weights.replace_cost + (len2 - len1) * weights.insert_cost)


def _myers(pattern: dict, len1: int, s2: Sequence) -> int:
    """Bit-parallel uniform Levenshtein distance for a non-empty first sequence."""
    full = (1 << len1) - 1
    vp = full
    vn = 0
    dist = len1
    last = 1 << (len1 - 1)

    for ch in s2:
        x = pattern.get(ch, 0) | vn
        d0 = ((((x & vp) + vp) ^ vp) | x) & full
        hp = (vn | ~(d0 | vp)) & full
        hn = d0 & vp

        dist += bool(hp & last)
        dist -= bool(hn & last)

        hp = ((hp << 1) | 1) & full
        hn = (hn << 1) & full
        vp = (hn | ~(d0 | hp)) & full
        vn = hp & d0

    return dist


def _uniform_distance(s1: Sequence, s2: Sequence, score_cutoff: int | None) -> int:
    if len(s1) > len(s2):
        s1, s2 = s2, s1
    s1, s2, _, _ = remove_common_affix(s1, s2)
    if not s1:
        return _cap(len(s2), score_cutoff)
    return _cap(_myers(_pattern(s1), len(s1), s2), score_cutoff)


def _generalized_distance(
    s1: Sequence, s2: Sequence, weights: LevenshteinWeightTable, score_cutoff: int | None
) -> int:
    """Wagner-Fischer with arbitrary costs, keeping a single row in memory."""
    s1, s2, _, _ = remove_common_affix(s1, s2)
    insert, delete, replace = weights.insert_cost, weights.delete_cost, weights.replace_cost

    row = [pos * delete for pos in range(len(s1) + 1)]
    for ch2 in s2:
        diagonal = row[0]
        row[0] += insert
        for pos, ch1 in enumerate(s1, start=1):
            above = row[pos]
            if ch1 == ch2:
                row[pos] = diagonal
            else:
                row[pos] = min(row[pos - 1] + delete, above + insert, diagonal + replace)
            diagonal = above

    return _cap(row[-1], score_cutoff)


def _distance(
    s1: Sequence, s2: Sequence, weights: LevenshteinWeightTable, score_cutoff: int | None
) -> int:
    if weights.insert_cost == weights.delete_cost:
        # with free insertions and deletions every sequence is reachable at no cost
        if weights.insert_cost == 0:
            return 0

        if weights.insert_cost == weights.replace_cost:
            new_cutoff = _ceil_div(score_cutoff, weights.insert_cost)
            dist = _uniform_distance(s1, s2, new_cutoff) * weights.insert_cost
            return _cap(dist, score_cutoff)

        # substitutions never pay off, so only insertions and deletions remain
        if weights.replace_cost >= weights.insert_cost + weights.delete_cost:
            new_cutoff = _ceil_div(score_cutoff, weights.insert_cost)
            dist = indel_distance(s1, s2, new_cutoff) * weights.insert_cost
            return _cap(dist, score_cutoff)

    return _generalized_distance(s1, s2, weights, score_cutoff)


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


def levenshtein_distance(s1, s2, weights=None, score_cutoff=None, score_hint=None) -> int:
    """Minimum cost of insertions, deletions and substitutions turning ``s1`` into ``s2``.

    ``weights`` is a :class:`LevenshteinWeightTable` or an
    ``(insert, delete, replace)`` tuple. A distance above ``score_cutoff`` is
    reported as ``score_cutoff + 1``.
    """
    return _distance(_seq(s1), _seq(s2), _weights(weights), score_cutoff)


def levenshtein_similarity(s1, s2, weights=None, score_cutoff=0, score_hint=None) -> int:
    """Maximum possible distance minus the Levenshtein distance."""
    s1, s2, weights = _seq(s1), _seq(s2), _weights(weights)
    return _similarity(
        lambda cutoff: _distance(s1, s2, weights, cutoff),
        _maximum(len(s1), len(s2), weights),
        score_cutoff,
    )


def levenshtein_normalized_distance(
    s1, s2, weights=None, score_cutoff=1.0, score_hint=None
) -> float:
    """Levenshtein distance divided by the maximum possible distance."""
    s1, s2, weights = _seq(s1), _seq(s2), _weights(weights)
    return _normalized_distance(
        lambda cutoff: _distance(s1, s2, weights, cutoff),
        _maximum(len(s1), len(s2), weights),
        score_cutoff,
    )


def levenshtein_normalized_similarity(
    s1, s2, weights=None, score_cutoff=0.0, score_hint=None
) -> float:
    """One minus the normalized Levenshtein distance."""
    s1, s2, weights = _seq(s1), _seq(s2), _weights(weights)
    return _normalized_similarity(
        lambda cutoff: _distance(s1, s2, weights, cutoff),
        _maximum(len(s1), len(s2), weights),
        score_cutoff,
    )


class CachedLevenshtein:
    """Levenshtein scorer with the first sequence prepared for repeated comparisons."""

    def __init__(self, s1, weights=None):
        self.s1 = _seq(s1)
        self.weights = _weights(weights)
        self._pattern = _pattern(self.s1)

    def _maximum(self, s2: Sequence) -> int:
        return _maximum(len(self.s1), len(s2), self.weights)

    def _uniform(self, s2: Sequence) -> int:
        if not self.s1:
            return len(s2)
        return _myers(self._pattern, len(self.s1), s2)

    def distance(self, s2, score_cutoff=None, score_hint=None) -> int:
        s2 = _seq(s2)
        weights = self.weights
        if (
            weights.insert_cost == weights.delete_cost == weights.replace_cost
            and weights.insert_cost
        ):
            return _cap(self._uniform(s2) * weights.insert_cost, score_cutoff)
        return _distance(self.s1, s2, weights, score_cutoff)

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