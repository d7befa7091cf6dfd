"""Jaro and Jaro-Winkler similarity of two sequences."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import takewhile

_MAX_PREFIX = 4
_WINKLER_THRESHOLD = 0.7


def _seq(s) -> Sequence:
    return s if isinstance(s, Sequence) else list(s)


def _jaro(s1: Sequence, s2: Sequence) -> float:
    """Raw Jaro similarity without any cutoff applied."""
    len1, len2 = len(s1), len(s2)
    if not len1 and not len2:
        return 1.0
    if not len1 or not len2:
        return 0.0

    bound = max(max(len1, len2) // 2 - 1, 0)
    flags1 = [False] * len1
    flags2 = [False] * len2

    for i, ch in enumerate(s1):
        for j in range(max(0, i - bound), min(len2, i + bound + 1)):
            if not flags2[j] and s2[j] == ch:
                flags1[i] = flags2[j] = True
                break

    matched1 = [ch for ch, flag in zip(s1, flags1) if flag]
    matches = len(matched1)
    if not matches:
        return 0.0

    matched2 = [ch for ch, flag in zip(s2, flags2) if flag]
    transpositions = sum(a != b for a, b in zip(matched1, matched2)) // 2

    return (
        matches / len1 + matches / len2 + (matches - transpositions) / matches
    ) / 3.0


def _common_prefix(s1: Sequence, s2: Sequence) -> int:
    pairs = zip(s1[:_MAX_PREFIX], s2[:_MAX_PREFIX])
    return sum(1 for _ in takewhile(lambda pair: pair[0] == pair[1], pairs))


def _jaro_winkler(s1: Sequence, s2: Sequence, prefix_weight: float) -> float:
    sim = _jaro(s1, s2)
    if sim > _WINKLER_THRESHOLD:
        sim += _common_prefix(s1, s2) * prefix_weight * (1.0 - sim)
        sim = min(sim, 1.0)
    return sim


def _apply_sim_cutoff(sim: float, score_cutoff: float) -> float:
    return sim if sim >= score_cutoff else 0.0


def _apply_dist_cutoff(sim: float, score_cutoff: float) -> float:
    dist = 1.0 - sim
    return dist if dist <= score_cutoff else 1.0


def jaro_similarity(s1, s2, score_cutoff=0.0) -> float:
    """Jaro similarity between 0.0 and 1.0, or 0.0 below ``score_cutoff``."""
    return _apply_sim_cutoff(_jaro(_seq(s1), _seq(s2)), score_cutoff)


def jaro_winkler_similarity(s1, s2, prefix_weight=0.1, score_cutoff=0.0) -> float:
    """Jaro similarity boosted by a common prefix of up to four elements.

    The boost is applied only when the Jaro similarity exceeds 0.7.
    A result below ``score_cutoff`` is reported as 0.0.
    """
    return _apply_sim_cutoff(_jaro_winkler(_seq(s1), _seq(s2), prefix_weight), score_cutoff)


def jaro_winkler_distance(s1, s2, prefix_weight=0.1, score_cutoff=1.0) -> float:
    """One minus the Jaro-Winkler similarity, or 1.0 above ``score_cutoff``."""
    return _apply_dist_cutoff(_jaro_winkler(_seq(s1), _seq(s2), prefix_weight), score_cutoff)


def jaro_winkler_normalized_similarity(s1, s2, prefix_weight=0.1, score_cutoff=0.0) -> float:
    """Same as :func:`jaro_winkler_similarity`, which is already normalized."""
    return jaro_winkler_similarity(s1, s2, prefix_weight, score_cutoff)


def jaro_winkler_normalized_distance(s1, s2, prefix_weight=0.1, score_cutoff=1.0) -> float:
    """Same as :func:`jaro_winkler_distance`, which is already normalized."""
    return jaro_winkler_distance(s1, s2, prefix_weight, score_cutoff)


class CachedJaroWinkler:
    """Jaro-Winkler scorer holding the first sequence for repeated comparisons."""

    def __init__(self, s1, prefix_weight=0.1):
        self.s1 = _seq(s1)
        self.prefix_weight = prefix_weight

    def _raw(self, s2) -> float:
        return _jaro_winkler(self.s1, _seq(s2), self.prefix_weight)

    def similarity(self, s2, score_cutoff=0.0) -> float:
        return _apply_sim_cutoff(self._raw(s2), score_cutoff)

    def distance(self, s2, score_cutoff=1.0) -> float:
        return _apply_dist_cutoff(self._raw(s2), score_cutoff)

    def normalized_similarity(self, s2, score_cutoff=0.0) -> float:
        return self.similarity(s2, score_cutoff)

    def normalized_distance(self, s2, score_cutoff=1.0) -> float:
        return self.distance(s2, score_cutoff)