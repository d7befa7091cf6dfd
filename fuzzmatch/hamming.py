"""Hamming distance: the number of positions at which two sequences differ."""

from __future__ import annotations

import math
from collections.abc import Sequence

from fuzzmatch.editops import EditOp, Editops, EditType

_NORM_IMPRECISION = 0.00001


def _seq(s) -> Sequence:
    return s if isinstance(s, Sequence) else list(s)


def _maximum(s1: Sequence, s2: Sequence) -> int:
    return max(len(s1), len(s2))


def _distance(s1: Sequence, s2: Sequence, pad: bool, score_cutoff: int | None) -> int:
    if not pad and len(s1) != len(s2):
        raise ValueError("Sequences are not the same length.")

    matches = sum(ch1 == ch2 for ch1, ch2 in zip(s1, s2))
    dist = _maximum(s1, s2) - matches
    if score_cutoff is None or dist <= score_cutoff:
        return dist
    return score_cutoff + 1


def hamming_distance(s1, s2, pad=True, score_cutoff=None) -> int:
    """Count differing positions; with ``pad`` extra length counts as differences.

    Without ``pad`` the sequences must have the same length. A distance above
    ``score_cutoff`` is reported as ``score_cutoff + 1``.
    """
    return _distance(_seq(s1), _seq(s2), pad, score_cutoff)


def hamming_similarity(s1, s2, pad=True, score_cutoff=0) -> int:
    """Return the length of the longer sequence minus the Hamming distance."""
    s1, s2 = _seq(s1), _seq(s2)
    maximum = _maximum(s1, s2)
    if score_cutoff > maximum:
        return 0
    dist = _distance(s1, s2, pad, maximum - score_cutoff)
    sim = maximum - dist
    return sim if sim >= score_cutoff else 0


def hamming_normalized_distance(s1, s2, pad=True, score_cutoff=1.0) -> float:
    """Return the Hamming distance divided by the length of the longer sequence."""
    s1, s2 = _seq(s1), _seq(s2)
    maximum = _maximum(s1, s2)
    cutoff_distance = math.ceil(maximum * score_cutoff)
    dist = _distance(s1, s2, pad, cutoff_distance)
    norm_dist = dist / maximum if maximum else 0.0
    return norm_dist if norm_dist <= score_cutoff else 1.0


def hamming_normalized_similarity(s1, s2, pad=True, score_cutoff=0.0) -> float:
    """Return one minus the normalized Hamming distance."""
    cutoff_score = min(1.0, 1.0 - score_cutoff + _NORM_IMPRECISION)
    norm_sim = 1.0 - hamming_normalized_distance(s1, s2, pad, cutoff_score)
    return norm_sim if norm_sim >= score_cutoff else 0.0


def hamming_editops(s1, s2, pad=True) -> Editops:
    """Return the replacements, deletions and insertions turning ``s1`` into ``s2``."""
    s1, s2 = _seq(s1), _seq(s2)
    if not pad and len(s1) != len(s2):
        raise ValueError("Sequences are not the same length.")

    len1, len2 = len(s1), len(s2)
    min_len = min(len1, len2)
    ops = [
        EditOp(EditType.REPLACE, pos, pos)
        for pos, (ch1, ch2) in enumerate(zip(s1, s2))
        if ch1 != ch2
    ]
    ops.extend(EditOp(EditType.DELETE, pos, len2) for pos in range(min_len, len1))
    ops.extend(EditOp(EditType.INSERT, len1, pos) for pos in range(min_len, len2))
    return Editops(ops, len1, len2)