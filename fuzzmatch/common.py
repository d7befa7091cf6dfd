"""Sentence tokenisation and affix helpers shared by the scorers."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import groupby
from typing import Any, Sequence

_NARROW_SPACES = frozenset(
    {0x09, 0x0A, 0x0B, 0x0C, 0x0D, 0x1C, 0x1D, 0x1E, 0x1F, 0x20}
)
_WIDE_SPACES = _NARROW_SPACES | frozenset(
    {
        0x85,
        0xA0,
        0x1680,
        *range(0x2000, 0x200B),
        0x2028,
        0x2029,
        0x202F,
        0x205F,
        0x3000,
    }
)


def is_space(ch: str | int) -> bool:
    """Return True for characters of bidirectional type WS, B or S, or category Zs."""
    code = ord(ch) if isinstance(ch, str) else ch
    return code in _WIDE_SPACES


def _is_byte_space(ch: int) -> bool:
    return ch in _NARROW_SPACES


def _as_sequence(seq: Any) -> Sequence:
    if isinstance(seq, (str, bytes, bytearray, list, tuple)):
        return seq
    return list(seq)


class SplittedSentence:
    """A sentence split into words, kept in sorted order by its producer."""

    def __init__(self, words):
        self._words = list(words)
        self._empty = self._words[0][:0] if self._words else ""

    @property
    def words(self) -> list:
        return list(self._words)

    def dedupe(self) -> int:
        """Remove adjacent duplicate words and return how many were removed."""
        old_count = len(self._words)
        self._words = [word for word, _ in groupby(self._words)]
        return old_count - len(self._words)

    def __len__(self) -> int:
        if not self._words:
            return 0
        # one separating space between each pair of words
        return len(self._words) - 1 + sum(len(word) for word in self._words)

    def __bool__(self) -> bool:
        return bool(self._words)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SplittedSentence):
            return NotImplemented
        return self._words == other._words

    def __repr__(self) -> str:
        return f"SplittedSentence({self._words!r})"

    def word_count(self) -> int:
        return len(self._words)

    def join(self):
        """Join the words with single spaces, keeping the type of the input."""
        if not self._words:
            return self._empty
        first = self._words[0]
        if isinstance(first, str):
            return " ".join(self._words)
        if isinstance(first, (bytes, bytearray)):
            return type(first)(b" ").join(self._words)
        joined: list = []
        for index, word in enumerate(self._words):
            if index:
                joined.append(0x20)
            joined.extend(word)
        return joined


def _sentence(words, empty) -> SplittedSentence:
    result = SplittedSentence(words)
    result._empty = empty
    return result


@dataclass
class DecomposedSet:
    """Words found only in the first, only in the second, and in both sentences."""

    difference_ab: SplittedSentence
    difference_ba: SplittedSentence
    intersection: SplittedSentence


def sorted_split(sentence) -> SplittedSentence:
    """Split a sentence on whitespace and sort the resulting words."""
    sentence = _as_sequence(sentence)
    space = _is_byte_space if isinstance(sentence, (bytes, bytearray)) else is_space
    words = []
    start = 0
    for pos, ch in enumerate(sentence):
        if space(ch):
            if pos > start:
                words.append(sentence[start:pos])
            start = pos + 1
    if start < len(sentence):
        words.append(sentence[start:])
    words.sort()
    return _sentence(words, sentence[:0])


def set_decomposition(a: SplittedSentence, b: SplittedSentence) -> DecomposedSet:
    """Split two sorted sentences into their differences and their intersection."""
    a = _sentence(a.words, a._empty)
    b = _sentence(b.words, b._empty)
    a.dedupe()
    b.dedupe()

    intersection = []
    difference_ab = []
    difference_ba = b.words
    for word in a.words:
        if word in difference_ba:
            difference_ba.remove(word)
            intersection.append(word)
        else:
            difference_ab.append(word)

    return DecomposedSet(
        difference_ab=_sentence(difference_ab, a._empty),
        difference_ba=_sentence(difference_ba, b._empty),
        intersection=_sentence(intersection, a._empty),
    )


def _common_prefix_length(s1: Sequence, s2: Sequence) -> int:
    length = 0
    for ch1, ch2 in zip(s1, s2):
        if ch1 != ch2:
            break
        length += 1
    return length


def remove_common_prefix(s1, s2):
    """Return ``(s1_rest, s2_rest, prefix_length)`` with the shared prefix removed."""
    s1 = _as_sequence(s1)
    s2 = _as_sequence(s2)
    prefix = _common_prefix_length(s1, s2)
    return s1[prefix:], s2[prefix:], prefix


def remove_common_suffix(s1, s2):
    """Return ``(s1_rest, s2_rest, suffix_length)`` with the shared suffix removed."""
    s1 = _as_sequence(s1)
    s2 = _as_sequence(s2)
    suffix = _common_prefix_length(s1[::-1], s2[::-1])
    return s1[: len(s1) - suffix], s2[: len(s2) - suffix], suffix


def remove_common_affix(s1, s2):
    """Return ``(s1_rest, s2_rest, prefix_length, suffix_length)``."""
    s1, s2, prefix = remove_common_prefix(s1, s2)
    s1, s2, suffix = remove_common_suffix(s1, s2)
    return s1, s2, prefix, suffix