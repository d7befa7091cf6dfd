"""Edit distances, Jaro-Winkler similarity and edit operations for sequences."""

__version__ = "0.1.0"
__all__ = [
    "common",
    "editops",
    "hamming",
    "indel",
    "osa",
    "levenshtein",
    "jaro_winkler",
]