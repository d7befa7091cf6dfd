# fuzzmatch

Edit distances and string similarity in pure Python, with no dependencies.

Every function works on any pair of sequences whose items can be compared
for equality: `str`, `bytes`, lists of tokens, tuples. Other iterables are
turned into lists first.

## Installation

```
pip install fuzzmatch
```

To install the test tools as well:

```
pip install "fuzzmatch[test]"
```

## Edit distances

```python
from fuzzmatch.levenshtein import levenshtein_distance, LevenshteinWeightTable
from fuzzmatch.indel import indel_distance, lcs_seq_similarity
from fuzzmatch.osa import osa_distance
from fuzzmatch.hamming import hamming_distance

levenshtein_distance("lewenstein", "levenshtein")                      # 2
levenshtein_distance("lewenstein", "levenshtein",
                     weights=LevenshteinWeightTable(1, 1, 2))          # 3
indel_distance("CA", "ABC")                                            # 3
lcs_seq_similarity("CA", "ABC")                                        # 1
osa_distance("CA", "AC")                                               # 1
hamming_distance("karolin", "kathrin")                                 # 3
```

- **Levenshtein** (`fuzzmatch.levenshtein`): insertions, deletions and
  substitutions. `weights` is a `LevenshteinWeightTable(insert_cost,
  delete_cost, replace_cost)` or a plain `(insert, delete, replace)` tuple;
  negative weights raise `ValueError`.
- **Indel** (`fuzzmatch.indel`): insertions and deletions only, computed
  from the longest common subsequence.
- **OSA** (`fuzzmatch.osa`): optimal string alignment, Levenshtein plus
  transpositions of adjacent elements.
- **Hamming** (`fuzzmatch.hamming`): differing positions. With `pad=True`
  (the default) extra length counts as differences; with `pad=False`
  sequences of different lengths raise `ValueError`.

Each metric comes in four forms, for example `osa_distance`,
`osa_similarity`, `osa_normalized_distance` and `osa_normalized_similarity`.
The normalized forms return a float between 0 and 1. The similarity is the
largest possible distance minus the distance.

### Score cutoffs

Pass `score_cutoff` to limit the result:

- for a distance, any result above the cutoff is reported as
  `score_cutoff + 1` (normalized: `1.0`);
- for a similarity, any result below the cutoff is reported as `0`
  (normalized: `0.0`).

```python
osa_distance("aaaa", "", score_cutoff=1)   # 2
```

The `score_hint` parameters of the Levenshtein and Indel functions are
accepted for compatibility and do not change the result.

## Jaro and Jaro-Winkler

```python
from fuzzmatch.jaro_winkler import jaro_similarity, jaro_winkler_similarity

jaro_winkler_similarity("0", "00")   # 0.85
```

The Winkler boost rewards a common prefix of up to four elements, weighted
by `prefix_weight` (default `0.1`), and is applied only when the Jaro
similarity exceeds 0.7.

## Cached scorers

When one sequence is compared against many others, build a cached scorer
once and reuse it:

```python
from fuzzmatch.levenshtein import CachedLevenshtein

lev = CachedLevenshtein("kitten")
lev.distance("sitting")   # 3
```

The cached scorers are `CachedLevenshtein`, `CachedIndel`, `CachedOSA` and
`CachedJaroWinkler`. Each has `distance`, `similarity`,
`normalized_distance` and `normalized_similarity` methods.

## Edit operations

`hamming_editops` returns an `Editops` list of `EditOp` entries describing
how to turn one sequence into the other. `editops_apply` replays such a list
on the source and returns a list; `editops_apply_str` returns a string.
`Opcodes` and `opcodes_apply` / `opcodes_apply_str` do the same for block
operations.

```python
from fuzzmatch.hamming import hamming_editops
from fuzzmatch.editops import editops_apply_str

ops = hamming_editops("karolin", "kathrin")
editops_apply_str(ops, "karolin", "kathrin")   # "kathrin"
```

## Tokenising helpers

`fuzzmatch.common` holds the helpers the scorers share:

```python
from fuzzmatch.common import sorted_split, set_decomposition, remove_common_affix

sorted_split("b a c").join()                       # "a b c"
parts = set_decomposition(sorted_split("a b c"), sorted_split("b c d"))
parts.intersection.join()                          # "b c"
remove_common_affix("abcx", "abdx")                # ("c", "d", 2, 1)
```

`is_space` tells whitespace characters apart the way `sorted_split` does.

## What the package does not do

There are no 0–100 fuzzy ratio scorers (plain, partial or token-based
ratios), no functions that compute Levenshtein or Indel edit operations, and
no command-line tool: the package is a library of the distance and
similarity functions listed above.

## Running the tests

```
pytest
```