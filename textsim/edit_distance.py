"""
Levenshtein edit distance.

Summary:
- Minimum number of single-character insertions, deletions and substitutions
  turning one string into the other.

Performance:
- O(len(a) * len(b)) time; keeps only one row of the DP table, sized on the
  shorter string.
"""

from __future__ import annotations


def levenshtein(a: str, b: str) -> int:
    """Return the Levenshtein distance between `a` and `b`.

    Empty strings yield the length of the other string.
    """
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            if ca == cb:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j], current[j - 1], previous[j - 1]))
        previous = current
    return previous[-1]
