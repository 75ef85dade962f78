"""
Normalized Levenshtein similarity.

Summary:
- 1 - levenshtein(a, b) / max(len(a), len(b)) over normalized strings.

When to use:
- Short labels where single-character edits (typos, accents, punctuation)
  should cost little.

Limitations:
- Order-sensitive; swapped words cost as much as rewritten ones.

Score range:
- Returns a float in [0.0, 1.0]. Both empty -> 1.0; exactly one empty -> 0.0.
"""

from ..edit_distance import levenshtein
from ..normalize import normalize_string
from .registry import SCORER_REGISTRY


def score_edit_ratio(text_a: str, text_b: str) -> float:
    a = normalize_string(text_a)
    b = normalize_string(text_b)
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0
    return 1.0 - levenshtein(a, b) / max(len(a), len(b))


# Register in global registry
SCORER_REGISTRY["edit_ratio"] = score_edit_ratio
