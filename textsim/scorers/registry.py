"""
Global scorer registry.

Exposes `SCORER_REGISTRY`: a mapping from a string key to a callable of the
form `(text_a: str, text_b: str) -> float` that returns a similarity score in
the range [0.0, 1.0].
"""

from typing import Callable, Dict, List, Sequence, Tuple

SCORER_REGISTRY: Dict[str, Callable[[str, str], float]] = {}


def nearest(
    query: str,
    candidates: Sequence[str],
    scorer: str = "ngram_cosine",
    top_k: int = 3,
) -> List[Tuple[int, float]]:
    """Rank `candidates` against `query` with a registered scorer.

    Returns up to `top_k` `(candidate_index, score)` pairs, best first; equal
    scores keep candidate order.
    """
    try:
        fn = SCORER_REGISTRY[scorer]
    except KeyError:
        raise KeyError(
            f"Unknown scorer {scorer!r}; registered: {sorted(SCORER_REGISTRY)}"
        ) from None
    scores = [(i, float(fn(query, c))) for i, c in enumerate(candidates)]
    scores.sort(key=lambda item: -item[1])
    return scores[:top_k]
