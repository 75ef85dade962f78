"""
Character n-gram TF cosine similarity.

Summary:
- Fits an n-gram vocabulary on the pair, embeds both texts as L2-normalized
  TF vectors and returns their cosine.

Pros:
- Robust to casing, accents and small edits; no corpus needed.

Cons:
- Surface-form only; does not capture semantics.

Score range:
- Returns a float in [0.0, 1.0]. Both empty -> 1.0; exactly one empty -> 0.0.
"""

from __future__ import annotations

from ..embeddings import cosine, embed_corpus, fit_ngram_vocabulary
from ..normalize import normalize_string
from ..options import EmbeddingOptions
from .registry import SCORER_REGISTRY


def score_ngram_cosine(text_a: str, text_b: str, n: int = 3) -> float:
    """Cosine of TF n-gram embeddings of `text_a` and `text_b`.

    Method: fit a size-`n` vocabulary over both inputs, embed each with
    `embed_corpus` and compute cosine similarity.
    """
    a = normalize_string(text_a)
    b = normalize_string(text_b)
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0

    opts = EmbeddingOptions(n=n)
    pair = [text_a, text_b]
    vocab = fit_ngram_vocabulary(pair, opts)
    va, vb = embed_corpus(pair, vocab, opts)
    return max(0.0, min(1.0, cosine(va, vb)))


SCORER_REGISTRY["ngram_cosine"] = score_ngram_cosine
