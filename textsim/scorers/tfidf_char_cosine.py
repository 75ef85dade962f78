"""
TF-IDF character n-gram cosine similarity.

Summary:
- Builds TF-IDF rows over character n-grams (3–5) of the two inputs and
  returns the cosine similarity between them.

Pros:
- Robust to small typos, insertions/deletions, casing changes, and diacritics.
- Works well on short texts; language-agnostic.

Cons:
- Surface-form only; does not capture semantics.
- With a two-document corpus, shared n-grams get a lower IDF than private
  ones, so scores run lower than `ngram_cosine`.

Score range:
- Returns a float in [0.0, 1.0]. Both empty -> 1.0; exactly one empty -> 0.0.
"""

from __future__ import annotations

from ..embeddings import cosine
from ..normalize import normalize_string
from ..options import AllNgramsOptions
from ..tfidf import sparse_to_dense, tf_corpus, tfidf_corpus, tokens_corpus, vocabulary
from .registry import SCORER_REGISTRY


def score_tfidf_char_cosine(
    text_a: str,
    text_b: str,
    ngram_low: int = 3,
    ngram_high: int = 5,
) -> float:
    """Compute cosine similarity over TF-IDF character 3–5 n-grams.

    Method: tokenize both inputs with `all_ngrams` (sizes `ngram_low` to
    `ngram_high`), weight with TF-IDF over the pair, densify on the shared
    vocabulary and compute cosine similarity between the two rows.

    Returns:
    - Cosine similarity as a Python float in [0.0, 1.0].
    """
    a = normalize_string(text_a)
    b = normalize_string(text_b)

    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0

    opts = AllNgramsOptions(min_n=ngram_low, max_n=ngram_high)
    tf = tf_corpus(tokens_corpus([a, b], opts))
    vocab = vocabulary(tf)
    X = sparse_to_dense(tfidf_corpus(tf, vocab), vocab)
    sim = cosine(X[0], X[1])
    return float(max(0.0, min(1.0, sim)))


# Register in global registry without altering existing code paths.
SCORER_REGISTRY["tfidf_char_cosine"] = score_tfidf_char_cosine
