"""
N-gram vocabularies, TF / TF-IDF text embeddings and cosine similarity.

Summary:
- `fit_ngram_vocabulary` counts n-grams over a corpus, drops rare ones and
  orders the rest by descending count (ties keep first-seen order).
- `text_to_tf_vector` maps one text onto a fixed vocabulary as an
  L2-normalized count vector; tokens outside the vocabulary are ignored.
- `embed_text` / `embed_corpus` wrap it with `EmbeddingOptions`.

Score range:
- `cosine` returns a float in [-1, 1]; 0.0 when either vector is all-zero.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Dict, List, Mapping, Optional, Sequence

import numpy as np

from . import config
from .ngrams import ngrams
from .options import Corpus, EmbeddingOptions, NgramOptions, Token, Vocabulary
from .tfidf import idf, tf_corpus

logger = logging.getLogger(__name__)

_DEFAULT_OPTS = EmbeddingOptions()


def fit_ngram_vocabulary(corpus: Corpus, opts: Optional[EmbeddingOptions] = None) -> Vocabulary:
    opts = opts or _DEFAULT_OPTS
    counts: Counter = Counter()
    for doc in corpus:
        counts.update(ngrams(doc, opts.n, opts.ngram_opts))

    kept = [(tok, c) for tok, c in counts.items() if c >= opts.min_count]
    # sorted() is stable: equal counts stay in first-seen order
    kept.sort(key=lambda item: -item[1])
    vocab = [tok for tok, _ in kept]
    logger.debug(
        "Vocabulary fit: %d distinct tokens, %d kept (n=%d, min_count=%d)",
        len(counts), len(vocab), opts.n, opts.min_count,
    )
    return vocab


def _token_index(vocab: Sequence[Token]) -> Dict[Token, int]:
    return {tok: i for i, tok in enumerate(vocab)}


def _count_vector(text: str, index: Mapping[Token, int], n: int, ngram_opts: Optional[NgramOptions]) -> np.ndarray:
    vec = np.zeros(len(index), dtype=float)
    for tok in ngrams(text, n, ngram_opts):
        i = index.get(tok)
        if i is not None:
            vec[i] += 1.0
    return vec


def _l2_normalize(vec: np.ndarray) -> np.ndarray:
    norm = float(np.linalg.norm(vec))
    if norm == 0.0:
        return vec
    return vec / norm


def text_to_tf_vector(
    text: str,
    vocab: Sequence[Token],
    n: int = config.DEFAULT_NGRAM_SIZE,
    ngram_opts: Optional[NgramOptions] = None,
) -> np.ndarray:
    """L2-normalized n-gram count vector of `text`, aligned on `vocab`.

    Returns the all-zero vector (length len(vocab)) when nothing overlaps.
    """
    return _l2_normalize(_count_vector(text, _token_index(vocab), n, ngram_opts))


def corpus_idf(
    texts: Corpus,
    vocab: Sequence[Token],
    n: int = config.DEFAULT_NGRAM_SIZE,
    ngram_opts: Optional[NgramOptions] = None,
) -> Dict[Token, float]:
    """Smoothed IDF of every vocabulary token over `texts` (single n-gram size)."""
    tokens = [ngrams(t, n, ngram_opts) for t in texts]
    return idf(tf_corpus(tokens), list(vocab))


def embed_text(
    text: str,
    vocab: Sequence[Token],
    opts: Optional[EmbeddingOptions] = None,
    idf_weights: Optional[Mapping[Token, float]] = None,
) -> np.ndarray:
    """Embed one text on `vocab`.

    `weighting="tf"` gives the TF vector and rejects `idf_weights`;
    `weighting="tfidf"` scales the counts by `idf_weights` before
    normalization and requires them, since a lone text carries no corpus
    statistics.
    """
    opts = opts or _DEFAULT_OPTS
    if opts.weighting == "tf":
        if idf_weights is not None:
            raise ValueError("idf_weights given with weighting='tf'; use weighting='tfidf'")
        return text_to_tf_vector(text, vocab, opts.n, opts.ngram_opts)
    if idf_weights is None:
        raise ValueError("weighting='tfidf' requires idf_weights (see corpus_idf)")

    counts = _count_vector(text, _token_index(vocab), opts.n, opts.ngram_opts)
    weights = np.array([idf_weights.get(tok, 0.0) for tok in vocab], dtype=float)
    return _l2_normalize(counts * weights)


def embed_corpus(
    texts: Corpus,
    vocab: Sequence[Token],
    opts: Optional[EmbeddingOptions] = None,
) -> List[np.ndarray]:
    """Embed every text, preserving corpus order.

    With `weighting="tfidf"` the IDF is computed over `texts` themselves.
    """
    opts = opts or _DEFAULT_OPTS
    idf_weights = None
    if opts.weighting == "tfidf":
        idf_weights = corpus_idf(texts, vocab, opts.n, opts.ngram_opts)
    return [embed_text(t, vocab, opts, idf_weights) for t in texts]


def cosine(a: Sequence[float], b: Sequence[float]) -> float:
    """Cosine similarity over the first min(len(a), len(b)) components."""
    k = min(len(a), len(b))
    va = np.asarray(a, dtype=float)[:k]
    vb = np.asarray(b, dtype=float)[:k]
    na = float(np.linalg.norm(va))
    nb = float(np.linalg.norm(vb))
    if na == 0.0 or nb == 0.0:
        return 0.0
    return float(max(-1.0, min(1.0, np.dot(va, vb) / (na * nb))))
