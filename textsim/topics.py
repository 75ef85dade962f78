"""
Topic extraction: TF-IDF softmax matrix factorized with NMF.

Summary:
- `reduce_dimensionality` runs tokens -> TF -> vocabulary -> TF-IDF ->
  softmax -> dense, then hands the matrix to a factorizer
  `(matrix, k) -> (W, H)`: W is documents x topics, H is topics x tokens,
  both non-negative. The default factorizer is scikit-learn's NMF.
- The dominant-* queries read a document-topic matrix W.

Ties:
- Dominant topic / document selection picks uniformly at random among the
  indices sharing the maximum (`tied_max_indices`). Pass `rng` for
  reproducible draws.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, NamedTuple, Optional, Sequence, Tuple, Union

import numpy as np
from sklearn.decomposition import NMF

from . import config
from .options import AllNgramsOptions, Corpus, DenseMatrix, Token, Vocabulary
from .tfidf import sparse_to_dense, softmax_tfidf, tf_corpus, tfidf_corpus, tokens_corpus, vocabulary

logger = logging.getLogger(__name__)

Factorizer = Callable[[np.ndarray, int], Tuple[np.ndarray, np.ndarray]]


class TopicIndexError(IndexError):
    """A document or topic index falls outside the matrix bounds."""


class TopicGroup(NamedTuple):
    representative: str
    documents: List[str]


def nmf_factorize(matrix: np.ndarray, k: int) -> Tuple[np.ndarray, np.ndarray]:
    init = config.NMF_INIT if k <= min(matrix.shape) else "random"
    model = NMF(
        n_components=k,
        init=init,
        random_state=config.NMF_RANDOM_STATE,
        max_iter=config.NMF_MAX_ITER,
    )
    W = model.fit_transform(matrix)
    H = model.components_
    return W, H


def _check_factors(W: np.ndarray, H: np.ndarray, shape: Tuple[int, int], k: int) -> None:
    rows, cols = shape
    if W.shape != (rows, k) or H.shape != (k, cols):
        raise ValueError(
            f"Factorizer returned W{W.shape} and H{H.shape}; expected ({rows}, {k}) and ({k}, {cols})"
        )
    if (W < 0).any() or (H < 0).any():
        raise ValueError("Factorizer returned negative entries")


def reduce_dimensionality(
    corpus: Corpus,
    n_topics: int,
    opts: Optional[AllNgramsOptions] = None,
    factorizer: Optional[Factorizer] = None,
    return_vocabulary: bool = False,
) -> Union[Tuple[DenseMatrix, DenseMatrix], Tuple[DenseMatrix, DenseMatrix, Vocabulary]]:
    """Factor the softmax TF-IDF matrix of `corpus` into `n_topics` topics.

    Returns `(doc_topic_matrix, topic_term_matrix)`; with
    `return_vocabulary=True` the vocabulary indexing the columns of the
    topic-term matrix is appended as a third item.

    An empty corpus or vocabulary returns two empty matrices without calling
    the factorizer.
    """
    if n_topics < 1:
        raise ValueError(f"n_topics must be a positive integer, got {n_topics}")

    tf = tf_corpus(tokens_corpus(corpus, opts))
    vocab = vocabulary(tf)
    if not tf or not vocab:
        logger.info("Empty corpus or vocabulary; skipping factorization")
        W, H = np.zeros((0, 0)), np.zeros((0, 0))
        return (W, H, vocab) if return_vocabulary else (W, H)

    dense = sparse_to_dense(softmax_tfidf(tfidf_corpus(tf, vocab)), vocab)
    factorize = factorizer or nmf_factorize
    W, H = factorize(dense, n_topics)
    W = np.asarray(W, dtype=float)
    H = np.asarray(H, dtype=float)
    _check_factors(W, H, dense.shape, n_topics)
    logger.debug("Factorized %s matrix into %d topics", dense.shape, n_topics)
    return (W, H, vocab) if return_vocabulary else (W, H)


def tied_max_indices(values: Sequence[float]) -> List[int]:
    """Indices holding the maximum of `values` ([] when empty)."""
    arr = np.asarray(values, dtype=float)
    if arr.size == 0:
        return []
    return np.flatnonzero(arr == arr.max()).tolist()


def _pick(values: Sequence[float], rng: Optional[np.random.Generator]) -> int:
    tied = tied_max_indices(values)
    if len(tied) == 1:
        return tied[0]
    rng = rng or np.random.default_rng()
    return int(rng.choice(tied))


def _check_index(index: int, size: int, what: str) -> None:
    if not 0 <= index < size:
        raise TopicIndexError(f"{what} index {index} out of range [0, {size})")


def dominant_topic_index_for_document(
    W: np.ndarray, doc_index: int, rng: Optional[np.random.Generator] = None
) -> int:
    W = np.asarray(W, dtype=float)
    _check_index(doc_index, W.shape[0], "Document")
    return _pick(W[doc_index, :], rng)


def dominant_document_index_for_topic(
    W: np.ndarray, topic_index: int, rng: Optional[np.random.Generator] = None
) -> int:
    W = np.asarray(W, dtype=float)
    _check_index(topic_index, W.shape[1], "Topic")
    return _pick(W[:, topic_index], rng)


def dominant_topics(W: np.ndarray, rng: Optional[np.random.Generator] = None) -> List[int]:
    """Dominant topic of every document, one draw per tied row."""
    W = np.asarray(W, dtype=float)
    return [_pick(W[i, :], rng) for i in range(W.shape[0])]


def documents_for_dominant_topic(
    W: np.ndarray,
    topic_index: int,
    corpus: Sequence[str],
    rng: Optional[np.random.Generator] = None,
) -> List[str]:
    """Documents whose dominant topic is `topic_index`, in corpus order."""
    W = np.asarray(W, dtype=float)
    _check_index(topic_index, W.shape[1], "Topic")
    return [corpus[i] for i, topic in enumerate(dominant_topics(W, rng)) if topic == topic_index]


def group_by_dominant_topic(
    W: np.ndarray,
    corpus: Sequence[str],
    rng: Optional[np.random.Generator] = None,
) -> Dict[int, TopicGroup]:
    """Group documents by dominant topic, keyed by topic index.

    Each group carries the topic's dominant document as a display label.
    Two topics sharing a representative stay distinct entries. Each document
    is assigned once, so it lands in exactly one group even when tied.
    """
    W = np.asarray(W, dtype=float)
    groups: Dict[int, TopicGroup] = {}
    if W.shape[0] == 0:
        return groups
    assignment = dominant_topics(W, rng)
    for topic in range(W.shape[1]):
        representative = corpus[dominant_document_index_for_topic(W, topic, rng)]
        members = [corpus[i] for i, t in enumerate(assignment) if t == topic]
        groups[topic] = TopicGroup(representative, members)
    return groups


def top_terms_for_topic(
    H: np.ndarray, vocab: Sequence[Token], topic_index: int, top_n: int = 10
) -> List[Tuple[Token, float]]:
    """The `top_n` heaviest (token, weight) pairs of one topic row."""
    H = np.asarray(H, dtype=float)
    _check_index(topic_index, H.shape[0], "Topic")
    weights = H[topic_index, :]
    order = np.argsort(-weights, kind="stable")[:top_n]
    return [(vocab[i], float(weights[i])) for i in order]
