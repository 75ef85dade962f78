"""
Sparse TF / TF-IDF pipeline over multi-size character n-grams.

Summary:
- tokens_corpus -> tf_corpus -> vocabulary -> tfidf_corpus -> softmax_tfidf,
  every stage keeping one `{token: weight}` dict per document, in corpus
  order. `sparse_to_dense` turns those dicts into a documents x vocabulary
  matrix.

Weights:
- tf(t, d) = count(t, d) / len(d); empty documents give {}.
- idf(t) = ln((N + 1) / (df(t) + 1)) + 1, positive even when df(t) = 0.
- tfidf(t, d) = tf(t, d) * idf(t), 0.0 for tokens missing from the IDF map.
"""

from __future__ import annotations

import logging
import math
from collections import Counter
from typing import Dict, List, Optional, Sequence

import numpy as np

from .ngrams import all_ngrams
from .options import AllNgramsOptions, Corpus, DenseMatrix, SparseDoc, Token, Vocabulary

logger = logging.getLogger(__name__)


def tokens_corpus(corpus: Corpus, opts: Optional[AllNgramsOptions] = None) -> List[List[Token]]:
    return [all_ngrams(doc, opts) for doc in corpus]


def tf_corpus(tokens_per_doc: Sequence[Sequence[Token]]) -> List[SparseDoc]:
    out: List[SparseDoc] = []
    for doc in tokens_per_doc:
        total = len(doc)
        if total == 0:
            out.append({})
            continue
        out.append({tok: c / total for tok, c in Counter(doc).items()})
    return out


def vocabulary(tf_docs: Sequence[SparseDoc]) -> Vocabulary:
    """Union of the tokens of every document, first-seen order."""
    seen: Dict[Token, None] = {}
    for doc in tf_docs:
        for tok in doc:
            seen.setdefault(tok, None)
    return list(seen)


def document_frequency(tf_docs: Sequence[SparseDoc], vocab: Sequence[Token]) -> Dict[Token, int]:
    return {tok: sum(1 for doc in tf_docs if tok in doc) for tok in vocab}


def idf(tf_docs: Sequence[SparseDoc], vocab: Sequence[Token]) -> Dict[Token, float]:
    n_docs = len(tf_docs)
    df = document_frequency(tf_docs, vocab)
    return {tok: math.log((n_docs + 1) / (df[tok] + 1)) + 1.0 for tok in vocab}


def tfidf_corpus(tf_docs: Sequence[SparseDoc], vocab: Sequence[Token]) -> List[SparseDoc]:
    """TF-IDF per document.

    Every token of a source document gets an entry; tokens absent from
    `vocab` are kept with weight 0.0.
    """
    idf_values = idf(tf_docs, vocab)
    return [
        {tok: tf * idf_values.get(tok, 0.0) for tok, tf in doc.items()}
        for doc in tf_docs
    ]


def softmax_tfidf(tfidf_docs: Sequence[SparseDoc]) -> List[SparseDoc]:
    """Per-document softmax, max-shifted for numerical stability.

    Empty documents map to {}.
    """
    out: List[SparseDoc] = []
    for doc in tfidf_docs:
        if not doc:
            out.append({})
            continue
        peak = max(doc.values())
        exps = {tok: math.exp(w - peak) for tok, w in doc.items()}
        total = sum(exps.values())
        out.append({tok: e / total for tok, e in exps.items()})
    return out


def sparse_to_dense(sparse_docs: Sequence[SparseDoc], vocab: Sequence[Token]) -> DenseMatrix:
    """Rows = documents, columns = `vocab` order; missing tokens are 0.0.

    Document tokens outside `vocab` are ignored. Returns shape
    (len(sparse_docs), len(vocab)).
    """
    index = {tok: i for i, tok in enumerate(vocab)}
    dense = np.zeros((len(sparse_docs), len(vocab)), dtype=float)
    for row, doc in enumerate(sparse_docs):
        for tok, value in doc.items():
            col = index.get(tok)
            if col is not None:
                dense[row, col] = value
    logger.debug("Densified %d documents over %d tokens", dense.shape[0], dense.shape[1])
    return dense
