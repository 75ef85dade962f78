"""
textsim: character n-gram text similarity toolkit.

Normalization, n-gram tokenization, Levenshtein distance, TF / TF-IDF
embeddings, cosine similarity and NMF topic extraction.
"""

from .edit_distance import levenshtein  # noqa: F401
from .embeddings import (  # noqa: F401
    corpus_idf,
    cosine,
    embed_corpus,
    embed_text,
    fit_ngram_vocabulary,
    text_to_tf_vector,
)
from .ngrams import all_ngrams, ngrams  # noqa: F401
from .normalize import normalize_string  # noqa: F401
from .options import (  # noqa: F401
    AllNgramsOptions,
    EmbeddingOptions,
    NgramOptions,
    NormalizeOptions,
)
from .scorers import SCORER_REGISTRY, nearest  # noqa: F401
from .tfidf import (  # noqa: F401
    idf,
    softmax_tfidf,
    sparse_to_dense,
    tf_corpus,
    tfidf_corpus,
    tokens_corpus,
    vocabulary,
)
from .topics import (  # noqa: F401
    TopicGroup,
    TopicIndexError,
    documents_for_dominant_topic,
    dominant_document_index_for_topic,
    dominant_topic_index_for_document,
    dominant_topics,
    group_by_dominant_topic,
    nmf_factorize,
    reduce_dimensionality,
    tied_max_indices,
    top_terms_for_topic,
)
