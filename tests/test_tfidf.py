import math

import numpy as np
import pytest

from textsim import (
    AllNgramsOptions,
    idf,
    softmax_tfidf,
    sparse_to_dense,
    tf_corpus,
    tfidf_corpus,
    tokens_corpus,
    vocabulary,
)

CORPUS = [
    "Le chat est un animal domestique.",
    "Le chien est un animal domestique.",
    "Le perroquet est un oiseau coloré.",
]


def test_tokens_corpus_one_list_per_document():
    toks = tokens_corpus(["abc", "", "ab"], AllNgramsOptions(min_n=1, max_n=2))
    assert toks == [["a", "b", "c", "ab", "bc"], [], ["a", "b", "ab"]]


def test_tf_corpus_frequencies():
    tf = tf_corpus([["a", "b", "a", "c"], []])
    assert tf[0] == pytest.approx({"a": 0.5, "b": 0.25, "c": 0.25})
    assert tf[1] == {}


def test_vocabulary_is_union_of_tokens():
    vocab = vocabulary([{"a": 0.5, "b": 0.5}, {"b": 1.0, "c": 1.0}, {}])
    assert set(vocab) == {"a", "b", "c"}
    assert len(vocab) == 3


def test_idf_smoothed():
    tf = [{"a": 1.0}, {"a": 0.5, "b": 0.5}]
    weights = idf(tf, ["a", "b", "zz"])
    assert weights["a"] == pytest.approx(math.log(3 / 3) + 1)
    assert weights["b"] == pytest.approx(math.log(3 / 2) + 1)
    assert weights["zz"] == pytest.approx(math.log(3 / 1) + 1)


def test_idf_empty_corpus():
    weights = idf([], ["a"])
    assert weights["a"] == pytest.approx(math.log(1 / 1) + 1)
    assert weights["a"] > 0


def test_tfidf_weights_and_out_of_vocabulary_tokens():
    tf = [{"a": 0.5, "b": 0.5}, {"a": 1.0}]
    out = tfidf_corpus(tf, ["a"])
    assert out[0]["a"] == pytest.approx(0.5 * 1.0)
    # "b" is kept with zero weight
    assert out[0]["b"] == 0.0
    assert out[1] == pytest.approx({"a": 1.0})


def test_softmax_simple_document():
    result = softmax_tfidf([{"a": 1.0, "b": 2.0, "c": 3.0}])[0]
    assert sum(result.values()) == pytest.approx(1.0, abs=1e-6)
    assert max(result, key=result.get) == "c"


def test_softmax_negative_values():
    result = softmax_tfidf([{"x": -1.0, "y": -2.0, "z": -3.0}])[0]
    assert sum(result.values()) == pytest.approx(1.0, abs=1e-6)
    assert max(result, key=result.get) == "x"


def test_softmax_empty_document():
    assert softmax_tfidf([{}]) == [{}]


def test_softmax_several_documents():
    results = softmax_tfidf([{"a": 0.0, "b": 0.0}, {"x": 10.0, "y": 0.0}, {"big": 1000.0, "small": -1000.0}])
    for doc in results:
        assert sum(doc.values()) == pytest.approx(1.0, abs=1e-6)
    assert results[0] == pytest.approx({"a": 0.5, "b": 0.5})
    assert max(results[1], key=results[1].get) == "x"


def test_sparse_to_dense_single_document():
    dense = sparse_to_dense([{"a": 1.0, "c": 2.0}], ["a", "b", "c"])
    assert dense.tolist() == [[1.0, 0.0, 2.0]]


def test_sparse_to_dense_several_documents_and_missing_tokens():
    dense = sparse_to_dense([{"x": 3.0}, {"y": 4.0, "unknown": 9.0}, {}], ["x", "y"])
    assert dense.tolist() == [[3.0, 0.0], [0.0, 4.0], [0.0, 0.0]]


def test_sparse_to_dense_degenerate_shapes():
    assert sparse_to_dense([{"a": 1.0}], []).shape == (1, 0)
    assert sparse_to_dense([], ["a", "b"]).size == 0


def test_pipeline_dimensions():
    opts = AllNgramsOptions(min_n=2, max_n=4)
    tf = tf_corpus(tokens_corpus(CORPUS, opts))
    vocab = vocabulary(tf)
    dense = sparse_to_dense(tfidf_corpus(tf, vocab), vocab)
    assert dense.shape == (len(CORPUS), len(vocab))

    soft = sparse_to_dense(softmax_tfidf(tfidf_corpus(tf, vocab)), vocab)
    np.testing.assert_allclose(soft.sum(axis=1), np.ones(len(CORPUS)))
    assert (soft >= 0).all()
