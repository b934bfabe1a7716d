import numpy as np

from plagiarism_checker.vocabulary import (
    build_statistics,
    build_vocabulary,
    document_frequencies,
    term_frequencies,
)


def test_vocabulary_first_seen_order():
    vocabulary = build_vocabulary(["b", "a", "b"], ["c", "a"])
    assert list(vocabulary) == ["b", "a", "c"]
    assert len(vocabulary) == 3


def test_vectorize_fills_zeros_and_ignores_unknown_terms():
    vocabulary = build_vocabulary(["b", "a"], ["c"])
    vector = vocabulary.vectorize({"a": 2, "z": 5})
    np.testing.assert_array_equal(vector, [0.0, 2.0, 0.0])


def test_term_frequencies():
    assert term_frequencies(["x", "y", "x"]) == {"x": 2, "y": 1}


def test_document_frequencies():
    vocabulary = build_vocabulary(["b", "a", "b"], ["c", "a"])
    assert document_frequencies(vocabulary, ["b", "a", "b"], ["c", "a"]) == {
        "b": 1,
        "a": 2,
        "c": 1,
    }


def test_build_statistics():
    stats = build_statistics(["b", "a", "b"], ["c", "a"])
    assert stats.lengths == (3, 2)
    assert stats.frequencies[0] == {"b": 2, "a": 1}
    assert list(stats.vocabulary) == ["b", "a", "c"]


def test_empty_documents():
    stats = build_statistics([], [])
    assert len(stats.vocabulary) == 0
    assert stats.document_frequencies == {}
