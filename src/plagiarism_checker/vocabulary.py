from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterator, Mapping, Sequence, Tuple

import numpy as np


class Vocabulary:
    """Distinct terms of two documents in first-seen order (document 1, then 2)."""

    def __init__(self, terms: Sequence[str]) -> None:
        self._index: Dict[str, int] = {}
        for term in terms:
            if term not in self._index:
                self._index[term] = len(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def __iter__(self) -> Iterator[str]:
        return iter(self._index)

    def vectorize(self, weights: Mapping[str, float]) -> np.ndarray:
        vector = np.zeros(len(self._index), dtype=float)
        for term, weight in weights.items():
            position = self._index.get(term)
            if position is not None:
                vector[position] = weight
        return vector


@dataclass
class TermStatistics:
    frequencies: Tuple[Counter, Counter]
    lengths: Tuple[int, int]
    vocabulary: Vocabulary
    document_frequencies: Dict[str, int]


def term_frequencies(tokens: Sequence[str]) -> Counter:
    return Counter(tokens)


def build_vocabulary(tokens_a: Sequence[str], tokens_b: Sequence[str]) -> Vocabulary:
    return Vocabulary([*tokens_a, *tokens_b])


def document_frequencies(
    vocabulary: Vocabulary, tokens_a: Sequence[str], tokens_b: Sequence[str]
) -> Dict[str, int]:
    present_a = set(tokens_a)
    present_b = set(tokens_b)
    return {
        term: int(term in present_a) + int(term in present_b) for term in vocabulary
    }


def build_statistics(tokens_a: Sequence[str], tokens_b: Sequence[str]) -> TermStatistics:
    vocabulary = build_vocabulary(tokens_a, tokens_b)
    return TermStatistics(
        frequencies=(term_frequencies(tokens_a), term_frequencies(tokens_b)),
        lengths=(len(tokens_a), len(tokens_b)),
        vocabulary=vocabulary,
        document_frequencies=document_frequencies(vocabulary, tokens_a, tokens_b),
    )
