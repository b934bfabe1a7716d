import math
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Sequence

import numpy as np

from .models import COSINE_NAME, JACCARD_NAME, TFIDF_NAME
from .preprocess import TextPreprocessor, TextProcessor
from .vocabulary import build_statistics

TOTAL_DOCUMENTS = 2


def cosine_of(vec_a: np.ndarray, vec_b: np.ndarray) -> float:
    """Cosine of two non-negative vectors, 0.0 when either has zero magnitude."""
    if vec_a.size == 0 or vec_b.size == 0:
        return 0.0
    # fsum is exact before rounding, so swapping documents cannot change the score
    dot = math.fsum(np.multiply(vec_a, vec_b).tolist())
    norm_a = math.fsum(np.multiply(vec_a, vec_a).tolist())
    norm_b = math.fsum(np.multiply(vec_b, vec_b).tolist())
    # sqrt of the product keeps identical vectors at exactly 1.0
    denom = math.sqrt(norm_a * norm_b)
    if denom == 0:
        return 0.0
    score = dot / denom
    return min(max(score, 0.0), 1.0)


class SimilarityAlgorithm(ABC):
    name: str

    def calculate(
        self,
        text1: str,
        text2: str,
        case_sensitive: bool = False,
        stop_words: Optional[Iterable[str]] = None,
    ) -> float:
        tokens_a = self.tokenize(text1, case_sensitive, stop_words)
        tokens_b = self.tokenize(text2, case_sensitive, stop_words)
        return self.score_tokens(tokens_a, tokens_b)

    @abstractmethod
    def tokenize(
        self, text: str, case_sensitive: bool, stop_words: Optional[Iterable[str]]
    ) -> List[str]: ...

    @abstractmethod
    def score_tokens(self, tokens_a: Sequence[str], tokens_b: Sequence[str]) -> float: ...


class _ProcessorBacked(SimilarityAlgorithm):
    def __init__(self, processor: TextProcessor) -> None:
        self.processor = processor

    def tokenize(
        self, text: str, case_sensitive: bool, stop_words: Optional[Iterable[str]]
    ) -> List[str]:
        return self.processor.process(
            text, case_sensitive=case_sensitive, stop_words=stop_words
        )


class CosineSimilarity(_ProcessorBacked):
    name = COSINE_NAME

    def score_tokens(self, tokens_a: Sequence[str], tokens_b: Sequence[str]) -> float:
        stats = build_statistics(tokens_a, tokens_b)
        freq_a, freq_b = stats.frequencies
        return cosine_of(
            stats.vocabulary.vectorize(freq_a), stats.vocabulary.vectorize(freq_b)
        )


class JaccardSimilarity(_ProcessorBacked):
    name = JACCARD_NAME

    def score_tokens(self, tokens_a: Sequence[str], tokens_b: Sequence[str]) -> float:
        set_a = set(tokens_a)
        set_b = set(tokens_b)
        union = set_a | set_b
        # empty against empty counts as no similarity
        if not union:
            return 0.0
        return len(set_a & set_b) / len(union)


class TfIdfSimilarity(SimilarityAlgorithm):
    name = TFIDF_NAME

    def __init__(self, preprocessor: TextPreprocessor) -> None:
        self.preprocessor = preprocessor

    def tokenize(
        self, text: str, case_sensitive: bool, stop_words: Optional[Iterable[str]]
    ) -> List[str]:
        return self.preprocessor.preprocess(
            text, case_sensitive=case_sensitive, stop_words=stop_words
        )

    @staticmethod
    def idf(document_frequency: int, total_documents: int = TOTAL_DOCUMENTS) -> float:
        return math.log((1 + total_documents) / (1 + document_frequency)) + 1

    def score_tokens(self, tokens_a: Sequence[str], tokens_b: Sequence[str]) -> float:
        stats = build_statistics(tokens_a, tokens_b)
        idf = {
            term: self.idf(df) for term, df in stats.document_frequencies.items()
        }
        vectors = []
        for counts, length in zip(stats.frequencies, stats.lengths):
            weights = (
                {term: (count / length) * idf[term] for term, count in counts.items()}
                if length
                else {}
            )
            vectors.append(stats.vocabulary.vectorize(weights))
        return cosine_of(vectors[0], vectors[1])
