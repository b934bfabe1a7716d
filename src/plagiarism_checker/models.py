from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Optional


COSINE_NAME = "Cosine Similarity"
JACCARD_NAME = "Jaccard Similarity"
TFIDF_NAME = "TF-IDF Similarity"
AVERAGE_NAME = "Average Similarity"


class InvalidArgumentError(ValueError):
    """Raised when a caller passes an unusable threshold, algorithm or text."""

    def __init__(self, message: str, field: Optional[str] = None, value=None) -> None:
        self.message = message
        self.field = field
        self.value = value
        super().__init__(message)


class Algorithm(str, Enum):
    COSINE = "cosine"
    JACCARD = "jaccard"
    TFIDF = "tfidf"
    AVERAGE = "average"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    Algorithm.COSINE: COSINE_NAME,
    Algorithm.JACCARD: JACCARD_NAME,
    Algorithm.TFIDF: TFIDF_NAME,
    Algorithm.AVERAGE: AVERAGE_NAME,
}


@dataclass(frozen=True)
class PlagiarismResult:
    similarity_score: float
    algorithm: str
    is_plagiarized: bool

    def to_dict(self) -> dict:
        return {
            "similarity_score": self.similarity_score,
            "algorithm": self.algorithm,
            "is_plagiarized": self.is_plagiarized,
        }


@dataclass
class CheckerConfig:
    algorithm: Algorithm = Algorithm.AVERAGE
    threshold: float = 0.7
    case_sensitive: bool = False
    # None keeps the built-in English list; an empty set disables removal.
    stop_words: Optional[FrozenSet[str]] = None


@dataclass
class TextPair:
    pair_id: str
    text1: str
    text2: str
    metadata: Optional[dict] = None
