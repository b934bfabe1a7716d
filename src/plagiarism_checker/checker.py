import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, Optional, Union

from .models import (
    AVERAGE_NAME,
    Algorithm,
    CheckerConfig,
    InvalidArgumentError,
    PlagiarismResult,
)
from .preprocess import (
    AdvancedTextPreprocessor,
    SimpleTextProcessor,
    TextPreprocessor,
    TextProcessor,
)
from .strategies import (
    CosineSimilarity,
    JaccardSimilarity,
    SimilarityAlgorithm,
    TfIdfSimilarity,
)

_TWO_PLACES = Decimal("0.01")


def round_score(value: float) -> float:
    """Round half-up to two decimals on the shortest decimal form of ``value``."""
    return float(Decimal(repr(float(value))).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))


def _coerce_algorithm(algorithm: Union[Algorithm, str]) -> Algorithm:
    if isinstance(algorithm, Algorithm):
        return algorithm
    try:
        return Algorithm(str(algorithm).lower())
    except ValueError:
        raise InvalidArgumentError(
            f"Unknown algorithm {algorithm!r}; expected one of "
            f"{', '.join(a.value for a in Algorithm)}",
            field="algorithm",
            value=algorithm,
        ) from None


def validate_threshold(threshold: float) -> float:
    if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
        raise InvalidArgumentError(
            f"threshold must be a number, got {type(threshold).__name__}",
            field="threshold",
            value=threshold,
        )
    if not 0.0 <= threshold <= 1.0:
        raise InvalidArgumentError(
            f"threshold must be within [0, 1], got {threshold}",
            field="threshold",
            value=threshold,
        )
    return float(threshold)


def _validate_text(text: str, field: str) -> str:
    if not isinstance(text, str):
        raise InvalidArgumentError(
            f"{field} must be a string, got {type(text).__name__}",
            field=field,
            value=text,
        )
    return text


class PlagiarismChecker:
    """Scores two texts with Cosine, Jaccard and TF-IDF similarity."""

    def __init__(
        self,
        text_processor: Optional[TextProcessor] = None,
        text_preprocessor: Optional[TextPreprocessor] = None,
        config: Optional[CheckerConfig] = None,
    ) -> None:
        self.config = config or CheckerConfig()
        self.text_processor = text_processor or SimpleTextProcessor()
        self.text_preprocessor = text_preprocessor or AdvancedTextPreprocessor()
        self._algorithms: Dict[Algorithm, SimilarityAlgorithm] = {
            Algorithm.COSINE: CosineSimilarity(self.text_processor),
            Algorithm.JACCARD: JaccardSimilarity(self.text_processor),
            Algorithm.TFIDF: TfIdfSimilarity(self.text_preprocessor),
        }

    def check_plagiarism(
        self,
        text1: str,
        text2: str,
        algorithm: Optional[Union[Algorithm, str]] = None,
        threshold: Optional[float] = None,
        case_sensitive: Optional[bool] = None,
        custom_stop_words: Optional[Iterable[str]] = None,
    ) -> PlagiarismResult:
        """Score ``text1`` against ``text2`` and flag it against ``threshold``.

        Args:
            algorithm: Single algorithm to use, or ``Algorithm.AVERAGE`` for the
                mean of all three raw scores. Defaults to the configured algorithm.
            threshold: Inclusive cut-off in [0, 1] compared with the rounded score.
                Defaults to the configured threshold.
            case_sensitive: Overrides the checker configuration for this call.
            custom_stop_words: Replaces the active stop-word list for this call.

        Raises:
            InvalidArgumentError: On an unknown algorithm, a threshold outside
                [0, 1] or non-string texts.
        """
        _validate_text(text1, "text1")
        _validate_text(text2, "text2")
        if algorithm is None:
            algorithm = self.config.algorithm
        if threshold is None:
            threshold = self.config.threshold
        selected = _coerce_algorithm(algorithm)
        threshold = validate_threshold(threshold)
        if case_sensitive is None:
            case_sensitive = self.config.case_sensitive
        stop_words = (
            self.config.stop_words if custom_stop_words is None else custom_stop_words
        )
        if stop_words is not None:
            stop_words = frozenset(stop_words)

        if selected is Algorithm.AVERAGE:
            scores = [
                impl.calculate(text1, text2, case_sensitive, stop_words)
                for impl in self._algorithms.values()
            ]
            raw_score = sum(scores) / len(scores)
        else:
            raw_score = self._algorithms[selected].calculate(
                text1, text2, case_sensitive, stop_words
            )

        score = round_score(raw_score)
        is_plagiarized = score >= threshold
        logging.debug(
            "%s: raw %.6f rounded %.2f threshold %.2f plagiarized=%s",
            selected.display_name,
            raw_score,
            score,
            threshold,
            is_plagiarized,
        )
        return PlagiarismResult(
            similarity_score=score,
            algorithm=selected.display_name,
            is_plagiarized=is_plagiarized,
        )

    def check(self, text1: str, text2: str, **options) -> PlagiarismResult:
        return self.check_plagiarism(text1, text2, **options)

    def get_detailed_results(self, text1: str, text2: str) -> Dict[str, float]:
        """Rounded score per algorithm plus the rounded mean of those rounded scores.

        Always uses the checker's configured case sensitivity and stop words.
        """
        _validate_text(text1, "text1")
        _validate_text(text2, "text2")
        stop_words = self.config.stop_words
        results: Dict[str, float] = {}
        for impl in self._algorithms.values():
            results[impl.name] = round_score(
                impl.calculate(text1, text2, self.config.case_sensitive, stop_words)
            )
        results[AVERAGE_NAME] = round_score(sum(results.values()) / len(results))
        logging.debug("Detailed similarity: %s", results)
        return results
