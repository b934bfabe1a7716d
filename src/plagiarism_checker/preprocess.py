import re
from abc import ABC, abstractmethod
from typing import FrozenSet, Iterable, List, Optional

from nltk.tokenize import RegexpTokenizer


# Runs of letters and digits; everything else, underscore included, separates tokens.
_WORD_TOKENIZER = RegexpTokenizer(r"[^\W_]+")

DEFAULT_STOP_WORDS: FrozenSet[str] = frozenset(
    """
    a about above after again against all am an and any are as at be because
    been before being below between both but by can could did do does doing
    down during each few for from further had has have having he her here hers
    herself him himself his how i if in into is it its itself just me more most
    my myself no nor not now of off on once only or other our ours ourselves
    out over own same she should so some such than that the their theirs them
    themselves then there these they this those through to too under until up
    very was we were what when where which while who whom why will with would
    you your yours yourself yourselves
    """.split()
)


def resolve_stop_words(stop_words: Optional[Iterable[str]]) -> FrozenSet[str]:
    """Return the active stop-word set.

    ``None`` selects :data:`DEFAULT_STOP_WORDS`. Any other iterable replaces the
    default list entirely; it is never merged with it.
    """
    if stop_words is None:
        return DEFAULT_STOP_WORDS
    return frozenset(word.lower() for word in stop_words if word)


class TextProcessor(ABC):
    @abstractmethod
    def process(
        self,
        text: str,
        case_sensitive: bool = False,
        stop_words: Optional[Iterable[str]] = None,
    ) -> List[str]: ...


class TextPreprocessor(ABC):
    @abstractmethod
    def preprocess(
        self,
        text: str,
        case_sensitive: bool = False,
        stop_words: Optional[Iterable[str]] = None,
    ) -> List[str]: ...


def _tokenize(
    text: str, case_sensitive: bool, stop_words: Optional[Iterable[str]]
) -> List[str]:
    if not text:
        return []
    active = resolve_stop_words(stop_words)
    tokens: List[str] = []
    for token in _WORD_TOKENIZER.tokenize(text):
        if token.lower() in active:
            continue
        tokens.append(token if case_sensitive else token.lower())
    return tokens


class SimpleTextProcessor(TextProcessor):
    """Case folding, punctuation splitting and stop-word removal."""

    def process(
        self,
        text: str,
        case_sensitive: bool = False,
        stop_words: Optional[Iterable[str]] = None,
    ) -> List[str]:
        return _tokenize(text, case_sensitive, stop_words)


class AdvancedTextPreprocessor(TextPreprocessor):
    """Token stream for TF-IDF weighting.

    Line endings and runs of whitespace are canonicalised before tokenizing.
    The resulting tokens follow the same rules as :class:`SimpleTextProcessor`.
    """

    def preprocess(
        self,
        text: str,
        case_sensitive: bool = False,
        stop_words: Optional[Iterable[str]] = None,
    ) -> List[str]:
        return _tokenize(self._normalize_whitespace(text), case_sensitive, stop_words)

    @staticmethod
    def _normalize_whitespace(text: str) -> str:
        text = text.replace("\r\n", "\n").replace("\r", "\n")
        text = re.sub(r"[ \t\f\v]+", " ", text)
        text = re.sub(r"\n{2,}", "\n", text)
        return text.strip()
