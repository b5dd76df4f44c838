"""Value objects describing per-language spam detection datasets."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

SUPPORTED_LANGUAGES: Tuple[str, ...] = ("en", "es", "fr", "de", "pt", "it", "nl", "pl", "ru")

LANGUAGE_NAMES: Mapping[str, str] = MappingProxyType(
    {
        "en": "English",
        "es": "Spanish",
        "fr": "French",
        "de": "German",
        "pt": "Portuguese",
        "it": "Italian",
        "nl": "Dutch",
        "pl": "Polish",
        "ru": "Russian",
    }
)


def normalize_language_code(code: Optional[str]) -> str:
    """Lowercase and trim a language code; the result is the cache and lookup key."""
    return (code or "").strip().lower()


def is_supported_language(code: str) -> bool:
    return code in SUPPORTED_LANGUAGES


def get_language_name(code: str) -> str:
    """Return the display name for ``code``, or the code itself when unknown."""
    return LANGUAGE_NAMES.get(code, code)


@dataclass(frozen=True, slots=True)
class SpamWord:
    """Spam phrase with its score contribution and category."""

    word: str
    score: float
    category: str
    case_sensitive: bool = False


@dataclass(frozen=True, slots=True)
class SubjectPattern:
    """Subject line pattern kept as uncompiled regular expression text."""

    pattern: str
    score: float
    name: str


@dataclass(frozen=True, slots=True)
class TokenProbability:
    """P(token|spam) and P(token|ham) used for Bayesian scoring."""

    spam: float
    ham: float


@dataclass(frozen=True, slots=True)
class LanguageDataset:
    """Fully materialized, read-only lexical dataset for one language.

    Instances are shared between callers by the resolver cache, so every
    container is immutable: sequences are tuples and mappings are
    :class:`types.MappingProxyType` views.
    """

    language: str
    language_name: str
    spam_words: Tuple[SpamWord, ...]
    spam_single_words: Mapping[str, float]
    spam_subject_patterns: Tuple[SubjectPattern, ...]
    ham_words: Mapping[str, float]
    bayesian_tokens: Mapping[str, TokenProbability]
    urgency_words: Tuple[str, ...]
    greeting_words: Tuple[str, ...]
    generic_greetings: Tuple[str, ...]

    def to_dict(self) -> Dict[str, object]:
        """Serialize back into the persisted (camelCase) shape."""
        return {
            "language": self.language,
            "languageName": self.language_name,
            "spamWords": [
                {
                    "word": entry.word,
                    "score": entry.score,
                    "category": entry.category,
                    "caseSensitive": entry.case_sensitive,
                }
                for entry in self.spam_words
            ],
            "spamSingleWords": dict(self.spam_single_words),
            "spamSubjectPatterns": [
                {"pattern": entry.pattern, "score": entry.score, "name": entry.name}
                for entry in self.spam_subject_patterns
            ],
            "hamWords": dict(self.ham_words),
            "bayesianTokens": {
                token: {"spam": probability.spam, "ham": probability.ham}
                for token, probability in self.bayesian_tokens.items()
            },
            "urgencyWords": list(self.urgency_words),
            "greetingWords": list(self.greeting_words),
            "genericGreetings": list(self.generic_greetings),
        }
