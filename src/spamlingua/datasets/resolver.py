"""Cached, always-succeeding lookup of language datasets."""

from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from .registry import DatasetRegistry, RawLanguageDataset
from .schema import (
    SUPPORTED_LANGUAGES,
    LanguageDataset,
    SpamWord,
    SubjectPattern,
    TokenProbability,
    normalize_language_code,
)

logger = logging.getLogger(__name__)


def materialize_dataset(raw: RawLanguageDataset) -> LanguageDataset:
    """Shape a validated raw dataset into its immutable in-memory form."""
    return LanguageDataset(
        language=raw.language,
        language_name=raw.language_name,
        spam_words=tuple(
            SpamWord(
                word=entry.word,
                score=entry.score,
                category=entry.category,
                case_sensitive=entry.case_sensitive,
            )
            for entry in raw.spam_words
        ),
        spam_single_words=MappingProxyType(dict(raw.spam_single_words)),
        spam_subject_patterns=tuple(
            SubjectPattern(pattern=entry.pattern, score=entry.score, name=entry.name)
            for entry in raw.spam_subject_patterns
        ),
        ham_words=MappingProxyType(dict(raw.ham_words)),
        bayesian_tokens=MappingProxyType(
            {
                token: TokenProbability(spam=probability.spam, ham=probability.ham)
                for token, probability in raw.bayesian_tokens.items()
            }
        ),
        urgency_words=tuple(raw.urgency_words),
        greeting_words=tuple(raw.greeting_words),
        generic_greetings=tuple(raw.generic_greetings),
    )


class DatasetResolver:
    """Resolve language codes to datasets, falling back to ``fallback_language``.

    Each resolver owns its cache. Materialization of a code happens at most
    once per cache lifetime; concurrent callers observe the same instance.
    """

    def __init__(
        self,
        registry: DatasetRegistry,
        fallback_language: str = "en",
        supported_languages: Tuple[str, ...] = SUPPORTED_LANGUAGES,
    ) -> None:
        self._registry = registry
        self.fallback_language = normalize_language_code(fallback_language)
        fallback_raw = self._registry.get(self.fallback_language)
        if fallback_raw is None:
            raise ValueError(f"No dataset registered for fallback language '{self.fallback_language}'")
        self._fallback_raw = fallback_raw
        self._supported_languages = tuple(supported_languages)
        self._cache: Dict[str, LanguageDataset] = {}
        self._lock = threading.Lock()

    def resolve(self, code: Optional[str]) -> LanguageDataset:
        normalized = normalize_language_code(code)
        cached = self._cache.get(normalized)
        if cached is not None:
            return cached
        if self._registry.get(normalized) is not None:
            return self._load(normalized)
        if normalized != self.fallback_language:
            logger.warning(
                "Language '%s' not available, falling back to '%s'",
                normalized,
                self.fallback_language,
            )
        return self._load(self.fallback_language)

    def _load(self, normalized: str) -> LanguageDataset:
        with self._lock:
            cached = self._cache.get(normalized)
            if cached is not None:
                return cached
            raw = self._registry.get(normalized)
            if raw is None:
                # unregistered after the availability check in resolve()
                if normalized != self.fallback_language:
                    logger.warning(
                        "Language '%s' no longer available, falling back to '%s'",
                        normalized,
                        self.fallback_language,
                    )
                normalized = self.fallback_language
                cached = self._cache.get(normalized)
                if cached is not None:
                    return cached
                raw = self._registry.get(normalized) or self._fallback_raw
            cached = materialize_dataset(raw)
            self._cache[normalized] = cached
            logger.debug("Materialized dataset for '%s'", normalized)
            return cached

    def is_available(self, code: Optional[str]) -> bool:
        return self._registry.get(normalize_language_code(code)) is not None

    def list_available(self) -> List[str]:
        return self._registry.available_codes()

    def list_supported(self) -> List[str]:
        return list(self._supported_languages)

    def cached_languages(self) -> List[str]:
        return list(self._cache)

    def preload_all(self) -> None:
        """Materialize every registered dataset so first lookups are cheap."""
        for code in self._registry.available_codes():
            self._load(code)

    def clear_cache(self) -> None:
        with self._lock:
            self._cache.clear()

    def spam_words(self, code: Optional[str]) -> Tuple[SpamWord, ...]:
        return self.resolve(code).spam_words

    def spam_single_words(self, code: Optional[str]) -> Mapping[str, float]:
        return self.resolve(code).spam_single_words

    def subject_patterns(self, code: Optional[str]) -> Tuple[SubjectPattern, ...]:
        return self.resolve(code).spam_subject_patterns

    def ham_words(self, code: Optional[str]) -> Mapping[str, float]:
        return self.resolve(code).ham_words

    def bayesian_tokens(self, code: Optional[str]) -> Mapping[str, TokenProbability]:
        return self.resolve(code).bayesian_tokens

    def urgency_words(self, code: Optional[str]) -> Tuple[str, ...]:
        return self.resolve(code).urgency_words

    def greeting_words(self, code: Optional[str]) -> Tuple[str, ...]:
        return self.resolve(code).greeting_words

    def generic_greetings(self, code: Optional[str]) -> Tuple[str, ...]:
        return self.resolve(code).generic_greetings
