"""Raw language classifiers returning ranked ISO 639-3 candidates."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Protocol, Sequence, Tuple

from langdetect import DetectorFactory, LangDetectException, detect_langs

from .codes import UNDETERMINED, to_iso_639_3

try:  # pragma: no cover - optional dependency
    from lingua import LanguageDetectorBuilder
except Exception:  # pragma: no cover - lingua may be unavailable
    LanguageDetectorBuilder = None  # type: ignore

DetectorFactory.seed = 0

logger = logging.getLogger(__name__)

Candidate = Tuple[str, float]


class LanguageClassifier(Protocol):
    """Protocol describing the raw classifier the detector relies on."""

    def classify(self, text: str, min_segment_length: int = 3) -> Sequence[Candidate]: ...


class BaseClassifier(ABC):
    """Abstract raw classifier.

    ``classify`` returns ``(code3, score)`` pairs ranked by descending score.
    Scores are non-negative and only comparable within a single call. Text
    shorter than ``min_segment_length`` yields a single undetermined entry.
    """

    name: str = "base"

    @abstractmethod
    def classify(self, text: str, min_segment_length: int = 3) -> List[Candidate]:
        raise NotImplementedError

    @staticmethod
    def _too_short(text: str, min_segment_length: int) -> bool:
        return len((text or "").strip()) < min_segment_length


class LangdetectClassifier(BaseClassifier):
    """Classifier backed by ``langdetect`` (seeded for deterministic output)."""

    name = "langdetect"

    def classify(self, text: str, min_segment_length: int = 3) -> List[Candidate]:
        if self._too_short(text, min_segment_length):
            return [(UNDETERMINED, 1.0)]
        try:
            candidates = detect_langs(text)
        except LangDetectException as exc:
            logger.warning("langdetect could not classify text: %s", exc)
            return []
        ranked = sorted(candidates, key=lambda candidate: candidate.prob, reverse=True)
        return [(to_iso_639_3(candidate.lang), float(candidate.prob)) for candidate in ranked]


class LinguaClassifier(BaseClassifier):
    """Classifier backed by ``lingua``, which reports ISO 639-3 codes natively."""

    name = "lingua"

    def __init__(self, languages: Optional[Sequence[object]] = None, preload: bool = False) -> None:
        if LanguageDetectorBuilder is None:
            raise RuntimeError("lingua-language-detector is not installed")
        if languages:
            builder = LanguageDetectorBuilder.from_languages(*languages)
        else:
            builder = LanguageDetectorBuilder.from_all_languages()
        if preload:
            builder = builder.with_preloaded_language_models()
        self._detector = builder.build()

    def classify(self, text: str, min_segment_length: int = 3) -> List[Candidate]:
        if self._too_short(text, min_segment_length):
            return [(UNDETERMINED, 1.0)]
        values = self._detector.compute_language_confidence_values(text)
        ranked = [
            (value.language.iso_code_639_3.name.lower(), float(value.value))
            for value in values
            if value.value > 0
        ]
        if not ranked:
            return [(UNDETERMINED, 0.0)]
        ranked.sort(key=lambda candidate: candidate[1], reverse=True)
        return ranked


def build_classifier(backend: str = "langdetect") -> BaseClassifier:
    key = (backend or "").strip().lower()
    if key == LangdetectClassifier.name:
        return LangdetectClassifier()
    if key == LinguaClassifier.name:
        return LinguaClassifier()
    raise ValueError(f"Unknown classifier backend: {backend}")
