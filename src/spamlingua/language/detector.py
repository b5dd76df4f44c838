"""Language detection and subject/body signal combination for emails."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..datasets.schema import SUPPORTED_LANGUAGES
from .classifiers import LanguageClassifier
from .codes import UNDETERMINED, to_iso_639_1

logger = logging.getLogger(__name__)

DEFAULT_MIN_LENGTH = 10
CLASSIFIER_MIN_SEGMENT_LENGTH = 3
CONFIDENCE_WINDOW = 5
SHORT_EMAIL_LENGTH = 50
SUBJECT_MIN_LENGTH = 5
BODY_MIN_LENGTH = 10
BODY_TRUST_THRESHOLD = 0.7


@dataclass(frozen=True, slots=True)
class LanguageDetectionResult:
    """Outcome of a detection; ``code`` is always a supported language."""

    code: str
    confidence: float
    is_supported: bool
    raw_code: str

    def to_dict(self) -> dict[str, object]:
        return {
            "code": self.code,
            "confidence": self.confidence,
            "is_supported": self.is_supported,
            "raw_code": self.raw_code,
        }


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return min(high, max(low, value))


class LanguageDetector:
    """Detect the language of text and merge subject/body detections.

    No method raises for string input: empty, short or unclassifiable text
    yields a zero-confidence result for ``default_language``.
    """

    def __init__(
        self,
        classifier: LanguageClassifier,
        supported_languages: Sequence[str] = SUPPORTED_LANGUAGES,
        default_language: str = "en",
    ) -> None:
        self._classifier = classifier
        self.supported_languages = tuple(supported_languages)
        self.default_language = default_language

    def _default_result(self, raw_code: str = UNDETERMINED) -> LanguageDetectionResult:
        return LanguageDetectionResult(
            code=self.default_language,
            confidence=0.0,
            is_supported=True,
            raw_code=raw_code,
        )

    def _map_candidate(self, raw_code: str, confidence: float) -> LanguageDetectionResult:
        iso_code = to_iso_639_1(raw_code)
        is_supported = iso_code in self.supported_languages
        return LanguageDetectionResult(
            code=iso_code if is_supported else self.default_language,
            confidence=confidence,
            is_supported=is_supported,
            raw_code=raw_code,
        )

    def _classify(self, text: str) -> List[Tuple[str, float]]:
        return list(self._classifier.classify(text, CLASSIFIER_MIN_SEGMENT_LENGTH))

    def detect_language(self, text: Optional[str], min_length: int = DEFAULT_MIN_LENGTH) -> LanguageDetectionResult:
        cleaned = (text or "").strip()
        if not cleaned or len(cleaned) < min_length:
            return self._default_result()

        candidates = self._classify(text)
        if not candidates or candidates[0][0] == UNDETERMINED:
            return self._default_result()

        top_code, top_score = candidates[0]
        # scores are unnormalized; confidence is relative to the top of the ranking
        total = sum(score for _, score in candidates[:CONFIDENCE_WINDOW])
        confidence = top_score / total if total > 0 else 0.0
        result = self._map_candidate(top_code, _clamp(confidence))
        logger.debug("Detected %s (raw=%s, confidence=%.3f)", result.code, top_code, result.confidence)
        return result

    def detect_email_language(
        self,
        subject: Optional[str],
        body: Optional[str],
        subject_weight: float = 0.3,
    ) -> LanguageDetectionResult:
        subject = subject or ""
        body = body or ""
        subject_weight = _clamp(subject_weight)
        body_weight = 1.0 - subject_weight

        combined = f"{subject} {body}".strip()
        if len(combined) < SHORT_EMAIL_LENGTH:
            return self.detect_language(combined)

        subject_result = self.detect_language(subject, SUBJECT_MIN_LENGTH)
        body_result = self.detect_language(body, BODY_MIN_LENGTH)

        if body_result.confidence > BODY_TRUST_THRESHOLD:
            return body_result

        if subject_result.code == body_result.code:
            return LanguageDetectionResult(
                code=body_result.code,
                confidence=max(subject_result.confidence, body_result.confidence),
                is_supported=body_result.is_supported,
                raw_code=body_result.raw_code,
            )

        weighted_subject = subject_result.confidence * subject_weight
        weighted_body = body_result.confidence * body_weight
        if weighted_body >= weighted_subject:
            return body_result
        return subject_result

    def detect_languages(self, text: Optional[str], limit: int = 5) -> List[LanguageDetectionResult]:
        """Return up to ``limit`` ranked candidates, normalized over that window."""
        cleaned = (text or "").strip()
        if not cleaned or len(cleaned) < DEFAULT_MIN_LENGTH:
            return [self._default_result()]

        candidates = self._classify(text)
        if not candidates:
            return [self._default_result()]

        window = candidates[: max(limit, 1)]
        total = sum(score for _, score in window)
        return [
            self._map_candidate(raw_code, _clamp(score / total if total > 0 else 0.0))
            for raw_code, score in window
        ]
