"""Language detection utilities."""

from .classifiers import (
    BaseClassifier,
    LangdetectClassifier,
    LanguageClassifier,
    LinguaClassifier,
    build_classifier,
)
from .codes import ISO_639_3_TO_639_1, UNDETERMINED, to_iso_639_1
from .detector import LanguageDetectionResult, LanguageDetector

__all__ = [
    "BaseClassifier",
    "ISO_639_3_TO_639_1",
    "LangdetectClassifier",
    "LanguageClassifier",
    "LanguageDetectionResult",
    "LanguageDetector",
    "LinguaClassifier",
    "UNDETERMINED",
    "build_classifier",
    "to_iso_639_1",
]
