"""Language detection and per-language spam datasets for email scoring."""

from .datasets import DatasetRegistry, DatasetResolver, LanguageDataset, load_packaged_registry
from .language import LanguageDetectionResult, LanguageDetector, build_classifier

__all__ = [
    "DatasetRegistry",
    "DatasetResolver",
    "LanguageDataset",
    "LanguageDetectionResult",
    "LanguageDetector",
    "build_classifier",
    "load_packaged_registry",
]
