"""Per-language spam detection datasets."""

from .registry import (
    SPAM_CATEGORIES,
    DatasetRegistry,
    DatasetValidationError,
    RawLanguageDataset,
    load_packaged_registry,
    load_registry_from_directory,
)
from .resolver import DatasetResolver, materialize_dataset
from .schema import (
    LANGUAGE_NAMES,
    SUPPORTED_LANGUAGES,
    LanguageDataset,
    SpamWord,
    SubjectPattern,
    TokenProbability,
    get_language_name,
    is_supported_language,
    normalize_language_code,
)

__all__ = [
    "SPAM_CATEGORIES",
    "LANGUAGE_NAMES",
    "SUPPORTED_LANGUAGES",
    "DatasetRegistry",
    "DatasetResolver",
    "DatasetValidationError",
    "LanguageDataset",
    "RawLanguageDataset",
    "SpamWord",
    "SubjectPattern",
    "TokenProbability",
    "get_language_name",
    "is_supported_language",
    "load_packaged_registry",
    "load_registry_from_directory",
    "materialize_dataset",
    "normalize_language_code",
]
