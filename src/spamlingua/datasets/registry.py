"""Registration table for raw (persisted-shape) language datasets."""

from __future__ import annotations

import json
import logging
from importlib import resources
from pathlib import Path
from typing import Dict, Iterator, List, Literal, Mapping, Optional, Union, get_args

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from .schema import SUPPORTED_LANGUAGES, normalize_language_code

logger = logging.getLogger(__name__)

SpamCategory = Literal[
    "finance",
    "urgency",
    "adult",
    "health",
    "scam",
    "marketing",
    "phishing",
    "lottery",
    "drugs",
    "crypto",
]
SPAM_CATEGORIES = get_args(SpamCategory)


class DatasetValidationError(ValueError):
    """Raised when a raw dataset does not match the persisted shape."""


class _RawModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class RawSpamWord(_RawModel):
    word: str = Field(..., min_length=1)
    score: float
    category: SpamCategory
    case_sensitive: bool = False


class RawSubjectPattern(_RawModel):
    pattern: str = Field(..., min_length=1)
    score: float
    name: str


class RawTokenProbability(_RawModel):
    spam: float = Field(..., ge=0.0, le=1.0)
    ham: float = Field(..., ge=0.0, le=1.0)


class RawLanguageDataset(_RawModel):
    """Raw dataset exactly as stored in ``<code>.json``."""

    language: str = Field(..., min_length=2)
    language_name: str
    spam_words: List[RawSpamWord] = Field(default_factory=list)
    spam_single_words: Dict[str, float] = Field(default_factory=dict)
    spam_subject_patterns: List[RawSubjectPattern] = Field(default_factory=list)
    ham_words: Dict[str, float] = Field(default_factory=dict)
    bayesian_tokens: Dict[str, RawTokenProbability] = Field(default_factory=dict)
    urgency_words: List[str] = Field(default_factory=list)
    greeting_words: List[str] = Field(default_factory=list)
    generic_greetings: List[str] = Field(default_factory=list)


RawInput = Union[RawLanguageDataset, Mapping[str, object], None]


def parse_raw_dataset(payload: Union[RawLanguageDataset, Mapping[str, object]]) -> RawLanguageDataset:
    if isinstance(payload, RawLanguageDataset):
        return payload
    try:
        return RawLanguageDataset.model_validate(payload)
    except ValidationError as exc:
        raise DatasetValidationError(f"Invalid language dataset: {exc}") from exc


class DatasetRegistry:
    """Ordered table of raw datasets keyed by normalized two-letter code.

    A code registered with ``None`` is known but has no data yet; it is not
    reported as available.
    """

    def __init__(self, datasets: Optional[Mapping[str, RawInput]] = None) -> None:
        self._datasets: Dict[str, Optional[RawLanguageDataset]] = {}
        for code, payload in (datasets or {}).items():
            self.register(code, payload)

    def register(self, code: str, payload: RawInput) -> None:
        normalized = normalize_language_code(code)
        if not normalized:
            raise ValueError("language code must be provided")
        if payload is None:
            self._datasets[normalized] = None
            return
        parsed = parse_raw_dataset(payload)
        if normalize_language_code(parsed.language) != normalized:
            raise DatasetValidationError(
                f"Dataset for '{parsed.language}' cannot be registered under '{normalized}'"
            )
        self._datasets[normalized] = parsed

    def get(self, code: str) -> Optional[RawLanguageDataset]:
        return self._datasets.get(normalize_language_code(code))

    def codes(self) -> List[str]:
        return list(self._datasets)

    def available_codes(self) -> List[str]:
        return [code for code, payload in self._datasets.items() if payload is not None]

    def __contains__(self, code: object) -> bool:
        if not isinstance(code, str):
            return False
        return self.get(code) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self._datasets)

    def __len__(self) -> int:
        return len(self._datasets)


def load_packaged_registry() -> DatasetRegistry:
    """Build a registry from the JSON datasets shipped with the package."""
    data_root = resources.files("spamlingua.datasets").joinpath("data")
    registry = DatasetRegistry()
    for code in SUPPORTED_LANGUAGES:
        entry = data_root.joinpath(f"{code}.json")
        if not entry.is_file():
            registry.register(code, None)
            continue
        registry.register(code, json.loads(entry.read_text(encoding="utf-8")))
    logger.debug("Loaded packaged datasets: %s", ", ".join(registry.available_codes()))
    return registry


def load_registry_from_directory(path: Path) -> DatasetRegistry:
    """Build a registry from ``<code>.json`` files found in ``path``."""
    directory = Path(path)
    if not directory.is_dir():
        raise ValueError(f"Dataset directory does not exist: {directory}")
    registry = DatasetRegistry()
    for code in SUPPORTED_LANGUAGES:
        candidate = directory / f"{code}.json"
        if not candidate.exists():
            registry.register(code, None)
            continue
        with candidate.open("r", encoding="utf-8") as handle:
            registry.register(code, json.load(handle))
    logger.info("Loaded datasets from %s: %s", directory, ", ".join(registry.available_codes()))
    return registry
