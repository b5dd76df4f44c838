"""FastAPI application wiring SpamLingua services together."""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import FastAPI
from pydantic import BaseModel, Field

from .config import Settings, get_settings
from .datasets import (
    DatasetRegistry,
    DatasetResolver,
    load_packaged_registry,
    load_registry_from_directory,
    normalize_language_code,
)
from .language import LanguageDetectionResult, LanguageDetector, build_classifier
from .language.classifiers import LanguageClassifier

logger = logging.getLogger(__name__)


class DetectLanguageRequest(BaseModel):
    text: str
    min_length: Optional[int] = Field(None, ge=0)


class DetectEmailLanguageRequest(BaseModel):
    subject: str = ""
    body: str = ""
    subject_weight: Optional[float] = Field(None, ge=0.0, le=1.0)


class DetectLanguagesRequest(BaseModel):
    text: str
    limit: Optional[int] = Field(None, ge=1)


class DetectLanguageResponse(BaseModel):
    code: str
    confidence: float
    is_supported: bool
    raw_code: str


class DetectLanguagesResponse(BaseModel):
    results: List[DetectLanguageResponse]


class LanguagesResponse(BaseModel):
    supported: List[str]
    available: List[str]


class DatasetResponse(BaseModel):
    requested: str
    language: str
    is_fallback: bool
    dataset: dict


def _to_response(result: LanguageDetectionResult) -> DetectLanguageResponse:
    return DetectLanguageResponse(**result.to_dict())


def _build_registry(settings: Settings) -> DatasetRegistry:
    if settings.data_dir is not None:
        return load_registry_from_directory(settings.data_dir)
    return load_packaged_registry()


def create_app(
    settings: Optional[Settings] = None,
    classifier: Optional[LanguageClassifier] = None,
    registry: Optional[DatasetRegistry] = None,
) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title=settings.app_name,
        description="Language detection and per-language spam datasets",
        debug=settings.debug,
    )

    resolver = DatasetResolver(
        registry or _build_registry(settings),
        fallback_language=settings.default_language,
    )
    if settings.preload_datasets:
        resolver.preload_all()
        logger.info("Preloaded datasets: %s", ", ".join(resolver.cached_languages()))
    detector = LanguageDetector(
        classifier or build_classifier(settings.classifier_backend),
        default_language=resolver.fallback_language,
    )

    app.state.settings = settings
    app.state.dataset_resolver = resolver
    app.state.language_detector = detector

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/detect-language", response_model=DetectLanguageResponse)
    async def detect_language(payload: DetectLanguageRequest) -> DetectLanguageResponse:
        min_length = settings.min_text_length if payload.min_length is None else payload.min_length
        return _to_response(detector.detect_language(payload.text, min_length))

    @app.post("/detect-email-language", response_model=DetectLanguageResponse)
    async def detect_email_language(payload: DetectEmailLanguageRequest) -> DetectLanguageResponse:
        weight = settings.subject_weight if payload.subject_weight is None else payload.subject_weight
        return _to_response(detector.detect_email_language(payload.subject, payload.body, weight))

    @app.post("/detect-languages", response_model=DetectLanguagesResponse)
    async def detect_languages(payload: DetectLanguagesRequest) -> DetectLanguagesResponse:
        limit = payload.limit or settings.detect_languages_limit
        results = detector.detect_languages(payload.text, limit)
        return DetectLanguagesResponse(results=[_to_response(result) for result in results])

    @app.get("/languages", response_model=LanguagesResponse)
    async def languages() -> LanguagesResponse:
        return LanguagesResponse(
            supported=resolver.list_supported(),
            available=resolver.list_available(),
        )

    @app.get("/datasets/{code}", response_model=DatasetResponse)
    async def dataset(code: str) -> DatasetResponse:
        requested = normalize_language_code(code)
        resolved = resolver.resolve(requested)
        return DatasetResponse(
            requested=requested,
            language=resolved.language,
            is_fallback=not resolver.is_available(requested),
            dataset=resolved.to_dict(),
        )

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(create_app(), host="0.0.0.0", port=8000)
