import pytest
from langdetect import LangDetectException

from spamlingua.language import classifiers
from spamlingua.language.classifiers import LangdetectClassifier, build_classifier
from spamlingua.language.codes import UNDETERMINED

ENGLISH = (
    "Thank you for your message. The quarterly report is attached and we will "
    "discuss the remaining items during the meeting on Thursday afternoon."
)


def test_langdetect_classifier_ranks_english_first() -> None:
    candidates = LangdetectClassifier().classify(ENGLISH)
    assert candidates[0][0] == "eng"
    assert candidates[0][1] > 0.5
    scores = [score for _, score in candidates]
    assert scores == sorted(scores, reverse=True)


def test_langdetect_classifier_short_text_is_undetermined() -> None:
    assert LangdetectClassifier().classify("ok", min_segment_length=3) == [(UNDETERMINED, 1.0)]


def test_langdetect_classifier_swallows_detection_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    def _raise(_text: str):
        raise LangDetectException(0, "No features in text.")

    monkeypatch.setattr(classifiers, "detect_langs", _raise)
    assert LangdetectClassifier().classify("12345 67890") == []


def test_build_classifier() -> None:
    assert isinstance(build_classifier(" LangDetect "), LangdetectClassifier)
    with pytest.raises(ValueError):
        build_classifier("fasttext")


def test_lingua_classifier_reports_three_letter_codes() -> None:
    pytest.importorskip("lingua")
    from lingua import Language

    classifier = classifiers.LinguaClassifier(languages=[Language.ENGLISH, Language.GERMAN, Language.FRENCH])
    candidates = classifier.classify(ENGLISH)
    assert candidates[0][0] == "eng"
    assert classifier.classify("ok") == [(UNDETERMINED, 1.0)]


def test_detector_with_langdetect_backend() -> None:
    from spamlingua.language import LanguageDetector

    detector = LanguageDetector(LangdetectClassifier())
    english = detector.detect_language(ENGLISH)
    assert english.code == "en"
    assert english.raw_code == "eng"
    assert 0.5 < english.confidence <= 1.0

    spanish = detector.detect_email_language(
        "Reunión del equipo",
        "Hola a todos, les escribo para confirmar que la reunión del próximo martes "
        "se realizará en la sala principal de la oficina a las diez de la mañana.",
    )
    assert spanish.code == "es"


def test_backends_share_base_and_satisfy_protocol() -> None:
    from spamlingua.language import BaseClassifier, LanguageClassifier, LanguageDetector

    classifier: LanguageClassifier = build_classifier("langdetect")
    assert isinstance(classifier, BaseClassifier)
    assert LanguageDetector(classifier).detect_language(ENGLISH).code == "en"
