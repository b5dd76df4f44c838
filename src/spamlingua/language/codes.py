"""ISO 639 code helpers shared by the classifier backends and the detector."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

UNDETERMINED = "und"

ISO_639_3_TO_639_1: Mapping[str, str] = MappingProxyType(
    {
        "eng": "en",
        "spa": "es",
        "fra": "fr",
        "deu": "de",
        "por": "pt",
        "ita": "it",
        "nld": "nl",
        "pol": "pl",
        "rus": "ru",
        # detected but not supported
        "cmn": "zh",
        "zho": "zh",
        "arb": "ar",
        "ara": "ar",
        "jpn": "ja",
        "kor": "ko",
        "tur": "tr",
        "hin": "hi",
        "vie": "vi",
        "tha": "th",
        "ukr": "uk",
        "ces": "cs",
        "swe": "sv",
        "dan": "da",
        "nor": "no",
        "nob": "no",
        "fin": "fi",
        "hun": "hu",
        "ron": "ro",
        "bul": "bg",
        "ell": "el",
        "heb": "he",
        "ind": "id",
    }
)

# langdetect reports ISO 639-1 (and a few regional variants); these map back
# onto the three-letter codes above.
ISO_639_1_TO_639_3: Mapping[str, str] = MappingProxyType(
    {
        **{two: three for three, two in ISO_639_3_TO_639_1.items() if three not in {"zho", "ara", "nob"}},
        "zh-cn": "cmn",
        "zh-tw": "cmn",
    }
)


def to_iso_639_1(code3: str) -> str:
    """Map a three-letter code to two letters, truncating when unmapped."""
    normalized = (code3 or "").strip().lower()
    return ISO_639_3_TO_639_1.get(normalized) or normalized[:2]


def to_iso_639_3(code1: str) -> str:
    normalized = (code1 or "").strip().lower()
    return ISO_639_1_TO_639_3.get(normalized, normalized)
