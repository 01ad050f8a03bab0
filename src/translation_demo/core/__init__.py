"""Domain layer - language entities and translation errors."""

from .errors import (
    InternalError,
    TranslationError,
    TranslationFailed,
    UnableToIdentifyLanguage,
    UnsupportedLanguagePairing,
)
from .language import AvailabilityStatus, LanguagePair, LanguageTag

__all__ = [
    "LanguageTag",
    "LanguagePair",
    "AvailabilityStatus",
    "TranslationError",
    "UnsupportedLanguagePairing",
    "UnableToIdentifyLanguage",
    "InternalError",
    "TranslationFailed",
]
