"""Language services - availability, detection and default resolution."""

from translation_demo.services.language.availability import (
    LanguageAvailability,
    check_language_availability,
    check_status,
    check_text_availability,
)
from translation_demo.services.language.detector import DominantLanguageDetector, LangdetectLanguageDetector
from translation_demo.services.language.language_resolver import LanguageResolver, ResolvedLanguages

__all__ = [
    "LanguageAvailability",
    "check_status",
    "check_language_availability",
    "check_text_availability",
    "DominantLanguageDetector",
    "LangdetectLanguageDetector",
    "LanguageResolver",
    "ResolvedLanguages",
]
