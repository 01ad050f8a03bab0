"""Services layer - engine integrations, settings and background workers."""

from translation_demo.services.settings_manager import SettingsManager

# Language services
from translation_demo.services.language import (
    DominantLanguageDetector,
    LangdetectLanguageDetector,
    LanguageAvailability,
    LanguageResolver,
    ResolvedLanguages,
    check_language_availability,
    check_status,
    check_text_availability,
)

# Translation services
from translation_demo.services.translation import (
    ArgosLanguageAvailability,
    ArgosSessionProvisioner,
    ArgosTranslationSession,
    GeminiLanguageAvailability,
    GeminiSessionProvisioner,
    GeminiTranslationSession,
    SessionProvisioner,
    TranslationRequest,
    TranslationResponse,
    TranslationSession,
)

from translation_demo.services.engine import TranslationEngine, build_engine

__all__ = [
	"SettingsManager",
	"DominantLanguageDetector",
	"LangdetectLanguageDetector",
	"LanguageAvailability",
	"LanguageResolver",
	"ResolvedLanguages",
	"check_status",
	"check_language_availability",
	"check_text_availability",
	"TranslationRequest",
	"TranslationResponse",
	"TranslationSession",
	"SessionProvisioner",
	"ArgosLanguageAvailability",
	"ArgosTranslationSession",
	"ArgosSessionProvisioner",
	"GeminiLanguageAvailability",
	"GeminiTranslationSession",
	"GeminiSessionProvisioner",
	"TranslationEngine",
	"build_engine",
]
