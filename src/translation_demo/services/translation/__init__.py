"""Translation services - session interfaces and Argos/Gemini engines."""

from translation_demo.services.translation.translation_session import (
    TranslationRequest,
    TranslationResponse,
    TranslationSession,
)
from translation_demo.services.translation.session_provisioner import ExecutorSessionProvisioner, SessionProvisioner
from translation_demo.services.translation.argos_translation_service import (
    ArgosLanguageAvailability,
    ArgosPackageIndex,
    ArgosSessionProvisioner,
    ArgosTranslationSession,
)
from translation_demo.services.translation.gemini_translation_service import (
    GeminiLanguageAvailability,
    GeminiSessionProvisioner,
    GeminiTranslationSession,
)

__all__ = [
    "TranslationRequest",
    "TranslationResponse",
    "TranslationSession",
    "SessionProvisioner",
    "ExecutorSessionProvisioner",
    "ArgosPackageIndex",
    "ArgosLanguageAvailability",
    "ArgosTranslationSession",
    "ArgosSessionProvisioner",
    "GeminiLanguageAvailability",
    "GeminiTranslationSession",
    "GeminiSessionProvisioner",
]
