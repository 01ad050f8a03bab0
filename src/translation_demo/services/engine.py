"""Translation engine wiring - picks availability, detector and provisioner."""

from dataclasses import dataclass

from translation_demo.services.language import (
    DominantLanguageDetector,
    LangdetectLanguageDetector,
    LanguageAvailability,
)
from translation_demo.services.settings_manager import SettingsManager
from translation_demo.services.translation import (
    ArgosLanguageAvailability,
    ArgosPackageIndex,
    ArgosSessionProvisioner,
    GeminiLanguageAvailability,
    GeminiSessionProvisioner,
    SessionProvisioner,
)


@dataclass
class TranslationEngine:
    """External collaborators used by the coordinators."""

    name: str
    availability: LanguageAvailability
    detector: DominantLanguageDetector
    provisioner: SessionProvisioner

    def shutdown(self) -> None:
        self.provisioner.shutdown()


def build_engine(settings: SettingsManager) -> TranslationEngine:
    """Build the engine selected by TRANSLATION_ENGINE."""
    detector = LangdetectLanguageDetector()
    preferred = settings.get_preferred_languages()
    name = settings.get_translation_engine()

    if name == "gemini":
        return TranslationEngine(
            name=name,
            availability=GeminiLanguageAvailability(detector, preferred),
            detector=detector,
            provisioner=GeminiSessionProvisioner(settings.get_gemini_api_key() or "", preferred),
        )

    package_index = ArgosPackageIndex()
    return TranslationEngine(
        name=name,
        availability=ArgosLanguageAvailability(detector, preferred, package_index),
        detector=detector,
        provisioner=ArgosSessionProvisioner(detector, preferred, package_index),
    )
