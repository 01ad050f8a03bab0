"""Argos Translation Service - on-device translation via argostranslate packages."""

from typing import List, Optional, Sequence

import argostranslate.package
import argostranslate.translate

from translation_demo.core import (
    AvailabilityStatus,
    LanguagePair,
    LanguageTag,
    TranslationError,
    TranslationFailed,
    UnableToIdentifyLanguage,
    UnsupportedLanguagePairing,
)
from translation_demo.services.language import DominantLanguageDetector, LanguageAvailability
from translation_demo.services.translation.session_provisioner import ExecutorSessionProvisioner
from translation_demo.services.translation.translation_session import (
    TranslationRequest,
    TranslationResponse,
    TranslationSession,
)


def _default_target(
    source: LanguageTag, preferred_languages: Sequence[LanguageTag]
) -> Optional[LanguageTag]:
    """First preferred language outside the source's family."""
    return next((lang for lang in preferred_languages if not lang.same_family(source)), None)


class ArgosPackageIndex:
    """
    Thin wrapper over argostranslate's installed and downloadable packages.

    The remote index is fetched at most once; if that fails only installed
    packages are reported.
    """

    def __init__(self):
        self._index_loaded = False

    def installed_pairs(self) -> set[tuple[str, str]]:
        return {
            (pkg.from_code, pkg.to_code)
            for pkg in argostranslate.package.get_installed_packages()
        }

    def available_packages(self) -> list:
        if not self._index_loaded:
            try:
                argostranslate.package.update_package_index()
            except Exception as e:
                print(f"DEBUG: Could not update Argos package index: {e}")
            self._index_loaded = True
        return list(argostranslate.package.get_available_packages())

    def available_pairs(self) -> set[tuple[str, str]]:
        return {(pkg.from_code, pkg.to_code) for pkg in self.available_packages()}

    def install(self, from_code: str, to_code: str) -> bool:
        """Download and install the package for a pair. Returns False if none exists."""
        for pkg in self.available_packages():
            if pkg.from_code == from_code and pkg.to_code == to_code:
                print(f"[ARGOS] Downloading package {from_code} -> {to_code}")
                argostranslate.package.install_from_path(pkg.download())
                return True
        return False


class ArgosLanguageAvailability(LanguageAvailability):
    """Availability oracle backed by installed and downloadable Argos packages."""

    def __init__(
        self,
        detector: DominantLanguageDetector,
        preferred_languages: Sequence[LanguageTag],
        package_index: Optional[ArgosPackageIndex] = None,
    ):
        self.detector = detector
        self.preferred_languages = list(preferred_languages)
        self.package_index = package_index or ArgosPackageIndex()

    def supported_languages(self) -> Sequence[LanguageTag]:
        pairs = self.package_index.installed_pairs() | self.package_index.available_pairs()
        codes = sorted({code for pair in pairs for code in pair})
        return tuple(LanguageTag.parse(code) for code in codes)

    def status(
        self, source: LanguageTag, target: Optional[LanguageTag] = None
    ) -> AvailabilityStatus:
        if target is None:
            target = _default_target(source, self.preferred_languages)
        if target is None or source.same_family(target):
            return AvailabilityStatus.UNSUPPORTED

        key = (source.family, target.family)
        if key in self.package_index.installed_pairs():
            return AvailabilityStatus.INSTALLED
        if key in self.package_index.available_pairs():
            return AvailabilityStatus.SUPPORTED
        return AvailabilityStatus.UNSUPPORTED

    def status_for_text(
        self, text: str, target: Optional[LanguageTag] = None
    ) -> AvailabilityStatus:
        code = self.detector.detect(text)
        if not code:
            raise UnableToIdentifyLanguage()
        return self.status(LanguageTag.parse(code), target)


class ArgosTranslationSession(TranslationSession):
    """
    Translation session using locally installed Argos models.

    An auto source is detected per text; an auto target falls back to the
    first preferred language outside the detected family. Missing packages
    are downloaded on demand.
    """

    def __init__(
        self,
        pair: LanguagePair,
        detector: DominantLanguageDetector,
        preferred_languages: Sequence[LanguageTag],
        package_index: Optional[ArgosPackageIndex] = None,
    ):
        super().__init__(pair)
        self.detector = detector
        self.preferred_languages = list(preferred_languages)
        self.package_index = package_index or ArgosPackageIndex()

    def _prepare(self) -> None:
        source = self.source_language
        target = self.target_language or _default_target(source, self.preferred_languages)
        if target is None:
            raise UnsupportedLanguagePairing()
        self._translation_for(source, target)

    def _resolve_pair(self, text: str) -> tuple[LanguageTag, LanguageTag]:
        source = self.source_language
        if source is None:
            code = self.detector.detect(text)
            if not code:
                raise UnableToIdentifyLanguage()
            source = LanguageTag.parse(code)

        target = self.target_language or _default_target(source, self.preferred_languages)
        if target is None or source.same_family(target):
            raise UnsupportedLanguagePairing()
        return source, target

    def _find_installed(self, source: LanguageTag, target: LanguageTag):
        languages = argostranslate.translate.get_installed_languages()
        from_lang = next((lang for lang in languages if lang.code == source.family), None)
        to_lang = next((lang for lang in languages if lang.code == target.family), None)
        if from_lang is None or to_lang is None:
            return None
        return from_lang.get_translation(to_lang)

    def _translation_for(self, source: LanguageTag, target: LanguageTag):
        translation = self._find_installed(source, target)
        if translation is None:
            if not self.package_index.install(source.family, target.family):
                raise UnsupportedLanguagePairing()
            translation = self._find_installed(source, target)
        if translation is None:
            raise TranslationFailed(f"Argos package for {source} -> {target} did not load")
        return translation

    def translate(self, text: str) -> TranslationResponse:
        source, target = self._resolve_pair(text)
        translation = self._translation_for(source, target)

        try:
            target_text = translation.translate(text)
        except Exception as e:
            raise TranslationFailed(f"Translation failed: {e}") from e

        return TranslationResponse(
            source_text=text,
            target_text=target_text,
            source_language=source,
            target_language=target,
        )

    def translations(self, requests: Sequence[TranslationRequest]) -> List[TranslationResponse]:
        responses = []
        for request in requests:
            try:
                response = self.translate(request.source_text)
            except TranslationError:
                raise
            except Exception as e:
                raise TranslationFailed(f"Translation failed: {e}") from e
            responses.append(
                TranslationResponse(
                    source_text=response.source_text,
                    target_text=response.target_text,
                    source_language=response.source_language,
                    target_language=response.target_language,
                    client_identifier=request.client_identifier,
                )
            )
        return responses


class ArgosSessionProvisioner(ExecutorSessionProvisioner):
    """Creates ArgosTranslationSession instances sharing one package index."""

    def __init__(
        self,
        detector: DominantLanguageDetector,
        preferred_languages: Sequence[LanguageTag],
        package_index: Optional[ArgosPackageIndex] = None,
        executor=None,
    ):
        super().__init__(executor)
        self.detector = detector
        self.preferred_languages = list(preferred_languages)
        self.package_index = package_index or ArgosPackageIndex()

    def create_session(self, pair: LanguagePair) -> TranslationSession:
        return ArgosTranslationSession(
            pair,
            detector=self.detector,
            preferred_languages=self.preferred_languages,
            package_index=self.package_index,
        )
