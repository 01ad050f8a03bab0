"""Language availability - abstract oracle and status checks."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from translation_demo.core import (
    AvailabilityStatus,
    InternalError,
    LanguageTag,
    UnsupportedLanguagePairing,
)


class LanguageAvailability(ABC):
    """
    Abstract oracle reporting which languages a translation engine can handle.

    Implementations (ArgosLanguageAvailability, GeminiLanguageAvailability)
    query their engine; callers use `check_language_availability` to turn a
    status into a pass/raise decision.
    """

    @abstractmethod
    def supported_languages(self) -> Sequence[LanguageTag]:
        """Return the ordered languages the engine can translate from or to."""
        pass

    @abstractmethod
    def status(
        self, source: LanguageTag, target: Optional[LanguageTag] = None
    ) -> AvailabilityStatus:
        """
        Report the readiness of a source/target pairing.

        Args:
            source: Source language.
            target: Target language. When None, the engine picks one from
                the user's preferred languages.
        """
        pass

    @abstractmethod
    def status_for_text(
        self, text: str, target: Optional[LanguageTag] = None
    ) -> AvailabilityStatus:
        """
        Report the readiness of a pairing whose source is detected from text.

        Raises:
            UnableToIdentifyLanguage: If the language of `text` can't be detected.
        """
        pass


def check_status(status) -> None:
    """Raise unless `status` means the pairing is usable."""
    if status in (AvailabilityStatus.INSTALLED, AvailabilityStatus.SUPPORTED):
        return
    if status is AvailabilityStatus.UNSUPPORTED:
        raise UnsupportedLanguagePairing()
    raise InternalError(f"Unrecognized availability status: {status!r}")


def check_language_availability(
    availability: LanguageAvailability,
    source: LanguageTag,
    target: Optional[LanguageTag] = None,
) -> None:
    """Check a pairing with a known source language."""
    check_status(availability.status(source, target))


def check_text_availability(
    availability: LanguageAvailability,
    text: str,
    target: Optional[LanguageTag] = None,
) -> None:
    """Check a pairing whose source language is detected from sample text.

    Detection is more reliable with samples of at least 20 characters.
    """
    check_status(availability.status_for_text(text, target))
