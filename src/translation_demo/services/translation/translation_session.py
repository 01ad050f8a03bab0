"""Translation Session - single-use channel bound to one language pair."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Sequence

from translation_demo.core import LanguagePair, LanguageTag, UnableToIdentifyLanguage


@dataclass(frozen=True)
class TranslationRequest:
    """A source text to translate. The language is implied by the session."""

    source_text: str
    client_identifier: Optional[str] = None


@dataclass(frozen=True)
class TranslationResponse:
    """Result of translating a single request."""

    source_text: str
    target_text: str
    source_language: Optional[LanguageTag] = None
    target_language: Optional[LanguageTag] = None
    client_identifier: Optional[str] = None


class TranslationSession(ABC):
    """
    Abstract translation session.

    A session is created for exactly one LanguagePair and is never rebound.
    Callers that need a different pair must ask the provisioner for a new
    session (see TranslationCoordinator).
    """

    def __init__(self, pair: LanguagePair):
        self._pair = pair

    @property
    def pair(self) -> LanguagePair:
        return self._pair

    @property
    def source_language(self) -> Optional[LanguageTag]:
        return self._pair.source

    @property
    def target_language(self) -> Optional[LanguageTag]:
        return self._pair.target

    def prepare_translation(self) -> None:
        """
        Make sure any downloadable resources for the pair are ready.

        Optional: engines also prepare lazily on the first translation.

        Raises:
            UnableToIdentifyLanguage: If the session has no source language,
                since there is no sample text to identify one from.
        """
        if self.source_language is None:
            raise UnableToIdentifyLanguage()
        self._prepare()

    def _prepare(self) -> None:
        """Engine hook for prepare_translation. No-op by default."""

    @abstractmethod
    def translate(self, text: str) -> TranslationResponse:
        """Translate a single text."""
        pass

    @abstractmethod
    def translations(self, requests: Sequence[TranslationRequest]) -> List[TranslationResponse]:
        """
        Translate a batch of texts.

        Returns:
            One response per request, in request order.

        Raises:
            TranslationError: If any request fails; no partial results are returned.
        """
        pass
