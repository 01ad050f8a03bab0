"""Gemini Translation Service - Implements translation sessions via Google Gemini API."""

import json
import time
from datetime import datetime
from typing import List, Optional, Sequence

import google.genai as genai
from google.genai import types

from translation_demo.core import (
    AvailabilityStatus,
    LanguagePair,
    LanguageTag,
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

GEMINI_LANGUAGES = (
    "ar", "de", "en-US", "es-ES", "fr-FR", "hi", "id", "it", "ja", "ko",
    "nl", "pl", "pt-BR", "ru", "th", "tr", "uk", "vi", "zh-Hans", "zh-Hant",
)


class GeminiLanguageAvailability(LanguageAvailability):
    """
    Availability for the Gemini engine.

    Nothing is installed locally, so usable pairings are always reported as
    SUPPORTED.
    """

    def __init__(self, detector: DominantLanguageDetector, preferred_languages: Sequence[LanguageTag]):
        self.detector = detector
        self.preferred_languages = list(preferred_languages)
        self._languages = tuple(LanguageTag.parse(code) for code in GEMINI_LANGUAGES)

    def supported_languages(self) -> Sequence[LanguageTag]:
        return self._languages

    def _is_known(self, language: LanguageTag) -> bool:
        return any(lang.same_family(language) for lang in self._languages)

    def status(
        self, source: LanguageTag, target: Optional[LanguageTag] = None
    ) -> AvailabilityStatus:
        if target is None:
            target = next(
                (lang for lang in self.preferred_languages if not lang.same_family(source)),
                None,
            )
        if target is None or source.same_family(target):
            return AvailabilityStatus.UNSUPPORTED
        if self._is_known(source) and self._is_known(target):
            return AvailabilityStatus.SUPPORTED
        return AvailabilityStatus.UNSUPPORTED

    def status_for_text(
        self, text: str, target: Optional[LanguageTag] = None
    ) -> AvailabilityStatus:
        code = self.detector.detect(text)
        if not code:
            raise UnableToIdentifyLanguage()
        return self.status(LanguageTag.parse(code), target)


class GeminiTranslationSession(TranslationSession):
    """
    Translation session using Google Gemini API.

    Optimized for speed and consistency with lower temperature settings.
    Batches are sent as a single JSON-array prompt so ordering is kept.
    """

    MODEL_NAME = "gemini-2.0-flash"
    MAX_RETRIES = 3

    TRANSLATION_PROMPT = """Translate the following {source} text to natural, idiomatic {target}.
Preserve the tone and nuance of the original.
Only output the translation, nothing else.

Text:
{text}"""

    BATCH_PROMPT = """Translate each string in the following JSON array from {source} to {target}.
Preserve the tone and nuance of the originals.
Respond with a JSON array of strings of the same length and order, nothing else.

{texts}"""

    def __init__(
        self,
        pair: LanguagePair,
        api_key: str,
        preferred_languages: Sequence[LanguageTag] = (),
    ):
        super().__init__(pair)
        self.api_key = api_key
        self.preferred_languages = list(preferred_languages)
        self._client = genai.Client(api_key=api_key)

    def _language_names(self) -> tuple[str, str]:
        source = self.source_language.identifier if self.source_language else "auto-detected"
        target = self.target_language
        if target is None:
            target = next(
                (lang for lang in self.preferred_languages if not lang.same_family(self.source_language)),
                None,
            )
        if target is None:
            raise UnsupportedLanguagePairing()
        return source, target.identifier

    def _generate(self, prompt: str, json_output: bool = False) -> str:
        """Send a prompt, retrying with exponential backoff on rate limits."""
        retry_delay = 2
        attempt = 0

        while attempt < self.MAX_RETRIES:
            attempt += 1
            try:
                print(f"\n[TRANSLATION REQUEST DEBUG]")
                print(f"Attempt: {attempt}/{self.MAX_RETRIES}")
                print(f"Model: {self.MODEL_NAME}")
                print(f"Pair: {self.pair}")
                print(f"Timestamp: {datetime.now().isoformat()}")
                print(f"{'-' * 50}")

                response = self._client.models.generate_content(
                    model=self.MODEL_NAME,
                    contents=prompt,
                    config=types.GenerateContentConfig(
                        temperature=0.3,
                        top_p=0.95,
                        top_k=40,
                        max_output_tokens=2048,
                        response_mime_type="application/json" if json_output else None,
                    ),
                )

                if not response.text:
                    raise TranslationFailed("Empty response from API")

                print(f"[TRANSLATION SUCCESS] Response received on attempt {attempt}")
                return response.text.strip()

            except TranslationFailed:
                raise
            except Exception as e:
                error_msg = str(e).lower()

                print(f"\n[TRANSLATION ERROR DEBUG]")
                print(f"Attempt: {attempt}/{self.MAX_RETRIES}")
                print(f"Exception type: {type(e).__name__}")
                print(f"Full error message: {str(e)}")

                is_rate_limit = (
                    "429" in error_msg
                    or "resource_exhausted" in error_msg
                    or "quota" in error_msg
                    or "rate_limit" in error_msg
                )

                if is_rate_limit and attempt < self.MAX_RETRIES:
                    print(f"Rate limit detected. Retrying in {retry_delay} seconds...")
                    time.sleep(retry_delay)
                    retry_delay *= 2
                    continue

                if "api_key" in error_msg or "authentication" in error_msg or "invalid" in error_msg:
                    raise TranslationFailed(f"Invalid API key or request: {str(e)}") from e
                if is_rate_limit:
                    raise TranslationFailed("API quota exceeded. Please try again later.") from e
                if "deadline" in error_msg or "timeout" in error_msg:
                    raise TranslationFailed("Request timed out. Please check your connection.") from e
                raise TranslationFailed(f"Translation failed: {str(e)}") from e

        raise TranslationFailed("Translation failed after retries")

    def translate(self, text: str) -> TranslationResponse:
        source, target = self._language_names()
        target_text = self._generate(self.TRANSLATION_PROMPT.format(source=source, target=target, text=text))
        return TranslationResponse(
            source_text=text,
            target_text=target_text,
            source_language=self.source_language,
            target_language=self.target_language or LanguageTag.parse(target),
        )

    def translations(self, requests: Sequence[TranslationRequest]) -> List[TranslationResponse]:
        if not requests:
            return []

        source, target = self._language_names()
        texts = [request.source_text for request in requests]
        raw = self._generate(
            self.BATCH_PROMPT.format(
                source=source,
                target=target,
                texts=json.dumps(texts, ensure_ascii=False),
            ),
            json_output=True,
        )

        try:
            translated = json.loads(raw)
        except json.JSONDecodeError as e:
            raise TranslationFailed(f"Malformed batch response: {e}") from e

        if not isinstance(translated, list) or len(translated) != len(texts):
            raise TranslationFailed("Batch response does not match the number of requests")

        target_language = self.target_language or LanguageTag.parse(target)
        return [
            TranslationResponse(
                source_text=request.source_text,
                target_text=str(target_text).strip(),
                source_language=self.source_language,
                target_language=target_language,
                client_identifier=request.client_identifier,
            )
            for request, target_text in zip(requests, translated)
        ]


class GeminiSessionProvisioner(ExecutorSessionProvisioner):
    """Creates GeminiTranslationSession instances for the configured API key."""

    def __init__(self, api_key: str, preferred_languages: Sequence[LanguageTag] = (), executor=None):
        super().__init__(executor)
        self.api_key = api_key
        self.preferred_languages = list(preferred_languages)

    def create_session(self, pair: LanguagePair) -> TranslationSession:
        if not self.api_key:
            raise TranslationFailed("API key not configured. Add GEMINI_API_KEY to .env file.")
        return GeminiTranslationSession(pair, api_key=self.api_key, preferred_languages=self.preferred_languages)
