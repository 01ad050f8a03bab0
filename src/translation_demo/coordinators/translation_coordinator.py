"""Translation Coordinator - owns the single active translation session."""

import threading
from typing import List, Optional, Sequence

from translation_demo.core import LanguagePair, TranslationError, TranslationFailed
from translation_demo.services.translation import (
    SessionProvisioner,
    TranslationRequest,
    TranslationSession,
)


class TranslationCoordinator:
    """
    Holds at most one TranslationSession, keyed by its LanguagePair.

    Sessions are single-use per pair: asking the provisioner again for the
    pair already held is never done. A different pair discards the current
    session and provisions a fresh one. Only `ensure_session` writes the
    session state, under a lock, so the latest call wins.
    """

    def __init__(self, provisioner: SessionProvisioner, provision_timeout: Optional[float] = None):
        self.provisioner = provisioner
        self.provision_timeout = provision_timeout

        self.current_session: Optional[TranslationSession] = None
        self.current_pair: Optional[LanguagePair] = None
        self._lock = threading.Lock()

    def ensure_session(self, desired_pair: LanguagePair) -> TranslationSession:
        """
        Return a session bound to `desired_pair`, provisioning one if needed.

        Raises:
            TranslationError: If provisioning fails. The current session is
                left unchanged in that case.
        """
        with self._lock:
            if self.current_session is not None and self.current_pair == desired_pair:
                return self.current_session

            future = self.provisioner.provision(desired_pair)
            try:
                session = future.result(timeout=self.provision_timeout)
            except TranslationError:
                raise
            except Exception as e:
                raise TranslationFailed(f"Could not create translation session: {e}") from e

            self.current_session = session
            self.current_pair = desired_pair
            return session

    def translate_one(self, session: TranslationSession, text: str, prepare: bool = True) -> str:
        """
        Translate a single text.

        Args:
            session: Session to translate with.
            text: Source text.
            prepare: Ask the session to prepare its resources first. Only
                done when the session's source language is known.
        """
        if prepare and session.source_language is not None:
            session.prepare_translation()
        return session.translate(text).target_text

    def translate_batch(self, session: TranslationSession, texts: Sequence[str]) -> List[str]:
        """
        Translate several texts in one request.

        Returns:
            Translated strings in input order.

        Raises:
            TranslationError: If any text fails; no partial results.
        """
        requests = [
            TranslationRequest(source_text=text, client_identifier=str(index))
            for index, text in enumerate(texts)
        ]
        responses = session.translations(requests)
        if len(responses) != len(requests):
            raise TranslationFailed("Batch translation returned an unexpected number of results")

        # Match on client identifier when the engine echoes it back.
        by_identifier = {r.client_identifier: r for r in responses if r.client_identifier is not None}
        if len(by_identifier) == len(requests):
            return [by_identifier[request.client_identifier].target_text for request in requests]
        return [response.target_text for response in responses]

    def translate(self, pair: LanguagePair, texts: Sequence[str], batch: bool) -> List[str]:
        """
        Ensure a session for `pair` and translate the texts.

        With `batch` False only the first text is translated.
        """
        session = self.ensure_session(pair)

        if not batch:
            if not texts:
                return []
            return [self.translate_one(session, texts[0])]

        if session.source_language is not None:
            session.prepare_translation()
        return self.translate_batch(session, texts)
