"""Session Provisioner - host-side factory for translation sessions."""

from abc import ABC, abstractmethod
from concurrent.futures import Future, ThreadPoolExecutor

from translation_demo.core import LanguagePair, TranslationError, TranslationFailed
from translation_demo.services.translation.translation_session import TranslationSession


class SessionProvisioner(ABC):
    """
    Creates translation sessions on request.

    `provision` returns a Future completed once the session is ready; the
    TranslationCoordinator waits on it and never asks twice for the pair it
    already holds.
    """

    @abstractmethod
    def provision(self, pair: LanguagePair) -> "Future[TranslationSession]":
        pass

    def shutdown(self) -> None:
        """Release background resources when the application quits."""


class ExecutorSessionProvisioner(SessionProvisioner):
    """Provisioner that builds sessions on a small executor.

    Subclasses implement `create_session`; errors are wrapped in
    TranslationFailed unless they already are a TranslationError.
    """

    def __init__(self, executor: ThreadPoolExecutor | None = None):
        self._executor = executor or ThreadPoolExecutor(max_workers=1, thread_name_prefix="session-provisioner")

    def provision(self, pair: LanguagePair) -> "Future[TranslationSession]":
        print(f"DEBUG: Provisioning translation session for {pair}")
        return self._executor.submit(self._create, pair)

    def _create(self, pair: LanguagePair) -> TranslationSession:
        try:
            return self.create_session(pair)
        except TranslationError:
            raise
        except Exception as e:
            raise TranslationFailed(f"Could not create translation session: {e}") from e

    @abstractmethod
    def create_session(self, pair: LanguagePair) -> TranslationSession:
        pass

    def shutdown(self) -> None:
        print("DEBUG: Shutting down session provisioner")
        self._executor.shutdown(wait=False, cancel_futures=True)
