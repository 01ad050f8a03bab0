"""System Translation Coordinator - backs the translation sheet."""

from typing import Optional

from PySide6.QtCore import QObject, QThreadPool, Signal, Slot

from translation_demo.core import LanguagePair, LanguageTag
from translation_demo.coordinators.translation_coordinator import TranslationCoordinator
from translation_demo.services.api_workers import TranslationWorker, WorkerRequest


class SystemTranslationCoordinator(QObject):
    """
    Translates one text with an auto-detected source for the translation sheet.

    The sheet shows the translation and may hand it back as a replacement
    for the original, which is reported through `text_replaced`.
    """

    translation_started = Signal()
    translation_ready = Signal(str)
    translation_failed = Signal(str)
    text_replaced = Signal(str)

    def __init__(
        self,
        translation_coordinator: TranslationCoordinator,
        target_language: Optional[LanguageTag] = None,
        thread_pool: Optional[QThreadPool] = None,
    ):
        super().__init__()
        self.translation_coordinator = translation_coordinator
        self.target_language = target_language
        self.thread_pool = thread_pool or QThreadPool.globalInstance()

        self.translated_text: Optional[str] = None
        self._active_worker_id: Optional[int] = None
        self._worker_counter = 0
        self._request_helper: Optional[WorkerRequest] = None

    def request_translation(self, text: str) -> None:
        """Translate `text` from its detected language."""
        self._worker_counter += 1
        worker_id = self._worker_counter
        self._active_worker_id = worker_id
        self.translation_started.emit()

        worker = TranslationWorker(
            coordinator=self.translation_coordinator,
            pair=LanguagePair(source=None, target=self.target_language),
            texts=[text],
            batch=False,
        )
        # IMPORTANT: Store reference so it doesn't get garbage collected while worker runs
        self._request_helper = WorkerRequest(worker_id, self._on_result, self._on_error)
        self._request_helper.connect_to(worker)
        self.thread_pool.start(worker)

    def cancel(self) -> None:
        """Sheet dismissed; results still in flight are dropped."""
        self._active_worker_id = None

    def _on_result(self, translated, worker_id: int) -> None:
        if worker_id != self._active_worker_id:
            return
        self.translated_text = translated[0] if translated else ""
        self.translation_ready.emit(self.translated_text)

    def _on_error(self, error: str, worker_id: int) -> None:
        if worker_id != self._active_worker_id:
            return
        self.translation_failed.emit(error)

    @Slot(str)
    def accept_replacement(self, text: str) -> None:
        self.text_replaced.emit(text)
