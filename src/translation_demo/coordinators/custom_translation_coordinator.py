"""Custom Translation Coordinator - language configuration and session-driven translation."""

from typing import List, Optional, Sequence

from PySide6.QtCore import QObject, QThreadPool, Signal

from translation_demo.core import LanguagePair, LanguageTag
from translation_demo.coordinators.translation_coordinator import TranslationCoordinator
from translation_demo.services import LanguageAvailability, LanguageResolver, SettingsManager
from translation_demo.services.api_workers import (
    AvailabilityCheckWorker,
    LanguageDefaultsWorker,
    TranslationWorker,
    WorkerRequest,
)


class CustomTranslationCoordinator(QObject):
    """
    Orchestrates the custom translation demo.

    Responsibilities:
    - Resolve default languages on first display.
    - Validate the language configuration picked by the user.
    - Run single or batch translations through the TranslationCoordinator.
    - Drop results from requests superseded by a newer user action.
    """

    supported_languages_loaded = Signal(list)
    languages_resolved = Signal(object, object)
    configuration_confirmed = Signal(object)
    configuration_failed = Signal(str)

    translation_started = Signal()
    translation_completed = Signal(list)
    translation_failed = Signal(str)

    def __init__(
        self,
        texts: Sequence[str],
        availability: LanguageAvailability,
        resolver: LanguageResolver,
        translation_coordinator: TranslationCoordinator,
        settings_manager: SettingsManager,
        thread_pool: Optional[QThreadPool] = None,
    ):
        super().__init__()

        self.texts = list(texts)
        self.availability = availability
        self.resolver = resolver
        self.translation_coordinator = translation_coordinator
        self.settings_manager = settings_manager

        self.supported_languages: List[LanguageTag] = []
        self.source_language: Optional[LanguageTag] = None
        self.target_language: Optional[LanguageTag] = None
        self._languages_chosen = False
        self.batch = False

        self.translated_texts: List[str] = []
        self.error: Optional[str] = None

        self.thread_pool = thread_pool or QThreadPool.globalInstance()

        # Track active workers to prevent race conditions
        self._active_translation_worker_id: Optional[int] = None
        self._active_configuration_worker_id: Optional[int] = None
        self._active_defaults_worker_id: Optional[int] = None
        self._worker_counter = 0

        # Keep references to helper objects so they don't get garbage collected
        # while workers are running in background threads
        self._request_helpers: dict[str, WorkerRequest] = {}

    @property
    def sample_text(self) -> str:
        return "\n".join(self.texts)

    @property
    def language_pair(self) -> LanguagePair:
        return LanguagePair(self.source_language, self.target_language)

    def _next_worker_id(self) -> int:
        self._worker_counter += 1
        return self._worker_counter

    def _start(self, kind: str, worker, worker_id: int, on_result, on_error) -> None:
        helper = WorkerRequest(worker_id, on_result, on_error)
        self._request_helpers[kind] = helper
        helper.connect_to(worker)
        self.thread_pool.start(worker)

    # Defaults

    def load_defaults(self) -> None:
        """Fetch supported languages and resolve default languages."""
        worker_id = self._next_worker_id()
        self._active_defaults_worker_id = worker_id

        worker = LanguageDefaultsWorker(
            availability=self.availability,
            resolver=self.resolver,
            sample_text=self.sample_text,
            preferred_languages=self.settings_manager.get_preferred_languages(),
        )
        self._start("defaults", worker, worker_id, self._handle_defaults_result, self._handle_defaults_error)

    def _handle_defaults_result(self, result, worker_id: int) -> None:
        if worker_id != self._active_defaults_worker_id:
            print(f"DEBUG: Ignoring stale defaults result (worker {worker_id}, current {self._active_defaults_worker_id})")
            return

        supported, resolved = result
        self.supported_languages = list(supported)
        self.supported_languages_loaded.emit(self.supported_languages)

        # A configuration picked while loading, "Auto Detect" included, is kept.
        if not self._languages_chosen:
            self.source_language = resolved.source
            self.target_language = resolved.target
        self.languages_resolved.emit(self.source_language, self.target_language)

    def _handle_defaults_error(self, error: str, worker_id: int) -> None:
        # Resolution failures fall back to explicit user selection.
        if worker_id != self._active_defaults_worker_id:
            return
        print(f"DEBUG: Could not resolve default languages: {error}")

    # Configuration

    def open_configuration(self) -> None:
        """Called when the picker is opened; supersedes in-flight translations."""
        self._active_translation_worker_id = None

    def set_languages(self, source: Optional[LanguageTag], target: Optional[LanguageTag]) -> None:
        self._languages_chosen = True
        self.source_language = source
        self.target_language = target

    def confirm_configuration(self, source: Optional[LanguageTag], target: Optional[LanguageTag]) -> None:
        """
        Store the picked languages and check the pairing is usable.

        Without a source the check uses the sample text for detection.
        """
        self.set_languages(source, target)

        worker_id = self._next_worker_id()
        self._active_configuration_worker_id = worker_id

        worker = AvailabilityCheckWorker(
            availability=self.availability,
            source=source,
            target=target,
            sample_text=self.sample_text,
        )
        self._start(
            "configuration", worker, worker_id,
            self._handle_configuration_result, self._handle_configuration_error,
        )

    def _handle_configuration_result(self, pair, worker_id: int) -> None:
        if worker_id != self._active_configuration_worker_id:
            return
        self.configuration_confirmed.emit(pair)

    def _handle_configuration_error(self, error: str, worker_id: int) -> None:
        if worker_id != self._active_configuration_worker_id:
            return
        self.configuration_failed.emit(error)

    # Translation

    def set_batch(self, batch: bool) -> None:
        self.batch = batch

    def translate_button_text(self) -> str:
        return "Translate All" if self.batch else "Translate First"

    def request_translation(self) -> None:
        """Translate the first text, or all texts in batch mode."""
        self.error = None
        self.translated_texts = []
        self.translation_started.emit()

        worker_id = self._next_worker_id()
        self._active_translation_worker_id = worker_id

        worker = TranslationWorker(
            coordinator=self.translation_coordinator,
            pair=self.language_pair,
            texts=self.texts,
            batch=self.batch,
        )
        self._start(
            "translation", worker, worker_id,
            self._handle_translation_result, self._handle_translation_error,
        )

    def _handle_translation_result(self, translated, worker_id: int) -> None:
        # Ignore results from stale workers (user may have reconfigured)
        if worker_id != self._active_translation_worker_id:
            print(f"DEBUG: Ignoring stale translation result (worker {worker_id}, current {self._active_translation_worker_id})")
            return

        self.translated_texts = list(translated)
        self.translation_completed.emit(self.translated_texts)

    def _handle_translation_error(self, error: str, worker_id: int) -> None:
        if worker_id != self._active_translation_worker_id:
            print(f"DEBUG: Ignoring stale translation error (worker {worker_id}, current {self._active_translation_worker_id})")
            return

        self.error = error
        self.translation_failed.emit(error)
