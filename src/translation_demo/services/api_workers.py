"""Async workers for non-blocking engine calls using Qt threading."""

from typing import Callable, Optional, Sequence

from PySide6.QtCore import QObject, QRunnable, Signal, Slot

from translation_demo.core import LanguagePair, LanguageTag, TranslationError
from translation_demo.services.language import (
    LanguageAvailability,
    LanguageResolver,
    check_language_availability,
    check_text_availability,
)


class WorkerSignals(QObject):
    """
    Signals for communicating results from worker threads.

    QRunnable doesn't inherit from QObject, so we need a separate
    QObject to hold the signals.
    """
    finished = Signal()
    error = Signal(str)
    result = Signal(object)


class _Worker(QRunnable):
    """Runs `work()` in the thread pool and reports through WorkerSignals."""

    description = "operation"

    def __init__(self):
        super().__init__()
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    def work(self):
        raise NotImplementedError

    @Slot()
    def run(self):
        try:
            self.signals.result.emit(self.work())
        except TranslationError as e:
            self.signals.error.emit(e.user_message)
        except Exception as e:
            # Catch any unexpected exceptions not handled by the engine
            self.signals.error.emit(f"Unexpected {self.description} error: {str(e)}")
        finally:
            self.signals.finished.emit()


class TranslationWorker(_Worker):
    """
    Worker that runs a translation through the TranslationCoordinator.

    Emits the list of translated strings on success.
    """

    description = "translation"

    def __init__(self, coordinator, pair: LanguagePair, texts: Sequence[str], batch: bool):
        super().__init__()
        self.coordinator = coordinator
        self.pair = pair
        self.texts = list(texts)
        self.batch = batch

    def work(self):
        return self.coordinator.translate(self.pair, self.texts, batch=self.batch)


class LanguageDefaultsWorker(_Worker):
    """Fetches supported languages and resolves default source/target.

    Emits a (supported_languages, ResolvedLanguages) tuple.
    """

    description = "language detection"

    def __init__(
        self,
        availability: LanguageAvailability,
        resolver: LanguageResolver,
        sample_text: str,
        preferred_languages: Sequence[LanguageTag],
    ):
        super().__init__()
        self.availability = availability
        self.resolver = resolver
        self.sample_text = sample_text
        self.preferred_languages = list(preferred_languages)

    def work(self):
        supported = list(self.availability.supported_languages())
        resolved = self.resolver.resolve_defaults(self.sample_text, supported, self.preferred_languages)
        return supported, resolved


class AvailabilityCheckWorker(_Worker):
    """Checks that a configured pairing is usable. Emits the checked pair."""

    description = "availability check"

    def __init__(
        self,
        availability: LanguageAvailability,
        source: Optional[LanguageTag],
        target: Optional[LanguageTag],
        sample_text: str,
    ):
        super().__init__()
        self.availability = availability
        self.source = source
        self.target = target
        self.sample_text = sample_text

    def work(self):
        if self.source is not None:
            check_language_availability(self.availability, self.source, self.target)
        else:
            check_text_availability(self.availability, self.sample_text, self.target)
        return LanguagePair(self.source, self.target)


class WorkerRequest(QObject):
    """
    Helper that holds a worker's id and routes its results to the coordinator.

    Living in the main thread, its slots receive worker signals through
    queued connections. Coordinators must keep a reference while the
    worker runs so it isn't garbage collected.
    """

    def __init__(
        self,
        worker_id: int,
        on_result: Callable[[object, int], None],
        on_error: Callable[[str, int], None],
    ):
        super().__init__()
        self.worker_id = worker_id
        self._on_result = on_result
        self._on_error = on_error

    def connect_to(self, worker: QRunnable) -> None:
        worker.signals.result.connect(self.on_result)
        worker.signals.error.connect(self.on_error)

    @Slot(object)
    def on_result(self, result):
        try:
            self._on_result(result, self.worker_id)
        except RuntimeError:
            # Coordinator might be destroyed, ignore
            pass

    @Slot(str)
    def on_error(self, error: str):
        try:
            self._on_error(error, self.worker_id)
        except RuntimeError:
            pass
