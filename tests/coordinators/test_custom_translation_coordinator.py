"""Unit tests for CustomTranslationCoordinator."""

from unittest.mock import MagicMock

import pytest

from translation_demo.coordinators import CustomTranslationCoordinator
from translation_demo.core import (
    AvailabilityStatus,
    LanguagePair,
    LanguageTag,
    TranslationFailed,
    UnableToIdentifyLanguage,
)
from translation_demo.services import LanguageResolver, ResolvedLanguages

TEXTS = ["I love pikachu", "Pikachu is the best!"]
EN = LanguageTag.parse("en-US")
FR = LanguageTag.parse("fr-FR")
JA = LanguageTag.parse("ja-JP")


@pytest.fixture
def thread_pool():
    """Thread pool that runs workers synchronously."""
    pool = MagicMock()
    pool.start.side_effect = lambda worker: worker.run()
    return pool


@pytest.fixture
def availability():
    availability = MagicMock()
    availability.supported_languages.return_value = (EN, FR, JA)
    availability.status.return_value = AvailabilityStatus.INSTALLED
    availability.status_for_text.return_value = AvailabilityStatus.SUPPORTED
    return availability


@pytest.fixture
def detector():
    detector = MagicMock()
    detector.detect.return_value = "en"
    return detector


@pytest.fixture
def translation_coordinator():
    """Mocked TranslationCoordinator that uppercases texts."""
    coordinator = MagicMock()
    coordinator.translate.side_effect = lambda pair, texts, batch: (
        [t.upper() for t in texts] if batch else [texts[0].upper()]
    )
    return coordinator


@pytest.fixture
def settings_manager():
    manager = MagicMock()
    manager.get_preferred_languages.return_value = [LanguageTag.parse("en-GB"), LanguageTag.parse("fr-CA")]
    return manager


@pytest.fixture
def coordinator(qt_app, availability, detector, translation_coordinator, settings_manager, thread_pool):
    return CustomTranslationCoordinator(
        texts=TEXTS,
        availability=availability,
        resolver=LanguageResolver(detector),
        translation_coordinator=translation_coordinator,
        settings_manager=settings_manager,
        thread_pool=thread_pool,
    )


class TestCustomTranslationCoordinatorDefaults:
    """Tests for default language resolution on first display."""

    def test_starts_with_auto_languages(self, coordinator):
        assert coordinator.source_language is None
        assert coordinator.target_language is None
        assert coordinator.language_pair == LanguagePair()

    def test_load_defaults_resolves_languages(self, coordinator):
        resolved_spy = MagicMock()
        coordinator.languages_resolved.connect(resolved_spy)

        coordinator.load_defaults()

        assert coordinator.source_language == EN
        assert coordinator.target_language == FR
        resolved_spy.assert_called_once_with(EN, FR)

    def test_load_defaults_publishes_supported_languages(self, coordinator):
        loaded_spy = MagicMock()
        coordinator.supported_languages_loaded.connect(loaded_spy)

        coordinator.load_defaults()

        assert coordinator.supported_languages == [EN, FR, JA]
        loaded_spy.assert_called_once_with([EN, FR, JA])

    def test_load_defaults_uses_joined_sample_text(self, coordinator, detector):
        coordinator.load_defaults()
        detector.detect.assert_called_once_with("I love pikachu\nPikachu is the best!")

    def test_load_defaults_keeps_explicit_choice(self, coordinator):
        coordinator.set_languages(None, JA)
        coordinator.load_defaults()

        assert coordinator.source_language is None
        assert coordinator.target_language == JA

    def test_late_defaults_keep_confirmed_auto_detect(
        self, qt_app, availability, detector, translation_coordinator, settings_manager
    ):
        """Confirming "Auto Detect" while defaults load survives the late result."""
        queued = []
        pool = MagicMock()
        pool.start.side_effect = queued.append
        coordinator = CustomTranslationCoordinator(
            texts=TEXTS,
            availability=availability,
            resolver=LanguageResolver(detector),
            translation_coordinator=translation_coordinator,
            settings_manager=settings_manager,
            thread_pool=pool,
        )
        resolved_spy = MagicMock()
        coordinator.languages_resolved.connect(resolved_spy)

        coordinator.load_defaults()
        coordinator.confirm_configuration(None, None)
        for worker in queued:
            worker.run()

        assert coordinator.language_pair == LanguagePair()
        assert coordinator.supported_languages == [EN, FR, JA]
        resolved_spy.assert_called_once_with(None, None)

    def test_load_defaults_failure_is_silent(self, coordinator, availability):
        availability.supported_languages.side_effect = RuntimeError("index unavailable")
        failed_spy = MagicMock()
        coordinator.translation_failed.connect(failed_spy)

        coordinator.load_defaults()

        assert coordinator.language_pair == LanguagePair()
        failed_spy.assert_not_called()


class TestCustomTranslationCoordinatorConfiguration:
    """Tests for confirming the language configuration."""

    def test_confirm_with_source_checks_pair(self, coordinator, availability):
        confirmed_spy = MagicMock()
        coordinator.configuration_confirmed.connect(confirmed_spy)

        coordinator.confirm_configuration(EN, JA)

        availability.status.assert_called_once_with(EN, JA)
        confirmed_spy.assert_called_once_with(LanguagePair(EN, JA))
        assert coordinator.language_pair == LanguagePair(EN, JA)

    def test_confirm_without_source_checks_sample_text(self, coordinator, availability):
        coordinator.confirm_configuration(None, JA)
        availability.status_for_text.assert_called_once_with(coordinator.sample_text, JA)

    def test_unsupported_pairing_reports_error(self, coordinator, availability):
        availability.status.return_value = AvailabilityStatus.UNSUPPORTED
        failed_spy = MagicMock()
        coordinator.configuration_failed.connect(failed_spy)

        coordinator.confirm_configuration(EN, EN)

        failed_spy.assert_called_once_with("The selected language pairing is not supported.")

    def test_undetectable_text_reports_error(self, coordinator, availability):
        availability.status_for_text.side_effect = UnableToIdentifyLanguage()
        failed_spy = MagicMock()
        coordinator.configuration_failed.connect(failed_spy)

        coordinator.confirm_configuration(None, None)

        failed_spy.assert_called_once_with("Unable to identify the source language.")


class TestCustomTranslationCoordinatorTranslation:
    """Tests for translation requests."""

    def test_button_text_follows_batch_mode(self, coordinator):
        assert coordinator.translate_button_text() == "Translate First"
        coordinator.set_batch(True)
        assert coordinator.translate_button_text() == "Translate All"

    def test_single_translation(self, coordinator, translation_coordinator):
        completed_spy = MagicMock()
        coordinator.translation_completed.connect(completed_spy)
        coordinator.set_languages(EN, FR)

        coordinator.request_translation()

        translation_coordinator.translate.assert_called_once_with(LanguagePair(EN, FR), TEXTS, batch=False)
        completed_spy.assert_called_once_with(["I LOVE PIKACHU"])
        assert coordinator.translated_texts == ["I LOVE PIKACHU"]

    def test_batch_translation(self, coordinator):
        coordinator.set_batch(True)
        coordinator.request_translation()
        assert coordinator.translated_texts == ["I LOVE PIKACHU", "PIKACHU IS THE BEST!"]

    def test_request_emits_started_signal(self, coordinator):
        started_spy = MagicMock()
        coordinator.translation_started.connect(started_spy)

        coordinator.request_translation()
        started_spy.assert_called_once()

    def test_failure_sets_current_error(self, coordinator, translation_coordinator):
        translation_coordinator.translate.side_effect = TranslationFailed("engine exploded")
        failed_spy = MagicMock()
        coordinator.translation_failed.connect(failed_spy)

        coordinator.request_translation()

        assert coordinator.error == "engine exploded"
        assert coordinator.translated_texts == []
        failed_spy.assert_called_once_with("engine exploded")

    def test_unexpected_exception_is_reported(self, coordinator, translation_coordinator):
        translation_coordinator.translate.side_effect = ValueError("bad")
        coordinator.request_translation()
        assert coordinator.error == "Unexpected translation error: bad"

    def test_new_request_clears_previous_error(self, coordinator, translation_coordinator):
        translation_coordinator.translate.side_effect = TranslationFailed("first failure")
        coordinator.request_translation()

        translation_coordinator.translate.side_effect = lambda pair, texts, batch: ["OK"]
        coordinator.request_translation()

        assert coordinator.error is None
        assert coordinator.translated_texts == ["OK"]


class TestCustomTranslationCoordinatorSuperseding:
    """Tests for dropping results of superseded requests."""

    @pytest.fixture
    def deferred_pool(self):
        """Thread pool that holds workers until run manually."""
        pool = MagicMock()
        pool.workers = []
        pool.start.side_effect = pool.workers.append
        return pool

    def test_stale_translation_result_is_ignored(
        self, qt_app, availability, detector, translation_coordinator, settings_manager, deferred_pool
    ):
        coordinator = CustomTranslationCoordinator(
            texts=TEXTS,
            availability=availability,
            resolver=LanguageResolver(detector),
            translation_coordinator=translation_coordinator,
            settings_manager=settings_manager,
            thread_pool=deferred_pool,
        )
        completed_spy = MagicMock()
        coordinator.translation_completed.connect(completed_spy)

        coordinator.request_translation()
        coordinator.open_configuration()
        deferred_pool.workers[0].run()

        completed_spy.assert_not_called()
        assert coordinator.translated_texts == []

    def test_only_latest_request_completes(
        self, qt_app, availability, detector, translation_coordinator, settings_manager, deferred_pool
    ):
        coordinator = CustomTranslationCoordinator(
            texts=TEXTS,
            availability=availability,
            resolver=LanguageResolver(detector),
            translation_coordinator=translation_coordinator,
            settings_manager=settings_manager,
            thread_pool=deferred_pool,
        )
        completed_spy = MagicMock()
        coordinator.translation_completed.connect(completed_spy)

        coordinator.request_translation()
        coordinator.set_batch(True)
        coordinator.request_translation()
        for worker in deferred_pool.workers:
            worker.run()

        completed_spy.assert_called_once_with(["I LOVE PIKACHU", "PIKACHU IS THE BEST!"])
