"""Unit tests for availability status checks and language detection."""

from unittest.mock import MagicMock, patch

import pytest
from langdetect import LangDetectException

from translation_demo.core import (
    AvailabilityStatus,
    InternalError,
    LanguageTag,
    UnableToIdentifyLanguage,
    UnsupportedLanguagePairing,
)
from translation_demo.services import (
    LangdetectLanguageDetector,
    check_language_availability,
    check_status,
    check_text_availability,
)


class TestCheckStatus:
    """Tests for mapping availability status to errors."""

    @pytest.mark.parametrize("status", [AvailabilityStatus.INSTALLED, AvailabilityStatus.SUPPORTED])
    def test_usable_statuses_pass(self, status):
        check_status(status)

    def test_unsupported_raises(self):
        with pytest.raises(UnsupportedLanguagePairing):
            check_status(AvailabilityStatus.UNSUPPORTED)

    def test_unrecognized_status_raises_internal_error(self):
        with pytest.raises(InternalError):
            check_status("downloading")


class TestCheckLanguageAvailability:
    """Tests for the oracle helpers."""

    def test_known_source_uses_status(self):
        availability = MagicMock()
        availability.status.return_value = AvailabilityStatus.UNSUPPORTED
        source = LanguageTag.parse("en-US")

        with pytest.raises(UnsupportedLanguagePairing):
            check_language_availability(availability, source, None)
        availability.status.assert_called_once_with(source, None)

    def test_sample_text_uses_status_for_text(self):
        availability = MagicMock()
        availability.status_for_text.return_value = AvailabilityStatus.SUPPORTED
        target = LanguageTag.parse("ja-JP")

        check_text_availability(availability, "I love pikachu", target)
        availability.status_for_text.assert_called_once_with("I love pikachu", target)

    def test_detection_failure_propagates(self):
        availability = MagicMock()
        availability.status_for_text.side_effect = UnableToIdentifyLanguage()

        with pytest.raises(UnableToIdentifyLanguage):
            check_text_availability(availability, "??", None)


class TestLangdetectLanguageDetector:
    """Tests for the langdetect-backed detector."""

    def test_empty_text_returns_none(self):
        assert LangdetectLanguageDetector().detect("   ") is None

    def test_returns_detected_code(self):
        with patch("translation_demo.services.language.detector.detect", return_value="fr") as mock_detect:
            assert LangdetectLanguageDetector().detect("J'adore Pikachu") == "fr"
        mock_detect.assert_called_once_with("J'adore Pikachu")

    def test_detection_error_returns_none(self):
        with patch(
            "translation_demo.services.language.detector.detect",
            side_effect=LangDetectException(0, "No features in text."),
        ):
            assert LangdetectLanguageDetector().detect("1234") is None
