"""Unit tests for LanguageResolver."""

from unittest.mock import MagicMock

import pytest

from translation_demo.core import LanguageTag
from translation_demo.services import LanguageResolver


def tags(*identifiers):
    return [LanguageTag.parse(identifier) for identifier in identifiers]


@pytest.fixture
def detector():
    """Provide a mocked dominant language detector."""
    detector = MagicMock()
    detector.detect = MagicMock(return_value="en")
    return detector


@pytest.fixture
def resolver(detector):
    return LanguageResolver(detector)


class TestLanguageResolverSource:
    """Tests for source language resolution."""

    def test_source_uses_supported_entry_with_same_family(self, resolver):
        """The supported entry keeps the engine's region."""
        resolved = resolver.resolve_defaults("I love pikachu", tags("fr-FR", "en-US"), tags("fr-FR"))
        assert resolved.source == LanguageTag.parse("en-US")

    def test_source_unset_without_family_match(self, resolver, detector):
        detector.detect.return_value = "de"
        resolved = resolver.resolve_defaults("Ich liebe Pikachu", tags("en-US", "fr-FR"), tags("fr-FR"))
        assert resolved.source is None

    def test_both_unset_when_detection_fails(self, resolver, detector):
        detector.detect.return_value = None
        resolved = resolver.resolve_defaults("???", tags("en-US", "fr-FR"), tags("fr-FR"))
        assert resolved.source is None
        assert resolved.target is None

    def test_empty_supported_languages_is_not_an_error(self, resolver):
        resolved = resolver.resolve_defaults("I love pikachu", [], tags("fr-FR"))
        assert resolved.source is None
        assert resolved.target is None

    def test_detector_region_code_matches_family(self, resolver, detector):
        detector.detect.return_value = "zh-cn"
        resolved = resolver.resolve_defaults("我爱皮卡丘", tags("en-US", "zh-Hans-CN"), tags("en-US"))
        assert resolved.source == LanguageTag.parse("zh-Hans-CN")


class TestLanguageResolverTarget:
    """Tests for target language resolution."""

    def test_skips_preferred_languages_in_source_family(self, resolver):
        resolved = resolver.resolve_defaults(
            "I love pikachu",
            tags("en-US", "fr-FR"),
            tags("en-GB", "fr-FR"),
        )
        assert resolved.target == LanguageTag.parse("fr-FR")

    def test_family_match_maps_to_supported_region(self, resolver):
        """A preferred fr-CA resolves to the supported fr-FR."""
        resolved = resolver.resolve_defaults("I love pikachu", tags("en-US", "fr-FR"), tags("fr-CA"))
        assert resolved.target == LanguageTag.parse("fr-FR")

    def test_family_sweep_overrides_exact_match(self, resolver):
        """The family-only sweep runs after the exact match and wins."""
        resolved = resolver.resolve_defaults(
            "I love pikachu",
            tags("en-US", "pt-BR", "pt-PT"),
            tags("pt-PT"),
        )
        assert resolved.target == LanguageTag.parse("pt-BR")

    def test_target_unset_when_preferred_not_supported(self, resolver):
        resolved = resolver.resolve_defaults("I love pikachu", tags("en-US", "fr-FR"), tags("ja-JP"))
        assert resolved.source == LanguageTag.parse("en-US")
        assert resolved.target is None

    def test_target_unset_when_all_preferred_share_source_family(self, resolver):
        resolved = resolver.resolve_defaults("I love pikachu", tags("en-US", "fr-FR"), tags("en-US", "en-GB"))
        assert resolved.target is None

    def test_target_resolved_when_source_has_no_match(self, resolver, detector):
        """Without a source every preferred language qualifies as target."""
        detector.detect.return_value = "de"
        resolved = resolver.resolve_defaults("Ich liebe Pikachu", tags("en-US", "fr-FR"), tags("en-GB"))
        assert resolved.source is None
        assert resolved.target == LanguageTag.parse("en-US")
