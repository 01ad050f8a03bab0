"""Language Resolver - best-guess source/target languages without user input."""

from dataclasses import dataclass
from typing import Optional, Sequence

from translation_demo.core import LanguageTag
from translation_demo.services.language.detector import DominantLanguageDetector


@dataclass(frozen=True)
class ResolvedLanguages:
    """Default languages for the picker. None means auto detect."""

    source: Optional[LanguageTag] = None
    target: Optional[LanguageTag] = None


class LanguageResolver:
    """
    Picks default source and target languages from sample text.

    The source is the supported language whose family matches the detected
    dominant language, so the engine's own region/script is kept (a raw
    detector code like "en" rarely equals a supported "en-US" exactly).
    The target is the first preferred language in a different family,
    mapped onto a supported entry.
    """

    def __init__(self, detector: DominantLanguageDetector):
        self.detector = detector

    def resolve_defaults(
        self,
        sample_text: str,
        supported_languages: Sequence[LanguageTag],
        preferred_languages: Sequence[LanguageTag],
    ) -> ResolvedLanguages:
        """
        Resolve default languages for a translation.

        Args:
            sample_text: Text whose dominant language becomes the source.
            supported_languages: Languages reported by the engine.
            preferred_languages: User's preferred languages, most preferred first.

        Returns:
            ResolvedLanguages; fields stay None when nothing could be matched.
            If the detector finds nothing, both fields are None.
        """
        code = self.detector.detect(sample_text)
        if not code:
            return ResolvedLanguages()

        try:
            detected = LanguageTag.parse(code)
        except ValueError:
            print(f"DEBUG: Ignoring unparseable detected language {code!r}")
            return ResolvedLanguages()

        source = next(
            (lang for lang in supported_languages if lang.same_family(detected)),
            None,
        )

        # With no source every preferred language qualifies.
        preferred_target = next(
            (lang for lang in preferred_languages if not lang.same_family(source)),
            None,
        )
        if preferred_target is None:
            return ResolvedLanguages(source=source)

        target = None
        # Exact match first, then a family-only sweep that overrides it.
        exact = next((lang for lang in supported_languages if lang == preferred_target), None)
        if exact is not None:
            target = exact
        family = next(
            (lang for lang in supported_languages if lang.same_family(preferred_target)),
            None,
        )
        if family is not None:
            target = family

        return ResolvedLanguages(source=source, target=target)
