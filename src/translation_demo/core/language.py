"""Language entities - tags, pairs and availability status."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

# Script implied by a bare language code; spelling it out adds nothing.
LIKELY_SCRIPTS = {
    "ar": "Arab",
    "be": "Cyrl",
    "bs": "Latn",
    "el": "Grek",
    "en": "Latn",
    "fa": "Arab",
    "he": "Hebr",
    "hi": "Deva",
    "ja": "Jpan",
    "ko": "Kore",
    "pa": "Guru",
    "ru": "Cyrl",
    "sr": "Cyrl",
    "th": "Thai",
    "uk": "Cyrl",
    "uz": "Latn",
    "zh": "Hans",
}


@dataclass(frozen=True)
class LanguageTag:
    """A human language, optionally qualified by script and region.

    Equality is tag-exact. Use `same_family` to compare only the
    language code (e.g. "en-US" and "en-GB" share the "en" family).
    """

    language: str
    script: Optional[str] = None
    region: Optional[str] = None

    @classmethod
    def parse(cls, identifier: str) -> "LanguageTag":
        """
        Parse a BCP-47 style identifier such as "en", "en-US" or "zh_Hans_CN".

        Args:
            identifier: Language identifier, "-" or "_" separated.

        Returns:
            LanguageTag with normalized casing.

        Raises:
            ValueError: If the identifier has no language code.
        """
        parts = [p for p in identifier.strip().replace("_", "-").split("-") if p]
        if not parts or not parts[0].isalpha():
            raise ValueError(f"Invalid language identifier: {identifier!r}")

        language = parts[0].lower()
        script = None
        region = None
        for part in parts[1:]:
            if len(part) == 4 and part.isalpha() and script is None and region is None:
                script = part.title()
            elif region is None and (
                (len(part) == 2 and part.isalpha()) or (len(part) == 3 and part.isdigit())
            ):
                region = part.upper()
        return cls(language=language, script=script, region=region)

    @property
    def family(self) -> str:
        """Language code without script or region."""
        return self.language

    @property
    def identifier(self) -> str:
        """Full identifier including every known subtag."""
        return "-".join(p for p in (self.language, self.script, self.region) if p)

    def same_family(self, other: Optional["LanguageTag"]) -> bool:
        return other is not None and self.language == other.language

    def __str__(self) -> str:
        """Display form: "language-region", else the minimal identifier.

        A script is only kept when it is not the language's usual one, so
        "zh-Hans" shows as "zh" while "zh-Hant" stays "zh-Hant".
        """
        if self.region:
            return f"{self.language}-{self.region}"
        if self.script and LIKELY_SCRIPTS.get(self.language) != self.script:
            return f"{self.language}-{self.script}"
        return self.language


@dataclass(frozen=True)
class LanguagePair:
    """Source/target scope of a translation session. None means auto."""

    source: Optional[LanguageTag] = None
    target: Optional[LanguageTag] = None

    def __str__(self) -> str:
        source = str(self.source) if self.source else "auto"
        target = str(self.target) if self.target else "auto"
        return f"{source} -> {target}"


class AvailabilityStatus(Enum):
    """Readiness of a language pairing as reported by a translation engine."""

    INSTALLED = "installed"
    SUPPORTED = "supported"
    UNSUPPORTED = "unsupported"
