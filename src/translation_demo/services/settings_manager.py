"""Settings Manager - Handles engine selection, API key and language preferences."""

import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from translation_demo.core import LanguageTag


class SettingsManager:
    """
    Manages settings and API key configuration.

    Reads a .env file in the project root; real environment variables win
    unless `reload_env` is called.
    """

    DEFAULT_ENGINE = "argos"
    ENGINES = ("argos", "gemini")
    DEFAULT_PREFERRED_LANGUAGES = ("en-US",)

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def get_gemini_api_key(self) -> Optional[str]:
        """Get the Gemini API key from environment."""
        key = os.getenv("GEMINI_API_KEY")
        return key.strip() if key and key.strip() else None

    def get_translation_engine(self) -> str:
        """Name of the translation engine: "argos" (default) or "gemini"."""
        engine = (os.getenv("TRANSLATION_ENGINE") or "").strip().lower()
        if engine not in self.ENGINES:
            if engine:
                print(f"DEBUG: Unknown TRANSLATION_ENGINE {engine!r}, using {self.DEFAULT_ENGINE}")
            return self.DEFAULT_ENGINE
        return engine

    def get_preferred_languages(self) -> List[LanguageTag]:
        """
        User's preferred languages, most preferred first.

        Sources, in order: PREFERRED_LANGUAGES (comma separated), the POSIX
        LANGUAGE list (colon separated), then LC_ALL / LC_MESSAGES / LANG.
        """
        explicit = os.getenv("PREFERRED_LANGUAGES")
        if explicit and explicit.strip():
            languages = self._parse_identifiers(explicit.split(","))
            if languages:
                return languages

        posix = os.getenv("LANGUAGE")
        if posix and posix.strip():
            languages = self._parse_identifiers(posix.split(":"))
            if languages:
                return languages

        for name in ("LC_ALL", "LC_MESSAGES", "LANG"):
            value = os.getenv(name)
            if value and value.strip():
                languages = self._parse_identifiers([value])
                if languages:
                    return languages

        return self._parse_identifiers(self.DEFAULT_PREFERRED_LANGUAGES)

    @staticmethod
    def _parse_identifiers(identifiers) -> List[LanguageTag]:
        languages = []
        for identifier in identifiers:
            # Strip encoding and modifier, e.g. "ja_JP.UTF-8@euro".
            identifier = identifier.split(".")[0].split("@")[0].strip()
            if not identifier or identifier in ("C", "POSIX"):
                continue
            try:
                language = LanguageTag.parse(identifier)
            except ValueError:
                continue
            if language not in languages:
                languages.append(language)
        return languages

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)
