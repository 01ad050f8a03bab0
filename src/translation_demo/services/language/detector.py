"""Dominant language detection built on langdetect."""

from abc import ABC, abstractmethod
from typing import Optional

from langdetect import DetectorFactory, LangDetectException, detect


class DominantLanguageDetector(ABC):
    """Abstract detector returning the most likely language code of a text."""

    @abstractmethod
    def detect(self, text: str) -> Optional[str]:
        """Return a language code such as "en" or "zh-cn", or None if unknown."""
        pass


class LangdetectLanguageDetector(DominantLanguageDetector):
    """
    Detector backed by the langdetect package.

    langdetect is non-deterministic by default; the factory seed is fixed
    so the same sample always yields the same language.
    """

    MAX_SAMPLE_LENGTH = 1000

    def __init__(self, seed: int = 0):
        DetectorFactory.seed = seed

    def detect(self, text: str) -> Optional[str]:
        sample = (text or "").strip()
        if not sample:
            return None

        try:
            code = detect(sample[: self.MAX_SAMPLE_LENGTH])
        except LangDetectException as e:
            print(f"DEBUG: Language detection failed: {e}")
            return None

        return code or None
