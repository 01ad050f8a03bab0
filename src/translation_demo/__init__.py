"""
Translation Demo - two ways of driving a local translation engine from a GUI.

This package provides a desktop application with:
- A system-style translation sheet for a single text
- A custom UI driving a translation session (single or batch)
- Default language resolution from sample text and preferred languages
"""

__version__ = "0.1.0"

# Make key components available at package level
from translation_demo.core import LanguagePair, LanguageTag, TranslationError
from translation_demo.coordinators import TranslationCoordinator
from translation_demo.services import LanguageResolver

__all__ = [
    "LanguageTag",
    "LanguagePair",
    "TranslationError",
    "TranslationCoordinator",
    "LanguageResolver",
]
