"""Coordinators - Orchestration layer connecting UI with translation engines."""

from .translation_coordinator import TranslationCoordinator
from .custom_translation_coordinator import CustomTranslationCoordinator
from .system_translation_coordinator import SystemTranslationCoordinator

__all__ = [
    "TranslationCoordinator",
    "CustomTranslationCoordinator",
    "SystemTranslationCoordinator",
]
