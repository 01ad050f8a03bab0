"""UI layer - PySide6 presentation components."""

from .main_window import MainWindow
from .custom_translation_panel import CustomTranslationPanel
from .language_configuration_dialog import LanguageConfigurationDialog
from .system_translation_panel import SystemTranslationPanel
from .translation_sheet import TranslationSheet

__all__ = [
    "MainWindow",
    "CustomTranslationPanel",
    "LanguageConfigurationDialog",
    "SystemTranslationPanel",
    "TranslationSheet",
]
