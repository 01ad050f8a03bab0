"""Custom Translation Panel - session-driven translation with language configuration."""

from typing import List, Sequence

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QCheckBox,
    QGroupBox,
    QLabel,
    QListWidget,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from translation_demo.ui.language_configuration_dialog import LanguageConfigurationDialog


class CustomTranslationPanel(QWidget):
    """Original texts, language configuration, batch toggle and results."""

    first_shown = Signal()

    NOTES = (
        "- Translate with a translation session\n"
        "- Custom UI, single text or multiple texts\n\n"
        "Careful points:\n"
        "- A session is never created twice for the same language pair; the "
        "current one is kept and reused.\n"
        "- Default languages must be one of the supported ones. A language may "
        "be supported in a different region than the preferred one, e.g. "
        "en-US instead of en-GB."
    )

    def __init__(self, texts: Sequence[str]):
        super().__init__()
        self._coordinator = None
        self._shown_once = False
        self.dialog: LanguageConfigurationDialog | None = None

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        title = QLabel("Custom Translation")
        title.setStyleSheet("font-size: 18px; font-weight: bold;")
        layout.addWidget(title)

        notes = QLabel(self.NOTES)
        notes.setStyleSheet("color: gray;")
        notes.setWordWrap(True)
        layout.addWidget(notes)

        self.error_label = QLabel("")
        self.error_label.setStyleSheet("color: red;")
        self.error_label.setWordWrap(True)
        self.error_label.hide()
        layout.addWidget(self.error_label)

        original_group = QGroupBox("Original")
        original_layout = QVBoxLayout(original_group)
        self.original_list = QListWidget()
        self.original_list.addItems(list(texts))
        original_layout.addWidget(self.original_list)
        self.configure_button = QPushButton("Configure Language")
        original_layout.addWidget(self.configure_button)
        layout.addWidget(original_group)

        self.batch_checkbox = QCheckBox("Batch")
        layout.addWidget(self.batch_checkbox)

        self.translate_button = QPushButton("Translate First")
        self.translate_button.setStyleSheet("font-weight: bold;")
        layout.addWidget(self.translate_button)

        self.translated_group = QGroupBox("Translated")
        translated_layout = QVBoxLayout(self.translated_group)
        self.translated_list = QListWidget()
        translated_layout.addWidget(self.translated_list)
        self.translated_group.hide()
        layout.addWidget(self.translated_group)

        layout.addStretch()

    def showEvent(self, event):
        super().showEvent(event)
        if not self._shown_once:
            self._shown_once = True
            self.first_shown.emit()

    def bind_coordinator(self, coordinator) -> None:
        """Wire the panel to a CustomTranslationCoordinator."""
        self._coordinator = coordinator

        self.first_shown.connect(coordinator.load_defaults)
        self.configure_button.clicked.connect(self.open_configuration)
        self.batch_checkbox.toggled.connect(self._on_batch_toggled)
        self.translate_button.clicked.connect(coordinator.request_translation)

        coordinator.translation_started.connect(self.show_translation_loading)
        coordinator.translation_completed.connect(self.show_translations)
        coordinator.translation_failed.connect(self.show_error)
        coordinator.configuration_confirmed.connect(self._on_configuration_confirmed)
        coordinator.configuration_failed.connect(self._on_configuration_failed)

        self.translate_button.setText(coordinator.translate_button_text())

    def _on_batch_toggled(self, checked: bool) -> None:
        self._coordinator.set_batch(checked)
        self.translate_button.setText(self._coordinator.translate_button_text())

    def open_configuration(self) -> None:
        coordinator = self._coordinator
        coordinator.open_configuration()

        self.dialog = LanguageConfigurationDialog(
            coordinator.supported_languages,
            coordinator.source_language,
            coordinator.target_language,
            self,
        )
        self.dialog.confirm_requested.connect(coordinator.confirm_configuration)
        self.dialog.finished.connect(self._on_dialog_finished)
        self.dialog.open()

    def _on_configuration_confirmed(self, _pair) -> None:
        if self.dialog is not None:
            self.dialog.accept()

    def _on_configuration_failed(self, error: str) -> None:
        if self.dialog is not None:
            self.dialog.show_error(error)

    def _on_dialog_finished(self, _result: int) -> None:
        if self.dialog is not None:
            self.dialog.deleteLater()
            self.dialog = None

    def show_translation_loading(self) -> None:
        self.clear_error()
        self.translated_list.clear()
        self.translated_group.hide()

    def show_translations(self, texts: List[str]) -> None:
        self.translated_list.clear()
        self.translated_list.addItems(texts)
        self.translated_group.setVisible(bool(texts))

    def show_error(self, error: str) -> None:
        self.error_label.setText(error)
        self.error_label.show()

    def clear_error(self) -> None:
        self.error_label.clear()
        self.error_label.hide()
