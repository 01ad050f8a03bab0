"""System Translation Panel - translates a text through the translation sheet."""

from PySide6.QtWidgets import (
    QGroupBox,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from translation_demo.ui.translation_sheet import TranslationSheet


class SystemTranslationPanel(QWidget):
    """Shows a sample text, a Translate button and the accepted translation."""

    NOTES = "- Shows the translation sheet for a single text\n- The source language is detected automatically"

    def __init__(self, text: str = "I love pikachu"):
        super().__init__()
        self.text = text
        self.sheet: TranslationSheet | None = None
        self._coordinator = None

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        title = QLabel("System UI")
        title.setStyleSheet("font-size: 18px; font-weight: bold;")
        layout.addWidget(title)

        notes = QLabel(self.NOTES)
        notes.setStyleSheet("color: gray;")
        notes.setWordWrap(True)
        layout.addWidget(notes)

        original_group = QGroupBox("Original")
        original_layout = QVBoxLayout(original_group)
        self.original_label = QLabel(text)
        self.original_label.setWordWrap(True)
        original_layout.addWidget(self.original_label)
        self.translate_button = QPushButton("Translate")
        original_layout.addWidget(self.translate_button)
        layout.addWidget(original_group)

        self.translated_group = QGroupBox("Translated")
        translated_layout = QVBoxLayout(self.translated_group)
        self.translated_label = QLabel("")
        self.translated_label.setWordWrap(True)
        translated_layout.addWidget(self.translated_label)
        self.translated_group.hide()
        layout.addWidget(self.translated_group)

        layout.addStretch()

    def bind_coordinator(self, coordinator) -> None:
        """Wire the panel to a SystemTranslationCoordinator."""
        self._coordinator = coordinator
        self.translate_button.clicked.connect(self.open_sheet)
        coordinator.text_replaced.connect(self.show_translated)

    def open_sheet(self) -> None:
        """Present the translation sheet and start translating."""
        coordinator = self._coordinator
        self.sheet = TranslationSheet(self.text, self)
        self.sheet.show_loading()

        coordinator.translation_ready.connect(self.sheet.show_translation)
        coordinator.translation_failed.connect(self.sheet.show_error)
        self.sheet.replacement_accepted.connect(coordinator.accept_replacement)
        self.sheet.finished.connect(self._on_sheet_finished)

        self.sheet.open()
        coordinator.request_translation(self.text)

    def _on_sheet_finished(self, _result: int) -> None:
        coordinator = self._coordinator
        coordinator.cancel()
        coordinator.translation_ready.disconnect(self.sheet.show_translation)
        coordinator.translation_failed.disconnect(self.sheet.show_error)
        self.sheet.deleteLater()
        self.sheet = None

    def show_translated(self, text: str) -> None:
        self.translated_label.setText(text)
        self.translated_group.show()
