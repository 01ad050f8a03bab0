"""Translation Sheet - system-style dialog translating a single text."""

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QDialog,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QTextEdit,
    QVBoxLayout,
)


class TranslationSheet(QDialog):
    """Shows the original text and its translation with a replace action."""

    replacement_accepted = Signal(str)

    def __init__(self, text: str, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Translate")
        self.setMinimumWidth(420)

        self._translation: str | None = None

        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(8)

        original_label = QLabel("Original")
        original_label.setStyleSheet("font-weight: bold;")
        layout.addWidget(original_label)

        self.original_text = QTextEdit()
        self.original_text.setReadOnly(True)
        self.original_text.setPlainText(text)
        self.original_text.setFixedHeight(80)
        layout.addWidget(self.original_text)

        translation_label = QLabel("Translation")
        translation_label.setStyleSheet("font-weight: bold;")
        layout.addWidget(translation_label)

        self.translation_text = QTextEdit()
        self.translation_text.setReadOnly(True)
        self.translation_text.setFixedHeight(80)
        layout.addWidget(self.translation_text)

        self.status_label = QLabel("")
        self.status_label.setStyleSheet("color: gray;")
        layout.addWidget(self.status_label)

        buttons = QHBoxLayout()
        self.replace_button = QPushButton("Replace with Translation")
        self.replace_button.setEnabled(False)
        self.replace_button.clicked.connect(self._on_replace)
        close_button = QPushButton("Close")
        close_button.clicked.connect(self.reject)
        buttons.addWidget(self.replace_button)
        buttons.addStretch()
        buttons.addWidget(close_button)
        layout.addLayout(buttons)

    def show_loading(self) -> None:
        self.translation_text.clear()
        self.translation_text.setPlaceholderText("Translating...")
        self.replace_button.setEnabled(False)
        self.status_label.setText("Loading...")
        self.status_label.setStyleSheet("color: gray;")

    def show_translation(self, text: str) -> None:
        self._translation = text
        self.translation_text.setPlainText(text)
        self.replace_button.setEnabled(True)
        self.status_label.setText("")

    def show_error(self, error: str) -> None:
        self._translation = None
        self.translation_text.setPlainText(f"Error: {error}")
        self.replace_button.setEnabled(False)
        self.status_label.setText("Failed")
        self.status_label.setStyleSheet("color: red;")

    def _on_replace(self) -> None:
        if self._translation is None:
            return
        self.replacement_accepted.emit(self._translation)
        self.accept()
