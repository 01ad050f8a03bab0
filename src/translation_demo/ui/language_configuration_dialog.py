"""Language Configuration Dialog - source/target pickers with confirmation."""

from typing import Optional, Sequence

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QComboBox,
    QDialog,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
)

from translation_demo.core import LanguageTag

AUTO_DETECT = "Auto Detect"


class LanguageConfigurationDialog(QDialog):
    """
    Lets the user pick source and target languages.

    "Auto Detect" maps to None. Confirm emits `confirm_requested`; the
    coordinator checks availability and either accepts the dialog or
    reports an error through `show_error`.
    """

    confirm_requested = Signal(object, object)

    def __init__(
        self,
        supported_languages: Sequence[LanguageTag],
        source: Optional[LanguageTag] = None,
        target: Optional[LanguageTag] = None,
        parent=None,
    ):
        super().__init__(parent)
        self.setWindowTitle("Languages")
        self.setMinimumWidth(360)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 16, 12, 12)
        layout.setSpacing(8)

        self.error_label = QLabel("")
        self.error_label.setStyleSheet("color: red;")
        self.error_label.setWordWrap(True)
        self.error_label.hide()
        layout.addWidget(self.error_label)

        form = QFormLayout()
        self.source_combo = self._language_picker(supported_languages, source)
        self.target_combo = self._language_picker(supported_languages, target)
        form.addRow("Source", self.source_combo)
        form.addRow("Target", self.target_combo)
        layout.addLayout(form)

        buttons = QHBoxLayout()
        self.confirm_button = QPushButton("Confirm")
        self.confirm_button.setStyleSheet("font-weight: bold;")
        self.confirm_button.clicked.connect(self._on_confirm)
        close_button = QPushButton("Close")
        close_button.clicked.connect(self.reject)
        buttons.addWidget(self.confirm_button)
        buttons.addStretch()
        buttons.addWidget(close_button)
        layout.addLayout(buttons)

    @staticmethod
    def _language_picker(
        supported_languages: Sequence[LanguageTag], selected: Optional[LanguageTag]
    ) -> QComboBox:
        combo = QComboBox()
        combo.addItem(AUTO_DETECT, None)
        for language in supported_languages:
            combo.addItem(str(language), language)

        for index in range(combo.count()):
            if combo.itemData(index) == selected:
                combo.setCurrentIndex(index)
                break
        return combo

    def selected_source(self) -> Optional[LanguageTag]:
        return self.source_combo.currentData()

    def selected_target(self) -> Optional[LanguageTag]:
        return self.target_combo.currentData()

    def _on_confirm(self) -> None:
        self.error_label.hide()
        self.confirm_button.setEnabled(False)
        self.confirm_requested.emit(self.selected_source(), self.selected_target())

    def show_error(self, error: str) -> None:
        self.error_label.setText(error)
        self.error_label.show()
        self.confirm_button.setEnabled(True)
