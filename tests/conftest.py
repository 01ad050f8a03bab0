"""Shared pytest configuration."""

import os

import pytest

# Widgets are created in tests; no display is needed.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def qt_app():
    """Provide the QApplication instance, creating it once."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app
