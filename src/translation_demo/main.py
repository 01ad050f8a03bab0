"""Main entry point for the translation demo application."""

import sys
from PySide6.QtWidgets import QApplication

from translation_demo.coordinators import (
    CustomTranslationCoordinator,
    SystemTranslationCoordinator,
    TranslationCoordinator,
)
from translation_demo.services import LanguageResolver, SettingsManager, build_engine
from translation_demo.ui import CustomTranslationPanel, MainWindow, SystemTranslationPanel

SYSTEM_TEXT = "I love pikachu"
CUSTOM_TEXTS = ["I love pikachu", "Pikachu is the best!"]


def main():
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    # 1. Initialize Application
    app = QApplication(sys.argv)
    app.setApplicationName("Translation Demo")
    app.setOrganizationName("TranslationDemo")

    # 2. Initialize Infrastructure
    settings_manager = SettingsManager()
    engine = build_engine(settings_manager)
    print(f"Translation engine: {engine.name}")
    app.aboutToQuit.connect(engine.shutdown)

    # 3. Construct UI
    main_window = MainWindow()
    system_panel = SystemTranslationPanel(SYSTEM_TEXT)
    custom_panel = CustomTranslationPanel(CUSTOM_TEXTS)
    main_window.add_page("system", system_panel)
    main_window.add_page("custom", custom_panel)

    # 4. Instantiate Coordinators (Dependency Injection)
    # Each demo owns its own session so their language pairs never collide.
    system_coordinator = SystemTranslationCoordinator(
        translation_coordinator=TranslationCoordinator(engine.provisioner),
    )
    custom_coordinator = CustomTranslationCoordinator(
        texts=CUSTOM_TEXTS,
        availability=engine.availability,
        resolver=LanguageResolver(engine.detector),
        translation_coordinator=TranslationCoordinator(engine.provisioner),
        settings_manager=settings_manager,
    )

    # 5. Signal Wiring (Connect UI signals to Coordinator slots)
    system_panel.bind_coordinator(system_coordinator)
    custom_panel.bind_coordinator(custom_coordinator)

    # 6. Show UI and start event loop
    main_window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
