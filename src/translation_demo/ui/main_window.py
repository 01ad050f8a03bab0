"""Main Window - Application shell with navigation between the demos."""

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction
from PySide6.QtWidgets import (
    QLabel,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)


class MainWindow(QMainWindow):
    """Provides the application shell: a home page linking to each demo."""

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Translation API")
        self.setGeometry(100, 100, 520, 720)

        self._pages: dict[str, QWidget] = {}
        self._setup_ui()
        self._create_menu_bar()

    def _setup_ui(self):
        """Initialize the stacked pages with the home page first."""
        self.stack = QStackedWidget()
        self.setCentralWidget(self.stack)

        home = QWidget()
        layout = QVBoxLayout(home)
        layout.setContentsMargins(48, 48, 48, 48)
        layout.setSpacing(24)

        title = QLabel("On Device Translation")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        title.setStyleSheet("font-size: 20px; font-weight: bold;")
        layout.addWidget(title)
        layout.addSpacing(8)

        self.system_button = QPushButton("System UI")
        self.system_button.clicked.connect(lambda: self.show_page("system"))
        layout.addWidget(self.system_button)

        self.custom_button = QPushButton("Custom")
        self.custom_button.clicked.connect(lambda: self.show_page("custom"))
        layout.addWidget(self.custom_button)
        layout.addStretch()

        self.home_page = home
        self.stack.addWidget(home)

    def _create_menu_bar(self):
        """Create the application menu bar."""
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&File")

        home_action = QAction("&Home", self)
        home_action.setShortcut("Ctrl+H")
        home_action.triggered.connect(self.show_home)
        file_menu.addAction(home_action)

        file_menu.addSeparator()

        exit_action = QAction("E&xit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

    def add_page(self, name: str, page: QWidget) -> None:
        """Register a demo page reachable from the home page."""
        self._pages[name] = page
        self.stack.addWidget(page)

    def show_page(self, name: str) -> None:
        page = self._pages.get(name)
        if page is not None:
            self.stack.setCurrentWidget(page)

    def show_home(self) -> None:
        self.stack.setCurrentWidget(self.home_page)
