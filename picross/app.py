"""Application entry point and setup for Picross."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from picross.core.board import BoardFactory
from picross.core.controller import Controller
from picross.core.settings import load_settings, seed_from_environment
from picross.ui.main_window import MainWindow


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def run() -> None:
    """Initialize the application and start the main window."""
    configure_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("Picross")
    app.setApplicationDisplayName("Picross")

    settings = load_settings()
    seed = seed_from_environment()
    if seed is not None:
        logging.info(f"Using board seed {seed}")
    controller = Controller(settings=settings, factory=BoardFactory(seed))

    window = MainWindow(controller)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
