"""GUI entry point for the Bookmark Shell application."""

import sys
from PyQt6.QtWidgets import QApplication

from .config import configure_logging, get_settings
from .models.bookmark_store import get_store
from .services.dispatcher import create_dispatcher
from .ui.main_window import MainWindow


def main():
    """Launch the GUI application."""
    settings = get_settings()
    configure_logging(settings.log_level)

    app = QApplication(sys.argv)
    app.setApplicationName(settings.app_name)

    dispatcher = create_dispatcher(get_store(), settings)
    window = MainWindow(dispatcher, title=settings.app_name)
    window.show()

    try:
        exit_code = app.exec()
    finally:
        dispatcher.shutdown()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
