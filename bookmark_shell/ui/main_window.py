"""Main application window for the Bookmark Shell."""

import logging
from typing import List, Optional

from PyQt6.QtWidgets import (
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QLineEdit,
    QLabel,
    QListWidget,
    QPushButton,
    QStatusBar,
)

from ..services.commands import CommandResult
from ..services.dispatcher import CommandDispatcher
from .command_worker import CommandWorker

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, dispatcher: CommandDispatcher, title: str = "Bookmark Shell"):
        super().__init__()
        self.dispatcher = dispatcher
        self.title = title

        # Running workers, kept referenced until they finish
        self.workers: List[CommandWorker] = []

        self.setup_ui()
        self.refresh_bookmarks()

    def setup_ui(self):
        """Set up the user interface."""
        self.setWindowTitle(self.title)
        self.setMinimumSize(600, 400)

        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        main_layout = QVBoxLayout(central_widget)
        main_layout.setContentsMargins(10, 10, 10, 10)

        # Top bar with URL entry and Add button
        top_layout = QHBoxLayout()

        url_label = QLabel("URL:")
        self.url_input = QLineEdit()
        self.url_input.setPlaceholderText("Enter a URL to bookmark...")
        self.url_input.returnPressed.connect(self.on_add_clicked)
        top_layout.addWidget(url_label)
        top_layout.addWidget(self.url_input)

        self.add_button = QPushButton("Add Bookmark")
        self.add_button.clicked.connect(self.on_add_clicked)
        top_layout.addWidget(self.add_button)

        main_layout.addLayout(top_layout)

        self.bookmark_list = QListWidget()
        main_layout.addWidget(self.bookmark_list)

        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)

    def run_command(self, name: str, **kwargs) -> CommandWorker:
        """Start a worker thread for a command."""
        worker = CommandWorker(self.dispatcher, name, **kwargs)
        worker.command_finished.connect(self.on_command_finished)
        worker.error_occurred.connect(self.on_error)
        worker.finished.connect(lambda: self._forget_worker(worker))
        self.workers.append(worker)
        worker.start()
        return worker

    def _forget_worker(self, worker: CommandWorker):
        worker.wait()
        if worker in self.workers:
            self.workers.remove(worker)

    def on_add_clicked(self):
        """Handle Add Bookmark button click."""
        url = self.url_input.text().strip()
        if not url:
            self.status_bar.showMessage("Nothing to add")
            return

        self.url_input.clear()
        self.run_command("add_bookmark", url=url)

    def refresh_bookmarks(self):
        """Reload the bookmark list from the store."""
        self.run_command("get_bookmarks")

    def on_command_finished(self, name: str, result: CommandResult):
        """Handle a finished command."""
        if not result.ok:
            self.on_error(f"{name}: {result.error}")
            return

        if name == "add_bookmark":
            self.status_bar.showMessage("Bookmark added")
            self.refresh_bookmarks()
        elif name == "get_bookmarks":
            self.show_bookmarks(result.value)

    def show_bookmarks(self, bookmarks: Optional[List[str]]):
        """Replace the displayed list with the given bookmarks."""
        self.bookmark_list.clear()
        self.bookmark_list.addItems(bookmarks or [])
        self.status_bar.showMessage(f"{len(bookmarks or [])} bookmarks")

    def on_error(self, error_message: str):
        """Show a command failure in the status bar."""
        logger.error(error_message)
        self.status_bar.showMessage(f"Error: {error_message}")

    def closeEvent(self, event):
        """Wait for running commands before closing."""
        for worker in list(self.workers):
            worker.wait()
        event.accept()
