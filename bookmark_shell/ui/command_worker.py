"""Worker thread that runs a shell command without blocking the UI."""

from PyQt6.QtCore import QThread, pyqtSignal

from ..services.dispatcher import CommandDispatcher


class CommandWorker(QThread):
    """Worker thread to invoke one command through the dispatcher."""

    # Signals to communicate with the main thread
    command_finished = pyqtSignal(str, object)  # command name, CommandResult
    error_occurred = pyqtSignal(str)

    def __init__(self, dispatcher: CommandDispatcher, name: str, **kwargs):
        super().__init__()
        self.dispatcher = dispatcher
        self.name = name
        self.kwargs = kwargs

    def run(self):
        """Run the command and report its result."""
        try:
            result = self.dispatcher.call(self.name, **self.kwargs)
        except Exception as e:
            self.error_occurred.emit(f"Error running {self.name}: {e}")
            return
        self.command_finished.emit(self.name, result)
