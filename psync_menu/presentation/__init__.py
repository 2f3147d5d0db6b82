from psync_menu.presentation.base import Presenter
from psync_menu.presentation.console import ConsolePresenter
from psync_menu.presentation.recording import RecordingPresenter

__all__ = ["ConsolePresenter", "Presenter", "RecordingPresenter"]
