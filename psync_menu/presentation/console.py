"""Plain-text terminal presenter used by the interactive `browse` command."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from psync_menu.protocol.models import Screen, TextBlock
from psync_menu.protocol.tokens import qualify


class ConsolePresenter:
    def __init__(self, stream: Optional[TextIO] = None, namespace: Optional[str] = None):
        self.stream = stream or sys.stdout
        # When set, each action line also shows the identifier it sends.
        self.namespace = namespace
        self.current: Optional[Screen] = None

    def _write(self, line: str = "") -> None:
        self.stream.write(line + "\n")

    def present(self, viewer_id: str, screen: Screen) -> None:
        self.current = screen
        self._write()
        self._write(screen.title.plain)
        self._write("=" * max(len(screen.title.plain), 8))
        for block in screen.body:
            self._write(block.plain)
        if screen.actions:
            self._write()
        for number, action in enumerate(screen.actions, start=1):
            entry = f"  [{number}] {action.label.plain}"
            if self.namespace and action.token is not None:
                entry += f"  ({qualify(action.token, self.namespace)})"
            self._write(entry)
        if screen.kind == "notice":
            self._write()
            self._write("  [enter] OK")

    def notify(self, viewer_id: str, message: TextBlock) -> None:
        self._write(f">> {message.plain}")
