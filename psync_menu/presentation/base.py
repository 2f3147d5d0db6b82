"""Presentation contract.

The router never draws anything itself: it hands finished `Screen` values and
informational lines to a presenter owned by the host.
"""

from __future__ import annotations

from typing import Protocol

from psync_menu.protocol.models import Screen, TextBlock


class Presenter(Protocol):
    def present(self, viewer_id: str, screen: Screen) -> None:
        ...

    def notify(self, viewer_id: str, message: TextBlock) -> None:
        ...
