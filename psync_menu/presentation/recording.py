"""Presenter that records every call instead of drawing it."""

from __future__ import annotations

from typing import Any, Dict, List, Tuple, Union

from psync_menu.protocol.models import Screen, TextBlock
from psync_menu.runtime.serialization import model_payload


Event = Tuple[str, str, Union[Screen, TextBlock]]


class RecordingPresenter:
    def __init__(self) -> None:
        self.events: List[Event] = []

    def present(self, viewer_id: str, screen: Screen) -> None:
        self.events.append(("present", viewer_id, screen))

    def notify(self, viewer_id: str, message: TextBlock) -> None:
        self.events.append(("notify", viewer_id, message))

    @property
    def screens(self) -> List[Screen]:
        return [item for kind, _, item in self.events if kind == "present"]

    @property
    def messages(self) -> List[TextBlock]:
        return [item for kind, _, item in self.events if kind == "notify"]

    def clear(self) -> None:
        self.events.clear()

    def payload(self) -> List[Dict[str, Any]]:
        return [
            {"event": kind, "viewer_id": viewer_id, "value": model_payload(item)}
            for kind, viewer_id, item in self.events
        ]
