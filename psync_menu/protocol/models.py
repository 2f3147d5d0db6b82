
"""Declarative screen values and the inbound click payload."""

from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field, StrictBool, StrictInt, StrictStr


class Color(str, Enum):
    GOLD = "#FFAA00"
    AQUA = "#55FFFF"
    GREEN = "#55FF55"
    RED = "#FF5555"
    YELLOW = "#FFFF55"
    GRAY = "#AAAAAA"
    DARK_GRAY = "#555555"
    WHITE = "#FFFFFF"
    PURPLE = "#AA00AA"


class Span(BaseModel):
    text: StrictStr
    color: Optional[Color] = None
    bold: StrictBool = False

    class Config:
        extra = "forbid"
        frozen = True


class TextBlock(BaseModel):
    """One line of styled text; an empty block renders as a blank line."""

    spans: List[Span] = Field(default_factory=list)

    class Config:
        extra = "forbid"
        frozen = True

    @classmethod
    def of(cls, *parts: Union[Span, str]) -> "TextBlock":
        return cls(spans=[part if isinstance(part, Span) else Span(text=part) for part in parts])

    @property
    def plain(self) -> str:
        return "".join(span.text for span in self.spans)


class Action(BaseModel):
    """Clickable button. `token=None` dismisses the screen without a round trip."""

    label: TextBlock
    tooltip: List[TextBlock] = Field(default_factory=list)
    token: Optional[StrictStr] = None
    width: StrictInt = 300

    class Config:
        extra = "forbid"
        frozen = True


class Screen(BaseModel):
    title: TextBlock
    body: List[TextBlock] = Field(default_factory=list)
    actions: List[Action] = Field(default_factory=list)
    kind: Literal["multi_action", "notice"] = "multi_action"
    can_close_with_escape: StrictBool = True

    class Config:
        extra = "forbid"
        frozen = True

    def tokens(self) -> List[Optional[str]]:
        return [action.token for action in self.actions]

    def action_for(self, token: str) -> Optional[Action]:
        for action in self.actions:
            if action.token == token:
                return action
        return None


class ClickRequest(BaseModel):
    """Inbound interaction: which viewer clicked which token."""

    viewer_id: StrictStr
    token: StrictStr
    field_values: Dict[str, Any] = Field(default_factory=dict)

    class Config:
        extra = "forbid"
