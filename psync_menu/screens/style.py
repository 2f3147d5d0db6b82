"""Stateless palette and formatting helpers shared by the screen builders."""

from __future__ import annotations

from typing import Optional

from psync_menu.protocol.models import Color, Span, TextBlock


DIVIDER = "━" * 36
SEPARATOR = "  │  "
DOT = "  ·  "


def relative_age(captured_at: int, now: int) -> str:
    ago = int(now) - int(captured_at)
    if ago < 60:
        return "just now"
    if ago < 3600:
        return f"{ago // 60}m ago"
    if ago < 86400:
        return f"{ago // 3600}h ago"
    return f"{ago // 86400}d ago"


def format_health(health: float) -> str:
    """Drop the fractional part of whole values: 20.0 -> "20", 17.5 -> "17.5"."""
    if float(health).is_integer():
        return str(int(health))
    return str(float(health))


def health_color(health: float) -> Color:
    if health >= 15:
        return Color.GREEN
    if health >= 8:
        return Color.YELLOW
    return Color.RED


def text(content: str, color: Optional[Color] = None, bold: bool = False) -> Span:
    return Span(text=content, color=color, bold=bold)


def label(content: str) -> Span:
    return text(content, Color.GRAY)


def value(content: str) -> Span:
    return text(content, Color.WHITE)


def sep() -> Span:
    return text(SEPARATOR, Color.DARK_GRAY)


def line(*parts: Span) -> TextBlock:
    return TextBlock(spans=list(parts))


def blank() -> TextBlock:
    return TextBlock()


def divider() -> TextBlock:
    return line(text(DIVIDER, Color.DARK_GRAY))
