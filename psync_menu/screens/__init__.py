from psync_menu.screens.builders import (
    BUILDERS,
    PAGE_SIZE,
    build_list_page,
    build_restore_preview,
    build_screen,
    build_snapshot_detail,
    build_snapshot_list,
    restore_message,
    total_pages,
)
from psync_menu.screens.style import format_health, health_color, relative_age

__all__ = [
    "BUILDERS",
    "PAGE_SIZE",
    "build_list_page",
    "build_restore_preview",
    "build_screen",
    "build_snapshot_detail",
    "build_snapshot_list",
    "format_health",
    "health_color",
    "relative_age",
    "restore_message",
    "total_pages",
]
