"""Pure screen builders, one per route kind.

Each builder takes the decoded route, a data source and the current epoch
second and returns a `Screen`. Builders never mutate the source; the router
validates indices before calling them.
"""

from __future__ import annotations

import math
from typing import Callable, Dict, List

from psync_menu.datasource.base import DataSource
from psync_menu.datasource.models import Snapshot
from psync_menu.protocol.models import Action, Color, Screen, TextBlock
from psync_menu.protocol.routes import (
    ListPage,
    RestorePreview,
    Route,
    SnapshotDetail,
    SnapshotList,
)
from psync_menu.protocol.tokens import encode
from psync_menu.screens.style import (
    DOT,
    blank,
    divider,
    format_health,
    health_color,
    label,
    line,
    relative_age,
    sep,
    text,
    value,
)


PAGE_SIZE = 6

FULL_ROW = 300
HALF_ROW = 130


def total_pages(subject_count: int, page_size: int = PAGE_SIZE) -> int:
    # An empty source still has one (blank) page to open.
    return max(1, math.ceil(subject_count / page_size))


def origin_page(subject_index: int, page_size: int = PAGE_SIZE) -> int:
    return subject_index // page_size


def build_list_page(route: ListPage, source: DataSource, now: int, page_size: int = PAGE_SIZE) -> Screen:
    total = source.subject_count()
    pages = total_pages(total, page_size)
    start = route.page * page_size
    stop = min(start + page_size, total)

    actions: List[Action] = []
    for index in range(start, stop):
        subject = source.subject(index)
        count = source.snapshot_count(index)
        tooltip = [line(label("UUID:       "), text(subject.identifier, Color.DARK_GRAY))]
        if count:
            latest = source.snapshot(index, 0)
            tooltip += [
                line(label("Last saved: "), text(relative_age(latest.captured_at, now), Color.YELLOW)),
                line(label("Server:     "), value(latest.location.server_name)),
            ]
        tooltip += [
            line(label("Snapshots:  "), text(f"{count} stored", Color.GREEN)),
            blank(),
            line(text("Click to view snapshot history →", Color.AQUA)),
        ]
        actions.append(
            Action(
                label=line(
                    text("● ", Color.GREEN),
                    text(subject.display_name, Color.AQUA, bold=True),
                    label(f"  —  {count} snapshots"),
                ),
                tooltip=tooltip,
                token=encode(SnapshotList(subject=index)),
                width=FULL_ROW,
            )
        )

    if route.page > 0:
        actions.append(
            Action(
                label=line(label("← Previous")),
                tooltip=[line(label(f"Page {route.page} of {pages}"))],
                token=encode(ListPage(page=route.page - 1)),
                width=HALF_ROW,
            )
        )
    if route.page < pages - 1:
        actions.append(
            Action(
                label=line(label("Next →")),
                tooltip=[line(label(f"Page {route.page + 2} of {pages}"))],
                token=encode(ListPage(page=route.page + 1)),
                width=HALF_ROW,
            )
        )

    return Screen(
        title=line(text("SlabSync  —  Player List", Color.GOLD, bold=True)),
        body=[
            line(
                label(f"Page {route.page + 1} of {pages}"),
                text(DOT, Color.DARK_GRAY),
                label(f"{total} players tracked"),
            )
        ],
        actions=actions,
    )


def _snapshot_tooltip(snapshot: Snapshot) -> List[TextBlock]:
    vitals = snapshot.vitals
    location = snapshot.location
    tooltip = [
        line(label(snapshot.formatted_time())),
        blank(),
        line(label("Health:  "), text(f"{format_health(vitals.health)}/20 ❤", health_color(vitals.health))),
        line(label("Food:    "), text(f"{vitals.food}/20", Color.YELLOW)),
        line(
            label("XP:      "),
            text(f"Level {snapshot.progression.level}  ({snapshot.progression.percent}%)", Color.GREEN),
        ),
        line(label("Mode:    "), value(snapshot.mode.value)),
        line(label("Location:"), value(f" {location.x}, {location.y}, {location.z}")),
    ]
    if snapshot.mount is not None:
        tooltip.append(line(label("Riding:  "), text(snapshot.mount, Color.PURPLE)))
    else:
        tooltip.append(blank())
    tooltip += [blank(), line(text("Click to view full details →", Color.AQUA))]
    return tooltip


def build_snapshot_list(route: SnapshotList, source: DataSource, now: int, page_size: int = PAGE_SIZE) -> Screen:
    subject = source.subject(route.subject)
    count = source.snapshot_count(route.subject)

    actions: List[Action] = []
    for index in range(count):
        snapshot = source.snapshot(route.subject, index)
        actions.append(
            Action(
                label=line(
                    text(f"#{snapshot.sequence_id}", Color.DARK_GRAY),
                    text(DOT, Color.DARK_GRAY),
                    text(relative_age(snapshot.captured_at, now), Color.YELLOW),
                    text(DOT, Color.DARK_GRAY),
                    text(snapshot.location.server_name, Color.AQUA),
                    label(f" / {snapshot.location.world_name}"),
                ),
                tooltip=_snapshot_tooltip(snapshot),
                token=encode(SnapshotDetail(subject=route.subject, snapshot=index)),
                width=FULL_ROW,
            )
        )

    back_page = origin_page(route.subject, page_size)
    actions.append(
        Action(
            label=line(label("← Back to player list")),
            tooltip=[line(label(f"Return to page {back_page + 1}"))],
            token=encode(ListPage(page=back_page)),
            width=FULL_ROW,
        )
    )

    return Screen(
        title=line(text(f"{subject.display_name}  —  Snapshots", Color.AQUA, bold=True)),
        body=[
            line(label("UUID:  "), text(subject.identifier, Color.DARK_GRAY)),
            line(
                label(f"{count} snapshots stored"),
                text(DOT, Color.DARK_GRAY),
                text("Most recent first", Color.DARK_GRAY),
            ),
        ],
        actions=actions,
    )


def build_snapshot_detail(route: SnapshotDetail, source: DataSource, now: int, page_size: int = PAGE_SIZE) -> Screen:
    subject = source.subject(route.subject)
    snapshot = source.snapshot(route.subject, route.snapshot)
    location = snapshot.location
    vitals = snapshot.vitals
    progression = snapshot.progression
    storage = snapshot.storage

    body = [
        line(
            label("Snapshot: "), value(f"#{snapshot.sequence_id}"),
            sep(), label("Saved: "), value(snapshot.formatted_time()),
        ),
        line(
            label("Server:   "), value(location.server_name),
            sep(), label("World: "), value(location.world_name),
        ),
        line(label("Location: "), value(f"X:{location.x}  Y:{location.y}  Z:{location.z}")),
        divider(),
        line(
            label("Health:   "), text(f"{format_health(vitals.health)} / 20 ❤", health_color(vitals.health)),
            sep(), label("Food:  "), text(f"{vitals.food} / 20", Color.YELLOW),
        ),
        line(
            label("XP Level: "), value(str(progression.level)),
            sep(), label("XP: "), value(f"{progression.percent}%"),
        ),
        line(
            label("Gamemode: "), value(snapshot.mode.value),
            sep(), label("Riding: "), value(snapshot.mount or "—"),
        ),
        divider(),
        line(
            label("Inventory:    "), value(f"{storage.inventory_count} / 36 slots used"),
            sep(), label("Ender Chest: "), value(f"{storage.ender_chest_count} / 27 slots used"),
        ),
    ]

    actions = [
        Action(
            label=line(text("⚠ Restore this snapshot", Color.RED, bold=True)),
            tooltip=[
                line(text(f"Overwrite {subject.display_name}'s current state", Color.RED)),
                line(label(f"with snapshot #{snapshot.sequence_id} from {location.server_name}")),
                blank(),
                line(text("This action cannot be undone.", Color.RED)),
            ],
            token=encode(RestorePreview(subject=route.subject, snapshot=route.snapshot)),
            width=FULL_ROW,
        ),
        Action(
            label=line(label("← Back to snapshots")),
            tooltip=[line(label(f"Return to {subject.display_name}'s snapshot list"))],
            token=encode(SnapshotList(subject=route.subject)),
            width=200,
        ),
        Action(
            label=line(text("✖ Close", Color.DARK_GRAY)),
            tooltip=[line(text("Close this dialog", Color.DARK_GRAY))],
            token=None,
            width=95,
        ),
    ]

    return Screen(
        title=line(text(f"Snapshot Detail  —  {subject.display_name}", Color.GOLD, bold=True)),
        body=body,
        actions=actions,
        can_close_with_escape=True,
    )


def build_restore_preview(route: RestorePreview, source: DataSource, now: int, page_size: int = PAGE_SIZE) -> Screen:
    subject = source.subject(route.subject)
    snapshot = source.snapshot(route.subject, route.snapshot)

    return Screen(
        title=line(text("Restore — Not Implemented", Color.RED)),
        body=[
            line(text("This is a prototype demo.", Color.YELLOW)),
            line(label("In production this would restore:")),
            blank(),
            line(label("Player:   "), value(subject.display_name)),
            line(label("Snapshot: "), value(f"#{snapshot.sequence_id}  ({snapshot.formatted_time()})")),
            line(label("Server:   "), value(snapshot.location.server_name)),
            blank(),
            line(text("The restore flow would show a confirmation", Color.DARK_GRAY)),
            line(text("dialog before applying any changes.", Color.DARK_GRAY)),
        ],
        actions=[],
        kind="notice",
    )


def restore_message(route: RestorePreview, source: DataSource) -> TextBlock:
    """Informational chat line describing what the restore stub would do."""
    subject = source.subject(route.subject)
    snapshot = source.snapshot(route.subject, route.snapshot)
    return line(
        text("[Demo] ", Color.GOLD),
        label("Restore triggered: "),
        text(subject.display_name, Color.AQUA),
        text(f" → snapshot #{snapshot.sequence_id}", Color.YELLOW),
    )


Builder = Callable[..., Screen]

BUILDERS: Dict[str, Builder] = {
    "list": build_list_page,
    "player": build_snapshot_list,
    "snapshot": build_snapshot_detail,
    "restore": build_restore_preview,
}


def build_screen(route: Route, source: DataSource, now: int, page_size: int = PAGE_SIZE) -> Screen:
    return BUILDERS[route.kind](route, source, now, page_size)
