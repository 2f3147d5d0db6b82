from psync_menu.datasource.base import DataSource
from psync_menu.datasource.demo import demo_source, demo_subjects
from psync_menu.datasource.memory import InMemoryDataSource
from psync_menu.datasource.models import (
    GameMode,
    Location,
    Progression,
    Snapshot,
    StorageUsage,
    Subject,
    Vitals,
)

__all__ = [
    "DataSource",
    "GameMode",
    "InMemoryDataSource",
    "Location",
    "Progression",
    "Snapshot",
    "StorageUsage",
    "Subject",
    "Vitals",
    "demo_source",
    "demo_subjects",
]
