"""Deterministic demo dataset: 18 subjects with 4-8 snapshots each."""

from __future__ import annotations

import hashlib
import time
import uuid
from typing import List, Optional

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


DEMO_NAMES = (
    "AlphaWolf99", "CrystalQueen", "DarkMatter",
    "EpicBuilder", "FrozenLake", "GlitchMaster",
    "HeroicPanda", "IcyArrow", "JadeWarrior",
    "KingSlayer", "LunaRider", "MagicStorm",
    "NightOwl", "OceanWave", "PixelKnight",
    "QuickSilver", "RedDragon", "ShadowFox",
)

SERVERS = ("survival", "creative", "skyblock", "minigames")
WORLDS = ("overworld", "the_nether", "the_end", "skyblock_world")
MODES = (GameMode.SURVIVAL, GameMode.CREATIVE, GameMode.ADVENTURE)
MOUNTS = (None, None, "Horse", "Boat", "Minecart", None, "Llama")


def name_uuid(name: str) -> str:
    """Name-based (MD5, version 3) UUID computed over the raw name bytes."""
    digest = hashlib.md5(name.encode("utf-8")).digest()
    return str(uuid.UUID(bytes=digest, version=3))


def _demo_snapshots(subject_index: int, now: int) -> List[Snapshot]:
    count = 4 + subject_index % 5
    snapshots = []
    for i in range(count):
        k = subject_index + i
        snapshots.append(
            Snapshot(
                sequence_id=1000 + subject_index * 10 + i,
                location=Location(
                    server_name=SERVERS[k % len(SERVERS)],
                    world_name=WORLDS[k % len(WORLDS)],
                    x=(subject_index * 37 + i * 13) % 4000 - 2000,
                    y=60 + (i * 7) % 100,
                    z=(subject_index * 53 + i * 17) % 4000 - 2000,
                ),
                vitals=Vitals(
                    health=max(1.0, 20.0 - (i % 5) * 2.5),
                    food=max(0, 20 - (i % 4) * 3),
                ),
                progression=Progression(
                    level=subject_index + i * 3,
                    percent=(subject_index * 7 + i * 19) % 100,
                ),
                mode=MODES[k % len(MODES)],
                mount=MOUNTS[k % len(MOUNTS)],
                storage=StorageUsage(
                    inventory_count=18 + k % 18,
                    ender_chest_count=k % 27,
                ),
                captured_at=now - (i * 3600 + subject_index * 600),
            )
        )
    return snapshots


def demo_subjects(now: int) -> List[Subject]:
    return [
        Subject(
            display_name=name,
            identifier=name_uuid(name),
            snapshots=_demo_snapshots(index, now),
        )
        for index, name in enumerate(DEMO_NAMES)
    ]


def demo_source(now: Optional[int] = None) -> InMemoryDataSource:
    if now is None:
        now = int(time.time())
    return InMemoryDataSource(demo_subjects(now))
