"""Subject and snapshot records served by a data source."""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, Field, StrictInt, StrictStr


class _Record(BaseModel):
    class Config:
        extra = "forbid"
        frozen = True


class GameMode(str, Enum):
    SURVIVAL = "SURVIVAL"
    CREATIVE = "CREATIVE"
    ADVENTURE = "ADVENTURE"


class Location(_Record):
    server_name: StrictStr
    world_name: StrictStr
    x: StrictInt
    y: StrictInt
    z: StrictInt


class Vitals(_Record):
    health: float = Field(ge=0, le=20)
    food: StrictInt = Field(ge=0, le=20)


class Progression(_Record):
    level: StrictInt = Field(ge=0)
    percent: StrictInt = Field(ge=0, le=100)


class StorageUsage(_Record):
    inventory_count: StrictInt = Field(ge=0, le=36)
    ender_chest_count: StrictInt = Field(ge=0, le=27)


class Snapshot(_Record):
    sequence_id: StrictInt
    location: Location
    vitals: Vitals
    progression: Progression
    mode: GameMode
    mount: Optional[StrictStr] = None
    storage: StorageUsage
    captured_at: StrictInt

    def formatted_time(self) -> str:
        moment = datetime.fromtimestamp(self.captured_at, tz=timezone.utc)
        return moment.strftime("%Y-%m-%d %H:%M UTC")


class Subject(_Record):
    display_name: StrictStr
    identifier: StrictStr
    snapshots: Tuple[Snapshot, ...] = ()
