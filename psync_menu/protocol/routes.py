"""Typed navigation routes decoded from client tokens."""

from typing import Literal, Union

from pydantic import BaseModel, Field, StrictInt


Index = StrictInt


class _Route(BaseModel):
    class Config:
        extra = "forbid"
        frozen = True


class ListPage(_Route):
    kind: Literal["list"] = "list"
    page: Index = Field(ge=0)


class SnapshotList(_Route):
    kind: Literal["player"] = "player"
    subject: Index = Field(ge=0)


class SnapshotDetail(_Route):
    kind: Literal["snapshot"] = "snapshot"
    subject: Index = Field(ge=0)
    snapshot: Index = Field(ge=0)


class RestorePreview(_Route):
    kind: Literal["restore"] = "restore"
    subject: Index = Field(ge=0)
    snapshot: Index = Field(ge=0)


Route = Union[ListPage, SnapshotList, SnapshotDetail, RestorePreview]

# Argument fields in wire order, keyed by route kind.
ROUTE_FIELDS = {
    "list": (ListPage, ("page",)),
    "player": (SnapshotList, ("subject",)),
    "snapshot": (SnapshotDetail, ("subject", "snapshot")),
    "restore": (RestorePreview, ("subject", "snapshot")),
}
