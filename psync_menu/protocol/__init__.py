from psync_menu.protocol.errors import DecodeError, NavigationError, RangeError
from psync_menu.protocol.models import Action, ClickRequest, Color, Screen, Span, TextBlock
from psync_menu.protocol.routes import ListPage, RestorePreview, Route, SnapshotDetail, SnapshotList
from psync_menu.protocol.tokens import DEFAULT_NAMESPACE, decode, encode, qualify, split_identifier

__all__ = [
    "Action",
    "ClickRequest",
    "Color",
    "DEFAULT_NAMESPACE",
    "DecodeError",
    "ListPage",
    "NavigationError",
    "RangeError",
    "RestorePreview",
    "Route",
    "Screen",
    "SnapshotDetail",
    "SnapshotList",
    "Span",
    "TextBlock",
    "decode",
    "encode",
    "qualify",
    "split_identifier",
]
