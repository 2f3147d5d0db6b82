"""Token codec: routes <-> opaque `<kind>/<args...>` strings.

Wire format (stable):

    list/<page>
    player/<subject>
    snapshot/<subject>/<snapshot>
    restore/<subject>/<snapshot>

Hosts sharing a click channel may carry the token inside a namespaced
identifier such as `psync:list/0`; see `qualify` and `split_identifier`.
"""

from __future__ import annotations

from psync_menu.protocol.errors import DecodeError
from psync_menu.protocol.routes import ROUTE_FIELDS, Route


DEFAULT_NAMESPACE = "psync"
SEPARATOR = "/"


def encode(route: Route) -> str:
    _, fields = ROUTE_FIELDS[route.kind]
    return SEPARATOR.join([route.kind, *(str(getattr(route, name)) for name in fields)])


def _parse_index(raw: str) -> int:
    # ASCII digits only, canonical form: "0" or no leading zero.
    if not raw or not (raw.isascii() and raw.isdigit()):
        raise DecodeError(f"not a non-negative integer: {raw!r}")
    if len(raw) > 1 and raw[0] == "0":
        raise DecodeError(f"non-canonical integer: {raw!r}")
    try:
        return int(raw)
    except ValueError as exc:
        raise DecodeError(f"integer out of range: {raw[:16]}...") from exc


def decode(token: str) -> Route:
    if not isinstance(token, str):
        raise DecodeError(f"token must be a string, got {type(token).__name__}")

    kind, *args = token.split(SEPARATOR)
    entry = ROUTE_FIELDS.get(kind)
    if entry is None:
        raise DecodeError(f"unknown route kind: {kind!r}")

    model, fields = entry
    if len(args) != len(fields):
        raise DecodeError(f"'{kind}' takes {len(fields)} argument(s), got {len(args)}")

    values = {name: _parse_index(raw) for name, raw in zip(fields, args)}
    return model(**values)


def qualify(token: str, namespace: str = DEFAULT_NAMESPACE) -> str:
    return f"{namespace}:{token}"


def split_identifier(identifier: str, namespace: str = DEFAULT_NAMESPACE) -> str:
    """Return the token inside `namespace:token`, rejecting foreign namespaces."""
    if not isinstance(identifier, str):
        raise DecodeError(f"identifier must be a string, got {type(identifier).__name__}")
    prefix, colon, token = identifier.partition(":")
    if not colon:
        raise DecodeError(f"identifier has no namespace: {identifier!r}")
    if prefix != namespace:
        raise DecodeError(f"foreign namespace: {prefix!r}")
    return token
