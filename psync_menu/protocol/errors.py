"""Navigation error kinds.

Both kinds are dropped silently at the router boundary: a click channel may be
shared with other producers whose tokens must pass through harmlessly.
"""


class NavigationError(Exception):
    """Base class for tokens that cannot be turned into a screen."""


class DecodeError(NavigationError, ValueError):
    """Malformed or foreign token: unknown kind, wrong arity, bad integer."""


class RangeError(NavigationError, IndexError):
    """Well-formed route whose indices fall outside the data source."""
