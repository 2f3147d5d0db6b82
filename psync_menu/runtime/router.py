
"""Stateless navigation router.

Every click carries an opaque token. The router decodes it into a route,
checks the route's indices against the data source, builds the next screen
and hands it to the presenter. Nothing is remembered between clicks, so any
number of viewers can be served concurrently by one router.

Tokens that fail to decode or point outside the data source are dropped
without any visible effect: other producers may share the click channel.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Dict, Optional, Union

from pydantic import ValidationError

from psync_menu.datasource.base import DataSource
from psync_menu.presentation.base import Presenter
from psync_menu.protocol.errors import NavigationError, RangeError
from psync_menu.protocol.models import ClickRequest
from psync_menu.protocol.routes import (
    ListPage,
    RestorePreview,
    Route,
    SnapshotDetail,
)
from psync_menu.protocol.tokens import DEFAULT_NAMESPACE, decode, split_identifier
from psync_menu.screens.builders import PAGE_SIZE, build_screen, restore_message, total_pages


logger = logging.getLogger(__name__)


def _check(index: int, size: int, what: str) -> None:
    if not 0 <= index < size:
        raise RangeError(f"{what} index {index} out of range [0, {size})")


class Router:
    def __init__(
        self,
        source: DataSource,
        presenter: Presenter,
        clock: Callable[[], float] = time.time,
        page_size: int = PAGE_SIZE,
        namespace: str = DEFAULT_NAMESPACE,
    ):
        self.source = source
        self.presenter = presenter
        self.clock = clock
        self.page_size = page_size
        self.namespace = namespace

    def validate(self, route: Route) -> Route:
        if isinstance(route, ListPage):
            _check(route.page, total_pages(self.source.subject_count(), self.page_size), "page")
            return route

        _check(route.subject, self.source.subject_count(), "subject")
        if isinstance(route, (SnapshotDetail, RestorePreview)):
            _check(route.snapshot, self.source.snapshot_count(route.subject), "snapshot")
        return route

    def resolve(self, token: str) -> Route:
        """Decode and bounds-check a token; raises `DecodeError` or `RangeError`."""
        return self.validate(decode(token))

    def _show(self, viewer_id: str, route: Route) -> None:
        now = int(self.clock())
        screen = build_screen(route, self.source, now, self.page_size)
        self.presenter.present(viewer_id, screen)

        if isinstance(route, RestorePreview):
            subject = self.source.subject(route.subject)
            snapshot = self.source.snapshot(route.subject, route.snapshot)
            logger.info(
                "restore requested by %s: %s -> snapshot #%s (not applied)",
                viewer_id,
                subject.display_name,
                snapshot.sequence_id,
            )
            self.presenter.notify(viewer_id, restore_message(route, self.source))

    def handle(self, viewer_id: str, token: str, field_values: Optional[Dict[str, Any]] = None) -> bool:
        """Route one click. Returns False when the token was ignored."""
        try:
            route = self.resolve(token)
        except NavigationError as exc:
            logger.debug("ignoring token %r from %s: %s", token, viewer_id, exc)
            return False

        # `field_values` carries form values delivered with a click; menu screens have no inputs.
        self._show(viewer_id, route)
        return True

    def handle_identifier(self, viewer_id: str, identifier: str) -> bool:
        """Route a namespaced identifier such as `psync:list/0`."""
        try:
            token = split_identifier(identifier, self.namespace)
        except NavigationError as exc:
            logger.debug("ignoring identifier %r from %s: %s", identifier, viewer_id, exc)
            return False
        return self.handle(viewer_id, token)

    def handle_request(self, raw_request: Union[ClickRequest, Dict[str, Any]]) -> bool:
        if isinstance(raw_request, ClickRequest):
            request = raw_request
        else:
            try:
                request = (
                    ClickRequest.model_validate(raw_request)
                    if hasattr(ClickRequest, "model_validate")
                    else ClickRequest.parse_obj(raw_request)
                )
            except ValidationError as exc:
                logger.debug("ignoring malformed click payload: %s", exc)
                return False
        return self.handle(request.viewer_id, request.token, request.field_values)

    def open(self, viewer_id: str, page: int = 0) -> bool:
        """Entry point for external triggers (a command): show the player list."""
        try:
            route = self.validate(ListPage(page=page))
        except (NavigationError, ValidationError) as exc:
            logger.debug("cannot open page %r for %s: %s", page, viewer_id, exc)
            return False
        self._show(viewer_id, route)
        return True
