from __future__ import annotations

import logging
from collections import deque

from psync_menu.datasource.demo import demo_source
from psync_menu.presentation.recording import RecordingPresenter
from psync_menu.protocol.models import ClickRequest
from psync_menu.protocol.routes import ListPage, SnapshotDetail, SnapshotList
from psync_menu.protocol.tokens import decode, encode
from psync_menu.registry import REQUIRED_SOURCE_METHODS
from psync_menu.runtime.router import Router
from psync_menu.screens.builders import build_screen


NOW = 1_700_000_000


class SpySource:
    """Delegating wrapper that records every attribute the router touches."""

    def __init__(self, inner):
        self._inner = inner
        self.calls = []

    def __getattr__(self, name):
        self.calls.append(name)
        return getattr(self._inner, name)


def make_router(source=None):
    presenter = RecordingPresenter()
    router = Router(source or demo_source(NOW), presenter, clock=lambda: NOW)
    return router, presenter


def click(router, presenter, token, viewer="viewer-1"):
    presenter.clear()
    handled = router.handle(viewer, token)
    return handled, presenter.screens


def test_open_shows_first_page():
    router, presenter = make_router()

    assert router.open("viewer-1") is True
    assert len(presenter.screens) == 1
    assert presenter.screens[0].tokens()[-1] == "list/1"


def test_last_subject_index_is_accepted():
    router, presenter = make_router()

    handled, screens = click(router, presenter, "player/17")
    assert handled is True
    assert screens[0].title.plain == "ShadowFox  —  Snapshots"


def test_out_of_range_subject_is_ignored():
    router, presenter = make_router()

    handled, screens = click(router, presenter, "player/18")
    assert handled is False
    assert presenter.events == []


def test_out_of_range_snapshot_and_page_are_ignored():
    router, presenter = make_router()

    # Subject 0 has 4 snapshots, the demo set has 3 pages.
    for token in ("snapshot/0/4", "restore/0/4", "list/3", "snapshot/99/0"):
        handled, _ = click(router, presenter, token)
        assert handled is False, token
    assert presenter.events == []


def test_malformed_and_foreign_tokens_are_ignored(caplog):
    router, presenter = make_router()
    caplog.set_level(logging.DEBUG, logger="psync_menu.runtime.router")

    for token in ("bogus/1", "list/", "list/abc", "snapshot/1", "form/submit", ""):
        assert router.handle("viewer-1", token) is False
    assert presenter.events == []
    assert "ignoring token 'bogus/1'" in caplog.text


def test_navigation_round_trip():
    router, presenter = make_router()
    router.open("viewer-1")
    first_page = presenter.screens[-1]

    subject_action = first_page.actions[3]
    assert decode(subject_action.token) == SnapshotList(subject=3)
    _, screens = click(router, presenter, subject_action.token)
    snapshot_list = screens[0]
    assert snapshot_list.title.plain == "EpicBuilder  —  Snapshots"

    _, screens = click(router, presenter, snapshot_list.actions[0].token)
    detail = screens[0]
    assert detail == build_screen(SnapshotDetail(subject=3, snapshot=0), router.source, NOW)

    back = detail.actions[1].token
    assert decode(back) == SnapshotList(subject=3)
    _, screens = click(router, presenter, back)
    assert screens[0] == snapshot_list

    _, screens = click(router, presenter, snapshot_list.actions[-1].token)
    assert screens[0] == first_page


def test_restore_presents_notice_and_notifies_once_without_writes():
    spy = SpySource(demo_source(NOW))
    router, presenter = make_router(spy)
    before = [spy._inner.subject(i) for i in range(spy._inner.subject_count())]

    assert router.handle("viewer-1", "restore/0/0") is True

    kinds = [kind for kind, _, _ in presenter.events]
    assert kinds == ["present", "notify"]
    notice = presenter.screens[0]
    assert notice.kind == "notice"
    assert notice.actions == []
    assert presenter.messages[0].plain == "[Demo] Restore triggered: AlphaWolf99 → snapshot #1000"
    assert set(spy.calls) <= set(REQUIRED_SOURCE_METHODS)
    assert before == [spy._inner.subject(i) for i in range(spy._inner.subject_count())]


def test_restore_is_logged(caplog):
    router, _ = make_router()
    caplog.set_level(logging.INFO, logger="psync_menu.runtime.router")

    router.handle("viewer-1", "restore/3/2")
    assert "EpicBuilder -> snapshot #1032" in caplog.text


def test_viewers_are_independent():
    router, presenter = make_router()

    router.handle("alice", "player/1")
    router.handle("bob", "snapshot/2/0")
    router.handle("alice", "list/2")

    assert [viewer for _, viewer, _ in presenter.events] == ["alice", "bob", "alice"]
    assert presenter.screens[1].title.plain == "Snapshot Detail  —  DarkMatter"


def test_every_reachable_token_round_trips():
    router, presenter = make_router()
    seen = set()
    queue = deque([encode(ListPage(page=0))])

    while queue:
        token = queue.popleft()
        if token in seen:
            continue
        seen.add(token)
        route = router.resolve(token)
        assert encode(route) == token
        assert decode(encode(route)) == route

        presenter.clear()
        assert router.handle("viewer-1", token) is True
        for action in presenter.screens[0].actions:
            if action.token is not None:
                queue.append(action.token)

    subjects = demo_source(NOW).subject_count()
    snapshots = sum(demo_source(NOW).snapshot_count(i) for i in range(subjects))
    assert len(seen) == 3 + subjects + 2 * snapshots


def test_namespaced_identifiers():
    router, presenter = make_router()

    assert router.handle_identifier("viewer-1", "psync:player/2") is True
    assert router.handle_identifier("viewer-1", "demomenu:form/submit") is False
    assert router.handle_identifier("viewer-1", "player/2") is False
    assert len(presenter.screens) == 1


def test_handle_request_validates_payload():
    router, presenter = make_router()

    assert router.handle_request({"viewer_id": "v", "token": "list/1"}) is True
    assert router.handle_request(ClickRequest(viewer_id="v", token="player/0", field_values={"x": 1})) is True
    assert router.handle_request({"viewer_id": "v", "token": "list/1", "extra": True}) is False
    assert router.handle_request({"viewer_id": "v"}) is False
    assert len(presenter.screens) == 2


def test_open_rejects_missing_page():
    router, presenter = make_router()

    assert router.open("viewer-1", page=5) is False
    assert router.open("viewer-1", page=-1) is False
    assert presenter.events == []


def test_relative_ages_use_the_router_clock():
    router, presenter = make_router()
    router.clock = lambda: NOW + 86400

    router.handle("viewer-1", "player/0")
    assert presenter.screens[0].actions[0].label.plain.startswith("#1000  ·  1d ago")


def test_non_string_identifier_is_ignored():
    router, presenter = make_router()

    assert router.handle_identifier("viewer-1", None) is False
    assert router.handle_identifier("viewer-1", 42) is False
    assert router.handle("viewer-1", None) is False
    assert presenter.events == []
