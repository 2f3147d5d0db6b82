
"""CLI entrypoint for the snapshot browser menu."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Optional

from pydantic import ValidationError

from psync_menu.config import load_settings
from psync_menu.presentation.console import ConsolePresenter
from psync_menu.presentation.recording import RecordingPresenter
from psync_menu.registry import load_data_source
from psync_menu.runtime.router import Router
from psync_menu.runtime.serialization import stable_json_dumps


def browse(router: Router, viewer_id: str, read: Callable[[str], str] = input) -> int:
    """Interactive loop: show a screen, read an action number, follow its token."""
    presenter = router.presenter
    router.open(viewer_id)
    while presenter.current is not None:
        screen = presenter.current
        try:
            choice = read("> ").strip().lower()
        except EOFError:
            break
        if choice == "q":
            break
        if screen.kind == "notice":
            # Notices are terminal: any key dismisses them.
            break
        if not choice.isdigit() or not 1 <= int(choice) <= len(screen.actions):
            presenter.stream.write(f"Pick 1-{len(screen.actions)} or q\n")
            continue
        action = screen.actions[int(choice) - 1]
        if action.token is None:
            break
        router.handle(viewer_id, action.token)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="psync-menu")
    parser.add_argument("--source", help="data source: demo, a .json file or module:factory")
    parser.add_argument("--log-level", help="logging level (default from settings)")
    parser.add_argument("--viewer", default="console", help="viewer id passed to the router")
    subparsers = parser.add_subparsers(dest="command", required=True)

    open_parser = subparsers.add_parser("open")
    open_parser.add_argument("--page", type=int, default=0)
    click_parser = subparsers.add_parser("click")
    click_parser.add_argument("--token", required=True, help="token such as player/3 or psync:player/3")
    browse_parser = subparsers.add_parser("browse")
    browse_parser.add_argument("--show-tokens", action="store_true", help="print the identifier each action sends")

    args = parser.parse_args(argv)
    try:
        settings = load_settings(data_source=args.source, log_level=args.log_level)
    except ValidationError as exc:
        print(f"psync-menu: invalid settings: {exc}", file=sys.stderr)
        return 2
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        source = load_data_source(settings.data_source)
    except (TypeError, ValueError, ImportError, AttributeError) as exc:
        print(f"psync-menu: cannot load data source: {exc}", file=sys.stderr)
        return 2

    if args.command == "browse":
        namespace = settings.namespace if args.show_tokens else None
        router = Router(source, ConsolePresenter(namespace=namespace), namespace=settings.namespace)
        return browse(router, args.viewer)

    presenter = RecordingPresenter()
    router = Router(source, presenter, namespace=settings.namespace)
    if args.command == "open":
        router.open(args.viewer, args.page)
    elif ":" in args.token:
        router.handle_identifier(args.viewer, args.token)
    else:
        router.handle(args.viewer, args.token)

    print(stable_json_dumps(presenter.payload(), indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
