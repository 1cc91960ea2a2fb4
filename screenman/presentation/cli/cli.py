"""
CLI Module

Architectural Intent:
- Command-line interface for screenman
- Entry point for all user interactions, including the TUI
- Delegates to application use cases via composition root
- Supports --verbose/--debug flags for log level control
"""

import argparse
import asyncio
import json
import logging
import os
import sys
import traceback

from screenman import composition_root
from screenman.domain.value_objects.display_item import is_actionable
from screenman.infrastructure.adapters.console_adapter import (
    ConsoleNotifier,
    ConsolePrompt,
)
from screenman.infrastructure.config import load_config
from screenman.infrastructure.logging import configure_logging


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="screenman", description="screenman: manage GNU screen sessions"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose output"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output with tracebacks"
    )
    parser.add_argument(
        "--config", "-c", default=None, help="Path to config file (screenman.json)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("tui", help="Launch the interactive session browser")

    list_parser = subparsers.add_parser("list", help="List screen sessions")
    list_parser.add_argument("--json", action="store_true", help="Print JSON")

    create_parser = subparsers.add_parser(
        "create", help="Create a detached session and open it"
    )
    create_parser.add_argument("name", help="Name of the new session")

    kill_parser = subparsers.add_parser("kill", help="Quit a screen session")
    kill_parser.add_argument("session", help="Session id, pid or name")

    rename_parser = subparsers.add_parser("rename", help="Rename a screen session")
    rename_parser.add_argument("session", help="Session id, pid or name")
    rename_parser.add_argument("new_name", help="New session name")

    remove_parser = subparsers.add_parser(
        "remove-all", help="Quit every screen session"
    )
    remove_parser.add_argument(
        "--yes", "-y", action="store_true", help="Do not ask for confirmation"
    )

    attach_parser = subparsers.add_parser(
        "attach", help="Detach a session elsewhere and attach it here"
    )
    attach_parser.add_argument("session", help="Session id, pid or name")

    return parser


async def _resolve_session(container, reference: str):
    """Find a listed session by full identifier, pid or display name."""
    sessions = await container.tree_source.list_sessions()
    for matcher in (
        lambda s: s.identifier == reference,
        lambda s: s.identifier.split(".", 1)[0] == reference,
        lambda s: s.display_name == reference,
    ):
        for session in sessions:
            if matcher(session):
                return session
    print(f"[-] No screen session matches '{reference}'")
    sys.exit(1)


async def _list(container, as_json: bool) -> None:
    items = await container.tree_source.list_children()
    if as_json:
        print(json.dumps([
            {
                "kind": item.kind,
                "identifier": item.key,
                "name": item.label,
                "attached": bool(item.record and item.record.attached),
            }
            for item in items
        ], indent=2))
    elif not items:
        print("[*] No screen sessions.")
    else:
        for item in items:
            if not is_actionable(item):
                print(f"[-] {item.label}")
                continue
            state = "attached" if item.record.attached else "detached"
            print(f"{item.key}\t{item.label}\t({state})")

    if any(not is_actionable(item) for item in items):
        sys.exit(1)


async def async_main():
    parser = _build_parser()
    args = parser.parse_args()

    config = load_config(args.config)

    # Configure logging based on flags
    if args.debug:
        level = logging.DEBUG
    elif args.verbose:
        level = logging.INFO
    else:
        level = logging.getLevelName(config.log_level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    configure_logging(level=level, log_file=config.log_file or None)

    verbose = args.verbose or args.debug

    if args.command is None:
        parser.print_help()
        return

    if args.command == "tui":
        from screenman.presentation.tui.app import ScreenSessionsApp

        app = ScreenSessionsApp(config)
        await app.run_async()
        return

    notifier = ConsoleNotifier()
    prompts = ConsolePrompt(
        answer=getattr(args, "new_name", None),
        assume_yes=getattr(args, "yes", False),
    )
    container = composition_root.create_container(config, notifier, prompts)

    try:
        if args.command == "list":
            await _list(container, args.json)
            return

        if args.command == "attach":
            session = await _resolve_session(container, args.session)
            argv = container.commands.reattach_argv(session.identifier)
            print(f"[*] Attaching to {session.identifier}...")
            try:
                os.execvp(argv[0], argv)
            except FileNotFoundError:
                print(f"[-] Error: {argv[0]} not found. Install screen and try again.")
                sys.exit(1)
            return

        if args.command == "create":
            success = await container.create_session.execute(args.name)
        elif args.command == "kill":
            session = await _resolve_session(container, args.session)
            success = await container.kill_session.execute(session)
        elif args.command == "rename":
            session = await _resolve_session(container, args.session)
            success = await container.rename_session.execute(session)
        else:
            await container.remove_all.execute()
            success = not notifier.errors

        if not success:
            sys.exit(1)
    except Exception as e:
        print(f"[-] {args.command} failed: {e}")
        if verbose:
            traceback.print_exc()
        sys.exit(1)
    finally:
        container.tree_source.dispose()


def main():
    asyncio.run(async_main())


if __name__ == "__main__":
    main()
