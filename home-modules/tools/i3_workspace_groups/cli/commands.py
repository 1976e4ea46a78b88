"""CLI command handlers for i3 workspace groups.

Every subcommand reads the i3 workspace list once, builds a GroupContext and
runs a single controller operation.
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import argcomplete

from .. import __version__
from ..core.config import load_config
from ..core.context import GroupContext
from ..core.controller import WorkspaceGroupsController
from ..core.errors import WorkspaceGroupsError
from ..core.i3_client import I3Client
from ..core.menu import RofiMenu
from .formatters import console, format_group_table, format_groups_json
from .logging_config import LOGGER_NAME, log_timing, setup_logging

logger = logging.getLogger(__name__)


# ANSI color codes for output
class Colors:
    RESET = "\033[0m"
    RED = "\033[31m"


def print_error(message: str) -> None:
    """Print error message in red."""
    print(f"{Colors.RED}✗ Error:{Colors.RESET} {message}", file=sys.stderr)


async def _run_operation(args: argparse.Namespace) -> int:
    """Build the context and run the controller operation for ``args.command``."""
    config = load_config(args.config)
    menu = RofiMenu(command=config.menu_command, args=config.menu_args)

    async with I3Client(dry_run=args.dry_run) as client:
        context = await GroupContext.load(client, config)
        controller = WorkspaceGroupsController(context, client, menu)

        if args.command == "focus-workspace":
            await controller.focus_workspace(args.local_number)
        elif args.command == "focus-group":
            await controller.focus_group(args.group_name)
        elif args.command == "move-container-to-workspace":
            await controller.move_container_to_workspace(args.local_number)
        elif args.command == "move-container-to-group":
            await controller.move_container_to_group(args.group_name)
        elif args.command == "move-workspace-to-group":
            await controller.move_workspace_to_group(args.group_name)
        elif args.command == "rename-group":
            await controller.rename_group(args.new_group_name)
        else:
            raise ValueError(f"Unknown command: {args.command}")

        if not client.sent_commands:
            logger.info("No command sent")
    return 0


async def cmd_list_groups(args: argparse.Namespace) -> int:
    """List groups with their group numbers and workspaces."""
    config = load_config(args.config)

    async with I3Client() as client:
        context = await GroupContext.load(client, config)

    if args.json:
        print(json.dumps(format_groups_json(context), indent=2))
    else:
        console.print(format_group_table(context))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="i3-workspace-groups",
        description="Manage named groups of i3 workspaces",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"i3-workspace-groups {__version__}"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging (INFO level)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging (DEBUG level, includes verbose)"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Log i3 commands instead of running them"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Config file (default: ~/.config/i3/workspace-groups.json)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    for name, help_text in (
        ("focus-workspace", "Focus a different workspace in the focused group"),
        ("move-container-to-workspace",
         "Move selected container to a different workspace in the focused group"),
    ):
        sub = subparsers.add_parser(name, help=help_text, description=help_text)
        sub.add_argument(
            "local_number",
            metavar="local-number",
            type=int,
            nargs="?",
            help="Workspace number within the group (asked with rofi if omitted)"
        )

    for name, help_text in (
        ("focus-group", "Focus a different group"),
        ("move-container-to-group", "Move selected container to a different group"),
        ("move-workspace-to-group", "Move the focused workspace to a different group"),
    ):
        sub = subparsers.add_parser(name, help=help_text, description=help_text)
        sub.add_argument(
            "group_name",
            metavar="group-name",
            nargs="?",
            help="Group name (selected with rofi if omitted)"
        )

    parser_rename = subparsers.add_parser(
        "rename-group",
        help="Rename focused group",
        description="Rename every workspace of the focused group, keeping their order"
    )
    parser_rename.add_argument(
        "new_group_name",
        metavar="new-group-name",
        nargs="?",
        help="New group name (asked with rofi if omitted)"
    )

    parser_list = subparsers.add_parser(
        "list-groups",
        help="List groups",
        description="Show all groups with their numbers and workspaces"
    )
    parser_list.add_argument(
        "--json",
        action="store_true",
        help="Output in JSON format"
    )

    return parser


def cli_main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    argcomplete.autocomplete(parser)
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose, debug=args.debug)

    if not args.command:
        parser.print_help()
        return 0

    handler = cmd_list_groups if args.command == "list-groups" else _run_operation
    try:
        with log_timing(args.command, logging.getLogger(LOGGER_NAME)):
            return asyncio.run(handler(args))
    except WorkspaceGroupsError as e:
        print_error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(cli_main())
