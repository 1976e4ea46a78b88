"""Rich formatters for workspace group listings."""

from typing import Any, Dict, List

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..core.context import GroupContext


# Global console instance
console = Console()


def format_group_table(context: GroupContext) -> Table:
    """Format all groups as a Rich table, in i3 workspace order.

    Args:
        context: Snapshot of the live workspaces

    Returns:
        Rich Table object ready for display
    """
    focused = context.focused_workspace()

    table = Table(title="Workspace Groups", show_header=True, header_style="bold cyan")
    table.add_column("Group", style="bold green")
    table.add_column("Number", justify="right", style="yellow")
    table.add_column("Workspaces", style="blue")
    table.add_column("Next free", justify="right", style="magenta")

    if context.index.ungrouped:
        numbers = sorted(ws.local_number for ws in context.index.ungrouped)
        table.add_row(
            _mark_focused(context.default_group_name, focused.group is None),
            "-",
            ", ".join(str(n) for n in numbers),
            str(context.index.lowest_free_local_number(None)),
        )

    for entry in context.index.groups():
        name = entry.group.name
        numbers = sorted(entry.local_numbers())
        table.add_row(
            _mark_focused(name, focused.group_name == name),
            str(entry.group.group_number),
            ", ".join(str(n) for n in numbers),
            str(context.index.lowest_free_local_number(name)),
        )

    return table


def format_groups_json(context: GroupContext) -> List[Dict[str, Any]]:
    """Format all groups as JSON-compatible dicts."""
    focused = context.focused_workspace()
    return [
        {
            "name": entry.group.name,
            "group_number": entry.group.group_number,
            "local_numbers": sorted(entry.local_numbers()),
            "focused": focused.group_name == entry.group.name,
        }
        for entry in context.index.groups()
    ]


def _mark_focused(name: str, focused: bool) -> str:
    name = escape(name)
    return f"{name} [dim](focused)[/dim]" if focused else name
