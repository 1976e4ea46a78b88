"""Encoding between flat i3 workspace names and (group, local number) pairs.

Grouped workspaces are named ``"<N>:<group name>"`` with
``N = group_number * group_size + local_number``. i3 sorts workspaces by the
leading number, so every group occupies a contiguous block of ``group_size``
numbers and the group number alone decides where the block sits. Ungrouped
workspaces keep a bare number as their name.

Examples:
    >>> naming = WorkspaceNaming(group_size=100)
    >>> naming.encode(Group("work", 1), 2)
    '102:work'
    >>> naming.decode("102:work")
    Workspace(group=Group(name='work', group_number=1), local_number=2)
    >>> naming.decode("7")
    Workspace(group=None, local_number=7)
"""

import re
from typing import Optional

from ..models.workspace import Group, Workspace
from .errors import WorkspaceNameError

DEFAULT_GROUP_SIZE = 100
SEPARATOR = ":"

# Characters i3 accepts in an unquoted command argument
_SAFE_NAME = re.compile(r"[A-Za-z0-9_:.+-]+")


class WorkspaceNaming:
    """Bidirectional codec for flat workspace names.

    Args:
        group_size: Number of flat numbers reserved for each group
    """

    def __init__(self, group_size: int = DEFAULT_GROUP_SIZE):
        if group_size < 2:
            raise ValueError(f"Group size must be at least 2, got {group_size}")
        self.group_size = group_size

    def encode(self, group: Optional[Group], local_number: int) -> str:
        """Build the flat name for ``local_number`` in ``group``.

        Raises:
            WorkspaceNameError: If the local number does not fit the group block
        """
        if group is None:
            if local_number < 0:
                raise WorkspaceNameError(f"Workspace number must be >= 0, got {local_number}")
            return str(local_number)

        if not (1 <= local_number < self.group_size):
            raise WorkspaceNameError(
                f"Local workspace number must be 1-{self.group_size - 1}, got {local_number}"
            )
        number = group.group_number * self.group_size + local_number
        return f"{number}{SEPARATOR}{group.name}"

    def decode(self, name: str) -> Workspace:
        """Parse a flat workspace name.

        Raises:
            WorkspaceNameError: If the leading number is missing or malformed
        """
        number_part, separator, group_name = name.partition(SEPARATOR)
        negative = number_part.startswith("-")
        digits = number_part[1:] if negative else number_part
        # int() alone would also take "1_01", " 101" and non-ASCII digits
        if not (digits.isascii() and digits.isdigit()):
            raise WorkspaceNameError(
                f"Workspace name '{name}' does not start with a workspace number"
            )
        if negative:
            raise WorkspaceNameError(f"Workspace name '{name}' has a negative number")
        number = int(number_part)

        group_number, local_number = divmod(number, self.group_size)
        # Plain i3 names such as "3:web" or "200:music" are not group members
        if not separator or not group_name.strip() or group_number == 0 or local_number == 0:
            return Workspace(group=None, local_number=number, flat_name=name)

        return Workspace(
            group=Group(group_name, group_number),
            local_number=local_number,
            flat_name=name,
        )


def quote_workspace_name(name: str) -> str:
    """Quote a workspace name for an i3 command if it needs it.

    Names made only of letters, digits and ``_:.+-`` are returned unchanged.
    Anything else is double-quoted, so i3 command separators such as ``;``
    and ``,`` stay part of the name.

    Examples:
        >>> quote_workspace_name("101:work")
        '101:work'
        >>> quote_workspace_name("101:side project")
        '"101:side project"'
        >>> quote_workspace_name("101:x;kill")
        '"101:x;kill"'
    """
    if _SAFE_NAME.fullmatch(name):
        return name
    escaped = name.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'
