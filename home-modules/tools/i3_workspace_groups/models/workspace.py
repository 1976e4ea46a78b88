"""Workspace and group data models."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Group:
    """A named bucket of workspaces.

    Attributes:
        name: Group display name (the suffix of the flat workspace name)
        group_number: High-order part of the flat workspace number

    Examples:
        >>> Group("work", 1).name
        'work'
    """

    name: str
    group_number: int

    def __post_init__(self):
        """Validate group fields."""
        if not self.name or not self.name.strip():
            raise ValueError("Group name cannot be empty")
        if self.group_number < 1:
            raise ValueError(f"Group number must be >= 1, got {self.group_number}")


@dataclass(frozen=True)
class Workspace:
    """A decoded workspace: optional group plus local number."""

    group: Optional[Group]
    local_number: int
    # Live name the workspace was decoded from, if any
    flat_name: Optional[str] = field(default=None, compare=False, repr=False)

    @property
    def group_name(self) -> Optional[str]:
        return self.group.name if self.group else None

    @property
    def is_grouped(self) -> bool:
        return self.group is not None


@dataclass
class WorkspaceInfo:
    """Live workspace record as reported by i3 (GET_WORKSPACES).

    Attributes:
        name: Flat workspace name
        focused: Whether this is the focused workspace
        num: Leading workspace number parsed by i3 (-1 if none)
        output: Output the workspace is on
        visible: Whether the workspace is visible on its output
    """

    name: str
    focused: bool = False
    num: int = -1
    output: Optional[str] = None
    visible: bool = False

