"""Index of live workspaces grouped by group name."""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Set

from ..models.workspace import Group, Workspace
from .errors import WorkspaceNameError
from .naming import WorkspaceNaming
from .sorted_hash import SortedHasher

logger = logging.getLogger(__name__)


@dataclass
class GroupEntry:
    """A group and the workspaces currently in it."""

    group: Group
    members: List[Workspace] = field(default_factory=list)

    def local_numbers(self) -> Set[int]:
        return {ws.local_number for ws in self.members}


def lowest_free_local_number(local_numbers: Iterable[int]) -> int:
    """Return the first ``k >= 1`` not present in ``local_numbers``.

    Examples:
        >>> lowest_free_local_number([1, 2, 4])
        3
        >>> lowest_free_local_number([1, 2, 3])
        4
        >>> lowest_free_local_number([])
        1
    """
    used = set(local_numbers)
    candidate = 1
    while candidate in used:
        candidate += 1
    return candidate


class GroupIndex:
    """Groups built from the flat names of all live workspaces.

    Building the index also seeds ``hasher`` with every group number found, so
    numbers allocated afterwards for new groups never collide with them.
    """

    def __init__(self, hasher: SortedHasher):
        self.hasher = hasher
        self._groups: Dict[str, GroupEntry] = {}
        self.ungrouped: List[Workspace] = []

    @classmethod
    def build(
        cls,
        workspace_names: Iterable[str],
        naming: WorkspaceNaming,
        hasher: SortedHasher,
    ) -> "GroupIndex":
        """Decode every workspace name and file it under its group.

        Raises:
            WorkspaceNameError: If a workspace name cannot be decoded, or its
                group number is outside the allocator space
        """
        index = cls(hasher)
        for name in workspace_names:
            index.add(naming.decode(name))
        logger.debug(
            f"Indexed {len(index)} group(s) and {len(index.ungrouped)} ungrouped workspace(s)"
        )
        return index

    def add(self, workspace: Workspace) -> None:
        if workspace.group is None:
            self.ungrouped.append(workspace)
            return

        name = workspace.group.name
        entry = self._groups.get(name)
        if entry is None:
            if workspace.group.group_number >= self.hasher.size:
                raise WorkspaceNameError(
                    f"Workspace name '{workspace.flat_name}' has group number "
                    f"{workspace.group.group_number}, beyond the {self.hasher.size} available groups"
                )
            entry = GroupEntry(group=workspace.group)
            self._groups[name] = entry
            self.hasher.set(workspace.group.group_number, name)
        elif entry.group.group_number != workspace.group.group_number:
            logger.warning(
                f"Group '{name}' found with numbers {entry.group.group_number} and "
                f"{workspace.group.group_number}; keeping {entry.group.group_number}"
            )
            workspace = Workspace(
                group=entry.group,
                local_number=workspace.local_number,
                flat_name=workspace.flat_name,
            )
        entry.members.append(workspace)

    def get(self, name: str) -> Optional[Group]:
        entry = self._groups.get(name)
        return entry.group if entry else None

    def members(self, name: str) -> List[Workspace]:
        """Members of group ``name`` ordered by local number."""
        entry = self._groups.get(name)
        if entry is None:
            return []
        return sorted(entry.members, key=lambda ws: ws.local_number)

    def local_numbers(self, name: str) -> Set[int]:
        entry = self._groups.get(name)
        return entry.local_numbers() if entry else set()

    def lowest_free_local_number(self, name: Optional[str]) -> int:
        """Lowest unused local number in group ``name`` (``None`` = ungrouped).

        Gaps left by removed workspaces are filled before appending.
        """
        if name is None:
            return lowest_free_local_number(ws.local_number for ws in self.ungrouped)
        return lowest_free_local_number(self.local_numbers(name))

    def group_names(self) -> List[str]:
        """All group names in workspace order (by group number)."""
        return [
            entry.group.name
            for entry in sorted(self._groups.values(), key=lambda e: e.group.group_number)
        ]

    def groups(self) -> List[GroupEntry]:
        return sorted(self._groups.values(), key=lambda e: e.group.group_number)

    def __contains__(self, name: object) -> bool:
        return name in self._groups

    def __len__(self) -> int:
        return len(self._groups)
