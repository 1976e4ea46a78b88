"""Per-run snapshot of i3 workspaces and the structures derived from them.

The workspace list is read from i3 once, at the start of a run. The codec,
allocator and group index are built from it here and handed to the
controller; nothing is cached at module level.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from ..models.workspace import Workspace, WorkspaceInfo
from .config import WorkspaceGroupsConfig
from .errors import NoFocusedWorkspaceError
from .group_index import GroupIndex
from .i3_client import I3Client
from .naming import WorkspaceNaming
from .sorted_hash import SortedHasher

logger = logging.getLogger(__name__)


@dataclass
class GroupContext:
    """Everything an operation needs to know about the current workspaces."""

    workspaces: List[WorkspaceInfo]
    naming: WorkspaceNaming
    hasher: SortedHasher
    index: GroupIndex
    default_group_name: str = "Default"

    @classmethod
    def build(
        cls,
        workspaces: List[WorkspaceInfo],
        config: Optional[WorkspaceGroupsConfig] = None,
    ) -> "GroupContext":
        """Decode ``workspaces`` and index them by group.

        Raises:
            WorkspaceNameError: If a workspace name cannot be decoded
        """
        config = config or WorkspaceGroupsConfig()
        naming = WorkspaceNaming(group_size=config.group_size)
        hasher = SortedHasher(size=config.max_groups)
        index = GroupIndex.build((ws.name for ws in workspaces), naming, hasher)
        return cls(
            workspaces=list(workspaces),
            naming=naming,
            hasher=hasher,
            index=index,
            default_group_name=config.default_group_name,
        )

    @classmethod
    async def load(
        cls,
        client: I3Client,
        config: Optional[WorkspaceGroupsConfig] = None,
    ) -> "GroupContext":
        """Query i3 for its workspaces and build the context."""
        workspaces = await client.get_workspaces()
        return cls.build(workspaces, config)

    def focused_workspace_info(self) -> WorkspaceInfo:
        """Return the live record of the focused workspace.

        Raises:
            NoFocusedWorkspaceError: If no workspace is flagged focused
        """
        for ws in self.workspaces:
            if ws.focused:
                return ws
        raise NoFocusedWorkspaceError(
            f"No focused workspace among {len(self.workspaces)} workspace(s)"
        )

    def focused_workspace(self) -> Workspace:
        """Decode the focused workspace."""
        return self.naming.decode(self.focused_workspace_info().name)

    def group_choices(self) -> List[str]:
        """Group names to offer in the selection menu."""
        names = self.index.group_names()
        if self.index.ungrouped and self.default_group_name not in names:
            names.append(self.default_group_name)
        return names
