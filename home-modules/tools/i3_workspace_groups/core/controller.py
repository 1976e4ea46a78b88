"""Group and workspace operations.

Each operation looks at the focused workspace, works out the target flat
workspace name and sends at most one i3 command (rename group sends one per
workspace in the group). Missing arguments are asked for through the menu; a
cancelled menu ends the operation without a command.
"""

import logging
from typing import List, Optional, Protocol

from ..models.workspace import Group, Workspace
from .context import GroupContext
from .menu import RofiMenu
from .naming import quote_workspace_name

logger = logging.getLogger(__name__)


class CommandSink(Protocol):
    async def command(self, cmd: str) -> None:
        ...


class WorkspaceGroupsController:
    """Runs group operations against one :class:`GroupContext`.

    Args:
        context: Snapshot of the live workspaces
        sink: Receives i3 commands (usually an I3Client)
        menu: Asked for arguments that were not given
    """

    def __init__(self, context: GroupContext, sink: CommandSink, menu: Optional[RofiMenu] = None):
        self.context = context
        self.sink = sink
        self.menu = menu

    # Argument resolution

    async def _get_local_number(self, local_number: Optional[int]) -> Optional[int]:
        if local_number is not None:
            return local_number
        if self.menu is None:
            return None
        return await self.menu.prompt_number("Workspace number")

    async def _get_group_name(self, group_name: Optional[str], prompt: str = "Group name",
                              choices: Optional[List[str]] = None) -> Optional[str]:
        if group_name is None and self.menu is not None:
            group_name = await self.menu.prompt(prompt, choices)
        if group_name is None:
            return None
        group_name = group_name.strip()
        return group_name or None

    def _is_default(self, group_name: str) -> bool:
        return group_name == self.context.default_group_name

    def _target_group(self, group_name: str) -> Group:
        """Existing group called ``group_name``, or a new one with a fresh number."""
        group = self.context.index.get(group_name)
        if group is not None:
            return group
        group = Group(group_name, self.context.hasher.hash(group_name))
        logger.info(f"New group '{group_name}' gets group number {group.group_number}")
        return group

    def _encode(self, group: Optional[Group], local_number: int) -> str:
        return quote_workspace_name(self.context.naming.encode(group, local_number))

    async def _send(self, cmd: str) -> List[str]:
        await self.sink.command(cmd)
        return [cmd]

    # Operations

    async def focus_workspace(self, local_number: Optional[int] = None) -> List[str]:
        """Focus workspace ``local_number`` of the focused group."""
        focused = self.context.focused_workspace()
        local_number = await self._get_local_number(local_number)
        if local_number is None:
            logger.debug("No workspace number given")
            return []

        if focused.group is None:
            return await self._send(f"workspace number {self._encode(None, local_number)}")
        return await self._send(f"workspace {self._encode(focused.group, local_number)}")

    # TODO switch to the last focused workspace in that group
    async def focus_group(self, group_name: Optional[str] = None) -> List[str]:
        """Focus the first workspace of a group, creating the group if needed."""
        self.context.focused_workspace()
        group_name = await self._get_group_name(group_name, choices=self.context.group_choices())
        if group_name is None:
            logger.debug("No group name given")
            return []

        if self._is_default(group_name):
            numbers = [ws.local_number for ws in self.context.index.ungrouped]
            target = min(numbers) if numbers else 1
            return await self._send(f"workspace number {self._encode(None, target)}")

        members = self.context.index.members(group_name)
        target = members[0].local_number if members else 1
        group = self._target_group(group_name)
        return await self._send(f"workspace {self._encode(group, target)}")

    async def move_container_to_workspace(self, local_number: Optional[int] = None) -> List[str]:
        """Move the focused container to workspace ``local_number`` of the focused group."""
        focused = self.context.focused_workspace()
        local_number = await self._get_local_number(local_number)
        if local_number is None:
            logger.debug("No workspace number given")
            return []

        if focused.group is None:
            return await self._send(f"move to workspace number {self._encode(None, local_number)}")
        return await self._send(f"move to workspace {self._encode(focused.group, local_number)}")

    async def move_container_to_group(self, group_name: Optional[str] = None) -> List[str]:
        """Move the focused container to the lowest free workspace of a group."""
        focused = self.context.focused_workspace()
        group_name = await self._get_group_name(group_name, choices=self.context.group_choices())
        if group_name is None:
            logger.debug("No group name given")
            return []
        if self._in_group(focused, group_name):
            logger.info(f"Container is already in group '{group_name}'")
            return []

        if self._is_default(group_name):
            target = self.context.index.lowest_free_local_number(None)
            return await self._send(f"move to workspace number {self._encode(None, target)}")

        target = self.context.index.lowest_free_local_number(group_name)
        group = self._target_group(group_name)
        return await self._send(f"move to workspace {self._encode(group, target)}")

    async def move_workspace_to_group(self, group_name: Optional[str] = None) -> List[str]:
        """Rename the focused workspace into the lowest free slot of a group."""
        focused = self.context.focused_workspace()
        old_name = self.context.focused_workspace_info().name
        group_name = await self._get_group_name(group_name, choices=self.context.group_choices())
        if group_name is None:
            logger.debug("No group name given")
            return []
        if self._in_group(focused, group_name):
            logger.info(f"Workspace is already in group '{group_name}'")
            return []

        if self._is_default(group_name):
            new_name = self._encode(None, self.context.index.lowest_free_local_number(None))
        else:
            target = self.context.index.lowest_free_local_number(group_name)
            new_name = self._encode(self._target_group(group_name), target)
        return await self._send(
            f"rename workspace {quote_workspace_name(old_name)} to {new_name}"
        )

    async def rename_group(self, new_group_name: Optional[str] = None) -> List[str]:
        """Rename the focused group, keeping its group number."""
        focused = self.context.focused_workspace()
        if focused.group is None:
            logger.info("Focused workspace is not in a group, nothing to rename")
            return []

        new_group_name = await self._get_group_name(new_group_name, prompt="New group name")
        if new_group_name is None:
            logger.debug("No new group name given")
            return []
        if new_group_name in self.context.index or self._is_default(new_group_name):
            logger.info(f"Group '{new_group_name}' already exists")
            return []

        old_group = self.context.index.get(focused.group.name) or focused.group
        new_group = Group(new_group_name, old_group.group_number)
        commands = []
        for ws in self.context.index.members(old_group.name):
            old_name = ws.flat_name or self.context.naming.encode(old_group, ws.local_number)
            commands += await self._send(
                f"rename workspace {quote_workspace_name(old_name)} "
                f"to {self._encode(new_group, ws.local_number)}"
            )
        return commands

    def _in_group(self, workspace: Workspace, group_name: str) -> bool:
        if self._is_default(group_name):
            return workspace.group is None
        return workspace.group_name == group_name
