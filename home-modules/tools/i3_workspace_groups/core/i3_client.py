"""i3 IPC client for workspace queries and commands.

This module wraps i3ipc.aio for the two calls the tool needs:
- Workspaces (GET_WORKSPACES), read once per run
- Sending commands (RUN_COMMAND), or only logging them in dry-run mode
"""

import logging
from typing import List, Optional

import i3ipc.aio

from ..models.workspace import WorkspaceInfo
from .errors import I3Error

logger = logging.getLogger(__name__)


class I3Client:
    """Async wrapper for i3ipc queries and commands.

    Args:
        dry_run: Log commands instead of sending them
    """

    def __init__(self, dry_run: bool = False):
        self._connection: Optional[i3ipc.aio.Connection] = None
        self.dry_run = dry_run
        self.sent_commands: List[str] = []

    async def connect(self) -> None:
        """Connect to i3 IPC socket.

        Raises:
            I3Error: If connection fails
        """
        try:
            logger.debug("Connecting to i3 IPC socket")
            self._connection = await i3ipc.aio.Connection().connect()
            logger.info("Connected to i3 IPC")
        except Exception as e:
            logger.error(f"Failed to connect to i3 IPC: {e}")
            raise I3Error(f"Failed to connect to i3: {e}")

    async def close(self) -> None:
        """Close i3 connection."""
        if self._connection:
            # i3ipc doesn't have explicit close, connection auto-closes
            self._connection = None

    async def get_workspaces(self) -> List[WorkspaceInfo]:
        """Get all workspaces (GET_WORKSPACES).

        Raises:
            I3Error: If query fails
        """
        if not self._connection:
            await self.connect()

        try:
            logger.debug("IPC query: GET_WORKSPACES")
            workspaces = await self._connection.get_workspaces()
        except Exception as e:
            logger.error(f"GET_WORKSPACES failed: {e}")
            raise I3Error(f"Failed to get workspaces: {e}")

        logger.debug(f"GET_WORKSPACES returned {len(workspaces)} workspace(s)")
        return [
            WorkspaceInfo(
                name=ws.name,
                focused=ws.focused,
                num=ws.num,
                output=ws.output,
                visible=ws.visible,
            )
            for ws in workspaces
        ]

    async def command(self, cmd: str) -> None:
        """Send command to i3 (RUN_COMMAND).

        In dry-run mode the command is only logged and recorded.

        Raises:
            I3Error: If sending fails or i3 reports an unsuccessful reply
        """
        self.sent_commands.append(cmd)
        if self.dry_run:
            logger.info(f"Dry-running command: i3-msg {cmd}")
            return

        if not self._connection:
            await self.connect()

        logger.info(f"Running command: i3-msg {cmd}")
        try:
            results = await self._connection.command(cmd)
        except Exception as e:
            logger.error(f"RUN_COMMAND failed for '{cmd}': {e}")
            raise I3Error(f"Failed to execute command '{cmd}': {e}")

        failures = [r for r in results if not r.success]
        if failures:
            errors = "; ".join(str(getattr(r, "error", None) or "unknown error") for r in failures)
            raise I3Error(f"i3 rejected command '{cmd}': {errors}")
        logger.debug(f"RUN_COMMAND completed: {len(results)} succeeded")

    async def __aenter__(self):
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
