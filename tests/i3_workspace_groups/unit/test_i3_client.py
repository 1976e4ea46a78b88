"""Unit tests for the i3 IPC client."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from i3_workspace_groups.core.errors import I3Error
from i3_workspace_groups.core.i3_client import I3Client


class TestI3Client:
    """Tests for I3Client."""

    @pytest.mark.asyncio
    async def test_get_workspaces(self, mock_i3_connection):
        """Workspaces come back as WorkspaceInfo records."""
        mock_i3_connection(["1", "101:work"], focused="101:work")

        async with I3Client() as client:
            workspaces = await client.get_workspaces()

        assert [ws.name for ws in workspaces] == ["1", "101:work"]
        assert [ws.focused for ws in workspaces] == [False, True]
        assert workspaces[1].num == 101

    @pytest.mark.asyncio
    async def test_command_success(self, mock_i3_connection):
        conn = mock_i3_connection(["1"], focused="1")

        async with I3Client() as client:
            await client.command("workspace number 2")

        assert conn.command_history == ["workspace number 2"]
        assert client.sent_commands == ["workspace number 2"]

    @pytest.mark.asyncio
    async def test_command_rejected(self, mock_i3_connection):
        """An unsuccessful reply from i3 is an error."""
        conn = mock_i3_connection(["1"], focused="1")
        conn.fail_commands = True

        async with I3Client() as client:
            with pytest.raises(I3Error, match="No such workspace"):
                await client.command("workspace 101:work")

    @pytest.mark.asyncio
    async def test_dry_run_does_not_send(self, caplog):
        """Dry-run records and logs the command without touching i3."""
        client = I3Client(dry_run=True)

        with caplog.at_level("INFO", logger="i3_workspace_groups"):
            await client.command("workspace number 5")

        assert client.sent_commands == ["workspace number 5"]
        assert client._connection is None
        assert "Dry-running command: i3-msg workspace number 5" in caplog.text

    @pytest.mark.asyncio
    async def test_connect_failure(self):
        connection = MagicMock()
        connection.connect = AsyncMock(side_effect=FileNotFoundError("no socket"))

        with patch("i3_workspace_groups.core.i3_client.i3ipc.aio.Connection", return_value=connection):
            client = I3Client()
            with pytest.raises(I3Error, match="Failed to connect to i3"):
                await client.connect()

    @pytest.mark.asyncio
    async def test_get_workspaces_failure(self):
        connection = MagicMock()
        connection.connect = AsyncMock(return_value=connection)
        connection.get_workspaces = AsyncMock(side_effect=ConnectionResetError("closed"))

        with patch("i3_workspace_groups.core.i3_client.i3ipc.aio.Connection", return_value=connection):
            client = I3Client()
            with pytest.raises(I3Error, match="Failed to get workspaces"):
                await client.get_workspaces()
