"""Pytest configuration and shared fixtures for i3_workspace_groups tests."""

import logging
from dataclasses import dataclass
from typing import Callable, Generator, List, Optional
from unittest.mock import AsyncMock, patch

import pytest

from i3_workspace_groups.core.context import GroupContext
from i3_workspace_groups.core.i3_client import I3Client
from i3_workspace_groups.models.workspace import WorkspaceInfo


@dataclass
class MockWorkspace:
    """Mock i3 workspace object."""
    name: str = "1"
    num: int = 1
    output: str = "DP-1"
    focused: bool = False
    visible: bool = True


@dataclass
class MockCommandReply:
    """Mock i3 CommandReply object."""
    success: bool = True
    error: Optional[str] = None


class MockI3Connection:
    """Mock i3ipc.aio.Connection for testing."""

    def __init__(self, workspaces: Optional[List[MockWorkspace]] = None):
        self.workspaces: List[MockWorkspace] = workspaces or []
        self.command_history: List[str] = []
        self.fail_commands: bool = False
        self.get_workspaces_calls = 0

    async def connect(self) -> "MockI3Connection":
        """Mock Connection().connect()."""
        return self

    async def get_workspaces(self) -> List[MockWorkspace]:
        """Mock GET_WORKSPACES command."""
        self.get_workspaces_calls += 1
        return self.workspaces

    async def command(self, cmd: str) -> List[MockCommandReply]:
        """Mock RUN_COMMAND."""
        self.command_history.append(cmd)
        if self.fail_commands:
            return [MockCommandReply(success=False, error="No such workspace")]
        return [MockCommandReply()]


def _leading_number(name: str) -> int:
    head = name.split(":", 1)[0]
    return int(head) if head.isdigit() else -1


class RecordingSink:
    """Command sink that only records commands."""

    def __init__(self):
        self.commands: List[str] = []

    async def command(self, cmd: str) -> None:
        self.commands.append(cmd)


@pytest.fixture
def make_workspaces() -> Callable[..., List[WorkspaceInfo]]:
    """Build live workspace records from flat names, flagging ``focused``."""

    def _make(names: List[str], focused: Optional[str] = None) -> List[WorkspaceInfo]:
        return [
            WorkspaceInfo(name=name, focused=name == focused, num=_leading_number(name))
            for name in names
        ]

    return _make


@pytest.fixture
def make_context(make_workspaces) -> Callable[..., GroupContext]:
    """Build a GroupContext from flat names with default configuration."""

    def _make(names: List[str], focused: Optional[str] = None, config=None) -> GroupContext:
        return GroupContext.build(make_workspaces(names, focused), config)

    return _make


@pytest.fixture
def sink() -> RecordingSink:
    """Command sink recording every command."""
    return RecordingSink()


@pytest.fixture
def menu() -> AsyncMock:
    """Menu mock; answers are set per test through ``prompt.return_value``."""
    mock = AsyncMock()
    mock.prompt.return_value = None
    mock.prompt_number.return_value = None
    return mock


@pytest.fixture
def mock_i3_connection() -> Generator[Callable[..., MockI3Connection], None, None]:
    """Patch i3ipc.aio.Connection with a mock holding the given workspaces."""
    patchers = []

    def _make(names: List[str], focused: Optional[str] = None) -> MockI3Connection:
        conn = MockI3Connection([
            MockWorkspace(name=name, num=_leading_number(name), focused=name == focused)
            for name in names
        ])
        patcher = patch("i3_workspace_groups.core.i3_client.i3ipc.aio.Connection", return_value=conn)
        patcher.start()
        patchers.append(patcher)
        return conn

    yield _make

    for patcher in patchers:
        patcher.stop()


@pytest.fixture
def dry_run_client() -> I3Client:
    """I3Client in dry-run mode; commands are recorded, never sent."""
    return I3Client(dry_run=True)


@pytest.fixture(autouse=True)
def reset_package_logger() -> Generator[None, None, None]:
    """Undo CLI logging setup so handlers never outlive captured streams."""
    yield
    logger = logging.getLogger("i3_workspace_groups")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
