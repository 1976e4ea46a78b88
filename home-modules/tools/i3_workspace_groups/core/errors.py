"""Exception hierarchy for i3 workspace groups.

All fatal conditions derive from WorkspaceGroupsError so the CLI can report
them uniformly. Nothing here is retried: each error means the window manager
state or the configuration is not what the tool expects.
"""


class WorkspaceGroupsError(Exception):
    """Base class for all workspace group errors."""

    pass


class WorkspaceNameError(WorkspaceGroupsError, ValueError):
    """A flat workspace name could not be decoded or encoded."""

    pass


class AllocationError(WorkspaceGroupsError):
    """The group number space has no free slot for a new group."""

    pass


class NoFocusedWorkspaceError(WorkspaceGroupsError):
    """The live workspace list has no focused workspace."""

    pass


class I3Error(WorkspaceGroupsError):
    """Exception raised for i3 IPC errors."""

    pass


class MenuError(WorkspaceGroupsError):
    """The selection menu could not be run or returned unusable input."""

    pass


class ConfigError(WorkspaceGroupsError):
    """The configuration file is malformed or holds invalid values."""

    pass
