# Data models for workspace groups

from .workspace import Group, Workspace, WorkspaceInfo

__all__ = [
    "Group",
    "Workspace",
    "WorkspaceInfo",
]
