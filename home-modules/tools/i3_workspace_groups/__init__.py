"""i3 Workspace Groups - named groups of workspaces for i3/sway.

This package provides:
- Group number allocation that never renumbers existing groups
- Encoding of (group, local number) pairs into flat i3 workspace names
- Focus/move/rename operations scoped to the focused group
- A CLI with rofi prompts for missing arguments
"""

__version__ = "0.1.0"
__author__ = "i3pm contributors"
__license__ = "MIT"

__all__ = ["__version__", "__author__", "__license__"]
