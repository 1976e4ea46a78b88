"""Entry point for the i3-workspace-groups CLI."""

import sys

from i3_workspace_groups.cli.commands import cli_main


def main() -> int:
    """Main entry point."""
    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
