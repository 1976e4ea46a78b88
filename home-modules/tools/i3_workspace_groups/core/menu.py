"""Selection prompts through rofi (or any dmenu-compatible tool)."""

import asyncio
import logging
from typing import List, Optional, Sequence

from .errors import MenuError

logger = logging.getLogger(__name__)

# rofi -dmenu exits with 1 when the user cancels
CANCELLED_RETURN_CODE = 1


class RofiMenu:
    """Ask the user for a string, optionally from a list of choices.

    Args:
        command: Menu executable
        args: Arguments putting the menu in dmenu mode
    """

    def __init__(self, command: str = "rofi", args: Optional[Sequence[str]] = None):
        self.command = command
        self.args = list(args) if args is not None else ["-dmenu", "-i"]

    async def prompt(self, prompt: str, choices: Optional[List[str]] = None) -> Optional[str]:
        """Run the menu and return the stripped answer.

        Returns:
            The selected or typed string, or None if the user cancelled or
            entered nothing

        Raises:
            MenuError: If the menu tool is missing or fails
        """
        argv = [self.command, *self.args, "-p", prompt]
        stdin_data = "\n".join(choices or []).encode()
        logger.info(f"Running command: {' '.join(argv)}")

        try:
            proc = await asyncio.create_subprocess_exec(
                *argv,
                stdin=asyncio.subprocess.PIPE,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError:
            raise MenuError(f"Menu command not found: {self.command}")

        stdout, stderr = await proc.communicate(stdin_data)

        if proc.returncode == CANCELLED_RETURN_CODE:
            logger.debug("Menu cancelled by user")
            return None
        if proc.returncode != 0:
            raise MenuError(
                f"{self.command} exited with code {proc.returncode}: {stderr.decode().strip()}"
            )

        answer = stdout.decode().strip()
        if not answer:
            logger.debug("Menu returned empty input")
            return None
        return answer

    async def prompt_number(self, prompt: str) -> Optional[int]:
        """Ask for a workspace number.

        Raises:
            MenuError: If the answer is not a number
        """
        answer = await self.prompt(prompt)
        if answer is None:
            return None
        try:
            return int(answer)
        except ValueError:
            raise MenuError(f"Please give a workspace number, got '{answer}'")
