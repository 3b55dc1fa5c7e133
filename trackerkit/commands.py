"""A registry of named debug commands dispatched from a text line."""

from __future__ import annotations

import logging
from typing import Callable

from .textutil import trim_left

MAX_COMMAND_LENGTH = 16
MAX_COMMANDS = 32

CommandAction = Callable[[str], int]

logger = logging.getLogger(__name__)


class CommandError(Exception):
    """Raised when a command cannot be registered."""


class CommandRegistry:
    """Commands matched by prefix, in registration order; "debug" lists them."""

    def __init__(self, max_commands: int = MAX_COMMANDS) -> None:
        if max_commands < 1:
            raise ValueError(f"max_commands must be positive, got {max_commands}")
        self.max_commands = max_commands
        self._commands: list[tuple[str, CommandAction]] = []
        self.register("debug", self._cmd_debug)

    def _cmd_debug(self, line: str) -> int:
        for text in self.help():
            logger.debug("%s", text)
        return 0

    def register(self, name: str, action: CommandAction) -> None:
        """Add a command; its name is cut to 16 characters."""
        if len(self._commands) >= self.max_commands:
            raise CommandError(f"exceed MAX command number: {self.max_commands}")
        self._commands.append((name[:MAX_COMMAND_LENGTH], action))

    def dispatch(self, line: str) -> int | None:
        """Run the first command whose name starts the line; None if none matches."""
        command = trim_left(line)
        for name, action in self._commands:
            if command.startswith(name):
                return action(line)
        logger.info("CMD not processed")
        return None

    def names(self) -> list[str]:
        return [name for name, _ in self._commands]

    def help(self) -> list[str]:
        """Lines describing the supported commands."""
        return ["support cmd:"] + [f"\t{name}" for name in self.names()]