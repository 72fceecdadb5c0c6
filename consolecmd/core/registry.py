"""
Command registry for the console command loop.

Maps case-insensitive command names to handler callbacks. Registration is
add-only: a name can be bound once and is never removed.
"""

"""
Copyright (c) 2025 Firefly Software Solutions Inc.

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at:

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence

from ..exceptions import DuplicateCommandError, InvalidCommandError

logger = logging.getLogger("consolecmd.registry")

CommandHandler = Callable[[Sequence[str]], None]


def normalize_name(name: str) -> str:
    """Normalize a command name for storage and lookup."""
    return name.lower()


@dataclass(frozen=True)
class Command:
    """Represents a registered command."""

    name: str
    handler: CommandHandler
    description: str = ""
    usage: str = ""

    def __call__(self, arguments: Sequence[str]) -> None:
        self.handler(arguments)


class CommandRegistry:
    """Registry for console commands."""

    def __init__(self):
        """Initialize the command registry."""
        self._commands: Dict[str, Command] = {}
        self._lock = threading.RLock()

    def register(
        self,
        name: str,
        handler: CommandHandler,
        description: str = "",
        usage: str = "",
    ) -> Command:
        """
        Register a command.

        Args:
            name: Command name, compared case-insensitively
            handler: Callable receiving the list of argument strings
            description: Short description for help listings
            usage: Usage example

        Returns:
            The stored Command entry

        Raises:
            DuplicateCommandError: If the name is already registered
            InvalidCommandError: If the name is blank or the handler is not callable
        """
        if not isinstance(name, str) or not name.strip():
            raise InvalidCommandError("Command name must be a non-empty string")
        if not callable(handler):
            raise InvalidCommandError(f"Handler for command '{name}' is not callable")

        key = normalize_name(name)
        with self._lock:
            if key in self._commands:
                raise DuplicateCommandError(key)
            cmd = Command(name=key, handler=handler, description=description, usage=usage)
            self._commands[key] = cmd

        logger.debug("Registered command", extra={"command": key})
        return cmd

    def lookup(self, name: str) -> Optional[Command]:
        """Get a command by name, or None if it is not registered."""
        with self._lock:
            return self._commands.get(normalize_name(name))

    def get_handler(self, name: str) -> Optional[CommandHandler]:
        """Get the handler bound to a command name."""
        cmd = self.lookup(name)
        return cmd.handler if cmd else None

    def list_commands(self) -> List[Command]:
        """List all commands sorted by name."""
        with self._lock:
            return sorted(self._commands.values(), key=lambda c: c.name)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.lookup(name) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._commands)
