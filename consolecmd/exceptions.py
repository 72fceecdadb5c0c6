"""
Exception hierarchy for consolecmd.

Only registration-time errors propagate to host code. Everything raised while
the dispatch loop is running is contained and reported through the loop's
error notification.
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

from typing import List, Optional, Sequence


class ConsoleCommandsError(Exception):
    """Base class for all consolecmd errors."""


class DuplicateCommandError(ConsoleCommandsError, KeyError):
    """Raised when a command name is registered twice (case-insensitive)."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Command '{name}' is already registered")

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message instead
        return self.args[0]


class InvalidCommandError(ConsoleCommandsError, ValueError):
    """Raised when a command is registered with an unusable name or handler."""


class LoopAlreadyRunningError(ConsoleCommandsError, RuntimeError):
    """Raised when run() is called on a loop that is already running."""


class HandlerError(ConsoleCommandsError):
    """
    A failure raised by a registered command handler.

    The original exception is available as ``__cause__`` and ``original``.
    """

    def __init__(
        self,
        command: str,
        arguments: Sequence[str],
        original: Optional[BaseException] = None,
    ):
        self.command = command
        self.arguments: List[str] = list(arguments)
        self.original = original
        detail = f"{type(original).__name__}: {original}" if original else "unknown failure"
        super().__init__(f"Command '{command}' failed: {detail}")
