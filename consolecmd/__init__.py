#!/usr/bin/env python3
"""
consolecmd - Interactive console command subsystem

Embeddable line-oriented command shell: reads lines from a console,
tokenizes them respecting double quotes and backslash escapes, and dispatches
the first token to a registered handler.

Key Features:
- Quote and escape aware tokenizer
- Case-insensitive, add-only command registry
- Blocking dispatch loop with cooperative stop
- Multi-subscriber notifications for commands, unknown commands and errors
- Errors contained inside the loop: one bad command never kills the shell

Usage:
    from consolecmd import ConsoleCommands

    console = ConsoleCommands()

    @console.command("greet")
    def greet(arguments):
        print("Hello", *arguments)

    console.register("exit", lambda arguments: console.stop())
    console.on_unknown_command += lambda command, arguments: print(f"Unknown: {command}")
    console.run()

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

__version__ = "1.0.0"
__author__ = "Firefly Software Solutions Inc"
__license__ = "Apache 2.0"

# Configuration
from .config import ConfigurationManager, ConsoleConfig, EofRetryConfig, LoggingConfig

# Core components
from .core import (
    Command,
    CommandRegistry,
    ConsoleCommands,
    ConsoleInputSource,
    EventHook,
    InputSource,
    IterableInputSource,
    LoopSession,
    LoopState,
    StreamInputSource,
    tokenize,
)

# Errors
from .exceptions import (
    ConsoleCommandsError,
    DuplicateCommandError,
    HandlerError,
    InvalidCommandError,
    LoopAlreadyRunningError,
)

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__license__",
    # Core
    "ConsoleCommands",
    "LoopState",
    "CommandRegistry",
    "Command",
    "EventHook",
    "LoopSession",
    "tokenize",
    # Input sources
    "InputSource",
    "ConsoleInputSource",
    "StreamInputSource",
    "IterableInputSource",
    # Configuration
    "ConsoleConfig",
    "EofRetryConfig",
    "LoggingConfig",
    "ConfigurationManager",
    # Errors
    "ConsoleCommandsError",
    "DuplicateCommandError",
    "InvalidCommandError",
    "LoopAlreadyRunningError",
    "HandlerError",
]
