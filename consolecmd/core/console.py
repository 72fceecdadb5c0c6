"""
Console command dispatch loop.

Reads lines from an input source, tokenizes them and dispatches the first
token to a registered handler. Runs on the calling thread until a stop is
observed.

    line -> tokenize -> (command, arguments) -> on_command -> handler
                                                           -> on_unknown_command

Stopping is cooperative: ``stop()`` only sets a flag, which is checked at the
top of each iteration. A blocking read in progress is not interrupted, so the
loop ends after the next line has been read and fully processed.
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
import traceback
from enum import Enum
from typing import Callable, List, Optional, Sequence

from ..config.console_config import ConsoleConfig
from ..exceptions import HandlerError, LoopAlreadyRunningError
from ..ui.formatter import ShellFormatter
from .events import EventHook
from .registry import Command, CommandHandler, CommandRegistry
from .session import LoopSession
from .sources import ConsoleInputSource, InputSource
from .tokenizer import split_command, tokenize

logger = logging.getLogger("consolecmd.loop")

# Upper bound for the end-of-input backoff exponent
MAX_EOF_ATTEMPT = 64


class LoopState(Enum):
    """Dispatch loop states."""

    RUNNING = "running"
    STOPPED = "stopped"


class ConsoleCommands:
    """
    Interactive command loop bound to one input source.

    Each instance owns its registry, stop flag and notification hooks:

    - ``on_command(command, arguments)``: every non-empty command, before dispatch
    - ``on_unknown_command(command, arguments)``: no handler is registered
    - ``on_error(error)``: any failure while reading, tokenizing or dispatching

    Subscribers are invoked synchronously in subscription order on the loop's
    thread. When ``on_error`` has no subscribers, errors are printed to
    standard output.
    """

    def __init__(
        self,
        input_source: Optional[InputSource] = None,
        config: Optional[ConsoleConfig] = None,
        registry: Optional[CommandRegistry] = None,
        formatter: Optional[ShellFormatter] = None,
    ):
        """
        Initialize the command loop.

        Args:
            input_source: Where lines are read from. Defaults to the terminal.
            config: Loop configuration
            registry: Command registry to dispatch against
            formatter: Output used for the default error line
        """
        self.config = config or ConsoleConfig()
        self.input_source = input_source or ConsoleInputSource(self.config.prompt)
        self.registry = registry or CommandRegistry()
        self.formatter = formatter or ShellFormatter()

        self.on_command = EventHook("on_command")
        self.on_unknown_command = EventHook("on_unknown_command")
        self.on_error = EventHook("on_error")

        self.session: Optional[LoopSession] = None

        self._stop_requested = threading.Event()
        self._state_lock = threading.Lock()
        self._running = False

    # Registration

    def register(
        self,
        name: str,
        handler: CommandHandler,
        description: str = "",
        usage: str = "",
    ) -> Command:
        """Register a command handler. Raises DuplicateCommandError on a repeated name."""
        return self.registry.register(name, handler, description=description, usage=usage)

    def command(self, name: str, description: str = "", usage: str = "") -> Callable:
        """Decorator form of register()."""

        def decorator(func: CommandHandler) -> CommandHandler:
            self.register(name, func, description=description, usage=usage)
            return func

        return decorator

    # Lifecycle

    @property
    def state(self) -> LoopState:
        return LoopState.RUNNING if self._running else LoopState.STOPPED

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def stop_requested(self) -> bool:
        return self._stop_requested.is_set()

    def stop(self) -> None:
        """
        Request the loop to stop.

        Observed at the top of the next iteration, not mid-read.
        """
        self._stop_requested.set()
        logger.debug("Stop requested")

    def run(self) -> None:
        """
        Run the loop on the calling thread until stopped.

        The stop flag is reset on entry, so a stop() issued before run() has
        no effect.

        Raises:
            LoopAlreadyRunningError: If this instance is already running
        """
        with self._state_lock:
            if self._running:
                raise LoopAlreadyRunningError("Console command loop is already running")
            self._stop_requested.clear()
            self.session = LoopSession()
            self._running = True

        logger.info("Console command loop started", extra={"session_id": self.session.session_id})

        eof_attempts = 0
        try:
            while not self._stop_requested.is_set():
                try:
                    line = self.input_source.read_line()
                    if line is None:
                        attempt = eof_attempts
                        eof_attempts = min(eof_attempts + 1, MAX_EOF_ATTEMPT)
                        self._handle_end_of_input(attempt)
                        continue
                    eof_attempts = 0
                    self.session.record_line()
                    self.dispatch(line)
                except Exception as exc:
                    self._report_error(exc)
        finally:
            self.session.finish()
            with self._state_lock:
                self._running = False
            logger.info("Console command loop stopped", extra=self.session.get_status_summary())

    start = run
    initialize = run

    # Dispatch

    def dispatch(self, line: str) -> bool:
        """
        Process a single input line.

        Failures propagate to the caller; run() contains them. Handler
        failures are wrapped in HandlerError.

        Returns:
            True if the line carried a command, False if it was discarded
        """
        trimmed = line.strip()
        if not trimmed:
            return False

        command, arguments = split_command(tokenize(trimmed))
        if command is None:
            return False

        self.on_command.fire(command, list(arguments))

        entry = self.registry.lookup(command)
        if entry is None:
            if self.session:
                self.session.record_unknown()
            logger.debug("Unknown command", extra={"command": command})
            self.on_unknown_command.fire(command, list(arguments))
            return True

        if self.session:
            self.session.record_dispatch()
        logger.debug("Dispatching command", extra={"command": command, "argc": len(arguments)})
        try:
            entry.handler(arguments)
        except Exception as exc:
            raise HandlerError(command, arguments, exc) from exc
        return True

    def _handle_end_of_input(self, attempt: int) -> None:
        if self.config.eof_policy == "stop":
            logger.info("End of input reached, stopping")
            self._stop_requested.set()
            return

        delay = self.config.eof_retry.delay_for_attempt(attempt)
        logger.debug("End of input reached, retrying", extra={"attempt": attempt, "delay": delay})
        # Returns early when stop() is called from another thread
        self._stop_requested.wait(delay)

    def _report_error(self, exc: Exception) -> None:
        if self.session:
            self.session.record_error()
        logger.warning("Error while handling console input: %s", exc)

        if not self.on_error:
            self._print_default_error(exc)
            return

        try:
            self.on_error.fire(exc)
        except Exception:
            logger.exception("on_error subscriber raised while reporting %r", exc)

    def _print_default_error(self, exc: Exception) -> None:
        self.formatter.print_error(f"{self.config.error_message_prefix}{exc}")
        if self.config.show_tracebacks:
            lines: List[str] = traceback.format_exception(type(exc), exc, exc.__traceback__)
            self.formatter.print("".join(lines).rstrip())

    def list_commands(self) -> Sequence[Command]:
        return self.registry.list_commands()
