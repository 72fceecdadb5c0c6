"""
Line-oriented input sources for the dispatch loop.

Every source exposes ``read_line()`` which blocks until a line is available
and returns it without the trailing newline, or returns None once input is
permanently exhausted.
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

import sys
from typing import Iterable, Optional, Protocol, TextIO


class InputSource(Protocol):
    """Anything the loop can read lines from."""

    def read_line(self) -> Optional[str]:
        ...


class ConsoleInputSource:
    """Reads from the interactive terminal via ``input()``."""

    def __init__(self, prompt: str = ""):
        """
        Initialize the console source.

        Args:
            prompt: Text shown before each read
        """
        self.prompt = prompt

    def read_line(self) -> Optional[str]:
        try:
            return input(self.prompt)
        except EOFError:
            return None


class StreamInputSource:
    """Reads from any text stream (pipe, file, ``io.StringIO``)."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdin

    def read_line(self) -> Optional[str]:
        line = self.stream.readline()
        if line == "":
            return None
        return line.rstrip("\r\n")


class IterableInputSource:
    """Feeds lines from an iterable. Used by hosts that script the console, and in tests."""

    def __init__(self, lines: Iterable[str]):
        self._lines = iter(lines)

    def read_line(self) -> Optional[str]:
        return next(self._lines, None)
