#!/usr/bin/env python3
"""
Unit tests for input sources.
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

import io
from unittest.mock import patch

from consolecmd.core.console import ConsoleCommands
from consolecmd.core.sources import ConsoleInputSource, IterableInputSource, StreamInputSource


class TestIterableInputSource:
    """Test IterableInputSource."""

    def test_yields_lines_then_none(self):
        source = IterableInputSource(["a", "b"])

        assert source.read_line() == "a"
        assert source.read_line() == "b"
        assert source.read_line() is None
        assert source.read_line() is None

    def test_accepts_generators(self):
        source = IterableInputSource(f"line {i}" for i in range(2))

        assert source.read_line() == "line 0"


class TestStreamInputSource:
    """Test StreamInputSource."""

    def test_strips_newlines(self):
        source = StreamInputSource(io.StringIO("first\r\nsecond\nlast"))

        assert source.read_line() == "first"
        assert source.read_line() == "second"
        assert source.read_line() == "last"
        assert source.read_line() is None

    def test_blank_line_is_not_end_of_input(self):
        source = StreamInputSource(io.StringIO("\nafter\n"))

        assert source.read_line() == ""
        assert source.read_line() == "after"

    def test_defaults_to_stdin(self):
        fake_stdin = io.StringIO("from stdin\n")
        with patch("sys.stdin", fake_stdin):
            assert StreamInputSource().read_line() == "from stdin"

    def test_drives_console(self):
        calls = []
        console = ConsoleCommands(input_source=StreamInputSource(io.StringIO("add 1 2\n\nadd 3\n")))
        console.register("add", calls.append)

        console.run()

        assert calls == [["1", "2"], ["3"]]


class TestConsoleInputSource:
    """Test ConsoleInputSource."""

    def test_reads_with_prompt(self):
        with patch("builtins.input", return_value="typed") as fake_input:
            assert ConsoleInputSource("app> ").read_line() == "typed"

        fake_input.assert_called_once_with("app> ")

    def test_eof_returns_none(self):
        with patch("builtins.input", side_effect=EOFError):
            assert ConsoleInputSource().read_line() is None

    def test_console_uses_configured_prompt(self):
        from consolecmd.config.console_config import ConsoleConfig

        console = ConsoleCommands(config=ConsoleConfig(prompt="cfg> "))

        assert isinstance(console.input_source, ConsoleInputSource)
        assert console.input_source.prompt == "cfg> "
