#!/usr/bin/env python3
"""
Unit tests for the consolecmd logging package.
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
import json
import logging
import sys

from consolecmd.config.console_config import ConsoleConfig, LoggingConfig
from consolecmd.logging import (
    ConsoleJSONFormatter,
    ConsoleLoggingManager,
    create_json_handler,
    get_consolecmd_logger,
    get_logging_manager,
    setup_consolecmd_logging,
    shutdown_consolecmd_logging,
)


def make_record(message="hello", **extra):
    record = logging.LogRecord(
        name="consolecmd.loop",
        level=logging.WARNING,
        pathname=__file__,
        lineno=42,
        msg=message,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestConsoleJSONFormatter:
    """Test JSON formatting of log records."""

    def test_base_fields(self):
        data = json.loads(ConsoleJSONFormatter().format(make_record()))

        assert data["message"] == "hello"
        assert data["level"] == "WARNING"
        assert data["logger"] == "consolecmd.loop"
        assert data["prefix"] == "consolecmd::log"
        assert data["line"] == 42

    def test_extra_fields(self):
        data = json.loads(ConsoleJSONFormatter().format(make_record(command="greet", argc=2)))

        assert data["command"] == "greet"
        assert data["argc"] == 2

    def test_extra_fields_disabled(self):
        formatter = ConsoleJSONFormatter(include_extra=False)
        data = json.loads(formatter.format(make_record(command="greet")))

        assert "command" not in data

    def test_custom_prefix(self):
        data = json.loads(ConsoleJSONFormatter(prefix="host::console").format(make_record()))

        assert data["prefix"] == "host::console"

    def test_exception_included(self):
        try:
            raise ValueError("broken")
        except ValueError:
            record = make_record()
            record.exc_info = sys.exc_info()

        data = json.loads(ConsoleJSONFormatter().format(record))

        assert "ValueError: broken" in data["exception"]

    def test_create_json_handler(self):
        stream = io.StringIO()
        handler = create_json_handler(logging.DEBUG, stream=stream)

        handler.handle(make_record("via handler"))

        assert json.loads(stream.getvalue())["message"] == "via handler"


class TestConsoleLoggingManager:
    """Test the logging manager."""

    def test_settings_from_console_config(self):
        config = ConsoleConfig(logging=LoggingConfig(level="DEBUG", format="json"))
        manager = ConsoleLoggingManager(config)

        assert manager.log_level == logging.DEBUG
        assert manager.format_type == "json"

    def test_settings_from_logging_config(self):
        manager = ConsoleLoggingManager(LoggingConfig(level="ERROR"))

        assert manager.log_level == logging.ERROR

    def test_json_output(self):
        stream = io.StringIO()
        manager = ConsoleLoggingManager(LoggingConfig(level="DEBUG", format="json"), stream=stream)
        manager.setup_logging()
        try:
            logging.getLogger("consolecmd.test").debug("dispatching", extra={"command": "greet"})
        finally:
            manager.shutdown()

        lines = [json.loads(line) for line in stream.getvalue().splitlines()]
        assert lines[0]["message"] == "consolecmd logging initialized"
        assert lines[-1]["message"] == "dispatching"
        assert lines[-1]["command"] == "greet"

    def test_level_filters_records(self):
        stream = io.StringIO()
        manager = ConsoleLoggingManager(LoggingConfig(level="ERROR"), stream=stream)
        manager.setup_logging()
        try:
            logging.getLogger("consolecmd.test").warning("quiet")
            logging.getLogger("consolecmd.test").error("loud")
        finally:
            manager.shutdown()

        output = stream.getvalue()
        assert "quiet" not in output
        assert "loud" in output

    def test_file_output(self, tmp_path):
        log_file = tmp_path / "logs" / "console.log"
        manager = ConsoleLoggingManager(
            LoggingConfig(level="INFO", output_file=str(log_file)), stream=io.StringIO()
        )
        manager.setup_logging()
        try:
            logging.getLogger("consolecmd.test").info("to file")
        finally:
            manager.shutdown()

        assert "to file" in log_file.read_text(encoding="utf-8")

    def test_setup_is_idempotent(self):
        manager = ConsoleLoggingManager(stream=io.StringIO())
        manager.setup_logging()
        manager.setup_logging()
        try:
            assert len(manager._handlers) == 1
        finally:
            manager.shutdown()

    def test_shutdown_restores_logger(self):
        root = logging.getLogger("consolecmd")
        before = list(root.handlers)
        manager = ConsoleLoggingManager(stream=io.StringIO())

        manager.setup_logging()
        assert root.propagate is False
        manager.shutdown()

        assert root.handlers == before
        assert root.propagate is True
        assert manager.configured is False


class TestGlobalManager:
    """Test module-level helpers."""

    def test_global_manager_lifecycle(self):
        manager = setup_consolecmd_logging(ConsoleConfig())

        assert get_logging_manager() is manager
        assert manager.configured
        assert get_consolecmd_logger("loop").name == "consolecmd.loop"

        shutdown_consolecmd_logging()

        assert get_logging_manager() is not manager
