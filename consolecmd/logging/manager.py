"""
Centralized logging manager for consolecmd.

Configures the ``consolecmd`` logger hierarchy from a LoggingConfig: JSON or
text formatting, and optional rotating file output.
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
import logging.handlers
import sys
from pathlib import Path
from typing import List, Optional

from .json_formatter import ConsoleJSONFormatter

ROOT_LOGGER_NAME = "consolecmd"
TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ConsoleLoggingManager:
    """
    Central manager for consolecmd logging.

    Handlers are attached to the ``consolecmd`` logger only, so embedding the
    console in a host application never touches the host's root logger.
    """

    def __init__(self, config=None, stream=None):
        """
        Initialize the logging manager.

        Args:
            config: ConsoleConfig or LoggingConfig carrying logging settings
            stream: Stream for console log output (defaults to sys.stderr)
        """
        self.config = config
        self.stream = stream
        self.configured = False
        self._handlers: List[logging.Handler] = []

        self.log_level = logging.WARNING
        self.format_type = "text"
        self.output_file: Optional[str] = None
        self.max_file_size_mb = 10
        self.backup_count = 3

        logging_config = getattr(config, "logging", config)
        if logging_config is not None and hasattr(logging_config, "level"):
            self.log_level = getattr(logging, logging_config.level)
            self.format_type = logging_config.format
            self.output_file = logging_config.output_file
            self.max_file_size_mb = logging_config.max_file_size_mb
            self.backup_count = logging_config.backup_count

    def setup_logging(self) -> None:
        """Setup the consolecmd logging system."""
        if self.configured:
            return

        root = logging.getLogger(ROOT_LOGGER_NAME)
        root.setLevel(self.log_level)
        root.propagate = False

        console_handler = logging.StreamHandler(self.stream or sys.stderr)
        console_handler.setFormatter(self._create_formatter())
        console_handler.setLevel(self.log_level)
        self._add_handler(root, console_handler)

        if self.output_file:
            self._setup_file_logging(root)

        self.configured = True

        root.info(
            "consolecmd logging initialized",
            extra={
                "log_level": logging.getLevelName(self.log_level),
                "format_type": self.format_type,
                "output_file": self.output_file,
            },
        )

    def _create_formatter(self) -> logging.Formatter:
        if self.format_type == "json":
            return ConsoleJSONFormatter()
        return logging.Formatter(TEXT_FORMAT)

    def _setup_file_logging(self, root: logging.Logger) -> None:
        """Setup file-based logging with rotation."""
        output_path = Path(self.output_file)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            filename=str(output_path),
            maxBytes=self.max_file_size_mb * 1024 * 1024,
            backupCount=self.backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(self._create_formatter())
        file_handler.setLevel(self.log_level)
        self._add_handler(root, file_handler)

    def _add_handler(self, logger: logging.Logger, handler: logging.Handler) -> None:
        logger.addHandler(handler)
        self._handlers.append(handler)

    def get_logger(self, name: str) -> logging.Logger:
        """Get a configured logger for the given name."""
        if not self.configured:
            self.setup_logging()
        return logging.getLogger(name)

    def shutdown(self) -> None:
        """Detach and close the handlers this manager installed."""
        root = logging.getLogger(ROOT_LOGGER_NAME)
        for handler in self._handlers:
            root.removeHandler(handler)
            handler.close()
        self._handlers.clear()
        root.propagate = True
        self.configured = False


# Global logging manager instance
_logging_manager: Optional[ConsoleLoggingManager] = None


def get_logging_manager(config=None) -> ConsoleLoggingManager:
    """Get or create the global logging manager."""
    global _logging_manager

    if _logging_manager is None:
        _logging_manager = ConsoleLoggingManager(config)

    return _logging_manager


def setup_consolecmd_logging(config=None) -> ConsoleLoggingManager:
    """Setup consolecmd logging and return the manager."""
    manager = get_logging_manager(config)
    manager.setup_logging()
    return manager


def get_consolecmd_logger(name: str) -> logging.Logger:
    """Get a consolecmd logger with proper configuration."""
    manager = get_logging_manager()
    return manager.get_logger(f"{ROOT_LOGGER_NAME}.{name}")


def shutdown_consolecmd_logging() -> None:
    """Shutdown the consolecmd logging system."""
    global _logging_manager

    if _logging_manager:
        _logging_manager.shutdown()
        _logging_manager = None
