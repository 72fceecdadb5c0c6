"""
Logging utilities and configuration for consolecmd.

Provides JSON or text logging for the ``consolecmd`` logger hierarchy with
centralized configuration.
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

from .json_formatter import ConsoleJSONFormatter, create_json_handler
from .manager import (
    ConsoleLoggingManager,
    get_consolecmd_logger,
    get_logging_manager,
    setup_consolecmd_logging,
    shutdown_consolecmd_logging,
)

__all__ = [
    "ConsoleJSONFormatter",
    "create_json_handler",
    "ConsoleLoggingManager",
    "get_logging_manager",
    "setup_consolecmd_logging",
    "get_consolecmd_logger",
    "shutdown_consolecmd_logging",
]
