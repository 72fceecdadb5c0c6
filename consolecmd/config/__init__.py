"""
Configuration module for consolecmd.

Copyright (c) 2025 Firefly Software Solutions Inc.
Licensed under the Apache License, Version 2.0 (the "License");
"""

from .console_config import (
    EOF_POLICIES,
    ConfigurationManager,
    ConsoleConfig,
    EofRetryConfig,
    LoggingConfig,
)

__all__ = [
    "ConsoleConfig",
    "EofRetryConfig",
    "LoggingConfig",
    "ConfigurationManager",
    "EOF_POLICIES",
]
