#!/usr/bin/env python3
"""
Configuration classes for the console command loop.

Provides configuration for the prompt, end-of-input handling, default error
output and logging.
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

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, Field, field_validator

EOF_POLICIES = {"stop", "retry"}


class EofRetryConfig(BaseModel):
    """Backoff used when the loop keeps reading after end-of-input."""

    initial_delay_ms: int = Field(
        default=100, ge=0, description="Delay before the first re-read in milliseconds"
    )
    max_delay_ms: int = Field(
        default=5000, ge=0, description="Maximum delay between re-reads in milliseconds"
    )
    backoff_multiplier: float = Field(
        default=2.0, ge=1.0, description="Exponential backoff multiplier"
    )

    @field_validator("max_delay_ms")
    @classmethod
    def max_delay_must_be_greater_than_initial(cls, v, info):
        if "initial_delay_ms" in info.data and v < info.data["initial_delay_ms"]:
            raise ValueError("max_delay_ms must be greater than or equal to initial_delay_ms")
        return v

    def delay_for_attempt(self, attempt: int) -> float:
        """Delay in seconds before re-read number ``attempt`` (0-based)."""
        try:
            delay_ms = self.initial_delay_ms * (self.backoff_multiplier**attempt)
        except OverflowError:
            delay_ms = self.max_delay_ms
        return min(delay_ms, self.max_delay_ms) / 1000.0


class LoggingConfig(BaseModel):
    """Configuration for consolecmd logging."""

    level: str = Field(default="WARNING", description="Logging level")
    format: str = Field(default="text", description="Log format: json or text")
    output_file: Optional[str] = Field(default=None, description="Log output file path")
    max_file_size_mb: int = Field(default=10, ge=1, description="Maximum log file size in MB")
    backup_count: int = Field(default=3, ge=1, description="Number of backup log files to keep")

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("format")
    @classmethod
    def validate_format(cls, v):
        valid_formats = {"json", "text"}
        if v.lower() not in valid_formats:
            raise ValueError(f"Log format must be one of: {valid_formats}")
        return v.lower()


class ConsoleConfig(BaseModel):
    """Main configuration class for the console command loop."""

    prompt: str = Field(default="> ", description="Prompt shown before each interactive read")
    eof_policy: str = Field(
        default="stop", description="End-of-input handling: stop the loop or retry with backoff"
    )
    eof_retry: EofRetryConfig = Field(
        default_factory=EofRetryConfig, description="Backoff for the retry end-of-input policy"
    )
    error_message_prefix: str = Field(
        default="Error in handling command: ",
        description="Prefix of the default error line when nobody subscribes to errors",
    )
    show_tracebacks: bool = Field(
        default=False, description="Include tracebacks in the default error output"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    @field_validator("eof_policy")
    @classmethod
    def validate_eof_policy(cls, v):
        if v.lower() not in EOF_POLICIES:
            raise ValueError(f"eof_policy must be one of: {EOF_POLICIES}")
        return v.lower()

    @classmethod
    def from_file(cls, config_path: Union[str, Path]) -> "ConsoleConfig":
        """Load configuration from a JSON or YAML file."""
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        content = path.read_text(encoding="utf-8")

        try:
            if path.suffix.lower() in [".yml", ".yaml"]:
                data = yaml.safe_load(content)
            else:
                data = json.loads(content)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ValueError(f"Failed to parse configuration file: {e}")

        return cls(**(data or {}))

    @classmethod
    def from_env(cls, prefix: str = "CONSOLECMD_") -> "ConsoleConfig":
        """Load configuration from environment variables.

        Only explicitly set variables are applied; everything else keeps the
        model defaults.
        """
        return cls(**ConfigurationManager._get_env_overrides(prefix))

    def to_file(self, config_path: Union[str, Path], format: str = "auto") -> None:
        """Save configuration to a file."""
        path = Path(config_path)

        if format == "auto":
            format = "yaml" if path.suffix.lower() in [".yml", ".yaml"] else "json"

        data = self.model_dump()

        if format == "yaml":
            content = yaml.dump(data, default_flow_style=False, sort_keys=False, indent=2)
        else:
            content = json.dumps(data, indent=2)

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")


def _to_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


class ConfigurationManager:
    """Utility class for managing configurations."""

    @staticmethod
    def merge_configs(*configs: ConsoleConfig) -> ConsoleConfig:
        """Merge multiple configurations, with later configs taking precedence."""
        if not configs:
            return ConsoleConfig()

        merged_data = configs[0].model_dump()

        for config in configs[1:]:
            config_data = config.model_dump(exclude_unset=True)
            merged_data = ConfigurationManager._deep_merge(merged_data, config_data)

        return ConsoleConfig(**merged_data)

    @staticmethod
    def apply_overrides(config: ConsoleConfig, overrides: Dict[str, Any]) -> ConsoleConfig:
        """Return a new configuration with nested override values applied."""
        if not overrides:
            return config
        return ConsoleConfig(**ConfigurationManager._deep_merge(config.model_dump(), overrides))

    @staticmethod
    def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = ConfigurationManager._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    @staticmethod
    def load_config(
        config_file: Optional[Union[str, Path]] = None,
        env_prefix: str = "CONSOLECMD_",
        use_env: bool = True,
    ) -> ConsoleConfig:
        """Load configuration from file and/or environment variables."""
        if config_file:
            try:
                base_config = ConsoleConfig.from_file(config_file)
            except FileNotFoundError:
                base_config = ConsoleConfig()
        else:
            base_config = ConsoleConfig()

        if use_env:
            env_overrides = ConfigurationManager._get_env_overrides(env_prefix)
            if env_overrides:
                return ConfigurationManager.apply_overrides(base_config, env_overrides)

        return base_config

    @staticmethod
    def _get_env_overrides(prefix: str = "CONSOLECMD_") -> Dict[str, Any]:
        """Get only the environment variable overrides that are actually set."""
        config_data: Dict[str, Any] = {}

        env_mappings = {
            f"{prefix}PROMPT": ("prompt", str),
            f"{prefix}EOF_POLICY": ("eof_policy", str),
            f"{prefix}EOF_RETRY_INITIAL_DELAY_MS": ("eof_retry.initial_delay_ms", int),
            f"{prefix}EOF_RETRY_MAX_DELAY_MS": ("eof_retry.max_delay_ms", int),
            f"{prefix}SHOW_TRACEBACKS": ("show_tracebacks", _to_bool),
            f"{prefix}LOG_LEVEL": ("logging.level", str),
            f"{prefix}LOG_FORMAT": ("logging.format", str),
            f"{prefix}LOG_FILE": ("logging.output_file", str),
        }

        for env_var, (config_key, converter) in env_mappings.items():
            value = os.getenv(env_var)
            if value is not None:
                try:
                    converted_value = converter(value)
                    if "." in config_key:
                        parts = config_key.split(".")
                        current = config_data
                        for part in parts[:-1]:
                            current = current.setdefault(part, {})
                        current[parts[-1]] = converted_value
                    else:
                        config_data[config_key] = converted_value
                except (ValueError, TypeError) as e:
                    raise ValueError(f"Invalid value for {env_var}: {value} ({e})")

        return config_data
