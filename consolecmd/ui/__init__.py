"""UI components for consolecmd."""

from .formatter import ShellFormatter

__all__ = ["ShellFormatter"]
