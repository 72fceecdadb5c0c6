"""Core console components."""

from .console import ConsoleCommands, LoopState
from .events import EventHook
from .registry import Command, CommandRegistry
from .session import LoopSession
from .sources import ConsoleInputSource, InputSource, IterableInputSource, StreamInputSource
from .tokenizer import split_command, tokenize

__all__ = [
    "ConsoleCommands",
    "LoopState",
    "EventHook",
    "Command",
    "CommandRegistry",
    "LoopSession",
    "InputSource",
    "ConsoleInputSource",
    "StreamInputSource",
    "IterableInputSource",
    "tokenize",
    "split_command",
]
