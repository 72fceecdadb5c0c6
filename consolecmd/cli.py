#!/usr/bin/env python3
"""
Command-line interface for consolecmd.

Runs a small demonstration host around the console command loop and provides
helpers for configuration files and tokenizer debugging.

Copyright 2025 Firefly Software Solutions Inc
Licensed under the Apache License, Version 2.0
"""

import argparse
import json
import sys
from typing import List, Optional, Sequence

from consolecmd import __version__
from consolecmd.config.console_config import EOF_POLICIES, ConfigurationManager, ConsoleConfig
from consolecmd.core.console import ConsoleCommands
from consolecmd.core.sources import InputSource
from consolecmd.core.tokenizer import tokenize
from consolecmd.logging import setup_consolecmd_logging
from consolecmd.ui.formatter import ShellFormatter


def build_demo_console(
    config: Optional[ConsoleConfig] = None,
    input_source: Optional[InputSource] = None,
    formatter: Optional[ShellFormatter] = None,
) -> ConsoleCommands:
    """
    Build a console with the built-in demo commands.

    Commands: help, echo, status, exit and quit.
    """
    formatter = formatter or ShellFormatter()
    console = ConsoleCommands(input_source=input_source, config=config, formatter=formatter)

    def show_help(arguments: Sequence[str]) -> None:
        rows = [[cmd.name, cmd.usage, cmd.description] for cmd in console.list_commands()]
        formatter.print_table("Available commands", ["Command", "Usage", "Description"], rows)

    def echo(arguments: Sequence[str]) -> None:
        formatter.print(" ".join(arguments))

    def status(arguments: Sequence[str]) -> None:
        summary = console.session.get_status_summary() if console.session else {}
        formatter.print_table(
            "Session status",
            ["Key", "Value"],
            [[key, value] for key, value in summary.items()],
        )

    def leave(arguments: Sequence[str]) -> None:
        formatter.print_info("Stopping console.")
        console.stop()

    console.register("help", show_help, "Show available commands", "help")
    console.register("echo", echo, "Print the arguments back", 'echo "hello world"')
    console.register("status", status, "Show session counters", "status")
    console.register("exit", leave, "Stop the console", "exit")
    console.register("quit", leave, "Stop the console", "quit")

    console.on_unknown_command += lambda command, arguments: formatter.print_warning(
        f"Unknown command: {command}. Type 'help' for a list of commands."
    )

    return console


def run_shell(config: ConsoleConfig) -> int:
    """Run the interactive demo shell."""
    console = build_demo_console(config)
    console.formatter.print_info(f"consolecmd {__version__}. Type 'help' for commands, 'exit' to leave.")
    console.run()
    return 0


def create_sample_config(output_path: str) -> int:
    """Create a sample configuration file."""
    try:
        ConsoleConfig().to_file(output_path)
    except OSError as e:
        print(f"❌ Failed to write configuration: {e}")
        return 1
    print(f"✅ Sample configuration written to {output_path}")
    return 0


def show_tokens(line: str) -> int:
    """Print the tokens of a line as a JSON array."""
    print(json.dumps(tokenize(line)))
    return 0


def load_cli_config(args: argparse.Namespace) -> ConsoleConfig:
    """Load configuration from file and environment, then apply command-line overrides."""
    config = ConfigurationManager.load_config(config_file=args.config)

    overrides = {}
    if args.prompt is not None:
        overrides["prompt"] = args.prompt
    if args.eof_policy is not None:
        overrides["eof_policy"] = args.eof_policy

    logging_overrides = {}
    if args.log_level is not None:
        logging_overrides["level"] = args.log_level
    if args.log_format is not None:
        logging_overrides["format"] = args.log_format
    if logging_overrides:
        overrides["logging"] = logging_overrides

    return ConfigurationManager.apply_overrides(config, overrides)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="consolecmd",
        description="consolecmd - Interactive console command subsystem",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  consolecmd                                 # Start the demo shell
  consolecmd shell --prompt "app> "          # Start with a custom prompt
  consolecmd init-config console.yaml        # Create sample config
  consolecmd tokenize 'say "hello world"'    # Show how a line is tokenized
        """,
    )

    parser.add_argument("--version", action="version", version=f"consolecmd {__version__}")
    parser.add_argument("--config", default=None, help="Configuration file (YAML or JSON)")
    parser.add_argument("--prompt", default=None, help="Prompt shown before each line")
    parser.add_argument(
        "--eof-policy",
        choices=sorted(EOF_POLICIES),
        default=None,
        help="What to do when input ends",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set logging level",
    )
    parser.add_argument(
        "--log-format", choices=["json", "text"], default=None, help="Set log output format"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("shell", help="Start the interactive demo shell")

    init_parser = subparsers.add_parser("init-config", help="Create sample configuration file")
    init_parser.add_argument("output", help="Output configuration file path")

    tokenize_parser = subparsers.add_parser("tokenize", help="Print the tokens of a line")
    tokenize_parser.add_argument("line", help="Line to tokenize")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = load_cli_config(args)
    except ValueError as e:
        print(f"❌ Invalid configuration: {e}")
        return 1

    setup_consolecmd_logging(config)

    if args.command in (None, "shell"):
        try:
            return run_shell(config)
        except KeyboardInterrupt:
            print("\n\n👋 Goodbye!")
            return 0

    if args.command == "init-config":
        return create_sample_config(args.output)

    if args.command == "tokenize":
        return show_tokens(args.line)

    print(f"Unknown command: {args.command}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
