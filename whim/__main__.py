"""
Whim Document Library

Copyright (c) 2023 Evan Overman.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import os
import sys
from collections import defaultdict
from pathlib import Path
from typing import Any, Sequence

from rich.markup import escape
from rich.table import Table

from whim.config import BUILTIN_FLAGS, RawCommand, WhimConfig, import_action, loader
from whim.console import console
from whim.exceptions import ArgsError, WhimError
from whim.logger import logger
from whim.parser import Flag, ParsedArgs, Value
from whim.themes import OneColors
from whim.utils import get_program_invocation, setup_logging

VERBOSE_TOKENS = ("-v", "--v", "--verbose")


def find_whim_config() -> Path | None:
    candidates = [
        Path.cwd() / "whim.yaml",
        Path.cwd() / "whim.toml",
        Path.cwd() / ".whim.yaml",
        Path.cwd() / ".whim.toml",
        Path(os.environ.get("WHIM_CONFIG", "whim.yaml")),
        Path.home() / ".config" / "whim" / "whim.yaml",
        Path.home() / ".config" / "whim" / "whim.toml",
    ]
    return next((p for p in candidates if p.is_file()), None)


def load_config() -> WhimConfig:
    config_path = find_whim_config()
    if config_path is None:
        return WhimConfig()
    return loader(config_path)


def _flag_text(group: list[Flag]) -> str:
    flags = ", ".join(flag.usage for flag in sorted(group, key=lambda f: len(f.name)))
    kind = group[0].kind
    if kind.takes_value:
        flags = f"{flags} {kind.name}"
    return flags


def print_help(config: WhimConfig) -> None:
    """Print the usage, commands and options for the configured vocabulary."""
    program = get_program_invocation()
    console.print(f"[whim.title]{escape(config.title)}[/]")
    if config.description:
        console.print(escape(config.description))
    console.print(f"\n[bold]Usage:[/bold] {escape(program)} {escape('[COMMAND] [OPTIONS]')}\n")

    console.print("[bold]Commands:[/bold]")
    for raw_command in config.commands:
        usage = raw_command.to_command().usage
        console.print(f"  [whim.command]{escape(usage):<16}[/] {escape(raw_command.help)}")

    flag_groups: dict[tuple[str, str], list[Flag]] = defaultdict(list)
    for flag in [raw_flag.to_flag() for raw_flag in config.flags] + list(BUILTIN_FLAGS):
        flag_groups[(flag.help or flag.name, flag.kind.value)].append(flag)

    console.print("\n[bold]Options:[/bold]")
    for group in flag_groups.values():
        flags = _flag_text(group)
        console.print(f"  [whim.flag]{escape(flags):<16}[/] {escape(group[0].help)}")


def print_summary(command: RawCommand, operands: list[Value], options: dict[str, Any]) -> None:
    """Show what was parsed for a command that has no action configured."""
    table = Table(title=f"whim {command.name}", show_header=True, header_style="bold")
    table.add_column("Argument", style="whim.flag")
    table.add_column("Value", style="whim.value")
    for name, operand in zip(command.args, operands):
        table.add_row(f"<{name}>", str(operand))
    for dest, value in options.items():
        table.add_row(dest, str(value))
    console.print(table)


def _is_true(value: Value | None) -> bool:
    return value is not None and value.data is True


def get_options(parsed: ParsedArgs) -> dict[str, Any]:
    """Values of every user flag that received one, keyed by `Flag.dest`."""
    return {
        flag.dest: value.data
        for flag, value in parsed.flags().items()
        if value is not None and flag not in BUILTIN_FLAGS
    }


def run_command(
    raw_command: RawCommand, operands: list[Value], options: dict[str, Any]
) -> int:
    if not raw_command.action:
        print_summary(raw_command, operands, options)
        return 0

    action = import_action(raw_command.action)
    logger.debug(
        "Dispatching '%s' to %s with operands=%r options=%r",
        raw_command.name,
        raw_command.action,
        operands,
        options,
    )
    result = action(*(operand.data for operand in operands), **options)
    return result if type(result) is int else 0


def main(argv: Sequence[str] | None = None) -> int:
    try:
        config = load_config()
        vocabulary = config.to_vocabulary()
    except (FileNotFoundError, ValueError, WhimError) as error:
        console.print(f"[{OneColors.DARK_RED}]❌ Invalid configuration:[/] {escape(str(error))}")
        return 1

    argv = list(sys.argv[1:] if argv is None else argv)

    # Logging must be ready before parsing so -v shows classification.
    verbose = any(token in VERBOSE_TOKENS for token in argv)
    setup_logging(
        mode=config.log_mode,
        log_filename=config.log_file,
        console_log_level=logging.DEBUG if verbose else logging.WARNING,
    )

    try:
        parsed = vocabulary.parse(argv)
    except ArgsError as error:
        logger.debug("Argument parsing failed: %s", error)
        print_help(config)
        return 0

    flags = {flag.name: value for flag, value in parsed.flags().items()}

    if _is_true(flags["help"]) or _is_true(flags["h"]):
        print_help(config)
        return 0

    commands = parsed.commands()
    if not commands:
        print_help(config)
        return 0
    if len(commands) > 1:
        console.print("Only singular commands permitted.")
        return 0

    command = commands[0]
    raw_command = config.get_command(command.name)
    operands = parsed.operands(command)
    if raw_command is None:
        print_help(config)
        return 0
    if len(operands) != len(raw_command.args):
        console.print(
            f"[{OneColors.DARK_RED}]'{escape(command.name)}' expects "
            f"{escape(command.usage)}[/]\n"
        )
        print_help(config)
        return 0

    return run_command(raw_command, operands, get_options(parsed))


if __name__ == "__main__":
    sys.exit(main())
