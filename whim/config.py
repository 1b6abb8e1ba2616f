# Whim Document Library — (c) 2023 Evan Overman — MIT Licensed
"""config.py
Configuration loader for the whim command line vocabulary."""
from __future__ import annotations

import importlib
import sys
from pathlib import Path
from typing import Any, Callable

import toml
import yaml
from pydantic import BaseModel, Field, field_validator

from whim.console import console
from whim.logger import logger
from whim.parser import Command, Flag, FlagKind, ParseVocabulary
from whim.themes import OneColors

BUILTIN_FLAGS: tuple[Flag, ...] = (
    Flag("help", help="Show this help message."),
    Flag("h", help="Show this help message."),
    Flag("verbose", help="Log parsing and dispatch details."),
    Flag("v", help="Log parsing and dispatch details."),
)


def import_action(dotted_path: str) -> Callable[..., Any]:
    """Dynamically imports a callable from a dotted path like 'my.module.func'."""
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path:
        console.print(f"[{OneColors.DARK_RED}]❌ Invalid action path:[/] {dotted_path}")
        sys.exit(1)
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        console.print(
            f"[{OneColors.DARK_RED}]❌ Could not import '{dotted_path}': {error}[/]\n"
            f"[{OneColors.COMMENT_GREY}]Ensure the module is installed and discoverable "
            "via PYTHONPATH."
        )
        sys.exit(1)
    action = getattr(module, attr, None)
    if not callable(action):
        logger.error("Module '%s' has no callable '%s'", module_path, attr)
        console.print(
            f"[{OneColors.DARK_RED}]❌ Module '{module_path}' has no callable "
            f"'{attr}'[/]"
        )
        sys.exit(1)
    return action


class RawFlag(BaseModel):
    """Raw flag model for whim configuration."""

    name: str
    kind: FlagKind = FlagKind.BOOL
    help: str = ""

    def to_flag(self) -> Flag:
        return Flag(self.name, self.kind, help=self.help)


class RawCommand(BaseModel):
    """Raw command model for whim configuration."""

    name: str
    help: str = ""
    args: list[str] = Field(default_factory=list)
    action: str | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not value or value.startswith("-"):
            raise ValueError("Command names must be non-empty and must not start with '-'")
        return value

    def to_command(self) -> Command:
        return Command(self.name, help=self.help, args=tuple(self.args))


def default_commands() -> list[RawCommand]:
    return [
        RawCommand(name="new", help="Creates new library in the current directory."),
        RawCommand(name="update", help="Updates the library in the current directory."),
        RawCommand(name="scan", help="Scans the directory for new files."),
        RawCommand(name="add", help="Add a document.", args=["path"]),
        RawCommand(name="build", help="Builds a document to HTML.", args=["path"]),
    ]


class WhimConfig(BaseModel):
    """whim command line configuration model."""

    title: str = "whim"
    description: str = ""
    log_mode: str | None = None
    log_file: str | None = None
    commands: list[RawCommand] = Field(default_factory=default_commands)
    flags: list[RawFlag] = Field(default_factory=list)

    @field_validator("log_mode")
    @classmethod
    def validate_log_mode(cls, value: str | None) -> str | None:
        if value not in (None, "cli", "json"):
            raise ValueError("log_mode must be 'cli' or 'json'")
        return value

    def get_command(self, name: str) -> RawCommand | None:
        return next((command for command in self.commands if command.name == name), None)

    def to_vocabulary(self) -> ParseVocabulary:
        """
        Build the parse vocabulary: configured commands, configured flags, then
        the built-in help and verbose flags.

        Raises:
            VocabularyError: If a name is declared twice, including a configured
                flag reusing a built-in flag name.
        """
        vocabulary = ParseVocabulary()
        for raw_command in self.commands:
            vocabulary.command(raw_command.to_command())
        for raw_flag in self.flags:
            vocabulary.flag(raw_flag.to_flag())
        for flag in BUILTIN_FLAGS:
            vocabulary.flag(flag)
        return vocabulary


def loader(file_path: Path | str) -> WhimConfig:
    """
    Load whim configuration from a YAML or TOML file.

    Example (YAML):
        title: notes
        commands:
          - name: add
            help: Add a document.
            args: [path]
            action: notes.commands.add
        flags:
          - name: depth
            kind: uint
            help: Directory depth to scan.

    Args:
        file_path (Path | str): Path to the config file (YAML or TOML).

    Returns:
        WhimConfig: The validated configuration.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file format is unsupported or its contents are invalid.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if raw_config is None:
        raw_config = {}
    if not isinstance(raw_config, dict):
        raise ValueError(
            "Configuration file must contain a mapping.\n"
            "Example:\n"
            "title: 'notes'\n"
            "commands:\n"
            "  - name: 'scan'\n"
            "    help: 'Scans the directory for new files.'"
        )

    logger.debug("Loaded configuration from %s", path)
    return WhimConfig.model_validate(raw_config)
