# Whim Document Library — (c) 2023 Evan Overman — MIT Licensed
"""
This module implements whim's typed command line argument parser.

A `ParseVocabulary` declares the recognized commands and flags. `parse()` walks
the raw tokens once, left to right, classifying each one as a command, a flag
or a value, and returns a `ParsedArgs` that answers which commands were given
and what value each flag received.

Classification rules, in order, for each token:
1. If the previous token was a flag that takes a value (`UINT`, `INT`,
   `STRING`), the token is that flag's value, whatever it looks like.
2. A token equal to a declared command name is that command.
3. A token starting with a dash is a flag: `--name` for any flag, `-x` for a
   single character flag. Anything else dash-prefixed is malformed.
4. A bare token after a `BOOL` flag is that flag's `true` / `false` value.
5. Any other bare token is a `STRING` value.

Example Usage:
    verbose = Flag("verbose")
    depth = Flag("depth", FlagKind.UINT)
    scan = Command("scan")

    parsed = ParseVocabulary().command(scan).flag(verbose).flag(depth).parse(
        ["scan", "--depth", "3", "--verbose"]
    )

    parsed.commands()  # [Command("scan")]
    parsed.flags()  # {verbose: Value(BOOL, True), depth: Value(UINT, 3)}

This is not a getopt replacement: combined short flags (`-abc`), `=`-joined
values and `--` separators are not supported.
"""
from __future__ import annotations

from typing import Iterable, Sequence

from whim.exceptions import BadFlagError, MalformedArgumentError, VocabularyError
from whim.logger import logger
from whim.parser.parser_types import (
    ArgsItem,
    Command,
    CommandItem,
    Flag,
    FlagItem,
    FlagKind,
    Value,
    ValueItem,
)


class ParseVocabulary:
    """
    The commands and flags recognized by a single parse.

    Declarations are kept in order. Each builder method returns the vocabulary
    so declarations can be chained.
    """

    def __init__(
        self,
        commands: Iterable[Command] | None = None,
        flags: Iterable[Flag] | None = None,
    ) -> None:
        self._commands: list[Command] = []
        self._flags: list[Flag] = []
        for command in commands or []:
            self.command(command)
        for flag in flags or []:
            self.flag(flag)

    @property
    def commands(self) -> tuple[Command, ...]:
        return tuple(self._commands)

    @property
    def flags(self) -> tuple[Flag, ...]:
        return tuple(self._flags)

    def command(self, command: Command) -> ParseVocabulary:
        """Declare a command."""
        if not isinstance(command, Command):
            raise VocabularyError(f"Expected a Command, got {type(command).__name__}")
        if any(existing.name == command.name for existing in self._commands):
            raise VocabularyError(f"Command '{command.name}' is already declared")
        self._commands.append(command)
        return self

    def flag(self, flag: Flag) -> ParseVocabulary:
        """Declare a flag. Names must be unique regardless of kind."""
        if not isinstance(flag, Flag):
            raise VocabularyError(f"Expected a Flag, got {type(flag).__name__}")
        if any(existing.name == flag.name for existing in self._flags):
            raise VocabularyError(f"Flag '{flag.name}' is already declared")
        self._flags.append(flag)
        return self

    def parse(self, tokens: Iterable[str]) -> ParsedArgs:
        """Parse `tokens` against this vocabulary. See `parse()`."""
        return parse(tokens, self)

    def __repr__(self) -> str:
        return f"ParseVocabulary(commands={self._commands!r}, flags={self._flags!r})"


def _resolve_flag(token: str, flags: dict[str, Flag]) -> Flag:
    """Resolve a dash-prefixed token to a declared flag."""
    if token.startswith("--"):
        name = token[2:]
    elif len(token) == 2:
        name = token[1:]
    else:
        raise MalformedArgumentError(
            token, "long flag names must be given with two dashes"
        )

    try:
        return flags[name]
    except KeyError:
        raise BadFlagError(name) from None


def parse(tokens: Iterable[str], vocabulary: ParseVocabulary) -> ParsedArgs:
    """
    Classify every token against `vocabulary`.

    The vocabulary is snapshotted before the first token is read, and the
    token iterable is consumed to completion.

    Args:
        tokens (Iterable[str]): The raw arguments, without the program name.
        vocabulary (ParseVocabulary): The declared commands and flags.

    Returns:
        ParsedArgs: The classified tokens, in input order.

    Raises:
        MalformedArgumentError: If a dash-prefixed token has no valid flag syntax
            or a value cannot be coerced to its flag's kind.
        BadFlagError: If a flag-shaped token names no declared flag.
        TypeError: If `tokens` is a single string.
    """
    if isinstance(tokens, str):
        raise TypeError("tokens must be an iterable of strings, not a single string")

    declared_flags = vocabulary.flags
    commands = {command.name: command for command in vocabulary.commands}
    flags = {flag.name: flag for flag in declared_flags}

    items: list[ArgsItem] = []
    previous: ArgsItem | None = None
    for token in tokens:
        if not isinstance(token, str):
            raise TypeError(f"Argument tokens must be strings, got {type(token).__name__}")

        item: ArgsItem
        if isinstance(previous, FlagItem) and previous.flag.takes_value:
            item = ValueItem(previous.flag.coerce(token))
        elif token in commands:
            item = CommandItem(commands[token])
        elif token.startswith("-"):
            item = FlagItem(_resolve_flag(token, flags))
        elif isinstance(previous, FlagItem):
            item = ValueItem(previous.flag.coerce(token))
        else:
            item = ValueItem(Value(FlagKind.STRING, token))

        logger.debug("Classified %r as %s", token, item)
        items.append(item)
        previous = item

    return ParsedArgs(declared_flags, items)


class ParsedArgs:
    """
    Holds arguments parsed by `parse()`.

    Only `flags()`, `commands()` and `operands()` read the classified tokens;
    each call derives a fresh result.
    """

    def __init__(self, flags: Sequence[Flag], items: Sequence[ArgsItem]) -> None:
        self._flags: tuple[Flag, ...] = tuple(flags)
        self._items: tuple[ArgsItem, ...] = tuple(items)

    def flags(self) -> dict[Flag, Value | None]:
        """
        Map every declared flag to the value it received.

        A flag followed by a value takes that value. A `BOOL` flag that is
        present without a value is `true`. Flags that were not given, and
        non-boolean flags without a value, map to `None`. When a flag is given
        more than once the last occurrence wins.
        """
        values: dict[Flag, Value | None] = {flag: None for flag in self._flags}
        for index, item in enumerate(self._items):
            if not isinstance(item, FlagItem):
                continue
            following = self._items[index + 1] if index + 1 < len(self._items) else None
            if isinstance(following, ValueItem):
                values[item.flag] = following.value
            elif item.flag.kind is FlagKind.BOOL:
                values[item.flag] = Value(FlagKind.BOOL, True)
            else:
                values[item.flag] = None
        return values

    def commands(self) -> list[Command]:
        """All commands given, in order. Duplicates are kept."""
        return [item.command for item in self._items if isinstance(item, CommandItem)]

    def operands(self, command: Command) -> list[Value]:
        """
        Values given directly after `command`.

        Collects the run of bare values following each occurrence of the
        command, up to the next command or flag.
        """
        operands: list[Value] = []
        collecting = False
        for item in self._items:
            if isinstance(item, CommandItem):
                collecting = item.command == command
            elif isinstance(item, FlagItem):
                collecting = False
            elif collecting:
                operands.append(item.value)
        return operands

    def __repr__(self) -> str:
        return f"ParsedArgs(flags={self._flags!r}, items={self._items!r})"
