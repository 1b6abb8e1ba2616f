# Whim Document Library — (c) 2023 Evan Overman — MIT Licensed
"""
Vocabulary and result types for whim's command line argument parser.

Contents:
- `FlagKind`: Closed set of value kinds a flag may expect, each owning its coercion.
- `Flag`: A declared `--name` / `-n` switch tagged with a `FlagKind`.
- `Command`: A declared bare keyword such as `new` or `add`.
- `Value`: A typed payload, either attached to a flag or a bare token.
- `CommandItem` / `FlagItem` / `ValueItem`: The classification of one input token.

All of these are immutable. Flags and commands compare by name (and kind, for
flags); help text and operand names are descriptive only.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from whim.exceptions import MalformedArgumentError, VocabularyError
from whim.parser.utils import coerce_bool, coerce_int, coerce_uint


class FlagKind(Enum):
    """
    The kind of value a flag expects.

    Every kind except `BOOL` takes a value, which means the token following the
    flag is always consumed as that value.
    """

    BOOL = "bool"
    UINT = "uint"
    INT = "int"
    STRING = "string"

    @property
    def takes_value(self) -> bool:
        return self is not FlagKind.BOOL

    def coerce(self, token: str) -> Value:
        """
        Coerce a raw token into a `Value` of this kind.

        Raises:
            MalformedArgumentError: If the token is not a valid literal for this kind.
        """
        try:
            if self is FlagKind.BOOL:
                return Value(self, coerce_bool(token))
            if self is FlagKind.UINT:
                return Value(self, coerce_uint(token))
            if self is FlagKind.INT:
                return Value(self, coerce_int(token))
        except ValueError as error:
            raise MalformedArgumentError(token, str(error)) from error
        return Value(self, token)


@dataclass(frozen=True)
class Value:
    """A typed argument value. Equality includes the kind."""

    kind: FlagKind
    data: bool | int | str

    def __str__(self) -> str:
        if self.kind is FlagKind.BOOL:
            return str(self.data).lower()
        return str(self.data)


@dataclass(frozen=True)
class Flag:
    """
    A command line flag.

    Flags with single character names may be given with one dash or two
    (`-f` or `--f`). Longer names must be given with two (`--flag`).

    A `BOOL` flag may be followed by `true` or `false`, but its bare presence
    implies `true`. Its absence does not imply `false`: an absent flag has no
    value at all.
    """

    name: str
    kind: FlagKind = FlagKind.BOOL
    help: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise VocabularyError("Flag name must be a non-empty string")
        if not isinstance(self.kind, FlagKind):
            raise VocabularyError(f"Flag '{self.name}' has an invalid kind: {self.kind!r}")

    @property
    def single_char(self) -> bool:
        return len(self.name) == 1

    @property
    def takes_value(self) -> bool:
        return self.kind.takes_value

    @property
    def dest(self) -> str:
        """The flag name as a Python identifier."""
        return self.name.replace("-", "_")

    @property
    def usage(self) -> str:
        return f"-{self.name}" if self.single_char else f"--{self.name}"

    def coerce(self, token: str) -> Value:
        return self.kind.coerce(token)


@dataclass(frozen=True)
class Command:
    """A subcommand given as a bare (undashed) token, e.g. `scan`."""

    name: str
    help: str = field(default="", compare=False)
    args: tuple[str, ...] = field(default=(), compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise VocabularyError("Command name must be a non-empty string")
        object.__setattr__(self, "args", tuple(self.args))

    @property
    def usage(self) -> str:
        return " ".join([self.name, *(f"<{arg}>" for arg in self.args)])


@dataclass(frozen=True)
class CommandItem:
    """A token that matched a declared command."""

    command: Command


@dataclass(frozen=True)
class FlagItem:
    """A token that resolved to a declared flag."""

    flag: Flag


@dataclass(frozen=True)
class ValueItem:
    """A token claimed by the preceding flag, or a bare unclaimed token."""

    value: Value


ArgsItem = Union[CommandItem, FlagItem, ValueItem]
