"""
Whim Document Library

Copyright (c) 2023 Evan Overman.
Licensed under the MIT License. See LICENSE file for details.
"""

from .args_parser import ParsedArgs, ParseVocabulary, parse
from .parser_types import (
    ArgsItem,
    Command,
    CommandItem,
    Flag,
    FlagItem,
    FlagKind,
    Value,
    ValueItem,
)

__all__ = [
    "ArgsItem",
    "Command",
    "CommandItem",
    "Flag",
    "FlagItem",
    "FlagKind",
    "ParsedArgs",
    "ParseVocabulary",
    "Value",
    "ValueItem",
    "parse",
]
