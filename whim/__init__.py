"""
Whim Document Library

Copyright (c) 2023 Evan Overman.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import (
    ArgsError,
    BadFlagError,
    MalformedArgumentError,
    VocabularyError,
    WhimError,
)
from .parser import Command, Flag, FlagKind, ParsedArgs, ParseVocabulary, Value, parse

logger = logging.getLogger("whim")


__all__ = [
    "ArgsError",
    "BadFlagError",
    "Command",
    "Flag",
    "FlagKind",
    "MalformedArgumentError",
    "ParsedArgs",
    "ParseVocabulary",
    "Value",
    "VocabularyError",
    "WhimError",
    "parse",
]
