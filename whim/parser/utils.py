# Whim Document Library — (c) 2023 Evan Overman — MIT Licensed
"""
Contains value coercion utilities for whim argument parsing.

Coercion is strict: only literal forms are accepted, so surrounding
whitespace, `_` digit separators and out-of-range numbers are all rejected
with a `ValueError`.

Functions:
- coerce_bool: Convert `true` / `false` to a boolean.
- coerce_uint: Convert a string to an unsigned 64-bit integer.
- coerce_int: Convert a string to a signed 64-bit integer.
"""
import re

UINT_MAX = 2**64 - 1
INT_MIN = -(2**63)
INT_MAX = 2**63 - 1

_UINT_PATTERN = re.compile(r"\+?[0-9]+")
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def coerce_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Only the exact literals `true` and `false` are accepted.

    Raises:
        ValueError: If the value is any other string.
    """
    if value == "true":
        return True
    if value == "false":
        return False
    raise ValueError(f"'{value}' is not a boolean literal (expected true or false)")


def coerce_uint(value: str) -> int:
    """
    Convert a string to an unsigned 64-bit integer.

    Raises:
        ValueError: If the value is not a plain decimal literal or is out of range.
    """
    if not _UINT_PATTERN.fullmatch(value):
        raise ValueError(f"'{value}' is not an unsigned integer")
    number = int(value)
    if number > UINT_MAX:
        raise ValueError(f"'{value}' is out of range for an unsigned integer")
    return number


def coerce_int(value: str) -> int:
    """
    Convert a string to a signed 64-bit integer.

    Raises:
        ValueError: If the value is not a plain decimal literal or is out of range.
    """
    if not _INT_PATTERN.fullmatch(value):
        raise ValueError(f"'{value}' is not an integer")
    number = int(value)
    if not INT_MIN <= number <= INT_MAX:
        raise ValueError(f"'{value}' is out of range for an integer")
    return number
