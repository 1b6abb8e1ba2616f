# Whim Document Library — (c) 2023 Evan Overman — MIT Licensed
"""
Defines all custom exception classes used by whim.

Parse failures are fail-fast: the first malformed or unknown token aborts the
whole parse and no partial result is returned.

Exception Hierarchy:
- WhimError
    ├── VocabularyError
    └── ArgsError
        ├── MalformedArgumentError
        └── BadFlagError
"""


class WhimError(Exception):
    """Base exception for whim."""


class VocabularyError(WhimError):
    """Exception raised when a command or flag declaration is invalid."""


class ArgsError(WhimError):
    """Exception raised when command line arguments cannot be parsed."""


class MalformedArgumentError(ArgsError):
    """
    Exception raised when a token is incorrect for its position.

    Either a dash-prefixed token has no resolvable flag syntax (e.g. `-flag`),
    or a value could not be coerced to its flag's kind (e.g. `abc` given to an
    `INT` flag). The offending token is kept on `token`.
    """

    def __init__(self, token: str, reason: str = "") -> None:
        self.token = token
        self.reason = reason
        message = f"Malformed argument '{token}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class BadFlagError(ArgsError):
    """Exception raised when a flag-shaped token matches no declared flag."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown flag '{name}'")
