# Flagbind Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Flagbind.

Registration mistakes and command-line mistakes are kept apart: the former are
programming errors raised while declaring parameters, the latter are user input
errors raised while parsing an argument vector.

All exceptions inherit from `FlagbindError`, the base exception for the package.

Exception Hierarchy:
- FlagbindError
    ├── ParamSpecError
    └── ParamParseError
          ├── UnrecognizedOptionError
          ├── MalformedValueError
          └── MissingRequiredError

Each concrete exception carries an `ErrorKind` so callers working with
`ParseResult` can branch on the failure without `isinstance` chains.
"""
from __future__ import annotations

from enum import Enum
from typing import Iterable


class ErrorKind(Enum):
    """The four ways declaring or parsing parameters can fail."""

    UNRECOGNIZED_OPTION = "unrecognized_option"
    MALFORMED_VALUE = "malformed_value"
    MISSING_REQUIRED = "missing_required"
    CONSTRUCTION_MISUSE = "construction_misuse"

    def __str__(self) -> str:
        return self.value


class FlagbindError(Exception):
    """Base exception for Flagbind."""

    kind: ErrorKind | None = None


class ParamSpecError(FlagbindError):
    """Raised when a parameter is declared with an invalid configuration."""

    kind = ErrorKind.CONSTRUCTION_MISUSE


class ParamParseError(FlagbindError):
    """Base exception for errors found in the argument vector."""


class UnrecognizedOptionError(ParamParseError):
    """Raised when a token in option position matches no registered name."""

    kind = ErrorKind.UNRECOGNIZED_OPTION

    def __init__(self, option: str):
        self.option = option
        super().__init__(f"Unrecognized option '{option}' in invocation.")


class MalformedValueError(ParamParseError):
    """Raised when a value token cannot be converted to the declared type."""

    kind = ErrorKind.MALFORMED_VALUE

    def __init__(self, type_name: str, value: str, hint: str = ""):
        self.type_name = type_name
        self.value = value
        message = f"Error in argument (expected type {type_name}): {value}"
        if hint:
            message = f"{message}\n{hint}"
        super().__init__(message)


class MissingRequiredError(ParamParseError):
    """Raised when required parameters were never fully read."""

    kind = ErrorKind.MISSING_REQUIRED

    def __init__(self, names: Iterable[str]):
        self.names = list(names)
        super().__init__(
            "\n".join(
                f"Option '{name}' required, and not found, or incomplete."
                for name in self.names
            )
        )
