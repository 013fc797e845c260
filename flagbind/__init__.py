"""
Flagbind Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import (
    ErrorKind,
    FlagbindError,
    MalformedValueError,
    MissingRequiredError,
    ParamParseError,
    ParamSpecError,
    UnrecognizedOptionError,
)
from .parser import UNBOUNDED, ParamParser, ParamType, ParseResult, Slot

logger = logging.getLogger("flagbind")


__all__ = [
    "ErrorKind",
    "FlagbindError",
    "MalformedValueError",
    "MissingRequiredError",
    "ParamParseError",
    "ParamParser",
    "ParamSpecError",
    "ParamType",
    "ParseResult",
    "Slot",
    "UNBOUNDED",
    "UnrecognizedOptionError",
]
