# Flagbind Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Contains the value conversion utilities for Flagbind argument parsing.

This module converts raw command-line text into the Python value for a
`ParamType` and writes it into a parameter destination, assigning into a
`Slot` for single-value parameters and appending to a list otherwise.

Functions:
- coerce_bool: Convert 'true'/'false' text (any case) to a boolean.
- coerce_int: Convert decimal text to an integer within a bit-width range.
- coerce_float: Convert text to a float, optionally checking single precision range.
- convert_value: Convert text to the Python value for a `ParamType`.
- store_value: Convert text and write it into a destination.
"""
import math
import re
from typing import Any

from flagbind.exceptions import MalformedValueError
from flagbind.logger import logger
from flagbind.parser.binding import Slot
from flagbind.parser.param_type import ParamType

FLOAT32_MAX = 3.4028234663852886e38

INT_RANGES: dict[ParamType, tuple[int, int]] = {
    ParamType.INT: (-(2**31), 2**31 - 1),
    ParamType.UINT: (0, 2**32 - 1),
    ParamType.LONG: (-(2**63), 2**63 - 1),
}

DECIMAL_INT = re.compile(r"[+-]?[0-9]+", re.ASCII)

MULTI_VALUE_HINT = "Options which expect infinite arguments should be last."


def coerce_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Only 'true' and 'false' are accepted, compared case-insensitively.

    Args:
        value (str): The input string or boolean.

    Returns:
        bool: Parsed boolean result.

    Raises:
        ValueError: If the text is neither 'true' nor 'false'.
    """
    if isinstance(value, bool):
        return value
    lowered = value.lower()
    if lowered == "true":
        return True
    elif lowered == "false":
        return False
    raise ValueError(f"'{value}' is not 'true' or 'false'")


def coerce_int(value: str, low: int, high: int) -> int:
    """Convert decimal text to an int in the closed range [low, high]."""
    if not DECIMAL_INT.fullmatch(value):
        raise ValueError(f"'{value}' is not a decimal integer")
    number = int(value, 10)
    if not low <= number <= high:
        raise ValueError(f"{number} is outside the range [{low}, {high}]")
    return number


def coerce_float(value: str, single_precision: bool = False) -> float:
    if "_" in value or not value.isascii():
        raise ValueError(f"'{value}' is not a plain decimal number")
    number = float(value)
    if single_precision and math.isfinite(number) and abs(number) > FLOAT32_MAX:
        raise ValueError(f"{value} is outside single precision range")
    return number


def convert_value(value: str, param_type: ParamType) -> Any:
    """
    Convert command-line text to the value for a parameter type.

    Args:
        value (str): The raw token text.
        param_type (ParamType): The declared type.

    Returns:
        Any: The converted value.

    Raises:
        ValueError: If the text is not valid for the type.
    """
    if param_type is ParamType.BOOL:
        return coerce_bool(value)
    if param_type in INT_RANGES:
        low, high = INT_RANGES[param_type]
        return coerce_int(value, low, high)
    if param_type is ParamType.FLOAT:
        return coerce_float(value, single_precision=True)
    if param_type is ParamType.DOUBLE:
        return coerce_float(value)
    if param_type is ParamType.CHAR:
        return value[0]
    return value


def store_value(param_type: ParamType, destination: Any, value: str) -> None:
    """
    Convert text and write it into a destination.

    A `Slot` destination is assigned, any other destination is appended to.
    Empty text is ignored so an absent default leaves storage untouched.

    Args:
        param_type (ParamType): The declared type.
        destination (Slot | list): Where the converted value goes.
        value (str): The raw token text.

    Raises:
        MalformedValueError: If the text cannot be converted.
    """
    if value == "":
        return
    single = isinstance(destination, Slot)
    try:
        converted = convert_value(value, param_type)
    except ValueError as error:
        logger.debug("Conversion of %r to %s failed: %s", value, param_type, error)
        hint = "" if single else MULTI_VALUE_HINT
        raise MalformedValueError(param_type.name, value, hint) from error
    if single:
        destination.set(converted)
    else:
        destination.append(converted)
