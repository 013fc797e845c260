# Flagbind Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ParamType`, the enum of value types a Flagbind parameter can hold.

Each member names one conversion target used by the value converter and the
help formatter. Alias coercion lets callers declare parameters with short or
familiar spellings.

Exports:
    - ParamType: Enum of supported value types.

Example:
    ParamType("int")     → ParamType.INT
    ParamType("str")     → ParamType.STRING (via alias)
    ParamType("boolean") → ParamType.BOOL (via alias)
"""
from __future__ import annotations

from enum import Enum


class ParamType(Enum):
    """
    Value type tags for declared parameters.

    Members:
        BOOL: Presence switch, `True` when the option appears.
        INT: Signed 32-bit integer.
        UINT: Unsigned 32-bit integer.
        FLOAT: Single-precision float.
        LONG: Signed 64-bit integer.
        DOUBLE: Double-precision float.
        CHAR: A single character.
        STRING: Free text.

    Aliases:
        - "boolean" → "bool"
        - "integer" → "int"
        - "unsigned" → "uint"
        - "str" → "string"
    """

    BOOL = "bool"
    INT = "int"
    UINT = "uint"
    FLOAT = "float"
    LONG = "long"
    DOUBLE = "double"
    CHAR = "char"
    STRING = "string"

    @classmethod
    def choices(cls) -> list[ParamType]:
        """Return a list of all parameter types."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "boolean": "bool",
            "integer": "int",
            "unsigned": "uint",
            "str": "string",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ParamType:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @property
    def display_name(self) -> str:
        """Name used in help text."""
        if self is ParamType.UINT:
            return "unsigned int"
        return self.value

    def __str__(self) -> str:
        """Return the string representation of the parameter type."""
        return self.value
