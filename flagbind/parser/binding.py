# Flagbind Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Destination storage for parsed parameter values.

A parameter with an arity of exactly one binds to a `Slot`, a tiny mutable
holder for a single value. Every other arity binds to a mutable sequence,
usually a plain `list`, that values are appended to in command-line order.

`bind_destination` checks the caller-supplied storage against the declared
arity at registration time and allocates fresh storage when none is given.
"""
from __future__ import annotations

from collections.abc import MutableSequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from flagbind.exceptions import ParamSpecError

T = TypeVar("T")


@dataclass
class Slot(Generic[T]):
    """Holds the single value of a one-value parameter."""

    value: T | None = None

    def set(self, value: T) -> None:
        self.value = value

    def get(self) -> T | None:
        return self.value


def is_scalar(arity: int) -> bool:
    return arity == 1


def bind_destination(destination: Any, arity: int, name: str) -> Any:
    """
    Validate or allocate the destination for a parameter.

    Args:
        destination (Any): Caller-supplied storage, or None to allocate one.
        arity (int): The declared number of values.
        name (str): Parameter name, used in error messages.

    Returns:
        Slot | MutableSequence: The storage values will be written to.

    Raises:
        ParamSpecError: If the storage does not match the arity.
    """
    if destination is None:
        return Slot() if is_scalar(arity) else []
    if is_scalar(arity):
        if not isinstance(destination, Slot):
            raise ParamSpecError(
                f"Parameter '{name}' takes one value and needs a Slot destination, "
                f"got {type(destination).__name__}"
            )
    elif not isinstance(destination, MutableSequence):
        raise ParamSpecError(
            f"Parameter '{name}' takes multiple values and needs a list destination, "
            f"got {type(destination).__name__}"
        )
    return destination
