# Flagbind Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Param` dataclass used by `ParamParser` to represent one declared
command-line option together with its bound storage.

A `Param` is created at registration time, mutated while parsing (its
destination receives values and `satisfied` flips once all values are read)
and read afterwards for help rendering.

Key Attributes:
- `type`: `ParamType` the values are converted to
- `destination`: `Slot` for one value, a list for any other arity
- `name`: The exact token that selects the option (e.g. `--iterations`)
- `help`: Free-text description shown in help output
- `arity`: 1, a fixed count N > 1, or -1 for unbounded
- `required`: Whether parsing fails when the option is never satisfied
- `satisfied`: Whether all expected values have been read
- `default`: Raw default text, empty when none was given

Parameters should be created using `ParamParser.add_param()`.
"""
from dataclasses import dataclass
from typing import Any

from flagbind.parser.binding import Slot
from flagbind.parser.converter import store_value
from flagbind.parser.param_type import ParamType

UNBOUNDED = -1


@dataclass(eq=False)
class Param:
    """
    Represents a declared command-line option.

    Attributes:
        type (ParamType): The value type of the option.
        destination (Slot | list): Storage the parsed values are written into.
        name (str): The long phrase that selects this option on the command line.
        help (str): Help text for the option.
        arity (int): Number of values expected, or -1 for unbounded.
        required (bool): True if the option must be satisfied by parsing.
        satisfied (bool): True once every expected value has been read.
        default (str): Raw default text, empty if none.
    """

    type: ParamType
    destination: Any
    name: str
    help: str
    arity: int = 1
    required: bool = True
    satisfied: bool = False
    default: str = ""

    @property
    def is_bool(self) -> bool:
        return self.type is ParamType.BOOL

    @property
    def is_unbounded(self) -> bool:
        return self.arity == UNBOUNDED

    @property
    def value(self) -> Any:
        """The current stored value, unwrapped from its `Slot`."""
        if isinstance(self.destination, Slot):
            return self.destination.value
        return self.destination

    def assign(self, value: str) -> None:
        """Convert `value` and write it into the destination."""
        store_value(self.type, self.destination, value)

    def get_arity_text(self) -> str:
        """Get the arity and type description used in help output."""
        if self.is_bool:
            return ""
        type_name = self.type.display_name
        if self.is_unbounded:
            return f"any number of arguments of type {type_name}."
        plural = "s" if self.arity != 1 else ""
        return f"{self.arity} argument{plural} of type {type_name}."

    def __str__(self) -> str:
        return (
            f"Param(name={self.name!r}, type={self.type}, arity={self.arity}, "
            f"required={self.required}, satisfied={self.satisfied})"
        )
