# Flagbind Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ParamParser`, the parser context that owns a registry of
declared parameters, parses an argument vector into their bound destinations and
renders help text describing them.

Key Features:
- Declarative parameter registration via `add_param()`
- Typed destinations: a `Slot` per one-value option, a list for multi-value options
- `--opt value` and `--opt=value` forms, quoted values with embedded spaces
- Fixed arity and unbounded (-1) arity options
- Required option validation after the whole vector is consumed
- `--help` short-circuit that stops parsing as soon as it is seen

Public Interface:
- `add_param(...)`: Register a parameter with type, name, help text and binding.
- `add_help(...)`: Register the conventional `--help` switch.
- `parse_args(...)`: Parse an argument vector, raising `ParamParseError` on failure.
- `try_parse(...)`: Parse an argument vector into a `ParseResult` without raising.
- `parse(...)`: Parse an argument vector, exiting the process on failure.
- `format_help()`: Return the help text for all parameters.

Example Usage:
    parser = ParamParser()
    iterations = Slot()
    seeds = []
    parser.add_param("int", "--iterations", "The number of iterations.", destination=iterations)
    parser.add_param("float", "--seeds", "Seeds.", destination=seeds, arity=3, required=False)
    parser.add_param("string", "--name", "Run name.", default="simulation")
    parser.add_help()

    parser.parse(["--iterations=10", "--seeds", "1", "2", "3"])
    # iterations.value == 10, seeds == [1.0, 2.0, 3.0]

Options are matched verbatim, so names do not need leading dashes. Values are
consumed positionally: once an option starts reading values the next tokens are
its values, even when they look like option names.
"""
from __future__ import annotations

import sys
from typing import Any, Sequence

from rich.console import Console
from rich.markup import escape

from flagbind.console import console, error_console
from flagbind.exceptions import (
    MalformedValueError,
    MissingRequiredError,
    ParamParseError,
    ParamSpecError,
    UnrecognizedOptionError,
)
from flagbind.logger import logger
from flagbind.parser.binding import bind_destination
from flagbind.parser.converter import coerce_bool
from flagbind.parser.param import UNBOUNDED, Param
from flagbind.parser.param_type import ParamType
from flagbind.parser.parse_result import ParseResult
from flagbind.parser.registry import ParamRegistry
from flagbind.parser.tokenizer import EQUALS, build_buffer, scan_spans

HELP_FLAG = "--help"
HELP_TEXT = "Prints this help message."


class ParamParser:
    """
    Parser context holding declared parameters.

    Each instance has its own registry, so independent parsers can coexist in
    one process. Parameters are declared first, then a single argument vector
    is parsed, after which the help text can be rendered.

    Features:
    - Type conversion for eight value types.
    - Single, fixed-count and unbounded multi-value options.
    - Default values applied at registration time.
    - Required option checking.
    - Result type or exception based error reporting.
    - Process exit with a diagnostic at the outermost boundary.
    """

    def __init__(self) -> None:
        """Initialize the ParamParser."""
        self.console: Console = console
        self.error_console: Console = error_console
        self._registry = ParamRegistry()

    def _validate_name(self, name: str) -> str:
        if not isinstance(name, str) or not name:
            raise ParamSpecError(f"Parameter name must be a non-empty string, got {name!r}")
        if EQUALS in name or any(ch.isspace() for ch in name):
            raise ParamSpecError(
                f"Parameter name '{name}' cannot contain whitespace or '{EQUALS}'"
            )
        return name

    def _validate_help(self, help: str, name: str) -> str:
        if not isinstance(help, str) or not help.strip():
            raise ParamSpecError(f"Parameter '{name}' must have help text")
        return help

    def _validate_type(self, param_type: ParamType | str) -> ParamType:
        if isinstance(param_type, ParamType):
            return param_type
        try:
            return ParamType(param_type)
        except ValueError as error:
            raise ParamSpecError(str(error)) from error

    def _validate_arity(self, arity: int, name: str) -> int:
        if isinstance(arity, bool) or not isinstance(arity, int):
            raise ParamSpecError(f"arity for '{name}' must be an int, got {arity!r}")
        if arity != UNBOUNDED and arity < 1:
            raise ParamSpecError(
                f"arity for '{name}' must be a positive integer or {UNBOUNDED}, got {arity}"
            )
        return arity

    def _resolve_default(self, default: Any, param_type: ParamType) -> str:
        """Get the raw default text for the parameter."""
        if default is None:
            return ""
        if param_type is ParamType.BOOL:
            if isinstance(default, bool):
                return "true" if default else "false"
            try:
                coerce_bool(default)
            except (ValueError, AttributeError):
                raise ParamSpecError(
                    f"Unrecognized default value for boolean option: '{default}'"
                ) from None
            return default
        if isinstance(default, bool) or not isinstance(default, (str, int, float)):
            raise ParamSpecError(
                f"Default value {default!r} must be text or a number, "
                f"got {type(default).__name__}"
            )
        return str(default)

    def _determine_required(
        self, required: bool | None, param_type: ParamType, default: Any
    ) -> bool:
        """Determine if the parameter is required."""
        if param_type is ParamType.BOOL:
            return False
        if required is None:
            return default is None
        return required

    def _apply_default(self, param: Param) -> None:
        if param.is_bool:
            param.assign(param.default or "false")
            param.satisfied = True
            return
        try:
            param.assign(param.default)
        except MalformedValueError as error:
            raise ParamSpecError(
                f"Default value '{param.default}' for '{param.name}' cannot be "
                f"converted to {param.type.name}"
            ) from error

    def add_param(
        self,
        type: ParamType | str,
        name: str,
        help: str,
        *,
        destination: Any = None,
        arity: int = 1,
        default: Any = None,
        required: bool | None = None,
    ) -> Param:
        """
        Declare a new parameter.

        The default, when given, is applied to the destination immediately: it is
        assigned for single-value parameters and appended once as a seed value for
        multi-value parameters.

        Args:
            type (ParamType | str): The value type, or one of its names or aliases.
            name (str): The exact token selecting the option (e.g. "--seed").
            help (str): Help text, must not be empty.
            destination (Slot | list | None): Storage for values; allocated if None.
            arity (int): Number of values, or -1 to read every remaining token.
            default (Any): Default value as text (or a number / bool).
            required (bool | None): Whether the option must be given. Derived from
                `default` when None. Boolean parameters are never required.

        Returns:
            Param: The registered parameter.

        Raises:
            ParamSpecError: If any part of the declaration is invalid.
        """
        param_type = self._validate_type(type)
        name = self._validate_name(name)
        help = self._validate_help(help, name)
        arity = self._validate_arity(arity, name)
        if param_type is ParamType.BOOL and arity != 1:
            raise ParamSpecError(f"Boolean parameter '{name}' cannot take values")
        default_text = self._resolve_default(default, param_type)
        destination = bind_destination(destination, arity, name)
        param = Param(
            type=param_type,
            destination=destination,
            name=name,
            help=help,
            arity=arity,
            required=self._determine_required(required, param_type, default),
            default=default_text,
        )
        self._apply_default(param)
        self._registry.register(param)
        logger.debug("Registered %s", param)
        return param

    def add_help(self, destination: Any = None) -> Param:
        """Register the conventional `--help` switch."""
        return self.add_param(
            ParamType.BOOL, HELP_FLAG, HELP_TEXT, destination=destination
        )

    def get_param(self, name: str) -> Param | None:
        """
        Return the Param registered under a name.

        Args:
            name (str): The option name.

        Returns:
            Param or None: Matching Param instance, if declared.
        """
        return self._registry.lookup(name)

    def values(self) -> dict[str, Any]:
        """Return the current value of every parameter keyed by name."""
        return {param.name: param.value for param in self._registry.all()}

    def parse_args(self, argv: Sequence[str] | None = None) -> ParseResult:
        """
        Parse an argument vector into the bound destinations.

        Args:
            argv (Sequence[str] | None): Arguments without the program name.
                Defaults to `sys.argv[1:]`.

        Returns:
            ParseResult: Success, with `help_requested` set if `--help` was seen.

        Raises:
            UnrecognizedOptionError: An option name is not registered.
            MalformedValueError: A value cannot be converted to its type.
            MissingRequiredError: Required parameters were not satisfied.
        """
        if argv is None:
            argv = sys.argv[1:]

        for param in self._registry.all():
            if param.is_bool:
                self._apply_default(param)
            else:
                param.satisfied = False

        buffer = build_buffer(argv)
        spans = scan_spans(buffer)
        logger.debug("Parsing %d tokens from %r", len(spans), buffer)

        current: Param | None = None
        remaining = 0
        for index, span in enumerate(spans):
            token = span.text(buffer)
            if current is None:
                param = self._registry.lookup(token)
                if param is None:
                    raise UnrecognizedOptionError(token)
                if param.is_bool:
                    param.assign("true")
                    param.satisfied = True
                    if token == HELP_FLAG:
                        logger.debug("Help requested, skipping remaining tokens")
                        return ParseResult(help_requested=True, tokens=index + 1)
                else:
                    current = param
                    remaining = param.arity
            else:
                current.assign(token)
                remaining -= 1
                if remaining == 0:
                    current.satisfied = True
                    current = None
                elif remaining < 0:
                    # Unbounded: every later token belongs to this option.
                    current.satisfied = True

        missing = [
            param.name
            for param in self._registry.all()
            if param.required and not param.satisfied
        ]
        if missing:
            raise MissingRequiredError(missing)
        return ParseResult(tokens=len(spans))

    def try_parse(self, argv: Sequence[str] | None = None) -> ParseResult:
        """Parse like `parse_args`, returning failures inside the `ParseResult`."""
        try:
            return self.parse_args(argv)
        except ParamParseError as error:
            logger.debug("Parsing failed (%s): %s", error.kind, error)
            return ParseResult(error=error)

    def parse(self, argv: Sequence[str] | None = None) -> ParseResult:
        """
        Parse an argument vector, terminating the process on any failure.

        The diagnostic is written to standard error and the process exits with
        status 1.
        """
        result = self.try_parse(argv)
        if result.error is not None:
            self.error_console.print(
                f"[error]{escape(str(result.error))}[/error]",
                highlight=False,
                soft_wrap=True,
            )
            sys.exit(1)
        return result

    def format_help(self) -> str:
        """
        Render every parameter as help text.

        Returns:
            str: Name, help text, arity and type, and default for each parameter.
        """
        details = ""
        for param in self._registry.all():
            details += f"\t{param.name}"
            details += f"\n\t\t{param.help}"
            arity_text = param.get_arity_text()
            if arity_text:
                details += f"\n\t\t{arity_text}"
            if not param.required:
                details += f"\n\t\tdefault: '{param.default}'"
            details += "\n"
        return details

    def print_help(self) -> None:
        """Print the help text using Rich output."""
        self.console.print(
            self.format_help(), markup=False, highlight=False, soft_wrap=True, end=""
        )

    def __contains__(self, name: object) -> bool:
        return name in self._registry

    def __len__(self) -> int:
        return len(self._registry)

    def __str__(self) -> str:
        """Return a human-readable summary of the parser state."""
        params = list(self._registry.all())
        required = sum(param.required for param in params)
        satisfied = sum(param.satisfied for param in params)
        return (
            f"ParamParser(params={len(params)}, required={required}, "
            f"satisfied={satisfied})"
        )

    def __repr__(self) -> str:
        return str(self)
