"""
Flagbind Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.

Demo program: `python -m flagbind --iterations 10 --seeds 1 2 3 --name "run one"`
"""

import sys
from typing import Sequence

from rich.markup import escape

from flagbind.console import console, error_console
from flagbind.parser import ParamParser, ParamType, Slot
from flagbind.utils import setup_logging


def build_parser() -> tuple[ParamParser, dict[str, Slot | list]]:
    parser = ParamParser()
    bindings: dict[str, Slot | list] = {
        "iterations": Slot(),
        "seeds": [],
        "name": Slot(),
        "log_mode": Slot(),
        "help": Slot(),
    }
    parser.add_param(
        ParamType.INT,
        "--iterations",
        "The number of iterations to perform.",
        destination=bindings["iterations"],
    )
    parser.add_param(
        ParamType.FLOAT,
        "--seeds",
        "The seeds to begin simulation.",
        destination=bindings["seeds"],
        arity=3,
        required=False,
    )
    parser.add_param(
        ParamType.STRING,
        "--name",
        "The name for this simulation run.",
        destination=bindings["name"],
        default="simulation",
    )
    parser.add_param(
        ParamType.STRING,
        "--log-mode",
        "Log output mode, 'cli' or 'json'.",
        destination=bindings["log_mode"],
        default="cli",
    )
    parser.add_help(bindings["help"])
    return parser, bindings


def main(argv: Sequence[str] | None = None) -> int:
    parser, bindings = build_parser()
    parser.parse(sys.argv[1:] if argv is None else argv)
    if bindings["help"].value:
        parser.print_help()
        return 0
    try:
        setup_logging(mode=bindings["log_mode"].value)
    except ValueError as error:
        error_console.print(f"[error]{escape(str(error))}[/error]", highlight=False)
        return 1
    console.print(
        f"iterations: {bindings['iterations'].value}", highlight=False, markup=False
    )
    console.print(f"seeds: {bindings['seeds']}", highlight=False, markup=False)
    console.print(f"name: {bindings['name'].value}", highlight=False, markup=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
