"""
Flagbind Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .binding import Slot
from .param import UNBOUNDED, Param
from .param_parser import HELP_FLAG, ParamParser
from .param_type import ParamType
from .parse_result import ParseResult
from .registry import ParamRegistry
from .tokenizer import tokenize

__all__ = [
    "HELP_FLAG",
    "Param",
    "ParamParser",
    "ParamRegistry",
    "ParamType",
    "ParseResult",
    "Slot",
    "UNBOUNDED",
    "tokenize",
]
