# Flagbind Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Result type returned by `ParamParser.try_parse`.

A `ParseResult` is either a success, optionally flagged as a help request that
stopped parsing early, or a failure carrying the `ParamParseError` and its
`ErrorKind`.
"""
from dataclasses import dataclass

from flagbind.exceptions import ErrorKind, ParamParseError


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing one argument vector."""

    help_requested: bool = False
    tokens: int = 0
    error: ParamParseError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> ErrorKind | None:
        """The failure kind, or None on success."""
        if self.error is None:
            return None
        return self.error.kind
