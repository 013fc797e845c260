# Flagbind Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ParamRegistry`, the mapping from option name to `Param`.

Registering a name that already exists replaces the earlier parameter. Iteration
yields parameters sorted by name; callers should not rely on any particular order.
"""
from typing import Iterator

from flagbind.logger import logger
from flagbind.parser.param import Param


class ParamRegistry:
    """Insert-or-replace store of declared parameters keyed by name."""

    def __init__(self) -> None:
        self._params: dict[str, Param] = {}

    def register(self, param: Param) -> Param | None:
        """
        Insert `param`, replacing any parameter with the same name.

        Returns:
            Param | None: The replaced parameter, if there was one.
        """
        previous = self._params.get(param.name)
        if previous is not None:
            logger.debug("Replacing previously registered parameter '%s'", param.name)
        self._params[param.name] = param
        return previous

    def lookup(self, name: str) -> Param | None:
        return self._params.get(name)

    def all(self) -> Iterator[Param]:
        """Yield every registered parameter."""
        for name in sorted(self._params):
            yield self._params[name]

    def __iter__(self) -> Iterator[Param]:
        return self.all()

    def __contains__(self, name: object) -> bool:
        return name in self._params

    def __len__(self) -> int:
        return len(self._params)
