"""Closed per-variant configuration store."""

from __future__ import annotations

import copy
from collections.abc import Iterator, Mapping
from typing import Any

from .errors import UnknownOption


class GraphConfig:
    """Named options seeded from a variant's defaults.

    The option set is fixed once the defaults are applied: overrides, reads and
    writes of a name that the defaults did not declare raise UnknownOption.
    """

    def __init__(
        self,
        defaults: Mapping[str, Any],
        overrides: Mapping[str, Any] | None = None,
        variant: str = "graph",
    ):
        self.variant = variant
        # Lists in defaults must not be shared between graph instances
        self._values: dict[str, Any] = copy.deepcopy(dict(defaults))
        for name, value in (overrides or {}).items():
            self.set(name, value)

    def get(self, name: str) -> Any:
        """Return the current value of option ``name``."""
        try:
            return self._values[name]
        except KeyError:
            raise UnknownOption(name, self.variant) from None

    def set(self, name: str, value: Any) -> Any:
        """Overwrite option ``name`` and return the new value."""
        if name not in self._values:
            raise UnknownOption(name, self.variant)
        self._values[name] = value
        return value

    def names(self) -> list[str]:
        return sorted(self._values)

    def as_dict(self) -> dict[str, Any]:
        return dict(self._values)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __repr__(self) -> str:
        return f"GraphConfig(variant={self.variant!r}, options={len(self._values)})"
