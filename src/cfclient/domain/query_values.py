"""Ordered multi-map of query parameters that filters serialize into."""

from __future__ import annotations

from typing import Iterator
from urllib.parse import urlencode


class QueryValues:
    """Query parameter name -> list of values, in insertion order.

    ``add`` always appends, so two filters writing the same tag both survive.
    """

    def __init__(self) -> None:
        self._values: dict[str, list[str]] = {}

    def add(self, name: str, value: str) -> None:
        self._values.setdefault(name, []).append(value)

    def get(self, name: str) -> str | None:
        """Return the first value for ``name``, or None."""
        values = self._values.get(name)
        if not values:
            return None
        return values[0]

    def get_all(self, name: str) -> list[str]:
        return list(self._values.get(name, []))

    def items(self) -> Iterator[tuple[str, list[str]]]:
        for name, values in self._values.items():
            yield name, list(values)

    def to_params(self) -> list[tuple[str, str]]:
        """Flatten into (name, value) pairs suitable for httpx params."""
        return [(name, value) for name, values in self._values.items() for value in values]

    def encode(self) -> str:
        """URL-encode with keys sorted; values keep their insertion order."""
        pairs = [(name, value) for name in sorted(self._values) for value in self._values[name]]
        return urlencode(pairs)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"QueryValues({self._values!r})"
