"""Per-load registry of canonical keys and whether each variable was set."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from envconf.errors import DuplicateKeyError


class KeyRegistry:
    """Tracks every leaf key resolved during one load pass."""

    __slots__ = ("_statuses",)

    def __init__(self) -> None:
        self._statuses: dict[str, bool] = {}

    def register(self, key: str) -> None:
        """Register ``key``; a second registration raises ``DuplicateKeyError``."""

        if key in self._statuses:
            raise DuplicateKeyError(key)
        self._statuses[key] = False

    def mark_present(self, key: str) -> None:
        if key not in self._statuses:
            raise KeyError(f"key {key} was never registered")
        self._statuses[key] = True

    def snapshot(self) -> Mapping[str, bool]:
        """Return an immutable copy of key -> presence in registration order."""

        return MappingProxyType(dict(self._statuses))

    def __contains__(self, key: object) -> bool:
        return key in self._statuses

    def __len__(self) -> int:
        return len(self._statuses)

    def __iter__(self) -> Iterator[str]:
        return iter(self._statuses)


__all__ = ["KeyRegistry"]
