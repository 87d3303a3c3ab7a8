"""Key-value stores for persisted conflict preferences."""

from __future__ import annotations

from typing import Protocol


class PreferenceStore(Protocol):
    """Durable string key-value store the conflict mode is persisted in."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class InMemoryPreferenceStore:
    """Dict-backed PreferenceStore, keyed by preference name."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._store: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._store.get(key)

    def set(self, key: str, value: str) -> None:
        self._store[key] = value
