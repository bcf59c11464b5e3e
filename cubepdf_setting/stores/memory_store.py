"""In-process store, used by tests and dry runs."""

from __future__ import annotations

from typing import Any

from cubepdf_setting.stores import SettingsStore


class MemoryStore(SettingsStore):
    """Dict-backed store.

    ``initial`` may hold values of any type so that tests can plant the same
    malformed data a tampered registry would contain.
    """

    def __init__(self, initial: dict[str, Any] | None = None):
        self.data: dict[str, Any] = dict(initial or {})

    def get_int(self, key: str) -> int | None:
        return self.coerce_int(self.data.get(key))

    def get_string(self, key: str) -> str | None:
        return self.coerce_string(self.data.get(key))

    def set_int(self, key: str, value: int) -> None:
        self.data[key] = int(value)

    def set_string(self, key: str, value: str) -> None:
        self.data[key] = str(value)

    def delete(self, key: str) -> None:
        self.data.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self.data)

    def describe(self) -> str:
        return "memory"
