"""Key-value store base class and shared value coercion."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class SettingsStore(ABC):
    """Per-user store of named scalar values.

    Getters return None when a key is absent or holds a value of the wrong
    kind; callers decide which default applies.
    """

    @abstractmethod
    def get_int(self, key: str) -> int | None:
        ...

    @abstractmethod
    def get_string(self, key: str) -> str | None:
        ...

    @abstractmethod
    def set_int(self, key: str, value: int) -> None:
        ...

    @abstractmethod
    def set_string(self, key: str, value: str) -> None:
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        ...

    @abstractmethod
    def keys(self) -> list[str]:
        ...

    def flush(self) -> None:
        """Push pending writes to durable storage."""

    def describe(self) -> str:
        return type(self).__name__

    # ---- value coercion ----

    @staticmethod
    def coerce_int(raw: Any) -> int | None:
        # Registry DWORDs arrive as int, INI values as decimal text.
        if raw is None or isinstance(raw, bool):
            return None
        if isinstance(raw, int):
            return raw
        if isinstance(raw, str):
            try:
                return int(raw.strip(), 10)
            except ValueError:
                return None
        return None

    @staticmethod
    def coerce_string(raw: Any) -> str | None:
        return raw if isinstance(raw, str) else None


from cubepdf_setting.stores.memory_store import MemoryStore  # noqa: E402
from cubepdf_setting.stores.qsettings_store import QSettingsStore  # noqa: E402

__all__ = ["SettingsStore", "MemoryStore", "QSettingsStore"]
