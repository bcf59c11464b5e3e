"""In-process registrar."""

from __future__ import annotations

from pathlib import Path

from cubepdf_setting import config
from cubepdf_setting.autostart import AutoStartRegistrar


class MemoryAutoStart(AutoStartRegistrar):
    def __init__(self, checker: str | Path | None = None, name: str = config.CHECKER_NAME):
        super().__init__(checker, name)
        self.entries: dict[str, str] = {}

    def set(self, enabled: bool) -> None:
        if enabled:
            self.entries[self.name] = self.command()
        else:
            self.entries.pop(self.name, None)

    def is_registered(self) -> bool:
        return self.name in self.entries
