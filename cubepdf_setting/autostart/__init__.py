"""Run-at-login registration of the update checker."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from pathlib import Path

from cubepdf_setting import config


class AutoStartRegistrar(ABC):
    """Creates or removes one named run-at-login entry.

    ``set`` is idempotent: enabling an existing entry overwrites it, disabling
    a missing entry does nothing.
    """

    def __init__(self, checker: str | Path | None = None, name: str = config.CHECKER_NAME):
        self.name = name
        self.checker = Path(checker) if checker is not None else config.checker_path()

    @abstractmethod
    def set(self, enabled: bool) -> None:
        ...

    @abstractmethod
    def is_registered(self) -> bool:
        ...

    def command(self) -> str:
        return f'"{self.checker}"'


from cubepdf_setting.autostart.memory import MemoryAutoStart  # noqa: E402
from cubepdf_setting.autostart.run_key import RunKeyAutoStart  # noqa: E402
from cubepdf_setting.autostart.xdg import XdgAutoStart  # noqa: E402


def default_registrar(checker: str | Path | None = None) -> AutoStartRegistrar:
    """Registrar for the current platform."""
    if sys.platform.startswith("win"):
        return RunKeyAutoStart(checker)
    return XdgAutoStart(checker)


__all__ = [
    "AutoStartRegistrar",
    "MemoryAutoStart",
    "RunKeyAutoStart",
    "XdgAutoStart",
    "default_registrar",
]
