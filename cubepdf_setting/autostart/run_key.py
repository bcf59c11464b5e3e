"""Windows ``CurrentVersion\\Run`` registration through QSettings."""

from __future__ import annotations

from pathlib import Path

from PySide6.QtCore import QSettings

from cubepdf_setting import config
from cubepdf_setting.autostart import AutoStartRegistrar
from cubepdf_setting.errors import AutoStartError
from cubepdf_setting.logging_utils import get_logger

logger = get_logger()


class RunKeyAutoStart(AutoStartRegistrar):
    """Registers the checker under ``HKCU\\...\\CurrentVersion\\Run``.

    Any QSettings can be injected in place of the registry key; the tests use
    an INI file.
    """

    def __init__(
        self,
        checker: str | Path | None = None,
        name: str = config.CHECKER_NAME,
        settings: QSettings | None = None,
    ):
        super().__init__(checker, name)
        self._qs = settings if settings is not None else QSettings(
            config.RUN_KEY, QSettings.Format.NativeFormat
        )

    def set(self, enabled: bool) -> None:
        registered = self.is_registered()
        if enabled:
            self._qs.setValue(self.name, self.command())
        else:
            self._qs.remove(self.name)
        self._qs.sync()

        if self._qs.status() == QSettings.Status.AccessError:
            raise AutoStartError(
                "Run-at-login entry could not be written",
                detail=f"{self._qs.fileName()}\\{self.name}",
            )
        if enabled != registered:
            logger.info(
                "%s run-at-login entry %s",
                "Registered" if enabled else "Removed",
                self.name,
            )

    def is_registered(self) -> bool:
        return self._qs.contains(self.name)
