"""QSettings-backed store: registry on Windows, INI/plist elsewhere."""

from __future__ import annotations

from pathlib import Path

from PySide6.QtCore import QSettings

from cubepdf_setting import config
from cubepdf_setting.errors import StoreUnavailableError
from cubepdf_setting.logging_utils import get_logger
from cubepdf_setting.stores import SettingsStore

logger = get_logger()


class QSettingsStore(SettingsStore):
    """Wraps QSettings for the CubePDF user settings.

    The default instance maps to ``HKCU\\Software\\CubeSoft\\CubePDF\\v2`` on
    Windows, the same location older releases used.
    """

    def __init__(self, settings: QSettings | None = None, group: str = config.SETTINGS_GROUP):
        self._qs = settings if settings is not None else QSettings(
            config.ORGANIZATION, config.APPLICATION
        )
        self._group = group
        if group:
            self._qs.beginGroup(group)
        self._check_status("open")

    @classmethod
    def from_ini(cls, path: str | Path, group: str = config.SETTINGS_GROUP) -> "QSettingsStore":
        return cls(QSettings(str(path), QSettings.Format.IniFormat), group=group)

    # ---- reads ----

    def get_int(self, key: str) -> int | None:
        if not self._qs.contains(key):
            return None
        return self.coerce_int(self._qs.value(key))

    def get_string(self, key: str) -> str | None:
        if not self._qs.contains(key):
            return None
        raw = self._qs.value(key)
        # INI keeps an empty string as a bare "key=" line.
        return "" if raw is None else self.coerce_string(raw)

    def keys(self) -> list[str]:
        return sorted(self._qs.childKeys())

    # ---- writes ----

    def set_int(self, key: str, value: int) -> None:
        self._qs.setValue(key, int(value))

    def set_string(self, key: str, value: str) -> None:
        self._qs.setValue(key, str(value))

    def delete(self, key: str) -> None:
        self._qs.remove(key)

    def flush(self) -> None:
        self._qs.sync()
        self._check_status("write")

    def describe(self) -> str:
        location = self._qs.fileName()
        return f"{location}\\{self._group}" if self._group else location

    def _check_status(self, stage: str) -> None:
        status = self._qs.status()
        if status == QSettings.Status.AccessError:
            logger.error("Settings store %s failed: %s", stage, self._qs.fileName())
            raise StoreUnavailableError(
                f"Settings store is not accessible ({stage})",
                detail=self._qs.fileName(),
            )
        if status == QSettings.Status.FormatError:
            # Unreadable file: values fall back to defaults on load.
            logger.warning("Settings store is malformed: %s", self._qs.fileName())
