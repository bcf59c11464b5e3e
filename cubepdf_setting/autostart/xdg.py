"""freedesktop.org autostart entry (``~/.config/autostart``)."""

from __future__ import annotations

import os
from pathlib import Path

from cubepdf_setting import config
from cubepdf_setting.autostart import AutoStartRegistrar
from cubepdf_setting.errors import AutoStartError
from cubepdf_setting.logging_utils import get_logger

logger = get_logger()


def autostart_dir() -> Path:
    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / "autostart"


class XdgAutoStart(AutoStartRegistrar):
    def __init__(
        self,
        checker: str | Path | None = None,
        name: str = config.CHECKER_NAME,
        directory: Path | None = None,
    ):
        super().__init__(checker, name)
        self.directory = directory if directory is not None else autostart_dir()

    @property
    def entry_path(self) -> Path:
        return self.directory / f"{self.name}.desktop"

    def set(self, enabled: bool) -> None:
        registered = self.is_registered()
        try:
            if enabled:
                self.directory.mkdir(parents=True, exist_ok=True)
                self.entry_path.write_text(self._desktop_entry(), encoding="utf-8")
            else:
                self.entry_path.unlink(missing_ok=True)
        except OSError as e:
            raise AutoStartError(
                "Run-at-login entry could not be written",
                detail=f"{self.entry_path}: {e}",
            ) from e

        if enabled != registered:
            logger.info(
                "%s run-at-login entry %s",
                "Registered" if enabled else "Removed",
                self.entry_path,
            )

    def is_registered(self) -> bool:
        return self.entry_path.is_file()

    def _desktop_entry(self) -> str:
        return (
            "[Desktop Entry]\n"
            "Type=Application\n"
            f"Name={self.name}\n"
            f"Exec={self.command()}\n"
            "NoDisplay=true\n"
            "X-GNOME-Autostart-enabled=true\n"
        )
