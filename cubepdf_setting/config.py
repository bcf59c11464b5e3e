"""Fixed identifiers and environment lookups for the settings store."""

from __future__ import annotations

import sys
from pathlib import Path

from PySide6.QtCore import QStandardPaths

ORGANIZATION = "CubeSoft"
APPLICATION = "CubePDF"
SETTINGS_GROUP = "v2"

RUN_KEY = r"HKEY_CURRENT_USER\Software\Microsoft\Windows\CurrentVersion\Run"
CHECKER_NAME = "cubepdf-checker"
CHECKER_EXECUTABLE = "cubepdf-checker.exe"

# Placeholder replaced by the output file path when the user program runs.
FILE_PLACEHOLDER = "%%FILE%%"


def desktop_path() -> str:
    """Desktop directory of the current user."""
    location = QStandardPaths.writableLocation(
        QStandardPaths.StandardLocation.DesktopLocation
    )
    return location or str(Path.home())


def install_dir() -> Path:
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    return Path(__file__).resolve().parent


def checker_path() -> Path:
    """Update checker executable shipped next to the application."""
    return install_dir() / CHECKER_EXECUTABLE
