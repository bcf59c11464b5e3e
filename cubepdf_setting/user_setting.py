"""CubePDF user settings: load, validate and save.

Stored values may come from an older release, be edited by hand, or be
corrupted. ``UserSetting.load`` never fails on such values; each field falls
back to its default according to ``FIELD_RULES``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Callable

from cubepdf_setting import config, parameter
from cubepdf_setting.autostart import AutoStartRegistrar, default_registrar
from cubepdf_setting.logging_utils import get_logger
from cubepdf_setting.parameter import (
    DownSampling,
    ExistedFile,
    FileType,
    ImageFilter,
    PDFVersion,
    PostProcess,
    Resolution,
)
from cubepdf_setting.stores import QSettingsStore, SettingsStore

logger = get_logger()


# ---------------------------------------------------------------------------
# Field rules
# ---------------------------------------------------------------------------

PATH = "path"  # string; empty or absent -> desktop
TEXT = "text"  # string; absent -> default, empty kept
ENUM = "enum"  # ordinal; unknown -> default
BOOL = "bool"  # int; nonzero -> True


@dataclass(frozen=True)
class FieldRule:
    attr: str
    key: str
    kind: str
    default: Any = None  # path fields resolve the desktop per record


FIELD_RULES: tuple[FieldRule, ...] = (
    FieldRule("output_path", "LastAccess", PATH),
    FieldRule("input_path", "LastInputAccess", PATH),
    FieldRule("user_program", "UserProgram", TEXT, ""),
    FieldRule("user_arguments", "UserArguments", TEXT, config.FILE_PLACEHOLDER),
    FieldRule("file_type", "FileType", ENUM, FileType.PDF),
    FieldRule("pdf_version", "PDFVersion", ENUM, PDFVersion.V1_7),
    FieldRule("resolution", "Resolution", ENUM, Resolution.DPI_300),
    FieldRule("existed_file", "ExistedFile", ENUM, ExistedFile.OVERWRITE),
    FieldRule("post_process", "PostProcess", ENUM, PostProcess.OPEN),
    FieldRule("down_sampling", "DownSampling", ENUM, DownSampling.NONE),
    FieldRule("image_filter", "ImageFilter", ENUM, ImageFilter.FLATE_ENCODE),
    FieldRule("page_rotation", "PageRotation", BOOL, True),
    FieldRule("embed_font", "EmbedFont", BOOL, True),
    FieldRule("grayscale", "Grayscale", BOOL, False),
    FieldRule("web_optimize", "WebOptimize", BOOL, False),
    FieldRule("save_setting", "SaveSetting", BOOL, False),
    FieldRule("check_update", "CheckUpdate", BOOL, True),
    FieldRule("advanced_mode", "AdvancedMode", BOOL, False),
    FieldRule("select_input_file", "SelectInputFile", BOOL, False),
)

RULES_BY_ATTR: dict[str, FieldRule] = {rule.attr: rule for rule in FIELD_RULES}


def _decode_path(store: SettingsStore, rule: FieldRule, desktop: str) -> str:
    raw = store.get_string(rule.key)
    return raw if raw else desktop


def _decode_text(store: SettingsStore, rule: FieldRule, desktop: str) -> str:
    raw = store.get_string(rule.key)
    return rule.default if raw is None else raw


def _decode_enum(store: SettingsStore, rule: FieldRule, desktop: str) -> Enum:
    member = parameter.from_ordinal(type(rule.default), store.get_int(rule.key))
    return rule.default if member is None else member


def _decode_bool(store: SettingsStore, rule: FieldRule, desktop: str) -> bool:
    raw = store.get_int(rule.key)
    return rule.default if raw is None else raw != 0


_DECODERS: dict[str, Callable[[SettingsStore, FieldRule, str], Any]] = {
    PATH: _decode_path,
    TEXT: _decode_text,
    ENUM: _decode_enum,
    BOOL: _decode_bool,
}


def _encode(store: SettingsStore, rule: FieldRule, value: Any) -> None:
    if rule.kind in (PATH, TEXT):
        store.set_string(rule.key, value)
    elif rule.kind == ENUM:
        store.set_int(rule.key, parameter.to_ordinal(value))
    else:
        store.set_int(rule.key, 1 if value else 0)


# ---------------------------------------------------------------------------
# Record
# ---------------------------------------------------------------------------

class UserSetting:
    """All user settings of one session.

    With ``load=True`` the stored values are read immediately; with
    ``load=False`` every field keeps its default until ``load()`` is called.
    ``delete_on_close`` has no stored key and always starts as False.
    """

    output_path: str
    input_path: str
    user_program: str
    user_arguments: str
    file_type: FileType
    pdf_version: PDFVersion
    resolution: Resolution
    existed_file: ExistedFile
    post_process: PostProcess
    down_sampling: DownSampling
    image_filter: ImageFilter
    page_rotation: bool
    embed_font: bool
    grayscale: bool
    web_optimize: bool
    save_setting: bool
    check_update: bool
    advanced_mode: bool
    select_input_file: bool
    delete_on_close: bool

    def __init__(
        self,
        store: SettingsStore | None = None,
        registrar: AutoStartRegistrar | None = None,
        *,
        load: bool = True,
        desktop: str | Path | None = None,
    ):
        self._store = store if store is not None else QSettingsStore()
        self._registrar = registrar if registrar is not None else default_registrar()
        self._desktop = str(desktop) if desktop is not None else config.desktop_path()
        self.reset()
        self.delete_on_close = False
        if load:
            self.load()

    @property
    def store(self) -> SettingsStore:
        return self._store

    @property
    def registrar(self) -> AutoStartRegistrar:
        return self._registrar

    @property
    def desktop(self) -> str:
        return self._desktop

    def reset(self) -> None:
        """Put every persisted field back to its default."""
        for rule in FIELD_RULES:
            value = self._desktop if rule.kind == PATH else rule.default
            setattr(self, rule.attr, value)

    def load(self) -> bool:
        for rule in FIELD_RULES:
            setattr(self, rule.attr, _DECODERS[rule.kind](self._store, rule, self._desktop))
        logger.debug("Loaded user settings from %s", self._store.describe())
        return True

    def save(self) -> bool:
        """Write every persisted field, then sync the run-at-login entry.

        Values are written as held; nothing is re-validated. Keys written
        before a failure stay written.
        """
        for rule in FIELD_RULES:
            _encode(self._store, rule, getattr(self, rule.attr))
        self._store.flush()
        self._registrar.set(self.check_update)
        logger.debug("Saved user settings to %s", self._store.describe())
        return True

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        for rule in FIELD_RULES:
            value = getattr(self, rule.attr)
            data[rule.attr] = value.name if isinstance(value, Enum) else value
        data["delete_on_close"] = self.delete_on_close
        return data

    def __repr__(self) -> str:
        return f"UserSetting({self._store.describe()!r})"
