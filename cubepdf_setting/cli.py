"""Inspect and edit the stored CubePDF settings from the command line."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from cubepdf_setting import parameter
from cubepdf_setting.autostart import AutoStartRegistrar, MemoryAutoStart, default_registrar
from cubepdf_setting.errors import ErrorCode, InvalidInputError, SettingError
from cubepdf_setting.logging_utils import get_logger, set_console_level, setup_file_logging
from cubepdf_setting.stores import QSettingsStore, SettingsStore
from cubepdf_setting.user_setting import BOOL, ENUM, RULES_BY_ATTR, FieldRule, UserSetting

logger = get_logger()

_TRUE = {"1", "true", "on", "yes"}
_FALSE = {"0", "false", "off", "no"}


def parse_value(rule: FieldRule, text: str) -> Any:
    """Convert command line text into a value for ``rule``."""
    if rule.kind == ENUM:
        enum_type = type(rule.default)
        if text.strip().isdigit():
            member = parameter.from_ordinal(enum_type, int(text))
            if member is not None:
                return member
        member = enum_type.__members__.get(text.strip().upper())
        if member is None:
            raise InvalidInputError(
                f"Invalid value for {rule.attr}: {text}",
                detail="choices: " + ", ".join(enum_type.__members__),
            )
        return member
    if rule.kind == BOOL:
        lowered = text.strip().lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
        raise InvalidInputError(f"Invalid value for {rule.attr}: {text}", detail="expected on/off")
    return text


def _build_store(args: argparse.Namespace) -> SettingsStore:
    if args.ini:
        return QSettingsStore.from_ini(args.ini)
    return QSettingsStore()


def _build_registrar(args: argparse.Namespace) -> AutoStartRegistrar:
    if args.no_autostart:
        return MemoryAutoStart(args.checker)
    return default_registrar(args.checker)


def run(args: argparse.Namespace) -> int:
    store = _build_store(args)
    registrar = _build_registrar(args)

    if args.command == "show":
        setting = UserSetting(store, registrar)
        print(json.dumps(setting.to_dict(), ensure_ascii=False, indent=2))
        return 0

    if args.command == "set":
        rule = RULES_BY_ATTR.get(args.attr)
        if rule is None:
            raise InvalidInputError(
                f"Unknown setting: {args.attr}",
                detail="choices: " + ", ".join(RULES_BY_ATTR),
            )
        value = parse_value(rule, args.value)
        setting = UserSetting(store, registrar)
        setattr(setting, rule.attr, value)
        setting.save()
        logger.info("Updated %s in %s", rule.key, store.describe())
        return 0

    # reset
    setting = UserSetting(store, registrar, load=False)
    setting.save()
    logger.info("Reset user settings in %s", store.describe())
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cubepdf-setting", description=__doc__)
    parser.add_argument("--ini", type=Path, help="Use an INI file instead of the per-user store.")
    parser.add_argument("--checker", type=Path, help="Update checker executable to register.")
    parser.add_argument(
        "--no-autostart",
        action="store_true",
        help="Do not touch the run-at-login entry.",
    )
    parser.add_argument("--log-dir", type=Path, help="Also write a log file to this directory.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug messages.")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("show", help="Print the loaded settings as JSON.")
    set_cmd = sub.add_parser("set", help="Change one setting and save.")
    set_cmd.add_argument("attr", metavar="ATTR", help="Setting name, e.g. file_type.")
    set_cmd.add_argument("value", metavar="VALUE")
    sub.add_parser("reset", help="Save the default settings.")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    set_console_level(logging.DEBUG if args.verbose else logging.INFO)
    if args.log_dir:
        setup_file_logging(args.log_dir, task_id="cli")

    try:
        return run(args)
    except SettingError as e:
        print(json.dumps(e.to_dict(), ensure_ascii=False), file=sys.stderr)
        return 2 if e.code == ErrorCode.INVALID_INPUT else 1
    except Exception as e:
        logger.exception("Unexpected failure")
        error = {
            "code": ErrorCode.INTERNAL.value,
            "message": str(e),
            "detail": type(e).__name__,
        }
        print(json.dumps(error, ensure_ascii=False), file=sys.stderr)
        return 1
