"""Command line tests"""

import json

import pytest

from cubepdf_setting.cli import main, parse_value
from cubepdf_setting.errors import InvalidInputError
from cubepdf_setting.parameter import FileType, Resolution
from cubepdf_setting.user_setting import RULES_BY_ATTR


def run(ini, *argv):
    return main(["--ini", str(ini), "--no-autostart", *argv])


class TestParseValue:
    def test_enum_by_name_or_ordinal(self):
        rule = RULES_BY_ATTR["file_type"]
        assert parse_value(rule, "png") is FileType.PNG
        assert parse_value(rule, "5") is FileType.JPEG
        assert parse_value(RULES_BY_ATTR["resolution"], "DPI_600") is Resolution.DPI_600

    def test_enum_rejects_unknown(self):
        with pytest.raises(InvalidInputError):
            parse_value(RULES_BY_ATTR["file_type"], "docx")
        with pytest.raises(InvalidInputError):
            parse_value(RULES_BY_ATTR["resolution"], "5012")

    def test_bool(self):
        rule = RULES_BY_ATTR["grayscale"]
        assert parse_value(rule, "on") is True
        assert parse_value(rule, "FALSE") is False
        with pytest.raises(InvalidInputError):
            parse_value(rule, "maybe")

    def test_text_kept_verbatim(self):
        assert parse_value(RULES_BY_ATTR["user_arguments"], "") == ""


class TestCommands:
    def test_show_defaults(self, tmp_path, capsys):
        assert run(tmp_path / "s.ini", "show") == 0
        data = json.loads(capsys.readouterr().out)
        assert data["file_type"] == "PDF"
        assert data["user_arguments"] == "%%FILE%%"
        assert data["check_update"] is True

    def test_set_then_show(self, tmp_path, capsys):
        ini = tmp_path / "s.ini"
        assert run(ini, "set", "file_type", "png") == 0
        assert run(ini, "set", "grayscale", "1") == 0
        capsys.readouterr()

        assert run(ini, "show") == 0
        data = json.loads(capsys.readouterr().out)
        assert data["file_type"] == "PNG"
        assert data["grayscale"] is True

    def test_reset(self, tmp_path, capsys):
        ini = tmp_path / "s.ini"
        run(ini, "set", "resolution", "DPI_72")
        assert run(ini, "reset") == 0
        capsys.readouterr()
        run(ini, "show")
        assert json.loads(capsys.readouterr().out)["resolution"] == "DPI_300"

    def test_unknown_setting(self, tmp_path, capsys):
        assert run(tmp_path / "s.ini", "set", "delete_on_close", "on") == 2
        err = json.loads(capsys.readouterr().err)
        assert err["code"] == "E_INVALID_INPUT"

    def test_invalid_value(self, tmp_path, capsys):
        assert run(tmp_path / "s.ini", "set", "pdf_version", "2.0") == 2
        assert "pdf_version" in json.loads(capsys.readouterr().err)["message"]

    def test_set_check_update_registers_checker(self, tmp_path, monkeypatch):
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        monkeypatch.setattr("sys.platform", "linux")
        ini = tmp_path / "s.ini"
        argv = ["--ini", str(ini), "--checker", "/opt/checker", "set", "check_update", "on"]
        assert main(argv) == 0
        assert (tmp_path / "autostart" / "cubepdf-checker.desktop").is_file()

        argv[-1] = "off"
        assert main(argv) == 0
        assert not (tmp_path / "autostart" / "cubepdf-checker.desktop").exists()

    def test_log_dir(self, tmp_path):
        import logging
        from cubepdf_setting.logging_utils import get_logger

        logs = tmp_path / "logs"
        assert run(tmp_path / "s.ini", "--log-dir", str(logs), "reset") == 0

        logger = get_logger()
        for handler in [h for h in logger.handlers if isinstance(h, logging.FileHandler)]:
            handler.flush()
            logger.removeHandler(handler)
            handler.close()
        assert "Reset user settings" in (logs / "cli.log").read_text(encoding="utf-8")
