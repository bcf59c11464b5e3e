"""Enum ordinals, value helpers, errors, logging and config"""

import pytest

from cubepdf_setting import config
from cubepdf_setting.parameter import (
    ORDINALS,
    DownSampling,
    FileType,
    ImageFilter,
    PDFVersion,
    PostProcess,
    Resolution,
    device_name,
    extension,
    from_ordinal,
    pdf_version_value,
    resolution_value,
    to_ordinal,
)


# ---------------------------------------------------------------------------
# Ordinal tables
# ---------------------------------------------------------------------------

class TestOrdinals:
    def test_tables_cover_every_member(self):
        for enum_type, table in ORDINALS.items():
            assert set(table.values()) == set(enum_type)
            assert sorted(table) == list(range(len(table)))

    def test_stored_values_from_older_releases(self):
        assert to_ordinal(FileType.PDF) == 0
        assert to_ordinal(FileType.TIFF) == 7
        assert to_ordinal(PDFVersion.V1_2) == 5
        assert to_ordinal(Resolution.DPI_300) == 2
        assert to_ordinal(PostProcess.USER_PROGRAM) == 2
        assert to_ordinal(ImageFilter.DCT_ENCODE) == 1

    def test_same_member_names_do_not_collide(self):
        assert to_ordinal(PostProcess.NONE) == 1
        assert to_ordinal(DownSampling.NONE) == 0

    @pytest.mark.parametrize("raw", [None, -1, 8, 256, True, "3", 2.0])
    def test_from_ordinal_rejects(self, raw):
        assert from_ordinal(FileType, raw) is None

    def test_from_ordinal(self):
        assert from_ordinal(FileType, 3) is FileType.SVG
        assert from_ordinal(Resolution, 4) is Resolution.DPI_600


# ---------------------------------------------------------------------------
# Value helpers
# ---------------------------------------------------------------------------

class TestHelpers:
    def test_extension(self):
        assert extension(FileType.PDF) == ".pdf"
        assert extension(FileType.JPEG) == ".jpg"
        assert extension(FileType.TIFF) == ".tiff"

    def test_pdf_version_value(self):
        assert pdf_version_value(PDFVersion.V1_7) == 1.7
        assert pdf_version_value(PDFVersion.V1_2) == 1.2

    def test_resolution_value(self):
        assert [resolution_value(r) for r in Resolution] == [72, 150, 300, 450, 600]

    def test_device_name(self):
        assert device_name(FileType.PDF) == "pdfwrite"
        assert device_name(FileType.PDF, grayscale=True) == "pdfwrite"
        assert device_name(FileType.PNG) == "png16m"
        assert device_name(FileType.PNG, grayscale=True) == "pnggray"
        assert device_name(FileType.TIFF, grayscale=True) == "tiffgray"


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class TestErrors:
    def test_error_code_values(self):
        from cubepdf_setting.errors import ErrorCode
        assert ErrorCode.STORE_UNAVAILABLE.value == "E_STORE_UNAVAILABLE"
        assert ErrorCode.INVALID_INPUT.value == "E_INVALID_INPUT"

    def test_to_dict(self):
        from cubepdf_setting.errors import StoreUnavailableError
        d = StoreUnavailableError("denied", detail="HKCU").to_dict()
        assert d == {"code": "E_STORE_UNAVAILABLE", "message": "denied", "detail": "HKCU"}

    def test_all_error_subclasses(self):
        from cubepdf_setting.errors import (
            AutoStartError, InvalidInputError, SettingError, StoreUnavailableError,
        )
        assert AutoStartError("x").code.value == "E_AUTOSTART_FAILED"
        assert InvalidInputError("x").code.value == "E_INVALID_INPUT"
        assert isinstance(StoreUnavailableError("x"), SettingError)


# ---------------------------------------------------------------------------
# Logging / config
# ---------------------------------------------------------------------------

class TestLogging:
    def test_get_logger_returns_logger(self):
        from cubepdf_setting.logging_utils import get_logger
        lg = get_logger()
        assert lg is get_logger()
        assert lg.name == "cubepdf_setting"

    def test_setup_file_logging(self, tmp_path):
        from cubepdf_setting.logging_utils import get_logger, setup_file_logging
        log_path = setup_file_logging(log_dir=tmp_path, task_id="test123")
        assert log_path == tmp_path / "test123.log"
        logger = get_logger()
        logger.debug("written to file")
        handler = logger.handlers[-1]
        handler.flush()
        logger.removeHandler(handler)
        handler.close()
        assert "written to file" in log_path.read_text(encoding="utf-8")


class TestConfig:
    def test_desktop_path(self):
        assert config.desktop_path()

    def test_checker_path(self):
        assert config.checker_path().name == "cubepdf-checker.exe"
