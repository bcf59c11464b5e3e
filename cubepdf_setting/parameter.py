"""Enumerated settings and their stored ordinals.

Every enum below is persisted as an integer. The integer is the index of the
matching entry in the GUI combo boxes of older releases, so each enum carries an
explicit ``{ordinal: member}`` table instead of relying on declaration order.
Tables are append-only: changing an existing ordinal breaks settings written by
previous versions.
"""

from __future__ import annotations

from enum import Enum


class FileType(Enum):
    PDF = "pdf"
    PS = "ps"
    EPS = "eps"
    SVG = "svg"
    PNG = "png"
    JPEG = "jpeg"
    BMP = "bmp"
    TIFF = "tiff"


class PDFVersion(Enum):
    V1_7 = 1.7
    V1_6 = 1.6
    V1_5 = 1.5
    V1_4 = 1.4
    V1_3 = 1.3
    V1_2 = 1.2


class Resolution(Enum):
    DPI_72 = 72
    DPI_150 = 150
    DPI_300 = 300
    DPI_450 = 450
    DPI_600 = 600


class ExistedFile(Enum):
    """What to do when the output file already exists."""

    OVERWRITE = "overwrite"
    MERGE_HEAD = "merge_head"
    MERGE_TAIL = "merge_tail"


class PostProcess(Enum):
    OPEN = "open"
    NONE = "none"
    USER_PROGRAM = "user_program"


class ImageFilter(Enum):
    FLATE_ENCODE = "FlateEncode"
    DCT_ENCODE = "DCTEncode"


class DownSampling(Enum):
    NONE = "none"
    AVERAGE = "average"
    BICUBIC = "bicubic"
    SUBSAMPLE = "subsample"


ORDINALS: dict[type[Enum], dict[int, Enum]] = {
    FileType: {
        0: FileType.PDF,
        1: FileType.PS,
        2: FileType.EPS,
        3: FileType.SVG,
        4: FileType.PNG,
        5: FileType.JPEG,
        6: FileType.BMP,
        7: FileType.TIFF,
    },
    PDFVersion: {
        0: PDFVersion.V1_7,
        1: PDFVersion.V1_6,
        2: PDFVersion.V1_5,
        3: PDFVersion.V1_4,
        4: PDFVersion.V1_3,
        5: PDFVersion.V1_2,
    },
    Resolution: {
        0: Resolution.DPI_72,
        1: Resolution.DPI_150,
        2: Resolution.DPI_300,
        3: Resolution.DPI_450,
        4: Resolution.DPI_600,
    },
    ExistedFile: {
        0: ExistedFile.OVERWRITE,
        1: ExistedFile.MERGE_HEAD,
        2: ExistedFile.MERGE_TAIL,
    },
    PostProcess: {
        0: PostProcess.OPEN,
        1: PostProcess.NONE,
        2: PostProcess.USER_PROGRAM,
    },
    ImageFilter: {
        0: ImageFilter.FLATE_ENCODE,
        1: ImageFilter.DCT_ENCODE,
    },
    DownSampling: {
        0: DownSampling.NONE,
        1: DownSampling.AVERAGE,
        2: DownSampling.BICUBIC,
        3: DownSampling.SUBSAMPLE,
    },
}

_REVERSE: dict[type[Enum], dict[Enum, int]] = {
    enum_type: {member: ordinal for ordinal, member in table.items()}
    for enum_type, table in ORDINALS.items()
}


def to_ordinal(member: Enum) -> int:
    """Stored integer for an enum member."""
    return _REVERSE[type(member)][member]


def from_ordinal(enum_type: type[Enum], raw: int | None) -> Enum | None:
    """Enum member stored as ``raw``, or None when ``raw`` is not a known ordinal."""
    if raw is None or isinstance(raw, bool) or not isinstance(raw, int):
        return None
    return ORDINALS[enum_type].get(raw)


# ---------------------------------------------------------------------------
# Value helpers
# ---------------------------------------------------------------------------

_EXTENSIONS: dict[FileType, str] = {
    FileType.PDF: ".pdf",
    FileType.PS: ".ps",
    FileType.EPS: ".eps",
    FileType.SVG: ".svg",
    FileType.PNG: ".png",
    FileType.JPEG: ".jpg",
    FileType.BMP: ".bmp",
    FileType.TIFF: ".tiff",
}

# (colour device, grayscale device); vector formats have no grayscale variant.
_DEVICES: dict[FileType, tuple[str, str]] = {
    FileType.PDF: ("pdfwrite", "pdfwrite"),
    FileType.PS: ("ps2write", "ps2write"),
    FileType.EPS: ("eps2write", "eps2write"),
    FileType.SVG: ("svg", "svg"),
    FileType.PNG: ("png16m", "pnggray"),
    FileType.JPEG: ("jpeg", "jpeggray"),
    FileType.BMP: ("bmp16m", "bmpgray"),
    FileType.TIFF: ("tiff24nc", "tiffgray"),
}


def extension(file_type: FileType) -> str:
    return _EXTENSIONS.get(file_type, "")


def pdf_version_value(version: PDFVersion) -> float:
    return version.value


def resolution_value(resolution: Resolution) -> int:
    return resolution.value


def device_name(file_type: FileType, grayscale: bool = False) -> str:
    """Ghostscript output device for ``file_type``."""
    colour, gray = _DEVICES.get(file_type, _DEVICES[FileType.PDF])
    return gray if grayscale else colour
