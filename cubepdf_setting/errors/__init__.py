"""Error codes and exception classes."""

from enum import Enum


class ErrorCode(str, Enum):
    STORE_UNAVAILABLE = "E_STORE_UNAVAILABLE"
    AUTOSTART_FAILED = "E_AUTOSTART_FAILED"
    INVALID_INPUT = "E_INVALID_INPUT"
    INTERNAL = "E_INTERNAL"


class SettingError(Exception):
    """Base class for every settings failure the caller has to handle."""

    def __init__(self, code: ErrorCode, message: str, detail: str = ""):
        self.code = code
        self.message = message
        self.detail = detail
        super().__init__(message)

    def to_dict(self) -> dict:
        return {
            "code": self.code.value,
            "message": self.message,
            "detail": self.detail,
        }


class StoreUnavailableError(SettingError):
    def __init__(self, message: str, detail: str = ""):
        super().__init__(ErrorCode.STORE_UNAVAILABLE, message, detail)


class AutoStartError(SettingError):
    def __init__(self, message: str, detail: str = ""):
        super().__init__(ErrorCode.AUTOSTART_FAILED, message, detail)


class InvalidInputError(SettingError):
    def __init__(self, message: str, detail: str = ""):
        super().__init__(ErrorCode.INVALID_INPUT, message, detail)
