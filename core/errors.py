"""Error definitions for the payload codec and storage collaborators."""

from enum import Enum
from typing import Optional


class ErrorCode(str, Enum):
    """Classification attached to every application error."""

    INVALID_PARAMS = "InvalidParams"
    INTERNAL_SERVER_ERROR = "InternalServerError"
    STORAGE = "Storage"


class AppError(Exception):
    """Base application error.

    Carries an ErrorCode, a human readable message and, when the error wraps a
    lower level failure, the original exception as ``cause``.
    """

    code: ErrorCode = ErrorCode.INTERNAL_SERVER_ERROR

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.message = message
        self.cause = cause
        super().__init__(self.__str__())

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message}: {self.cause}"
        return self.message


class InvalidParamsError(AppError):
    """Caller misuse or caller-controlled data exceeding a declared limit."""

    code = ErrorCode.INVALID_PARAMS


class InternalServerError(AppError):
    """Stream corruption, unsupported shapes or checksum failures."""

    code = ErrorCode.INTERNAL_SERVER_ERROR


class StorageError(AppError):
    """Object storage transport or provider failure."""

    code = ErrorCode.STORAGE


def is_recoverable(error: BaseException) -> bool:
    """Return True when the error is expected in normal operation."""
    return isinstance(error, AppError) and error.code == ErrorCode.INVALID_PARAMS


__all__ = [
    "ErrorCode",
    "AppError",
    "InvalidParamsError",
    "InternalServerError",
    "StorageError",
    "is_recoverable",
]
