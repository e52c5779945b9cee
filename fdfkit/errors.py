"""Error codes of the image layer and the exception that carries them."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["ErrorCode", "MLXError", "strerror"]


class ErrorCode(IntEnum):
    """Reasons an image operation can fail."""

    SUCCESS = 0
    INVEXT = 1
    INVFILE = 2
    INVPNG = 3
    INVXPM = 4
    INVPOS = 5
    INVDIM = 6
    INVIMG = 7
    VERTFAIL = 8
    FRAGFAIL = 9
    SHDRFAIL = 10
    MEMFAIL = 11
    GLADFAIL = 12
    GLFWFAIL = 13
    WINFAIL = 14
    STRTOOBIG = 15


_DESCRIPTIONS = {
    ErrorCode.SUCCESS: "No Errors",
    ErrorCode.INVEXT: "File has invalid extension",
    ErrorCode.INVFILE: "Failed to open the file",
    ErrorCode.INVPNG: "PNG file is invalid or corrupted",
    ErrorCode.INVXPM: "XPM42 file is invalid or corrupted",
    ErrorCode.INVPOS: "The specified X or Y positions are out of bounds",
    ErrorCode.INVDIM: "The specified Width or Height dimensions are out of bounds",
    ErrorCode.INVIMG: "The provided image is invalid, might indicate mismanagement of images",
    ErrorCode.VERTFAIL: "Failed to compile the vertex shader.",
    ErrorCode.FRAGFAIL: "Failed to compile the fragment shader.",
    ErrorCode.SHDRFAIL: "Failed to compile the shaders.",
    ErrorCode.MEMFAIL: "Failed to allocate memory",
    ErrorCode.GLADFAIL: "Failed to initialize GLAD",
    ErrorCode.GLFWFAIL: "Failed to initialize GLFW",
    ErrorCode.WINFAIL: "Failed to create window",
    ErrorCode.STRTOOBIG: "String is too big to be drawn",
}


def strerror(code: ErrorCode | int) -> str:
    """Return the English description of an error code."""
    try:
        member = ErrorCode(code)
    except ValueError:
        raise ValueError(f"unknown error code: {code!r}") from None
    return _DESCRIPTIONS[member]


class MLXError(Exception):
    """Raised when an image operation fails; ``code`` tells why."""

    def __init__(self, code: ErrorCode | int, detail: str | None = None) -> None:
        self.code = ErrorCode(code)
        self.detail = detail
        message = strerror(self.code)
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)