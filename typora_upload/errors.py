"""Error types raised while loading configuration and uploading images."""

from __future__ import annotations


class UploadError(Exception):
    """Base class for every failure reported by typora-upload."""


class ConfigError(UploadError):
    """Configuration file is missing, unparsable or incomplete."""


class FileError(UploadError):
    """Source image could not be opened or read."""


class RequestError(UploadError):
    """HTTP request could not be built or sent."""


class ResponseError(UploadError):
    """Response body could not be read or is not a valid API payload."""


class ApplicationError(UploadError):
    """Server answered with a well-formed rejection."""

    def __init__(self, message: str, status: int = 0, code: int = 0) -> None:
        """Initialize the error.

        Args:
            message: The ``msg`` field returned by the server
            status: The ``status`` field returned by the server
            code: The ``code`` field returned by the server
        """
        super().__init__(f"upload failed: {message}")
        self.message = message
        self.status = status
        self.code = code
