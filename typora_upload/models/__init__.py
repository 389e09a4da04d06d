"""Data models for typora-upload."""

from .config import UploaderConfig
from .response import ApiResponse
from .upload import UploadResult

__all__ = ["ApiResponse", "UploadResult", "UploaderConfig"]
