"""Upload result data model."""

from __future__ import annotations

from dataclasses import dataclass

from typora_upload.errors import UploadError


@dataclass(frozen=True)
class UploadResult:
    """Result of uploading a single image file."""

    file_path: str
    image_url: str | None = None
    error: UploadError | None = None

    @property
    def success(self) -> bool:
        """Whether the upload produced a hosted URL."""
        return self.error is None
