"""Image uploaders."""

from .batch import upload_images, upload_one
from .content_type import resolve_content_type
from .image_host import ImageHostUploader

__all__ = ["ImageHostUploader", "resolve_content_type", "upload_images", "upload_one"]
