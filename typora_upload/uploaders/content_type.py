"""Content type resolution for image files."""

from __future__ import annotations

import os

CONTENT_TYPES: dict[str, str] = {
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "gif": "image/gif",
    "svg": "image/svg+xml",
    "webp": "image/webp",
}


def file_extension(image_path: os.PathLike[str] | str) -> str:
    """Return the lowercased text after the last dot of the file name.

    Dot files such as ``.png`` count as having an extension.
    """
    name = os.path.basename(os.fspath(image_path))
    _, dot, ext = name.rpartition(".")
    return ext.lower() if dot else ""


def resolve_content_type(image_path: os.PathLike[str] | str) -> str:
    """
    Map an image path to the MIME type sent to the image host.

    Args:
        image_path: Path of the image file; only its name is inspected

    Returns:
        str: The MIME type, ``image/<ext>`` for unknown extensions
    """
    ext = file_extension(image_path)
    return CONTENT_TYPES.get(ext, f"image/{ext}")
