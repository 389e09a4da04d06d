"""Concurrent upload of many images."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Protocol

from typora_upload.errors import UploadError
from typora_upload.models.config import UploaderConfig
from typora_upload.models.upload import UploadResult
from typora_upload.uploaders.image_host import ImageHostUploader


class SingleImageUploader(Protocol):
    """Anything that can upload one image and return its URL."""

    def upload_image(self, image_path: str) -> str: ...


def upload_one(uploader: SingleImageUploader, image_path: str) -> UploadResult:
    """Upload a single image and capture the outcome.

    Args:
        uploader: Uploader used for the request
        image_path: Path exactly as given by the caller

    Returns:
        UploadResult: URL on success, error on failure
    """
    try:
        return UploadResult(file_path=image_path, image_url=uploader.upload_image(image_path))
    except UploadError as e:
        return UploadResult(file_path=image_path, error=e)
    except Exception as e:
        # Keep unexpected failures local to their own file
        wrapped = UploadError(f"unexpected error: {e}")
        wrapped.__cause__ = e
        return UploadResult(file_path=image_path, error=wrapped)


def upload_images(
    config: UploaderConfig,
    image_paths: Sequence[str],
    max_workers: int | None = None,
    on_complete: Callable[[UploadResult], None] | None = None,
    uploader: SingleImageUploader | None = None,
) -> list[UploadResult]:
    """
    Upload every image concurrently and return the results in input order.

    Each path gets its own task; a failed upload never affects the others.
    The call returns once every task has finished.

    Args:
        config: Endpoint and credentials shared by all uploads
        image_paths: Paths to upload
        max_workers: Concurrency bound, one worker per path if None
        on_complete: Called with each result as soon as it finishes
        uploader: Uploader to use instead of an ``ImageHostUploader``

    Returns:
        list[UploadResult]: One result per path, ``results[i]`` matching ``image_paths[i]``
    """
    if not image_paths:
        return []

    if uploader is None:
        uploader = ImageHostUploader(config)

    workers = max_workers or len(image_paths)
    results: list[UploadResult | None] = [None] * len(image_paths)

    with ThreadPoolExecutor(max_workers=workers) as executor:
        future_to_index = {
            executor.submit(upload_one, uploader, path): index
            for index, path in enumerate(image_paths)
        }

        for future in as_completed(future_to_index):
            result = future.result()
            results[future_to_index[future]] = result
            if on_complete is not None:
                on_complete(result)

    return [result for result in results if result is not None]
