"""Image host API uploader implementation."""

from __future__ import annotations

import json
import os
import time
from typing import BinaryIO, final

import requests
from requests.auth import HTTPBasicAuth
from requests.exceptions import RequestException
from requests_toolbelt.multipart.encoder import MultipartEncoder

from typora_upload.errors import ApplicationError, FileError, RequestError, ResponseError
from typora_upload.models.config import UploaderConfig
from typora_upload.models.response import ApiResponse
from typora_upload.progress.reporter import UploadReporter
from typora_upload.uploaders.content_type import resolve_content_type

FILE_FIELD = "file"
HEADERS_FIELD = "headers"
# Content type of the file part itself; the real one travels in HEADERS_FIELD
FILE_PART_CONTENT_TYPE = "application/octet-stream"


class ImageReader:
    """Wraps the image file so read errors during streaming stay file errors."""

    def __init__(self, image_file: BinaryIO) -> None:
        self._file = image_file

    def read(self, size: int = -1) -> bytes:
        try:
            return self._file.read(size)
        except OSError as e:
            raise FileError(f"failed to copy file content: {e}") from e

    def __getattr__(self, name: str) -> object:
        return getattr(self._file, name)


@final
class ImageHostUploader:
    """Uploads single images to the configured image host."""

    def __init__(
        self,
        config: UploaderConfig,
        session: requests.Session | None = None,
        reporter: UploadReporter | None = None,
    ) -> None:
        """Initialize the uploader.

        Args:
            config: Endpoint and credentials
            session: Session used for every request. If None, each upload
                opens and closes its own session.
            reporter: Optional reporter for verbose diagnostics
        """
        self.config = config
        self.session = session
        self.reporter = reporter

    def _debug(self, message: str) -> None:
        if self.reporter is not None:
            self.reporter.display_debug(message)

    def build_form(
        self, image_file: BinaryIO | ImageReader, filename: str, content_type: str
    ) -> MultipartEncoder:
        """Build the multipart body for one image.

        Args:
            image_file: Open binary file, streamed as the ``file`` part
            filename: File name reported in the ``file`` part
            content_type: MIME type placed in the ``headers`` field

        Returns:
            The streaming multipart encoder
        """
        return MultipartEncoder(
            fields=[
                (FILE_FIELD, (filename, image_file, FILE_PART_CONTENT_TYPE)),
                (HEADERS_FIELD, f"Content-Type: {content_type}"),
            ]
        )

    def upload_image(self, image_path: os.PathLike[str] | str) -> str:
        """Upload one image and return its hosted URL.

        Args:
            image_path: Path of the image to upload

        Returns:
            The URL returned by the image host

        Raises:
            FileError: If the image cannot be opened or read
            RequestError: If the request cannot be built or sent
            ResponseError: If the response cannot be read or decoded
            ApplicationError: If the image host rejects the upload
        """
        try:
            image_file = open(image_path, "rb")
        except OSError as e:
            raise FileError(f"failed to open image: {e}") from e

        with image_file:
            filename = os.path.basename(os.fspath(image_path))
            content_type = resolve_content_type(image_path)

            try:
                form = self.build_form(ImageReader(image_file), filename, content_type)
            except (OSError, TypeError, ValueError) as e:
                raise RequestError(f"failed to create form file: {e}") from e

            request = requests.Request(
                "POST",
                self.config.api_url,
                data=form,
                headers={"Content-Type": form.content_type},
                auth=HTTPBasicAuth(
                    self.config.username.encode("utf-8"),
                    self.config.password.encode("utf-8"),
                ),
            )

            self._debug(f"POST {self.config.api_url} {filename} ({content_type}, {form.len} bytes)")
            start_time = time.time()

            if self.session is not None:
                body = self._send(self.session, request)
            else:
                with requests.Session() as session:
                    body = self._send(session, request)

            self._debug(f"{filename}: response received in {time.time() - start_time:.2f}s")

        return self.parse_response(body)

    def _send(self, session: requests.Session, request: requests.Request) -> bytes:
        """Prepare and send the request, returning the raw response body."""
        try:
            prepared = session.prepare_request(request)
        except (RequestException, ValueError) as e:
            raise RequestError(f"failed to create request: {e}") from e

        try:
            response = session.send(prepared, stream=True)
        except (RequestException, OSError) as e:
            raise RequestError(f"failed to send request: {e}") from e

        try:
            self._debug(f"HTTP {response.status_code} from {self.config.api_url}")
            return response.content
        except (RequestException, OSError) as e:
            raise ResponseError(f"failed to read response: {e}") from e
        finally:
            response.close()

    @staticmethod
    def parse_response(body: bytes) -> str:
        """Decode an API response body into the hosted URL.

        Args:
            body: Raw response body

        Returns:
            The ``data`` field of a successful response

        Raises:
            ResponseError: If the body is not a valid API payload
            ApplicationError: If the payload reports a failed upload
        """
        try:
            api_response = ApiResponse.from_dict(json.loads(body))
        except ValueError as e:
            raise ResponseError(f"failed to parse response: {e}") from e

        if not api_response.is_success:
            raise ApplicationError(
                api_response.msg,
                status=api_response.status,
                code=api_response.code,
            )

        return api_response.data
