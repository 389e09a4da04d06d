"""In-memory image host that speaks through requests."""

from __future__ import annotations

import json
import re
from collections.abc import Callable
from dataclasses import dataclass

import requests

RealSession = requests.Session

FILENAME_RE = re.compile(rb'name="file"; filename="([^"]+)"')


@dataclass
class SentRequest:
    """What the fake server received."""

    method: str
    url: str
    headers: dict[str, str]
    body: bytes

    @property
    def filename(self) -> str:
        match = FILENAME_RE.search(self.body)
        return match.group(1).decode() if match else ""


class FakeResponse:
    """Minimal stand-in for ``requests.Response``."""

    def __init__(self, body: bytes = b"", status_code: int = 200, read_error: Exception | None = None) -> None:
        self._body = body
        self.status_code = status_code
        self.read_error = read_error
        self.closed = False

    @property
    def content(self) -> bytes:
        if self.read_error is not None:
            raise self.read_error
        return self._body

    def close(self) -> None:
        self.closed = True


def api_response(status: int = 200, code: int = 1, msg: str = "ok", data: str = "", http_status: int = 200) -> FakeResponse:
    """Build a JSON response in the image host format."""
    payload = {"status": status, "code": code, "msg": msg, "data": data}
    return FakeResponse(json.dumps(payload).encode(), status_code=http_status)


Responder = Callable[[SentRequest], FakeResponse]


class FakeSession:
    """Session that prepares requests for real but answers from a responder."""

    def __init__(self, responder: Responder | None = None) -> None:
        self.responder = responder or (lambda sent: api_response(data=f"https://img.test/{sent.filename}"))
        self.sent: list[SentRequest] = []
        self.responses: list[FakeResponse] = []
        self._real = RealSession()

    def prepare_request(self, request: requests.Request) -> requests.PreparedRequest:
        return self._real.prepare_request(request)

    def send(self, prepared: requests.PreparedRequest, **kwargs: object) -> FakeResponse:
        body = prepared.body
        raw = body.to_string() if hasattr(body, "to_string") else (body or b"")
        sent = SentRequest(
            method=prepared.method or "",
            url=prepared.url or "",
            headers=dict(prepared.headers),
            body=raw,
        )
        self.sent.append(sent)
        response = self.responder(sent)
        self.responses.append(response)
        return response

    def close(self) -> None:
        self._real.close()

    def __enter__(self) -> FakeSession:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
