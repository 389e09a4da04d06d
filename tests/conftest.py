"""Shared fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from typora_upload.models.config import UploaderConfig


@pytest.fixture
def config() -> UploaderConfig:
    return UploaderConfig(
        api_url="https://img.test/api/upload",
        username="alice",
        password="s3cret",
    )


@pytest.fixture
def make_image(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing small fake image files into a temp directory."""

    def _make(name: str = "shot.png", content: bytes = b"\x89PNG fake image bytes") -> Path:
        path = tmp_path / name
        path.write_bytes(content)
        return path

    return _make


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "typora-upload-config.yaml"
    path.write_text(
        "api_url: https://img.test/api/upload\nusername: alice\npassword: s3cret\n",
        encoding="utf-8",
    )
    return path
