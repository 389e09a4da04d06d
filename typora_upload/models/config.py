"""Uploader configuration data model."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class UploaderConfig:
    """Endpoint and credentials used for every upload in a batch."""

    api_url: str
    username: str
    password: str = field(repr=False)
