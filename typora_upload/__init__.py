"""Upload images to a self-hosted image server and print their URLs."""

from __future__ import annotations

__version__ = "0.1.0"
