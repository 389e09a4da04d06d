#!/usr/bin/env python3
"""
Typora Upload Script

Uploads images to a self-hosted image server with HTTP Basic Auth and prints
one hosted URL per line, so it can be used as Typora's custom image uploader.

Usage:
    uv run main.py [--config=<path>] <image-path1> <image-path2> ...
"""

from __future__ import annotations

import sys

from typora_upload.cli import main

if __name__ == "__main__":
    sys.exit(main())
