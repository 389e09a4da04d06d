"""Command-line entry point for typora-upload."""

from __future__ import annotations

import argparse
import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from rich.console import Console

from typora_upload.config.loader import DEFAULT_CONFIG_FILE, default_config_path, load_config
from typora_upload.errors import ConfigError
from typora_upload.models.config import UploaderConfig
from typora_upload.models.upload import UploadResult
from typora_upload.progress.reporter import (
    UploadReporter,
    make_stderr_console,
    make_stdout_console,
)
from typora_upload.uploaders.batch import upload_images
from typora_upload.uploaders.content_type import resolve_content_type
from typora_upload.uploaders.image_host import ImageHostUploader

USAGE = "Usage: typora-upload [--config=<path>] <image-path1> <image-path2> ..."


def positive_int(value: str) -> int:
    """argparse type for ``--workers``."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Arguments without the program name, ``sys.argv[1:]`` if None

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog="typora-upload",
        description="Upload images to an image host and print their URLs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  typora-upload shot.png                          # Upload one image
  typora-upload --config=~/img.yaml a.png b.jpg   # Use another config file
  typora-upload --dry-run *.png                   # Show what would be uploaded

Default config file: {DEFAULT_CONFIG_FILE} (override with TYPORA_UPLOAD_CONFIG)
        """,
    )

    _ = parser.add_argument(
        "images",
        nargs="*",
        help="Paths of the images to upload",
    )

    _ = parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Path to config file (default: {DEFAULT_CONFIG_FILE})",
    )

    _ = parser.add_argument(
        "--workers",
        type=positive_int,
        default=None,
        help="Maximum number of simultaneous uploads (default: one per image)",
    )

    _ = parser.add_argument(
        "--markdown",
        action="store_true",
        help="Print Markdown image links instead of bare URLs",
    )

    _ = parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be uploaded without contacting the server",
    )

    _ = parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar on standard error",
    )

    _ = parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output for debugging",
    )

    return parser.parse_args(argv)


def format_url(url: str, markdown: bool) -> str:
    """Render a hosted URL for standard output."""
    return f"![]({url})" if markdown else url


def dry_run(image_paths: list[str], reporter: UploadReporter) -> int:
    """Describe the uploads that would happen.

    Args:
        image_paths: Paths given on the command line
        reporter: Reporter used for the summary table

    Returns:
        int: 0 if every file exists, 1 otherwise
    """
    rows: list[tuple[str, str, int | None]] = []
    for image_path in image_paths:
        size = os.path.getsize(image_path) if os.path.isfile(image_path) else None
        rows.append((image_path, resolve_content_type(image_path), size))

    reporter.display_dry_run(rows)
    return 0 if all(size is not None for _, _, size in rows) else 1


def run_uploads(
    config: UploaderConfig,
    image_paths: list[str],
    reporter: UploadReporter,
    workers: int | None,
    show_progress: bool,
) -> list[UploadResult]:
    """Upload the batch, optionally behind a progress bar."""
    uploader = ImageHostUploader(config, reporter=reporter)

    if not show_progress:
        return upload_images(config, image_paths, max_workers=workers, uploader=uploader)

    with reporter.track_uploads(len(image_paths)) as progress:
        return upload_images(
            config,
            image_paths,
            max_workers=workers,
            on_complete=progress.advance,
            uploader=uploader,
        )


def main(
    argv: list[str] | None = None,
    console: Console | None = None,
    err_console: Console | None = None,
) -> int:
    """Main entry point for the typora-upload command.

    Args:
        argv: Arguments without the program name
        console: Console receiving the URLs, stdout if None
        err_console: Console receiving diagnostics, stderr if None

    Returns:
        int: Process exit code
    """
    _ = load_dotenv(find_dotenv(usecwd=True))

    console = console or make_stdout_console()
    args = parse_arguments(argv)
    reporter = UploadReporter(err_console or make_stderr_console(), verbose=args.verbose)

    image_paths: list[str] = args.images
    if not image_paths:
        reporter.display_error(USAGE)
        reporter.display_error(f"Default config file: {DEFAULT_CONFIG_FILE}")
        return 1

    config_path: Path = args.config or default_config_path()
    reporter.display_debug(f"Loading config from {config_path}")
    try:
        config = load_config(config_path.expanduser())
    except ConfigError as e:
        reporter.display_error(f"Error loading config: {e}", e)
        return 1

    reporter.display_debug(f"Endpoint: {config.api_url} (user {config.username})")

    if args.dry_run:
        return dry_run(image_paths, reporter)

    results = run_uploads(config, image_paths, reporter, args.workers, args.progress)

    has_error = False
    for result in results:
        if result.success:
            console.print(format_url(result.image_url or "", args.markdown), markup=False)
        else:
            reporter.display_failure(result)
            has_error = True

    return 1 if has_error else 0
