"""Main Typer CLI application for metaclean."""

import os
from pathlib import Path
from typing import Optional

import typer

from metaclean import __app_name__, __version__
from metaclean.utils.logging import get_console, log_error

# Initialize console and app
console = get_console()
app = typer.Typer(
    name=__app_name__,
    help="Strip EXIF, GPS and other metadata from every photo in a folder.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold cyan]{__app_name__}[/] version [green]{__version__}[/]")
        raise typer.Exit()


def folder_path(raw: str) -> Path:
    """Turn a pasted, shell-escaped folder path into a Path.

    On POSIX systems backslashes are dropped, so `My\\ Photos` names the
    folder `My Photos`. Windows paths keep their separators.
    """
    if os.sep != "\\":
        raw = raw.replace("\\", "")
    return Path(raw)


@app.command()
def clean(
    directory: Optional[str] = typer.Argument(
        None,
        help="Folder whose JPG, JPEG, PNG, HEIC and TIFF files are cleaned",
        show_default=False,
    ),
    in_place: bool = typer.Option(
        False, "--in-place", help="Overwrite files directly instead of via a temporary file"
    ),
    quality: Optional[int] = typer.Option(
        None, "--quality", "-q", min=1, max=100, help="Re-encoding quality for JPEG/HEIC (1-100)"
    ),
    workers: Optional[int] = typer.Option(
        None, "--workers", "-w", min=1, max=32, help="Number of worker threads"
    ),
    summary: bool = typer.Option(False, "--summary", help="Print counts after the batch"),
    version: Optional[bool] = typer.Option(
        None,
        "--version", "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Remove all metadata from the images in DIRECTORY, rewriting them in place.

    Examples:
        metaclean ~/Pictures/trip
        metaclean ./photos --workers 4 --summary
    """
    from metaclean.cli.reporter import Reporter
    from metaclean.config.settings import get_settings
    from metaclean.core.batch import BatchProcessor
    from metaclean.core.codec import PillowCodec
    from metaclean.core.errors import DirectoryReadError
    from metaclean.core.stripper import MetadataStripper

    if directory is None:
        log_error("Please provide a folder path", console)
        console.print(f'Usage: {__app_name__} "/path/to/folder"')
        raise typer.Exit(2)

    settings = get_settings()
    codec = PillowCodec(
        quality=quality or settings.quality,
        safe_write=settings.safe_write and not in_place,
    )
    reporter = Reporter(console)
    processor = BatchProcessor(
        MetadataStripper(codec),
        reporter,
        workers=workers or settings.workers,
    )

    try:
        outcomes = processor.process_directory(folder_path(directory))
    except DirectoryReadError:
        raise typer.Exit(1)

    if outcomes and (summary or settings.summary):
        reporter.summary(outcomes)

    if any(not outcome.success for outcome in outcomes):
        raise typer.Exit(1)
