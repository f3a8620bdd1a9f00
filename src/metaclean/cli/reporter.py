"""Per-file result lines for the console."""

from collections import Counter
from pathlib import Path
from typing import TYPE_CHECKING, Iterable

from rich.console import Console
from rich.markup import escape

from metaclean.utils.logging import get_console, log_error, log_info, log_success, log_warning

if TYPE_CHECKING:
    from metaclean.core.errors import DirectoryReadError
    from metaclean.core.stripper import ProcessingOutcome


class Reporter:
    """Print exactly one line per processed file.
    
    Purely observational: nothing here raises or changes an outcome.
    """
    
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or get_console()
    
    def report(self, outcome: "ProcessingOutcome") -> None:
        """Print the result line for one file."""
        name = escape(outcome.name)
        if outcome.success:
            log_success(f"Metadata cleaned: {name}", self.console)
        else:
            log_error(f"Error processing {name}: {escape(outcome.message)}", self.console)
    
    def no_images(self, directory: Path) -> None:
        log_warning(f"No supported images found in {escape(str(directory))}", self.console)
    
    def directory_error(self, error: "DirectoryReadError") -> None:
        log_error(f"Error reading directory: {escape(str(error))}", self.console)
    
    def summary(self, outcomes: Iterable["ProcessingOutcome"]) -> None:
        """Print a one-line count of cleaned and failed files, per format."""
        outcomes = list(outcomes)
        failed = sum(1 for o in outcomes if not o.success)
        line = f"{len(outcomes) - failed} cleaned, {failed} failed"

        per_format = Counter(o.format.value for o in outcomes if o.format is not None)
        if per_format:
            breakdown = ", ".join(f"{fmt}: {count}" for fmt, count in sorted(per_format.items()))
            line = f"{line} ({breakdown})"

        log_info(line, self.console)
