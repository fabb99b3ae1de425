"""
Directory scanner.
Recursively collects documents, guards oversized files, and aggregates
per-file reports in listing order.
"""
from pathlib import Path
from typing import Callable

from svg_validator.engine.evaluator import SVGValidator
from svg_validator.schemas import DirectoryRunResult, FileOutcome
from svg_validator.utils import get_logger

logger = get_logger(__name__)

DEFAULT_MAX_SCAN_FILE_SIZE = 50 * 1024 * 1024


def find_svg_files(directory: Path | str, extension: str = "svg") -> list[Path]:
    """
    Recursively find regular files with the given extension (case-insensitive).

    Args:
        directory: Root directory
        extension: Extension without the dot

    Returns:
        Lexicographically sorted file paths; empty if directory is not a directory
    """
    directory = Path(directory)
    if not directory.is_dir():
        return []

    suffix = "." + extension.lstrip(".").lower()
    files = [
        path for path in directory.rglob("*")
        if path.is_file() and path.suffix.lower() == suffix
    ]
    return sorted(files, key=str)


def _format_mb(size: int) -> str:
    return f"{round(size / 1024 / 1024, 1)}MB"


def scan_directory(
    directory: Path | str,
    validator: SVGValidator | None = None,
    max_file_size: int | None = None,
    on_outcome: Callable[[FileOutcome], None] | None = None,
    files: list[Path] | None = None,
) -> DirectoryRunResult:
    """
    Validate every matching file under a directory, one at a time.

    Files above `max_file_size` are never opened; they are recorded as
    skipped and count as failed.

    Args:
        directory: Root directory
        validator: Evaluator to use (defaults to SVGValidator())
        max_file_size: Skip ceiling in bytes (defaults to config)
        on_outcome: Called with each FileOutcome as soon as it is known
        files: Pre-computed listing from find_svg_files

    Returns:
        DirectoryRunResult with outcomes in listing order
    """
    validator = validator or SVGValidator()
    if max_file_size is None:
        max_file_size = validator.config.max_scan_file_size

    if files is None:
        files = find_svg_files(directory, validator.config.extension)
    logger.info(f"Found {len(files)} files under {directory}")

    outcomes: list[FileOutcome] = []
    for path in files:
        size = validator.source.size(path)
        if size is None or size > max_file_size:
            shown = "unknown size" if size is None else _format_mb(size)
            reason = f"File too large ({shown}) - would exhaust memory"
            logger.warning(f"Skipping {path}: {reason}")
            outcome = FileOutcome(path=str(path), size=size, skipped_reason=reason)
        else:
            report = validator.evaluate(path)
            outcome = FileOutcome(path=str(path), size=size, report=report)

        outcomes.append(outcome)
        if on_outcome is not None:
            on_outcome(outcome)

    return DirectoryRunResult(root=str(directory), outcomes=outcomes)
