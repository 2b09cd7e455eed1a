"""Per-file control flow: open, detect, rewrite, aggregate."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from .detector import has_bom
from .errors import BomStripError
from .logging import get_logger
from .metrics import BomStripMetrics
from .outcome import FileOutcome, RunSummary
from .rewriter import remove_bom

logger = get_logger(__name__)


def process_file(path: Path, *, keep_backup: bool = True) -> FileOutcome:
    """Strip the BOM from one file; failures are returned, not raised."""

    try:
        source = path.open("rb")
    except OSError as exc:
        logger.warning("file_open_failed", path=str(path), error=str(exc))
        return FileOutcome.skipped(path, "cannot open file")

    with source:
        if not has_bom(source):
            logger.trace("bom_absent", path=str(path))
            return FileOutcome.skipped(path, "no BOM")
        try:
            remove_bom(source, path, keep_backup=keep_backup)
        except BomStripError as exc:
            return FileOutcome.failed(path, exc)

    logger.trace("file_done", path=str(path))
    return FileOutcome.succeeded(path)


def process_files(
    paths: Iterable[Path],
    *,
    keep_backup: bool = True,
    metrics: BomStripMetrics | None = None,
) -> RunSummary:
    """Process ``paths`` in order, carrying on past failed files."""

    paths = list(paths)
    logger.info("processing_started", files=len(paths), keep_backup=keep_backup)
    summary = RunSummary()
    for path in paths:
        outcome = process_file(path, keep_backup=keep_backup)
        summary.add(outcome)
        if metrics is not None:
            metrics.record_outcome(outcome)
    logger.info("files_processed", count=summary.processed, skipped=summary.skipped, failed=summary.failed)
    return summary


__all__ = ["process_file", "process_files"]
