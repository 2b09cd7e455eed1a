"""Rewrite a file without its BOM using staging, backup and rename steps."""

from __future__ import annotations

import os
import shutil
import stat
import tempfile
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Iterator

from .errors import (
    BackupConflictError,
    BackupRemovalError,
    BackupRenameError,
    CopyError,
    PromotionError,
    RestoreError,
    StagingError,
)
from .logging import get_logger
from .paths import STAGING_SUFFIX, backup_path_for, staging_directory

_BUFFER = 1024 * 1024

logger = get_logger(__name__)


@dataclass(slots=True)
class StagingFile:
    """Temporary sibling of the target receiving the rewritten content."""

    path: Path
    handle: BinaryIO
    promoted: bool = False


def _permission_bits(source: BinaryIO, path: Path) -> int:
    try:
        mode = os.fstat(source.fileno()).st_mode
    except (AttributeError, OSError, ValueError):
        mode = path.stat().st_mode
    return stat.S_IMODE(mode)


@contextmanager
def staging_file(target: Path, mode: int) -> Iterator[StagingFile]:
    """Create a staging file next to ``target`` and remove it unless promoted."""

    directory = staging_directory(target)
    try:
        fd, name = tempfile.mkstemp(dir=str(directory), prefix=f".{target.name}.", suffix=STAGING_SUFFIX)
    except OSError as exc:
        logger.error("staging_create_failed", path=str(target), directory=str(directory), error=str(exc))
        raise StagingError("cannot create the temporary file", path=target) from exc

    staging = StagingFile(path=Path(name), handle=os.fdopen(fd, "wb"))
    try:
        try:
            os.chmod(staging.path, mode)
        except OSError as exc:
            logger.error("staging_chmod_failed", path=str(target), staging_path=str(staging.path), error=str(exc))
            raise StagingError(
                "cannot set the permissions of the temporary file",
                path=target,
                context={"staging_path": str(staging.path)},
            ) from exc
        yield staging
    finally:
        if not staging.handle.closed:
            staging.handle.close()
        if not staging.promoted:
            try:
                staging.path.unlink(missing_ok=True)
            except OSError as exc:
                logger.warning("staging_cleanup_failed", staging_path=str(staging.path), error=str(exc))


def _copy_remaining(source: BinaryIO, staging: StagingFile, path: Path) -> None:
    try:
        shutil.copyfileobj(source, staging.handle, _BUFFER)
        staging.handle.flush()
        os.fsync(staging.handle.fileno())
    except OSError as exc:
        logger.error("staging_write_failed", path=str(path), staging_path=str(staging.path), error=str(exc))
        raise CopyError(
            "cannot write to the temporary file",
            path=path,
            context={"staging_path": str(staging.path)},
        ) from exc
    finally:
        staging.handle.close()


def _displace(path: Path, backup: Path) -> None:
    try:
        os.replace(path, backup)
    except OSError as exc:
        logger.error("backup_rename_failed", path=str(path), backup_path=str(backup), error=str(exc))
        raise BackupRenameError(
            "cannot create the backup file",
            path=path,
            context={"backup_path": str(backup)},
        ) from exc


def _promote(staging: StagingFile, path: Path, backup: Path) -> None:
    try:
        os.replace(staging.path, path)
    except OSError as exc:
        logger.error("promotion_failed", path=str(path), staging_path=str(staging.path), error=str(exc))
        context = {"backup_path": str(backup), "staging_path": str(staging.path)}
        try:
            os.replace(backup, path)
        except OSError as restore_exc:
            logger.critical(
                "restore_failed",
                path=str(path),
                backup_path=str(backup),
                error=str(restore_exc),
                action="original content is in the backup file; move it back by hand",
            )
            raise RestoreError(
                "cannot rename the temporary file nor restore the backup file",
                path=path,
                context=context,
            ) from restore_exc
        logger.info("original_restored", path=str(path), backup_path=str(backup))
        raise PromotionError("cannot rename the temporary file", path=path, context=context) from exc
    staging.promoted = True


def _discard_backup(backup: Path, path: Path) -> None:
    try:
        backup.unlink()
    except OSError as exc:
        logger.error("backup_remove_failed", path=str(path), backup_path=str(backup), error=str(exc))
        raise BackupRemovalError(
            "cannot remove the backup file",
            path=path,
            context={"backup_path": str(backup)},
        ) from exc


def remove_bom(source: BinaryIO, path: Path | str, *, keep_backup: bool = True) -> None:
    """Replace ``path`` with the rest of ``source``, which sits just past the BOM.

    The target path always resolves to either the original or the rewritten
    content. ``source`` is closed once its content has been copied. Raises a
    :class:`~bomstrip.errors.BomStripError` subclass naming the failed step.
    """

    path = Path(path)
    backup = backup_path_for(path)
    if backup == path:
        logger.error("backup_path_conflict", path=str(path), backup_path=str(backup))
        raise BackupConflictError(
            "the backup file would replace the file itself",
            path=path,
            context={"backup_path": str(backup)},
        )

    logger.info("processing_file", path=str(path))
    try:
        mode = _permission_bits(source, path)
    except OSError as exc:
        logger.error("permissions_read_failed", path=str(path), error=str(exc))
        raise StagingError("cannot read the permissions of the file", path=path) from exc

    with staging_file(path, mode) as staging:
        _copy_remaining(source, staging, path)
        # Windows refuses to rename a file that is still open.
        source.close()
        _displace(path, backup)
        _promote(staging, path, backup)

    if not keep_backup:
        _discard_backup(backup, path)


__all__ = ["StagingFile", "remove_bom", "staging_file"]
