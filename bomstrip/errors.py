"""Exception types raised while rewriting a file without its BOM."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping


class BomStripError(RuntimeError):
    """Raised when one step of the rewrite protocol fails for a file."""

    __slots__ = ("code", "message", "context")

    code_default = "BOMSTRIP_FAILED"

    def __init__(
        self,
        message: str,
        *,
        path: Path | str,
        context: Mapping[str, str] | None = None,
        code: str | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code or self.code_default
        self.message = message
        self.context = {"path": str(path), **dict(context or {})}

    @property
    def path(self) -> str:
        return self.context["path"]

    def __str__(self) -> str:
        return f"{self.message}: '{self.path}'"


class StagingError(BomStripError):
    """The staging file could not be created or given the target's permissions."""

    code_default = "STAGING_FAILED"


class CopyError(BomStripError):
    """The content after the BOM could not be copied into the staging file."""

    code_default = "COPY_FAILED"


class BackupConflictError(BomStripError):
    """The backup path would be the target path itself."""

    code_default = "BACKUP_PATH_CONFLICT"


class BackupRenameError(BomStripError):
    """The original file could not be moved aside to its backup path."""

    code_default = "BACKUP_RENAME_FAILED"


class PromotionError(BomStripError):
    """The staging file could not be renamed onto the target path.

    The original content was moved back to the target path.
    """

    code_default = "PROMOTION_FAILED"


class RestoreError(PromotionError):
    """Promotion failed and the backup could not be moved back either.

    The original content only survives in the backup file; the operator has
    to restore it by hand.
    """

    code_default = "RESTORE_FAILED"

    @property
    def backup_path(self) -> str:
        return self.context["backup_path"]


class BackupRemovalError(BomStripError):
    """The file was rewritten but its backup could not be deleted."""

    code_default = "BACKUP_REMOVAL_FAILED"


__all__ = [
    "BackupConflictError",
    "BackupRemovalError",
    "BackupRenameError",
    "BomStripError",
    "CopyError",
    "PromotionError",
    "RestoreError",
    "StagingError",
]
