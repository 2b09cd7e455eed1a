"""Path conventions for backups, staging files and command-line arguments."""

from __future__ import annotations

import glob
from pathlib import Path
from typing import Iterable

BACKUP_EXTENSION = "bak"
STAGING_SUFFIX = ".part"
_GLOB_CHARACTERS = frozenset("*?[")


def backup_path_for(path: Path) -> Path:
    """Return ``path`` with its extension replaced by the backup extension."""

    return path.with_suffix(f".{BACKUP_EXTENSION}")


def staging_directory(path: Path) -> Path:
    """Directory that receives the staging file: the target's own directory."""

    parent = path.parent
    if str(parent) in ("", "."):
        return Path(".")
    return parent


def _is_pattern(value: str) -> bool:
    return any(char in _GLOB_CHARACTERS for char in value)


def expand_arguments(values: Iterable[Path | str]) -> list[Path]:
    """Expand wildcard arguments the shell left untouched (cmd.exe, PowerShell).

    Values that name an existing file are kept verbatim even when they contain
    glob characters. Patterns without matches are kept as-is so they are
    reported as unreadable instead of silently dropped.
    """

    expanded: list[Path] = []
    for value in values:
        text = str(value)
        if _is_pattern(text) and not Path(text).exists():
            matches = sorted(glob.glob(text))
            if matches:
                expanded.extend(Path(match) for match in matches)
                continue
        expanded.append(Path(text))
    return expanded


__all__ = [
    "BACKUP_EXTENSION",
    "STAGING_SUFFIX",
    "backup_path_for",
    "expand_arguments",
    "staging_directory",
]
