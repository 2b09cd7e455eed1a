"""Per-file outcomes and the run summary they aggregate into."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from .errors import BomStripError


class OutcomeStatus(str, Enum):
    SKIPPED = "skipped"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(slots=True, frozen=True)
class FileOutcome:
    path: Path
    status: OutcomeStatus
    code: str | None = None
    message: str | None = None

    @classmethod
    def skipped(cls, path: Path, reason: str) -> "FileOutcome":
        return cls(path=path, status=OutcomeStatus.SKIPPED, message=reason)

    @classmethod
    def succeeded(cls, path: Path) -> "FileOutcome":
        return cls(path=path, status=OutcomeStatus.SUCCEEDED)

    @classmethod
    def failed(cls, path: Path, error: BomStripError) -> "FileOutcome":
        return cls(path=path, status=OutcomeStatus.FAILED, code=error.code, message=str(error))

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"path": str(self.path), "status": self.status.value}
        if self.code is not None:
            payload["code"] = self.code
        if self.message is not None:
            payload["message"] = self.message
        return payload


@dataclass(slots=True)
class RunSummary:
    """Outcomes of one invocation, in input order."""

    outcomes: list[FileOutcome] = field(default_factory=list)

    def add(self, outcome: FileOutcome) -> None:
        self.outcomes.append(outcome)

    def _count(self, status: OutcomeStatus) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status is status)

    @property
    def processed(self) -> int:
        return self._count(OutcomeStatus.SUCCEEDED)

    @property
    def skipped(self) -> int:
        return self._count(OutcomeStatus.SKIPPED)

    @property
    def failed(self) -> int:
        return self._count(OutcomeStatus.FAILED)

    @property
    def first_error(self) -> FileOutcome | None:
        return next((outcome for outcome in self.outcomes if outcome.status is OutcomeStatus.FAILED), None)

    @property
    def exit_code(self) -> int:
        return 1 if self.failed else 0

    def to_payload(self) -> dict[str, Any]:
        return {
            "processed": self.processed,
            "skipped": self.skipped,
            "failed": self.failed,
            "exit_code": self.exit_code,
            "files": [outcome.to_payload() for outcome in self.outcomes],
        }


__all__ = ["FileOutcome", "OutcomeStatus", "RunSummary"]
