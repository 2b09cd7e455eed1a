from __future__ import annotations

from pathlib import Path

from bomstrip.errors import PromotionError
from bomstrip.outcome import FileOutcome, OutcomeStatus, RunSummary


def test_empty_summary_succeeds():
    summary = RunSummary()
    assert summary.exit_code == 0
    assert summary.first_error is None


def test_summary_payload_keeps_every_outcome_in_order():
    summary = RunSummary()
    summary.add(FileOutcome.succeeded(Path("a.txt")))
    summary.add(FileOutcome.failed(Path("b.txt"), PromotionError("cannot rename the temporary file", path="b.txt")))
    summary.add(FileOutcome.skipped(Path("c.txt"), "cannot open file"))
    summary.add(FileOutcome.failed(Path("d.txt"), PromotionError("cannot rename the temporary file", path="d.txt")))

    payload = summary.to_payload()

    assert payload["exit_code"] == 1
    assert (payload["processed"], payload["skipped"], payload["failed"]) == (1, 1, 2)
    assert [entry["path"] for entry in payload["files"]] == ["a.txt", "b.txt", "c.txt", "d.txt"]
    assert payload["files"][1] == {
        "path": "b.txt",
        "status": "failed",
        "code": "PROMOTION_FAILED",
        "message": "cannot rename the temporary file: 'b.txt'",
    }
    assert summary.first_error is summary.outcomes[1]
    assert summary.outcomes[0].status is OutcomeStatus.SUCCEEDED
