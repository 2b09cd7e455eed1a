"""Prometheus counters for bomstrip runs."""

from __future__ import annotations

from prometheus_client import CollectorRegistry, Counter

from .outcome import FileOutcome, OutcomeStatus


class BomStripMetrics:
    """Per-run counters kept in a private registry."""

    def __init__(self) -> None:
        self.registry = CollectorRegistry()
        self._files = Counter(
            "bomstrip_files_total",
            "Files handled by bomstrip, by outcome",
            ("status",),
            registry=self.registry,
        )
        self._failures = Counter(
            "bomstrip_failures_total",
            "Failed rewrites, by error code",
            ("code",),
            registry=self.registry,
        )

    def record_outcome(self, outcome: FileOutcome) -> None:
        self._files.labels(status=outcome.status.value).inc()
        if outcome.status is OutcomeStatus.FAILED and outcome.code:
            self._failures.labels(code=outcome.code).inc()

    def snapshot(self, status: OutcomeStatus) -> int:
        value = self.registry.get_sample_value("bomstrip_files_total", {"status": status.value})
        return int(value or 0)

    def failures(self, code: str) -> int:
        value = self.registry.get_sample_value("bomstrip_failures_total", {"code": code})
        return int(value or 0)


__all__ = ["BomStripMetrics"]
