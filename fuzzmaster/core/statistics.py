"""
Session Statistics - Running Counters for a Fuzzing Session

Counters are advanced only by FuzzingSession while it holds its lock.
Consumers get independent snapshots, so reading statistics never races
with generation or crash recording.
"""

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime, timedelta
from typing import Any


@dataclass
class Coverage:
    """
    Coverage feedback reported by external instrumentation.

    Attributes:
        basic_blocks: Total basic blocks known to the instrumentation
        edges: Edges hit so far
        new_coverage: Whether the last execution found new edges
        bitmap: Raw AFL-style coverage bitmap
    """

    basic_blocks: int = 0
    edges: int = 0
    new_coverage: bool = False
    bitmap: list[int] = field(default_factory=list)

    @property
    def percentage(self) -> float:
        if self.basic_blocks == 0:
            return 0.0
        return (self.edges / self.basic_blocks) * 100


@dataclass
class FuzzStats:
    """Aggregate counters for one fuzzing session."""

    total_cases: int = 0
    crashes: int = 0
    unique_crashes: int = 0
    timeouts: int = 0
    coverage_bits: int = 0
    exec_per_sec: float = 0.0
    start_time: datetime = field(default_factory=lambda: datetime.now(UTC))
    last_crash_time: datetime | None = None

    @property
    def runtime(self) -> timedelta:
        """Elapsed time since the session started (derived, never stored)."""
        return datetime.now(UTC) - self.start_time

    def refresh_exec_rate(self) -> None:
        """Recompute cases per second from total_cases and runtime."""
        seconds = self.runtime.total_seconds()
        self.exec_per_sec = self.total_cases / seconds if seconds > 0 else 0.0

    def snapshot(self) -> "FuzzStats":
        """Return an independent copy of the current counters."""
        return replace(self)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "total_cases": self.total_cases,
            "crashes": self.crashes,
            "unique_crashes": self.unique_crashes,
            "timeouts": self.timeouts,
            "coverage_bits": self.coverage_bits,
            "exec_per_sec": round(self.exec_per_sec, 2),
            "start_time": self.start_time.isoformat(),
            "last_crash_time": (
                self.last_crash_time.isoformat() if self.last_crash_time else None
            ),
            "runtime_seconds": self.runtime.total_seconds(),
        }
