"""
Crash Classification - Severity and Deduplication of Executor Outcomes

Maps an execution outcome reported by an external executor (crash type,
optional signal, diagnostic text) onto a Crash record:
- Severity comes from a total lookup table over the crash taxonomy
- Uniqueness is keyed on (crash type, signature of the reproducer)
- The signature function is pluggable; true deduplication needs coverage
  data that only real instrumentation can provide
"""

import hashlib
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from fuzzmaster.core.constants import CrashType, Severity
from fuzzmaster.core.engine.generator import FuzzCase

SignatureFunc = Callable[[bytes], str]

SEVERITY_BY_CRASH_TYPE: dict[CrashType, Severity] = {
    CrashType.HEAP_CORRUPTION: Severity.CRITICAL,
    CrashType.STACK_OVERFLOW: Severity.CRITICAL,
    CrashType.SEG_FAULT: Severity.HIGH,
    CrashType.ASSERTION_FAILED: Severity.MEDIUM,
    CrashType.TIMEOUT: Severity.LOW,
    CrashType.CONNECTION_RESET: Severity.LOW,
    CrashType.UNKNOWN: Severity.LOW,
}

_unmapped = set(CrashType) - set(SEVERITY_BY_CRASH_TYPE)
if _unmapped:
    raise RuntimeError(
        f"Crash types without a severity: {sorted(t.value for t in _unmapped)}"
    )


def classify_severity(crash_type: CrashType) -> Severity:
    """Return the severity for a crash type."""
    return SEVERITY_BY_CRASH_TYPE[crash_type]


def reproducer_signature(reproducer: bytes) -> str:
    """Truncated SHA-256 of the reproducer bytes (16 hex chars)."""
    return hashlib.sha256(reproducer).hexdigest()[:16]


def length_signature(reproducer: bytes, bucket_size: int = 64) -> str:
    """Coarse signature grouping reproducers by length bucket.

    Useful when havoc produces many byte-distinct inputs that trip the same
    length-dependent bug.
    """
    return f"len_{len(reproducer) // bucket_size}"


@dataclass(frozen=True)
class Crash:
    """One observed failure, linked to the case that triggered it.

    ``severity`` is derived from ``crash_type`` and cannot be set.
    """

    case_id: int
    crash_type: CrashType
    signal: int | None
    output: str
    reproducer: bytes
    signature: str = ""
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def severity(self) -> Severity:
        return classify_severity(self.crash_type)

    @property
    def dedup_key(self) -> tuple[CrashType, str]:
        return (self.crash_type, self.signature)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "case_id": self.case_id,
            "crash_type": self.crash_type.value,
            "severity": self.severity.value,
            "signal": self.signal,
            "output": self.output,
            "reproducer": self.reproducer.hex(),
            "reproducer_size": len(self.reproducer),
            "signature": self.signature,
            "timestamp": self.timestamp.isoformat(),
        }


class CrashClassifier:
    """Builds Crash records and tracks which (type, signature) keys were seen."""

    def __init__(self, signature_fn: SignatureFunc = reproducer_signature):
        """Initialize the classifier.

        Args:
            signature_fn: Maps reproducer bytes to a dedup signature

        """
        self.signature_fn = signature_fn
        self.seen_keys: set[tuple[CrashType, str]] = set()

    def classify(
        self,
        fuzz_case: FuzzCase,
        crash_type: CrashType,
        output: str,
        signal: int | None = None,
    ) -> tuple[Crash, bool]:
        """Classify an execution outcome.

        Args:
            fuzz_case: Case that was executing when the failure occurred
            crash_type: Failure kind reported by the executor
            output: Diagnostic text captured by the executor
            signal: OS signal number, if the executor observed one

        Returns:
            Tuple of (crash record, whether its dedup key is new)

        """
        reproducer = bytes(fuzz_case.data)
        crash = Crash(
            case_id=fuzz_case.id,
            crash_type=CrashType(crash_type),
            signal=signal,
            output=output,
            reproducer=reproducer,
            signature=self.signature_fn(reproducer),
        )

        is_unique = crash.dedup_key not in self.seen_keys
        self.seen_keys.add(crash.dedup_key)
        return crash, is_unique

    def get_unique_crash_count(self) -> int:
        """Get count of distinct dedup keys seen."""
        return len(self.seen_keys)
