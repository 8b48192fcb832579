"""Crash classification and deduplication."""

from .crash_classifier import (
    SEVERITY_BY_CRASH_TYPE,
    Crash,
    CrashClassifier,
    classify_severity,
    length_signature,
    reproducer_signature,
)

__all__ = [
    "SEVERITY_BY_CRASH_TYPE",
    "Crash",
    "CrashClassifier",
    "classify_severity",
    "length_signature",
    "reproducer_signature",
]
