"""
Tests for Crash Classification

Tests the severity table, signature functions and dedup tracking.
"""

import pytest

from fuzzmaster.core.constants import CrashType, Severity
from fuzzmaster.core.crash.crash_classifier import (
    SEVERITY_BY_CRASH_TYPE,
    Crash,
    CrashClassifier,
    classify_severity,
    length_signature,
    reproducer_signature,
)
from fuzzmaster.core.engine.generator import FuzzCase


class TestSeverityTable:
    """Test severity derivation."""

    @pytest.mark.parametrize(
        "crash_type,severity",
        [
            pytest.param(CrashType.HEAP_CORRUPTION, Severity.CRITICAL, id="heap"),
            pytest.param(CrashType.STACK_OVERFLOW, Severity.CRITICAL, id="stack"),
            pytest.param(CrashType.SEG_FAULT, Severity.HIGH, id="segv"),
            pytest.param(CrashType.ASSERTION_FAILED, Severity.MEDIUM, id="assert"),
            pytest.param(CrashType.TIMEOUT, Severity.LOW, id="timeout"),
            pytest.param(CrashType.CONNECTION_RESET, Severity.LOW, id="reset"),
            pytest.param(CrashType.UNKNOWN, Severity.LOW, id="unknown"),
        ],
    )
    def test_classify_severity(self, crash_type, severity):
        """Every crash type maps to its documented severity."""
        assert classify_severity(crash_type) is severity

    def test_table_is_total(self):
        """The table covers the whole taxonomy."""
        assert set(SEVERITY_BY_CRASH_TYPE) == set(CrashType)

    def test_info_never_assigned(self):
        """INFO exists but no crash type maps to it."""
        assert Severity.INFO not in SEVERITY_BY_CRASH_TYPE.values()


class TestSignatures:
    """Test reproducer signature functions."""

    def test_reproducer_signature_stable(self):
        """Same bytes give the same 16-char signature."""
        assert reproducer_signature(b"abc") == reproducer_signature(b"abc")
        assert len(reproducer_signature(b"abc")) == 16

    def test_reproducer_signature_differs(self):
        """Different bytes give different signatures."""
        assert reproducer_signature(b"abc") != reproducer_signature(b"abd")

    def test_length_signature_buckets(self):
        """Lengths in the same bucket share a signature."""
        assert length_signature(b"a" * 10) == length_signature(b"b" * 60)
        assert length_signature(b"a" * 10) != length_signature(b"a" * 70)


class TestCrash:
    """Test the Crash record."""

    def test_severity_derived(self):
        """Severity follows crash_type and cannot be assigned."""
        crash = Crash(
            case_id=1,
            crash_type=CrashType.SEG_FAULT,
            signal=11,
            output="SIGSEGV",
            reproducer=b"\x00",
        )
        assert crash.severity is Severity.HIGH
        with pytest.raises(AttributeError):
            crash.severity = Severity.LOW  # type: ignore[misc]

    def test_to_dict(self):
        """Serialization includes derived severity and hex reproducer."""
        crash = Crash(
            case_id=2,
            crash_type=CrashType.TIMEOUT,
            signal=None,
            output="timed out",
            reproducer=b"\xde\xad",
            signature="sig",
        )
        result = crash.to_dict()

        assert result["severity"] == "low"
        assert result["crash_type"] == "timeout"
        assert result["signal"] is None
        assert result["reproducer"] == "dead"
        assert result["reproducer_size"] == 2


class TestCrashClassifier:
    """Test CrashClassifier dedup tracking."""

    def test_reproducer_is_copy_of_case_data(self):
        """Reproducer equals the case data."""
        case = FuzzCase(id=3, data=b"payload", mutation_type="Mutation")
        crash, _ = CrashClassifier().classify(case, CrashType.SEG_FAULT, "boom", 11)

        assert crash.reproducer == b"payload"
        assert crash.case_id == 3
        assert crash.signal == 11

    def test_duplicate_key_not_unique(self):
        """Same type and reproducer is counted once."""
        classifier = CrashClassifier()
        case = FuzzCase(id=1, data=b"same", mutation_type="Mutation")

        _, first = classifier.classify(case, CrashType.SEG_FAULT, "a")
        _, second = classifier.classify(case, CrashType.SEG_FAULT, "b")

        assert first is True
        assert second is False
        assert classifier.get_unique_crash_count() == 1

    def test_different_type_is_unique(self):
        """Same reproducer with a different crash type is a new key."""
        classifier = CrashClassifier()
        case = FuzzCase(id=1, data=b"same", mutation_type="Mutation")

        classifier.classify(case, CrashType.SEG_FAULT, "a")
        _, unique = classifier.classify(case, CrashType.HEAP_CORRUPTION, "b")

        assert unique is True

    def test_pluggable_signature(self):
        """A coarse signature merges byte-distinct reproducers."""
        classifier = CrashClassifier(signature_fn=length_signature)
        first = FuzzCase(id=1, data=b"aaaa", mutation_type="Mutation")
        second = FuzzCase(id=2, data=b"bbbb", mutation_type="Mutation")

        classifier.classify(first, CrashType.SEG_FAULT, "a")
        crash, unique = classifier.classify(second, CrashType.SEG_FAULT, "b")

        assert unique is False
        assert crash.signature == "len_0"

    def test_string_crash_type_converted(self):
        """Crash type values given as strings become CrashType members."""
        case = FuzzCase(id=1, data=b"x", mutation_type="Mutation")
        crash, _ = CrashClassifier().classify(case, "seg_fault", "boom")

        assert crash.crash_type is CrashType.SEG_FAULT
        assert crash.severity is Severity.HIGH
