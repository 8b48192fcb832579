"""
Fuzzing Session - Owner of All Per-Campaign State

A session ties together the seed corpus, case generation, crash
classification and statistics. Nothing here is global: each session owns
its random source, counters and crash list, so independent sessions can
run side by side.

Typical flow:
    session = FuzzingSession(Protocol.HTTP, FuzzStrategy.MUTATION, rng_seed=7)
    session.add_seed(b"GET / HTTP/1.1\\r\\n\\r\\n")
    case = session.generate_case()
    # ... external executor runs case.data against the target ...
    session.record_crash(case, CrashType.SEG_FAULT, "SIGSEGV", signal=11)

Generation and recording are safe to call from several worker threads;
a single lock serializes id assignment and counter updates.
"""

import random
import threading
from datetime import UTC, datetime
from typing import Any

from fuzzmaster.core.config import FuzzerSettings
from fuzzmaster.core.constants import CANONICAL_SEED, CrashType
from fuzzmaster.core.corpus import Corpus
from fuzzmaster.core.crash.crash_classifier import (
    Crash,
    CrashClassifier,
    SignatureFunc,
    reproducer_signature,
)
from fuzzmaster.core.engine.generator import FuzzCase, FuzzCaseGenerator
from fuzzmaster.core.exceptions import InvalidCaseError, SessionCancelledError
from fuzzmaster.core.statistics import Coverage, FuzzStats
from fuzzmaster.core.types import FuzzStrategy, Protocol
from fuzzmaster.utils.logger import CrashEventLogger, get_logger

logger = get_logger(__name__)


class FuzzingSession:
    """
    Tracks one fuzzing session: corpus, issued cases, crashes and statistics.
    """

    def __init__(
        self,
        protocol: Protocol = Protocol.HTTP,
        strategy: FuzzStrategy = FuzzStrategy.MUTATION,
        rng_seed: int | None = None,
        session_name: str = "fuzzmaster",
        signature_fn: SignatureFunc = reproducer_signature,
        generator: FuzzCaseGenerator | None = None,
    ):
        """
        Initialize a fuzzing session.

        Args:
            protocol: Target protocol for the Generation strategy
            strategy: Strategy applied to every generated case
            rng_seed: Seed for the session's random source (None = nondeterministic)
            session_name: Name used to build the session ID
            signature_fn: Reproducer fingerprint used for crash deduplication
            generator: Preconfigured case generator (overrides protocol/strategy)
        """
        self.session_name = session_name
        timestamp = datetime.now(UTC).strftime("%Y%m%d_%H%M%S")
        self.session_id = f"{session_name}_{timestamp}"
        self.rng = random.Random(rng_seed)

        self.generator = generator or FuzzCaseGenerator(protocol, strategy, self.rng)
        if generator is not None:
            self.rng = generator.rng

        self.corpus = Corpus()
        self.classifier = CrashClassifier(signature_fn)

        self._stats = FuzzStats()
        self._crashes: list[Crash] = []
        self._lock = threading.Lock()
        self._cancelled = threading.Event()

        self.crash_logger = CrashEventLogger(logger)
        self.crash_logger.log_fuzzing_session(
            self.session_id,
            "started",
            {"protocol": self.protocol.value, "strategy": self.strategy.value},
        )

    @classmethod
    def from_settings(
        cls, settings: FuzzerSettings, session_name: str = "fuzzmaster"
    ) -> "FuzzingSession":
        """Build a session from validated settings."""
        rng = random.Random(settings.rng_seed)
        generator = FuzzCaseGenerator(
            settings.protocol,
            settings.strategy,
            rng,
            random_min_length=settings.random_min_length,
            random_max_length=settings.random_max_length,
            fallback_packet_size=settings.fallback_packet_size,
        )
        return cls(session_name=session_name, generator=generator)

    @property
    def protocol(self) -> Protocol:
        return self.generator.protocol

    @property
    def strategy(self) -> FuzzStrategy:
        return self.generator.strategy

    @property
    def stats(self) -> FuzzStats:
        """Snapshot of the current statistics."""
        with self._lock:
            return self._stats.snapshot()

    @property
    def crashes(self) -> tuple[Crash, ...]:
        """Recorded crashes in the order they were reported."""
        with self._lock:
            return tuple(self._crashes)

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def add_seed(self, data: bytes) -> int:
        """
        Append a seed to the corpus.

        Returns:
            Corpus index of the new seed

        Raises:
            CorpusFrozenError: If case generation has already started
        """
        with self._lock:
            return self.corpus.add(data)

    def generate_case(self) -> FuzzCase:
        """
        Generate the next fuzz case.

        Returns:
            New FuzzCase with the next sequential id

        Raises:
            SessionCancelledError: If cancel() has been called
        """
        with self._lock:
            if self._cancelled.is_set():
                raise SessionCancelledError(
                    "Session has been cancelled",
                    error_code="SESSION_CANCELLED",
                    context={"session_id": self.session_id},
                )

            self._stats.total_cases += 1
            case_id = self._stats.total_cases
            self.corpus.freeze()

            sampled = self.corpus.sample(self.rng)
            if sampled is None:
                parent_id, base = None, CANONICAL_SEED
            else:
                parent_id, base = sampled

            fuzz_case = self.generator.build(case_id, base, parent_id)
            self._stats.refresh_exec_rate()

        logger.debug(
            "case_generated",
            case_id=fuzz_case.id,
            size=fuzz_case.size,
            mutation_type=fuzz_case.mutation_type,
            parent_id=fuzz_case.parent_id,
        )
        return fuzz_case

    def record_crash(
        self,
        fuzz_case: FuzzCase,
        crash_type: CrashType | str,
        output: str,
        signal: int | None = None,
    ) -> Crash:
        """
        Record a failure reported by the executor for ``fuzz_case``.

        Args:
            fuzz_case: Case that triggered the failure
            crash_type: Failure kind reported by the executor
            output: Diagnostic text captured by the executor
            signal: OS signal number, if the failure was signal-based

        Returns:
            The recorded Crash

        Raises:
            InvalidCaseError: If the case was not issued by this session
            ValueError: If crash_type is not a CrashType value
        """
        crash_type = CrashType(crash_type)

        with self._lock:
            if not 1 <= fuzz_case.id <= self._stats.total_cases:
                raise InvalidCaseError(
                    f"Case {fuzz_case.id} was not issued by this session",
                    error_code="UNKNOWN_CASE",
                    context={
                        "case_id": fuzz_case.id,
                        "total_cases": self._stats.total_cases,
                    },
                )

            crash, is_unique = self.classifier.classify(
                fuzz_case, crash_type, output, signal
            )
            self._crashes.append(crash)
            self._stats.crashes += 1
            if is_unique:
                self._stats.unique_crashes += 1
            if crash_type is CrashType.TIMEOUT:
                self._stats.timeouts += 1
            self._stats.last_crash_time = crash.timestamp

        self.crash_logger.log_crash(
            case_id=crash.case_id,
            crash_type=crash.crash_type.value,
            severity=crash.severity.value,
            unique=is_unique,
            signal=crash.signal,
            reproducer=crash.reproducer,
        )
        return crash

    def record_coverage(self, coverage: Coverage) -> None:
        """Update coverage_bits from externally reported coverage."""
        with self._lock:
            self._stats.coverage_bits = coverage.edges

    def cancel(self) -> None:
        """Stop issuing new cases. Recorded crashes are kept."""
        self._cancelled.set()
        self.crash_logger.log_fuzzing_session(
            self.session_id, "cancelled", self.stats.to_dict()
        )

    def summary(self) -> dict[str, Any]:
        """Get session summary for reporting consumers."""
        with self._lock:
            stats = self._stats.snapshot()
            crashes = list(self._crashes)

        return {
            "session_id": self.session_id,
            "protocol": self.protocol.value,
            "default_port": self.protocol.default_port,
            "strategy": self.strategy.label,
            "corpus_size": len(self.corpus),
            "cancelled": self.cancelled,
            "statistics": stats.to_dict(),
            "crashes": [crash.to_dict() for crash in crashes],
        }
