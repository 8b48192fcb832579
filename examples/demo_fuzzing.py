#!/usr/bin/env python3
"""
FuzzMaster Session Demo

Generates a handful of cases from the demo corpus, simulates two crashes
reported by an executor, and prints the session summary. No target is
executed; the crash outcomes are hard-coded.
"""

import json
import sys

from fuzzmaster.core.config import get_settings
from fuzzmaster.core.constants import CrashType
from fuzzmaster.core.corpus import demo_corpus
from fuzzmaster.core.fuzzing_session import FuzzingSession
from fuzzmaster.utils.logger import configure_logging, get_logger


def main() -> int:
    """Run a demonstration fuzzing session."""
    settings = get_settings()
    configure_logging(
        log_level=settings.logging.log_level.value,
        json_format=settings.logging.json_format,
    )
    logger = get_logger("fuzzmaster.demo")

    print("=" * 80)
    print("FuzzMaster - Session Demonstration")
    print("=" * 80)
    print(settings.get_summary())

    session = FuzzingSession.from_settings(settings, session_name="demo")
    for seed in demo_corpus():
        session.add_seed(seed)

    cases = [session.generate_case() for _ in range(5)]
    for case in cases:
        logger.info("case_preview", **case.to_dict())

    # Simulated executor outcomes
    session.record_crash(
        cases[1], CrashType.SEG_FAULT, "SIGSEGV at 0xdeadbeef", signal=11
    )
    session.record_crash(cases[3], CrashType.HEAP_CORRUPTION, "heap-buffer-overflow")

    print(json.dumps(session.summary(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
