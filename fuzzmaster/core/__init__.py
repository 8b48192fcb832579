"""Core fuzzing components: mutation, generation, crash classification."""

from .constants import CrashType, MutationType, Severity
from .corpus import Corpus, demo_corpus
from .crash import Crash, CrashClassifier, classify_severity
from .engine import FuzzCase, FuzzCaseGenerator
from .fuzzing_session import FuzzingSession
from .mutation import ByteMutator
from .statistics import Coverage, FuzzStats
from .types import FuzzStrategy, Protocol

__all__ = [
    "ByteMutator",
    "Corpus",
    "Coverage",
    "Crash",
    "CrashClassifier",
    "CrashType",
    "FuzzCase",
    "FuzzCaseGenerator",
    "FuzzStats",
    "FuzzStrategy",
    "FuzzingSession",
    "MutationType",
    "Protocol",
    "Severity",
    "classify_severity",
    "demo_corpus",
]
