"""
FuzzMaster - Mutation-based fuzz-case generation and crash classification.

Produces malformed and boundary-case inputs from a seed corpus, shapes them
toward simple wire protocols, and classifies failures reported back by an
external executor.
"""

__version__ = "1.0.0"
__license__ = "MIT"

from fuzzmaster.core.constants import CrashType, Severity
from fuzzmaster.core.crash import Crash
from fuzzmaster.core.engine import FuzzCase
from fuzzmaster.core.fuzzing_session import FuzzingSession
from fuzzmaster.core.mutation import ByteMutator
from fuzzmaster.core.statistics import Coverage, FuzzStats
from fuzzmaster.core.types import FuzzStrategy, Protocol

__all__ = [
    "__version__",
    "__license__",
    "ByteMutator",
    "Coverage",
    "Crash",
    "CrashType",
    "FuzzCase",
    "FuzzStats",
    "FuzzStrategy",
    "FuzzingSession",
    "Protocol",
    "Severity",
]
