"""Shared constants for fuzz-case generation and crash classification.

AFL-inspired boundary values and size limits used by the byte mutator,
plus the closed crash taxonomy and severity levels.

References:
- AFL whitepaper: https://lcamtuf.coredump.cx/afl/technical_details.txt

"""

from __future__ import annotations

from enum import Enum
from typing import Final

# =============================================================================
# Size Limits
# =============================================================================

#: Hard growth ceiling for any generated buffer
MAX_CASE_SIZE: Final[int] = 65536

#: Havoc applies between MIN and MAX rounds per call (inclusive)
HAVOC_MIN_ROUNDS: Final[int] = 1
HAVOC_MAX_ROUNDS: Final[int] = 8

#: Length range for the Random strategy (inclusive)
RANDOM_MIN_LENGTH: Final[int] = 16
RANDOM_MAX_LENGTH: Final[int] = 1024

#: Size of the random-bytes packet for protocols without a generator
FALLBACK_PACKET_SIZE: Final[int] = 64

#: Seed used when the corpus is empty (bytes 0..63)
CANONICAL_SEED: Final[bytes] = bytes(range(64))

# =============================================================================
# Interesting Values for Boundary Testing
# =============================================================================

#: 8-bit interesting values (unsigned)
INTERESTING_8: Final[tuple[int, ...]] = (
    0,  # Zero
    1,  # One
    16,  # Power of 2
    32,  # Power of 2
    64,  # Power of 2
    100,  # Common boundary
    127,  # INT8_MAX
    128,  # INT8_MIN as unsigned
    255,  # UINT8_MAX
)

# =============================================================================
# Mutation Type Enum
# =============================================================================


class MutationType(str, Enum):
    """Atomic mutation operator labels used by ByteMutator.

    Inherits from str for easy serialization and logging.
    """

    BIT_FLIP = "bit_flip"
    BYTE_FLIP = "byte_flip"
    INSERT_RANDOM = "insert_random"
    DELETE_BYTE = "delete_byte"
    REPLACE_INTERESTING = "replace_interesting"


# =============================================================================
# Severity and Crash Taxonomy
# =============================================================================


class Severity(str, Enum):
    """Severity levels for recorded crashes.

    Severity Levels:
        CRITICAL: Memory corruption, likely exploitable
        HIGH: Invalid memory access
        MEDIUM: Failed internal consistency checks
        LOW: Hangs, dropped connections, unclassified failures
        INFO: Informational, not produced by the crash classifier
    """

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    INFO = "info"


class CrashType(str, Enum):
    """Closed set of failure kinds an executor can report."""

    TIMEOUT = "timeout"
    CONNECTION_RESET = "connection_reset"
    SEG_FAULT = "seg_fault"
    HEAP_CORRUPTION = "heap_corruption"
    STACK_OVERFLOW = "stack_overflow"
    ASSERTION_FAILED = "assertion_failed"
    UNKNOWN = "unknown"
