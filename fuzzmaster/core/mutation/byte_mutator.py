"""Byte-Level Mutation Engine

AFL-style atomic mutations over raw byte sequences plus a composite havoc
operator. Every operator takes immutable ``bytes`` and returns a new
``bytes`` object; the input is never modified.

Out-of-range positions are no-ops and size limits refuse the operation
instead of failing, so havoc can chain any number of rounds without
validating bounds between steps.
"""

import random
from collections.abc import Callable

from fuzzmaster.core.constants import (
    HAVOC_MAX_ROUNDS,
    HAVOC_MIN_ROUNDS,
    INTERESTING_8,
    MAX_CASE_SIZE,
    MutationType,
)
from fuzzmaster.utils.logger import get_logger

logger = get_logger(__name__)


class ByteMutator:
    """Applies atomic and havoc mutations using an injectable random source."""

    def __init__(self, rng: random.Random | None = None):
        """Initialize the mutator.

        Args:
            rng: Random source; pass a seeded instance for reproducible output

        """
        self.rng = rng or random.Random()
        self.last_operations: list[MutationType] = []

        self._mutation_handlers: dict[MutationType, Callable[[bytes, int], bytes]] = {
            MutationType.BIT_FLIP: self.bit_flip,
            MutationType.BYTE_FLIP: self.byte_flip,
            MutationType.INSERT_RANDOM: self.insert_random,
            MutationType.DELETE_BYTE: self.delete_byte,
            MutationType.REPLACE_INTERESTING: self.replace_interesting,
        }

    # -------------------------------------------------------------------------
    # Atomic operators
    # -------------------------------------------------------------------------

    def bit_flip(self, data: bytes, pos: int) -> bytes:
        """Flip the bit at absolute bit index ``pos``."""
        byte_pos, bit_pos = divmod(pos, 8)
        if pos < 0 or byte_pos >= len(data):
            return bytes(data)

        result = bytearray(data)
        result[byte_pos] ^= 1 << bit_pos
        return bytes(result)

    def byte_flip(self, data: bytes, pos: int) -> bytes:
        """XOR the byte at ``pos`` with 0xFF."""
        if not 0 <= pos < len(data):
            return bytes(data)

        result = bytearray(data)
        result[pos] ^= 0xFF
        return bytes(result)

    def insert_random(self, data: bytes, pos: int) -> bytes:
        """Insert one random byte at ``pos`` clamped to [0, len(data)].

        Refused once the buffer has reached MAX_CASE_SIZE.
        """
        if len(data) >= MAX_CASE_SIZE:
            return bytes(data)

        pos = max(0, min(pos, len(data)))
        value = self.rng.randrange(256)
        return bytes(data[:pos]) + bytes((value,)) + bytes(data[pos:])

    def delete_byte(self, data: bytes, pos: int) -> bytes:
        """Remove the byte at ``pos`` clamped to [0, len(data) - 1].

        Refused for buffers of one byte or less; sequences never become empty.
        """
        if len(data) <= 1:
            return bytes(data)

        pos = max(0, min(pos, len(data) - 1))
        return bytes(data[:pos]) + bytes(data[pos + 1 :])

    def replace_interesting(self, data: bytes, pos: int) -> bytes:
        """Overwrite the byte at ``pos`` with a random interesting value."""
        if not 0 <= pos < len(data):
            return bytes(data)

        result = bytearray(data)
        result[pos] = self.rng.choice(INTERESTING_8)
        return bytes(result)

    # -------------------------------------------------------------------------
    # Composite operator
    # -------------------------------------------------------------------------

    def havoc(self, data: bytes) -> bytes:
        """Apply 1-8 randomly chosen atomic mutations in sequence.

        Each round picks its position against the current buffer length,
        which may already differ from the input after inserts or deletes.

        Args:
            data: Input bytes (may be empty)

        Returns:
            Mutated copy of the input

        """
        result = bytes(data)
        rounds = self.rng.randint(HAVOC_MIN_ROUNDS, HAVOC_MAX_ROUNDS)
        operations = list(self._mutation_handlers)
        self.last_operations = []

        for _ in range(rounds):
            mutation_type = self.rng.choice(operations)
            pos = self._random_position(mutation_type, len(result))
            result = self._mutation_handlers[mutation_type](result, pos)
            self.last_operations.append(mutation_type)

        logger.debug(
            "havoc_applied",
            rounds=rounds,
            operations=[op.value for op in self.last_operations],
            input_size=len(data),
            output_size=len(result),
        )
        return result

    def _random_position(self, mutation_type: MutationType, length: int) -> int:
        """Pick a position appropriate to the operator and buffer length."""
        if mutation_type is MutationType.BIT_FLIP:
            return self.rng.randrange(max(1, length * 8))
        if mutation_type is MutationType.INSERT_RANDOM:
            return self.rng.randrange(length + 1)
        # Empty buffers yield position 0, which every remaining operator
        # treats as a no-op or refusal.
        return self.rng.randrange(max(1, length))
