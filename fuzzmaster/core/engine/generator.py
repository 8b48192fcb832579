"""Fuzz Case Generator - Strategy Dispatch

Turns a sampled base buffer into a FuzzCase according to the session's
strategy. Case ids and corpus sampling are owned by FuzzingSession; this
module only decides how the bytes are produced.
"""

from __future__ import annotations

import random
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from fuzzmaster.core.constants import (
    FALLBACK_PACKET_SIZE,
    MAX_CASE_SIZE,
    RANDOM_MAX_LENGTH,
    RANDOM_MIN_LENGTH,
)
from fuzzmaster.core.engine.packet_generator import generate_packet, random_packet
from fuzzmaster.core.exceptions import ValidationError
from fuzzmaster.core.mutation.byte_mutator import ByteMutator
from fuzzmaster.core.types import FuzzStrategy, Protocol


@dataclass(frozen=True)
class FuzzCase:
    """One generated test input.

    Attributes:
        id: Session-unique, strictly increasing case number (starts at 1)
        data: Bytes handed to the executor
        mutation_type: Display label of the strategy that produced the data
        parent_id: Corpus index of the base seed, if one was used

    """

    id: int
    data: bytes
    mutation_type: str
    parent_id: int | None = None

    @property
    def size(self) -> int:
        return len(self.data)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "size": self.size,
            "mutation_type": self.mutation_type,
            "parent_id": self.parent_id,
            "preview": self.data[:16].hex(),
        }


class FuzzCaseGenerator:
    """Produces case bytes for a fixed protocol and strategy."""

    def __init__(
        self,
        protocol: Protocol,
        strategy: FuzzStrategy,
        rng: random.Random | None = None,
        mutator: ByteMutator | None = None,
        random_min_length: int = RANDOM_MIN_LENGTH,
        random_max_length: int = RANDOM_MAX_LENGTH,
        fallback_packet_size: int = FALLBACK_PACKET_SIZE,
    ):
        """Initialize the generator.

        Args:
            protocol: Target protocol used by the Generation strategy
            strategy: Strategy applied to every case
            rng: Random source shared with the mutator unless one is given
            mutator: Byte mutator used by havoc-based strategies
            random_min_length: Shortest Random strategy case
            random_max_length: Longest Random strategy case
            fallback_packet_size: Size of packets for unregistered protocols

        Raises:
            ValidationError: If the Random length range or fallback size is invalid

        """
        if not 0 <= random_min_length <= random_max_length <= MAX_CASE_SIZE:
            raise ValidationError(
                "Invalid Random strategy length range",
                error_code="INVALID_LENGTH_RANGE",
                context={
                    "random_min_length": random_min_length,
                    "random_max_length": random_max_length,
                },
            )
        if not 0 <= fallback_packet_size <= MAX_CASE_SIZE:
            raise ValidationError(
                "Invalid fallback packet size",
                error_code="INVALID_PACKET_SIZE",
                context={"fallback_packet_size": fallback_packet_size},
            )

        self.protocol = protocol
        self.strategy = strategy
        self.rng = rng or random.Random()
        self.mutator = mutator or ByteMutator(self.rng)
        self.random_min_length = random_min_length
        self.random_max_length = random_max_length
        self.fallback_packet_size = fallback_packet_size

        self._strategy_handlers: dict[FuzzStrategy, Callable[[bytes], bytes]] = {
            FuzzStrategy.RANDOM: self._generate_random,
            FuzzStrategy.MUTATION: self.mutator.havoc,
            FuzzStrategy.GENERATION: self._generate_protocol_packet,
        }

    @property
    def uses_base(self) -> bool:
        """Whether the active strategy derives its bytes from the base seed."""
        return self.strategy not in (FuzzStrategy.RANDOM, FuzzStrategy.GENERATION)

    def build(
        self, case_id: int, base: bytes, parent_id: int | None = None
    ) -> FuzzCase:
        """Produce a FuzzCase from a base buffer.

        Strategies without a dedicated handler (Grammar, Dictionary) apply
        havoc to the base, same as Mutation.

        Args:
            case_id: ID assigned by the session
            base: Sampled corpus seed or the canonical fallback seed
            parent_id: Corpus index of ``base``, or None for the fallback seed

        Returns:
            The new FuzzCase

        """
        handler = self._strategy_handlers.get(self.strategy, self.mutator.havoc)
        data = handler(base)

        return FuzzCase(
            id=case_id,
            data=data,
            mutation_type=self.strategy.label,
            parent_id=parent_id if self.uses_base else None,
        )

    def _generate_random(self, base: bytes) -> bytes:
        length = self.rng.randint(self.random_min_length, self.random_max_length)
        return random_packet(self.rng, length)

    def _generate_protocol_packet(self, base: bytes) -> bytes:
        return generate_packet(self.protocol, self.rng, self.fallback_packet_size)
