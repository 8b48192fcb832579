"""
Seed Corpus - Ordered, Append-Only Mutation Bases

Seeds are added during session setup and sampled from during generation.
Mutators always work on copies; once frozen the corpus is read-only, so
concurrent sampling never observes a partially added seed.
"""

import random
from collections.abc import Iterable, Iterator

from fuzzmaster.core.constants import MAX_CASE_SIZE
from fuzzmaster.core.exceptions import CorpusFrozenError, ValidationError
from fuzzmaster.utils.logger import get_logger

logger = get_logger(__name__)


class Corpus:
    """Ordered sequence of seed byte buffers."""

    def __init__(self, seeds: Iterable[bytes] = ()):
        self._seeds: list[bytes] = []
        self._frozen = False
        for seed in seeds:
            self.add(seed)

    def __len__(self) -> int:
        return len(self._seeds)

    def __iter__(self) -> Iterator[bytes]:
        return iter(self._seeds)

    def __getitem__(self, index: int) -> bytes:
        return self._seeds[index]

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Stop accepting new seeds."""
        self._frozen = True

    def add(self, seed: bytes) -> int:
        """Append a copy of ``seed`` and return its index.

        Raises:
            CorpusFrozenError: If the corpus has been frozen
            ValidationError: If the seed is larger than MAX_CASE_SIZE

        """
        if self._frozen:
            raise CorpusFrozenError(
                "Seeds can only be added before case generation starts",
                error_code="CORPUS_FROZEN",
                context={"corpus_size": len(self._seeds)},
            )
        if len(seed) > MAX_CASE_SIZE:
            raise ValidationError(
                f"Seed of {len(seed)} bytes exceeds the {MAX_CASE_SIZE} byte limit",
                error_code="SEED_TOO_LARGE",
                context={"size": len(seed), "max_size": MAX_CASE_SIZE},
            )

        self._seeds.append(bytes(seed))
        index = len(self._seeds) - 1
        logger.debug("seed_added", index=index, size=len(seed))
        return index

    def sample(self, rng: random.Random) -> tuple[int, bytes] | None:
        """Pick a seed uniformly at random.

        Returns:
            Tuple of (index, seed), or None when the corpus is empty

        """
        if not self._seeds:
            return None
        index = rng.randrange(len(self._seeds))
        return index, self._seeds[index]


def demo_corpus() -> list[bytes]:
    """Small mixed corpus: two HTTP requests and a truncated DNS header."""
    return [
        b"GET / HTTP/1.1\r\nHost: localhost\r\n\r\n",
        b"POST /api HTTP/1.1\r\nContent-Length: 0\r\n\r\n",
        bytes([0x00, 0x01, 0x01, 0x00, 0x00, 0x01, 0x00, 0x00]),
    ]
