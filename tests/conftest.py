"""
Pytest configuration and shared fixtures for FuzzMaster tests.
"""

import random

import pytest

from fuzzmaster.core.corpus import demo_corpus
from fuzzmaster.core.fuzzing_session import FuzzingSession
from fuzzmaster.core.mutation.byte_mutator import ByteMutator
from fuzzmaster.core.types import FuzzStrategy, Protocol

HTTP_SEED = b"GET / HTTP/1.1\r\nHost: localhost\r\n\r\n"


@pytest.fixture
def rng() -> random.Random:
    """Provide a seeded random source for deterministic tests."""
    return random.Random(1337)


@pytest.fixture
def mutator(rng: random.Random) -> ByteMutator:
    """Provide a ByteMutator backed by the seeded random source."""
    return ByteMutator(rng)


@pytest.fixture
def http_session() -> FuzzingSession:
    """Mutation-strategy HTTP session seeded with a single GET request.

    Returns:
        FuzzingSession ready to generate cases
    """
    session = FuzzingSession(Protocol.HTTP, FuzzStrategy.MUTATION, rng_seed=42)
    session.add_seed(HTTP_SEED)
    return session


@pytest.fixture
def demo_session() -> FuzzingSession:
    """Mutation-strategy session loaded with the demo corpus."""
    session = FuzzingSession(Protocol.HTTP, FuzzStrategy.MUTATION, rng_seed=7)
    for seed in demo_corpus():
        session.add_seed(seed)
    return session
