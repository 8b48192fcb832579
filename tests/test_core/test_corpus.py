"""Tests for the seed corpus."""

import random

import pytest

from fuzzmaster.core.constants import MAX_CASE_SIZE
from fuzzmaster.core.corpus import Corpus, demo_corpus
from fuzzmaster.core.exceptions import CorpusFrozenError, ValidationError


class TestCorpus:
    """Test Corpus behavior."""

    def test_empty_sample_returns_none(self):
        """Empty corpus has nothing to sample."""
        assert Corpus().sample(random.Random(0)) is None

    def test_seeds_stored_as_bytes_copies(self):
        """Mutable seeds are copied on insert."""
        seed = bytearray(b"abc")
        corpus = Corpus([seed])
        seed[0] = 0x7A

        assert corpus[0] == b"abc"
        assert isinstance(corpus[0], bytes)

    def test_sample_returns_index_and_seed(self):
        """Samples pair the index with the stored seed."""
        corpus = Corpus([b"zero", b"one", b"two"])
        for _ in range(20):
            index, seed = corpus.sample(random.Random(_))
            assert corpus[index] == seed

    def test_frozen_rejects_seeds(self):
        """Freeze makes the corpus read-only."""
        corpus = Corpus([b"seed"])
        corpus.freeze()

        with pytest.raises(CorpusFrozenError) as exc_info:
            corpus.add(b"late")
        assert exc_info.value.context == {"corpus_size": 1}
        assert len(corpus) == 1

    def test_seed_at_size_limit_accepted(self):
        """A seed of exactly MAX_CASE_SIZE bytes is stored."""
        corpus = Corpus([b"A" * MAX_CASE_SIZE])
        assert len(corpus[0]) == MAX_CASE_SIZE

    def test_oversized_seed_rejected(self):
        """Seeds over MAX_CASE_SIZE are refused and not stored."""
        corpus = Corpus()

        with pytest.raises(ValidationError) as exc_info:
            corpus.add(b"A" * (MAX_CASE_SIZE + 1000))
        assert exc_info.value.error_code == "SEED_TOO_LARGE"
        assert exc_info.value.context["size"] == MAX_CASE_SIZE + 1000
        assert len(corpus) == 0


class TestDemoCorpus:
    """Test the bundled demo corpus."""

    def test_contents(self):
        """Two HTTP requests and one binary header."""
        seeds = demo_corpus()

        assert len(seeds) == 3
        assert seeds[0].startswith(b"GET / HTTP/1.1")
        assert seeds[1].startswith(b"POST /api")
        assert seeds[2] == b"\x00\x01\x01\x00\x00\x01\x00\x00"
