"""Mutation primitives -- byte-level operators and havoc."""

from .byte_mutator import ByteMutator

__all__ = [
    "ByteMutator",
]
