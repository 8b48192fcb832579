"""FuzzMaster Type Definitions.

Shared enums used across the fuzzing framework to avoid circular imports.
Contains the fuzzing strategies and the supported target protocols.
"""

from __future__ import annotations

from enum import Enum

# =============================================================================
# Fuzzing Strategy
# =============================================================================


class FuzzStrategy(str, Enum):
    """Top-level policy selecting how a case's bytes are produced."""

    RANDOM = "random"
    MUTATION = "mutation"
    GENERATION = "generation"
    GRAMMAR = "grammar"
    DICTIONARY = "dictionary"

    @property
    def label(self) -> str:
        """Display label recorded on each FuzzCase (e.g. "Mutation")."""
        return self.value.capitalize()

    @property
    def description(self) -> str:
        return _STRATEGY_DESCRIPTIONS[self]


_STRATEGY_DESCRIPTIONS = {
    FuzzStrategy.RANDOM: "Pure random byte generation",
    FuzzStrategy.MUTATION: "Mutate valid input samples",
    FuzzStrategy.GENERATION: "Generate packets from protocol templates",
    FuzzStrategy.GRAMMAR: "Grammar-based structured fuzzing",
    FuzzStrategy.DICTIONARY: "Dictionary/wordlist based",
}


# =============================================================================
# Target Protocols
# =============================================================================


class Protocol(str, Enum):
    """Target wire protocols.

    The default port is metadata for reporting only; this package never
    opens a connection.
    """

    HTTP = "http"
    DNS = "dns"
    FTP = "ftp"
    SMTP = "smtp"
    MODBUS = "modbus"
    CUSTOM = "custom"

    @property
    def default_port(self) -> int:
        return _DEFAULT_PORTS.get(self, 0)


_DEFAULT_PORTS = {
    Protocol.HTTP: 80,
    Protocol.DNS: 53,
    Protocol.FTP: 21,
    Protocol.SMTP: 25,
    Protocol.MODBUS: 502,
}
