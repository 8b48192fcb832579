"""Case generation engines: strategy dispatch and protocol packets."""

from .generator import FuzzCase, FuzzCaseGenerator
from .packet_generator import (
    PACKET_GENERATORS,
    encode_dns_name,
    generate_packet,
    random_packet,
    register_generator,
)

__all__ = [
    "PACKET_GENERATORS",
    "FuzzCase",
    "FuzzCaseGenerator",
    "encode_dns_name",
    "generate_packet",
    "random_packet",
    "register_generator",
]
