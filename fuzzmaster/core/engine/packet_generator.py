"""Protocol Packet Generator.

Builds minimal, well-formed packets for known protocols so the Generation
strategy produces inputs a target will parse past its first checks.
Generators live in a registry keyed by Protocol; protocols without an
entry fall back to random bytes.
"""

from __future__ import annotations

import random
import struct
from collections.abc import Callable

from fuzzmaster.core.constants import FALLBACK_PACKET_SIZE
from fuzzmaster.core.types import Protocol

PacketGenerator = Callable[[random.Random], bytes]

PACKET_GENERATORS: dict[Protocol, PacketGenerator] = {}

HTTP_METHODS = ("GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS")
HTTP_PATHS = (
    "/",
    "/admin",
    "/api",
    "/login",
    "/../../../etc/passwd",  # Path traversal
    "/%" * 100,  # Long percent-encoding run
)

DNS_TEST_DOMAIN = "test.example.com"
DNS_TRANSACTION_ID = 0x0001
DNS_FLAGS_STANDARD_QUERY = 0x0100
DNS_QTYPE_A = 0x0001
DNS_QCLASS_IN = 0x0001


def register_generator(
    protocol: Protocol,
) -> Callable[[PacketGenerator], PacketGenerator]:
    """Register a packet generator for a protocol.

    Example:
        >>> @register_generator(Protocol.FTP)
        ... def generate_ftp(rng: random.Random) -> bytes:
        ...     return b"USER anonymous\\r\\n"

    """

    def decorator(func: PacketGenerator) -> PacketGenerator:
        PACKET_GENERATORS[protocol] = func
        return func

    return decorator


def random_packet(rng: random.Random, size: int = FALLBACK_PACKET_SIZE) -> bytes:
    """Return ``size`` uniformly random bytes."""
    return bytes(rng.randrange(256) for _ in range(size))


def generate_packet(
    protocol: Protocol, rng: random.Random, fallback_size: int = FALLBACK_PACKET_SIZE
) -> bytes:
    """Generate a packet for ``protocol``, or random bytes if none is registered."""
    generator = PACKET_GENERATORS.get(protocol)
    if generator is None:
        return random_packet(rng, fallback_size)
    return generator(rng)


@register_generator(Protocol.HTTP)
def generate_http(rng: random.Random) -> bytes:
    """Minimal HTTP/1.1 request: request line plus a Host header."""
    method = rng.choice(HTTP_METHODS)
    path = rng.choice(HTTP_PATHS)
    return f"{method} {path} HTTP/1.1\r\nHost: target\r\n\r\n".encode("ascii")


def encode_dns_name(domain: str) -> bytes:
    """Encode a domain as length-prefixed labels without the root terminator.

    >>> encode_dns_name("a.bc")
    b'\\x01a\\x02bc'
    """
    encoded = b""
    for label in domain.split("."):
        raw = label.encode("ascii")
        encoded += bytes((len(raw),)) + raw
    return encoded


@register_generator(Protocol.DNS)
def generate_dns(rng: random.Random) -> bytes:
    """Single-question DNS A query for DNS_TEST_DOMAIN."""
    header = struct.pack(
        ">HHHHHH",
        DNS_TRANSACTION_ID,
        DNS_FLAGS_STANDARD_QUERY,
        1,  # QDCOUNT
        0,  # ANCOUNT
        0,  # NSCOUNT
        0,  # ARCOUNT
    )
    question = encode_dns_name(DNS_TEST_DOMAIN) + b"\x00"
    trailer = struct.pack(">HH", DNS_QTYPE_A, DNS_QCLASS_IN)
    return header + question + trailer
