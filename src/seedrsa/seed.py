"""Fixed-size seed material for the deterministic generators.

All randomness in the package is derived from explicit 32-byte seeds. The same seed always reproduces the same
primes, witnesses and exponents, which is what makes the package testable and also what makes it unsuitable for
production keys unless the seed itself is unpredictable.

Typical usage example:

    seed = Seed(bytes(range(32)))
    rng = seed.rng()
    seed = Seed.random()
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import random
import secrets

SEED_SIZE: int = 32


class Seed(bytes):
    """Exactly `SEED_SIZE` bytes of seed material.

    Construction fails on any other length rather than padding or truncating.
    """

    def __new__(cls, material: bytes | bytearray | list[int]) -> "Seed":
        if isinstance(material, int):
            raise TypeError("Seed material must be a byte sequence, not an integer.")
        raw = bytes(material)
        if len(raw) != SEED_SIZE:
            raise ValueError(f"Seed must be exactly {SEED_SIZE} bytes, got {len(raw)}.")
        return super().__new__(cls, raw)

    def rng(self) -> random.Random:
        """Create a fresh deterministic generator from this seed.

        Returns:
            A `random.Random` instance. Each call starts the stream from the beginning.
        """
        return random.Random(bytes(self))

    @classmethod
    def fromhex(cls, text: str) -> "Seed":
        """Parse a seed from its hexadecimal form (64 hex digits)."""
        return cls(bytes.fromhex(text))

    @classmethod
    def random(cls) -> "Seed":
        """Draw unpredictable seed material from the operating system."""
        return cls(secrets.token_bytes(SEED_SIZE))


def as_seed(material: bytes | bytearray | list[int]) -> Seed:
    """Coerce raw seed material, passing existing `Seed` instances through."""
    if isinstance(material, Seed):
        return material
    return Seed(material)
