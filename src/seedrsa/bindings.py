"""Host-facing entry points that marshal plain strings and bytes into the core.

Exponents and moduli are accepted either as integers or as decimal strings, messages as text or raw bytes.
Decrypted bytes are mapped one-to-one onto characters (Latin-1), so each byte becomes the character with that code.

Typical usage example:

    kp = generate_keypair(seed_a, seed_b)
    c = encrypt("HelloWorld!", kp.e, kp.n)
    r = decrypt(c, kp)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from seedrsa import rsa
from seedrsa.codec import string_to_number
from seedrsa.rsa import Keypair


def _as_number(value: int | str) -> int:
    if isinstance(value, str):
        return string_to_number(value)
    return value


def generate_keypair(seed_a: bytes, seed_b: bytes) -> Keypair:
    """Derive a key pair from two distinct 32-byte seeds.

    Raises:
        ValueError: If a seed is not exactly 32 bytes long.
    """
    return Keypair.generate(seed_a, seed_b)


def encrypt(message: str | bytes, e: int | str, n: int | str) -> str:
    """Encrypt `message` (UTF-8 encoded if text) for the public identity `(e, n)`."""
    if isinstance(message, str):
        message = message.encode("utf-8")
    return rsa.encrypt(message, _as_number(e), _as_number(n))


def decrypt(ciphertext: str, keypair: Keypair) -> str:
    """Decrypt ciphertext exactly as produced by `encrypt()`, leading separator included."""
    return keypair.decrypt(rsa.strip_ciphertext(ciphertext)).decode("latin-1")


def public_identity(keypair: Keypair) -> str:
    """The public identity as text, `"(e, n)"`."""
    return keypair.public_key_display()
