"""Seeded Textbook RSA in an Academic Sense.

Provides RSA key pair generation from two 32-byte seeds, byte-wise encryption and decryption, and the number theory
and prime-generation utilities underneath. Everything is deterministic given the seeds, which is convenient for
teaching and testing and unsafe for anything else unless the seeds are unpredictable.

Typical usage example:

    kp = Keypair.generate(Seed.random(), Seed.random())
    c = encrypt(b"Hi there!", *kp.public_identity())
    r = kp.decrypt(strip_ciphertext(c))
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from seedrsa.codec import number_to_string
from seedrsa.codec import string_to_number
from seedrsa.keygen import build_keypair
from seedrsa.keygen import generate_prime
from seedrsa.keygen import is_prime
from seedrsa.keygen import miller_rabin
from seedrsa.numtheory import extended_gcd
from seedrsa.numtheory import gcd
from seedrsa.numtheory import lcm
from seedrsa.numtheory import mod_inverse
from seedrsa.rsa import decrypt
from seedrsa.rsa import encrypt
from seedrsa.rsa import import_public
from seedrsa.rsa import Keypair
from seedrsa.rsa import strip_ciphertext
from seedrsa.seed import Seed

__version__ = "0.1.0"
__all__ = [
    "Keypair",
    "Seed",
    "build_keypair",
    "decrypt",
    "encrypt",
    "extended_gcd",
    "gcd",
    "generate_prime",
    "import_public",
    "is_prime",
    "lcm",
    "miller_rabin",
    "mod_inverse",
    "number_to_string",
    "string_to_number",
    "strip_ciphertext",
]
