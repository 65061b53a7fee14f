# pylint: disable=missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import pytest

from seedrsa import bindings
from seedrsa.rsa import Keypair

SMALL_KEY = Keypair(17, 413, 3233)


def test_generate_keypair(keypair, seed_one, test_seed):
    assert bindings.generate_keypair(bytes(seed_one), bytes(test_seed)) == keypair


@pytest.mark.parametrize("seed_a,seed_b", [(bytes(31), bytes(32)), (bytes(32), b"")])
def test_generate_keypair_seed_length(seed_a, seed_b):
    with pytest.raises(ValueError):
        bindings.generate_keypair(seed_a, seed_b)


def test_encrypt_decimal_strings():
    assert bindings.encrypt("A", "17", "3233") == ",2790"
    assert bindings.encrypt(b"A", 17, 3233) == ",2790"


def test_encrypt_rejects_malformed_exponent():
    with pytest.raises(ValueError):
        bindings.encrypt("A", "0x11", "3233")


def test_decrypt_strips_separator():
    assert bindings.decrypt(",2790", SMALL_KEY) == "A"


def test_round_trip(keypair):
    ciphertext = bindings.encrypt("HelloWorld!", str(keypair.e), str(keypair.n))
    assert bindings.decrypt(ciphertext, keypair) == "HelloWorld!"


def test_round_trip_bytes_as_characters():
    # Non-ASCII text comes back one character per UTF-8 byte.
    ciphertext = bindings.encrypt("é", 17, 3233)
    assert bindings.decrypt(ciphertext, SMALL_KEY) == "é".encode("utf-8").decode("latin-1")


def test_public_identity(keypair):
    assert bindings.public_identity(SMALL_KEY) == "(17, 3233)"
    assert bindings.public_identity(keypair) == f"({keypair.e}, {keypair.n})"
