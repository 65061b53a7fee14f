"""Provides textbook RSA over single bytes, the immutable key pair and its key files.

Each plaintext byte is raised to the public exponent on its own, with no padding or block packing, and the results
are written as comma-separated decimal integers. Every element, the first included, is preceded by the separator,
so callers strip one leading separator before decrypting.

Typical usage example:

    kp = Keypair.generate(seed_p, seed_q)
    c = encrypt(b"HelloWorld!", *kp.public_identity())
    r = kp.decrypt(strip_ciphertext(c))
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import base64
import logging
import pathlib
import typing

from pyasn1.codec.der import decoder
from pyasn1.codec.der import encoder
from pyasn1.codec.native import encoder as localize
from pyasn1.type import namedtype
from pyasn1.type import univ
from pyasn1_modules import rfc8017

from seedrsa import keygen
from seedrsa.codec import number_to_string
from seedrsa.codec import string_to_number
from seedrsa.seed import Seed

logger = logging.getLogger(__name__)

SEPARATOR = ","
KEYPAIR_VERSION = 0

PEM_TYPES = {
    "KEYPAIR": ("-----BEGIN SEEDRSA KEYPAIR-----", "-----END SEEDRSA KEYPAIR-----"),
    "PKCS1_PUB": ("-----BEGIN RSA PUBLIC KEY-----", "-----END RSA PUBLIC KEY-----"),
}


class KeypairData(univ.Sequence):
    """No standard structure holds just (e, d, n), so the key pair file gets its own."""
    componentType = namedtype.NamedTypes(
        namedtype.NamedType("version", univ.Integer()),
        namedtype.NamedType("publicExponent", univ.Integer()),
        namedtype.NamedType("privateExponent", univ.Integer()),
        namedtype.NamedType("modulus", univ.Integer()),
    )


def encrypt(message: bytes, e: int, n: int) -> str:
    """Encrypt each byte of `message` with the public exponent.

    Args:
        message: The raw bytes to encrypt.
        e: The public exponent.
        n: The modulus.

    Returns:
        The ciphertext: `SEPARATOR` followed by a decimal integer, once per byte. Empty for an empty message.
    """
    encrypted_values = ""
    for byte in message:
        encrypted_values += SEPARATOR + number_to_string(pow(byte, e, n))
    return encrypted_values


def strip_ciphertext(ciphertext: str) -> str:
    """Remove the single leading separator that `encrypt()` puts before the first element."""
    if ciphertext.startswith(SEPARATOR):
        return ciphertext[len(SEPARATOR):]
    return ciphertext


def decrypt(ciphertext: str, d: int, n: int) -> bytes:
    """Decrypt a stripped ciphertext with the private exponent.

    Units that do not decrypt to a value in `[0, 255]` are dropped without error, so only messages whose bytes were
    encrypted under the matching key round-trip.

    Args:
        ciphertext: Separator-joined decimal integers, without the leading separator.
        d: The private exponent.
        n: The modulus.

    Returns:
        The recovered bytes.

    Raises:
        ValueError: If a segment is not a decimal integer.
    """
    if not ciphertext:
        return b""
    decrypted_values = bytearray()
    for segment in ciphertext.split(SEPARATOR):
        value = pow(string_to_number(segment), d, n)
        if 0 <= value <= 0xFF:
            decrypted_values.append(value)
        else:
            logger.debug("Dropping ciphertext unit that decrypts outside a byte.")
    return bytes(decrypted_values)


class Keypair(typing.NamedTuple):
    """An immutable RSA key pair.

    Attributes:
        e: The public exponent.
        d: The private exponent.
        n: The modulus.
    """
    e: int
    d: int
    n: int

    @classmethod
    def generate(cls, seed_p: Seed | bytes, seed_q: Seed | bytes) -> "Keypair":
        """Derive a key pair from two distinct 32-byte seeds.

        Args:
            seed_p: Seed for the first prime and the public exponent search.
            seed_q: Seed for the second prime.

        Returns:
            A new key pair.
        """
        return cls(*keygen.build_keypair(seed_p, seed_q))

    def public_identity(self) -> tuple[int, int]:
        """What a correspondent needs to encrypt to this key pair: `(e, n)`."""
        return self.e, self.n

    def public_key_display(self) -> str:
        return f"({number_to_string(self.e)}, {number_to_string(self.n)})"

    def encrypt(self, message: bytes) -> str:
        return encrypt(message, self.e, self.n)

    def decrypt(self, ciphertext: str) -> bytes:
        """Decrypt a stripped ciphertext addressed to this key pair."""
        return decrypt(ciphertext, self.d, self.n)

    def export(self, file: pathlib.Path) -> None:
        """Export the whole key pair to file.

        Args:
            file: The file to export the key pair to.
        """
        keydata = KeypairData()
        keydata["version"] = KEYPAIR_VERSION
        keydata["publicExponent"] = self.e
        keydata["privateExponent"] = self.d
        keydata["modulus"] = self.n
        write_pem(file, "KEYPAIR", encoder.encode(keydata))

    def export_public(self, file: pathlib.Path) -> None:
        """Export the public identity to file.

        We use the PKCS1 public key structure, as it holds exactly the modulus and exponent.

        Args:
            file: The file to export the public key to.
        """
        keydata = rfc8017.RSAPublicKey()
        keydata["modulus"] = self.n
        keydata["publicExponent"] = self.e
        write_pem(file, "PKCS1_PUB", encoder.encode(keydata))

    @classmethod
    def import_key(cls, file: pathlib.Path) -> "Keypair":
        """Import a key pair written by `export()`.

        Args:
            file: The file to import.

        Returns:
            The imported key pair.

        Raises:
            IOError: If the file is not a supported key pair file.
        """
        payload = read_pem(file, "KEYPAIR")
        keydata, _ = decoder.decode(payload, asn1Spec=KeypairData())
        pykeyd = localize.encode(keydata)
        if pykeyd["version"] != KEYPAIR_VERSION:
            raise IOError("Unsupported version of key pair file.")
        return cls(pykeyd["publicExponent"], pykeyd["privateExponent"], pykeyd["modulus"])


def import_public(file: pathlib.Path) -> tuple[int, int]:
    """Import a public identity written by `Keypair.export_public()`.

    Args:
        file: The file to import the public key from.

    Returns:
        The public identity `(e, n)`.
    """
    payload = read_pem(file, "PKCS1_PUB")
    keydata, _ = decoder.decode(payload, asn1Spec=rfc8017.RSAPublicKey())
    pykeyd = localize.encode(keydata)
    return pykeyd["publicExponent"], pykeyd["modulus"]


def read_pem(file: pathlib.Path, subtype: str) -> bytes:
    """Reads a PEM encoded file.

    Args:
        file: The file to read.
        subtype: The subtype of PEM encoding to accept.

    Returns:
        The decoded PEM encoded file.

    Raises:
        IOError: If the file has invalid PEM encoding.
    """
    curr_type = PEM_TYPES[subtype]
    with open(file, "r", encoding="ascii") as f:
        headline = f.readline().strip()
        if headline != curr_type[0]:
            raise IOError(f"PEM Headline {headline} does not match {curr_type[0]}")
        parcel = []
        while True:
            line = f.readline().strip()
            if not line:
                raise IOError(f"PEM File does not contain footer: {curr_type[1]}")
            if line == curr_type[1]:
                break
            parcel.append(line)
    return base64.b64decode("".join(parcel))


def write_pem(file: pathlib.Path, subtype: str, data: bytes) -> None:
    """Writes a PEM encoded file.

    Args:
        file: The file to write.
        subtype: The subtype of PEM encoding to write.
        data: The data to write.
    """
    curr_type = PEM_TYPES[subtype]
    payload = base64.b64encode(data).decode()
    with open(file, "w", encoding="ascii") as f:
        f.write(curr_type[0] + "\n")
        res = "\n".join(payload[i:i + 64] for i in range(0, len(payload), 64))
        res += "\n" if res else ""
        f.write(res)
        f.write(curr_type[1] + "\n")
