"""Core Key Generation Utility, mainly focusing on the seeded generation of probable primes.

Primality is decided by a compound test: trial division against the primes below 1000, a Fermat test with fixed
bases and finally a seeded Miller-Rabin test. Prime generation rejection-samples odd integers of the requested size.
Everything random is drawn from generators created from explicit seeds, so the same seeds always produce the same
key material.

Typical usage example:

    is_prime(1049, seed)
    p = generate_prime(256, 1000, seed)
    e, d, n = build_keypair(seed_p, seed_q)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging

from seedrsa.numtheory import gcd
from seedrsa.numtheory import lcm
from seedrsa.numtheory import mod_inverse
from seedrsa.seed import as_seed
from seedrsa.seed import Seed

logger = logging.getLogger(__name__)

SMALL_PRIMES_LIMIT: int = 1000
FERMAT_BASES: tuple[int, ...] = (2, 3, 5, 7, 11)
MILLER_RABIN_ROUNDS: int = 50
PRIME_BITS: int = 256
PRIME_TRIES: int = 1000


def _sieve(n: int = SMALL_PRIMES_LIMIT) -> list[int]:
    """Implements the Sieve of Eratosthenes.

    Uses the textbook Sieve of Eratosthenes to generate a set of primes up to `n`.
    Includes memory space optimization and sieving until root.

    Args:
        n: The number up to which to generate primes. Defaults to 1000. Must be >= 0.

    Returns:
        A list of primes up to `n`.
    """
    if n < 2:
        return []
    i_size = (n - 1) // 2
    candidate: list[bool] = [True] * i_size
    for i in range(int(n**0.5) // 2):
        if candidate[i]:
            r = 2 * i + 3
            for j in range((r * r - 3) // 2, i_size, r):
                candidate[j] = False
    result = [2] + [(no * 2 + 3) for no, ele in enumerate(candidate) if ele]
    return result


SMALL_PRIMES: tuple[int, ...] = tuple(_sieve(SMALL_PRIMES_LIMIT))
_SMALL_PRIME_SET: frozenset[int] = frozenset(SMALL_PRIMES)


def miller_rabin(n: int, seed: Seed | bytes) -> bool:
    """Perform a seeded Miller-Rabin primality test.

    Runs `MILLER_RABIN_ROUNDS` rounds with witnesses drawn from `[2, n-2)` by a generator created from `seed`.
    A witness sharing a factor with `n` is treated as proof of compositeness.

    Args:
        n: The integer to be tested.
        seed: Seed material for witness selection.

    Returns:
        True if `n` is probably prime, False otherwise.
    """
    if n <= 3:
        return n == 2 or n == 3
    if n % 2 == 0:
        return False
    tw = n - 1
    s = 0
    d = tw
    while d % 2 == 0:
        s += 1
        d //= 2
    rng = as_seed(seed).rng()
    for _ in range(MILLER_RABIN_ROUNDS):
        a = rng.randrange(2, tw - 1)
        if gcd(a, n) != 1:
            return False
        x = pow(a, d, n)
        if x == 1 or x == tw:
            continue
        for _ in range(1, s):
            x = pow(x, 2, n)
            if x == tw:
                break
        else:
            return False
    return True


def is_prime(n: int, seed: Seed | bytes) -> bool:
    """Performs a compound primality test.

    Cheap checks come first: membership in and divisibility by the small prime table, then a Fermat test against
    `FERMAT_BASES`. Only survivors reach the Miller-Rabin test.

    Args:
        n: The candidate to test.
        seed: Seed material passed on to `miller_rabin()`.

    Returns:
        True if `n` is probably prime, False otherwise.
    """
    if n < 2:
        return False
    if n in _SMALL_PRIME_SET:
        return True
    for prime in SMALL_PRIMES:
        if n % prime == 0:
            return False
    for base in FERMAT_BASES:
        if pow(base, n - 1, n) != 1:
            return False
    return miller_rabin(n, seed)


def generate_prime(bits: int, tries: int, seed: Seed | bytes) -> int | None:
    """Generate a probable prime of exactly `bits` bits.

    Candidates are drawn from `[2**(bits-1), 2**bits)`, made odd by adding one where needed, and checked with
    `is_prime()` under the same seed.

    Args:
        bits: The size of the prime in bits. Must be >= 1.
        tries: How many candidates to test before giving up. Must be >= 0.
        seed: Seed material for candidate sampling and primality testing.

    Returns:
        The first candidate that passes, or None if all `tries` candidates were rejected.

    Raises:
        ValueError: If `bits` or `tries` is out of range.
    """
    if bits < 1:
        raise ValueError("bits must be >= 1")
    if tries < 0:
        raise ValueError("tries must be >= 0")
    seed = as_seed(seed)
    low = 1 << (bits - 1)
    high = 1 << bits
    rng = seed.rng()
    for attempt in range(tries):
        candidate = rng.randrange(low, high)
        if candidate % 2 == 0:
            candidate += 1
        if is_prime(candidate, seed):
            logger.debug("Found %d-bit probable prime after %d candidates.", bits, attempt + 1)
            return candidate
    logger.debug("No %d-bit probable prime within %d candidates.", bits, tries)
    return None


def build_keypair(seed_p: Seed | bytes, seed_q: Seed | bytes) -> tuple[int, int, int]:
    """Generates an RSA key pair from two seeds.

    Two `PRIME_BITS`-bit primes are generated from the two seeds. The public exponent is searched with a generator
    seeded from `seed_p` until it is coprime to the Carmichael function `lcm(p-1, q-1)`, and the private exponent is
    its inverse modulo that value, shifted into `[0, lcm)` when negative.

    Callers must supply distinct seeds; equal seeds give equal primes.

    Args:
        seed_p: Seed for the first prime and for the exponent search.
        seed_q: Seed for the second prime.

    Returns:
        A tuple of (public exponent, private exponent, modulus).

    Raises:
        ValueError: If either seed is not exactly 32 bytes.
        RuntimeError: If either prime search is exhausted.
    """
    seed_p, seed_q = as_seed(seed_p), as_seed(seed_q)
    p = generate_prime(PRIME_BITS, PRIME_TRIES, seed_p)
    if p is None:
        raise RuntimeError(f"No {PRIME_BITS}-bit prime found in {PRIME_TRIES} tries for the first seed.")
    q = generate_prime(PRIME_BITS, PRIME_TRIES, seed_q)
    if q is None:
        raise RuntimeError(f"No {PRIME_BITS}-bit prime found in {PRIME_TRIES} tries for the second seed.")
    if p == q:
        logger.warning("Both seeds produced the same prime; the resulting key is trivially factorable.")
    n = p * q
    carmichael = lcm(p - 1, q - 1)
    rng = seed_p.rng()
    draws = 0
    while True:
        draws += 1
        e = rng.randrange(2, carmichael - 2)
        if gcd(e, carmichael) == 1:
            break
    logger.debug("Public exponent selected after %d draws.", draws)
    d = mod_inverse(e, carmichael)
    if d is None:  # Unreachable, e was just checked to be coprime.
        raise RuntimeError("Public exponent has no inverse.")
    if d < 0:
        d += carmichael
    return e, d, n
