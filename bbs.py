"""
Description: Blum Blum Shub (BBS) pseudo-random bit generator.
Date: 19-Oct-2026

Notes:
    - BBS iterates x_{i+1} = x_i^2 mod n over a Blum integer n = p*q built from two safe primes,
      and outputs the least significant bit of every new state. The seed x_0 itself is never output.
    - Python ints are arbitrary precision, so squaring never overflows even for ~1000-bit moduli.
"""
import logging
import math
import multiprocessing
from dataclasses import dataclass
from typing import Iterator, Sequence

from bbs_errors import (
    CongruenceError,
    PrimalityError,
    DistinctPrimesError,
    SeedNotCoprimeError,
    SeedNotPositiveError,
    InvalidBitCountError,
)
from miller_rabin import miller_rabin_is_probable_prime

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BBSParams:
    """
    Parameters of one independent BBS generation run.
    """
    p:        int   # safe prime, p ≡ 3 (mod 4)
    q:        int   # safe prime distinct from p, q ≡ 3 (mod 4)
    seed:     int   # x_0, coprime to p*q
    num_bits: int   # number of bits to generate
    n_rounds: int = 20  # Miller-Rabin rounds per primality check


def validate_bbs_params(p: int, q: int, seed: int, num_bits: int, n_rounds: int = 20) -> None:
    """
    Validate BBS parameters, raising on the first failed check.

    Checks are applied in this order (the first failure is the one the caller sees):
        1) p ≡ 3 (mod 4) and q ≡ 3 (mod 4)                     -> CongruenceError
        2) p, q, (p-1)/2 and (q-1)/2 are all (probable) primes  -> PrimalityError
        3) p != q                                               -> DistinctPrimesError
        4) gcd(seed, p*q) == 1                                  -> SeedNotCoprimeError
        5) seed > 0                                             -> SeedNotPositiveError
        6) num_bits > 0                                         -> InvalidBitCountError

    Args:
        p (int): A safe prime congruent to 3 mod 4.
        q (int): A safe prime distinct from p, congruent to 3 mod 4.
        seed (int): The initial state x_0, relatively prime to n = p*q.
        num_bits (int): The number of bits to generate.
        n_rounds (int, optional): Miller-Rabin rounds per primality check. Defaults to 20.

    Returns:
        None

    Raises:
        ValidationError: One of its subclasses, depending on the failed check.
    """
    if p % 4 != 3 or q % 4 != 3:
        raise CongruenceError("p and q must be congruent to 3 modulo 4.")

    # p ≡ 3 (mod 4) makes p odd, so (p-1)/2 is exact
    for candidate in (p, q, (p - 1) // 2, (q - 1) // 2):
        if not miller_rabin_is_probable_prime(candidate, n_rounds):
            raise PrimalityError("p, q, (p-1)/2 and (q-1)/2 must all be prime numbers.")

    if p == q:
        raise DistinctPrimesError("p and q must be distinct primes.")

    n: int = p * q
    if math.gcd(seed, n) != 1:
        raise SeedNotCoprimeError("Seed must be relatively prime to n = p*q.")
    if seed <= 0:
        raise SeedNotPositiveError("Seed must be a positive integer.")
    if num_bits <= 0:
        raise InvalidBitCountError("num_bits must be a positive integer.")

    logger.debug("BBS parameters valid: n has %d bits, num_bits=%d", n.bit_length(), num_bits)


def bbs_states(n: int, seed: int, count: int) -> Iterator[int]:
    """
    Yield the BBS states x_1, ..., x_count where x_{i+1} = x_i^2 mod n and x_0 = seed.

    The seed itself is not yielded. Every yielded state lies in [0, n).
    No validation is done here, see validate_bbs_params().
    """
    x: int = seed
    for _ in range(count):
        x = (x * x) % n
        yield x


def generate_bbs_bits(p: int, q: int, seed: int, num_bits: int, n_rounds: int = 20) -> tuple[bool, ...]:
    """
    Generate a sequence of pseudo-random bits with the Blum Blum Shub algorithm.

    Parameters are validated before any bit is produced. Each call owns its own state,
    so identical arguments always give identical output and concurrent calls never interfere.

    Args:
        p (int): A large safe prime such that p ≡ 3 (mod 4).
        q (int): A large safe prime distinct from p such that q ≡ 3 (mod 4).
        seed (int): The initial state x_0, relatively prime to n = p*q.
        num_bits (int): The number of bits to generate.
        n_rounds (int, optional): Miller-Rabin rounds per primality check. Defaults to 20.

    Returns:
        tuple[bool, ...]: Exactly num_bits bits in generation order, bit i being the LSB of x_{i+1}.

    Raises:
        ValidationError: If the parameters are invalid (see validate_bbs_params()).
    """
    validate_bbs_params(p, q, seed, num_bits, n_rounds)

    n: int = p * q
    bits: tuple[bool, ...] = tuple(x % 2 == 1 for x in bbs_states(n, seed, num_bits))
    logger.debug("Generated %d BBS bits", len(bits))
    return bits


def bits_to_int(bits: Sequence[bool]) -> int:
    """
    Interpret a bit sequence as a binary number, the last generated bit being the least significant.

    E.g. (True, True, False, True, False) -> 0b11010 = 26. An empty sequence gives 0.

    Args:
        bits (Sequence[bool]): Bits in generation order.

    Returns:
        int: The non-negative integer value of the bits.
    """
    value: int = 0
    power_of_2: int = 1
    # Process from least significant (last generated) to most significant (first generated)
    for bit in reversed(bits):
        if bit:
            value += power_of_2
        power_of_2 *= 2
    return value


def _generate_from_params(params: BBSParams) -> tuple[bool, ...]:
    """Worker entry point: run one generation from a BBSParams record."""
    return generate_bbs_bits(params.p, params.q, params.seed, params.num_bits, params.n_rounds)


def generate_bbs_bits_parallel(jobs: list[BBSParams], num_workers: int | None = None) -> list[tuple[bool, ...]]:
    """
    Run several independent BBS generations in parallel worker processes.

    Every run owns its own (n, x) state, so no coordination is needed between workers.
    All jobs are validated in the calling process first: an invalid job raises before any
    worker is started, and no partial results are returned.

    Args:
        jobs (list[BBSParams]): The runs to execute.
        num_workers (int | None, optional): The number of worker processes to use. If None,
            the number of CPU cores is used by default.

    Returns:
        list[tuple[bool, ...]]: One bit sequence per job, in the same order as `jobs`.

    Raises:
        ValidationError: If any job has invalid parameters.
    """
    for params in jobs:
        validate_bbs_params(params.p, params.q, params.seed, params.num_bits, params.n_rounds)

    if not jobs:
        return []

    # If num_workers is not specified, use the number of CPU cores (never more than the number of jobs)
    if num_workers is None:
        num_workers = multiprocessing.cpu_count()
    num_workers = max(1, min(num_workers, len(jobs)))

    logger.debug("Running %d BBS jobs on %d workers", len(jobs), num_workers)
    with multiprocessing.Pool(processes=num_workers) as pool:
        return pool.map(_generate_from_params, jobs)


if __name__ == "__main__":
    # Small example: safe primes 11 = 2*5 + 1 and 23 = 2*11 + 1, n = 253
    p, q, seed = 11, 23, 5
    example_bits = generate_bbs_bits(p, q, seed, 5)
    print(f"States: {list(bbs_states(p * q, seed, 5))}")
    print(f"Bits: {[int(bit) for bit in example_bits]}, as integer: {bits_to_int(example_bits)}")
