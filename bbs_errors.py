"""
Description: Validation errors raised for invalid Blum Blum Shub parameters.
Date: 19-Oct-2026

Notes:
    - Every error takes only a message, so instances pickle cleanly across worker processes.
"""


class ValidationError(ValueError):
    """
    Base class for all BBS parameter errors.

    These are caller-input errors: they are raised before any bit is generated,
    and the only recovery is to call again with corrected parameters.
    `kind` names the failed check, so callers can branch on it without isinstance chains.
    """
    kind: str = "validation"


class CongruenceError(ValidationError):
    """p or q is not congruent to 3 mod 4."""
    kind = "congruence"


class PrimalityError(ValidationError):
    """p, q, (p-1)/2 or (q-1)/2 is not prime."""
    kind = "primality"


class DistinctPrimesError(ValidationError):
    """p and q are the same prime."""
    kind = "distinct_primes"


class SeedNotCoprimeError(ValidationError):
    """gcd(seed, p*q) != 1."""
    kind = "seed_not_coprime"


class SeedNotPositiveError(ValidationError):
    kind = "seed_not_positive"


class InvalidBitCountError(ValidationError):
    kind = "invalid_bit_count"
