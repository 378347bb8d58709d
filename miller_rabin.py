"""
Description: Miller-Rabin primality test used to validate Blum Blum Shub parameters.
Date: 19-Oct-2026

Notes:
    - Small candidates are settled by trial division so the answer for them never depends on random bases.
"""
import secrets

# Primes below 100, used to settle small candidates exactly before any random round
SMALL_PRIMES: tuple[int, ...] = (
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47,
    53, 59, 61, 67, 71, 73, 79, 83, 89, 97,
)


def miller_rabin_is_probable_prime(n: int, n_rounds: int = 20) -> bool:
    """
    Perform the Miller-Rabin primality test on n to determine if it is a (probable) prime.

    NOTE: Miller-Rabin test is probabilistic. In each round, a random base `a` (1 < a < n-1) is selected,
    and n is tested for compositeness. A composite number passes a single round with probability at most 1/4,
    so the false positive rate is at most 1/4^n_rounds. A "False" answer is always correct.

    Candidates divisible by a prime below 100 (and all candidates below 100^2) are decided exactly
    by trial division, so the BBS validator gives stable answers for small test parameters.

    Args:
        n (int): The number to be tested for primality.
        n_rounds (int, optional): Number of test rounds (higher = lower false positive rate but longer runtime). Default is 20.

    Returns:
        bool: True if the number is a probable prime, False otherwise (composite).

    Raises:
        ValueError: If n_rounds is not positive.
    """
    if n_rounds <= 0:
        raise ValueError("Number of Miller-Rabin rounds must be a positive integer.")

    # Handle base cases
    if n < 2:
        return False
    for small_prime in SMALL_PRIMES:
        if n % small_prime == 0:
            return n == small_prime
    # No prime factor below 100 and n < 100^2 -> n is prime
    if n < SMALL_PRIMES[-1] ** 2:
        return True

    # Write n-1 as 2^k * q with q odd (by factoring out all 2s from n-1)
    k: int = 0
    q: int = n - 1
    while q % 2 == 0:
        q //= 2
        k += 1

    def _miller_rabin_single_round(a: int) -> bool:
        """Single round with base `a`: True if n passes (probably prime), False if a witnesses compositeness."""
        x: int = pow(a, q, n)
        if x == 1 or x == n - 1:
            return True

        # Square up to k-1 times, looking for n-1
        for _ in range(k - 1):
            x = pow(x, 2, n)
            if x == n - 1:
                return True

        return False

    for _ in range(n_rounds):
        # randbelow(n - 3) is in [0, n - 4], adding 2 shifts it to [2, n - 2]
        a: int = secrets.randbelow(n - 3) + 2
        if not _miller_rabin_single_round(a):
            return False

    return True


if __name__ == "__main__":
    import time

    # Mersenne prime 2^521 - 1 and a composite neighbour
    candidates: list[int] = [2**521 - 1, 2**521 + 1]

    start_time: float = time.time()
    for candidate in candidates:
        print(f"{candidate.bit_length()}-bit candidate is probable prime: {miller_rabin_is_probable_prime(candidate)}")
    print("--- %s seconds ---" % (time.time() - start_time))
