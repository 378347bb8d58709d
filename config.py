# config.py
# Configuration for the BBS command-line program (main.py)

# Example parameters: two ~1000-bit safe primes, both ≡ 3 (mod 4)
# p is a safe prime just above 10^309
EXAMPLE_P = 1000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000001408267
# q is the smallest safe prime after 1000^102
EXAMPLE_Q = 1000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000933859

# Seed relatively prime to n = p*q, seed ≈ 2 * 1000^102
EXAMPLE_SEED = 2000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000000420063

# Number of bits generated when --bits is not given
DEFAULT_NUM_BITS = 10

# Miller-Rabin rounds per primality check (false positive rate <= 4^-rounds)
MILLER_RABIN_ROUNDS = 20

# Worker processes for --seeds runs. None means one per CPU core.
NUM_WORKERS = None

# Logging level
LOG_LEVEL = 'INFO'
