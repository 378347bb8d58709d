import pytest

from miller_rabin import miller_rabin_is_probable_prime


@pytest.mark.parametrize("n", [2, 3, 5, 7, 11, 23, 97, 101, 1019, 7919, 104729])
def test_small_primes(n):
    assert miller_rabin_is_probable_prime(n)


@pytest.mark.parametrize("n", [-7, 0, 1, 4, 9, 15, 561, 1105, 9409, 10403])
def test_small_composites(n):
    # 561 and 1105 are Carmichael numbers, 9409 = 97^2, 10403 = 101*103
    assert not miller_rabin_is_probable_prime(n)


def test_large_prime():
    # Mersenne primes
    assert miller_rabin_is_probable_prime(2**521 - 1)
    assert miller_rabin_is_probable_prime(2**607 - 1)


def test_large_composite():
    assert not miller_rabin_is_probable_prime((2**521 - 1) * (2**607 - 1))
    assert not miller_rabin_is_probable_prime(2**521 + 1)


def test_rounds_must_be_positive():
    with pytest.raises(ValueError):
        miller_rabin_is_probable_prime(11, n_rounds=0)
