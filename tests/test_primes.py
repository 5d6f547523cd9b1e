from math import prod

import pytest

from olymp.primes import (
    PrimeCounter,
    count_primes,
    factorize,
    factorize_big,
    generate_primes,
    is_prime,
    min_divisors,
)

PRIMES_BELOW_100 = [
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47,
    53, 59, 61, 67, 71, 73, 79, 83, 89, 97,
]


def test_count_primes_matches_generated_small():
    for n in range(1, 501):
        assert len(generate_primes(n)) == count_primes(n)


@pytest.mark.parametrize(
    "n, expected",
    [
        (1_000_000_000 + 7, 50847535),
        (10_000_000_000, 455052511),
    ],
)
def test_count_primes_big(n, expected):
    assert count_primes(n) == expected


def test_generate_primes_matches_is_prime():
    for n in range(1, 101):
        assert generate_primes(n) == [i for i in range(n + 1) if is_prime(i)]


def test_generate_primes_known_list():
    assert generate_primes(100) == PRIMES_BELOW_100
    assert generate_primes(1) == []
    assert generate_primes(2) == [2]


def test_is_prime_small_values():
    assert [i for i in range(-5, 100) if is_prime(i)] == PRIMES_BELOW_100


def test_prime_counter_on_quotients():
    n = 1000
    counter = PrimeCounter(n)
    for k in range(1, n + 1):
        x = n // k
        assert counter.count_primes(x) == len(generate_primes(x))
    assert counter.count_primes() == len(generate_primes(n))


def test_prime_counter_rejects_bad_arguments():
    with pytest.raises(ValueError):
        PrimeCounter(0)
    counter = PrimeCounter(50)
    with pytest.raises(ValueError):
        counter.count_primes(0)
    with pytest.raises(ValueError):
        counter.count_primes(51)


def test_min_divisors_invariants():
    table = min_divisors(200)
    assert len(table) == 201
    assert table[1] == 1
    for i in range(2, 201):
        d = table[i]
        assert i % d == 0
        assert is_prime(d)
        assert all(i % s for s in range(2, d))


@pytest.mark.parametrize("x", [1, 2, 12, 360, 97, 999_983, 1_000_000, 65536])
def test_factorize_invariants(x):
    factors = factorize(x)
    assert prod(factors) == x
    assert factors == sorted(factors)
    assert all(is_prime(f) for f in factors)


def test_factorize_limit():
    with pytest.raises(ValueError):
        factorize(1_000_001)


@pytest.mark.parametrize("x", [1, 720, 999_999_937, 1_999_999_998, 2_000_000_000, 44_741 * 44_701])
def test_factorize_big_invariants(x):
    factors = factorize_big(x)
    assert prod(factors) == x
    assert factors == sorted(factors)
    assert all(is_prime(f) for f in factors)


def test_factorize_big_agrees_with_factorize():
    for x in range(1, 500):
        assert factorize_big(x) == factorize(x)


def test_factorize_big_limit():
    with pytest.raises(ValueError):
        factorize_big(2_000_000_001)