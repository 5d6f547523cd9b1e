"""Prime testing, sieves, factorization and prime counting."""

from functools import lru_cache
from itertools import count
from math import isqrt

_SMALL_FACTOR_LIMIT = 1_000_000
_BIG_FACTOR_LIMIT = 2_000_000_000


def is_prime(x):
    """Return True if ``x`` is prime, by trial division."""
    if x < 2:
        return False
    return all(x % d for d in range(2, isqrt(x) + 1))


def generate_primes(n):
    """Return all primes not exceeding ``n`` in increasing order (sieve of Sundaram)."""
    primes = [2] if n >= 2 else []
    m = max((n - 1) // 2, 0)
    marked = [False] * (m + 1)
    for i in count(1):
        start = 2 * i * (i + 1)
        if start > m:
            break
        step = 2 * i + 1
        marked[start::step] = [True] * len(range(start, m + 1, step))
    primes.extend(2 * i + 1 for i in range(1, m + 1) if not marked[i])
    return primes


def min_divisors(n):
    """Return a list whose item ``i`` is the least prime divisor of ``i`` (``i`` itself for 0 and 1)."""
    if n < 0:
        raise ValueError("n must be non-negative")
    table = [0] * (n + 1)
    for i in range(2, isqrt(n) + 1):
        if table[i] == 0:
            for j in range(i * i, n + 1, i):
                if table[j] == 0:
                    table[j] = i
    return [d or i for i, d in enumerate(table)]


@lru_cache(maxsize=None)
def _min_divisor_table():
    return min_divisors(_SMALL_FACTOR_LIMIT)


@lru_cache(maxsize=None)
def _factor_primes():
    return generate_primes(isqrt(_BIG_FACTOR_LIMIT) + 10)


def factorize(x):
    """Return the prime factors of ``x`` (at most one million) in non-decreasing order."""
    if x > _SMALL_FACTOR_LIMIT:
        raise ValueError(f"x must not exceed {_SMALL_FACTOR_LIMIT}")
    table = _min_divisor_table()
    factors = []
    while x > 1:
        factors.append(table[x])
        x //= table[x]
    return factors


def factorize_big(x):
    """Return the prime factors of ``x`` (at most two billion) in non-decreasing order."""
    if x > _BIG_FACTOR_LIMIT:
        raise ValueError(f"x must not exceed {_BIG_FACTOR_LIMIT}")
    factors = []
    for p in _factor_primes():
        if x == 1:
            break
        while x % p == 0:
            factors.append(p)
            x //= p
    if x > 1:
        factors.append(x)
    return factors


class PrimeCounter:
    """Counts primes up to ``n`` and up to every ``n // k`` in O(n^(3/4))."""

    def __init__(self, n):
        if n < 1:
            raise ValueError("n must be positive")
        self.n = n
        root = isqrt(n)
        self._root = root
        small = [i - 1 for i in range(root + 1)]
        large = [0] + [n // i - 1 for i in range(1, root + 1)]
        for p in range(2, root + 1):
            if small[p] == small[p - 1]:
                continue
            below = small[p - 1]
            square = p * p
            limit = min(root, n // square)
            inner = min(limit, root // p)
            updated = [large[i] - large[i * p] + below for i in range(1, inner + 1)]
            updated += [large[i] - small[n // (i * p)] + below for i in range(inner + 1, limit + 1)]
            large[1:limit + 1] = updated
            if square <= root:
                small[square:] = [small[v] - small[v // p] + below for v in range(square, root + 1)]
        self._small = small
        self._large = large

    def count_primes(self, x=None):
        """Number of primes not exceeding ``x``; ``x`` defaults to ``n`` and must be of the form ``n // k``."""
        if x is None:
            x = self.n
        if not 1 <= x <= self.n:
            raise ValueError("x must lie between 1 and n")
        if x <= self._root:
            return self._small[x]
        return self._large[self.n // x]


def count_primes(n):
    """Number of primes not exceeding ``n``."""
    return PrimeCounter(n).count_primes()