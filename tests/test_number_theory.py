from math import gcd

import pytest

from olymp.number_theory import crt, extended_gcd, extended_gcd_small_x

PAIRS = [(240, 46), (46, 240), (17, 5), (1, 1), (7, 0), (0, 9), (100, 75), (-30, 12), (30, -12)]


@pytest.mark.parametrize("a, b", PAIRS)
def test_extended_gcd_bezout(a, b):
    g, x, y = extended_gcd(a, b)
    assert abs(g) == gcd(a, b)
    assert a * x + b * y == g


@pytest.mark.parametrize("a, b", [(240, 46), (3, 7), (7, 3), (12, 18), (1000, 1), (5, 5)])
def test_extended_gcd_small_x(a, b):
    g, x, y = extended_gcd_small_x(a, b)
    assert g == gcd(a, b)
    assert a * x + b * y == g
    assert 0 <= x < b // g


def test_extended_gcd_small_x_rejects_non_positive():
    with pytest.raises(ValueError):
        extended_gcd_small_x(0, 5)


@pytest.mark.parametrize(
    "a1, r1, a2, r2",
    [(3, 2, 5, 3), (4, 3, 6, 5), (7, 0, 11, 10), (9, 4, 9, 4), (1_000_000_007, 5, 998_244_353, 17)],
)
def test_crt_solution(a1, r1, a2, r2):
    x = crt(a1, r1, a2, r2)
    lcm = a1 * a2 // gcd(a1, a2)
    assert 0 <= x < lcm
    assert x % a1 == r1 % a1
    assert x % a2 == r2 % a2


def test_crt_is_smallest():
    x = crt(6, 1, 10, 7)
    assert x == 7
    assert all(not (y % 6 == 1 and y % 10 == 7) for y in range(x))


def test_crt_no_solution():
    assert crt(4, 1, 6, 2) is None