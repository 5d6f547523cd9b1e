import random

import pytest

from olymp.fenwick import Fenwick


def test_functionality():
    fenw = Fenwick(10)
    fenw.add(3, 5)
    fenw.add(5, 7)
    assert fenw.range_sum(3, 5) == 12
    assert fenw.range_sum(1, 4) == 5
    assert fenw.range_sum(5, 9) == 7
    assert fenw.range_sum(0, 0) == 0


def test_build_matches_prefix_sums():
    rng = random.Random(5)
    values = [rng.randint(-50, 50) for _ in range(37)]
    fenw = Fenwick(values)
    assert len(fenw) == 37
    for r in range(-1, 37):
        assert fenw.prefix_sum(r) == sum(values[: r + 1])


def test_build_equals_incremental_adds():
    values = [3, 1, 4, 1, 5, 9, 2, 6]
    built = Fenwick(values)
    added = Fenwick(len(values))
    for i, v in enumerate(values):
        added.add(i, v)
    for l in range(len(values)):
        for r in range(l, len(values)):
            assert built.range_sum(l, r) == added.range_sum(l, r)


def test_random_updates():
    rng = random.Random(11)
    ref = [0] * 20
    fenw = Fenwick(20)
    for _ in range(200):
        i = rng.randrange(20)
        x = rng.randint(-10, 10)
        ref[i] += x
        fenw.add(i, x)
        l = rng.randrange(20)
        r = rng.randrange(l, 20)
        assert fenw.range_sum(l, r) == sum(ref[l : r + 1])


def test_lower_bound_invariant():
    values = [2, 0, 3, 1, 0, 4, 5]
    fenw = Fenwick(values)
    total = sum(values)
    for x in range(1, total + 3):
        idx = fenw.lower_bound(x)
        if x > total:
            assert idx == len(values)
        else:
            assert fenw.prefix_sum(idx) >= x
            assert idx == 0 or fenw.prefix_sum(idx - 1) < x


def test_lower_bound_of_zero_is_first():
    assert Fenwick([1, 2, 3]).lower_bound(0) == 0


def test_lower_bound_empty():
    assert Fenwick(0).lower_bound(1) == 0


def test_index_errors():
    fenw = Fenwick(4)
    with pytest.raises(IndexError):
        fenw.add(4, 1)
    with pytest.raises(IndexError):
        fenw.add(-1, 1)
    with pytest.raises(IndexError):
        fenw.prefix_sum(4)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Fenwick(-1)