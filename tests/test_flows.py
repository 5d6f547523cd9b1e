import itertools
import random

import pytest

from olymp.flows import Dinic, MinCostMaxFlow


def _random_network(rng, n, m):
    edges = []
    for _ in range(m):
        u, v = rng.randrange(n), rng.randrange(n)
        if u != v:
            edges.append((u, v, rng.randrange(1, 10), rng.randrange(10)))
    return edges


def _min_cut(n, edges, s, t):
    others = [v for v in range(n) if v not in (s, t)]
    best = None
    for bits in itertools.product([False, True], repeat=len(others)):
        side = {s} | {v for v, b in zip(others, bits) if b}
        cut = sum(cap for u, v, cap, _ in edges if u in side and v not in side)
        best = cut if best is None else min(best, cut)
    return best


def _dinic(n, edges):
    flow = Dinic(n)
    for u, v, cap, _ in edges:
        flow.add_edge(u, v, cap)
    return flow


def _mcmf(n, edges):
    flow = MinCostMaxFlow(n)
    for i, (u, v, cap, cost) in enumerate(edges):
        flow.add_edge(u, v, cap, cost, i)
    return flow


def _check_paths(paths, total, edges, s, t):
    assert sum(amount for amount, _ in paths) == total
    arcs = {(u, v) for u, v, _, _ in edges}
    for amount, path in paths:
        assert amount > 0
        assert path[0] == s and path[-1] == t
        assert all((a, b) in arcs for a, b in zip(path, path[1:]))


def test_dinic_matches_min_cut():
    rng = random.Random(21)
    n = 6
    for _ in range(30):
        edges = _random_network(rng, n, 12)
        assert _dinic(n, edges).max_flow(0, n - 1) == _min_cut(n, edges, 0, n - 1)


def test_dinic_limit():
    rng = random.Random(22)
    n = 6
    for _ in range(20):
        edges = _random_network(rng, n, 12)
        full = _min_cut(n, edges, 0, n - 1)
        assert _dinic(n, edges).max_flow(0, n - 1, limit=3) == min(3, full)


def test_dinic_decompose():
    rng = random.Random(23)
    n = 6
    for _ in range(20):
        edges = _random_network(rng, n, 12)
        flow = _dinic(n, edges)
        total = flow.max_flow(0, n - 1)
        _check_paths(flow.decompose(), total, edges, 0, n - 1)


def test_dinic_errors():
    flow = Dinic(2)
    with pytest.raises(RuntimeError):
        flow.decompose()
    with pytest.raises(ValueError):
        flow.max_flow(1, 1)


def test_mcmf_prefers_cheap_path():
    edges = [(0, 1, 1, 1), (1, 3, 1, 1), (0, 2, 1, 5), (2, 3, 1, 5)]
    assert _mcmf(4, edges).min_cost_flow(0, 3, limit=1) == (1, 2)
    assert _mcmf(4, edges).min_cost_flow(0, 3) == (2, 12)


def test_mcmf_flow_matches_dinic():
    rng = random.Random(24)
    n = 6
    for _ in range(20):
        edges = _random_network(rng, n, 12)
        flow, _ = _mcmf(n, edges).min_cost_flow(0, n - 1)
        assert flow == _dinic(n, edges).max_flow(0, n - 1)


def test_mcmf_cost_is_convex_in_flow():
    rng = random.Random(25)
    n = 6
    for _ in range(10):
        edges = _random_network(rng, n, 12)
        top, _ = _mcmf(n, edges).min_cost_flow(0, n - 1)
        costs = [_mcmf(n, edges).min_cost_flow(0, n - 1, limit=k)[1] for k in range(top + 1)]
        steps = [b - a for a, b in zip(costs, costs[1:])]
        assert all(a <= b for a, b in zip(steps, steps[1:]))


def test_mcmf_decompose():
    rng = random.Random(26)
    n = 6
    for _ in range(20):
        edges = _random_network(rng, n, 12)
        (total, _), paths = _mcmf(n, edges).decompose(0, n - 1)
        _check_paths(paths, total, edges, 0, n - 1)


def test_mcmf_same_source_and_sink():
    with pytest.raises(ValueError):
        MinCostMaxFlow(2).min_cost_flow(0, 0)