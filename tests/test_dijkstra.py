import math
import random

import pytest

from olymp.dijkstra import dijkstra


def _random_graph(rng, n, m):
    graph = [[] for _ in range(n)]
    for _ in range(m):
        graph[rng.randrange(n)].append((rng.randrange(n), rng.randrange(20)))
    return graph


def test_small_example():
    graph = [[(1, 4), (2, 1)], [], [(1, 2)]]
    assert dijkstra(graph, 0) == [0, 3, 1]


def test_unreachable_is_infinite():
    graph = [[(1, 3)], [], []]
    dist = dijkstra(graph, 0)
    assert dist[1] == 3
    assert dist[2] == math.inf


def test_distances_satisfy_relaxation():
    rng = random.Random(1)
    for _ in range(20):
        graph = _random_graph(rng, 12, 30)
        dist = dijkstra(graph, 0)
        assert dist[0] == 0
        for u, edges in enumerate(graph):
            for v, w in edges:
                assert dist[v] <= dist[u] + w


def test_every_reached_vertex_has_tight_edge():
    rng = random.Random(2)
    for _ in range(20):
        graph = _random_graph(rng, 12, 30)
        dist = dijkstra(graph, 0)
        for v in range(1, len(graph)):
            if dist[v] == math.inf:
                continue
            assert any(
                dist[u] + w == dist[v]
                for u, edges in enumerate(graph)
                for x, w in edges
                if x == v
            )


def test_bad_source_raises():
    with pytest.raises(IndexError):
        dijkstra([[]], 1)