"""Single-source shortest paths."""

import heapq
import math


def dijkstra(graph, source):
    """Distances from ``source`` in ``graph``, a list of ``(vertex, weight)`` adjacency lists.

    Unreachable vertices get ``math.inf``.
    """
    if not 0 <= source < len(graph):
        raise IndexError("source out of range")
    dist = [math.inf] * len(graph)
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        d, v = heapq.heappop(heap)
        if d > dist[v]:
            continue
        for u, w in graph[v]:
            nd = d + w
            if nd < dist[u]:
                dist[u] = nd
                heapq.heappush(heap, (nd, u))
    return dist