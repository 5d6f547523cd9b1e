"""Maximum flow (Dinic) and minimum-cost flow."""

import heapq
import math
from dataclasses import dataclass


@dataclass(slots=True)
class _Edge:
    to: int
    rev: int
    cap: object
    cost: object = 0
    index: object = None
    flow: object = 0


def _add_edge_pair(graph, u, v, cap, cost=0, index=None):
    pu = len(graph[u])
    pv = len(graph[v]) + (u == v)
    graph[u].append(_Edge(v, pv, cap, cost, index))
    graph[v].append(_Edge(u, pu, 0, -cost, index))


def _find_path(graph, remaining, s, t):
    visited = [False] * len(graph)
    visited[s] = True
    ptr = [0] * len(graph)
    stack = [s]
    via = []
    while stack and stack[-1] != t:
        v = stack[-1]
        adj = graph[v]
        i = ptr[v]
        while i < len(adj) and (remaining[v][i] <= 0 or visited[adj[i].to]):
            i += 1
        ptr[v] = i + 1
        if i >= len(adj):
            stack.pop()
            if via:
                via.pop()
            continue
        u = adj[i].to
        visited[u] = True
        stack.append(u)
        via.append((v, i))
    if not stack:
        return None
    amount = min(remaining[v][i] for v, i in via)
    for v, i in via:
        remaining[v][i] -= amount
    return amount, stack


def _flow_paths(graph, s, t):
    remaining = [[e.flow for e in adj] for adj in graph]
    paths = []
    while (found := _find_path(graph, remaining, s, t)) is not None:
        paths.append(found)
    return paths


class Dinic:
    """Maximum flow by Dinic's algorithm."""

    def __init__(self, n):
        if n < 0:
            raise ValueError("n must be non-negative")
        self.n = n
        self.graph = [[] for _ in range(n)]
        self._layer = []
        self._ptr = []
        self._source = None
        self._sink = None

    def add_edge(self, u, v, cap):
        """Add the edge ``u -> v`` with capacity ``cap``."""
        _add_edge_pair(self.graph, u, v, cap)

    def _bfs(self, s, t):
        layer = [-1] * self.n
        layer[s] = 0
        queue = [s]
        for v in queue:
            for e in self.graph[v]:
                if e.flow < e.cap and layer[e.to] == -1:
                    layer[e.to] = layer[v] + 1
                    queue.append(e.to)
        self._layer = layer
        return layer[t] != -1

    def _send(self, v, t, f):
        if v == t:
            return f
        adj = self.graph[v]
        while self._ptr[v] < len(adj):
            e = adj[self._ptr[v]]
            if e.flow < e.cap and self._layer[e.to] == self._layer[v] + 1:
                df = self._send(e.to, t, min(f, e.cap - e.flow))
                if df:
                    e.flow += df
                    self.graph[e.to][e.rev].flow -= df
                    return df
            self._ptr[v] += 1
        return 0

    def max_flow(self, s, t, limit=None):
        """Push as much flow from ``s`` to ``t`` as possible, at most ``limit``; return its value."""
        if s == t:
            raise ValueError("source and sink must differ")
        remaining = math.inf if limit is None else limit
        total = 0
        while remaining > 0 and self._bfs(s, t):
            self._ptr = [0] * self.n
            while remaining > 0:
                df = self._send(s, t, remaining)
                if not df:
                    break
                total += df
                remaining -= df
        self._source, self._sink = s, t
        return total

    def decompose(self):
        """Split the current flow into ``(amount, vertex path)`` pairs from source to sink."""
        if self._source is None:
            raise RuntimeError("max_flow() must be called first")
        return _flow_paths(self.graph, self._source, self._sink)


class MinCostMaxFlow:
    """Minimum-cost flow by successive shortest paths; costs may not form negative cycles."""

    def __init__(self, n):
        if n < 0:
            raise ValueError("n must be non-negative")
        self.n = n
        self.graph = [[] for _ in range(n)]

    def add_edge(self, u, v, cap, cost, index=None):
        """Add the edge ``u -> v`` with capacity ``cap``, unit cost ``cost`` and a label ``index``."""
        _add_edge_pair(self.graph, u, v, cap, cost, index)

    def _shortest_path(self, s):
        n = self.n
        dist = [math.inf] * n
        bottleneck = [0] * n
        back = [-1] * n
        dist[s] = 0
        bottleneck[s] = math.inf
        heap = [(0, s)]
        while heap:
            d, v = heapq.heappop(heap)
            if d > dist[v]:
                continue
            for e in self.graph[v]:
                if e.flow != e.cap and d + e.cost < dist[e.to]:
                    dist[e.to] = d + e.cost
                    bottleneck[e.to] = min(bottleneck[v], e.cap - e.flow)
                    back[e.to] = e.rev
                    heapq.heappush(heap, (dist[e.to], e.to))
        return dist, bottleneck, back

    def min_cost_flow(self, s, t, limit=None):
        """Send up to ``limit`` units from ``s`` to ``t`` at least cost; return ``(flow, cost)``."""
        if s == t:
            raise ValueError("source and sink must differ")
        remaining = math.inf if limit is None else limit
        total_flow = 0
        total_cost = 0
        while remaining > 0:
            dist, bottleneck, back = self._shortest_path(s)
            if not bottleneck[t] > 0:
                break
            d = min(bottleneck[t], remaining)
            total_flow += d
            total_cost += dist[t] * d
            remaining -= d
            v = t
            while v != s:
                rev = self.graph[v][back[v]]
                rev.flow -= d
                self.graph[rev.to][rev.rev].flow += d
                v = rev.to
        return total_flow, total_cost

    def decompose(self, s, t, limit=None):
        """Run :meth:`min_cost_flow` and split the flow into ``(amount, vertex path)`` pairs."""
        result = self.min_cost_flow(s, t, limit)
        return result, _flow_paths(self.graph, s, t)