"""Strongly connected components by Kosaraju's algorithm."""


class SCC:
    """A directed graph with strongly connected component queries.

    Component colours are numbered in topological order of the condensation.
    """

    def __init__(self, n):
        if n < 0:
            raise ValueError("n must be non-negative")
        self._graph = [[] for _ in range(n)]
        self._reverse = [[] for _ in range(n)]

    @classmethod
    def from_graph(cls, graph):
        """Build from adjacency lists."""
        scc = cls(len(graph))
        for u, targets in enumerate(graph):
            for v in targets:
                scc.add_edge(u, v)
        return scc

    def add_edge(self, u, v):
        """Add the edge ``u -> v``."""
        self._graph[u].append(v)
        self._reverse[v].append(u)

    def _order(self):
        n = len(self._graph)
        seen = [False] * n
        order = []
        for start in range(n):
            if seen[start]:
                continue
            seen[start] = True
            stack = [(start, iter(self._graph[start]))]
            while stack:
                v, it = stack[-1]
                for u in it:
                    if not seen[u]:
                        seen[u] = True
                        stack.append((u, iter(self._graph[u])))
                        break
                else:
                    stack.pop()
                    order.append(v)
        order.reverse()
        return order

    def _collect(self, start, seen):
        seen[start] = True
        found = [start]
        stack = [iter(self._reverse[start])]
        while stack:
            for u in stack[-1]:
                if not seen[u]:
                    seen[u] = True
                    found.append(u)
                    stack.append(iter(self._reverse[u]))
                    break
            else:
                stack.pop()
        return found

    def _kosaraju(self):
        n = len(self._graph)
        seen = [False] * n
        colors = [-1] * n
        components = []
        for v in self._order():
            if not seen[v]:
                component = self._collect(v, seen)
                for u in component:
                    colors[u] = len(components)
                components.append(component)
        return colors, components

    def build_colors(self):
        """Component number of every vertex."""
        return self._kosaraju()[0]

    def build_components(self):
        """Vertex lists of the components, indexed by colour."""
        return self._kosaraju()[1]

    def build_condensation(self, unique=False, self_loops=False):
        """Adjacency lists of the component graph.

        With ``unique`` each list is sorted and free of repeats; with ``self_loops``
        edges inside a component are kept as loops.
        """
        colors = self.build_colors()
        if not colors:
            return []
        condensed = [[] for _ in range(max(colors) + 1)]
        for u, targets in enumerate(self._graph):
            for v in targets:
                if colors[u] != colors[v] or self_loops:
                    condensed[colors[u]].append(colors[v])
        if unique:
            condensed = [sorted(set(targets)) for targets in condensed]
        return condensed