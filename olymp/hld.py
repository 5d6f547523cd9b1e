"""Heavy-light decomposition of a tree with path maximum queries."""


class HeavyLightDecomposition:
    """Vertex values on a tree (all starting at zero) with path maxima.

    Maxima are taken together with zero, so they are never negative.
    """

    def __init__(self, graph, root=0):
        n = len(graph)
        if not 0 <= root < n:
            raise ValueError("root out of range")
        if sum(len(adj) for adj in graph) != 2 * (n - 1):
            raise ValueError("graph must be a tree")
        parent = [-1] * n
        depth = [0] * n
        children = [[] for _ in range(n)]
        seen = [False] * n
        seen[root] = True
        order = [root]
        for v in order:
            for u in graph[v]:
                if not seen[u]:
                    seen[u] = True
                    parent[u] = v
                    depth[u] = depth[v] + 1
                    children[v].append(u)
                    order.append(u)
        if len(order) != n:
            raise ValueError("graph must be a connected tree")

        size = [1] * n
        for v in reversed(order[1:]):
            size[parent[v]] += size[v]
        heavy = [next((u for u in children[v] if 2 * size[u] >= size[v]), -1) for v in range(n)]

        head = [root] * n
        index = [0] * n
        stack = [root]
        position = 0
        while stack:
            v = stack.pop()
            index[v] = position
            position += 1
            for u in children[v]:
                if u != heavy[v]:
                    head[u] = u
                    stack.append(u)
            if heavy[v] != -1:
                head[heavy[v]] = head[v]
                stack.append(heavy[v])

        self._n = n
        self._parent = parent
        self._depth = depth
        self._size = size
        self._head = head
        self._index = index
        self._tree = [0] * (2 * n)

    def add(self, v, x):
        """Add ``x`` to the value of vertex ``v``."""
        i = self._index[v] + self._n
        tree = self._tree
        tree[i] += x
        i >>= 1
        while i:
            tree[i] = max(tree[2 * i], tree[2 * i + 1])
            i >>= 1

    def _query(self, l, r):
        tree = self._tree
        best = 0
        l += self._n
        r += self._n + 1
        while l < r:
            if l & 1:
                best = max(best, tree[l])
                l += 1
            if r & 1:
                r -= 1
                best = max(best, tree[r])
            l >>= 1
            r >>= 1
        return best

    def lca(self, u, v):
        """Lowest common ancestor of ``u`` and ``v``."""
        head, parent, depth = self._head, self._parent, self._depth
        while head[u] != head[v]:
            if depth[head[u]] > depth[head[v]]:
                u = parent[head[u]]
            else:
                v = parent[head[v]]
        return u if depth[u] < depth[v] else v

    def _climb(self, u, v):
        index = self._index
        if not index[v] <= index[u] < index[v] + self._size[v]:
            raise ValueError("v must be an ancestor of u")
        best = 0
        while self._head[u] != self._head[v]:
            best = max(best, self._query(index[self._head[u]], index[u]))
            u = self._parent[self._head[u]]
        return best, u

    def path_max(self, u, v):
        """Maximum over the path from ``u`` up to its ancestor ``v``, both included."""
        best, u = self._climb(u, v)
        return max(best, self._query(self._index[v], self._index[u]))

    def path_max_exclusive(self, u, v):
        """Maximum over the path from ``u`` up to its ancestor ``v``, ``v`` left out."""
        best, u = self._climb(u, v)
        if self._index[v] + 1 > self._index[u]:
            return best
        return max(best, self._query(self._index[v] + 1, self._index[u]))