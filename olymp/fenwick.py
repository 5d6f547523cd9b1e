"""Fenwick (binary indexed) tree over prefix sums."""


class Fenwick:
    """Point updates and prefix sums in O(log n)."""

    def __init__(self, data=0):
        if isinstance(data, int):
            if data < 0:
                raise ValueError("size must be non-negative")
            self._tree = [0] * data
            return
        tree = list(data)
        n = len(tree)
        for r in range(n):
            parent = r | (r + 1)
            if parent < n:
                tree[parent] += tree[r]
        self._tree = tree

    def __len__(self):
        return len(self._tree)

    def add(self, index, x):
        """Add ``x`` to the item at ``index``."""
        n = len(self._tree)
        if not 0 <= index < n:
            raise IndexError("index out of range")
        while index < n:
            self._tree[index] += x
            index |= index + 1

    def prefix_sum(self, r):
        """Sum of items ``[0, r]``; zero for ``r == -1``."""
        if not -1 <= r < len(self._tree):
            raise IndexError("index out of range")
        total = 0
        while r >= 0:
            total += self._tree[r]
            r = (r & (r + 1)) - 1
        return total

    def range_sum(self, l, r):
        """Sum of items ``[l, r]``."""
        return self.prefix_sum(r) - self.prefix_sum(l - 1)

    def lower_bound(self, x):
        """First index whose prefix sum is at least ``x`` (``len(self)`` if none); items must be non-negative."""
        tree = self._tree
        n = len(tree)
        pos = -1
        acc = 0
        step = 1 << (n.bit_length() - 1) if n else 0
        while step:
            nxt = pos + step
            if nxt < n and acc + tree[nxt] < x:
                pos = nxt
                acc += tree[nxt]
            step >>= 1
        return pos + 1