"""Segment tree with bottom-up point updates and lazy range updates."""

import copy
from dataclasses import dataclass


@dataclass
class MaxNode:
    """Segment value: the maximum ``val`` and the index ``ind`` it sits at; ``pending`` is an addition owed to children."""

    val: int = 0
    ind: int = 0
    pending: int = 0

    def apply(self, x):
        """Add ``x`` to the whole segment."""
        self.val += x
        self.pending += x

    def push_to(self, child):
        """Hand the pending addition down to ``child``."""
        child.apply(self.pending)


def merge_max(a, b):
    """Node holding the larger of ``a`` and ``b``; ties keep ``a``."""
    winner = a if a.val >= b.val else b
    return MaxNode(winner.val, winner.ind)


class SegmentTree:
    """Segment tree over half-open ranges.

    Nodes come from ``node_factory`` and must offer ``apply(x)``, ``push_to(child)``
    and a ``pending`` attribute that is falsy when nothing is owed to the children.
    Point updates with :meth:`update_point` and :meth:`query_bottom_up` do not
    propagate pending values; range updates with :meth:`update_range` and
    :meth:`query` do.
    """

    def __init__(self, data=0, merge=merge_max, node_factory=MaxNode):
        self._merge = merge
        self._factory = node_factory
        if isinstance(data, int):
            items = None
            size = data
        else:
            items = [copy.copy(item) for item in data]
            size = len(items)
        if size < 0:
            raise ValueError("size must be non-negative")
        n = 1
        while n < size:
            n <<= 1
        self._n = n
        self._size = size
        self._t = [node_factory() for _ in range(2 * n)]
        if items is not None:
            self._t[n:n + size] = items
            for v in range(n - 1, 0, -1):
                self._submerge(v)

    def __len__(self):
        return self._size

    def _submerge(self, v):
        if v < self._n:
            self._t[v] = self._merge(self._t[2 * v], self._t[2 * v + 1])

    def _check_range(self, l, r):
        if not 0 <= l <= r <= self._size:
            raise IndexError("range out of bounds")

    def __getitem__(self, index):
        if not 0 <= index < self._size:
            raise IndexError("index out of range")
        return self._t[index + self._n]

    def update_point(self, index, x):
        """Apply ``x`` to the leaf at ``index`` and recompute its ancestors."""
        if not 0 <= index < self._size:
            raise IndexError("index out of range")
        i = index + self._n
        self._t[i].apply(x)
        i >>= 1
        while i:
            self._submerge(i)
            i >>= 1

    def query_bottom_up(self, l, r):
        """Merged node over ``[l, r)`` without propagating pending values."""
        self._check_range(l, r)
        t, merge = self._t, self._merge
        left = right = None
        l += self._n
        r += self._n
        while l < r:
            if l & 1:
                left = t[l] if left is None else merge(left, t[l])
                l += 1
            if r & 1:
                r -= 1
                right = t[r] if right is None else merge(t[r], right)
            l >>= 1
            r >>= 1
        if left is None:
            return copy.copy(right) if right is not None else self._factory()
        if right is None:
            return copy.copy(left)
        return merge(left, right)

    def _push(self, v):
        node = self._t[v]
        if node.pending:
            node.push_to(self._t[2 * v])
            node.push_to(self._t[2 * v + 1])
            node.pending = 0

    def update_range(self, l, r, x):
        """Apply ``x`` to every item in ``[l, r)``."""
        self._check_range(l, r)
        self._update(l, r, x, 1, 0, self._n)

    def _update(self, l, r, x, v, vl, vr):
        if vl >= r or vr <= l:
            return
        if l <= vl and vr <= r:
            self._t[v].apply(x)
            return
        self._push(v)
        vm = (vl + vr) >> 1
        self._update(l, r, x, 2 * v, vl, vm)
        self._update(l, r, x, 2 * v + 1, vm, vr)
        self._submerge(v)

    def query(self, l, r):
        """Merged node over ``[l, r)``, propagating pending values."""
        self._check_range(l, r)
        return self._query(l, r, 1, 0, self._n)

    def _query(self, l, r, v, vl, vr):
        if vl >= r or vr <= l:
            return self._factory()
        if l <= vl and vr <= r:
            return copy.copy(self._t[v])
        self._push(v)
        vm = (vl + vr) >> 1
        if r <= vm:
            return self._query(l, r, 2 * v, vl, vm)
        if l >= vm:
            return self._query(l, r, 2 * v + 1, vm, vr)
        return self._merge(self._query(l, r, 2 * v, vl, vm), self._query(l, r, 2 * v + 1, vm, vr))