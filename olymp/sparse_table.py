"""Static range queries: sparse tables and a linear-memory minimum table."""

import operator

_BLOCK_BITS = 5
_BLOCK = 1 << _BLOCK_BITS


def _check_range(l, r, n):
    if not 0 <= l <= r < n:
        raise IndexError("range out of bounds")


class SparseTable:
    """Range queries ``[l, r]`` for an idempotent ``func`` in O(1) after O(n log n) setup."""

    def __init__(self, values, func=min):
        values = list(values)
        if not values:
            raise ValueError("values must not be empty")
        self._func = func
        levels = [values]
        length = 2
        while length <= len(values):
            prev = levels[-1]
            half = length >> 1
            levels.append([func(prev[i], prev[i + half]) for i in range(len(values) - length + 1)])
            length <<= 1
        self._levels = levels

    def query(self, l, r):
        """``func`` folded over items ``[l, r]``."""
        _check_range(l, r, len(self._levels[0]))
        k = (r - l + 1).bit_length() - 1
        level = self._levels[k]
        return self._func(level[l], level[r + 1 - (1 << k)])


class SparseIndexTable:
    """Sparse table that answers with the index of the least item in ``[l, r]``."""

    def __init__(self, values, less=None):
        self._values = list(values)
        if not self._values:
            raise ValueError("values must not be empty")
        self._less = less or operator.lt
        n = len(self._values)
        levels = [list(range(n))]
        length = 2
        while length <= n:
            prev = levels[-1]
            half = length >> 1
            levels.append([self._pick(prev[i], prev[i + half]) for i in range(n - length + 1)])
            length <<= 1
        self._levels = levels

    def _pick(self, i, j):
        return i if self._less(self._values[i], self._values[j]) else j

    def index(self, l, r):
        """Index of a least item in ``[l, r]``."""
        _check_range(l, r, len(self._values))
        k = (r - l + 1).bit_length() - 1
        level = self._levels[k]
        return self._pick(level[l], level[r + 1 - (1 << k)])

    def value(self, l, r):
        """Least item in ``[l, r]``."""
        return self._values[self.index(l, r)]


class LinearMinTable:
    """Range-minimum index queries with linear memory: blocks of 32 plus bit-mask stacks."""

    def __init__(self, values, less=None):
        self._values = values = list(values)
        if not values:
            raise ValueError("values must not be empty")
        self._less = less or operator.lt
        n = len(values)
        blocks = (n + _BLOCK - 1) // _BLOCK

        block_min = []
        for b in range(blocks):
            best = b * _BLOCK
            for j in range(b * _BLOCK, min(n, (b + 1) * _BLOCK)):
                best = self._pick(best, j)
            block_min.append(best)
        self._block_min = block_min
        self._sparse = SparseIndexTable([values[i] for i in block_min], self._less)

        masks = [0] * n
        for b in range(blocks):
            start = b * _BLOCK
            stack = 0
            for j in range(start, min(n, start + _BLOCK)):
                while stack and self._less(values[j], values[start + stack.bit_length() - 1]):
                    stack ^= 1 << (stack.bit_length() - 1)
                stack |= 1 << (j - start)
                masks[j] = stack
        self._masks = masks

    def _pick(self, i, j):
        return i if self._less(self._values[i], self._values[j]) else j

    def _local(self, block, l, r):
        base = block << _BLOCK_BITS
        mask = self._masks[base + r] >> l
        return (mask & -mask).bit_length() - 1 + base + l

    def index(self, l, r):
        """Index of a least item in ``[l, r]``."""
        _check_range(l, r, len(self._values))
        il, ir = l >> _BLOCK_BITS, r >> _BLOCK_BITS
        low = _BLOCK - 1
        if il == ir:
            return self._local(il, l & low, r & low)
        ans = self._pick(self._local(il, l & low, low), self._local(ir, 0, r & low))
        if ir > il + 1:
            ans = self._pick(ans, self._block_min[self._sparse.index(il + 1, ir - 1)])
        return ans

    def value(self, l, r):
        """Least item in ``[l, r]``."""
        return self._values[self.index(l, r)]