"""Ordered multiset on a treap with order statistics and positions of nodes."""

import random


class _Node:
    __slots__ = ("key", "priority", "size", "left", "right", "parent")

    def __init__(self, key):
        self.key = key
        self.priority = random.getrandbits(31)
        self.size = 1
        self.left = None
        self.right = None
        self.parent = None


def _size(n):
    return n.size if n is not None else 0


def _update(n):
    if n is None:
        return
    n.size = 1 + _size(n.left) + _size(n.right)
    for child in (n.left, n.right):
        if child is not None:
            child.parent = n


def _merge(a, b):
    if a is None:
        return b
    if b is None:
        return a
    if a.priority > b.priority:
        a.right = _merge(a.right, b)
        _update(a)
        return a
    b.left = _merge(a, b.left)
    _update(b)
    return b


def _split_key(n, key, inclusive):
    """Split into (keys < key, rest), or (keys <= key, rest) when ``inclusive``."""
    if n is None:
        return None, None
    goes_right = key < n.key if inclusive else not n.key < key
    if goes_right:
        left, n.left = _split_key(n.left, key, inclusive)
        right = n
    else:
        n.right, right = _split_key(n.right, key, inclusive)
        left = n
    n.parent = None
    _update(left)
    _update(right)
    return left, right


def _split_index(n, index):
    """Split into (first ``index`` nodes, rest)."""
    if n is None:
        return None, None
    if _size(n.left) >= index:
        left, n.left = _split_index(n.left, index)
        right = n
    else:
        n.right, right = _split_index(n.right, index - _size(n.left) - 1)
        left = n
    n.parent = None
    _update(left)
    _update(right)
    return left, right


class OrderedTreap:
    """A sorted multiset supporting rank queries, k-th element and positional insertion."""

    def __init__(self):
        self._root = None

    def _set_root(self, root):
        self._root = root
        if root is not None:
            root.parent = None

    def __len__(self):
        return _size(self._root)

    def __iter__(self):
        stack = []
        n = self._root
        while stack or n is not None:
            while n is not None:
                stack.append(n)
                n = n.left
            n = stack.pop()
            yield n.key
            n = n.right

    def insert(self, key):
        """Insert ``key`` after all equal keys; return its node."""
        left, right = _split_key(self._root, key, inclusive=True)
        node = _Node(key)
        self._set_root(_merge(_merge(left, node), right))
        return node

    def insert_at(self, index, key):
        """Insert ``key`` at position ``index`` regardless of order; return its node."""
        if not 0 <= index <= len(self):
            raise IndexError("index out of range")
        left, right = _split_index(self._root, index)
        node = _Node(key)
        self._set_root(_merge(_merge(left, node), right))
        return node

    def erase_one(self, key):
        """Remove one occurrence of ``key``; raise KeyError if there is none."""
        left, right = _split_key(self._root, key, inclusive=False)
        first = right
        while first is not None and first.left is not None:
            first = first.left
        if first is None or first.key != key:
            self._set_root(_merge(left, right))
            raise KeyError(key)
        _, right = _split_index(right, 1)
        self._set_root(_merge(left, right))

    def erase_all(self, key):
        """Remove every occurrence of ``key``; return how many were removed."""
        left, right = _split_key(self._root, key, inclusive=False)
        middle, right = _split_key(right, key, inclusive=True)
        self._set_root(_merge(left, right))
        return _size(middle)

    def kth(self, index):
        """Key at 0-based position ``index``."""
        if not 0 <= index < len(self):
            raise IndexError("index out of range")
        n = self._root
        while True:
            left = _size(n.left)
            if index == left:
                return n.key
            if index < left:
                n = n.left
            else:
                index -= left + 1
                n = n.right

    def lower_bound(self, key):
        """Number of keys less than ``key``."""
        count = 0
        n = self._root
        while n is not None:
            if not n.key < key:
                n = n.left
            else:
                count += _size(n.left) + 1
                n = n.right
        return count

    def upper_bound(self, key):
        """Number of keys not greater than ``key``."""
        count = 0
        n = self._root
        while n is not None:
            if key < n.key:
                n = n.left
            else:
                count += _size(n.left) + 1
                n = n.right
        return count

    def min(self):
        """Smallest key."""
        n = self._root
        if n is None:
            raise ValueError("min() of an empty treap")
        while n.left is not None:
            n = n.left
        return n.key

    def max(self):
        """Largest key."""
        n = self._root
        if n is None:
            raise ValueError("max() of an empty treap")
        while n.right is not None:
            n = n.right
        return n.key

    def index_of(self, node):
        """Position of ``node`` in the sequence, counted from 1."""
        if node is None:
            raise ValueError("node must not be None")
        position = 1 + _size(node.left)
        child, n = node, node.parent
        while n is not None:
            if n.left is not child:
                position += _size(n.left) + 1
            child, n = n, n.parent
        return position