"""Treap whose nodes carry a key, a random priority, a parent link and a subtree size."""

import operator
import random
from dataclasses import dataclass, field

from olymp.debug import format_value


def _random_priority():
    return random.getrandbits(31)


@dataclass(eq=False)
class TreapNode:
    """Treap node; subclasses override :meth:`update` to maintain extra subtree data."""

    key: object = None
    priority: int = field(default_factory=_random_priority)
    left: "TreapNode | None" = field(default=None, repr=False)
    right: "TreapNode | None" = field(default=None, repr=False)
    parent: "TreapNode | None" = field(default=None, repr=False)
    size: int = 1

    def update(self, treap):
        """Recompute derived data after the children changed; the base node keeps its size."""
        self.size = 1 + treap.size(self.left) + treap.size(self.right)


class Treap:
    """Operations on treaps built from nodes made by ``node_factory``."""

    def __init__(self, node_factory=TreapNode):
        self._factory = node_factory

    def new_node(self, *args):
        """Create a single-node treap from ``node_factory(*args)``."""
        node = self._factory(*args)
        self._update(node)
        return node

    def size(self, n):
        """Number of nodes in the treap rooted at ``n``."""
        return n.size if n is not None else 0

    def _update(self, n):
        if n is None:
            return
        n.size = 1 + self.size(n.left) + self.size(n.right)
        for child in (n.left, n.right):
            if child is not None:
                child.parent = n
        n.update(self)

    def merge(self, a, b):
        """Join two treaps, every key of ``a`` preceding every key of ``b``."""
        if a is None:
            return b
        if b is None:
            return a
        if a.priority > b.priority:
            a.right = self.merge(a.right, b)
            self._update(a)
            return a
        b.left = self.merge(a, b.left)
        self._update(b)
        return b

    def _split(self, node, key, goes_right):
        if node is None:
            return None, None
        if goes_right(key, node.key):
            left, node.left = self._split(node.left, key, goes_right)
            right = node
        else:
            node.right, right = self._split(node.right, key, goes_right)
            left = node
        node.parent = None
        self._update(left)
        self._update(right)
        return left, right

    def split_value(self, root, key):
        """Split into ``(keys < key, keys >= key)``."""
        return self._split(root, key, operator.le)

    def split_value_up(self, root, key):
        """Split into ``(keys <= key, keys > key)``."""
        return self._split(root, key, operator.lt)

    @staticmethod
    def _inorder(n):
        stack = []
        while stack or n is not None:
            while n is not None:
                stack.append(n)
                n = n.left
            n = stack.pop()
            yield n
            n = n.right

    def to_string(self, n):
        """Keys in order, each rendered by :func:`format_value` and followed by a space."""
        return "".join(format_value(node.key) + " " for node in self._inorder(n))