"""Splay tree with find, merge and split by key."""

from dataclasses import dataclass, field


@dataclass(eq=False)
class SplayNode:
    """A splay tree node."""

    key: object
    parent: "SplayNode | None" = field(default=None, repr=False)
    left: "SplayNode | None" = field(default=None, repr=False)
    right: "SplayNode | None" = field(default=None, repr=False)


def _is_left(v):
    p = v.parent
    return p is not None and p.left is v


def _make_left(v, p):
    if v is not None:
        v.parent = p
    if p is not None:
        p.left = v


def _make_right(v, p):
    if v is not None:
        v.parent = p
    if p is not None:
        p.right = v


def _rotate(v):
    p = v.parent
    pp = p.parent
    was_left = _is_left(p)
    if _is_left(v):
        _make_left(v.right, p)
        _make_right(p, v)
    else:
        _make_right(v.left, p)
        _make_left(p, v)
    if was_left:
        _make_left(v, pp)
    else:
        _make_right(v, pp)


def _splay(v):
    while v.parent is not None:
        p = v.parent
        if p.parent is None:
            _rotate(v)
        elif _is_left(v) == _is_left(p):
            _rotate(p)
            _rotate(v)
        else:
            _rotate(v)
            _rotate(v)


class SplayTree:
    """A binary search tree that moves accessed nodes to the root."""

    def __init__(self, key=None):
        self.root = SplayNode(key) if key is not None else None

    @classmethod
    def _of(cls, root):
        tree = cls()
        tree.root = root
        if root is not None:
            root.parent = None
        return tree

    def _set_root(self, v):
        _splay(v)
        self.root = v

    def find(self, key):
        """Splay and return the node of ``key``, or of a neighbouring key; None if empty."""
        v = self.root
        if v is None:
            return None
        while True:
            if key < v.key and v.left is not None:
                v = v.left
            elif v.key < key and v.right is not None:
                v = v.right
            else:
                break
        self._set_root(v)
        return v

    def max(self):
        """Node with the largest key, or None."""
        v = self.root
        while v is not None and v.right is not None:
            v = v.right
        return v

    def min(self):
        """Node with the smallest key, or None."""
        v = self.root
        while v is not None and v.left is not None:
            v = v.left
        return v

    def merge(self, other):
        """Absorb ``other``, whose keys all exceed ours; ``other`` is left empty. Return self."""
        if other.root is None:
            return self
        if self.root is None:
            self.root, other.root = other.root, None
            return self
        self._set_root(self.max())
        other._set_root(other.min())
        _make_right(other.root, self.root)
        other.root = None
        return self

    def split(self, key):
        """Split into trees with keys ``< key`` and ``>= key``; this tree is left empty."""
        if self.root is None:
            return SplayTree(), SplayTree()
        v = self.find(key)
        self.root = None
        if v.key < key:
            right = v.right
            _make_right(None, v)
            return SplayTree._of(v), SplayTree._of(right)
        left = v.left
        _make_left(None, v)
        return SplayTree._of(left), SplayTree._of(v)

    def __iter__(self):
        stack = []
        v = self.root
        while stack or v is not None:
            while v is not None:
                stack.append(v)
                v = v.left
            v = stack.pop()
            yield v.key
            v = v.right

    def __str__(self):
        return " ".join(str(key) for key in self)