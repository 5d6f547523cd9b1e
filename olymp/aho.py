"""Aho–Corasick automaton over a dictionary of patterns."""

from dataclasses import dataclass, field


@dataclass
class _Node:
    parent: int
    char: object
    go: dict = field(default_factory=dict)
    suffix: "int | None" = None
    super_suffix: "int | None" = None
    indices: list = field(default_factory=list)

    @property
    def is_terminal(self):
        return bool(self.indices)


class AhoCorasick:
    """Trie of patterns with suffix links and links to the nearest terminal suffix.

    Node 0 is the root. ``nodes[v].indices`` lists the patterns ending at ``v``.
    """

    ROOT = 0

    def __init__(self):
        self.nodes = [_Node(self.ROOT, None, suffix=self.ROOT)]

    def add(self, pattern, index):
        """Add ``pattern`` to the trie, marking its end with ``index``."""
        v = self.ROOT
        for c in pattern:
            nxt = self.nodes[v].go.get(c)
            if nxt is None:
                nxt = len(self.nodes)
                self.nodes.append(_Node(v, c))
                self.nodes[v].go[c] = nxt
            v = nxt
        self.nodes[v].indices.append(index)

    def go(self, v, c):
        """Automaton transition from ``v`` by ``c``; needs suffix links."""
        while True:
            node = self.nodes[v]
            if c in node.go:
                return node.go[c]
            if v == self.ROOT:
                return self.ROOT
            v = node.suffix

    def bfs_order(self):
        """Nodes in breadth-first order, children visited by increasing character."""
        order = [self.ROOT]
        for v in order:
            order.extend(child for _, child in sorted(self.nodes[v].go.items()))
        return order

    def count_suffix_links(self):
        """Compute the suffix link of every node."""
        for v in self.bfs_order():
            node = self.nodes[v]
            if node.parent == self.ROOT:
                node.suffix = self.ROOT
            else:
                node.suffix = self.go(self.nodes[node.parent].suffix, node.char)

    def count_super_suffix_links(self):
        """Compute links to the nearest terminal suffix; needs suffix links."""
        for v in self.bfs_order():
            node = self.nodes[v]
            suffix = self.nodes[node.suffix]
            node.super_suffix = node.suffix if suffix.is_terminal else suffix.super_suffix