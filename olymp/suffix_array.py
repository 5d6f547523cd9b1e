"""Suffix array by prefix doubling."""

from itertools import pairwise


def suffix_array(s):
    """Start positions of the suffixes of ``s`` in lexicographic order.

    ``s`` is any sequence of mutually comparable items.
    """
    seq = list(s)
    n = len(seq)
    if n == 0:
        return []
    alphabet = {c: i for i, c in enumerate(sorted(set(seq)))}
    ranks = [alphabet[c] for c in seq]
    order = sorted(range(n), key=ranks.__getitem__)
    k = 1
    while True:
        def key(i, ranks=ranks, k=k):
            return ranks[i], ranks[i + k] if i + k < n else -1

        order.sort(key=key)
        new_ranks = [0] * n
        for prev, cur in pairwise(order):
            new_ranks[cur] = new_ranks[prev] + (key(cur) != key(prev))
        ranks = new_ranks
        if ranks[order[-1]] == n - 1 or 2 * k >= n:
            return order
        k *= 2