"""Nested lists of a given shape."""

import copy


def multi_vector(*args, fill=0):
    """Return nested lists with dimensions ``args``, every item a copy of ``fill``."""
    if not args:
        raise ValueError("at least one dimension is required")
    if any(size < 0 for size in args):
        raise ValueError("dimensions must be non-negative")

    def build(dims):
        size, rest = dims[0], dims[1:]
        if not rest:
            return [copy.deepcopy(fill) for _ in range(size)]
        return [build(rest) for _ in range(size)]

    return build(args)