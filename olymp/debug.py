"""Readable one-line rendering of nested values for debugging output."""

from collections.abc import Iterable, Mapping


def _is_pair(x):
    return isinstance(x, tuple) and len(x) == 2


def _is_container(x):
    return isinstance(x, Iterable) and not isinstance(x, str) and not _is_pair(x)


def _items(x):
    if isinstance(x, Mapping):
        return list(x.items())
    return list(x)


def format_value(x):
    """Render ``x``: strings quoted, pairs and containers in braces.

    Containers whose items are themselves strings or containers put every
    item on a line of its own.
    """
    if isinstance(x, str):
        return f'"{x}"'
    if _is_pair(x):
        return "{" + format_value(x[0]) + "," + format_value(x[1]) + "}"
    if isinstance(x, bool):
        return "1" if x else "0"
    if isinstance(x, Iterable):
        items = _items(x)
        nested = any(isinstance(item, str) or _is_container(item) for item in items)
        sep = "\n" if nested else ""
        body = ("," + sep).join(format_value(item) for item in items)
        return "{" + sep + body + sep + "}"
    return str(x)


def format_values(*args):
    """Render each argument with :func:`format_value`, separated by ``", "``."""
    if not args:
        raise TypeError("format_values() needs at least one value")
    return ", ".join(format_value(arg) for arg in args)