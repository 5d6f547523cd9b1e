"""Gauss–Jordan elimination."""


def gauss_eliminate(matrix):
    """Return a copy of ``matrix`` brought to reduced row-echelon shape (pivots not scaled to one).

    Entries must support field arithmetic, e.g. ``Fraction``, ``float`` or modular integers.
    """
    rows = [list(row) for row in matrix]
    if not rows:
        return rows
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all rows must have the same length")

    def add_scaled(dst, src, mul):
        rows[dst] = [a + b * mul for a, b in zip(rows[dst], rows[src])]

    pivot = 0
    for j in range(width):
        if pivot >= len(rows):
            break
        if rows[pivot][j] == 0:
            swap_with = next((i for i in range(pivot + 1, len(rows)) if rows[i][j] != 0), None)
            if swap_with is None:
                continue
            add_scaled(pivot, swap_with, 1)
            add_scaled(swap_with, pivot, -1)
        for i, row in enumerate(rows):
            if i != pivot and row[j] != 0:
                add_scaled(i, pivot, -row[j] / rows[pivot][j])
        pivot += 1
    return rows