"""Extended Euclidean algorithm and the Chinese remainder theorem."""


def _trunc_div(a, b):
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def extended_gcd(a, b):
    """Return ``(g, x, y)`` with ``a * x + b * y == g`` where ``|g| == gcd(a, b)``."""
    if b == 0:
        return a, 1, 0
    q = _trunc_div(a, b)
    g, x, y = extended_gcd(b, a - q * b)
    return g, y, x - q * y


def extended_gcd_small_x(a, b):
    """Like :func:`extended_gcd` for positive ``a`` and ``b``, with ``0 <= x < b // g``."""
    if a <= 0 or b <= 0:
        raise ValueError("a and b must be positive")
    g, x, y = extended_gcd(a, b)
    step_x = b // g
    step_y = a // g
    d = -(x // step_x) if x > 0 else (-x + step_x - 1) // step_x
    return g, x + step_x * d, y - step_y * d


def crt(a1, r1, a2, r2):
    """Smallest non-negative ``x`` with ``x = r1 (mod a1)`` and ``x = r2 (mod a2)``, or None."""
    g, x, _ = extended_gcd(a1, a2)
    if (r2 - r1) % g != 0:
        return None
    lcm = a1 // g * a2
    return (a1 * x * ((r2 - r1) // g) + r1) % lcm