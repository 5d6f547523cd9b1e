"""Number-theoretic transform and polynomial multiplication modulo a prime."""


def _bit_reversal(n):
    bits = n.bit_length() - 1
    if bits == 0:
        return [0]
    return [int(format(i, f"0{bits}b")[::-1], 2) for i in range(n)]


class NTT:
    """Number-theoretic transform for sizes up to ``2 ** max_power`` modulo ``mod``."""

    def __init__(self, mod, max_power=23):
        if max_power < 1:
            raise ValueError("max_power must be positive")
        self.mod = mod
        self.max_power = max_power
        root = 2
        while pow(root, 1 << max_power, mod) != 1 or pow(root, 1 << (max_power - 1), mod) == 1:
            root += 1
            if root >= mod:
                raise ValueError("modulus has no root of unity of the required order")
        roots = [root]
        for _ in range(max_power):
            roots.append(roots[-1] * roots[-1] % mod)
        self._roots = roots[::-1]

    def dft(self, a):
        """Return the transform of ``a``; its length must be a power of two."""
        n = len(a)
        if n == 0 or n & (n - 1):
            raise ValueError("length must be a power of two")
        if n > 1 << self.max_power:
            raise ValueError("length exceeds the supported transform size")
        mod = self.mod
        values = [a[r] % mod for r in _bit_reversal(n)]
        length = 2
        while length <= n:
            w = self._roots[length.bit_length() - 1]
            half = length >> 1
            for start in range(0, n, length):
                c = 1
                for j in range(start, start + half):
                    x = values[j]
                    y = values[j + half] * c % mod
                    values[j] = (x + y) % mod
                    values[j + half] = (x - y) % mod
                    c = c * w % mod
            length <<= 1
        return values

    def multiply(self, a, b):
        """Product of two polynomials, zero-padded to twice the enclosing power of two."""
        n = 1
        while n < len(a) or n < len(b):
            n *= 2
        n *= 2
        fa = self.dft(list(a) + [0] * (n - len(a)))
        fb = self.dft(list(b) + [0] * (n - len(b)))
        mod = self.mod
        product = self.dft([x * y % mod for x, y in zip(fa, fb)])
        product[1:] = product[:0:-1]
        inv = pow(n, mod - 2, mod)
        return [x * inv % mod for x in product]