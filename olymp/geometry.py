"""Plane vectors with integer and floating-point coordinates."""

import math
from dataclasses import dataclass
from functools import total_ordering

EPS = 1e-9


def approx_equal(a, b):
    """True if ``a`` and ``b`` differ by less than :data:`EPS`."""
    return abs(a - b) < EPS


@dataclass(frozen=True, order=True)
class Vec:
    """A vector with integer coordinates, ordered by ``x`` then ``y``."""

    x: int = 0
    y: int = 0

    def __add__(self, other):
        return Vec(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Vec(self.x - other.x, self.y - other.y)

    def __neg__(self):
        return Vec(-self.x, -self.y)

    def __mul__(self, k):
        return Vec(self.x * k, self.y * k)

    __rmul__ = __mul__

    def orth(self):
        """The vector turned a quarter turn counter-clockwise."""
        return Vec(-self.y, self.x)

    def len2(self):
        return self.x * self.x + self.y * self.y

    def length(self):
        return math.sqrt(self.len2())

    def dot(self, other):
        return self.x * other.x + self.y * other.y

    def cross(self, other):
        return self.x * other.y - self.y * other.x

    def __str__(self):
        return f"{self.x} {self.y}"


@total_ordering
@dataclass(frozen=True, eq=False)
class VecF:
    """A vector with float coordinates; equality and ordering tolerate :data:`EPS`."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other):
        return VecF(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return VecF(self.x - other.x, self.y - other.y)

    def __neg__(self):
        return VecF(-self.x, -self.y)

    def __mul__(self, k):
        return VecF(self.x * k, self.y * k)

    __rmul__ = __mul__

    def __truediv__(self, k):
        return VecF(self.x / k, self.y / k)

    def orth(self):
        """The vector turned a quarter turn counter-clockwise."""
        return VecF(-self.y, self.x)

    def len2(self):
        return self.x * self.x + self.y * self.y

    def length(self):
        return math.sqrt(self.len2())

    def dot(self, other):
        return self.x * other.x + self.y * other.y

    def cross(self, other):
        return self.x * other.y - self.y * other.x

    def rotate_sin_cos(self, sin_a, cos_a):
        """Rotate counter-clockwise by the angle with the given sine and cosine."""
        return self.orth() * sin_a + self * cos_a

    def rotate(self, alpha):
        """Rotate counter-clockwise by ``alpha`` radians."""
        return self.rotate_sin_cos(math.sin(alpha), math.cos(alpha))

    def __eq__(self, other):
        if not isinstance(other, VecF):
            return NotImplemented
        return approx_equal(self.x, other.x) and approx_equal(self.y, other.y)

    __hash__ = None

    def __lt__(self, other):
        if not isinstance(other, VecF):
            return NotImplemented
        if approx_equal(self.x, other.x):
            return self.y < other.y
        return self.x < other.x

    def __str__(self):
        return f"{self.x} {self.y}"