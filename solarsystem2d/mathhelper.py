"""Vector arithmetic and small planar geometry helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence, Tuple

PointLike = Iterable[float]


def degree_to_radian(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * (math.pi / 180.0)


def radian_to_degree(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * (180.0 / math.pi)


def clamp(value: float, lower: float, upper: float) -> float:
    """Limit ``value`` to the closed range ``[lower, upper]``."""
    if value < lower:
        return lower
    if value > upper:
        return upper
    return value


@dataclass
class Vector2F:
    """A mutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vector2F) -> Vector2F:
        return Vector2F(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2F) -> Vector2F:
        return Vector2F(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2F:
        return Vector2F(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector2F:
        return Vector2F(self.x / scalar, self.y / scalar)

    def __iadd__(self, other: Vector2F) -> Vector2F:
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: Vector2F) -> Vector2F:
        self.x -= other.x
        self.y -= other.y
        return self

    def __imul__(self, scalar: float) -> Vector2F:
        self.x *= scalar
        self.y *= scalar
        return self

    def __itruediv__(self, scalar: float) -> Vector2F:
        self.x /= scalar
        self.y /= scalar
        return self

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def length_squared(self) -> float:
        """Squared Euclidean length."""
        return self.x * self.x + self.y * self.y

    def normalize(self) -> float:
        """Scale the vector to unit length in place; return the former length."""
        length = self.length()
        if length > 0.0:
            inv = 1.0 / length
            self.x *= inv
            self.y *= inv
        return length

    def cross(self, other: Vector2F) -> float:
        """The z component of the cross product."""
        return self.x * other.y - self.y * other.x


def is_left(p0: PointLike, p1: PointLike, p2: PointLike) -> int:
    """Positive if ``p2`` lies left of the line p0->p1, negative if right, 0 if on it.

    The result is truncated toward zero to an integer.
    """
    x0, y0 = p0
    x1, y1 = p1
    x2, y2 = p2
    return int((x1 - x0) * (y2 - y0) - (x2 - x0) * (y1 - y0))


def _edges(vertices: Iterable[PointLike]) -> Iterator[Tuple[Tuple[float, float], Tuple[float, float]]]:
    points = [tuple(v) for v in vertices]
    return zip(points, points[1:] + points[:1])


def cn_pn_poly(point: PointLike, vertices: Iterable[PointLike]) -> int:
    """Crossing-number test: 1 if ``point`` is inside the polygon, else 0.

    The polygon is closed implicitly; a repeated first vertex at the end is harmless.
    """
    px, py = point
    crossings = 0
    for (x0, y0), (x1, y1) in _edges(vertices):
        if y0 <= py < y1 or y1 <= py < y0:
            vt = (py - y0) / (y1 - y0)
            if px < x0 + vt * (x1 - x0):
                crossings += 1
    return crossings & 1


def wn_pn_poly(point: PointLike, vertices: Iterable[PointLike]) -> int:
    """Winding-number test: 0 only when ``point`` is outside the polygon."""
    _, py = point
    winding = 0
    for start, end in _edges(vertices):
        if start[1] <= py:
            if end[1] > py and is_left(start, end, point) > 0:
                winding += 1
        elif end[1] <= py and is_left(start, end, point) < 0:
            winding -= 1
    return winding


@dataclass(frozen=True, order=True)
class Edge:
    """An undirected edge between two vertex indices, stored with ``a <= b``."""

    a: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        if self.a > self.b:
            low, high = self.b, self.a
            object.__setattr__(self, "a", low)
            object.__setattr__(self, "b", high)


@dataclass
class Triangle:
    """A triangle given by three vertex indices."""

    a: int = 0
    b: int = 0
    c: int = 0


def is_circum(triangle: Triangle, index: int, points: Sequence[PointLike]) -> bool:
    """True if ``points[index]`` lies in or on the circumcircle of ``triangle``."""
    ax, ay = points[triangle.a]
    bx, by = points[triangle.b]
    cx, cy = points[triangle.c]
    px, py = points[index]

    ccw = (bx - ax) * (cy - ay) - (by - ay) * (cx - ax)

    adx, ady = ax - px, ay - py
    bdx, bdy = bx - px, by - py
    cdx, cdy = cx - px, cy - py

    alift = adx * adx + ady * ady
    blift = bdx * bdx + bdy * bdy
    clift = cdx * cdx + cdy * cdy

    det = (
        alift * (bdx * cdy - cdx * bdy)
        + blift * (cdx * ady - adx * cdy)
        + clift * (adx * bdy - bdx * ady)
    )

    if ccw > 0:
        return det >= 0
    return det <= 0