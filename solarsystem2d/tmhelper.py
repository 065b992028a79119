"""Affine 3x2 matrices and transform helpers for 2D drawing."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from solarsystem2d.mathhelper import Vector2F, degree_to_radian, radian_to_degree

PointLike = Iterable[float]


@dataclass(frozen=True)
class Matrix3x2:
    """Row-vector affine matrix; ``a @ b`` applies ``a`` first, then ``b``."""

    m11: float = 1.0
    m12: float = 0.0
    m21: float = 0.0
    m22: float = 1.0
    m31: float = 0.0
    m32: float = 0.0

    @staticmethod
    def identity() -> Matrix3x2:
        return Matrix3x2()

    @staticmethod
    def translation(x: float, y: float) -> Matrix3x2:
        return Matrix3x2(1.0, 0.0, 0.0, 1.0, x, y)

    @staticmethod
    def scale(sx: float, sy: float, center: Optional[PointLike] = None) -> Matrix3x2:
        cx, cy = center if center is not None else (0.0, 0.0)
        return Matrix3x2(sx, 0.0, 0.0, sy, cx - sx * cx, cy - sy * cy)

    @staticmethod
    def rotation(angle: float, center: Optional[PointLike] = None) -> Matrix3x2:
        """Rotation by ``angle`` degrees about ``center``."""
        cx, cy = center if center is not None else (0.0, 0.0)
        rad = degree_to_radian(angle)
        c, s = math.cos(rad), math.sin(rad)
        return Matrix3x2(c, s, -s, c, cx - cx * c + cy * s, cy - cx * s - cy * c)

    def __matmul__(self, other: Matrix3x2) -> Matrix3x2:
        if not isinstance(other, Matrix3x2):
            return NotImplemented
        return Matrix3x2(
            self.m11 * other.m11 + self.m12 * other.m21,
            self.m11 * other.m12 + self.m12 * other.m22,
            self.m21 * other.m11 + self.m22 * other.m21,
            self.m21 * other.m12 + self.m22 * other.m22,
            self.m31 * other.m11 + self.m32 * other.m21 + other.m31,
            self.m31 * other.m12 + self.m32 * other.m22 + other.m32,
        )

    def determinant(self) -> float:
        return self.m11 * self.m22 - self.m12 * self.m21

    def is_invertible(self) -> bool:
        return self.determinant() != 0.0

    def inverted(self) -> Matrix3x2:
        """The inverse matrix; raises ValueError for a singular matrix."""
        det = self.determinant()
        if det == 0.0:
            raise ValueError("matrix is not invertible")
        return Matrix3x2(
            self.m22 / det,
            -self.m12 / det,
            -self.m21 / det,
            self.m11 / det,
            (self.m21 * self.m32 - self.m22 * self.m31) / det,
            (self.m12 * self.m31 - self.m11 * self.m32) / det,
        )

    def transform_point(self, point: PointLike) -> Vector2F:
        x, y = point
        return Vector2F(
            x * self.m11 + y * self.m21 + self.m31,
            x * self.m12 + y * self.m22 + self.m32,
        )


@dataclass
class Rect:
    """An axis-aligned rectangle by its edges."""

    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top


def make_translation_matrix(size: Tuple[float, float]) -> Matrix3x2:
    """Translation by ``(width, height)``."""
    width, height = size
    return Matrix3x2(1.0, 0.0, 0.0, 1.0, width, height)


def make_rotation_matrix_origin(angle: float) -> Matrix3x2:
    """Rotation by ``angle`` degrees about the origin."""
    rad = degree_to_radian(angle)
    return Matrix3x2(math.cos(rad), math.sin(rad), -math.sin(rad), math.cos(rad), 0.0, 0.0)


def make_scale_matrix_origin(size: Tuple[float, float]) -> Matrix3x2:
    """Scale by ``(width, height)`` about the origin."""
    width, height = size
    return Matrix3x2(width, 0.0, 0.0, height, 0.0, 0.0)


def make_rotation_matrix(angle: float, center: PointLike = (0.0, 0.0)) -> Matrix3x2:
    """Rotation by ``angle`` degrees about ``center``."""
    cx, cy = center
    return (
        make_translation_matrix((-cx, -cy))
        @ make_rotation_matrix_origin(angle)
        @ make_translation_matrix((cx, cy))
    )


def make_scale_matrix(size: Tuple[float, float], center: PointLike = (0.0, 0.0)) -> Matrix3x2:
    """Scale by ``(width, height)`` about ``center``."""
    cx, cy = center
    return (
        make_translation_matrix((-cx, -cy))
        @ make_scale_matrix_origin(size)
        @ make_translation_matrix((cx, cy))
    )


def make_render_matrix(
    unity_coords: bool = False,
    mirror: bool = False,
    offset_x: float = 0.0,
    offset_y: float = 0.0,
) -> Matrix3x2:
    """Matrix that flips the y axis for Unity-style coordinates and x for mirroring."""
    scale_y = -1.0 if unity_coords else 1.0
    scale_x = -1.0 if mirror else 1.0
    offset_x = offset_x if mirror else -offset_x
    offset_y = offset_y if unity_coords else -offset_y
    return Matrix3x2.scale(scale_x, scale_y) @ Matrix3x2.translation(offset_x, offset_y)


def matrix_to_string(matrix: Matrix3x2) -> str:
    """Three lines of the matrix rows, two decimals each."""
    return (
        f"{matrix.m11:.2f}, {matrix.m12:.2f}\n"
        f"{matrix.m21:.2f}, {matrix.m22:.2f}\n"
        f"{matrix.m31:.2f}, {matrix.m32:.2f}\n"
    )


def decompose_matrix(matrix: Matrix3x2) -> Tuple[Vector2F, float, Vector2F]:
    """Split a matrix into ``(translation, rotation_degrees, scale)``."""
    translation = Vector2F(matrix.m31, matrix.m32)
    scale = Vector2F(math.hypot(matrix.m11, matrix.m12), math.hypot(matrix.m21, matrix.m22))
    rotation = radian_to_degree(math.atan2(matrix.m12, matrix.m11))
    return translation, rotation, scale


def remove_pivot(matrix: Matrix3x2, pivot: PointLike) -> Matrix3x2:
    """Strip the pivot correction ``T(-pivot) ... T(pivot)`` from a local matrix."""
    px, py = pivot
    return Matrix3x2.translation(px, py) @ matrix @ Matrix3x2.translation(-px, -py)


def is_point_in_rect(point: PointLike, rect: Rect) -> bool:
    """True if ``point`` lies within ``rect``, edges included; edge order does not matter."""
    x, y = point
    left, right = sorted((rect.left, rect.right))
    top, bottom = sorted((rect.top, rect.bottom))
    return left <= x <= right and top <= y <= bottom