"""Hierarchical 2D transforms with pivot, rotation, scale and translation."""

from __future__ import annotations

import math
from enum import Enum, auto
from typing import Iterable, List, Optional, Tuple, Union

from solarsystem2d.mathhelper import Vector2F, degree_to_radian
from solarsystem2d.tmhelper import Matrix3x2, decompose_matrix, remove_pivot

VectorLike = Union[Vector2F, Iterable[float]]


class PivotPreset(Enum):
    """Where the pivot of an object of a given size is placed."""

    TOP_LEFT = auto()
    TOP_RIGHT = auto()
    BOTTOM_LEFT = auto()
    BOTTOM_RIGHT = auto()
    CENTER = auto()


def _vector(value: VectorLike) -> Vector2F:
    x, y = value
    return Vector2F(float(x), float(y))


class Transform:
    """A node in a transform hierarchy with cached local and world matrices."""

    def __init__(self) -> None:
        self._position = Vector2F(0.0, 0.0)
        self._rotation = 0.0
        self._scale = Vector2F(1.0, 1.0)
        self._pivot = Vector2F(0.0, 0.0)
        self._parent: Optional[Transform] = None
        self._children: List[Transform] = []
        self._local = Matrix3x2.identity()
        self._world = Matrix3x2.identity()
        self._dirty = False

    # hierarchy

    @property
    def parent(self) -> Optional[Transform]:
        return self._parent

    @property
    def children(self) -> Tuple[Transform, ...]:
        return tuple(self._children)

    def set_parent(self, new_parent: Transform) -> None:
        """Attach to ``new_parent``, keeping the current world placement."""
        if new_parent is self:
            raise ValueError("a transform cannot be its own parent")
        if self._parent is not None:
            raise ValueError("transform already has a parent; detach it first")
        self._parent = new_parent
        new_parent.add_child(self)
        self._mark_dirty()

    def detach_from_parent(self) -> None:
        """Detach from the parent, keeping the current world placement."""
        if self._parent is None:
            return
        self._parent.remove_child(self)
        self._parent = None
        self._mark_dirty()

    def add_child(self, child: Transform) -> None:
        """Register ``child`` and re-express its local values in this node's space."""
        local = child.local_matrix() @ self.inverse_world_matrix()
        child._assign_from_matrix(local)
        self._children.append(child)

    def remove_child(self, child: Transform) -> None:
        """Unregister ``child`` and re-express its local values in world space."""
        local = child.local_matrix() @ self.world_matrix()
        child._assign_from_matrix(local)
        self._children = [c for c in self._children if c is not child]

    def _assign_from_matrix(self, matrix: Matrix3x2) -> None:
        position, rotation, scale = decompose_matrix(remove_pivot(matrix, self._pivot))
        self._position = position
        self._rotation = rotation
        self._scale = scale
        self._mark_dirty()

    # local values

    @property
    def position(self) -> Vector2F:
        return Vector2F(self._position.x, self._position.y)

    @position.setter
    def position(self, value: VectorLike) -> None:
        self._position = _vector(value)
        self._mark_dirty()

    @property
    def rotation(self) -> float:
        """Rotation in degrees."""
        return self._rotation

    @rotation.setter
    def rotation(self, degree: float) -> None:
        self._rotation = float(degree)
        self._mark_dirty()

    @property
    def scale(self) -> Vector2F:
        return Vector2F(self._scale.x, self._scale.y)

    @scale.setter
    def scale(self, value: VectorLike) -> None:
        self._scale = _vector(value)
        self._mark_dirty()

    @property
    def pivot(self) -> Vector2F:
        return Vector2F(self._pivot.x, self._pivot.y)

    def translate(self, dx: Union[float, VectorLike], dy: Optional[float] = None) -> None:
        """Move by ``(dx, dy)``, or by a vector passed as ``dx`` alone."""
        if dy is None:
            dx, dy = dx  # type: ignore[misc]
        self._position.x += dx  # type: ignore[operator]
        self._position.y += dy
        self._mark_dirty()

    def rotate(self, degree: float) -> None:
        self._rotation += degree
        self._mark_dirty()

    def forward(self) -> Vector2F:
        """Unit vector pointing along the current rotation."""
        radian = degree_to_radian(self._rotation)
        return Vector2F(math.cos(radian), math.sin(radian))

    # matrices

    def local_matrix(self) -> Matrix3x2:
        if self._dirty:
            self._update_matrices()
        return self._local

    def world_matrix(self) -> Matrix3x2:
        if self._dirty:
            self._update_matrices()
        return self._world

    def inverse_world_matrix(self) -> Matrix3x2:
        return self.world_matrix().inverted()

    def set_pivot_preset(self, preset: PivotPreset, size: Iterable[float]) -> None:
        """Place the pivot for an object of ``size`` (width, height), y pointing up."""
        width, height = size
        pivots = {
            PivotPreset.TOP_LEFT: (0.0, 0.0),
            PivotPreset.TOP_RIGHT: (width, 0.0),
            PivotPreset.BOTTOM_LEFT: (0.0, -height),
            PivotPreset.BOTTOM_RIGHT: (width, -height),
            PivotPreset.CENTER: (width * 0.5, -(height * 0.5)),
        }
        self._pivot = _vector(pivots[preset])
        self._mark_dirty()

    def _mark_dirty(self) -> None:
        self._dirty = True
        for child in self._children:
            child._mark_dirty()

    def _update_matrices(self) -> None:
        px, py = self._pivot
        self._local = (
            Matrix3x2.translation(-px, -py)
            @ Matrix3x2.scale(self._scale.x, self._scale.y)
            @ Matrix3x2.rotation(self._rotation)
            @ Matrix3x2.translation(px, py)
            @ Matrix3x2.translation(self._position.x, self._position.y)
        )
        if self._parent is not None:
            self._world = self._local @ self._parent.world_matrix()
        else:
            self._world = self._local
        self._dirty = False