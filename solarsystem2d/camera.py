"""2D cameras producing view matrices; none of them rotate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from solarsystem2d.mathhelper import Vector2F
from solarsystem2d.tmhelper import Matrix3x2


class Camera2DBase(ABC):
    """A camera with a world position and a zoom factor (1.0 = 100%)."""

    def __init__(self) -> None:
        self._position = Vector2F(0.0, 0.0)
        self.zoom = 1.0

    @property
    def position(self) -> Vector2F:
        return Vector2F(self._position.x, self._position.y)

    @position.setter
    def position(self, value: Iterable[float]) -> None:
        x, y = value
        self._position = Vector2F(float(x), float(y))

    def move(self, dx: float, dy: float) -> None:
        self._position.x += dx
        self._position.y += dy

    @abstractmethod
    def view_matrix(self) -> Matrix3x2:
        """The matrix taking world coordinates to screen coordinates."""


class D2DCamera2D(Camera2DBase):
    """Camera with the origin at the top-left corner and y pointing down."""

    def view_matrix(self) -> Matrix3x2:
        return Matrix3x2.scale(self.zoom, self.zoom) @ Matrix3x2.translation(
            -self._position.x, -self._position.y
        )


class UnityCamera(Camera2DBase):
    """Cartesian camera centred on the screen with the y axis pointing up."""

    def __init__(self, screen_width: float = 0.0, screen_height: float = 0.0) -> None:
        super().__init__()
        self._screen_width = float(screen_width)
        self._screen_height = float(screen_height)

    @property
    def screen_width(self) -> float:
        return self._screen_width

    @property
    def screen_height(self) -> float:
        return self._screen_height

    def set_screen_size(self, width: float, height: float) -> None:
        self._screen_width = float(width)
        self._screen_height = float(height)

    def view_matrix_lb(self) -> Matrix3x2:
        """View with the camera position at the bottom-left of the screen."""
        half_w = self._screen_width * 0.5
        half_h = self._screen_height * 0.5
        pan = Matrix3x2.translation(-self._position.x, -self._position.y)
        to_center = Matrix3x2.translation(-half_w, -half_h)
        scale_flip = Matrix3x2.scale(self.zoom, -self.zoom)
        back = Matrix3x2.translation(half_w, half_h)
        return pan @ to_center @ scale_flip @ back

    def view_matrix_center(self) -> Matrix3x2:
        """View with the camera position at the centre of the screen."""
        pan = Matrix3x2.translation(-self._position.x, -self._position.y)
        scale_flip = Matrix3x2.scale(self.zoom, -self.zoom)
        center = Matrix3x2.translation(self._screen_width * 0.5, self._screen_height * 0.5)
        return pan @ scale_flip @ center

    def view_matrix(self) -> Matrix3x2:
        return self.view_matrix_center()