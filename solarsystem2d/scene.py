"""Scenes driven by the input manager and drawn through a recording renderer."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass
from pathlib import Path
from typing import Deque, Iterable, List, NamedTuple, Optional, Tuple, Union

from solarsystem2d.camera import UnityCamera
from solarsystem2d.inputmanager import (
    VK_F1,
    VK_F2,
    VK_F3,
    VK_SPACE,
    InputManager,
    MouseState,
    is_mouse_move,
)
from solarsystem2d.mathhelper import Vector2F
from solarsystem2d.tmhelper import Matrix3x2, Rect, make_render_matrix
from solarsystem2d.transform import PivotPreset, Transform

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

_MOUSE_EVENT_HISTORY = 64


@dataclass(frozen=True)
class Bitmap:
    """Image data loaded from a file."""

    path: str
    data: bytes


class DrawCommand(NamedTuple):
    """One recorded drawing call with the transform active at the time."""

    kind: str
    transform: Matrix3x2
    args: tuple


class MouseEvent(NamedTuple):
    """A mouse event seen by a scene, with the positions it carried."""

    kind: str
    positions: Tuple[Vector2F, ...]


class Renderer:
    """Records drawing calls of each frame as a list of commands."""

    def __init__(self) -> None:
        self.commands: List[DrawCommand] = []
        self.frame_count = 0
        self.background: Optional[str] = None
        self.transform = Matrix3x2.identity()
        self._drawing = False

    def render_begin(self) -> None:
        """Start a frame cleared to white."""
        if self._drawing:
            raise RuntimeError("frame already begun")
        self._drawing = True
        self.commands = []
        self.background = "white"

    def render_end(self) -> None:
        """Finish and present the current frame."""
        if not self._drawing:
            raise RuntimeError("no frame in progress")
        self._drawing = False
        self.frame_count += 1

    def set_transform(self, matrix: Matrix3x2) -> None:
        self.transform = matrix

    def draw_rectangle(
        self, left: float, top: float, right: float, bottom: float, color: str
    ) -> None:
        self._record("rectangle", Rect(left, top, right, bottom), color)

    def draw_bitmap(self, bitmap: Optional[Bitmap], dest: Rect) -> None:
        self._record("bitmap", bitmap, dest)

    def draw_message(
        self, text: str, left: float, top: float, width: float, height: float, color: str
    ) -> None:
        self._record("message", text, Rect(left, top, left + width, top + height), color)

    def load_bitmap(self, path: PathLike) -> Bitmap:
        """Read an image file; raises OSError if it cannot be read."""
        file = Path(path)
        return Bitmap(str(file), file.read_bytes())

    def _record(self, kind: str, *args: object) -> None:
        if not self._drawing:
            raise RuntimeError("drawing outside render_begin/render_end")
        self.commands.append(DrawCommand(kind, self.transform, tuple(args)))


def _to_point(state: MouseState) -> Vector2F:
    x, y = state.pos
    return Vector2F(float(x), float(y))


class TestScene(ABC):
    """Base scene translating mouse state changes into event callbacks."""

    __test__ = False

    def __init__(self, input_manager: InputManager) -> None:
        self.input_manager = input_manager
        self._prev_mouse = MouseState()
        self.mouse_events: Deque[MouseEvent] = deque(maxlen=_MOUSE_EVENT_HISTORY)

    @abstractmethod
    def set_up(self) -> None:
        """Create the scene contents."""

    @abstractmethod
    def tick(self, delta_time: float) -> None:
        """Advance and draw one frame."""

    @abstractmethod
    def on_resize(self, width: float, height: float) -> None:
        """React to a new render target size."""

    @abstractmethod
    def process_keyboard_events(self) -> None:
        """Consume keyboard input for this frame."""

    def process_mouse_events(self) -> None:
        """Compare with the previous mouse state and fire button and move events."""
        prev = self._prev_mouse
        cur = self.input_manager.mouse_state()
        pos = _to_point(cur)

        if not prev.left_pressed and cur.left_pressed:
            self.on_mouse_left_down(pos)
        elif prev.left_pressed and not cur.left_pressed:
            self.on_mouse_left_up(pos)

        if not prev.right_pressed and cur.right_pressed:
            self.on_mouse_right_down(pos)
        elif prev.right_pressed and not cur.right_pressed:
            self.on_mouse_right_up(pos)

        if is_mouse_move(prev, cur):
            self.on_mouse_move(_to_point(prev), pos)

        self._prev_mouse = cur

    def on_mouse_left_down(self, pos: Vector2F) -> None:
        """Record a left button press."""
        self.mouse_events.append(MouseEvent("left_down", (pos,)))

    def on_mouse_left_up(self, pos: Vector2F) -> None:
        """Record a left button release."""
        self.mouse_events.append(MouseEvent("left_up", (pos,)))

    def on_mouse_right_down(self, pos: Vector2F) -> None:
        """Record a right button press."""
        self.mouse_events.append(MouseEvent("right_down", (pos,)))

    def on_mouse_right_up(self, pos: Vector2F) -> None:
        """Record a right button release."""
        self.mouse_events.append(MouseEvent("right_up", (pos,)))

    def on_mouse_move(self, prev: Vector2F, cur: Vector2F) -> None:
        """Record a cursor move from ``prev`` to ``cur``."""
        self.mouse_events.append(MouseEvent("move", (prev, cur)))


_OBJECT_RECT = Rect(0.0, 0.0, 100.0, 100.0)
_SELF_ROTATION_SPEED = 36.0
_ORBIT_STEP = 0.3


class SolarObject:
    """A body with its own spin transform and an orbit transform for children."""

    _live = 0

    def __init__(self, bitmap: Optional[Bitmap]) -> None:
        self.bitmap = bitmap
        SolarObject._live += 1
        self.name = str(SolarObject._live)
        self.render_matrix = make_render_matrix(True)
        self.rect = Rect(_OBJECT_RECT.left, _OBJECT_RECT.top, _OBJECT_RECT.right, _OBJECT_RECT.bottom)
        self.transform = Transform()
        self.orbit_transform = Transform()
        self.selected = False
        self.leader = False
        self.self_rotation = False
        self._released = False

        size = (self.rect.width, self.rect.height)
        self.transform.set_pivot_preset(PivotPreset.CENTER, size)
        self.orbit_transform.set_pivot_preset(PivotPreset.CENTER, size)

    def update(self, delta_time: float) -> None:
        if self.self_rotation:
            self.transform.rotate(delta_time * _SELF_ROTATION_SPEED)

    def draw(self, renderer: Renderer, view_matrix: Matrix3x2) -> None:
        final = self.render_matrix @ self.transform.world_matrix() @ view_matrix
        r = _OBJECT_RECT
        renderer.set_transform(final)
        renderer.draw_rectangle(r.left, r.top, r.right, r.bottom, "lightgray")
        renderer.draw_bitmap(self.bitmap, Rect(r.left, r.top, r.right, r.bottom))
        renderer.draw_message(self.name, r.left, r.top, 200.0, 50.0, "black")

    def set_position(self, pos: Iterable[float]) -> None:
        """Place the object so that ``pos`` is the centre of its rectangle."""
        x, y = pos
        half_w = self.rect.width / 2
        half_h = self.rect.height / 2
        real = Vector2F(x - half_w, y + half_h)
        self.transform.position = real
        self.orbit_transform.position = real

    def move(self, offset: Iterable[float]) -> None:
        dx, dy = offset
        self.transform.translate(dx, dy)
        self.orbit_transform.translate(dx, dy)

    def self_rotate(self, angle: float) -> None:
        self.transform.rotate(angle)

    def orbit_rotate(self, angle: float) -> None:
        self.orbit_transform.rotate(angle)

    def toggle_selected(self) -> None:
        self.selected = not self.selected

    def set_parent(self, parent: SolarObject) -> None:
        """Attach both transforms to ``parent``'s orbit transform."""
        if parent is None:
            raise ValueError("parent must be given")
        if self.transform.parent is not None or self.orbit_transform.parent is not None:
            self.transform.detach_from_parent()
            self.orbit_transform.detach_from_parent()
        self.transform.set_parent(parent.orbit_transform)
        self.orbit_transform.set_parent(parent.orbit_transform)

    def detach_from_parent(self) -> None:
        self.transform.detach_from_parent()

    def _release(self) -> None:
        if not self._released:
            self._released = True
            SolarObject._live -= 1


class TransformPracticeScene(TestScene):
    """Sun, earth, moon and saturn spinning and orbiting through parented transforms."""

    TITLE = "F2 : self rotation on, F3 : self rotation off, Space : orbit on/off"

    def __init__(
        self,
        input_manager: InputManager,
        renderer: Renderer,
        resource_dir: PathLike = "Resource",
        screen_size: Tuple[float, float] = (800.0, 800.0),
    ) -> None:
        super().__init__(input_manager)
        self.renderer = renderer
        self.resource_dir = Path(resource_dir)
        self.camera = UnityCamera()
        self.camera.set_screen_size(*screen_size)
        self.title = ""
        self.orbit_rotating = False
        self._solar_objects: List[SolarObject] = []
        self._planet_objects: List[SolarObject] = []
        self._bitmaps: dict = {}

    @property
    def solar_objects(self) -> Tuple[SolarObject, ...]:
        return tuple(self._solar_objects)

    @property
    def planet_objects(self) -> Tuple[SolarObject, ...]:
        return tuple(self._planet_objects)

    def set_up(self) -> None:
        self.title = self.TITLE
        logger.info("The sun spins; planets spin and orbit the sun; the moon orbits the earth.")
        for key, file in (("sun", "s.png"), ("earth", "e.png"), ("moon", "m.png"), ("saturn", "Saturn.png")):
            self._bitmaps[key] = self.renderer.load_bitmap(self.resource_dir / file)
        self._set_solar()
        self.toggle_orbit_rotation()
        self.set_self_rotation()

    def tick(self, delta_time: float) -> None:
        self.process_keyboard_events()

        for solar in self._solar_objects:
            solar.update(delta_time)
            if self.orbit_rotating:
                solar.orbit_rotate(_ORBIT_STEP)

        camera_matrix = self.camera.view_matrix()
        final = make_render_matrix(True) @ camera_matrix

        self.renderer.render_begin()
        self.renderer.set_transform(final)
        for solar in self._solar_objects:
            solar.draw(self.renderer, camera_matrix)
        self.renderer.render_end()

    def on_resize(self, width: float, height: float) -> None:
        self.camera.set_screen_size(width, height)

    def process_keyboard_events(self) -> None:
        im = self.input_manager
        im.key_pressed(VK_F1)
        if im.key_pressed(VK_F2):
            self.set_self_rotation()
        if im.key_pressed(VK_F3):
            self.clear_self_rotation()
        if im.key_pressed(VK_SPACE) and self._solar_objects:
            self.toggle_orbit_rotation()

    def toggle_orbit_rotation(self) -> None:
        self.orbit_rotating = not self.orbit_rotating

    def orbit_solar(self) -> None:
        for solar in self._solar_objects:
            solar.orbit_rotate(_ORBIT_STEP)

    def set_self_rotation(self) -> None:
        for planet in self._planet_objects:
            planet.self_rotation = True

    def clear_self_rotation(self) -> None:
        for planet in self._planet_objects:
            planet.self_rotation = False

    def clear_solar_objects(self) -> None:
        for solar in self._solar_objects:
            solar._release()
        self._solar_objects.clear()
        self._planet_objects.clear()

    def _set_solar(self) -> None:
        self._add_sun()
        self._add_earth()
        self._add_moon()
        self._add_saturn()

    def _add(self, body: SolarObject) -> None:
        self._solar_objects.append(body)
        self._planet_objects.append(body)

    def _add_sun(self) -> None:
        if self._solar_objects:
            return
        sun = SolarObject(self._bitmaps.get("sun"))
        sun.set_position((0.0, 0.0))
        sun.transform.scale = (1.5, 1.5)
        self._add(sun)

    def _add_satellite(self, key: str, scale: float, parent: SolarObject, pos: Tuple[float, float]) -> None:
        body = SolarObject(self._bitmaps.get(key))
        body.transform.scale = (scale, scale)
        body.set_parent(parent)
        body.set_position(pos)
        self._add(body)

    def _add_earth(self) -> None:
        self._add_satellite("earth", 0.5, self._planet_objects[0], (150.0, 150.0))

    def _add_moon(self) -> None:
        self._add_satellite("moon", 0.2, self._planet_objects[-1], (0.0, 0.0))

    def _add_saturn(self) -> None:
        self._add_satellite("saturn", 0.5, self._planet_objects[0], (250.0, 250.0))