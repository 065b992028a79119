"""Keyboard and mouse state collected from window messages."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Tuple

logger = logging.getLogger(__name__)

KEY_COUNT = 256
RI_KEY_BREAK = 0x01
INVALID_VKEY = 0xFF

VK_SPACE = 0x20
VK_F1 = 0x70
VK_F2 = 0x71
VK_F3 = 0x72

_REPEAT_BIT = 1 << 30


def x_from_lparam(lparam: int) -> int:
    """The signed 16-bit x coordinate packed in the low word of ``lparam``."""
    low = lparam & 0xFFFF
    return low - 0x10000 if low & 0x8000 else low


def y_from_lparam(lparam: int) -> int:
    """The signed 16-bit y coordinate packed in the high word of ``lparam``."""
    high = (lparam >> 16) & 0xFFFF
    return high - 0x10000 if high & 0x8000 else high


@dataclass(frozen=True)
class MouseState:
    """Cursor position in client pixels and the state of both buttons."""

    pos: Tuple[int, int] = (0, 0)
    left_pressed: bool = False
    right_pressed: bool = False


@dataclass
class KeyEdge:
    """Press and release edges of one key since they were last consumed."""

    pressed: bool = False
    released: bool = False


def is_mouse_move(prev: MouseState, cur: MouseState) -> bool:
    """True if the cursor position differs between the two states."""
    return prev.pos != cur.pos


class MessageType(IntEnum):
    """Window message identifiers understood by the input manager."""

    INPUT = 0x00FF
    KEYDOWN = 0x0100
    KEYUP = 0x0101
    MOUSEMOVE = 0x0200
    LBUTTONDOWN = 0x0201
    LBUTTONUP = 0x0202
    RBUTTONDOWN = 0x0204
    RBUTTONUP = 0x0205


@dataclass(frozen=True)
class Message:
    """A window message.

    For ``MessageType.INPUT`` the ``wparam`` holds the virtual key of a raw
    keyboard event and ``lparam`` its flags (``RI_KEY_BREAK`` marks a key up).
    """

    kind: int
    wparam: int = 0
    lparam: int = 0


def _check_key(vk: int) -> None:
    if not 0 <= vk < KEY_COUNT:
        raise ValueError(f"virtual key out of range: {vk}")


@dataclass
class InputManager:
    """Tracks which keys are down, key edges and the mouse state."""

    _mouse: MouseState = field(default_factory=MouseState)
    _key_down: List[bool] = field(default_factory=lambda: [False] * KEY_COUNT)
    _key_edge: List[KeyEdge] = field(
        default_factory=lambda: [KeyEdge() for _ in range(KEY_COUNT)]
    )

    def on_handle_message(self, message: Message) -> bool:
        """Process ``message``; return False if it is not an input message."""
        try:
            kind = MessageType(message.kind)
        except ValueError:
            return False

        if kind is MessageType.INPUT:
            self.handle_raw_keyboard(message.wparam, bool(message.lparam & RI_KEY_BREAK))
        elif kind is MessageType.KEYDOWN:
            self._handle_key_down(message.wparam, message.lparam)
        elif kind is MessageType.KEYUP:
            self._handle_key_up(message.wparam)
        else:
            self._handle_mouse(kind, message.lparam)
        return True

    def key_pressed(self, vk: int) -> bool:
        """True once after ``vk`` went down; reading consumes the edge."""
        _check_key(vk)
        edge = self._key_edge[vk]
        pressed = edge.pressed
        edge.pressed = False
        return pressed

    def key_down(self, vk: int) -> bool:
        """True while ``vk`` is held down."""
        _check_key(vk)
        return self._key_down[vk]

    def mouse_state(self) -> MouseState:
        return self._mouse

    def handle_raw_keyboard(self, vkey: int, key_up: bool) -> None:
        """Apply a raw keyboard event; the invalid key code 0xFF is ignored."""
        if not 0 <= vkey < INVALID_VKEY:
            return
        edge = self._key_edge[vkey]
        if key_up:
            if self._key_down[vkey]:
                edge.released = True
            self._key_down[vkey] = False
            logger.debug("Key Up: VK %d", vkey)
        else:
            if not self._key_down[vkey]:
                edge.pressed = True
            self._key_down[vkey] = True
            logger.debug("Key Down: VK %d", vkey)

    def _handle_key_down(self, vk: int, lparam: int) -> None:
        _check_key(vk)
        was_down = bool(lparam & _REPEAT_BIT)
        self._key_down[vk] = True
        edge = self._key_edge[vk]
        if not was_down:
            edge.pressed = True
        edge.released = False

    def _handle_key_up(self, vk: int) -> None:
        _check_key(vk)
        self._key_down[vk] = False
        self._key_edge[vk].released = True

    def _handle_mouse(self, kind: MessageType, lparam: int) -> None:
        left = self._mouse.left_pressed
        right = self._mouse.right_pressed
        if kind is MessageType.LBUTTONDOWN:
            left = True
        elif kind is MessageType.RBUTTONDOWN:
            right = True
        elif kind is MessageType.LBUTTONUP:
            left = False
        elif kind is MessageType.RBUTTONUP:
            right = False
        self._mouse = MouseState(
            pos=(x_from_lparam(lparam), y_from_lparam(lparam)),
            left_pressed=left,
            right_pressed=right,
        )