import pytest

from solarsystem2d.inputmanager import (
    RI_KEY_BREAK,
    VK_SPACE,
    InputManager,
    KeyEdge,
    Message,
    MessageType,
    MouseState,
    is_mouse_move,
    x_from_lparam,
    y_from_lparam,
)


def _lparam(x, y):
    return ((y & 0xFFFF) << 16) | (x & 0xFFFF)


def test_lparam_unpacks_coordinates():
    lp = _lparam(7, 5)
    assert x_from_lparam(lp) == 7
    assert y_from_lparam(lp) == 5


def test_lparam_coordinates_are_signed():
    assert x_from_lparam(0xFFFF) == -1
    assert y_from_lparam(_lparam(3, -20)) == -20


def test_key_down_sets_pressed_once():
    im = InputManager()
    assert im.on_handle_message(Message(MessageType.KEYDOWN, VK_SPACE, 0)) is True
    assert im.key_down(VK_SPACE) is True
    assert im.key_pressed(VK_SPACE) is True
    assert im.key_pressed(VK_SPACE) is False
    assert im.key_down(VK_SPACE) is True


def test_auto_repeat_does_not_set_pressed():
    im = InputManager()
    im.on_handle_message(Message(MessageType.KEYDOWN, 0x41, 1 << 30))
    assert im.key_down(0x41) is True
    assert im.key_pressed(0x41) is False


def test_key_up_clears_down():
    im = InputManager()
    im.on_handle_message(Message(MessageType.KEYDOWN, 0x41, 0))
    im.on_handle_message(Message(MessageType.KEYUP, 0x41, 0))
    assert im.key_down(0x41) is False


def test_unknown_message_is_not_handled():
    im = InputManager()
    assert im.on_handle_message(Message(0x0010)) is False


def test_key_out_of_range_raises():
    im = InputManager()
    with pytest.raises(ValueError):
        im.on_handle_message(Message(MessageType.KEYDOWN, 300, 0))
    with pytest.raises(ValueError):
        im.key_down(-1)


def test_mouse_buttons_and_position():
    im = InputManager()
    im.on_handle_message(Message(MessageType.LBUTTONDOWN, 0, _lparam(10, 20)))
    assert im.mouse_state() == MouseState((10, 20), True, False)
    im.on_handle_message(Message(MessageType.RBUTTONDOWN, 0, _lparam(11, 21)))
    assert im.mouse_state() == MouseState((11, 21), True, True)
    im.on_handle_message(Message(MessageType.LBUTTONUP, 0, _lparam(12, 22)))
    im.on_handle_message(Message(MessageType.RBUTTONUP, 0, _lparam(12, 22)))
    assert im.mouse_state() == MouseState((12, 22), False, False)


def test_mouse_move_updates_position_only():
    im = InputManager()
    im.on_handle_message(Message(MessageType.LBUTTONDOWN, 0, _lparam(1, 1)))
    im.on_handle_message(Message(MessageType.MOUSEMOVE, 0, _lparam(4, 9)))
    assert im.mouse_state() == MouseState((4, 9), True, False)


def test_raw_keyboard_down_and_up():
    im = InputManager()
    im.handle_raw_keyboard(0x42, key_up=False)
    assert im.key_down(0x42) is True
    assert im.key_pressed(0x42) is True
    im.handle_raw_keyboard(0x42, key_up=True)
    assert im.key_down(0x42) is False


def test_raw_keyboard_through_input_message():
    im = InputManager()
    assert im.on_handle_message(Message(MessageType.INPUT, 0x43, 0)) is True
    assert im.key_down(0x43) is True
    im.on_handle_message(Message(MessageType.INPUT, 0x43, RI_KEY_BREAK))
    assert im.key_down(0x43) is False


def test_raw_keyboard_ignores_invalid_key():
    im = InputManager()
    im.handle_raw_keyboard(0xFF, key_up=False)
    assert im.key_down(0xFF) is False


def test_is_mouse_move():
    assert is_mouse_move(MouseState((0, 0)), MouseState((0, 1))) is True
    assert is_mouse_move(MouseState((3, 3), True), MouseState((3, 3), False)) is False


def test_key_edge_defaults():
    edge = KeyEdge()
    assert (edge.pressed, edge.released) == (False, False)