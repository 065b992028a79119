# solarsystem2d

A small toolkit for 2D scenes built from a hierarchy of affine transforms, with
a sun, planets and a moon that spin and orbit each other.

## Modules

- `solarsystem2d.mathhelper`: `Vector2F` (arithmetic operators, `length`,
  `length_squared`, in-place `normalize`, `cross`), `degree_to_radian`,
  `radian_to_degree`, `clamp`, `is_left`, the point-in-polygon tests
  `cn_pn_poly` (crossing number, returns 1 inside, 0 outside) and `wn_pn_poly`
  (winding number, 0 only outside), `Edge` (an ordered index pair), `Triangle`
  and the circumcircle test `is_circum`.
- `solarsystem2d.tmhelper`: `Matrix3x2`, a frozen row-vector affine matrix where
  `a @ b` applies `a` first and then `b`. It offers `identity`, `translation`,
  `scale` and `rotation` (degrees, both with an optional centre),
  `determinant`, `is_invertible`, `inverted` (raises `ValueError` when
  singular) and `transform_point`. Alongside are `Rect`, hand-built makers
  (`make_translation_matrix`, `make_rotation_matrix_origin`,
  `make_scale_matrix_origin`, `make_rotation_matrix`, `make_scale_matrix`,
  `make_render_matrix`), `matrix_to_string`, `decompose_matrix` (returns
  translation, rotation in degrees and scale), `remove_pivot` and
  `is_point_in_rect` (edges included).
- `solarsystem2d.transform`: `Transform`, a parent/child node with `position`,
  `rotation` (degrees), `scale` and a pivot placed by `set_pivot_preset` with a
  `PivotPreset`. Local and world matrices are recomputed lazily. Attaching with
  `set_parent` or leaving with `detach_from_parent` keeps the node's world
  placement; setting a parent on a node that already has one raises
  `ValueError`.
- `solarsystem2d.camera`: `D2DCamera2D` (top-left origin, y down) and
  `UnityCamera` (screen-centred, y up, with `view_matrix_center` and
  `view_matrix_lb`). Both have a `position`, a `zoom` and `move`.
- `solarsystem2d.timer`: `GameTimer`, a pausable frame timer with `reset`,
  `start`, `stop`, `tick`, `delta_time`, `delta_time_ms` and `total_time`. The
  clock function can be supplied, which makes it easy to drive in tests.
- `solarsystem2d.inputmanager`: `InputManager`, which turns `Message` values
  (kinds from `MessageType`) into key state and a `MouseState`. `key_down`
  reports a held key; `key_pressed` reports a press edge once and then clears
  it. `handle_raw_keyboard` applies a raw key event directly.
- `solarsystem2d.scene`: `Renderer`, which records each frame's drawing calls as
  a list of commands; `TestScene`, an abstract scene that turns mouse state
  changes into button and move callbacks (recorded in `mouse_events` by
  default); `SolarObject`; and `TransformPracticeScene`.

## Example

```python
from solarsystem2d.transform import Transform
from solarsystem2d.mathhelper import Vector2F

sun = Transform()
earth = Transform()
earth.set_parent(sun)
earth.position = Vector2F(150.0, 0.0)

sun.rotate(90.0)
print(earth.world_matrix().transform_point(Vector2F(0.0, 0.0)))
```

Driving the solar system scene:

```python
from solarsystem2d.inputmanager import InputManager
from solarsystem2d.scene import Renderer, TransformPracticeScene

scene = TransformPracticeScene(InputManager(), Renderer(), resource_dir="Resource")
scene.set_up()        # reads s.png, e.png, m.png and Saturn.png from resource_dir
scene.tick(1 / 60)    # advances the animation and records one frame
print(len(scene.renderer.commands))
```

`set_up` creates the sun, earth, moon and saturn, and turns on both self
rotation and orbiting. In `process_keyboard_events` (called by every `tick`),
F2 turns self rotation on, F3 turns it off and Space switches orbiting on or
off.

## What it does not do

There is no window, no pixel rendering and no command to run. `Renderer`
only records drawing calls, and `load_bitmap` only reads an image file's bytes
without decoding it. To show anything on screen, pass the scene a renderer of
your own with the same methods (`render_begin`, `render_end`,
`set_transform`, `draw_rectangle`, `draw_bitmap`, `draw_message`,
`load_bitmap`), and feed window events to `InputManager.on_handle_message`.

## Installing and testing

```
pip install .
pip install .[test]
pytest
```