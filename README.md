# firefly2d

The core pieces of a small 2D game engine, in plain Python with no
third-party dependencies.

## What is in it

- `firefly2d.entity` — `decode_name(name)` hashes a name (str or bytes) to a
  64-bit FNV-1a identifier. Empty names, and names of 100 bytes or more,
  decode to 0.
- `firefly2d.geometry` — immutable `Vec2` (with `dot`, `cross`, `normal`,
  `normalize`, `invert`, `magnitude` and arithmetic operators), `RGBAColor`
  (channels checked to lie in 0..255), `TransformState`, `Projection`
  (`overlap`, `contains`) and `Mesh` (`translate`, `project`, `axes`).
- `firefly2d.variables` — thread-safe holders `BoolVar`, `IntVar`,
  `UIntVar` (wraps modulo 2**64), `DoubleVar` and `Vector2Var`, each with
  `get`, `set` and in-place arithmetic. `bind(other)` makes two holders share
  one value from then on.
- `firefly2d.transform` — `Transform` with `position`, `scale` and
  `rotation` (degrees) held in shareable variables; `snapshot`, `assign`,
  `apply_rotation(rot, pivot)` and `apply_scale(scale_factor, pivot)`.
- `firefly2d.workers` — `core_count()`, a reusable `Barrier`, and
  `WorkerPool`, which splits the indices `0..count` across its threads and
  calls `function(start, end, args)` on each share. `wait()` blocks until all
  shares are done and re-raises a job's error; the pool is a context manager.
- `firefly2d.rigidbody` — `Rigidbody`, a convex mesh attached to any object
  that has a `transform`, with mass, friction, elasticity, velocity,
  constraints (`Constraint.X`, `Constraint.Y`, `Constraint.ROT`), triggers,
  group masks and collision callbacks.
- `firefly2d.physics` — `PhysicsEngine` plus the collision helpers
  `create_regular_polygon`, `polygons_overlap`, `minimum_translation`,
  `virtual_collision_points`, `filter_collision_points` and
  `collision_response`.
- `firefly2d.options` — `WindowMode`, `TextureFlip`, `LightingQuality`,
  `GameEvent`, `TransformPivotPoint`, and the checked records
  `GraphicsOptions` and `AudioOptions`.
- GUI widgets — `GuiElement` and `PointerState` (`firefly2d.gui_element`),
  `GuiText`, `GuiEditbox`, `GuiPanel`, `GuiSlider` and `GuiDroplist`.
- `firefly2d.scene` — `Scene`, a base class with overridable callbacks and
  a loading-progress estimate that never goes backwards.
- `firefly2d.input` — `InputState`, which records key and mouse-button
  presses, releases and holds per frame, and routes editing keys and typed
  text to a `TextEditor` while text input is on.
- `firefly2d.light` — `LightObject`, `LightInstance` (a copy of an original
  light at its own position), `LightData` and `parabola_coefficients`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Physics example

A rigid body belongs to any object with a `transform`. It may also have a
`group` bit mask and callbacks such as `on_collision_enter(collision)`.

```python
from firefly2d.geometry import Vec2
from firefly2d.physics import PhysicsEngine, create_regular_polygon
from firefly2d.rigidbody import BoundingBoxType, Rigidbody
from firefly2d.transform import Transform


class Ball:
    def __init__(self, x, y):
        self.transform = Transform(Vec2(x, y), Vec2(1.0, 1.0), 0.0)
        self.group = 1

    def on_collision_enter(self, collision):
        print("contact at", collision.contact, "impulse", collision.impulse)


engine = PhysicsEngine(gravity=Vec2(0.0, -9.8))
ball = Ball(0.0, 0.0)
body = Rigidbody(ball, create_regular_polygon(20, 0.5), engine)
body.set_bounding_box(BoundingBoxType.CONVEX)

dt = 1 / 60
for _ in range(60):
    for b in engine.bodies:
        b.update_transform()
    engine.new_frame(dt)
    engine.update(dt, 0, 1)   # thread 0 of 1
    engine.resolve(dt)

print(ball.transform.position.get())
```

`update(time_elapsed, thread, thread_count)` may be called from several
threads at once, each with its own `thread` index, for example through a
`WorkerPool`.

## GUI example

Widgets do not read the mouse themselves. Each frame, describe the pointer
with a `PointerState`; `update` returns the actions the widget asks for, and
`apply_action` delivers them.

```python
from firefly2d.gui_element import PointerState
from firefly2d.gui_slider import GuiSlider

slider = GuiSlider(0, 1, (0, 0), (10, 1), 0.0, 100.0, 0.0, 1.0, layer=0)
pointer = PointerState(position=(2.5, 0.0), held=True)
for _ in range(2):
    for action in slider.update(1 / 60, pointer):
        slider.apply_action(action)
print(slider.value)  # 75.0
```

## What it does not do

This package holds the engine's logic only. It opens no window, draws
nothing, plays no sound and loads no textures or fonts. It has no game loop
and no command to start a game: the caller drives frames, feeds
`InputState` with key and mouse events, passes `PointerState` to the
widgets, and passes a `baker` callback to `LightObject` if light textures
are to be rebuilt.