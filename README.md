# camshake

Trauma-based camera shake for 2D and 3D game cameras.

Each shake has a *trauma* value. On every update the trauma falls by
`decay * delta_secs`, and it never drops below zero. The shake strength is
`trauma ** trauma_power`. If the strength is above zero, it scales values from
the shake's random sources. The results become the offset and rotation, and
they are written into a `Transform`. Otherwise the transform's translation and
rotation are reset to zero and the identity.

## Installation

```
pip install camshake
```

The package needs nothing outside the standard library.

## Usage

A random source subclasses `camshake.shake.RandomSource`. Its
`rand(time)` method returns a value in `[-1.0, 1.0]` for a time in seconds.
The default source, `NotRandom`, always returns `0.5` and logs a warning
each time it is used.

```python
import random

from camshake.shake import CameraShake, RandomSource, Shake2d
from camshake.transform import Transform, Vec2


class Jitter(RandomSource):
    def rand(self, time):
        return random.random() * 2.0 - 1.0


shake = Shake2d(
    max_offset=Vec2(90.0, 45.0),
    max_roll=0.2,
    trauma_power=2.0,
    decay=0.8,
    random_sources=(Jitter(), Jitter(), Jitter()),
)

rig = CameraShake()
camera = Transform()
rig.add(camera, shake)

shake.trauma = min(shake.trauma + 0.5, 1.0)   # e.g. on an explosion
rig.update(delta_secs=1 / 60, elapsed_secs=0.016)
print(camera.translation, camera.rotation)
```

`Shake2d` takes three sources: X offset, Y offset and roll. `Shake3d` takes
six: X, Y and Z offset, then yaw, pitch and roll. Any other number of sources
raises `ValueError`. You can call `Shake2d.apply(transform, delta_secs,
elapsed_secs)` or `Shake3d.apply(...)` directly. `apply_shake_2d` and
`apply_shake_3d` do the same for an iterable of `(transform, shake)` pairs.
`CameraShake.update` runs all registered 2D shakes first and then all 3D
shakes. `CameraShake.add` raises `TypeError` for anything that is not a
`Shake2d` or `Shake3d`.

### Defaults

| field               | `Shake2d`          | `Shake3d`              |
|---------------------|--------------------|------------------------|
| `max_offset`        | `Vec2(100, 100)`   | `Vec3(0, 0, 0)`        |
| rotation limit      | `max_roll = 0.1`   | `max_yaw_pitch_roll = Vec3(0.1, 0.1, 0.1)` |
| `trauma`            | `0.0`              | `0.0`                  |
| `trauma_power`      | `2.0`              | `2.0`                  |
| `decay`             | `0.8`              | `0.8`                  |
| `random_sources`    | 3 × `NotRandom`    | 6 × `NotRandom`        |

## Modules

- `camshake.transform`: `Vec2`, `Vec3`, `Quat` and `Transform`.
  - `Quat.from_axis_angle` and `Quat.from_euler_yxz` build rotations.
  - `Quat.mul_vec3` rotates a vector.
  - `Transform.forward` returns local -Z and `Transform.right` returns local +X.
  - `Transform.reset` clears the translation and rotation.
- `camshake.shake`: the shake components and `CameraShake`.
- `camshake.simplex`: `OpenSimplex(seed)`, a seeded 2D noise whose
  `get(x, y)` returns values clamped to `[-1.0, 1.0]`.
- `camshake.demo2d`: pieces for a 2D scene.
  - `UniformRandom` is a white-noise source. `SimplexSource` samples
    `OpenSimplex` at `time * 15`.
  - `add_trauma` raises trauma by 0.5 by default, capped at 1.0.
  - `movement_direction` and `move_player` handle WASD or arrow-key movement
    at 150 units per second.
  - `make_random_shake_2d` and `make_simplex_shake_2d` return ready-made
    shakes.
- `camshake.flycam`: first-person controls.
  - `Window` is a plain window state and `CursorGrabMode` is its grab mode.
    `toggle_grab_cursor` and `cursor_grab` (on `Escape`) switch the grab.
  - `InitialGrab` grabs the cursor once, on the fifth frame.
  - `player_move` moves with WASD, `Space` and `ShiftLeft` while the cursor is
    grabbed.
  - `player_look` turns the transform by mouse deltas, with the pitch clamped
    to ±180°.
  - `make_shake_3d` returns a rotation-only `Shake3d`.
- `camshake.thirdperson`: an orbiting camera.
  - `camera_start` places the camera at `(0, 0.5, 15)`, looking at the
    origin.
  - `face_transform` places the marker block at the player's front.
  - `player_look` yaws the player and orbits the camera 15 units out, with the
    pitch clamped between -75° and -5°.

## What it does not do

camshake does not render, open windows or read the keyboard and mouse. The
caller owns the frame loop. It passes in the frame's `delta_secs` and
`elapsed_secs`, the set of pressed key names, mouse motion deltas as `Vec2`,
and a `Window` describing the cursor state. It then applies the resulting
`Transform` values to its own scene. The package also has no command-line
program.