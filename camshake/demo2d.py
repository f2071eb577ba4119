"""Building blocks of the 2D shake demos: random sources, input and trauma."""

from __future__ import annotations

import logging
import random
from typing import AbstractSet, Iterable, Optional

from .shake import RandomSource, Shake2d
from .simplex import OpenSimplex
from .transform import Transform, Vec2, Vec3

_log = logging.getLogger(__name__)

TRAUMA_AMOUNT = 0.5
PLAYER_SPEED = 150.0
SIMPLEX_FREQUENCY = 15.0

_UP = ("KeyW", "ArrowUp")
_LEFT = ("KeyA", "ArrowLeft")
_DOWN = ("KeyS", "ArrowDown")
_RIGHT = ("KeyD", "ArrowRight")


def random_number(rng: Optional[random.Random] = None) -> float:
    """A uniform value in [-1.0, 1.0)."""
    value = (rng or random).random()
    return value * 2.0 - 1.0


class UniformRandom(RandomSource):
    """White-noise source that ignores time."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng

    def rand(self, time: float) -> float:
        return random_number(self.rng)


class SimplexSource(RandomSource):
    """Smooth source sampling simplex noise along time."""

    def __init__(self, seed: int = 0) -> None:
        self.simplex = OpenSimplex(seed)

    def rand(self, time: float) -> float:
        return self.simplex.get(time * SIMPLEX_FREQUENCY, 0.0)


def add_trauma(shakes: Iterable[Shake2d], amount: float = TRAUMA_AMOUNT) -> None:
    """Raise the trauma of every shake by ``amount``, capped at 1.0."""
    for shake in shakes:
        past = shake.trauma
        current = min(shake.trauma + amount, 1.0)
        _log.info("Past trauma: %s, Current trauma: %s", past, current)
        shake.trauma = current


def movement_direction(pressed: AbstractSet[str]) -> Vec2:
    """Direction from the pressed key codes (WASD or arrows), not normalised."""
    x = 0.0
    y = 0.0
    if any(key in pressed for key in _UP):
        y += 1.0
    if any(key in pressed for key in _LEFT):
        x -= 1.0
    if any(key in pressed for key in _DOWN):
        y -= 1.0
    if any(key in pressed for key in _RIGHT):
        x += 1.0
    return Vec2(x, y)


def move_player(
    transform: Transform,
    pressed: AbstractSet[str],
    delta_secs: float,
    speed: float = PLAYER_SPEED,
) -> None:
    """Move ``transform`` in the XY plane according to the pressed keys."""
    velocity = movement_direction(pressed)
    t = transform.translation
    transform.translation = Vec3(
        t.x + velocity.x * delta_secs * speed,
        t.y + velocity.y * delta_secs * speed,
        t.z,
    )


def make_random_shake_2d(rng: Optional[random.Random] = None) -> Shake2d:
    """The white-noise 2D shake used by the random demo."""
    return Shake2d(
        max_offset=Vec2(90.0, 45.0),
        max_roll=0.2,
        trauma=0.0,
        trauma_power=2.0,
        decay=0.8,
        random_sources=tuple(UniformRandom(rng) for _ in range(3)),
    )


def make_simplex_shake_2d() -> Shake2d:
    """The smooth 2D shake used by the simplex demo."""
    return Shake2d(
        max_offset=Vec2(90.0, 45.0),
        max_roll=0.1,
        trauma=0.0,
        trauma_power=2.0,
        decay=0.7,
        random_sources=tuple(SimplexSource(seed) for seed in range(3)),
    )