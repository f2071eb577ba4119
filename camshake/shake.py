"""Trauma-based camera shake for 2D and 3D transforms."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence, Tuple, Union

from .transform import Quat, Transform, Vec2, Vec3

_log = logging.getLogger(__name__)


class RandomSource(ABC):
    """A source of randomness for shaking the camera."""

    @abstractmethod
    def rand(self, time: float) -> float:
        """Produce a value between -1.0 and 1.0 for the given time in seconds."""


class NotRandom(RandomSource):
    """Placeholder source that always returns 0.5."""

    def rand(self, time: float) -> float:
        _log.warning("You need to set a random source for the shaking to work properly!")
        return 0.5


def _check_sources(sources: Sequence[RandomSource], count: int) -> tuple:
    sources = tuple(sources)
    if len(sources) != count:
        raise ValueError(f"expected {count} random sources, got {len(sources)}")
    return sources


def _decay(trauma: float, decay: float, delta_secs: float) -> float:
    return max(trauma - decay * delta_secs, 0.0)


@dataclass
class Shake2d:
    """Shake settings for a 2D camera: XY offset and roll.

    ``random_sources`` holds three sources: X, Y and roll.
    """

    max_offset: Vec2 = field(default_factory=lambda: Vec2(100.0, 100.0))
    max_roll: float = 0.1
    trauma: float = 0.0
    trauma_power: float = 2.0
    decay: float = 0.8
    random_sources: Sequence[RandomSource] = field(
        default_factory=lambda: (NotRandom(), NotRandom(), NotRandom())
    )

    def __post_init__(self) -> None:
        self.random_sources = _check_sources(self.random_sources, 3)

    def apply(self, transform: Transform, delta_secs: float, elapsed_secs: float) -> None:
        """Decay trauma and write the resulting shake into ``transform``."""
        self.trauma = _decay(self.trauma, self.decay, delta_secs)
        amount = self.trauma ** self.trauma_power
        if amount > 0.0:
            sx, sy, sroll = self.random_sources
            offset = self.max_offset * amount * Vec2(sx.rand(elapsed_secs), sy.rand(elapsed_secs))
            roll = self.max_roll * amount * sroll.rand(elapsed_secs)
            transform.translation = Vec3(offset.x, offset.y, 0.0)
            transform.rotation = Quat.from_euler_yxz(0.0, 0.0, roll)
        else:
            transform.reset()


@dataclass
class Shake3d:
    """Shake settings for a 3D camera: XYZ offset and yaw/pitch/roll.

    ``random_sources`` holds six sources: X, Y, Z, then yaw, pitch, roll.
    """

    max_offset: Vec3 = field(default_factory=lambda: Vec3(0.0, 0.0, 0.0))
    max_yaw_pitch_roll: Vec3 = field(default_factory=lambda: Vec3(0.1, 0.1, 0.1))
    trauma: float = 0.0
    trauma_power: float = 2.0
    decay: float = 0.8
    random_sources: Sequence[RandomSource] = field(
        default_factory=lambda: tuple(NotRandom() for _ in range(6))
    )

    def __post_init__(self) -> None:
        self.random_sources = _check_sources(self.random_sources, 6)

    def apply(self, transform: Transform, delta_secs: float, elapsed_secs: float) -> None:
        """Decay trauma and write the resulting shake into ``transform``."""
        self.trauma = _decay(self.trauma, self.decay, delta_secs)
        amount = self.trauma ** self.trauma_power
        if amount > 0.0:
            values = [source.rand(elapsed_secs) for source in self.random_sources]
            translation = self.max_offset * amount * Vec3(*values[:3])
            rotation = self.max_yaw_pitch_roll * amount * Vec3(*values[3:])
            transform.translation = translation
            transform.rotation = Quat.from_euler_yxz(rotation.x, rotation.y, rotation.z)
        else:
            transform.reset()


def apply_shake_2d(
    items: Iterable[Tuple[Transform, Shake2d]], delta_secs: float, elapsed_secs: float
) -> None:
    """Apply every 2D shake to its transform."""
    for transform, shake in items:
        shake.apply(transform, delta_secs, elapsed_secs)


def apply_shake_3d(
    items: Iterable[Tuple[Transform, Shake3d]], delta_secs: float, elapsed_secs: float
) -> None:
    """Apply every 3D shake to its transform."""
    for transform, shake in items:
        shake.apply(transform, delta_secs, elapsed_secs)


class CameraShake:
    """Keeps shaken transforms and updates them once per frame."""

    def __init__(self) -> None:
        self._entries: list[tuple[Transform, Union[Shake2d, Shake3d]]] = []

    def add(self, transform: Transform, shake: Union[Shake2d, Shake3d]) -> None:
        """Register a transform to be driven by ``shake``."""
        if not isinstance(shake, (Shake2d, Shake3d)):
            raise TypeError("shake must be a Shake2d or Shake3d")
        self._entries.append((transform, shake))

    def update(self, delta_secs: float, elapsed_secs: float) -> None:
        """Run one frame: 2D shakes first, then 3D shakes."""
        apply_shake_2d(
            ((t, s) for t, s in self._entries if isinstance(s, Shake2d)),
            delta_secs,
            elapsed_secs,
        )
        apply_shake_3d(
            ((t, s) for t, s in self._entries if isinstance(s, Shake3d)),
            delta_secs,
            elapsed_secs,
        )

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[Transform, Union[Shake2d, Shake3d]]]:
        return iter(self._entries)