"""Fly-camera controls for the 3D shake demo: cursor grab, movement and mouse look."""

from __future__ import annotations

import enum
import logging
import math
import random
from dataclasses import dataclass
from typing import AbstractSet, Iterable, Optional

from .demo2d import UniformRandom
from .shake import Shake3d
from .transform import Quat, Transform, Vec2, Vec3

_log = logging.getLogger(__name__)

PLAYER_SPEED = 5.0
GRAB_DELAY_FRAMES = 5
PITCH_LIMIT_DEGREES = 180.0


class CursorGrabMode(enum.Enum):
    """How the cursor is held by the window."""

    NONE = "none"
    CONFINED = "confined"
    LOCKED = "locked"


@dataclass
class Window:
    """The primary window's cursor state and size."""

    grab_mode: CursorGrabMode = CursorGrabMode.NONE
    visible: bool = True
    width: float = 1280.0
    height: float = 720.0

    @property
    def grabbed(self) -> bool:
        """Whether the cursor is confined or locked."""
        return self.grab_mode in (CursorGrabMode.CONFINED, CursorGrabMode.LOCKED)


@dataclass
class InputState:
    """Accumulated pitch and yaw from mouse motion, in radians."""

    pitch: float = 0.0
    yaw: float = 0.0


@dataclass
class MouseSensitivity:
    """Scale applied to mouse motion."""

    sensitivity: float = 0.00012


def toggle_grab_cursor(window: Window) -> None:
    """Grab the cursor if free, release it otherwise, and flip its visibility."""
    if window.grab_mode is CursorGrabMode.NONE:
        window.grab_mode = CursorGrabMode.CONFINED
    else:
        window.grab_mode = CursorGrabMode.NONE
    window.visible = not window.visible


@dataclass
class InitialGrab:
    """Grabs the cursor once, after a few frames have passed."""

    frame_count: int = 0
    grabbed_once: bool = False

    def step(self, window: Optional[Window]) -> bool:
        """Advance one frame; return True on the frame the cursor is grabbed."""
        if self.grabbed_once:
            return False
        self.frame_count += 1
        if self.frame_count < GRAB_DELAY_FRAMES:
            return False
        if window is None:
            _log.warning("Primary window not found for initial_grab_cursor!")
            return False
        toggle_grab_cursor(window)
        self.grabbed_once = True
        return True


def cursor_grab(window: Optional[Window], just_pressed: AbstractSet[str]) -> None:
    """Toggle the cursor grab when Escape was just pressed."""
    if window is None:
        _log.warning("Primary window not found for `cursor_grab`!")
        return
    if "Escape" in just_pressed:
        toggle_grab_cursor(window)


def player_move(
    transform: Transform,
    speed: float,
    pressed: AbstractSet[str],
    window: Optional[Window],
    delta_secs: float,
) -> None:
    """Move ``transform`` relative to its facing while the cursor is grabbed."""
    if window is None:
        _log.warning("Primary window not found for `player_move`!")
        return
    velocity = Vec3.ZERO
    if window.grabbed:
        forward = transform.forward()
        right = transform.right()
        moves = {
            "KeyW": forward,
            "KeyS": -forward,
            "KeyA": -right,
            "KeyD": right,
            "Space": Vec3.Y,
            "ShiftLeft": -Vec3.Y,
        }
        for key in pressed:
            step = moves.get(key)
            if step is not None:
                velocity = velocity + step
    velocity = velocity.normalize_or_zero()
    transform.translation = transform.translation + velocity * (delta_secs * speed)


def player_look(
    transform: Transform,
    state: InputState,
    settings: MouseSensitivity,
    window: Optional[Window],
    motions: Iterable[Vec2],
) -> None:
    """Turn ``transform`` by each mouse motion delta while the cursor is grabbed."""
    if window is None:
        _log.warning("Primary window not found for `player_look`!")
        return
    limit = math.radians(PITCH_LIMIT_DEGREES)
    for delta in motions:
        if window.grabbed:
            window_scale = min(window.height, window.width)
            state.pitch -= math.radians(settings.sensitivity * delta.y * window_scale)
            state.yaw -= math.radians(settings.sensitivity * delta.x * window_scale)
        state.pitch = max(-limit, min(limit, state.pitch))
        transform.rotation = Quat.from_axis_angle(Vec3.Y, state.yaw) * Quat.from_axis_angle(
            Vec3.X, state.pitch
        )


def make_shake_3d(rng: Optional[random.Random] = None) -> Shake3d:
    """The rotation-only 3D shake used by the 3D demos."""
    return Shake3d(
        max_offset=Vec3(0.0, 0.0, 0.0),
        max_yaw_pitch_roll=Vec3(0.1, 0.1, 0.1),
        trauma=0.0,
        trauma_power=2.0,
        decay=0.8,
        random_sources=tuple(UniformRandom(rng) for _ in range(6)),
    )