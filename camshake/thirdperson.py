"""Third-person camera controls for the 3D shake demo."""

from __future__ import annotations

import logging
import math
from typing import Iterable, Optional

from .flycam import InputState, MouseSensitivity, Window
from .transform import Quat, Transform, Vec2, Vec3

_log = logging.getLogger(__name__)

CAMERA_DISTANCE = 15.0
MIN_PITCH_DEGREES = -75.0
MAX_PITCH_DEGREES = -5.0


def _cross(a: Vec3, b: Vec3) -> Vec3:
    return Vec3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def _quat_from_basis(right: Vec3, up: Vec3, back: Vec3) -> Quat:
    m00, m10, m20 = right.x, right.y, right.z
    m01, m11, m21 = up.x, up.y, up.z
    m02, m12, m22 = back.x, back.y, back.z
    trace = m00 + m11 + m22
    if trace > 0.0:
        s = math.sqrt(trace + 1.0) * 2.0
        return Quat((m21 - m12) / s, (m02 - m20) / s, (m10 - m01) / s, 0.25 * s)
    if m00 > m11 and m00 > m22:
        s = math.sqrt(1.0 + m00 - m11 - m22) * 2.0
        return Quat(0.25 * s, (m01 + m10) / s, (m02 + m20) / s, (m21 - m12) / s)
    if m11 > m22:
        s = math.sqrt(1.0 + m11 - m00 - m22) * 2.0
        return Quat((m01 + m10) / s, 0.25 * s, (m12 + m21) / s, (m02 - m20) / s)
    s = math.sqrt(1.0 + m22 - m00 - m11) * 2.0
    return Quat((m02 + m20) / s, (m12 + m21) / s, 0.25 * s, (m10 - m01) / s)


def _looking_at(translation: Vec3, target: Vec3, up: Vec3) -> Transform:
    back = (translation - target).normalize_or_zero()
    right = _cross(up, back).normalize_or_zero()
    true_up = _cross(back, right)
    return Transform(translation=translation, rotation=_quat_from_basis(right, true_up, back))


def camera_start() -> Transform:
    """The camera's starting transform: behind and above the player, looking at it."""
    return _looking_at(Vec3(0.0, 0.5, CAMERA_DISTANCE), Vec3.ZERO, Vec3.Y)


def face_transform(player_transform: Transform) -> Transform:
    """Transform of the small block marking the player's front."""
    return Transform(
        translation=player_transform.forward() * 0.5,
        scale=Vec3(0.3, 0.1, 0.5),
    )


def player_look(
    camera: Transform,
    player: Transform,
    state: InputState,
    settings: MouseSensitivity,
    window: Optional[Window],
    motions: Iterable[Vec2],
) -> None:
    """Yaw the player and orbit the camera around it by each mouse motion delta."""
    if window is None:
        _log.warning("Primary window not found for `player_look`!")
        return
    low = math.radians(MIN_PITCH_DEGREES)
    high = math.radians(MAX_PITCH_DEGREES)
    for delta in motions:
        if not window.grabbed:
            continue
        window_scale = min(window.height, window.width)
        state.pitch -= math.radians(settings.sensitivity * delta.y * window_scale)
        state.yaw -= math.radians(settings.sensitivity * delta.x * window_scale)
        state.pitch = max(low, min(high, state.pitch))
        player.rotation = Quat.from_axis_angle(Vec3.Y, state.yaw)
        camera.rotation = Quat.from_axis_angle(Vec3.X, state.pitch)
        camera.translation = camera.rotation.mul_vec3(Vec3.Z) * CAMERA_DISTANCE