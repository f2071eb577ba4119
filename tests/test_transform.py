import math

import pytest

from camshake.transform import Quat, Transform, Vec2, Vec3


def _v(v):
    return (v.x, v.y, v.z)


def _q(q):
    return (q.x, q.y, q.z, q.w)


def test_vec3_add_sub_round_trip():
    a = Vec3(1.5, -2.0, 3.25)
    b = Vec3(0.5, 4.0, -1.0)
    assert (a + b) - b == a


def test_vec3_scalar_mul_matches_addition():
    v = Vec3(1.0, -3.0, 2.5)
    assert v * 2 == v + v
    assert 2 * v == v + v


def test_vec3_componentwise_mul_by_ones_is_identity():
    v = Vec3(7.0, -1.0, 0.25)
    assert v * Vec3(1.0, 1.0, 1.0) == v


def test_vec3_negation_cancels():
    v = Vec3(1.0, 2.0, 3.0)
    assert v + (-v) == Vec3.ZERO


def test_vec2_operations_round_trip():
    a = Vec2(3.0, -4.0)
    b = Vec2(1.0, 2.0)
    assert (a + b) - b == a
    assert a * Vec2(1.0, 1.0) == a
    assert a * 2 == a + a
    assert abs(a) == 5.0


def test_normalize_or_zero_of_zero_is_zero():
    assert Vec3.ZERO.normalize_or_zero() == Vec3.ZERO


def test_normalize_or_zero_of_infinite_is_zero():
    assert Vec3(math.inf, 0.0, 0.0).normalize_or_zero() == Vec3.ZERO


@pytest.mark.parametrize("v", [Vec3(3.0, 0.0, 4.0), Vec3(-1.0, 2.0, -2.0), Vec3(0.0, 0.0, 0.1)])
def test_normalize_or_zero_unit_and_parallel(v):
    n = v.normalize_or_zero()
    assert math.isclose(abs(n), 1.0)
    assert _v(n * abs(v)) == pytest.approx(_v(v), abs=1e-9)


def test_identity_quat_leaves_vector():
    v = Vec3(1.0, 2.0, 3.0)
    assert Quat().mul_vec3(v) == v


@pytest.mark.parametrize("angle", [0.3, 1.0, -2.2, math.pi])
def test_rotation_preserves_length_and_inverts(angle):
    axis = Vec3(1.0, 2.0, -1.0).normalize_or_zero()
    v = Vec3(0.7, -1.3, 2.0)
    q = Quat.from_axis_angle(axis, angle)
    back = Quat.from_axis_angle(axis, -angle)
    rotated = q.mul_vec3(v)
    assert math.isclose(abs(rotated), abs(v))
    assert _v(back.mul_vec3(rotated)) == pytest.approx(_v(v), abs=1e-9)


def test_rotation_about_axis_keeps_axis_fixed():
    q = Quat.from_axis_angle(Vec3.Y, 1.2)
    assert _v(q.mul_vec3(Vec3.Y)) == pytest.approx((0.0, 1.0, 0.0), abs=1e-9)


def test_quaternion_composition_adds_angles():
    a = Quat.from_axis_angle(Vec3.Z, 0.4)
    b = Quat.from_axis_angle(Vec3.Z, 0.9)
    assert _q(a * b) == pytest.approx(_q(Quat.from_axis_angle(Vec3.Z, 1.3)), abs=1e-9)


def test_mul_operator_with_vec3_matches_mul_vec3():
    q = Quat.from_euler_yxz(0.1, 0.2, 0.3)
    v = Vec3(1.0, -1.0, 0.5)
    assert q * v == q.mul_vec3(v)


def test_euler_single_axes_match_axis_angle():
    assert _q(Quat.from_euler_yxz(0.5, 0.0, 0.0)) == pytest.approx(
        _q(Quat.from_axis_angle(Vec3.Y, 0.5)), abs=1e-9
    )
    assert _q(Quat.from_euler_yxz(0.0, 0.5, 0.0)) == pytest.approx(
        _q(Quat.from_axis_angle(Vec3.X, 0.5)), abs=1e-9
    )
    assert _q(Quat.from_euler_yxz(0.0, 0.0, 0.5)) == pytest.approx(
        _q(Quat.from_axis_angle(Vec3.Z, 0.5)), abs=1e-9
    )


def test_euler_yxz_order():
    yaw, pitch, roll = 0.3, -0.7, 1.1
    expected = (
        Quat.from_axis_angle(Vec3.Y, yaw)
        * Quat.from_axis_angle(Vec3.X, pitch)
        * Quat.from_axis_angle(Vec3.Z, roll)
    )
    assert _q(Quat.from_euler_yxz(yaw, pitch, roll)) == pytest.approx(_q(expected), abs=1e-9)


def test_euler_zero_is_identity():
    assert _q(Quat.from_euler_yxz(0.0, 0.0, 0.0)) == pytest.approx((0.0, 0.0, 0.0, 1.0), abs=1e-9)


def test_default_transform_directions():
    t = Transform()
    assert t.forward() == Vec3.NEG_Z
    assert t.right() == Vec3.X


def test_transform_directions_follow_rotation():
    q = Quat.from_axis_angle(Vec3.Y, 0.8)
    t = Transform(rotation=q)
    assert _v(t.forward()) == pytest.approx(_v(q.mul_vec3(Vec3.NEG_Z)), abs=1e-9)
    assert _v(t.right()) == pytest.approx(_v(q.mul_vec3(Vec3.X)), abs=1e-9)
    assert math.isclose(abs(t.forward()), 1.0)


def test_transform_reset_keeps_scale():
    scale = Vec3(0.3, 0.3, 1.0)
    t = Transform(Vec3(1.0, 2.0, 3.0), Quat.from_axis_angle(Vec3.X, 1.0), scale)
    t.reset()
    assert t.translation == Vec3.ZERO
    assert t.rotation == Quat.IDENTITY
    assert t.scale == scale