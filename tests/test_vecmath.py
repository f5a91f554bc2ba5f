import math

import numpy as np
import pytest

from bwxsdk import vecmath


def test_normalize_gives_unit_length_in_same_direction():
    v = vecmath.normalize((3.0, -4.0, 12.0))
    assert math.isclose(np.linalg.norm(v), 1.0)
    assert np.allclose(np.cross(v, (3.0, -4.0, 12.0)), 0.0)


def test_normalize_zero_vector_raises():
    with pytest.raises(ValueError):
        vecmath.normalize((0.0, 0.0, 0.0))


def test_perspective_maps_near_and_far_to_clip_range():
    near, far = 0.5, 50.0
    m = vecmath.perspective(math.radians(60.0), 1.5, near, far)
    p_near = m @ np.array([0.0, 0.0, -near, 1.0])
    p_far = m @ np.array([0.0, 0.0, -far, 1.0])
    assert math.isclose(p_near[2] / p_near[3], -1.0)
    assert math.isclose(p_far[2] / p_far[3], 1.0)
    assert m[3, 2] == -1.0
    assert m[3, 3] == 0.0
    assert math.isclose(m[0, 0] * 1.5, m[1, 1])


@pytest.mark.parametrize("args", [(1.0, 0.0, 0.1, 10.0), (1.0, 1.0, 2.0, 2.0)])
def test_perspective_rejects_degenerate_input(args):
    with pytest.raises(ValueError):
        vecmath.perspective(*args)


def test_ortho_maps_box_corners_to_unit_cube():
    m = vecmath.ortho(-2.0, 4.0, -1.0, 3.0, 0.5, 20.0)
    low = m @ np.array([-2.0, -1.0, -0.5, 1.0])
    high = m @ np.array([4.0, 3.0, -20.0, 1.0])
    assert np.allclose(low[:3], -1.0)
    assert np.allclose(high[:3], 1.0)


def test_ortho_rejects_empty_box():
    with pytest.raises(ValueError):
        vecmath.ortho(1.0, 1.0, 0.0, 1.0, 0.1, 10.0)


def test_look_at_places_eye_at_origin_and_target_on_negative_z():
    eye = np.array([1.0, 2.0, 3.0])
    target = np.array([4.0, -1.0, 0.0])
    view = vecmath.look_at(eye, target, (0.0, 1.0, 0.0))
    assert np.allclose(view @ np.append(eye, 1.0), [0.0, 0.0, 0.0, 1.0])
    t = view @ np.append(target, 1.0)
    assert np.allclose(t[:2], 0.0)
    assert t[2] < 0
    rot = view[:3, :3]
    assert np.allclose(rot @ rot.T, np.identity(3))


def test_angle_axis_rotates_x_onto_y():
    q = vecmath.angle_axis(math.pi / 2, (0.0, 0.0, 1.0))
    assert math.isclose(np.linalg.norm(q), 1.0)
    assert np.allclose(vecmath.quat_rotate(q, (1.0, 0.0, 0.0)), [0.0, 1.0, 0.0])


def test_quat_multiply_composes_rotations():
    a = vecmath.angle_axis(0.7, vecmath.normalize((1.0, 2.0, 3.0)))
    b = vecmath.angle_axis(-1.2, vecmath.normalize((0.0, 1.0, -1.0)))
    v = np.array([0.3, -2.0, 5.0])
    combined = vecmath.quat_rotate(vecmath.quat_multiply(a, b), v)
    stepwise = vecmath.quat_rotate(a, vecmath.quat_rotate(b, v))
    assert np.allclose(combined, stepwise)


def test_quat_multiply_by_identity_is_unchanged():
    q = vecmath.angle_axis(0.4, vecmath.normalize((1.0, 1.0, 0.0)))
    assert np.allclose(vecmath.quat_multiply((1.0, 0.0, 0.0, 0.0), q), q)


def test_quat_rotate_preserves_length():
    q = vecmath.angle_axis(2.1, vecmath.normalize((-1.0, 0.5, 2.0)))
    v = np.array([1.0, 2.0, 3.0])
    assert math.isclose(np.linalg.norm(vecmath.quat_rotate(q, v)), np.linalg.norm(v))


@pytest.mark.parametrize("angles", [(0.0, 0.0, 0.0), (0.3, -0.5, 1.1), (-1.0, 0.2, -2.5)])
def test_euler_round_trip(angles):
    q = vecmath.quat_from_euler(angles)
    assert math.isclose(np.linalg.norm(q), 1.0)
    assert np.allclose(vecmath.quat_to_euler(q), angles)


def test_euler_yaw_matches_rotation_about_y():
    q = vecmath.quat_from_euler((0.0, 0.8, 0.0))
    expected = vecmath.angle_axis(0.8, (0.0, 1.0, 0.0))
    assert math.isclose(abs(float(np.dot(q, expected))), 1.0, rel_tol=1e-9)
    v = np.array([1.0, 0.5, -2.0])
    assert np.allclose(vecmath.quat_rotate(q, v), vecmath.quat_rotate(expected, v))


@pytest.mark.parametrize(
    "angle,axis",
    [(0.5, (1.0, 0.0, 0.0)), (3.0, (0.0, 1.0, 0.0)), (2.5, (0.0, 0.0, 1.0)), (1.9, (1.0, -2.0, 0.5))],
)
def test_quat_from_matrix_recovers_rotation(angle, axis):
    q = vecmath.angle_axis(angle, vecmath.normalize(axis))
    columns = [vecmath.quat_rotate(q, e) for e in np.identity(3)]
    m3 = np.column_stack(columns)
    m4 = np.identity(4)
    m4[:3, :3] = m3
    from3 = vecmath.quat_from_matrix(m3)
    from4 = vecmath.quat_from_matrix(m4)
    assert math.isclose(abs(float(np.dot(from3, q))), 1.0, rel_tol=1e-9)
    assert math.isclose(abs(float(np.dot(from4, q))), 1.0, rel_tol=1e-9)
    v = np.array([0.2, -1.0, 3.0])
    assert np.allclose(vecmath.quat_rotate(from3, v), vecmath.quat_rotate(q, v))
    assert np.allclose(vecmath.quat_rotate(from4, v), vecmath.quat_rotate(q, v))


def test_quat_from_matrix_rejects_bad_shape():
    with pytest.raises(ValueError):
        vecmath.quat_from_matrix(np.identity(2))