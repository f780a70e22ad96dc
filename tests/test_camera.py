import numpy as np
import pytest

from renderkit.camera import (
    Camera,
    FirstPersonPositioner,
    MoveToPositioner,
    angle_delta,
    clip_angle,
    clip_angles,
)
from renderkit.glmath import look_at, transform_point


def _is_rigid(m):
    r = m[:3, :3]
    return np.allclose(r @ r.T, np.eye(3)) and np.isclose(np.linalg.det(r), 1.0)


def test_first_person_view_matches_look_at():
    pos, target, up = (1.0, 2.0, 3.0), (0.0, 0.0, 0.0), (0.0, 1.0, 0.0)
    p = FirstPersonPositioner(pos, target, up)
    assert np.allclose(p.view_matrix(), look_at(pos, target, up), atol=1e-9)


def test_first_person_view_sends_position_to_origin():
    p = FirstPersonPositioner((4.0, -1.0, 2.0), (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))
    assert np.allclose(transform_point(p.view_matrix(), p.position()), 0.0)


def test_incomplete_constructor_arguments_raise():
    with pytest.raises(ValueError):
        FirstPersonPositioner((0.0, 0.0, 0.0))


def test_forward_movement_is_clamped_to_max_speed():
    p = FirstPersonPositioner((0.0, 0.0, 0.0), (0.0, 0.0, -1.0), (0.0, 1.0, 0.0))
    p.movement.forward = True
    p.update(0.1, (0.0, 0.0), False)
    assert np.allclose(p.position(), (0.0, 0.0, -p.max_speed * 0.1))
    assert np.isclose(np.linalg.norm(p.move_speed), p.max_speed)


def test_fast_speed_raises_limit():
    p = FirstPersonPositioner((0.0, 0.0, 0.0), (0.0, 0.0, -1.0), (0.0, 1.0, 0.0))
    p.movement.right = True
    p.movement.fast_speed = True
    p.update(1.0, (0.0, 0.0), False)
    assert np.isclose(np.linalg.norm(p.move_speed), p.max_speed * p.fast_coef)
    assert p.position()[0] > 0.0


def test_damping_stops_motion_without_input():
    p = FirstPersonPositioner((0.0, 0.0, 0.0), (0.0, 0.0, -1.0), (0.0, 1.0, 0.0))
    p.move_speed = np.array([1.0, 0.0, 0.0])
    p.update(1.0, (0.0, 0.0), False)
    assert np.allclose(p.move_speed, 0.0)
    assert np.allclose(p.position(), 0.0)


def test_mouse_without_motion_keeps_view():
    p = FirstPersonPositioner((1.0, 1.0, 1.0), (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))
    before = p.view_matrix()
    p.reset_mouse_position((0.5, 0.5))
    p.update(0.0, (0.5, 0.5), True)
    assert np.allclose(p.view_matrix(), before, atol=1e-9)


def test_mouse_drag_rotates_but_keeps_position():
    p = FirstPersonPositioner((1.0, 1.0, 1.0), (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))
    before = p.view_matrix()
    p.reset_mouse_position((0.5, 0.5))
    p.update(0.0, (0.55, 0.5), True)
    after = p.view_matrix()
    assert not np.allclose(after, before)
    assert _is_rigid(after)
    assert np.allclose(p.position(), (1.0, 1.0, 1.0))


def test_look_at_resets_position():
    p = FirstPersonPositioner()
    p.look_at((0.0, 5.0, 0.0), (1.0, 5.0, 0.0), (0.0, 1.0, 0.0))
    assert np.allclose(p.position(), (0.0, 5.0, 0.0))
    assert np.allclose(p.view_matrix(), look_at((0.0, 5.0, 0.0), (1.0, 5.0, 0.0), (0.0, 1.0, 0.0)), atol=1e-9)


def test_camera_delegates_to_positioner():
    p = FirstPersonPositioner((2.0, 0.0, 0.0), (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))
    cam = Camera(p)
    assert np.allclose(cam.view_matrix(), p.view_matrix())
    assert np.allclose(cam.position(), p.position())


def test_clip_angle():
    assert clip_angle(190.0) == -170.0
    assert clip_angle(-190.0) == 170.0
    assert clip_angle(45.0) == 45.0


def test_clip_angles_keeps_sign():
    assert np.allclose(clip_angles((370.0, -370.0, 10.0)), (10.0, -10.0, 10.0))


def test_angle_delta_takes_short_way():
    d = angle_delta((170.0, 0.0, 0.0), (-170.0, 0.0, 0.0))
    assert np.allclose(d, (-20.0, 0.0, 0.0))


def test_move_to_reaches_desired_position():
    p = MoveToPositioner((0.0, 0.0, 0.0), (0.0, 0.0, 0.0))
    p.position_desired = np.array([1.0, 2.0, 3.0])
    p.update(1.0 / p.damping_linear)
    assert np.allclose(p.position(), (1.0, 2.0, 3.0))
    assert np.allclose(transform_point(p.view_matrix(), p.position()), 0.0)


def test_move_to_approaches_desired_angles():
    p = MoveToPositioner((0.0, 0.0, 0.0), (0.0, 0.0, 0.0))
    p.angles_desired = np.array([30.0, 60.0, 0.0])
    before = np.abs(angle_delta(p.angles_current, p.angles_desired)).sum()
    p.update(0.05)
    after = np.abs(angle_delta(p.angles_current, p.angles_desired)).sum()
    assert after < before
    assert _is_rigid(p.view_matrix())