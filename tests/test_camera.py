import math

import numpy as np
import pytest

from voxelworld.camera import (
    Camera,
    Movement,
    look_at,
    normalize,
    perspective,
)


def _turned_camera():
    camera = Camera()
    camera.mouse_move(100.0, 100.0)
    return camera


def test_defaults():
    camera = Camera()
    np.testing.assert_allclose(camera.position, [0.0, 64.0, 1.0])
    np.testing.assert_allclose(camera.front, [0.0, -1.0, 0.0])
    assert camera.fov == 60.0
    assert camera.near_z == 0.1
    assert camera.far_z == 10000.0


def test_update_tracks_frame_delta():
    camera = Camera()
    assert camera.update(2.0) == 2.0
    assert camera.update(2.5) == pytest.approx(2.5 - 2.0)
    assert camera.last_frame == 2.5


def test_forward_then_backward_returns_to_start():
    camera = _turned_camera()
    camera.update(1.0)
    start = camera.position.copy()
    camera.keyboard_input({Movement.FORWARD})
    assert np.linalg.norm(camera.position - start) == pytest.approx(15.0)
    camera.keyboard_input({Movement.BACKWARD})
    np.testing.assert_allclose(camera.position, start, atol=1e-9)


def test_strafe_is_perpendicular_to_front():
    camera = _turned_camera()
    camera.update(1.0)
    start = camera.position.copy()
    camera.keyboard_input([Movement.RIGHT])
    moved = camera.position - start
    assert float(moved @ camera.front) == pytest.approx(0.0, abs=1e-9)
    assert np.linalg.norm(moved) == pytest.approx(15.0)
    camera.keyboard_input([Movement.LEFT])
    np.testing.assert_allclose(camera.position, start, atol=1e-9)


def test_no_keys_no_motion():
    camera = _turned_camera()
    camera.update(1.0)
    start = camera.position.copy()
    camera.keyboard_input([])
    np.testing.assert_allclose(camera.position, start)


def test_first_mouse_move_keeps_orientation():
    camera = Camera()
    camera.mouse_move(500.0, 300.0)
    assert camera.yaw == -90.0
    assert camera.pitch == 0.0
    np.testing.assert_allclose(camera.front, [0.0, 0.0, -1.0], atol=1e-12)


def test_pitch_is_clamped():
    camera = _turned_camera()
    camera.mouse_move(100.0, -100000.0)
    assert camera.pitch == 89.0
    camera.mouse_move(100.0, 100000.0)
    assert camera.pitch == -89.0


def test_front_stays_unit_length():
    camera = _turned_camera()
    for x, y in [(130.0, 80.0), (10.0, 400.0), (-250.0, 37.0)]:
        camera.mouse_move(x, y)
        assert np.linalg.norm(camera.front) == pytest.approx(1.0)


def test_perspective_maps_near_and_far_to_unit_depth():
    p = perspective(math.radians(60.0), 1.5, 0.1, 100.0)
    near_clip = p @ np.array([0.0, 0.0, -0.1, 1.0])
    far_clip = p @ np.array([0.0, 0.0, -100.0, 1.0])
    assert near_clip[2] / near_clip[3] == pytest.approx(-1.0)
    assert far_clip[2] / far_clip[3] == pytest.approx(1.0)


def test_perspective_edge_of_view_maps_to_one():
    aspect = 2.0
    depth = 5.0
    p = perspective(math.radians(60.0), aspect, 0.1, 100.0)
    x_edge = math.tan(math.radians(30.0)) * aspect * depth
    clip = p @ np.array([x_edge, 0.0, -depth, 1.0])
    assert clip[0] / clip[3] == pytest.approx(1.0)


def test_perspective_rejects_zero_aspect():
    with pytest.raises(ValueError):
        perspective(math.radians(60.0), 0.0, 0.1, 100.0)


def test_perspective_rejects_equal_planes():
    with pytest.raises(ValueError):
        perspective(math.radians(60.0), 1.0, 5.0, 5.0)


def test_look_at_moves_eye_to_origin_and_center_down_negative_z():
    eye = np.array([1.0, 2.0, 3.0])
    center = np.array([4.0, -1.0, 7.0])
    view = look_at(eye, center, [0.0, 1.0, 0.0])
    np.testing.assert_allclose(view @ np.append(eye, 1.0), [0, 0, 0, 1], atol=1e-12)
    mapped = view @ np.append(center, 1.0)
    np.testing.assert_allclose(mapped[:2], [0.0, 0.0], atol=1e-12)
    assert mapped[2] == pytest.approx(-np.linalg.norm(center - eye))


def test_normalize_unit_length_and_zero_error():
    assert np.linalg.norm(normalize([3.0, -7.0, 2.0])) == pytest.approx(1.0)
    with pytest.raises(ValueError):
        normalize([0.0, 0.0, 0.0])


def test_view_matrix_maps_position_to_origin():
    camera = _turned_camera()
    result = camera.view_matrix() @ np.append(camera.position, 1.0)
    np.testing.assert_allclose(result, [0.0, 0.0, 0.0, 1.0], atol=1e-9)


def test_view_matrix_degenerate_when_looking_straight_down():
    with pytest.raises(ValueError):
        Camera().view_matrix()


def test_perspective_matrix_uses_camera_planes():
    camera = Camera()
    p = camera.perspective_matrix(1.0)
    near_clip = p @ np.array([0.0, 0.0, -camera.near_z, 1.0])
    assert near_clip[2] / near_clip[3] == pytest.approx(-1.0)