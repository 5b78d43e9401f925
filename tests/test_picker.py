import numpy as np

from voxelworld.camera import Camera
from voxelworld.picker import MousePicker


def _camera():
    camera = Camera()
    camera.mouse_move(0.0, 0.0)
    camera.mouse_move(120.0, 45.0)
    return camera


def test_initial_ray_is_zero():
    picker = MousePicker(Camera())
    np.testing.assert_allclose(picker.current_ray, np.zeros(3))


def test_update_sets_ray_one_unit_ahead():
    camera = _camera()
    picker = MousePicker(camera)
    picker.update()
    np.testing.assert_allclose(picker.current_ray, camera.position + camera.front)


def test_scaled_ray_distance():
    camera = _camera()
    picker = MousePicker(camera)
    ray = picker.calc_mouse_ray(2.0)
    np.testing.assert_allclose(ray - camera.position, 2.0 * camera.front)
    assert np.linalg.norm(ray - camera.position) == 2.0 * np.linalg.norm(camera.front)


def test_ray_follows_camera_movement():
    camera = _camera()
    picker = MousePicker(camera)
    picker.update()
    before = picker.current_ray.copy()
    camera.position = camera.position + np.array([5.0, 0.0, 0.0])
    picker.update()
    np.testing.assert_allclose(picker.current_ray - before, [5.0, 0.0, 0.0])


def test_zero_scaling_gives_position():
    camera = _camera()
    np.testing.assert_allclose(MousePicker(camera).calc_mouse_ray(0.0), camera.position)