import numpy as np

from wonderengine.camera import Camera, CameraDirection


def _camera():
    cam = Camera()
    cam.compute_axis()
    return cam


def test_defaults_match_engine_setup():
    cam = Camera()
    assert cam.fov == 60
    assert np.allclose(cam.eye, (10, 2, 10))
    assert np.allclose(cam.center, (0, 1, 0))
    assert cam.camera_speed == 0.1


def test_axes_are_orthogonal_and_scaled():
    cam = _camera()
    assert abs(np.dot(cam.x_axis, cam.y_axis)) < 1e-12
    assert abs(np.dot(cam.x_axis, cam.z_axis)) < 1e-12
    assert abs(np.dot(cam.y_axis, cam.z_axis)) < 1e-12
    assert np.isclose(np.linalg.norm(cam.x_axis), cam.camera_speed)
    assert np.isclose(np.linalg.norm(cam.y_axis), cam.camera_speed)
    assert np.isclose(np.linalg.norm(cam.z_axis), 2 * cam.camera_speed)


def test_move_up_then_down_returns():
    cam = _camera()
    eye, center = cam.eye.copy(), cam.center.copy()
    cam.camera_move(CameraDirection.UP)
    assert not np.allclose(cam.eye, eye)
    cam.camera_move(CameraDirection.DOWN)
    assert np.allclose(cam.eye, eye)
    assert np.allclose(cam.center, center)


def test_move_left_keeps_view_vector():
    cam = _camera()
    view = cam.center - cam.eye
    cam.camera_move(CameraDirection.LEFT)
    assert np.allclose(cam.center - cam.eye, view)


def test_move_ignores_depth_directions():
    cam = _camera()
    eye = cam.eye.copy()
    cam.camera_move(CameraDirection.FORWARD)
    assert np.allclose(cam.eye, eye)


def test_fps_forward_approaches_center():
    cam = _camera()
    before = np.linalg.norm(cam.center - cam.eye)
    start = cam.eye.copy()
    cam.fps_movement(CameraDirection.FORWARD)
    assert np.dot(cam.eye - start, cam.center - start) > 0
    assert np.isclose(np.linalg.norm(cam.center - cam.eye), before)


def test_fps_ignores_vertical_directions():
    cam = _camera()
    eye = cam.eye.copy()
    cam.fps_movement(CameraDirection.UP)
    assert np.allclose(cam.eye, eye)


def test_reset_center_defaults():
    cam = _camera()
    cam.prev_mouse_x, cam.prev_mouse_y = 5, 6
    cam.reset_center()
    assert np.allclose(cam.center, np.zeros(3))
    assert (cam.prev_mouse_x, cam.prev_mouse_y) == (0, 0)


def test_reset_center_fixed_pos_puts_eye_at_distance_twelve():
    cam = _camera()
    direction = cam.eye / np.linalg.norm(cam.eye)
    cam.reset_center(True, False, (0, 0, 0), False)
    assert np.isclose(np.linalg.norm(cam.eye), 12)
    assert np.allclose(cam.eye / 12, direction)


def test_reset_center_keeps_center_and_mouse_when_asked():
    cam = _camera()
    cam.prev_mouse_x, cam.prev_mouse_y = 5, 6
    cam.reset_center(False, False, (3, 3, 3), False)
    assert np.allclose(cam.center, (0, 1, 0))
    assert (cam.prev_mouse_x, cam.prev_mouse_y) == (5, 6)


def test_zoom_in_and_out_round_trip():
    cam = _camera()
    eye = cam.eye.copy()
    before = np.linalg.norm(cam.eye)
    cam.camera_zoom(2)
    assert np.linalg.norm(cam.eye) < before
    cam.camera_zoom(-2)
    assert np.allclose(cam.eye, eye)


def test_mouse_rotate_first_call_only_records():
    cam = _camera()
    eye = cam.eye.copy()
    cam.mouse_rotate_around_object(3.7, 4.2)
    assert np.allclose(cam.eye, eye)
    assert (cam.prev_mouse_x, cam.prev_mouse_y) == (3, 4)


def test_mouse_rotate_orbits_at_constant_distance():
    cam = _camera()
    distance = np.linalg.norm(cam.eye - cam.center)
    eye = cam.eye.copy()
    cam.mouse_rotate_around_object(100, 100)
    cam.mouse_rotate_around_object(120, 110)
    assert not np.allclose(cam.eye, eye)
    assert np.isclose(np.linalg.norm(cam.eye - cam.center), distance)


def test_mouse_look_keeps_eye_and_distance():
    cam = _camera()
    eye = cam.eye.copy()
    center = cam.center.copy()
    distance = np.linalg.norm(cam.center - cam.eye)
    cam.mouse_point_look_at(100, 100)
    cam.mouse_point_look_at(130, 90)
    assert np.allclose(cam.eye, eye)
    assert not np.allclose(cam.center, center)
    assert np.isclose(np.linalg.norm(cam.center - cam.eye), distance)


def test_zero_rotation_changes_nothing():
    cam = _camera()
    eye, center = cam.eye.copy(), cam.center.copy()
    cam.rotate_camera_around_object(0.0, -cam.x_axis, 0.0, cam.y_axis)
    cam.rotate_camera_fps(0.0, cam.y_axis, 0.0, -cam.x_axis)
    assert np.allclose(cam.eye, eye)
    assert np.allclose(cam.center, center)


def test_look_at_maps_eye_to_origin_and_center_to_negative_z():
    cam = _camera()
    view = cam.compute_look_at()
    assert np.allclose(view @ np.append(cam.eye, 1.0), (0, 0, 0, 1))
    distance = np.linalg.norm(cam.center - cam.eye)
    mapped = view @ np.append(cam.center, 1.0)
    assert np.allclose(mapped[:3], (0, 0, -distance))
    rotation = view[:3, :3]
    assert np.allclose(rotation @ rotation.T, np.eye(3))