import numpy as np
import pytest

from wonderengine.bbox import AABBox, OBBox, transform_aabb


def _box():
    return AABBox(min=(-1.0, -2.0, -3.0), max=(1.0, 2.0, 3.0))


def test_center_of_symmetric_box_is_origin():
    assert np.allclose(_box().center(), np.zeros(3))


def test_sizes_span_min_to_max():
    box = AABBox(min=(1.0, 1.0, 1.0), max=(4.0, 6.0, 9.0))
    assert np.allclose(box.min + box.sizes(), box.max)
    assert np.allclose(box.sizes(), (3.0, 5.0, 8.0))


def test_verts_follow_corner_letters():
    box = _box()
    verts = box.verts()
    assert verts.shape == (8, 3)
    assert np.allclose(verts[0], (box.min[0], box.min[1], box.max[2]))
    assert np.allclose(verts[6], (box.max[0], box.max[1], box.min[2]))
    assert len({tuple(p) for p in verts}) == 8


def test_verts_lie_on_bounds():
    box = _box()
    for corner in box.verts():
        for k in range(3):
            assert corner[k] in (box.min[k], box.max[k])


def test_default_box_grows_to_first_point():
    box = AABBox()
    point = np.array([1.0, 2.0, 3.0])
    assert np.array_equal(np.minimum(box.min, point), point)
    assert np.array_equal(np.maximum(box.max, point), point)


def test_identity_transform_keeps_box():
    box = _box()
    result = transform_aabb(np.eye(4), box).aabb()
    assert np.allclose(result.min, box.min)
    assert np.allclose(result.max, box.max)


def test_translation_shifts_box():
    box = _box()
    matrix = np.eye(4)
    matrix[:3, 3] = (5.0, -1.0, 2.0)
    result = transform_aabb(matrix, box).aabb()
    assert np.allclose(result.min, box.min + matrix[:3, 3])
    assert np.allclose(result.max, box.max + matrix[:3, 3])


def test_quarter_turn_about_z_swaps_extents():
    box = _box()
    matrix = np.eye(4)
    matrix[:2, :2] = [[0.0, -1.0], [1.0, 0.0]]
    result = transform_aabb(matrix, box).aabb()
    sizes = box.sizes()
    assert np.allclose(result.sizes(), (sizes[1], sizes[0], sizes[2]))


def test_obbox_aabb_contains_every_corner():
    rng = np.random.default_rng(7)
    corners = rng.normal(size=(8, 3))
    box = OBBox(corners).aabb()
    assert np.allclose(box.min, corners.min(axis=0))
    assert np.allclose(box.max, corners.max(axis=0))


def test_bad_vector_shape_rejected():
    with pytest.raises(ValueError):
        AABBox(min=(1.0, 2.0), max=(3.0, 4.0, 5.0))


def test_bad_matrix_shape_rejected():
    with pytest.raises(ValueError):
        transform_aabb(np.eye(3), _box())