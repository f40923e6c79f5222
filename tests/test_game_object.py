import numpy as np
import pytest

from wonderengine.bbox import AABBox
from wonderengine.components import ComponentType
from wonderengine.game_object import GameObject, aabb_outline
from wonderengine.mesh import Mesh, MeshFormat, V3T2


def _mesh():
    return Mesh(MeshFormat.V3T2, [V3T2((0, 0, 0), (0, 0))], 0)


def test_new_object_has_three_components():
    obj = GameObject()
    assert obj.name == "defaultName"
    assert [c.type for c in obj.components] == [
        ComponentType.TRANSFORM,
        ComponentType.MESH,
        ComponentType.TEXTURE,
    ]
    assert all(c.owner is obj for c in obj.components)


@pytest.mark.parametrize(
    "component_type, index",
    [
        (ComponentType.TRANSFORM, 0),
        (ComponentType.MESH, 1),
        (ComponentType.TEXTURE, 2),
    ],
)
def test_get_component_returns_matching_component(component_type, index):
    obj = GameObject()
    found = obj.get_component(component_type)
    assert found is obj.components[index]
    assert found.type == component_type


def test_get_component_missing_raises():
    with pytest.raises(KeyError):
        GameObject().get_component(ComponentType.UNKNOWN)


def test_create_unknown_component_adds_nothing():
    obj = GameObject()
    assert obj.create_component(ComponentType.UNKNOWN) is None
    assert len(obj.components) == 3


def test_add_child_links_and_disables_parent_components():
    parent, child = GameObject(), GameObject()
    parent.add_child(child)
    assert child.parent is parent
    assert parent.children == [child]
    assert not any(c.active for c in parent.components)
    assert all(c.active for c in child.components)


def test_add_child_twice_keeps_one_entry():
    parent, child = GameObject(), GameObject()
    parent.add_child(child)
    parent.add_child(child)
    assert parent.children == [child]


def test_reparenting_moves_child():
    first, second, child = GameObject(), GameObject(), GameObject()
    first.add_child(child)
    second.add_child(child)
    assert first.children == []
    assert second.children == [child]
    assert child.parent is second


def test_remove_child():
    parent, child = GameObject(), GameObject()
    parent.add_child(child)
    parent.remove_child(child)
    assert parent.children == []
    assert child.parent is None


def test_drawable_components_are_children_mesh_components():
    parent, a, b = GameObject(), GameObject(), GameObject()
    parent.add_child(a)
    parent.add_child(b)
    b.get_component(ComponentType.MESH).disable()
    assert parent.drawable_components() == [a.get_component(ComponentType.MESH)]


def test_aabb_of_empty_object_is_zero():
    box = GameObject().aabb()
    assert np.array_equal(box.min, np.zeros(3))
    assert np.array_equal(box.max, np.zeros(3))


def test_aabb_joins_own_and_children_boxes():
    parent, child = GameObject(), GameObject()
    own = parent.get_component(ComponentType.MESH)
    own.set_mesh(_mesh())
    own.aabb = AABBox(min=(0, 0, 0), max=(2, 0, 0))
    child.get_component(ComponentType.MESH).aabb = AABBox(min=(-1, -2, -3), max=(1, 2, 3))
    parent.add_child(child)
    box = parent.aabb()
    assert np.array_equal(box.min, [-1, -2, -3])
    assert np.array_equal(box.max, [2, 2, 3])
    assert np.array_equal(own.aabb.min, [0, 0, 0])


def test_aabb_outline_follows_corners():
    box = AABBox(min=(0, 0, 0), max=(1, 2, 3))
    strip, segments = aabb_outline(box)
    corners = box.verts()
    assert strip.shape == (10, 3)
    assert segments.shape == (3, 2, 3)
    assert np.array_equal(strip[0], strip[4])
    assert np.array_equal(strip[5], strip[9])
    assert np.array_equal(strip[:4], corners[:4])
    assert np.array_equal(strip[5:9], corners[4:])
    assert np.array_equal(segments[0], corners[[7, 3]])