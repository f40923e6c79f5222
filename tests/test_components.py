from types import SimpleNamespace

import numpy as np
import pytest

from wonderengine.components import (
    Component,
    ComponentType,
    MeshComp,
    TextureComp,
    TransformComp,
)
from wonderengine.mesh import Mesh, MeshFormat, V3T2
from wonderengine.texture import Texture


def _owner_with_meshes(count):
    owner = SimpleNamespace(components=[])
    owner.components.extend(MeshComp(owner) for _ in range(count))
    return owner


def test_enable_disable_toggle_active():
    comp = Component()
    comp.disable()
    assert comp.active is False
    comp.enable()
    assert comp.active is True


def test_base_update_keeps_running():
    assert Component().update() is True


def test_component_types():
    assert TransformComp().type is ComponentType.TRANSFORM
    assert MeshComp().type is ComponentType.MESH
    assert TextureComp().type is ComponentType.TEXTURE
    assert Component().type is ComponentType.UNKNOWN


def test_transform_defaults():
    position, rotation, scale = TransformComp().transform_data()
    assert np.array_equal(position, np.zeros(3))
    assert np.array_equal(rotation, np.zeros(3))
    assert np.array_equal(scale, np.ones(3))


def test_transform_data_is_a_copy():
    comp = TransformComp()
    data = comp.transform_data()
    data[0][0] = 42.0
    assert comp.position[0] == 0.0


def test_mesh_comp_draw_without_mesh_raises():
    with pytest.raises(ValueError):
        MeshComp().draw()


def test_mesh_comp_draw_returns_mesh():
    comp = MeshComp()
    mesh = Mesh(MeshFormat.V3T2, [V3T2((0, 0, 0), (0, 0))], 0)
    comp.set_mesh(mesh)
    assert comp.draw() is mesh


def test_mesh_comp_extract_name_counts_mesh_components():
    owner = _owner_with_meshes(2)
    comp = owner.components[0]
    comp.extract_name("C:\\Assets\\house.fbx")
    assert comp.name == "house_2"


def test_mesh_comp_extract_name_without_backslash():
    owner = _owner_with_meshes(1)
    comp = owner.components[0]
    comp.extract_name("Assets/house.fbx")
    assert comp.name == "_1"


def test_texture_comp_extract_name():
    owner = _owner_with_meshes(1)
    comp = TextureComp(owner)
    owner.components.append(comp)
    comp.extract_name("C:\\Assets\\brick.png")
    assert comp.name == "brick_1"


def test_texture_comp_set_texture_takes_name_and_path():
    comp = TextureComp()
    texture = Texture("some/dir/t.png")
    comp.set_texture(texture)
    assert comp.texture is texture
    assert comp.name == texture.name
    assert comp.file_path == texture.path


def test_texture_comp_set_texture_none_clears():
    comp = TextureComp()
    comp.set_texture(Texture("some/dir/t.png"))
    comp.set_texture(None)
    assert (comp.name, comp.file_path, comp.texture) == ("", "", None)