import pytest

from glframe.matrix4 import Matrix4
from glframe.mesh import Mesh
from glframe.scene_node import SceneNode, camera_distance_key
from glframe.vectors import Vector3, Vector4


def test_defaults():
    node = SceneNode()
    assert node.colour == Vector4(1, 1, 1, 1)
    assert node.model_scale == Vector3(1, 1, 1)
    assert node.bounding_radius == 1.0
    assert node.distance_from_camera == 0.0
    assert node.parent is None
    assert node.mesh is None


def test_mesh_and_shader_kept():
    mesh = Mesh()
    node = SceneNode(mesh, "shader", Vector4(0, 0, 1, 1))
    assert node.mesh is mesh
    assert node.shader == "shader"
    assert node.colour == Vector4(0, 0, 1, 1)


def test_add_child_sets_parent_and_iterates():
    root, a, b = SceneNode(), SceneNode(), SceneNode()
    root.add_child(a)
    root.add_child(b)
    assert a.parent is root
    assert list(root) == [a, b]


def test_update_composes_transforms():
    root, child, grandchild = SceneNode(), SceneNode(), SceneNode()
    root.add_child(child)
    child.add_child(grandchild)
    root.transform = Matrix4.translation(Vector3(1, 2, 3))
    child.transform = Matrix4.rotation(90, Vector3(0, 1, 0))
    grandchild.transform = Matrix4.scale(Vector3(2, 2, 2))
    root.update(16.0)
    assert root.world_transform == root.transform
    assert child.world_transform == root.transform * child.transform
    assert grandchild.world_transform == (
        root.transform * child.transform
    ) * grandchild.transform


def test_root_world_is_a_copy():
    root = SceneNode()
    root.transform = Matrix4.translation(Vector3(5, 0, 0))
    root.update(0.0)
    root.transform.to_zero()
    assert root.world_transform.position == Vector3(5, 0, 0)


def test_sort_by_camera_distance():
    nodes = [SceneNode() for _ in range(3)]
    for node, d in zip(nodes, (3.0, 1.0, 2.0)):
        node.distance_from_camera = d
    ordered = sorted(nodes, key=camera_distance_key)
    assert [n.distance_from_camera for n in ordered] == [1.0, 2.0, 3.0]
    assert ordered[0] is nodes[1]