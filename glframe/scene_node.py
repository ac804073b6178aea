"""A transform hierarchy of meshes."""

from __future__ import annotations

from typing import Any, Iterator, List, Optional

from .matrix4 import Matrix4
from .mesh import Mesh
from .vectors import Vector3, Vector4


class SceneNode:
    """A node with a local transform, a mesh and any number of children."""

    def __init__(
        self,
        mesh: Optional[Mesh] = None,
        shader: Any = None,
        colour: Optional[Vector4] = None,
    ) -> None:
        self.mesh = mesh
        self.shader = shader
        self.colour = colour if colour is not None else Vector4(1.0, 1.0, 1.0, 1.0)
        self.parent: Optional[SceneNode] = None
        self.transform = Matrix4()
        self.world_transform = Matrix4()
        self.model_scale = Vector3(1.0, 1.0, 1.0)
        self.bounding_radius = 1.0
        self.distance_from_camera = 0.0
        self.children: List[SceneNode] = []

    def add_child(self, node: SceneNode) -> None:
        self.children.append(node)
        node.parent = self

    def update(self, msec: float) -> None:
        """Recompute world transforms for this node and all below it."""
        if self.parent is not None:
            self.world_transform = self.parent.world_transform * self.transform
        else:
            self.world_transform = Matrix4(self.transform.values)
        for child in self.children:
            child.update(msec)

    def __iter__(self) -> Iterator[SceneNode]:
        return iter(self.children)


def camera_distance_key(node: SceneNode) -> float:
    """Sort key ordering nodes nearest to the camera first."""
    return node.distance_from_camera