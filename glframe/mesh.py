"""Triangle meshes with per-vertex attributes and packed attribute buffers."""

from __future__ import annotations

import math
from array import array
from enum import IntEnum
from typing import Dict, Iterator, List, Optional

from .vectors import Vector2, Vector3, Vector4


class MeshBuffer(IntEnum):
    """Attribute slots, matching the shader attribute locations."""

    VERTEX = 0
    COLOUR = 1
    TEXTURE = 2
    NORMAL = 3
    TANGENT = 4
    INDEX = 5


class PrimitiveType(IntEnum):
    """Primitive topologies, with their OpenGL enumerant values."""

    POINTS = 0x0000
    LINES = 0x0001
    LINE_LOOP = 0x0002
    LINE_STRIP = 0x0003
    TRIANGLES = 0x0004
    TRIANGLE_STRIP = 0x0005
    TRIANGLE_FAN = 0x0006


_TRIANGLE_TEX_COORDS = (Vector2(0.5, 0.0), Vector2(1.0, 1.0), Vector2(0.0, 1.0))


def _copy(v: Vector3) -> Vector3:
    return Vector3(v.x, v.y, v.z)


class Mesh:
    """Vertex data for one drawable, plus any child meshes drawn with it."""

    def __init__(self) -> None:
        self.type: PrimitiveType = PrimitiveType.TRIANGLES
        self.texture: int = 0
        self.bump_texture: int = 0
        self.vertices: List[Vector3] = []
        self.texture_coords: Optional[List[Vector2]] = None
        self.colours: Optional[List[Vector4]] = None
        self.normals: Optional[List[Vector3]] = None
        self.tangents: Optional[List[Vector3]] = None
        self.indices: Optional[List[int]] = None
        self.children: List[Mesh] = []
        self.buffers: Dict[MeshBuffer, array] = {}

    @property
    def num_vertices(self) -> int:
        return len(self.vertices)

    @property
    def num_indices(self) -> int:
        return len(self.indices) if self.indices else 0

    @staticmethod
    def generate_triangle() -> Mesh:
        """A single coloured, textured triangle."""
        m = Mesh()
        m.vertices = [
            Vector3(0.0, 0.5, 0.0),
            Vector3(0.5, -0.5, 0.0),
            Vector3(-0.5, -0.5, 0.0),
        ]
        m.texture_coords = [Vector2(t.x, t.y) for t in _TRIANGLE_TEX_COORDS]
        m.colours = [
            Vector4(1.0, 0.0, 0.0, 1.0),
            Vector4(0.0, 1.0, 0.0, 1.0),
            Vector4(0.0, 0.0, 1.0, 1.0),
        ]
        m.buffer_data()
        return m

    @staticmethod
    def generate_quad() -> Mesh:
        """A unit quad drawn as a triangle strip, facing down -z."""
        m = Mesh()
        m.type = PrimitiveType.TRIANGLE_STRIP
        m.vertices = [
            Vector3(-1.0, -1.0, 0.0),
            Vector3(-1.0, 1.0, 0.0),
            Vector3(1.0, -1.0, 0.0),
            Vector3(1.0, 1.0, 0.0),
        ]
        m.texture_coords = [
            Vector2(0.0, 1.0),
            Vector2(0.0, 0.0),
            Vector2(1.0, 1.0),
            Vector2(1.0, 0.0),
        ]
        m.colours = [Vector4(1.0, 1.0, 1.0, 1.0) for _ in range(4)]
        m.normals = [Vector3(0.0, 0.0, -1.0) for _ in range(4)]
        m.tangents = [Vector3(1.0, 0.0, 0.0) for _ in range(4)]
        m.buffer_data()
        return m

    def give_tex_coords(self) -> None:
        """Replace the texture coordinates with one repeating triangle pattern."""
        self.texture_coords = [
            Vector2(t.x, t.y)
            for t, _ in zip(_cycle(_TRIANGLE_TEX_COORDS), range(self.num_vertices))
        ]

    def _triangles(self) -> Iterator[tuple]:
        """Vertex index triples, from the index list or the vertex order."""
        if self.indices:
            source = self.indices
        else:
            source = range(self.num_vertices)
        it = iter(source)
        return zip(it, it, it)

    def generate_normals(self) -> None:
        """Compute unit normals; indexed meshes share them between faces."""
        self.normals = [Vector3() for _ in range(self.num_vertices)]
        verts = self.vertices
        for a, b, c in self._triangles():
            normal = Vector3.cross(verts[b] - verts[a], verts[c] - verts[a])
            if self.indices:
                for i in (a, b, c):
                    self.normals[i] += normal
            else:
                for i in (a, b, c):
                    self.normals[i] = _copy(normal)
        for n in self.normals:
            n.normalise()

    def generate_tangents(self) -> None:
        """Compute unit tangents, giving default texture coordinates if absent."""
        if not self.texture_coords:
            self.give_tex_coords()
        self.tangents = [Vector3() for _ in range(self.num_vertices)]
        verts, tex = self.vertices, self.texture_coords
        for a, b, c in self._triangles():
            tangent = Mesh.generate_tangent(
                verts[a], verts[b], verts[c], tex[a], tex[b], tex[c]
            )
            for i in (a, b, c):
                self.tangents[i] += tangent
        for t in self.tangents:
            t.normalise()

    @staticmethod
    def generate_tangent(
        a: Vector3, b: Vector3, c: Vector3, ta: Vector2, tb: Vector2, tc: Vector2
    ) -> Vector3:
        """The tangent of one triangle from its positions and texture coordinates.

        Degenerate texture coordinates give infinite or NaN components.
        """
        coord1 = tb - ta
        coord2 = tc - ta
        vertex1 = b - a
        vertex2 = c - a
        axis = vertex1 * coord2.y - vertex2 * coord1.y
        det = coord1.x * coord2.y - coord2.x * coord1.y
        factor = 1.0 / det if det != 0.0 else math.copysign(math.inf, det)
        return axis * factor

    def buffer_data(self) -> None:
        """Pack every present attribute into flat typed arrays in ``buffers``."""
        self.buffers = {MeshBuffer.VERTEX: _pack(self.vertices)}
        optional = (
            (MeshBuffer.TEXTURE, self.texture_coords),
            (MeshBuffer.COLOUR, self.colours),
            (MeshBuffer.NORMAL, self.normals),
            (MeshBuffer.TANGENT, self.tangents),
        )
        for slot, data in optional:
            if data:
                self.buffers[slot] = _pack(data)
        if self.indices:
            self.buffers[MeshBuffer.INDEX] = array("I", self.indices)

    def add_child(self, mesh: Mesh) -> None:
        self.children.append(mesh)

    def iter_meshes(self) -> Iterator[Mesh]:
        """This mesh, then its children, in drawing order."""
        yield self
        for child in self.children:
            yield from child.iter_meshes()


def _cycle(items):
    while True:
        yield from items


def _pack(items) -> array:
    return array("f", (component for item in items for component in item))