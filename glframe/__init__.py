"""Maths, meshes, scene graphs, debug drawing and mouse input state for real-time 3D rendering."""

__version__ = "0.1.0"
__all__ = [
    "common",
    "vectors",
    "matrix4",
    "quaternion",
    "plane",
    "mesh",
    "scene_node",
    "debug_draw",
    "mouse",
]