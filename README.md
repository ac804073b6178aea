# glframe

glframe is a small framework for real-time 3D rendering that does not depend on
any graphics API. It is pure Python and has no runtime dependencies.

## Modules

- `glframe.common`: the constants `PI` and `PI_OVER_360`, the directory
  prefixes `SHADERDIR`, `MESHDIR`, `TEXTUREDIR` and `SOUNDSDIR`, and the
  functions `deg_to_rad` and `rad_to_deg`.
- `glframe.vectors`: mutable `Vector2`, `Vector3` and `Vector4` dataclasses.
  `Vector3` has `length`, `normalise`, `invert`, `inverse`, and the static
  methods `dot`, `cross` and `distance`. Its arithmetic operators work
  component-wise or with a scalar. `Vector4` components default to 1.0.
- `glframe.matrix4`: `Matrix4` holds 16 floats in column-major (OpenGL) order
  and defaults to the identity. It has the `position` and `scaling`
  properties and the static builders `rotation`, `scale`, `translation`,
  `perspective`, `orthographic` and `build_view_matrix`. It also has
  `transposed_rotation`. It multiplies by another `Matrix4`, by a `Vector3`
  (with the perspective divide) or by a `Vector4`.
- `glframe.quaternion`: `Quaternion`, which has `normalise`, `conjugate`,
  `generate_w`, `to_matrix` and `dot`, plus the builders
  `euler_angles_to_quaternion`, `axis_angle_to_quaternion` and `from_matrix`.
- `glframe.plane`: `Plane`, a normal and a distance, which can optionally be
  normalised. `sphere_in_plane` is used for frustum tests.
- `glframe.mesh`: `Mesh` stores vertices, texture coordinates, colours,
  normals, tangents and indices. It has the factories `generate_triangle` and
  `generate_quad`, and the methods `generate_normals`, `generate_tangents` and
  `give_tex_coords`. `buffer_data` packs the attributes into flat `array`
  objects in `mesh.buffers`, keyed by `MeshBuffer`. A mesh holds child meshes
  through `add_child` and `iter_meshes`. `PrimitiveType` lists the primitive
  topologies.
- `glframe.scene_node`: `SceneNode` is a tree of transforms. `update` passes
  world transforms down to the children, and iterating a node yields its
  children. `camera_distance_key` is a sort key that orders nodes nearest
  first.
- `glframe.debug_draw`: `DebugDraw` collects lines, boxes, crosses and
  18-segment circles. They go into separate `DebugDrawMode.ORTHO` and
  `DebugDrawMode.PERSPECTIVE` batches of `DebugDrawData`. `flush(mode)`
  returns the pending lines and clears the batch. The module also provides
  `BIAS_MATRIX` and `DEFAULT_ORTHO`.
- `glframe.mouse`: `Mouse` tracks buttons, held buttons, double clicks (with a
  200 ms limit by default), the wheel, relative motion scaled by
  `sensitivity`, and an absolute pointer position clamped to its bounds. It
  reads `RawMouseInput` packets. `InputDevice` is the abstract base class,
  and it supports sleep and wake.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from glframe.vectors import Vector3
from glframe.matrix4 import Matrix4
from glframe.quaternion import Quaternion
from glframe.scene_node import SceneNode

view = Matrix4.build_view_matrix(Vector3(0, 0, 10), Vector3(0, 0, 0), Vector3(0, 1, 0))
proj = Matrix4.perspective(1.0, 1000.0, 800 / 600, 45.0)

spin = Quaternion.axis_angle_to_quaternion(Vector3(0, 1, 0), 90.0).to_matrix()

root = SceneNode()
child = SceneNode()
child.transform = Matrix4.translation(Vector3(0, 5, 0)) * spin
root.add_child(child)
root.update(16.0)

print(child.world_transform.position)
```

Mouse input:

```python
from glframe.mouse import Mouse, MouseButton, RawMouseFlag, RawMouseInput

mouse = Mouse()
mouse.set_absolute_position_bounds(800, 600)
mouse.update(RawMouseInput(last_x=5, last_y=3, button_flags=RawMouseFlag.BUTTON_1_DOWN))
print(mouse.button_down(MouseButton.LEFT), mouse.absolute_position)
```

## What it does not do

glframe only computes and stores data. It does not open windows, create
graphics contexts, compile shaders, upload buffers or draw anything. The
packed arrays in `Mesh.buffers` and the batches from `DebugDraw.flush` are
meant to be handed to whatever renderer you use. It cannot load mesh or
material files such as OBJ or MTL, and it does not load textures. Mouse
input has to be fed in as `RawMouseInput` packets, because glframe does not
read any operating-system input itself.