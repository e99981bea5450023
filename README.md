# glsim

Building blocks for a small entity-component simulation in plain Python, with
no third-party dependencies:

- `glsim.linalg`: `Vec2u`, `Vec2f`, `Vec3f`, `Vec4f` and an immutable
  row-major `Mat4`
- `glsim.registry`: a `Registry` of entities and their components
- `glsim.transform`: `Transform` (position, Euler rotation, scale)
- `glsim.rigidbody`: `Rigidbody` (mass, velocity, accumulated force, damping)
- `glsim.components`: `CameraComponent` with orthographic and perspective
  cameras, and `MeshComponent`
- `glsim.aabb`: axis-aligned bounding boxes and view-frustum culling
- `glsim.primitives`: vertex and index data for a cube, a plane and a UV sphere
- `glsim.uid`: random 32-bit identifiers
- `glsim.bundler`: writes binary files into a generated C++ header

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Math

Coordinates are right-handed, with +Y up, +X right and -Z forward. Matrices
act on column vectors with `@`. A `Vec3f` is treated as a point, so `w = 1`.
Projection matrices map depth into `[0, 1]`.

```python
from glsim.linalg import Mat4, Vec3f, as_radians

m = Mat4.translate(Vec3f(1, 2, 3)) @ Mat4.scale(Vec3f.splat(2.0))
p = m @ Vec3f(1, 1, 1)             # Vec3f(3.0, 4.0, 5.0)
back = m.inverse() @ p             # Vec3f(1.0, 1.0, 1.0)
rot = Mat4.from_euler_angles(Vec3f(0.0, as_radians(90), 0.0))
```

`Vec3f.normalize()` and `Mat4.inverse()` raise `ValueError` for a zero vector
or a singular matrix.

## The registry

An entity is a 64-bit integer. The upper 32 bits hold the slot index and the
lower 32 bits hold a version. `despawn` raises the version, and freed slots are
reused in the order they were freed. `create_entity_id`, `get_entity_index`,
`get_entity_version` and `is_entity_valid` pack and unpack these ids.

Any class that can be built with no arguments can be a component. Each class
gets its own id from `get_component_id`, up to 32 component types.

```python
from glsim.registry import Registry
from glsim.transform import Transform
from glsim.rigidbody import Rigidbody

reg = Registry()
e = reg.spawn()
reg.assign(e, Transform)
body = reg.assign(e, Rigidbody)
body.add_force(Vec3f(0.0, 10.0, 0.0))

for entity in reg.view(Transform, Rigidbody):
    transform, body = reg.get_many(entity, Transform, Rigidbody)
```

- `view()` with no types lists every live entity.
- `assign` and `get` return `None` for an entity that is not alive.
- `has(entity, *types)` is true only if the entity owns all of the given types.
- `remove` and `remove_many` detach components.
- `copy_to(other)` replaces `other` with a deep copy of the registry.

## Transforms and cameras

`Transform.translate` moves the position. `Transform.rotate(angle, axis)` adds
`axis * angle` to the Euler rotation, in radians. `get_forward`, `get_right` and
`get_up` return the rotated unit directions. `to_mat4` returns the model matrix
as translation, then rotation, then scale.

`CameraComponent` holds a `projection` (`CameraProjection.ORTHOGRAPHIC` or
`PERSPECTIVE`), an `enabled` flag, and one camera of each kind. Both cameras
provide `get_view_matrix(transform)` and `get_projection_matrix()`. In both
projections the Y axis is flipped. `PerspectiveCamera.fov` is in degrees.
`MeshComponent.type` is a `PrimitiveType`: `CUBE`, `PLANE` or `SPHERE`.

## Culling

```python
from glsim.aabb import AABB, Frustum
from glsim.components import PerspectiveCamera
from glsim.primitives import sphere_mesh
from glsim.transform import Transform

camera, eye = PerspectiveCamera(), Transform()
eye.translate(Vec3f(0.0, 0.0, 5.0))
frustum = Frustum.from_view_proj(
    camera.get_projection_matrix() @ camera.get_view_matrix(eye)
)
box = sphere_mesh().bounds().transform(Transform().to_mat4())
box.is_inside_frustum(frustum)     # True
```

`AABB.from_points` builds the smallest box around a set of points.
`AABB.transform` returns the box around the eight transformed corners.

## Primitives

`cube_mesh()`, `plane_mesh()` and `sphere_mesh(sectors=32, stacks=16)` return
`MeshData`. `MeshData` holds a list of `MeshVertex` (`position`, `uv_x`,
`normal`, `uv_y`) and a list of triangle indices. It also provides
`index_count` and `bounds()`. A `MeshData` with no vertices or no indices, or
with an index that does not point to a vertex, raises `ValueError`.

## Identifiers

`UID()` takes a random 32-bit value, and `UID(n)` wraps a given value. A value
of zero is `INVALID_UID`, and for it `is_valid()` returns false. A UID compares
equal to another UID or to an integer with the same value.

## Bundling binary files into a header

`glsim-bundler` writes a C++ header that embeds binary files, such as compiled
SPIR-V shaders, as one byte array. The header also holds a table of each file's
path relative to a base directory, its start offset and its size. Every input
must be a multiple of 4 bytes long.

```
glsim-bundler <output_file> <base_dir> <input_file1> [<input_file2> ...]
```

On wrong usage or an error the command prints a message and exits with status
1. From Python, `glsim.bundler.render_bundle(input_files, base_dir)` returns
the header text, and `glsim.bundler.bundle(output_path, input_files, base_dir)`
writes it to a file.

## What this package does not do

There is no world object and no system loop to drive updates. Rigidbodies hold
state and accumulate forces, but the package has no integration step that moves
them. It also has no event bus, no keyboard or mouse input handling, no
logging helpers, and no window, GPU or rendering code. Meshes and cameras are
plain data and matrices that you pass to your own renderer.