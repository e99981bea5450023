"""Vertex data for the built-in primitive meshes: cube, plane and UV sphere."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from glsim.aabb import AABB
from glsim.linalg import Vec3f


@dataclass
class MeshVertex:
    """One vertex; the texture coordinates are split around the normal."""

    position: Vec3f
    uv_x: float
    normal: Vec3f
    uv_y: float


@dataclass
class MeshData:
    """Vertices and triangle indices of a mesh; neither may be empty."""

    vertices: list[MeshVertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.vertices or not self.indices:
            raise ValueError("a mesh needs at least one vertex and one index")
        count = len(self.vertices)
        if any(not 0 <= index < count for index in self.indices):
            raise ValueError("mesh index refers to a vertex that does not exist")

    @property
    def index_count(self) -> int:
        return len(self.indices)

    def bounds(self) -> AABB:
        """Axis-aligned box enclosing every vertex position."""
        return AABB.from_points(vertex.position for vertex in self.vertices)


def _v(position: tuple[float, float, float], u: float,
       normal: tuple[float, float, float], v: float) -> MeshVertex:
    return MeshVertex(Vec3f(*position), u, Vec3f(*normal), v)


_CUBE_VERTICES = (
    # Front face (Z = 1)
    ((-0.5, -0.5, 0.5), 0.0, (0.0, 0.0, 1.0), 0.0),
    ((0.5, -0.5, 0.5), 1.0, (0.0, 0.0, 1.0), 0.0),
    ((0.5, 0.5, 0.5), 1.0, (0.0, 0.0, 1.0), 1.0),
    ((-0.5, 0.5, 0.5), 0.0, (0.0, 0.0, 1.0), 1.0),
    # Back face (Z = -1)
    ((-0.5, -0.5, -0.5), 1.0, (0.0, 0.0, -1.0), 0.0),
    ((-0.5, 0.5, -0.5), 1.0, (0.0, 0.0, -1.0), 1.0),
    ((0.5, 0.5, -0.5), 0.0, (0.0, 0.0, -1.0), 1.0),
    ((0.5, -0.5, -0.5), 0.0, (0.0, 0.0, -1.0), 0.0),
    # Top face (Y = 1)
    ((-0.5, 0.5, 0.5), 0.0, (0.0, 1.0, 0.0), 0.0),
    ((0.5, 0.5, 0.5), 1.0, (0.0, 1.0, 0.0), 0.0),
    ((0.5, 0.5, -0.5), 1.0, (0.0, 1.0, 0.0), 1.0),
    ((-0.5, 0.5, -0.5), 0.0, (0.0, 1.0, 0.0), 1.0),
    # Bottom face (Y = -1)
    ((-0.5, -0.5, 0.5), 0.0, (0.0, -1.0, 0.0), 1.0),
    ((-0.5, -0.5, -0.5), 0.0, (0.0, -1.0, 0.0), 0.0),
    ((0.5, -0.5, -0.5), 1.0, (0.0, -1.0, 0.0), 0.0),
    ((0.5, -0.5, 0.5), 1.0, (0.0, -1.0, 0.0), 1.0),
    # Right face (X = 1)
    ((0.5, -0.5, 0.5), 0.0, (1.0, 0.0, 0.0), 0.0),
    ((0.5, -0.5, -0.5), 1.0, (1.0, 0.0, 0.0), 0.0),
    ((0.5, 0.5, -0.5), 1.0, (1.0, 0.0, 0.0), 1.0),
    ((0.5, 0.5, 0.5), 0.0, (1.0, 0.0, 0.0), 1.0),
    # Left face (X = -1)
    ((-0.5, -0.5, 0.5), 1.0, (-1.0, 0.0, 0.0), 0.0),
    ((-0.5, 0.5, 0.5), 1.0, (-1.0, 0.0, 0.0), 1.0),
    ((-0.5, 0.5, -0.5), 0.0, (-1.0, 0.0, 0.0), 1.0),
    ((-0.5, -0.5, -0.5), 0.0, (-1.0, 0.0, 0.0), 0.0),
)

_CUBE_INDICES = (
    0, 1, 2, 0, 2, 3,  # Front
    4, 5, 6, 4, 6, 7,  # Back
    8, 9, 10, 8, 10, 11,  # Top
    12, 13, 14, 12, 14, 15,  # Bottom
    16, 17, 18, 16, 18, 19,  # Right
    20, 21, 22, 20, 22, 23,  # Left
)

_PLANE_VERTICES = (
    ((-0.5, 0.0, 0.5), 0.0, (0.0, 1.0, 0.0), 0.0),
    ((0.5, 0.0, 0.5), 1.0, (0.0, 1.0, 0.0), 0.0),
    ((0.5, 0.0, -0.5), 1.0, (0.0, 1.0, 0.0), 1.0),
    ((-0.5, 0.0, -0.5), 0.0, (0.0, 1.0, 0.0), 1.0),
)

_PLANE_INDICES = (0, 1, 2, 0, 2, 3)


def cube_mesh() -> MeshData:
    """Unit cube centred on the origin with per-face normals."""
    return MeshData([_v(*row) for row in _CUBE_VERTICES], list(_CUBE_INDICES))


def plane_mesh() -> MeshData:
    """Unit square in the XZ plane facing +Y."""
    return MeshData([_v(*row) for row in _PLANE_VERTICES], list(_PLANE_INDICES))


def sphere_mesh(sectors: int = 32, stacks: int = 16) -> MeshData:
    """Unit UV sphere with ``sectors`` slices around and ``stacks`` from pole to pole."""
    if sectors < 1 or stacks < 1:
        raise ValueError("a sphere needs at least one sector and one stack")

    sector_step = 2.0 * math.pi / sectors
    stack_step = math.pi / stacks

    vertices: list[MeshVertex] = []
    for i in range(stacks + 1):
        stack_angle = math.pi / 2.0 - i * stack_step
        xy = math.cos(stack_angle)
        z = math.sin(stack_angle)
        for j in range(sectors + 1):
            sector_angle = j * sector_step
            position = Vec3f(xy * math.cos(sector_angle), xy * math.sin(sector_angle), z)
            normal = Vec3f(position.x, position.y, position.z)
            vertices.append(MeshVertex(position, j / sectors, normal, i / stacks))

    indices: list[int] = []
    for i in range(stacks):
        current = i * (sectors + 1)
        following = current + sectors + 1
        for j in range(sectors):
            k1, k2 = current + j, following + j
            if i != 0:
                indices.extend((k1, k2, k1 + 1))
            if i != stacks - 1:
                indices.extend((k1 + 1, k2, k2 + 1))

    return MeshData(vertices, indices)