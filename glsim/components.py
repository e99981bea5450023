"""Rendering components: cameras and meshes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum

from glsim.linalg import Mat4, as_radians
from glsim.transform import Transform


class CameraProjection(IntEnum):
    ORTHOGRAPHIC = 0
    PERSPECTIVE = 1


class PrimitiveType(Enum):
    CUBE = 0
    PLANE = 1
    SPHERE = 2


def _flip_y(matrix: Mat4) -> Mat4:
    # Invert Y so the axes match OpenGL and glTF conventions.
    rows = [list(row) for row in matrix.rows]
    rows[1][1] = -rows[1][1]
    return Mat4(tuple(tuple(row) for row in rows))


@dataclass
class _Camera:
    aspect_ratio: float = 1.0
    near_clip: float = -1.0
    far_clip: float = 1.0


@dataclass
class OrthographicCamera(_Camera):
    near_clip: float = -1.0
    far_clip: float = 1.0
    zoom_level: float = 1.0

    def get_view_matrix(self, transform: Transform) -> Mat4:
        return transform.to_mat4().inverse()

    def get_projection_matrix(self) -> Mat4:
        half_width = self.aspect_ratio * self.zoom_level
        return _flip_y(
            Mat4.ortho(
                -half_width,
                half_width,
                -self.zoom_level,
                self.zoom_level,
                self.near_clip,
                self.far_clip,
            )
        )


@dataclass
class PerspectiveCamera(_Camera):
    near_clip: float = 0.01
    far_clip: float = 10000.0
    fov: float = 45.0

    def get_view_matrix(self, transform: Transform) -> Mat4:
        return Mat4.look_at(
            transform.position,
            transform.position + transform.get_forward(),
            transform.get_up(),
        )

    def get_projection_matrix(self) -> Mat4:
        """Projection with ``fov`` taken in degrees."""
        return _flip_y(
            Mat4.perspective(
                as_radians(self.fov), self.aspect_ratio, self.near_clip, self.far_clip
            )
        )


@dataclass
class CameraComponent:
    projection: CameraProjection = CameraProjection.PERSPECTIVE
    enabled: bool = True
    persp: PerspectiveCamera = field(default_factory=PerspectiveCamera)
    ortho: OrthographicCamera = field(default_factory=OrthographicCamera)


@dataclass
class MeshComponent:
    type: PrimitiveType = PrimitiveType.CUBE