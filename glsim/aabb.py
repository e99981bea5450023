"""Axis-aligned bounding boxes and view-frustum culling."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import product
from typing import Iterable

from glsim.linalg import Mat4, Vec3f, Vec4f


@dataclass(frozen=True)
class Frustum:
    """Six normalized planes: left, right, bottom, top, near, far."""

    planes: tuple[Vec4f, ...]

    @classmethod
    def from_view_proj(cls, view_proj: Mat4) -> Frustum:
        """Extract the clip planes of a combined view-projection matrix."""
        r0, r1, r2, r3 = (view_proj.row(i) for i in range(4))
        raw = (r3 + r0, r3 - r0, r3 + r1, r3 - r1, r3 + r2, r3 - r2)
        planes = []
        for plane in raw:
            length = plane.xyz().length()
            if length == 0.0:
                raise ValueError("view-projection matrix yields a degenerate frustum plane")
            planes.append(plane / length)
        return cls(tuple(planes))


@dataclass
class AABB:
    min: Vec3f
    max: Vec3f

    @classmethod
    def from_points(cls, points: Iterable[Vec3f]) -> AABB:
        """Smallest box holding every point; at least one point is required."""
        pts = list(points)
        if not pts:
            raise ValueError("cannot build a bounding box from no points")
        return cls(
            Vec3f(min(p.x for p in pts), min(p.y for p in pts), min(p.z for p in pts)),
            Vec3f(max(p.x for p in pts), max(p.y for p in pts), max(p.z for p in pts)),
        )

    def corners(self) -> list[Vec3f]:
        return [
            Vec3f(x, y, z)
            for x, y, z in product(
                (self.min.x, self.max.x), (self.min.y, self.max.y), (self.min.z, self.max.z)
            )
        ]

    def is_inside_frustum(self, frustum: Frustum) -> bool:
        """False only if the box lies fully outside one of the planes."""
        for plane in frustum.planes:
            positive = Vec3f(
                self.max.x if plane.x >= 0 else self.min.x,
                self.max.y if plane.y >= 0 else self.min.y,
                self.max.z if plane.z >= 0 else self.min.z,
            )
            if plane.xyz().dot(positive) + plane.w < 0:
                return False
        return True

    def transform(self, matrix: Mat4) -> AABB:
        """Bounding box of the eight transformed corners."""
        return AABB.from_points(
            (matrix @ Vec4f.from_vec3(corner, 1.0)).xyz() for corner in self.corners()
        )