"""Position, rotation and scale of an entity."""

from __future__ import annotations

from dataclasses import dataclass, field

from glsim.linalg import Mat4, Vec3f


@dataclass
class Transform:
    """Spatial state of an entity; ``rotation`` holds Euler angles."""

    position: Vec3f = field(default_factory=Vec3f.zero)
    rotation: Vec3f = field(default_factory=Vec3f.zero)
    scale: Vec3f = field(default_factory=Vec3f.one)

    def translate(self, translation: Vec3f) -> None:
        self.position = self.position + translation

    def rotate(self, angle: float, axis: Vec3f) -> None:
        """Add ``angle`` about ``axis`` to the Euler rotation."""
        self.rotation = self.rotation + axis * angle

    def _rotated(self, direction: Vec3f) -> Vec3f:
        return (Mat4.from_euler_angles(self.rotation) @ direction).normalize()

    def get_forward(self) -> Vec3f:
        return self._rotated(Vec3f.forward())

    def get_right(self) -> Vec3f:
        return self._rotated(Vec3f.right())

    def get_up(self) -> Vec3f:
        return self._rotated(Vec3f.up())

    def to_mat4(self) -> Mat4:
        """Model matrix: translation, then rotation, then scale."""
        return (
            Mat4.translate(self.position)
            @ Mat4.from_euler_angles(self.rotation)
            @ Mat4.scale(self.scale)
        )