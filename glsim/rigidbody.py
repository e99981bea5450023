"""Rigid body component for the physics step."""

from __future__ import annotations

from dataclasses import dataclass, field

from glsim.linalg import Vec3f


@dataclass
class Rigidbody:
    """Linear motion state of a body and the forces acting on it."""

    mass: float = 1.0
    velocity: Vec3f = field(default_factory=Vec3f.zero)
    force_acc: Vec3f = field(default_factory=Vec3f.zero)
    linear_damping: float = 0.01
    is_static: bool = False
    use_gravity: bool = True

    def add_force(self, force: Vec3f) -> None:
        """Accumulate a force to be applied on the next integration step."""
        self.force_acc = self.force_acc + force