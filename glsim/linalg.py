"""Small vector and 4x4 matrix types used throughout the simulation.

Conventions: right-handed coordinates with +Y up, +X right and -Z forward.
Matrices are stored row-major and act on column vectors (``m @ v``).
Projection matrices map depth into the ``[0, 1]`` range.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Sequence, Union

_UINT32_MAX = 0xFFFFFFFF
_SINGULAR_EPSILON = 1e-12

Scalar = Union[int, float]


def as_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return math.radians(degrees)


@dataclass
class Vec2u:
    """Two-component unsigned 32-bit integer vector."""

    x: int = 0
    y: int = 0

    def __post_init__(self) -> None:
        for value in (self.x, self.y):
            if not 0 <= value <= _UINT32_MAX:
                raise ValueError(f"component {value} is outside the unsigned 32-bit range")

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y


@dataclass
class Vec2f:
    """Two-component float vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vec2f) -> Vec2f:
        return Vec2f(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2f) -> Vec2f:
        return Vec2f(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: Scalar) -> Vec2f:
        return Vec2f(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Vec2f:
        return Vec2f(-self.x, -self.y)

    def dot(self, other: Vec2f) -> float:
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        return math.hypot(self.x, self.y)


@dataclass
class Vec3f:
    """Three-component float vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3f) -> Vec3f:
        return Vec3f(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3f) -> Vec3f:
        return Vec3f(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Union[Scalar, Vec3f]) -> Vec3f:
        if isinstance(other, Vec3f):
            return Vec3f(self.x * other.x, self.y * other.y, self.z * other.z)
        return Vec3f(self.x * other, self.y * other, self.z * other)

    __rmul__ = __mul__

    def __truediv__(self, divisor: Scalar) -> Vec3f:
        return Vec3f(self.x / divisor, self.y / divisor, self.z / divisor)

    def __neg__(self) -> Vec3f:
        return Vec3f(-self.x, -self.y, -self.z)

    def dot(self, other: Vec3f) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3f) -> Vec3f:
        return Vec3f(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> Vec3f:
        """Return a unit-length copy; a zero vector cannot be normalized."""
        length = self.length()
        if length == 0.0:
            raise ValueError("cannot normalize a zero-length vector")
        return self / length

    @classmethod
    def splat(cls, value: float) -> Vec3f:
        return cls(value, value, value)

    @classmethod
    def zero(cls) -> Vec3f:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def one(cls) -> Vec3f:
        return cls(1.0, 1.0, 1.0)

    @classmethod
    def up(cls) -> Vec3f:
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def right(cls) -> Vec3f:
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def forward(cls) -> Vec3f:
        return cls(0.0, 0.0, -1.0)


@dataclass
class Vec4f:
    """Four-component float vector, also used for plane equations."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __add__(self, other: Vec4f) -> Vec4f:
        return Vec4f(*(a + b for a, b in zip(self, other)))

    def __sub__(self, other: Vec4f) -> Vec4f:
        return Vec4f(*(a - b for a, b in zip(self, other)))

    def __mul__(self, factor: Scalar) -> Vec4f:
        return Vec4f(*(a * factor for a in self))

    __rmul__ = __mul__

    def __truediv__(self, divisor: Scalar) -> Vec4f:
        return Vec4f(*(a / divisor for a in self))

    def __neg__(self) -> Vec4f:
        return Vec4f(-self.x, -self.y, -self.z, -self.w)

    @classmethod
    def from_vec3(cls, v: Vec3f, w: float) -> Vec4f:
        return cls(v.x, v.y, v.z, w)

    def xyz(self) -> Vec3f:
        return Vec3f(self.x, self.y, self.z)


_Row = tuple[float, float, float, float]
_IDENTITY_ROWS: tuple[_Row, ...] = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)


@dataclass(frozen=True)
class Mat4:
    """Immutable row-major 4x4 matrix; ``m[r][c]`` is row ``r``, column ``c``."""

    rows: tuple[_Row, ...] = _IDENTITY_ROWS

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(value) for value in row) for row in self.rows)
        if len(rows) != 4 or any(len(row) != 4 for row in rows):
            raise ValueError("a Mat4 needs exactly four rows of four values")
        object.__setattr__(self, "rows", rows)

    def __getitem__(self, index: int) -> _Row:
        return self.rows[index]

    def __iter__(self) -> Iterator[_Row]:
        return iter(self.rows)

    def __matmul__(self, other):
        if isinstance(other, Mat4):
            columns = [other.column(c) for c in range(4)]
            return Mat4(
                tuple(
                    tuple(_dot4(row, column) for column in columns) for row in self.rows
                )
            )
        if isinstance(other, Vec4f):
            values = tuple(other)
            return Vec4f(*(_dot4(row, values) for row in self.rows))
        if isinstance(other, Vec3f):
            values = (other.x, other.y, other.z, 1.0)
            x, y, z = (_dot4(row, values) for row in self.rows[:3])
            return Vec3f(x, y, z)
        return NotImplemented

    @classmethod
    def identity(cls) -> Mat4:
        return cls(_IDENTITY_ROWS)

    @classmethod
    def translate(cls, offset: Vec3f) -> Mat4:
        return cls(
            (
                (1.0, 0.0, 0.0, offset.x),
                (0.0, 1.0, 0.0, offset.y),
                (0.0, 0.0, 1.0, offset.z),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    @classmethod
    def scale(cls, factors: Vec3f) -> Mat4:
        return cls(
            (
                (factors.x, 0.0, 0.0, 0.0),
                (0.0, factors.y, 0.0, 0.0),
                (0.0, 0.0, factors.z, 0.0),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    @classmethod
    def from_euler_angles(cls, angles: Vec3f) -> Mat4:
        """Rotation from radians about X, then Y, then Z (``Rz @ Ry @ Rx``)."""
        cx, sx = math.cos(angles.x), math.sin(angles.x)
        cy, sy = math.cos(angles.y), math.sin(angles.y)
        cz, sz = math.cos(angles.z), math.sin(angles.z)
        rot_x = cls(
            ((1.0, 0.0, 0.0, 0.0), (0.0, cx, -sx, 0.0), (0.0, sx, cx, 0.0), (0.0, 0.0, 0.0, 1.0))
        )
        rot_y = cls(
            ((cy, 0.0, sy, 0.0), (0.0, 1.0, 0.0, 0.0), (-sy, 0.0, cy, 0.0), (0.0, 0.0, 0.0, 1.0))
        )
        rot_z = cls(
            ((cz, -sz, 0.0, 0.0), (sz, cz, 0.0, 0.0), (0.0, 0.0, 1.0, 0.0), (0.0, 0.0, 0.0, 1.0))
        )
        return rot_z @ rot_y @ rot_x

    @classmethod
    def ortho(
        cls, left: float, right: float, bottom: float, top: float, near: float, far: float
    ) -> Mat4:
        return cls(
            (
                (2.0 / (right - left), 0.0, 0.0, -(right + left) / (right - left)),
                (0.0, 2.0 / (top - bottom), 0.0, -(top + bottom) / (top - bottom)),
                (0.0, 0.0, -1.0 / (far - near), -near / (far - near)),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    @classmethod
    def perspective(cls, fovy: float, aspect: float, near: float, far: float) -> Mat4:
        """Perspective projection; ``fovy`` is in radians."""
        focal = 1.0 / math.tan(fovy / 2.0)
        return cls(
            (
                (focal / aspect, 0.0, 0.0, 0.0),
                (0.0, focal, 0.0, 0.0),
                (0.0, 0.0, far / (near - far), -(far * near) / (far - near)),
                (0.0, 0.0, -1.0, 0.0),
            )
        )

    @classmethod
    def look_at(cls, eye: Vec3f, center: Vec3f, up: Vec3f) -> Mat4:
        f = (center - eye).normalize()
        s = f.cross(up).normalize()
        u = s.cross(f)
        return cls(
            (
                (s.x, s.y, s.z, -s.dot(eye)),
                (u.x, u.y, u.z, -u.dot(eye)),
                (-f.x, -f.y, -f.z, f.dot(eye)),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    def transpose(self) -> Mat4:
        return Mat4(tuple(zip(*self.rows)))

    def inverse(self) -> Mat4:
        """Invert by Gauss-Jordan elimination; raises ValueError if singular."""
        augmented = [
            list(row) + list(identity_row)
            for row, identity_row in zip(self.rows, _IDENTITY_ROWS)
        ]
        for col in range(4):
            pivot = max(range(col, 4), key=lambda r: abs(augmented[r][col]))
            if abs(augmented[pivot][col]) < _SINGULAR_EPSILON:
                raise ValueError("matrix is singular and cannot be inverted")
            augmented[col], augmented[pivot] = augmented[pivot], augmented[col]
            pivot_value = augmented[col][col]
            augmented[col] = [value / pivot_value for value in augmented[col]]
            for r, row in enumerate(augmented):
                factor = row[col]
                if r != col and factor:
                    augmented[r] = [a - factor * b for a, b in zip(row, augmented[col])]
        return Mat4(tuple(tuple(row[4:]) for row in augmented))

    def row(self, index: int) -> Vec4f:
        return Vec4f(*self.rows[index])

    def column(self, index: int) -> Vec4f:
        return Vec4f(*(row[index] for row in self.rows))


def _dot4(a: Sequence[float], b: Sequence[float]) -> float:
    return sum(x * y for x, y in zip(a, b))