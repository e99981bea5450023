"""Randomised 32-bit unique identifiers."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

_UINT32_MAX = 0xFFFFFFFF


def _random_value() -> int:
    return random.getrandbits(32)


@dataclass(frozen=True, eq=False)
class UID:
    """32-bit identifier; a random value unless one is given. Zero is invalid."""

    value: int = field(default_factory=_random_value)

    def __post_init__(self) -> None:
        if not 0 <= self.value <= _UINT32_MAX:
            raise ValueError(f"UID value {self.value} is outside the unsigned 32-bit range")

    def is_valid(self) -> bool:
        return self.value != 0

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, UID):
            return self.value == other.value
        if isinstance(other, int):
            return self.value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)


INVALID_UID = UID(0)