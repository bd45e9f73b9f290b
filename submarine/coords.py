"""Integer 3D coordinates and the 24 axis-aligned orientations of a scanner."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum


class Rotation(Enum):
    """Rotation about the facing axis, in quarter turns."""

    R0 = "r0"
    R90 = "r90"
    R180 = "r180"
    R270 = "r270"

    def __str__(self) -> str:
        return self.value


class Facing(Enum):
    """The axis direction a scanner is facing."""

    PLUS_X = "+X"
    MINUS_X = "-X"
    PLUS_Y = "+Y"
    MINUS_Y = "-Y"
    PLUS_Z = "+Z"
    MINUS_Z = "-Z"

    def __str__(self) -> str:
        return self.value


FLIPS: tuple[tuple[Facing, Rotation], ...] = tuple(
    (facing, rotation) for facing in Facing for rotation in Rotation
)

_F = Facing
_R = Rotation

_INVERSE: dict[tuple[Facing, Rotation], tuple[Facing, Rotation]] = {
    (_F.PLUS_X, _R.R0): (_F.PLUS_X, _R.R0),
    (_F.PLUS_X, _R.R90): (_F.PLUS_X, _R.R270),
    (_F.PLUS_X, _R.R180): (_F.PLUS_X, _R.R180),
    (_F.PLUS_X, _R.R270): (_F.PLUS_X, _R.R90),
    (_F.MINUS_X, _R.R0): (_F.MINUS_X, _R.R0),
    (_F.MINUS_X, _R.R90): (_F.MINUS_X, _R.R90),
    (_F.MINUS_X, _R.R180): (_F.MINUS_X, _R.R180),
    (_F.MINUS_X, _R.R270): (_F.MINUS_X, _R.R270),
    (_F.PLUS_Y, _R.R0): (_F.MINUS_Y, _R.R0),
    (_F.PLUS_Y, _R.R90): (_F.MINUS_Z, _R.R270),
    (_F.PLUS_Y, _R.R180): (_F.PLUS_Y, _R.R180),
    (_F.PLUS_Y, _R.R270): (_F.PLUS_Z, _R.R0),
    (_F.MINUS_Y, _R.R0): (_F.PLUS_Y, _R.R0),
    (_F.MINUS_Y, _R.R90): (_F.MINUS_Z, _R.R90),
    (_F.MINUS_Y, _R.R180): (_F.MINUS_Y, _R.R180),
    (_F.MINUS_Y, _R.R270): (_F.PLUS_Z, _R.R90),
    (_F.PLUS_Z, _R.R0): (_F.PLUS_Y, _R.R270),
    (_F.PLUS_Z, _R.R90): (_F.MINUS_Y, _R.R270),
    (_F.PLUS_Z, _R.R180): (_F.MINUS_Z, _R.R0),
    (_F.PLUS_Z, _R.R270): (_F.PLUS_Z, _R.R270),
    (_F.MINUS_Z, _R.R0): (_F.PLUS_Z, _R.R180),
    (_F.MINUS_Z, _R.R90): (_F.MINUS_Y, _R.R90),
    (_F.MINUS_Z, _R.R180): (_F.MINUS_Z, _R.R180),
    (_F.MINUS_Z, _R.R270): (_F.PLUS_Y, _R.R90),
}

_ROTATIONS = {
    (_F.PLUS_X, _R.R0): lambda x, y, z: (x, y, z),
    (_F.PLUS_X, _R.R90): lambda x, y, z: (x, -z, y),
    (_F.PLUS_X, _R.R180): lambda x, y, z: (x, -y, -z),
    (_F.PLUS_X, _R.R270): lambda x, y, z: (x, z, -y),
    (_F.MINUS_X, _R.R0): lambda x, y, z: (-x, z, y),
    (_F.MINUS_X, _R.R90): lambda x, y, z: (-x, -z, -y),
    (_F.MINUS_X, _R.R180): lambda x, y, z: (-x, y, -z),
    (_F.MINUS_X, _R.R270): lambda x, y, z: (-x, -y, z),
    (_F.PLUS_Y, _R.R0): lambda x, y, z: (y, -x, z),
    (_F.PLUS_Y, _R.R90): lambda x, y, z: (y, -z, -x),
    (_F.PLUS_Y, _R.R180): lambda x, y, z: (y, x, -z),
    (_F.PLUS_Y, _R.R270): lambda x, y, z: (y, z, x),
    (_F.MINUS_Y, _R.R0): lambda x, y, z: (-y, x, z),
    (_F.MINUS_Y, _R.R90): lambda x, y, z: (-y, z, -x),
    (_F.MINUS_Y, _R.R180): lambda x, y, z: (-y, -x, -z),
    (_F.MINUS_Y, _R.R270): lambda x, y, z: (-y, -z, x),
    (_F.PLUS_Z, _R.R0): lambda x, y, z: (z, x, y),
    (_F.PLUS_Z, _R.R90): lambda x, y, z: (z, -x, -y),
    (_F.PLUS_Z, _R.R180): lambda x, y, z: (z, y, -x),
    (_F.PLUS_Z, _R.R270): lambda x, y, z: (z, -y, x),
    (_F.MINUS_Z, _R.R0): lambda x, y, z: (-z, y, x),
    (_F.MINUS_Z, _R.R90): lambda x, y, z: (-z, -x, y),
    (_F.MINUS_Z, _R.R180): lambda x, y, z: (-z, -y, -x),
    (_F.MINUS_Z, _R.R270): lambda x, y, z: (-z, x, -y),
}

_INTEGER = re.compile(r"[+-]?[0-9]+")


def inverse_flip(facing: Facing, rotation: Rotation) -> tuple[Facing, Rotation]:
    """Return the orientation that undoes the given one."""
    return _INVERSE[(facing, rotation)]


@dataclass(frozen=True, order=True)
class Coord:
    """A point in integer 3D space."""

    x: int = 0
    y: int = 0
    z: int = 0

    @classmethod
    def from_str(cls, src: str) -> Coord:
        """Parse ``x,y,z``; fields that are not integers are ignored."""
        values = [int(part) for part in src.split(",") if _INTEGER.fullmatch(part)]
        if len(values) != 3:
            raise ValueError(f"not a coordinate: {src!r}")
        return cls(*values)

    def rotate(self, facing: Facing, rotation: Rotation) -> Coord:
        """Return this point seen from the given orientation."""
        return Coord(*_ROTATIONS[(facing, rotation)](self.x, self.y, self.z))

    def manhattan_distance(self, other: Coord) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y) + abs(self.z - other.z)

    def __add__(self, other: object) -> Coord:
        if not isinstance(other, Coord):
            return NotImplemented
        return Coord(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> Coord:
        if not isinstance(other, Coord):
            return NotImplemented
        return Coord(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Coord:
        return Coord(-self.x, -self.y, -self.z)

    def __str__(self) -> str:
        return f"{self.x},{self.y},{self.z}"