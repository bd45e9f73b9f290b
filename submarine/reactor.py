"""Reactor reboot: switching cuboids of cubes on and off."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from functools import reduce
from itertools import product

_SEPARATOR = re.compile(r"[^0-9-]")


def _ranges_intersect(a_start: int, a_end: int, b_start: int, b_end: int) -> bool:
    """Whether two inclusive ranges share a value."""
    return (
        a_start <= b_start <= a_end
        or a_start <= b_end <= a_end
        or b_start <= a_start <= b_end
        or b_start <= a_end <= b_end
    )


@dataclass(frozen=True)
class Cuboid:
    """An axis-aligned box; every maximum is exclusive."""

    x_min: int
    x_max: int
    y_min: int
    y_max: int
    z_min: int
    z_max: int

    @classmethod
    def from_inclusive(cls, coords: Sequence[int]) -> Cuboid:
        """Build from ``x0, x1, y0, y1, z0, z1`` with inclusive maxima."""
        if len(coords) != 6:
            raise ValueError(f"expected 6 coordinates, got {len(coords)}")
        x0, x1, y0, y1, z0, z1 = coords
        return cls(x0, x1 + 1, y0, y1 + 1, z0, z1 + 1)

    def intersects(self, other: Cuboid) -> bool:
        return (
            _ranges_intersect(self.x_min, self.x_max - 1, other.x_min, other.x_max - 1)
            and _ranges_intersect(self.y_min, self.y_max - 1, other.y_min, other.y_max - 1)
            and _ranges_intersect(self.z_min, self.z_max - 1, other.z_min, other.z_max - 1)
        )

    def has_volume(self) -> bool:
        return (
            self.x_max > self.x_min
            and self.y_max > self.y_min
            and self.z_max > self.z_min
        )

    def volume(self) -> int:
        if not self.has_volume():
            return 0
        return (
            (self.x_max - self.x_min)
            * (self.y_max - self.y_min)
            * (self.z_max - self.z_min)
        )

    def intersect(self, other: Cuboid) -> Cuboid:
        return Cuboid(
            max(self.x_min, other.x_min),
            min(self.x_max, other.x_max),
            max(self.y_min, other.y_min),
            min(self.y_max, other.y_max),
            max(self.z_min, other.z_min),
            min(self.z_max, other.z_max),
        )

    def remove(self, other: Cuboid) -> list[Cuboid]:
        """Split into disjoint cuboids covering this one minus ``other``."""
        cut = self.intersect(other)
        if not cut.has_volume():
            return [self]
        if cut == self:
            return []
        xs = ((self.x_min, cut.x_min), (cut.x_min, cut.x_max), (cut.x_max, self.x_max))
        ys = ((self.y_min, cut.y_min), (cut.y_min, cut.y_max), (cut.y_max, self.y_max))
        zs = ((self.z_min, cut.z_min), (cut.z_min, cut.z_max), (cut.z_max, self.z_max))
        pieces = (
            Cuboid(x0, x1, y0, y1, z0, z1)
            for (z0, z1), (y0, y1), (x0, x1) in product(zs, ys, xs)
        )
        return [piece for piece in pieces if piece != cut and piece.has_volume()]

    def __str__(self) -> str:
        return (
            f"x={self.x_min}..{self.x_max - 1},"
            f"y={self.y_min}..{self.y_max - 1},"
            f"z={self.z_min}..{self.z_max - 1}"
        )


@dataclass(frozen=True)
class Instruction:
    """Turn a cuboid of cubes on or off."""

    state: bool
    cuboid: Cuboid

    @classmethod
    def parse(cls, text: str) -> Instruction:
        """Parse a line such as ``on x=10..12,y=10..12,z=10..12``."""
        coords = []
        for piece in _SEPARATOR.split(text):
            try:
                coords.append(int(piece))
            except ValueError:
                continue
        return cls(text.startswith("on "), Cuboid.from_inclusive(coords))

    def apply(self, cuboids: Iterable[Cuboid]) -> list[Cuboid]:
        """Return the disjoint lit cuboids after this instruction."""
        result: list[Cuboid] = []
        for cuboid in cuboids:
            if cuboid.intersects(self.cuboid):
                result.extend(cuboid.remove(self.cuboid))
            else:
                result.append(cuboid)
        if self.state:
            result.append(self.cuboid)
        return result


def parse_instructions(lines: Iterable[str]) -> list[Instruction]:
    return [
        Instruction.parse(line)
        for line in (raw.rstrip("\r\n") for raw in lines)
        if line
    ]


def run(instructions: Iterable[Instruction]) -> list[Cuboid]:
    """Apply every instruction in turn, starting with everything off."""
    return reduce(lambda cuboids, step: step.apply(cuboids), instructions, [])


def cubes_on(cuboids: Iterable[Cuboid]) -> int:
    return sum(cuboid.volume() for cuboid in cuboids)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Run the reboot steps on standard input and count lit cubes."
    )
    parser.parse_args(argv)
    try:
        instructions = parse_instructions(sys.stdin)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    cuboids = run(instructions)
    print(f"Total: {cubes_on(cuboids)}")
    print(f"There's {len(cuboids)} cuboids now")
    return 0