"""Sea cucumber herds moving on a wrapping seabed."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum

Coord = tuple[int, int]

_CLEAR_SCREEN = "\x1b[2J\x1b[1;1H"


class Herd(Enum):
    EAST = ">"
    SOUTH = "v"


@dataclass
class Seabed:
    """The seabed size (width, height) and where each cucumber sits."""

    size: Coord
    cucumbers: dict[Coord, Herd] = field(default_factory=dict)

    @classmethod
    def parse(cls, lines: Iterable[str]) -> Seabed:
        cucumbers: dict[Coord, Herd] = {}
        width = height = 0
        for y, raw in enumerate(lines):
            line = raw.rstrip("\r\n")
            width = len(line)
            height = y + 1
            for x, c in enumerate(line):
                try:
                    cucumbers[(x, y)] = Herd(c)
                except ValueError:
                    continue
        return cls((width, height), cucumbers)

    def step(self) -> Seabed:
        """Move the east herd, then the south herd."""
        width, height = self.size
        moved: dict[Coord, Herd] = {}
        for x, y in self.herd(Herd.EAST):
            target = ((x + 1) % width, y)
            moved[(x, y) if target in self.cucumbers else target] = Herd.EAST
        for x, y in self.herd(Herd.SOUTH):
            target = (x, (y + 1) % height)
            blocked = target in moved or self.cucumbers.get(target) is Herd.SOUTH
            moved[(x, y) if blocked else target] = Herd.SOUTH
        return Seabed(self.size, moved)

    def herd(self, herd: Herd) -> list[Coord]:
        return sorted(coord for coord, kind in self.cucumbers.items() if kind is herd)

    def __iter__(self) -> Iterator[Seabed]:
        """Yield each following state until nothing moves any more."""
        state = self
        while True:
            following = state.step()
            if following == state:
                return
            state = following
            yield state

    def __str__(self) -> str:
        width, height = self.size
        return "".join(
            "".join(
                self.cucumbers[(x, y)].value if (x, y) in self.cucumbers else "."
                for x in range(width)
            )
            + "\n"
            for y in range(height)
        )


def steps_until_still(seabed: Seabed) -> int:
    """The first step on which no cucumber moves."""
    return sum(1 for _ in seabed) + 1


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Animate the sea cucumbers on standard input until they stop."
    )
    parser.add_argument(
        "--delay", type=float, default=0.033, help="seconds between frames"
    )
    args = parser.parse_args(argv)
    seabed = Seabed.parse(sys.stdin)
    print(f"Initial state:\n{seabed}")
    step = 0
    for state in seabed:
        step += 1
        print(_CLEAR_SCREEN, end="")
        print(f"After {step} step{'' if step == 1 else 's'}:\n{state}")
        time.sleep(args.delay)
    print(f"They stop moving after {step + 1} steps")
    return 0