"""Image enhancement with an infinite background."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

ALGORITHM_SIZE = 512
GENERATIONS = 50


@dataclass(frozen=True)
class Image:
    """A finite window of lit pixels on an infinite uniform background."""

    lines: tuple[tuple[bool, ...], ...]
    background: bool = False

    @property
    def width(self) -> int:
        return len(self.lines[0]) if self.lines else 0

    @property
    def height(self) -> int:
        return len(self.lines)

    def count_ones(self) -> int:
        return sum(sum(row) for row in self.lines)

    def pixel(self, x: int, y: int) -> bool:
        if 0 <= y < self.height and 0 <= x < self.width:
            return self.lines[y][x]
        return self.background

    def pattern9(self, x: int, y: int) -> int:
        """The 9-bit number read from the 3x3 square around (x, y)."""
        value = 0
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                value = (value << 1) | int(self.pixel(x + dx, y + dy))
        return value

    def enhance(self, algorithm: Sequence[bool]) -> Image:
        if len(algorithm) != ALGORITHM_SIZE:
            raise ValueError(f"algorithm must have {ALGORITHM_SIZE} entries")
        background = bool(algorithm[ALGORITHM_SIZE - 1 if self.background else 0])
        lines = tuple(
            tuple(bool(algorithm[self.pattern9(x, y)]) for x in range(-2, self.width + 2))
            for y in range(-2, self.height + 2)
        )
        return Image(lines, background)._trimmed()

    def _trimmed(self) -> Image:
        bg = self.background
        rows = list(self.lines)
        while rows and all(p == bg for p in rows[0]):
            rows.pop(0)
        while rows and all(p == bg for p in rows[-1]):
            rows.pop()
        if not rows:
            return Image((), bg)
        width = len(rows[0])

        def blank(col: int) -> bool:
            return all(row[col] == bg for row in rows)

        front = 0
        while front < width and blank(front):
            front += 1
        back = width
        while back > front and blank(back - 1):
            back -= 1
        return Image(tuple(row[front:back] for row in rows), bg)

    def __str__(self) -> str:
        return "".join(
            "".join("#" if p else "." for p in row) + "\n" for row in self.lines
        )


def parse_input(lines: Iterable[str]) -> tuple[tuple[bool, ...], Image]:
    """Read the algorithm line, a separator line, then the image."""
    it = iter(lines)
    first = next(it, "").rstrip("\r\n")
    algorithm = [False] * ALGORITHM_SIZE
    for i, c in enumerate(first):
        if c in "#.":
            if i >= ALGORITHM_SIZE:
                raise ValueError(f"algorithm longer than {ALGORITHM_SIZE} entries")
            algorithm[i] = c == "#"
    next(it, None)
    rows = []
    for raw in it:
        line = raw.rstrip("\r\n")
        if line:
            rows.append(tuple(c == "#" for c in line))
    return tuple(algorithm), Image(tuple(rows), False)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Enhance the image on standard input and count lit pixels."
    )
    parser.parse_args(argv)
    algorithm, image = parse_input(sys.stdin)
    for _ in range(GENERATIONS):
        image = image.enhance(algorithm)
    print(f"ones: {image.count_ones()}")
    return 0