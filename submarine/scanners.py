"""Assemble a beacon map from overlapping scanner reports."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from .coords import FLIPS, Coord, Facing, Rotation, inverse_flip

MIN_OVERLAP = 12

Mapping = dict[tuple[int, int], tuple[Coord, Facing, Rotation]]


@dataclass(frozen=True)
class Overlap:
    """How a second scanner's report lines up with a first one.

    A point ``p`` of the second scanner is ``p.rotate(facing, rotation) + offset``
    in the first scanner's space.
    """

    beacons: list[Coord]
    facing: Facing
    rotation: Rotation
    offset: Coord


def parse_scanners(lines: Iterable[str]) -> list[list[Coord]]:
    """Split a report into one list of beacons per scanner."""
    scanners: list[list[Coord]] = []
    coords: list[Coord] = []
    for raw in lines:
        line = raw.rstrip("\r\n")
        if not line and coords:
            scanners.append(coords)
            coords = []
        elif line.startswith("---"):
            continue
        else:
            try:
                coords.append(Coord.from_str(line))
            except ValueError:
                continue
    if coords:
        scanners.append(coords)
    return scanners


def overlaps(beacons0: Sequence[Coord], beacons1: Sequence[Coord]) -> Overlap | None:
    """Find an orientation where at least twelve beacons coincide."""
    for c0 in beacons0:
        relative0 = {c - c0 for c in beacons0}
        for facing, rotation in FLIPS:
            flipped = [c.rotate(facing, rotation) for c in beacons1]
            for c1 in flipped:
                common = relative0 & {c - c1 for c in flipped}
                if len(common) >= MIN_OVERLAP:
                    return Overlap(
                        beacons=sorted(c + c0 for c in common),
                        facing=facing,
                        rotation=rotation,
                        offset=c0 - c1,
                    )
    return None


def _pairwise_overlaps(
    scanners: Sequence[Sequence[Coord]],
) -> Iterator[tuple[int, int, Overlap]]:
    for i, first in enumerate(scanners):
        for j in range(i + 1, len(scanners)):
            found = overlaps(first, scanners[j])
            if found is not None:
                yield i, j, found


def _record(mapping: Mapping, i: int, j: int, overlap: Overlap) -> None:
    mapping[(j, i)] = (overlap.offset, overlap.facing, overlap.rotation)
    inv_facing, inv_rotation = inverse_flip(overlap.facing, overlap.rotation)
    inv_base = (-overlap.offset).rotate(inv_facing, inv_rotation)
    mapping[(i, j)] = (inv_base, inv_facing, inv_rotation)


def build_mapping(scanners: Sequence[Sequence[Coord]]) -> Mapping:
    """Map (source, target) scanner pairs to the transform between them."""
    mapping: Mapping = {}
    for i, j, found in _pairwise_overlaps(scanners):
        _record(mapping, i, j, found)
    return mapping


def convert_coordinate(
    coord: Coord, source: int, target: int, mapping: Mapping
) -> Coord | None:
    """Express a point of scanner ``source`` in the space of ``target``."""
    return _convert(coord, source, target, mapping, frozenset())


def _convert(
    coord: Coord, source: int, target: int, mapping: Mapping, visited: frozenset[int]
) -> Coord | None:
    if source == target:
        return coord
    direct = mapping.get((source, target))
    if direct is not None:
        base, facing, rotation = direct
        return coord.rotate(facing, rotation) + base
    for start, step in list(mapping):
        if start != source or step in visited:
            continue
        seen = visited | {step}
        intermediate = _convert(coord, source, step, mapping, seen)
        if intermediate is None:
            continue
        result = _convert(intermediate, step, target, mapping, seen)
        if result is not None:
            return result
    return None


def count_beacons(scanners: Sequence[Sequence[Coord]], mapping: Mapping) -> int:
    """Count distinct beacons across all scanners."""
    target = len(scanners) - 1
    beacons: set[Coord] = set()
    for index, coords in enumerate(scanners):
        for coord in coords:
            converted = convert_coordinate(coord, index, target, mapping)
            if converted is None:
                raise ValueError(f"cannot convert from scanner {index} to {target}")
            beacons.add(converted)
    return len(beacons)


def max_scanner_distance(scanners: Sequence[Sequence[Coord]], mapping: Mapping) -> int:
    """Largest Manhattan distance between any two scanners."""
    positions = []
    for index in range(len(scanners)):
        position = convert_coordinate(Coord(), index, 0, mapping)
        if position is None:
            raise ValueError(f"cannot locate scanner {index}")
        positions.append(position)
    return max(
        (a.manhattan_distance(b) for a in positions for b in positions), default=0
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Read scanner reports on standard input and map the beacons."
    )
    parser.parse_args(argv)
    scanners = parse_scanners(sys.stdin)
    mapping: Mapping = {}
    for i, j, found in _pairwise_overlaps(scanners):
        print(
            f"Scanner {i} overlaps with {j}: relative "
            f"{found.offset}{found.facing}{found.rotation} ({len(found.beacons)} beacons)"
        )
        _record(mapping, i, j, found)
    try:
        beacons = count_beacons(scanners, mapping)
        print(f"beacons: {beacons}")
        print(f"Max distance {max_scanner_distance(scanners, mapping)}")
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    return 0