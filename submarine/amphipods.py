"""Sorting amphipods into their rooms with the least energy."""

from __future__ import annotations

import argparse
import heapq
import itertools
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace

from .burrow import HALL_SPOTS, Burrow, Kind, Position

_KINDS = tuple(Kind)

Move = tuple[int, Position, int]


@dataclass(frozen=True)
class State:
    """Where every amphipod stands and the energy spent to get there.

    Amphipods are numbered by kind: the first quarter of ``positions`` are
    Amber, the next Bronze, then Copper, then Desert.
    """

    positions: tuple[Position, ...]
    energy: int = 0

    def __post_init__(self) -> None:
        if not self.positions or len(self.positions) % len(_KINDS):
            raise ValueError("need the same number of amphipods of each kind")

    @property
    def depth(self) -> int:
        return len(self.positions) // len(_KINDS)

    def _kind_of(self, index: int) -> Kind:
        return _KINDS[index // self.depth]

    def _occupants(self) -> dict[Position, int]:
        occupants: dict[Position, int] = {}
        for index, position in enumerate(self.positions):
            occupants.setdefault(position, index)
        return occupants

    def is_final(self) -> bool:
        """Whether every amphipod is in its own room."""
        return all(
            position.kind is self._kind_of(index)
            for index, position in enumerate(self.positions)
        )

    def kind_in(self, position: Position) -> Kind | None:
        index = self._occupants().get(position)
        return None if index is None else self._kind_of(index)

    def room_has_no_strangers(self, kind: Kind) -> bool:
        """Whether the room of ``kind`` holds only amphipods of that kind."""
        return all(
            self._kind_of(index) is kind
            for index, position in enumerate(self.positions)
            if position.kind is kind
        )

    def room_is_complete(self, kind: Kind) -> bool:
        """Whether every amphipod of ``kind`` is already in its room."""
        return all(
            position.kind is kind
            for index, position in enumerate(self.positions)
            if self._kind_of(index) is kind
        )

    def would_move_to(self, index: int, target: Position) -> bool:
        """Whether the rules allow amphipod ``index`` to head for ``target``."""
        origin = self.positions[index]
        if origin == target:
            return False
        if not target.is_hall:
            return target.kind is self._kind_of(index) and self.room_has_no_strangers(
                target.kind
            )
        if not origin.is_hall:
            return not self.room_is_complete(origin.kind)
        return False

    def _reachable(self, index: int, target: Position, burrow: Burrow) -> int | None:
        if not self.would_move_to(index, target):
            return None
        cost, route = burrow.path(self.positions[index], target)
        occupied = self._occupants()
        if any(spot in occupied for spot in route):
            return None
        return cost

    def available_moves(self, burrow: Burrow) -> list[Move]:
        """Every allowed move as (amphipod, target, steps), fewest steps first."""
        moves: list[Move] = []
        for index in range(len(self.positions)):
            for target in burrow.positions():
                cost = self._reachable(index, target, burrow)
                if cost is not None:
                    moves.append((index, target, cost))
        moves.sort(key=lambda move: move[2])
        return moves

    def do_move(self, index: int, target: Position, burrow: Burrow) -> State:
        cost, _ = burrow.path(self.positions[index], target)
        positions = list(self.positions)
        positions[index] = target
        spent = self._kind_of(index).cost_multiplier() * cost
        return State(tuple(positions), self.energy + spent)

    def render(self, burrow: Burrow) -> str:
        """Draw the burrow with each amphipod's letter."""

        def cell(position: Position) -> str:
            kind = self.kind_in(position)
            return "." if kind is None else kind.to_char()

        hall = [cell(Position.hall(n)) for n in range(1, HALL_SPOTS + 1)]
        lines = [
            "#############",
            f"#{hall[0]}{hall[1]}.{hall[2]}.{hall[3]}.{hall[4]}.{hall[5]}{hall[6]}#",
        ]
        for side in range(burrow.depth):
            cells = "#".join(
                cell(Position.room(kind, side, burrow.depth)) for kind in _KINDS
            )
            lines.append(f"###{cells}###" if side == 0 else f"  #{cells}#")
        lines.append("  #########")
        return "".join(f"{line}\n" for line in lines)


def parse_state(lines: Iterable[str]) -> State:
    """Read the rooms' letters row by row, top row first."""
    kinds = [
        Kind.from_char(c)
        for line in lines
        for c in line
        if c.isascii() and c.isalpha()
    ]
    if not kinds or len(kinds) % len(_KINDS):
        raise ValueError(
            f"Expected a multiple of {len(_KINDS)} letters, got {len(kinds)}"
        )
    depth = len(kinds) // len(_KINDS)
    free = {kind: list(range(k * depth, (k + 1) * depth)) for k, kind in enumerate(_KINDS)}
    positions: list[Position | None] = [None] * len(kinds)
    for slot, kind in enumerate(kinds):
        if not free[kind]:
            raise ValueError(f"Too many amphipods of kind {kind}")
        room = _KINDS[slot % len(_KINDS)]
        positions[free[kind].pop(0)] = Position.room(room, slot // len(_KINDS), depth)
    return State(tuple(positions))


def find_lowest_cost(start: State, burrow: Burrow) -> list[State]:
    """The cheapest sequence of states from ``start`` to the sorted burrow."""
    if start.is_final():
        return [replace(start, energy=0)]
    prev: dict[tuple[Position, ...], tuple[int, tuple[Position, ...] | None]] = {
        start.positions: (start.energy, None)
    }
    counter = itertools.count()
    queue = [(start.energy, next(counter), start)]
    best: State | None = None
    while queue:
        _, _, current = heapq.heappop(queue)
        for index, target, _ in current.available_moves(burrow):
            state = current.do_move(index, target, burrow)
            if best is not None and state.energy > best.energy:
                continue
            if state.is_final():
                best = state
                prev[state.positions] = (state.energy, current.positions)
            elif prev.get(state.positions, (float("inf"), None))[0] > state.energy:
                prev[state.positions] = (state.energy, current.positions)
                heapq.heappush(queue, (state.energy, next(counter), state))
    if best is None:
        raise ValueError("the amphipods cannot be sorted")

    chain: list[State] = []
    positions: tuple[Position, ...] | None = best.positions
    while positions is not None:
        energy, before = prev[positions]
        chain.append(State(positions, energy))
        positions = before
    chain.reverse()
    chain[0] = replace(chain[0], energy=0)
    return chain


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Find the cheapest way to sort the amphipods on standard input."
    )
    parser.parse_args(argv)
    try:
        state = parse_state(sys.stdin)
        burrow = Burrow(state.depth)
        steps = find_lowest_cost(state, burrow)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    print(f"Start:\n{state.render(burrow)}")
    for step in steps:
        print(f"{step.render(burrow)}Energy: {step.energy}")
    return 0