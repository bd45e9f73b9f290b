"""The amphipod burrow: a hallway above four side rooms, and paths through it."""

from __future__ import annotations

import heapq
from dataclasses import dataclass, field
from enum import Enum
from functools import total_ordering

HALL_SPOTS = 7

# Steps between neighbouring hallway spots that amphipods may stop on.
_HALL_GAPS = (1, 2, 2, 2, 2, 1)
# Steps between a room's top spot and an adjacent hallway spot.
_ROOM_ENTRY = 2
# Steps between two spots inside a room.
_ROOM_STEP = 1


class Kind(Enum):
    """The four amphipod types; each has its own destination room."""

    AMBER = "A"
    BRONZE = "B"
    COPPER = "C"
    DESERT = "D"

    @classmethod
    def from_char(cls, char: str) -> Kind:
        try:
            return cls(char)
        except ValueError:
            raise ValueError(f"No room for {char}") from None

    def to_char(self) -> str:
        return self.value

    def cost_multiplier(self) -> int:
        """Energy spent per step."""
        return _COSTS[self]

    @property
    def order(self) -> int:
        return _KINDS.index(self)

    def __str__(self) -> str:
        return self.value


_KINDS = tuple(Kind)
_COSTS = {Kind.AMBER: 1, Kind.BRONZE: 10, Kind.COPPER: 100, Kind.DESERT: 1000}


@total_ordering
@dataclass(frozen=True)
class Position:
    """A spot in the burrow.

    A hallway spot has no ``kind`` and ``index`` 1 to 7. A room spot has the
    room's ``kind`` and ``index`` 0 at the top, growing downwards.
    """

    kind: Kind | None
    index: int
    room_depth: int = field(default=2, compare=False, repr=False)

    @classmethod
    def hall(cls, number: int) -> Position:
        if not 1 <= number <= HALL_SPOTS:
            raise ValueError(f"no hallway spot {number}")
        return cls(None, number)

    @classmethod
    def room(cls, kind: Kind, side: int, depth: int = 2) -> Position:
        if not 0 <= side < depth:
            raise ValueError(f"no side {side} in a room of depth {depth}")
        return cls(kind, side, depth)

    @property
    def is_hall(self) -> bool:
        return self.kind is None

    def _key(self) -> tuple[int, int, int]:
        if self.kind is None:
            return (0, 0, self.index)
        return (1, self.kind.order, self.index)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self._key() < other._key()

    def _side_name(self) -> str:
        depth = self.room_depth
        if self.index == 0:
            return "Top"
        if self.index == depth - 1:
            return "Bottom"
        if depth == 4:
            return ("MiddleTop", "MiddleBottom")[self.index - 1]
        return f"Middle{self.index}"

    def __str__(self) -> str:
        if self.kind is None:
            return f"Hall::P{self.index}"
        return f"Room::{self.kind.value}::{self._side_name()}"


class Burrow:
    """The layout of a burrow whose rooms are ``depth`` spots deep."""

    def __init__(self, depth: int = 2) -> None:
        if depth < 1:
            raise ValueError("rooms must be at least one spot deep")
        self.depth = depth
        halls = [Position.hall(n) for n in range(1, HALL_SPOTS + 1)]
        rooms = [Position.room(k, s, depth) for k in Kind for s in range(depth)]
        self._positions = tuple(halls + rooms)
        self._edges: dict[Position, dict[Position, int]] = {
            p: {} for p in self._positions
        }
        for (a, b), gap in zip(zip(halls, halls[1:]), _HALL_GAPS):
            self._connect(a, b, gap)
        for k, kind in enumerate(Kind):
            top = Position.room(kind, 0, depth)
            self._connect(halls[k + 1], top, _ROOM_ENTRY)
            self._connect(halls[k + 2], top, _ROOM_ENTRY)
            for side in range(depth - 1):
                self._connect(
                    Position.room(kind, side, depth),
                    Position.room(kind, side + 1, depth),
                    _ROOM_STEP,
                )
        self._paths: dict[tuple[Position, Position], tuple[int, tuple[Position, ...]]] = {}
        for start in self._positions:
            self._shortest_from(start)

    def _connect(self, a: Position, b: Position, steps: int) -> None:
        self._edges[a][b] = steps
        self._edges[b][a] = steps

    def _check(self, position: Position) -> None:
        if position not in self._edges:
            raise ValueError(f"{position} is not in this burrow")

    def positions(self) -> tuple[Position, ...]:
        """Every spot: the hallway left to right, then each room top to bottom."""
        return self._positions

    def neighbours(self, position: Position) -> list[Position]:
        self._check(position)
        return sorted(self._edges[position])

    def distance(self, start: Position, end: Position) -> int:
        """Steps between two directly connected spots."""
        self._check(start)
        self._check(end)
        try:
            return self._edges[start][end]
        except KeyError:
            raise ValueError(f"no distance from {start} to {end}") from None

    def path(self, start: Position, end: Position) -> tuple[int, tuple[Position, ...]]:
        """The cost of the shortest route and the spots on it after ``start``."""
        self._check(start)
        self._check(end)
        if start == end:
            return 0, ()
        return self._paths[(start, end)]

    def _shortest_from(self, start: Position) -> None:
        dist = {start: 0}
        prev: dict[Position, Position] = {}
        heap = [(0, start)]
        done: set[Position] = set()
        while heap:
            cost, here = heapq.heappop(heap)
            if here in done:
                continue
            done.add(here)
            for there, steps in self._edges[here].items():
                alt = cost + steps
                if alt < dist.get(there, alt + 1):
                    dist[there] = alt
                    prev[there] = here
                    heapq.heappush(heap, (alt, there))
        for end in self._positions:
            if end == start:
                continue
            route = [end]
            while prev[route[-1]] != start:
                route.append(prev[route[-1]])
            self._paths[(start, end)] = (dist[end], tuple(reversed(route)))