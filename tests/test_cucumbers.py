from itertools import islice

from submarine.cucumbers import Herd, Seabed, steps_until_still

GRID = [
    "v...>>.vv>",
    ".vv>>.vv..",
    ">>.>v>...v",
]


def test_round_trip():
    seabed = Seabed.parse(GRID)
    assert str(seabed) == "".join(line + "\n" for line in GRID)
    assert seabed.size == (len(GRID[0]), len(GRID))


def test_row_example():
    seabed = Seabed.parse(["...>>>>>..."])
    first = seabed.step()
    assert str(first) == "...>>>>.>..\n"
    assert str(first.step()) == "...>>>.>.>.\n"


def test_iteration_matches_step():
    seabed = Seabed.parse(["...>>>>>..."])
    states = list(islice(iter(seabed), 2))
    assert states[0] == seabed.step()
    assert states[1] == seabed.step().step()


def test_cucumbers_are_conserved():
    seabed = Seabed.parse(GRID)
    east = len(seabed.herd(Herd.EAST))
    south = len(seabed.herd(Herd.SOUTH))
    for state in islice(iter(seabed), 5):
        assert len(state.herd(Herd.EAST)) == east
        assert len(state.herd(Herd.SOUTH)) == south
        assert state.size == seabed.size


def test_south_wraps_around():
    seabed = Seabed.parse(["v", "."])
    moved = seabed.step()
    assert moved != seabed
    assert moved.step() == seabed


def test_herd_lists_coordinates():
    seabed = Seabed.parse([">v", ".>"])
    assert seabed.herd(Herd.EAST) == [(0, 0), (1, 1)]
    assert seabed.herd(Herd.SOUTH) == [(1, 0)]


def test_blocked_seabed_stops_at_once():
    seabed = Seabed.parse([">v"])
    assert seabed.step() == seabed
    assert list(seabed) == []
    assert steps_until_still(seabed) == 1


def test_iteration_ends_in_still_state():
    seabed = Seabed.parse(["..>>", ">>>>", "vvvv"])
    states = list(seabed)
    final = states[-1] if states else seabed
    assert final.step() == final
    assert steps_until_still(seabed) == len(states) + 1