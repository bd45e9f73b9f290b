import io

import pytest

from submarine.amphipods import State, find_lowest_cost, main, parse_state
from submarine.burrow import Burrow, Kind, Position

SWAPPED = """\
#############
#...........#
###B#A#C#D###
  #A#B#C#D#
  #########
"""

SOLVED = """\
#############
#...........#
###A#B#C#D###
  #A#B#C#D#
  #########
"""

SWAPPED_DEEP = """\
#############
#...........#
###B#A#C#D###
  #A#B#C#D#
  #A#B#C#D#
  #A#B#C#D#
  #########
"""


@pytest.fixture
def burrow():
    return Burrow(2)


@pytest.fixture
def swapped():
    return parse_state(SWAPPED.splitlines())


def test_parse_assigns_positions(swapped):
    assert swapped.depth == 2
    assert swapped.positions[0] == Position.room(Kind.BRONZE, 0)
    assert swapped.positions[1] == Position.room(Kind.AMBER, 1)
    assert swapped.positions[2] == Position.room(Kind.AMBER, 0)
    assert swapped.positions[3] == Position.room(Kind.BRONZE, 1)
    assert swapped.energy == 0


def test_parse_infers_depth():
    assert parse_state(SWAPPED_DEEP.splitlines()).depth == 4


@pytest.mark.parametrize(
    "text",
    ["ABC", "ABCDE", "AACD ABCD AAAA", "AABB CCDD AEDD CCBB"],
)
def test_parse_errors(text):
    with pytest.raises(ValueError):
        parse_state([text])


def test_render_round_trip(swapped, burrow):
    text = swapped.render(burrow)
    assert text == SWAPPED
    assert parse_state(text.splitlines()) == swapped


def test_render_round_trip_deep():
    state = parse_state(SWAPPED_DEEP.splitlines())
    assert state.render(Burrow(4)) == SWAPPED_DEEP


def test_is_final(swapped):
    assert parse_state(SOLVED.splitlines()).is_final()
    assert not swapped.is_final()


def test_kind_in(swapped):
    assert swapped.kind_in(Position.room(Kind.AMBER, 0)) is Kind.BRONZE
    assert swapped.kind_in(Position.room(Kind.DESERT, 1)) is Kind.DESERT
    assert swapped.kind_in(Position.hall(1)) is None


def test_room_checks(swapped):
    assert not swapped.room_has_no_strangers(Kind.AMBER)
    assert swapped.room_has_no_strangers(Kind.COPPER)
    assert not swapped.room_is_complete(Kind.AMBER)
    assert swapped.room_is_complete(Kind.DESERT)


def test_would_move_to(swapped, burrow):
    hall = Position.hall(4)
    # bronze at the top of the amber room may leave for the hallway
    assert swapped.would_move_to(2, hall)
    # but not into a room of another kind
    assert not swapped.would_move_to(2, Position.room(Kind.COPPER, 0))
    # nor stay where it is
    assert not swapped.would_move_to(2, swapped.positions[2])
    # nobody leaves a complete room
    assert not swapped.would_move_to(6, hall)
    moved = swapped.do_move(2, hall, burrow)
    # hallway to hallway is never allowed
    assert not moved.would_move_to(2, Position.hall(1))


def test_would_move_into_own_room_after_strangers_leave(swapped, burrow):
    moved = swapped.do_move(0, Position.hall(4), burrow)
    assert moved.room_has_no_strangers(Kind.BRONZE)
    assert moved.would_move_to(2, Position.room(Kind.BRONZE, 0))


def test_do_move_costs_energy(swapped, burrow):
    target = Position.hall(1)
    steps, _ = burrow.path(swapped.positions[2], target)
    moved = swapped.do_move(2, target, burrow)
    assert moved.energy == Kind.BRONZE.cost_multiplier() * steps
    assert moved.positions[2] == target
    assert moved.positions[:2] == swapped.positions[:2]


def test_available_moves_sorted_and_clear(swapped, burrow):
    moves = swapped.available_moves(burrow)
    costs = [cost for _, _, cost in moves]
    assert costs == sorted(costs)
    assert moves
    occupied = set(swapped.positions)
    for index, target, cost in moves:
        assert swapped.would_move_to(index, target)
        path_cost, route = burrow.path(swapped.positions[index], target)
        assert cost == path_cost
        assert not occupied.intersection(route)


def test_no_moves_when_solved(burrow):
    assert parse_state(SOLVED.splitlines()).available_moves(burrow) == []


def test_find_lowest_cost(swapped, burrow):
    steps = find_lowest_cost(swapped, burrow)
    assert steps[0].positions == swapped.positions
    assert steps[0].energy == 0
    assert steps[-1].is_final()
    assert steps[-1].energy == 46
    energies = [s.energy for s in steps]
    assert energies == sorted(energies)
    for before, after in zip(steps, steps[1:]):
        changed = [
            i for i, (a, b) in enumerate(zip(before.positions, after.positions)) if a != b
        ]
        assert len(changed) == 1


def test_find_lowest_cost_deep_matches_shallow(swapped, burrow):
    deep = parse_state(SWAPPED_DEEP.splitlines())
    steps = find_lowest_cost(deep, Burrow(4))
    assert steps[-1].is_final()
    assert steps[-1].energy == find_lowest_cost(swapped, burrow)[-1].energy


def test_find_lowest_cost_already_solved(burrow):
    solved = parse_state(SOLVED.splitlines())
    assert find_lowest_cost(solved, burrow) == [solved]


def test_state_needs_whole_kinds():
    with pytest.raises(ValueError):
        State((Position.hall(1),) * 3)


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(SWAPPED))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Start:\n" + SWAPPED)
    assert "Energy: 0" in out
    assert out.rstrip().endswith("  #########\nEnergy: 46")


def test_main_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("ABC\n"))
    assert main([]) == 1
    assert "Expected" in capsys.readouterr().err