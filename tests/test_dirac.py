import pytest

from submarine.dirac import (
    ROLLS,
    Player,
    PracticeResult,
    count_wins,
    main,
    parse_start_position,
    practice_game,
)


def test_player_str_format():
    assert str(Player(3, 5)) == "[pos:3,score:5]"


def test_roll_full_lap_returns_to_same_space():
    player = Player(7, 4)
    moved = player.roll(10)
    assert moved.pos == 7
    assert moved.score == 4 + 7


@pytest.mark.parametrize("start", range(1, 11))
@pytest.mark.parametrize("amount", range(1, 30))
def test_roll_stays_on_board_and_adds_landing_space(start, amount):
    moved = Player(start).roll(amount)
    assert 1 <= moved.pos <= 10
    assert moved.score == moved.pos
    assert (moved.pos - start - amount) % 10 == 0


def test_roll_does_not_mutate():
    player = Player(2)
    player.roll(5)
    assert player == Player(2, 0)


def test_practice_game_worked_example():
    outcome = practice_game(4, 8)
    assert outcome.result == 739785


def test_practice_game_invariants():
    outcome = practice_game(8, 4)
    assert isinstance(outcome, PracticeResult)
    winner = outcome.players[outcome.winner - 1]
    loser = outcome.players[2 - outcome.winner]
    assert winner.score >= 1000
    assert loser.score < 1000
    assert outcome.loser_score == loser.score
    assert outcome.dice_rolls % 3 == 0
    assert outcome.dice_rolls == 3 * len(outcome.turns)
    assert outcome.result == loser.score * outcome.dice_rolls


def test_practice_game_first_turns_use_sequential_die():
    outcome = practice_game(8, 4)
    assert outcome.turns[0][0] == 1
    assert outcome.turns[0][1] == (1, 2, 3)
    assert outcome.turns[1][0] == 2
    assert outcome.turns[1][1] == (4, 5, 6)
    assert outcome.turns[0][2] == Player(8).roll(1 + 2 + 3)


def test_practice_die_wraps_after_hundred():
    outcome = practice_game(8, 4)
    all_rolls = [r for _, rolls, _ in outcome.turns for r in rolls]
    assert all(1 <= r <= 100 for r in all_rolls)
    assert all_rolls[99] == 100
    assert all_rolls[100] == 1


def test_count_wins_worked_example():
    assert count_wins(Player(4), Player(8)) == (444356092776315, 341960390180808)


def test_count_wins_low_target_first_player_always_wins():
    wins = count_wins(Player(1), Player(1), winning_score=1)
    assert wins == (sum(times for times, _ in ROLLS), 0)


def test_count_wins_first_turn_always_reaches_target():
    # From space 1 every roll of 3..9 lands on 4..10, so a target of 4 is always met.
    assert count_wins(Player(1), Player(10), 4) == (27, 0)


@pytest.mark.parametrize("text", ["1", "10", "5"])
def test_parse_start_position_valid(text):
    assert parse_start_position(text) == int(text)


@pytest.mark.parametrize("text", ["0", "11", "abc", "", "-3"])
def test_parse_start_position_invalid(text):
    with pytest.raises(ValueError, match="Invalid start position"):
        parse_start_position(text)


def test_main_rejects_bad_position(capsys):
    assert main(["0", "4"]) == 1
    assert "Invalid start position" in capsys.readouterr().err


def test_main_practice_prints_result(capsys):
    assert main(["4", "8", "--practice"]) == 0
    out = capsys.readouterr().out
    assert "Result is 739785" in out
    assert "Player 1 starts at 4" in out