"""Dirac Dice: a deterministic practice game and the quantum version."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from functools import lru_cache
from itertools import cycle, islice

BOARD_SIZE = 10
PRACTICE_TARGET = 1000
WINNING_SCORE = 21

# (number of universes, total of three rolls of a three-sided die)
ROLLS: tuple[tuple[int, int], ...] = (
    (1, 3),
    (3, 4),
    (6, 5),
    (7, 6),
    (6, 7),
    (3, 8),
    (1, 9),
)


@dataclass(frozen=True)
class Player:
    """A pawn on the circular board and the score it has collected."""

    pos: int
    score: int = 0

    def roll(self, amount: int) -> Player:
        """Move ``amount`` spaces and add the landing space to the score."""
        pos = (self.pos + amount - 1) % BOARD_SIZE + 1
        return Player(pos, self.score + pos)

    def __str__(self) -> str:
        return f"[pos:{self.pos},score:{self.score}]"


@dataclass(frozen=True)
class PracticeResult:
    """Outcome of a game played with the deterministic 100-sided die.

    ``turns`` holds, per turn, the 1-based player number, the three rolls
    and the player after moving.
    """

    winner: int
    dice_rolls: int
    players: tuple[Player, Player]
    turns: tuple[tuple[int, tuple[int, int, int], Player], ...]

    @property
    def loser_score(self) -> int:
        return self.players[2 - self.winner].score

    @property
    def result(self) -> int:
        return self.loser_score * self.dice_rolls


def practice_game(start1: int, start2: int) -> PracticeResult:
    """Play until someone reaches 1000 points with the deterministic die."""
    players = [Player(start1), Player(start2)]
    die = cycle(range(1, 101))
    turns = []
    dice_rolls = 0
    current = 0
    while True:
        rolls = tuple(islice(die, 3))
        dice_rolls += 3
        players[current] = players[current].roll(sum(rolls))
        turns.append((current + 1, rolls, players[current]))
        if players[current].score >= PRACTICE_TARGET:
            return PracticeResult(
                winner=current + 1,
                dice_rolls=dice_rolls,
                players=(players[0], players[1]),
                turns=tuple(turns),
            )
        current = 1 - current


def count_wins(
    player1: Player, player2: Player, winning_score: int = WINNING_SCORE
) -> tuple[int, int]:
    """Count the universes each player wins in with the Dirac die."""

    @lru_cache(maxsize=None)
    def play(first: Player, second: Player) -> tuple[int, int]:
        wins1 = wins2 = 0
        for times1, roll1 in ROLLS:
            moved1 = first.roll(roll1)
            if moved1.score >= winning_score:
                wins1 += times1
                continue
            for times2, roll2 in ROLLS:
                moved2 = second.roll(roll2)
                if moved2.score >= winning_score:
                    wins2 += times1 * times2
                else:
                    sub1, sub2 = play(moved1, moved2)
                    wins1 += times1 * times2 * sub1
                    wins2 += times1 * times2 * sub2
        return wins1, wins2

    return play(player1, player2)


def parse_start_position(text: str) -> int:
    """Parse a starting space between 1 and 10."""
    try:
        pos = int(text)
    except ValueError:
        pos = 0
    if not 1 <= pos <= BOARD_SIZE:
        raise ValueError(f"Invalid start position {text}, expected 1 to {BOARD_SIZE}")
    return pos


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Play Dirac Dice.")
    parser.add_argument("start1", help="starting space of player 1")
    parser.add_argument("start2", help="starting space of player 2")
    parser.add_argument(
        "--practice",
        action="store_true",
        help="play the practice game with the deterministic die",
    )
    args = parser.parse_args(argv)
    try:
        starts = [parse_start_position(args.start1), parse_start_position(args.start2)]
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1

    for number, pos in enumerate(starts, start=1):
        print(f"Player {number} starts at {pos}")

    if args.practice:
        outcome = practice_game(*starts)
        for number, rolls, player in outcome.turns:
            print(
                f"Player {number} rolls {rolls[0]}+{rolls[1]}+{rolls[2]} and moves to "
                f"space {player.pos} for a total score of {player.score}"
            )
        print(f"Player {outcome.winner} wins after {outcome.dice_rolls} dice rolls.")
        print(f"Result is {outcome.result}")
        return 0

    wins1, wins2 = count_wins(Player(starts[0]), Player(starts[1]))
    print(f"Player 1 wins in {wins1} universes")
    print(f"Player 2 wins in {wins2} universes")
    return 0