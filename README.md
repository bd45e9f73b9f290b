# submarine

Command-line solvers for a collection of submarine-themed puzzles. Most
commands read their puzzle input from standard input and print the answer;
the dice game takes its start positions as arguments.

## Installation

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Commands

| Command | What it does |
| --- | --- |
| `submarine-scanners` | Aligns overlapping beacon scanner reports (at least 12 shared beacons), prints each overlap found, the number of distinct beacons and the largest Manhattan distance between two scanners. |
| `submarine-trench` | Reads an enhancement algorithm line, a blank line and an image, runs 50 rounds of enhancement and prints the number of lit pixels. |
| `submarine-dirac START1 START2` | Counts the universes each player wins in with the three-sided Dirac die (first to 21). With `--practice`, plays the game with the deterministic 100-sided die to 1000 points instead and prints every turn and the result. |
| `submarine-reactor` | Applies `on`/`off` reboot steps to cuboids and prints the number of cubes left on and how many disjoint cuboids hold them. |
| `submarine-alu [MODEL]` | Parses an ALU program and runs it with the fourteen digits of `MODEL` as input (default `79997391969649`), then prints the registers. |
| `submarine-amphipods` | Finds the cheapest way to sort amphipods into their rooms and prints every step with the energy spent so far. Rooms may be any depth; the input needs the same number of letters of each kind. |
| `submarine-cucumbers` | Animates the sea cucumber herds in the terminal until they stop, then reports the first step on which nothing moves. `--delay` sets the seconds between frames (default 0.033). |

Examples:

    submarine-scanners < scanners.txt
    submarine-trench < image.txt
    submarine-dirac 4 8
    submarine-dirac 4 8 --practice
    submarine-reactor < reboot.txt
    submarine-alu < monad.txt
    submarine-alu 13579246899999 < monad.txt
    submarine-amphipods < burrow.txt
    submarine-cucumbers --delay 0 < seabed.txt

Start positions for `submarine-dirac` must be between 1 and 10. Lines of an
ALU program that start with `#` are skipped. Commands print a message to
standard error and exit with status 1 on invalid input.

## Library use

Each puzzle lives in its own module:

- `submarine.coords`: `Coord`, `Facing`, `Rotation`, `inverse_flip`
- `submarine.scanners`: `parse_scanners`, `overlaps`, `build_mapping`, `convert_coordinate`, `count_beacons`, `max_scanner_distance`
- `submarine.trench`: `Image`, `parse_input`
- `submarine.dirac`: `Player`, `practice_game`, `count_wins`, `parse_start_position`
- `submarine.reactor`: `Cuboid`, `Instruction`, `parse_instructions`, `run`, `cubes_on`
- `submarine.alu`: `Program`, `Instruction`, `State`, `Register`, `Op`, `fourteen_digits`, and the errors `ParseError`, `ExecutionError`, `EndOfInput`, `DivideByZero`, `InvalidMod`
- `submarine.burrow`: `Burrow`, `Position`, `Kind`
- `submarine.amphipods`: `State`, `parse_state`, `find_lowest_cost`
- `submarine.cucumbers`: `Seabed`, `Herd`, `steps_until_still`

For instance:

    from submarine.coords import Coord
    from submarine.dirac import Player, count_wins
    from submarine.reactor import parse_instructions, run, cubes_on

    print(Coord.from_str("1,2,3").manhattan_distance(Coord(0, 0, 0)))
    print(count_wins(Player(4), Player(8)))

    with open("reboot.txt") as handle:
        cuboids = run(parse_instructions(handle))
    print(cubes_on(cuboids))

## What it does not do

- `submarine-alu` only runs a program on one model number; it does not
  search for valid model numbers. Intermediate `z` stacks are logged at
  debug level through the `submarine.alu` logger, but no command-line option
  turns that logging on.
- `submarine-trench` always runs 50 rounds; the count is not configurable.
- `submarine-reactor` counts every cube, without limiting the region.