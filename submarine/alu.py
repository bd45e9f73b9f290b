"""A small four-register arithmetic logic unit."""

from __future__ import annotations

import argparse
import logging
import re
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, replace
from enum import Enum
from functools import reduce

logger = logging.getLogger(__name__)

DEFAULT_MODEL = 79997391969649

_INTEGER = re.compile(r"[+-]?[0-9]+")


class Register(Enum):
    X = "x"
    Y = "y"
    Z = "z"
    W = "w"

    def __str__(self) -> str:
        return self.value


class Op(Enum):
    INP = "inp"
    ADD = "add"
    MUL = "mul"
    DIV = "div"
    MOD = "mod"
    EQL = "eql"

    def __str__(self) -> str:
        return self.value


Argument = "int | Register"


class ParseError(ValueError):
    """An instruction could not be read; ``line`` is 1-based, 0 if unknown."""

    def __init__(self, message: str, line: int = 0) -> None:
        super().__init__(message)
        self.message = message
        self.line = line

    def __str__(self) -> str:
        return f"line {self.line}: {self.message}" if self.line else self.message


class ExecutionError(Exception):
    """The program could not run to the end."""


class EndOfInput(ExecutionError):
    """An ``inp`` instruction found no more input."""


class DivideByZero(ExecutionError):
    """A ``div`` instruction had a zero divisor."""


class InvalidMod(ExecutionError):
    """A ``mod`` instruction had a negative dividend or non-positive divisor."""


@dataclass(frozen=True)
class State:
    """The values of the four registers."""

    x: int = 0
    y: int = 0
    z: int = 0
    w: int = 0

    def __getitem__(self, register: Register) -> int:
        return getattr(self, register.value)

    def with_value(self, register: Register, value: int) -> State:
        return replace(self, **{register.value: value})

    def stack(self) -> list[int]:
        """The base-26 digits of ``z``, most significant first."""
        digits: list[int] = []
        z = self.z
        while z > 0:
            z, digit = divmod(z, 26)
            digits.insert(0, digit)
        return digits

    def __str__(self) -> str:
        return f"x={self.x},y={self.y},z={self.z},w={self.w}"


def _parse_argument(word: str) -> int | Register:
    try:
        return Register(word)
    except ValueError:
        pass
    if _INTEGER.fullmatch(word):
        return int(word)
    raise ParseError(f"Invalid argument '{word}'")


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


@dataclass(frozen=True)
class Instruction:
    """One operation on a register, with an optional second operand."""

    op: Op
    register: Register
    argument: int | Register | None = None

    @classmethod
    def parse(cls, text: str) -> Instruction:
        words = text.split()
        if not words:
            raise ParseError("Empty instruction")
        mnemonic, *rest = words
        args = [_parse_argument(word) for word in rest]
        if mnemonic == Op.INP.value:
            if len(args) != 1:
                raise ParseError(f"Expected 1 argument, got {len(args)}")
            if not isinstance(args[0], Register):
                raise ParseError(
                    f"Expected first argument to be register got {args[0]}"
                )
            return cls(Op.INP, args[0])
        if len(args) != 2:
            raise ParseError(f"Expected 2 arguments, got {len(args)}")
        target, operand = args
        if not isinstance(target, Register):
            raise ParseError(f"Expected first argument to be register got {target}")
        try:
            op = Op(mnemonic)
        except ValueError:
            raise ParseError(f"Unknown instruction {mnemonic}") from None
        return cls(op, target, operand)

    def _operand(self, state: State) -> int:
        if isinstance(self.argument, Register):
            return state[self.argument]
        return self.argument

    def execute(self, state: State, inputs: Iterator[int]) -> State:
        """Run this instruction, taking ``inp`` values from ``inputs``."""
        reg = self.register
        current = state[reg]
        if self.op is Op.INP:
            value = next(inputs, None)
            if value is None:
                raise EndOfInput("end of input")
        else:
            operand = self._operand(state)
            if self.op is Op.ADD:
                value = current + operand
            elif self.op is Op.MUL:
                value = current * operand
            elif self.op is Op.DIV:
                if operand == 0:
                    raise DivideByZero("division by zero")
                value = _truncating_div(current, operand)
            elif self.op is Op.MOD:
                if current < 0 or operand <= 0:
                    raise InvalidMod(f"invalid modulo {current} % {operand}")
                value = current % operand
            else:
                value = int(current == operand)
        result = state.with_value(reg, value)
        if reg is Register.Z and state.z != result.z and result.z % 26 != 0:
            logger.debug("state: %s, stack=%s", result, result.stack())
        return result

    def __str__(self) -> str:
        if self.argument is None:
            return f"{self.op} {self.register}"
        return f"{self.op} {self.register} {self.argument}"


@dataclass(frozen=True)
class Program:
    instructions: tuple[Instruction, ...]

    @classmethod
    def parse(cls, lines: Iterable[str]) -> Program:
        """Read one instruction per line; lines starting with ``#`` are skipped."""
        instructions = []
        for number, raw in enumerate(lines, start=1):
            line = raw.rstrip("\r\n")
            if line.startswith("#"):
                continue
            try:
                instructions.append(Instruction.parse(line))
            except ParseError as error:
                raise ParseError(error.message, line=number) from None
        return cls(tuple(instructions))

    def run(self, inputs: Iterable[int]) -> State:
        feed = iter(inputs)
        return reduce(
            lambda state, instruction: instruction.execute(state, feed),
            self.instructions,
            State(),
        )

    def __str__(self) -> str:
        return "".join(f"{instruction}\n" for instruction in self.instructions)


def fourteen_digits(number: int) -> tuple[int, ...]:
    """The last fourteen decimal digits, most significant first."""
    return tuple((number // 10**power) % 10 for power in range(13, -1, -1))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Run the program on standard input with a model number."
    )
    parser.add_argument("model", nargs="?", type=int, default=DEFAULT_MODEL)
    args = parser.parse_args(argv)
    try:
        program = Program.parse(sys.stdin)
        result = program.run(fourteen_digits(args.model))
    except (ParseError, ExecutionError) as error:
        print(error, file=sys.stderr)
        return 1
    print(f"result: {result}")
    return 0