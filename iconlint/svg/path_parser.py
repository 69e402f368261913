"""Path-data parser — tokenizes a `d` attribute into typed segments.

Each command letter maps to a fixed arity. Implicit repetition
(``l1 1 2 2``) is expanded into one segment per operand group; extra pairs
after a move become line commands, as SVG renders them.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

from iconlint.utils.math_helpers import format_number

# Characters allowed in icon path data; `+` and `e`/`E` are accepted so
# scientific notation survives parsing.
_ALLOWED_RE = re.compile(r"^[A-Za-z0-9,.+ -]*$")
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_SEPARATOR_RE = re.compile(r"[\s,]*")
_FLAG_RE = re.compile(r"[01]")


class MalformedPathError(ValueError):
    """Path data that cannot be tokenized into valid segments."""

    def __init__(self, message: str, fragment: str = "") -> None:
        super().__init__(f"{message}: {fragment!r}" if fragment else message)
        self.fragment = fragment


class Command(str, enum.Enum):
    MOVE_ABS = "M"
    MOVE_REL = "m"
    LINE_ABS = "L"
    LINE_REL = "l"
    HORIZ_ABS = "H"
    HORIZ_REL = "h"
    VERT_ABS = "V"
    VERT_REL = "v"
    CUBIC_ABS = "C"
    CUBIC_REL = "c"
    SMOOTH_CUBIC_ABS = "S"
    SMOOTH_CUBIC_REL = "s"
    QUAD_ABS = "Q"
    QUAD_REL = "q"
    SMOOTH_QUAD_ABS = "T"
    SMOOTH_QUAD_REL = "t"
    ARC_ABS = "A"
    ARC_REL = "a"
    CLOSE = "Z"

    @property
    def arity(self) -> int:
        return _ARITY[self.value.upper()]

    @property
    def is_relative(self) -> bool:
        return self.value.islower()

    @property
    def absolute(self) -> Command:
        return Command(self.value.upper())

    @property
    def is_straight(self) -> bool:
        return self.value in "MmLlHhVv"


_ARITY = {"M": 2, "L": 2, "H": 1, "V": 1, "C": 6, "S": 4, "Q": 4, "T": 2, "A": 7, "Z": 0}


@dataclass(frozen=True)
class Segment:
    command: Command
    operands: tuple[float, ...] = ()

    def __post_init__(self) -> None:
        if len(self.operands) != self.command.arity:
            raise MalformedPathError(
                f"{self.command.value} takes {self.command.arity} operands, got {len(self.operands)}",
                str(self),
            )

    @property
    def end(self) -> tuple[float, float] | None:
        """Final coordinate pair as written (None for H, V and Z)."""
        if self.command.arity < 2:
            return None
        return (self.operands[-2], self.operands[-1])

    def __str__(self) -> str:
        return self.command.value + " ".join(format_number(n) for n in self.operands)


def parse_path(d: str) -> list[Segment]:
    """Parse path data into an ordered list of segments."""
    if not _ALLOWED_RE.match(d):
        bad = next(ch for ch in d if not _ALLOWED_RE.match(ch))
        raise MalformedPathError("Unexpected character in path data", bad)

    segments: list[Segment] = []
    pos = _skip_separators(d, 0)
    if pos >= len(d):
        raise MalformedPathError("Path data is empty")

    while pos < len(d):
        letter = d[pos]
        try:
            command = Command("Z" if letter == "z" else letter)
        except ValueError:
            raise MalformedPathError("Unknown command", d[pos : pos + 8]) from None
        if not segments and command not in (Command.MOVE_ABS, Command.MOVE_REL):
            raise MalformedPathError("Path must start with a move command", d[pos : pos + 8])

        start = pos
        pos = _skip_separators(d, pos + 1)
        operands: list[float] = []
        while pos < len(d) and not d[pos].isalpha():
            is_flag = command.arity == 7 and len(operands) % 7 in (3, 4)
            value, pos = _read_number(d, pos, is_flag)
            operands.append(value)
            pos = _skip_separators(d, pos)

        segments.extend(_group(command, operands, d[start:pos].strip()))

    return segments


def _skip_separators(d: str, pos: int) -> int:
    return _SEPARATOR_RE.match(d, pos).end()


def _read_number(d: str, pos: int, is_flag: bool) -> tuple[float, int]:
    match = (_FLAG_RE if is_flag else _NUMBER_RE).match(d, pos)
    if match is None:
        raise MalformedPathError("Invalid number", d[pos : pos + 8])
    return float(match.group(0)), match.end()


def _group(command: Command, operands: list[float], fragment: str) -> list[Segment]:
    arity = command.arity
    if arity == 0:
        if operands:
            raise MalformedPathError("Close path takes no operands", fragment)
        return [Segment(command)]
    if not operands or len(operands) % arity:
        raise MalformedPathError(
            f"{command.value} expects a multiple of {arity} operands, got {len(operands)}",
            fragment,
        )

    grouped = []
    for i in range(0, len(operands), arity):
        cmd = command
        if i and command is Command.MOVE_ABS:
            cmd = Command.LINE_ABS
        elif i and command is Command.MOVE_REL:
            cmd = Command.LINE_REL
        grouped.append(Segment(cmd, tuple(operands[i : i + arity])))
    return grouped
