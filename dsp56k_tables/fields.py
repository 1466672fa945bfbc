"""Bit fields inside 24-bit DSP56300 opcode templates."""

from __future__ import annotations

from dataclasses import dataclass, field as dataclass_field
from enum import Enum
from itertools import groupby

OPCODE_BITS = 24


@dataclass(frozen=True)
class FieldInfo:
    """Position and width of a bit field in an opcode word."""

    bit: int = 0
    length: int = 0
    mask: int = dataclass_field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "mask", (1 << self.length) - 1)

    def extract(self, word: int) -> int:
        """Return the value of this field in ``word``."""
        return (word >> self.bit) & self.mask


@dataclass(frozen=True)
class FieldParseConfig:
    """The template character and run length that identify a field."""

    ch: str
    count: int


class Field(Enum):
    """Every opcode field, keyed by its template character and width."""

    a = FieldParseConfig("a", 1)
    aaa = FieldParseConfig("a", 3)
    aaaa = FieldParseConfig("a", 4)
    aaaaa = FieldParseConfig("a", 5)
    aaaaaa = FieldParseConfig("a", 6)
    aaaaaaaaaaaa = FieldParseConfig("a", 12)
    bbbbb = FieldParseConfig("b", 5)
    CCCC = FieldParseConfig("C", 4)
    d = FieldParseConfig("d", 1)
    dd = FieldParseConfig("d", 2)
    ddd = FieldParseConfig("d", 3)
    dddd = FieldParseConfig("d", 4)
    ddddd = FieldParseConfig("d", 5)
    dddddd = FieldParseConfig("d", 6)
    D = FieldParseConfig("D", 1)
    DDDD = FieldParseConfig("D", 4)
    DDDDD = FieldParseConfig("D", 5)
    DDDDDD = FieldParseConfig("D", 6)
    e = FieldParseConfig("e", 1)
    ee = FieldParseConfig("e", 2)
    EE = FieldParseConfig("E", 2)
    eeeee = FieldParseConfig("e", 5)
    eeeeee = FieldParseConfig("e", 6)
    ff = FieldParseConfig("f", 2)
    F = FieldParseConfig("F", 1)
    ggg = FieldParseConfig("g", 3)
    hhhh = FieldParseConfig("h", 4)
    i = FieldParseConfig("i", 1)
    iiiii = FieldParseConfig("i", 5)
    iiiiii = FieldParseConfig("i", 6)
    iiiiiiii = FieldParseConfig("i", 8)
    J = FieldParseConfig("J", 1)
    JJ = FieldParseConfig("J", 2)
    JJJ = FieldParseConfig("J", 3)
    k = FieldParseConfig("k", 1)
    L = FieldParseConfig("L", 1)
    LL = FieldParseConfig("L", 2)
    mm = FieldParseConfig("m", 2)
    MM = FieldParseConfig("M", 2)
    MMM = FieldParseConfig("M", 3)
    pppppp = FieldParseConfig("p", 6)
    qq = FieldParseConfig("q", 2)
    qqq = FieldParseConfig("q", 3)
    q = FieldParseConfig("q", 1)
    qqqqq = FieldParseConfig("q", 5)
    qqqqqq = FieldParseConfig("q", 6)
    QQ = FieldParseConfig("Q", 2)
    QQQ = FieldParseConfig("Q", 3)
    QQQQ = FieldParseConfig("Q", 4)
    rr = FieldParseConfig("r", 2)
    RRR = FieldParseConfig("R", 3)
    s = FieldParseConfig("s", 1)
    sss = FieldParseConfig("s", 3)
    ssss = FieldParseConfig("s", 4)
    sssss = FieldParseConfig("s", 5)
    S = FieldParseConfig("S", 1)
    SSS = FieldParseConfig("S", 3)
    ttt = FieldParseConfig("t", 3)
    TTT = FieldParseConfig("T", 3)
    w = FieldParseConfig("w", 1)
    W = FieldParseConfig("W", 1)
    l = FieldParseConfig("l", 1)  # noqa: E741
    o = FieldParseConfig("o", 1)
    oo = FieldParseConfig("o", 2)
    ooo = FieldParseConfig("o", 3)
    oooo = FieldParseConfig("o", 4)
    ooooo = FieldParseConfig("o", 5)
    oooooo = FieldParseConfig("o", 6)
    AluOperation = FieldParseConfig("?", 8)
    MoveOperation = FieldParseConfig("?", 16)


def init_field(opcode: str, ch: str, count: int) -> FieldInfo:
    """Locate the first run of exactly ``count`` characters ``ch`` in an opcode template.

    The leftmost template character is bit 23. An empty ``FieldInfo`` is
    returned when no such run exists.
    """
    if len(opcode) < OPCODE_BITS:
        raise ValueError(f"opcode template must have {OPCODE_BITS} characters, got {len(opcode)}")

    position = 0
    for char, run in groupby(opcode[:OPCODE_BITS]):
        run_length = sum(1 for _ in run)
        if char == ch and run_length == count:
            return FieldInfo(OPCODE_BITS - position - count, count)
        position += run_length
    return FieldInfo()


def field_info(opcode: str, field: Field) -> FieldInfo:
    """Locate ``field`` in an opcode template."""
    config = field.value
    return init_field(opcode, config.ch, config.count)