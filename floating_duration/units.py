from __future__ import annotations

import enum


class Unit(enum.Enum):
    shortname: str
    longname: str
    in_nanos: int

    def __init__(self, shortname, longname, in_nanos):
        self.shortname = shortname
        self.longname = longname
        self.in_nanos = in_nanos

    MICROS = ("µs", "microseconds", 1_000)
    MILLIS = ("ms", "milliseconds", 1_000_000)
    SECONDS = ("s", "seconds", 1_000_000_000)

    def symbol(self, ascii: bool = False) -> str:
        if ascii and self is Unit.MICROS:
            return "us"
        return self.shortname

    def format(
        self,
        value: float,
        precision: int = 3,
        alternate: bool = False,
        ascii: bool = False,
    ) -> str:
        if alternate:
            return f"{value:.{precision}f} {self.longname}"
        return f"{value:.{precision}f}{self.symbol(ascii)}"
