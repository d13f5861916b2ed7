from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from rich import text

from .convert import as_time_float
from .units import Unit


PRECISION = 3

# higher time is red, lower time is green
UNIT_STYLES = {
    Unit.SECONDS: "red",
    Unit.MILLIS: "yellow",
    Unit.MICROS: "green",
}


@dataclass(frozen=True)
class TimeFormat:
    """Display wrapper picking the most readable unit for a duration.

    The largest unit whose fractional value is at least 1 wins; anything
    under a microsecond (zero included) is still shown in microseconds.
    Every unit is rendered with 3 decimals, eg. `1.234s`, `500.000ms`,
    `0.500µs`. Formatting with the `#` flag spells the unit out instead,
    eg. `f"{TimeFormat(d):#}"` gives `1.234 milliseconds`.

    Values that round up at the third decimal keep their unit, so
    999_999_999ns is `1000.000ms`.
    """

    duration: Any
    ascii: bool = False

    def _select(self) -> tuple[Unit, float]:
        dur = as_time_float(self.duration)
        secs = dur.as_fractional_secs()
        millis = dur.as_fractional_millis()
        micros = dur.as_fractional_micros()

        if secs >= 1.0:
            return Unit.SECONDS, secs
        elif millis >= 1.0:
            return Unit.MILLIS, millis
        elif micros >= 1.0:
            return Unit.MICROS, micros
        else:
            return Unit.MICROS, micros

    @property
    def unit(self) -> Unit:
        return self._select()[0]

    @property
    def value(self) -> float:
        return self._select()[1]

    def render(self, alternate: bool = False) -> str:
        unit, value = self._select()
        return unit.format(value, PRECISION, alternate=alternate, ascii=self.ascii)

    def __str__(self):
        return self.render()

    def __format__(self, format_spec: str):
        if format_spec == "":
            return self.render()
        if format_spec == "#":
            return self.render(alternate=True)
        raise ValueError(f"Invalid format specifier {format_spec!r} for TimeFormat")

    def __rich__(self) -> text.Text:
        unit, value = self._select()
        return text.Text(
            unit.format(value, PRECISION, ascii=self.ascii), style=UNIT_STYLES[unit]
        )


def format_duration(duration: Any, alternate: bool = False, ascii: bool = False) -> str:
    return TimeFormat(duration, ascii=ascii).render(alternate=alternate)
