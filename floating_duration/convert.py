from __future__ import annotations

import datetime
import numbers
from typing import Any, Protocol, runtime_checkable

import numpy as np


NANOS_PER_SEC = 1_000_000_000
_ONE_SEC = np.timedelta64(1, "s")


@runtime_checkable
class DurationLike(Protocol):
    @property
    def secs(self) -> int: ...

    @property
    def subsec_nanos(self) -> int: ...


class TimeAsFloat:
    """Mixin providing `as_fractional_*` for types with `secs` and `subsec_nanos`.

    The sub-second part is converted to a float on its own and then added to
    the scaled seconds, so large second counts never pass through a single
    integer nanosecond total.
    """

    secs: int
    subsec_nanos: int

    def as_fractional_secs(self) -> float:
        """Returns the duration in seconds."""
        return float(self.secs) + self.subsec_nanos / 1_000_000_000

    as_fractional_seconds = as_fractional_secs

    def as_fractional_millis(self) -> float:
        """Returns the duration in milliseconds."""
        return float(self.secs) * 1_000 + self.subsec_nanos / 1_000_000

    def as_fractional_micros(self) -> float:
        """Returns the duration in microseconds."""
        return float(self.secs) * 1_000_000 + self.subsec_nanos / 1_000


class _Components(TimeAsFloat):
    __slots__ = ("secs", "subsec_nanos")

    def __init__(self, secs: int, subsec_nanos: int):
        self.secs = secs
        self.subsec_nanos = subsec_nanos


def timedelta_components(td: datetime.timedelta) -> tuple[int, int]:
    return td.days * 86_400 + td.seconds, td.microseconds * 1_000


def components(value: Any) -> tuple[int, int]:
    """Read `(secs, subsec_nanos)` from a duration-like value.

    Accepts anything exposing `secs` and `subsec_nanos`, `datetime.timedelta`,
    integral nanosecond counts (as from `time.perf_counter_ns`) and
    `numpy.timedelta64`. The value is only read, never validated.
    """
    if isinstance(value, DurationLike):
        return value.secs, value.subsec_nanos
    if isinstance(value, datetime.timedelta):
        return timedelta_components(value)
    if isinstance(value, np.timedelta64):
        # split in the value's own unit, only the sub-second rest goes to ns
        secs = int(value // _ONE_SEC)
        rest = (value % _ONE_SEC).astype("timedelta64[ns]")
        return secs, int(rest.astype(np.int64))
    if isinstance(value, numbers.Integral) and not isinstance(value, bool):
        return divmod(int(value), NANOS_PER_SEC)
    raise TypeError(f"Not a duration: {type(value).__name__}")


def as_time_float(value: Any) -> TimeAsFloat:
    if isinstance(value, TimeAsFloat):
        return value
    return _Components(*components(value))


# functions applying the capability to any supported duration
def as_fractional_secs(value: Any) -> float:
    return as_time_float(value).as_fractional_secs()


as_fractional_seconds = as_fractional_secs


def as_fractional_millis(value: Any) -> float:
    return as_time_float(value).as_fractional_millis()


def as_fractional_micros(value: Any) -> float:
    return as_time_float(value).as_fractional_micros()
