from __future__ import annotations

from dataclasses import dataclass
import datetime

from .convert import NANOS_PER_SEC, TimeAsFloat, timedelta_components


@dataclass(frozen=True)
class Duration(TimeAsFloat):
    """Elapsed time as whole seconds plus a sub-second nanosecond remainder.

    Values are taken as given: `subsec_nanos` is expected in
    [0, 999_999_999] and neither field may be negative.
    """

    secs: int
    subsec_nanos: int = 0

    @classmethod
    def from_nanos(cls, nanos: int) -> Duration:
        return cls(*divmod(int(nanos), NANOS_PER_SEC))

    @classmethod
    def from_timedelta(cls, td: datetime.timedelta) -> Duration:
        return cls(*timedelta_components(td))
