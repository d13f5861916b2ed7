from .convert import (
    DurationLike,
    TimeAsFloat,
    as_fractional_micros,
    as_fractional_millis,
    as_fractional_seconds,
    as_fractional_secs,
    components,
)
from .format import TimeFormat, format_duration
from .timer import Stopwatch, measure
from .types import Duration
from .units import Unit
