from __future__ import annotations

import contextlib
import logging
import time
from typing import Iterator, Literal, Optional

from rich import console as rich_console

from .format import TimeFormat
from .types import Duration


logger = logging.getLogger(__name__)

current_time = time.perf_counter_ns


class Stopwatch:
    def __init__(self):
        self.start: int = current_time()
        self.end: Optional[int] = None

    @property
    def running(self) -> bool:
        return self.end is None

    @property
    def elapsed(self) -> Duration:
        end = current_time() if self.end is None else self.end
        return Duration.from_nanos(end - self.start)

    def stop(self) -> Duration:
        if self.end is None:
            self.end = current_time()
        return self.elapsed


@contextlib.contextmanager
def measure(
    label: str = "Needed",
    console: Optional[rich_console.Console] | Literal[False] = None,
) -> Iterator[Stopwatch]:
    """Time the enclosed block and print how long it took.

    Prints eg. `Needed 12.841µs` to `console` (a new rich Console if not
    given, nothing if `False`). Works as a decorator too, in which case every
    call is timed separately.
    """
    stopwatch = Stopwatch()
    try:
        yield stopwatch
    finally:
        elapsed = stopwatch.stop()
        logger.debug("%s %s", label, TimeFormat(elapsed))
        if console is not False:
            out = console if console is not None else rich_console.Console()
            out.print(label, TimeFormat(elapsed))
