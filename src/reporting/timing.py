"""Wall-clock timing for pipeline steps."""

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Generator

log = logging.getLogger(__name__)


@dataclass
class Timing:
    """Elapsed wall-clock seconds for a labelled step, filled in on exit."""

    label: str
    elapsed: float = 0.0


@contextmanager
def timed(label: str) -> Generator[Timing, None, None]:
    """Context manager measuring the enclosed block with time.perf_counter.

    The yielded Timing gets its elapsed value when the block exits, even if
    the block raises.
    """
    timing = Timing(label)
    t0 = time.perf_counter()
    try:
        yield timing
    finally:
        timing.elapsed = time.perf_counter() - t0
        log.debug("%s took %.6fs", label, timing.elapsed)
