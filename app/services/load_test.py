from __future__ import annotations

import math
import random
from time import monotonic

# A list slot is one pointer; this is how many slots fill a megabyte.
_SLOTS_PER_MB = 1024 * 1024 // 8


def burn_cpu(duration_ms: int) -> None:
    deadline = monotonic() + duration_ms / 1000.0
    while monotonic() < deadline:
        math.sqrt(random.random())


def churn_memory(size_mb: int, duration_ms: int) -> int:
    """Hold roughly ``size_mb`` of list storage and sort it until the deadline.

    Returns the number of completed sort passes.
    """

    block = ["x"] * (size_mb * _SLOTS_PER_MB)
    deadline = monotonic() + duration_ms / 1000.0
    passes = 0
    while monotonic() < deadline:
        block.sort()
        passes += 1
    return passes
