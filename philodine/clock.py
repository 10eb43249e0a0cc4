"""Wall-clock time in milliseconds."""

from __future__ import annotations

import time


def now_ms() -> int:
    """Return the current wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000