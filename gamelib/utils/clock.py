"""Millisecond clocks: wall-clock and monotonic."""

from __future__ import annotations

import time


def system_now_ms() -> int:
    """Milliseconds since the Unix epoch; may jump if the system clock is changed."""
    return time.time_ns() // 1_000_000


def steady_now_ms() -> int:
    """Milliseconds from a monotonic clock, suitable for measuring intervals."""
    return time.monotonic_ns() // 1_000_000