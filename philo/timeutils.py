"""Millisecond clock helpers used by the simulation."""

import time

_POLL_INTERVAL = 0.0005


def get_time() -> int:
    """Return the current wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def time_diff(past: int) -> int:
    """Return the milliseconds elapsed since ``past``."""
    return get_time() - past


def sleep_ms(ms: int) -> None:
    """Sleep for at least ``ms`` milliseconds, polling in short steps."""
    start = get_time()
    while get_time() - start < ms:
        time.sleep(_POLL_INTERVAL)