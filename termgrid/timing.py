"""Wall-clock helpers measured in milliseconds."""

from __future__ import annotations

import select
import sys
import time


def now() -> int:
    """Current wall-clock time in milliseconds."""
    return time.time_ns() // 1_000_000


def wait(milliseconds: int) -> None:
    """Sleep for the given number of milliseconds; negative values return at once."""
    if milliseconds < 0:
        return
    time.sleep(milliseconds / 1000)


def check_stdin(timeout: int) -> bool:
    """Whether standard input becomes readable within ``timeout`` milliseconds."""
    readable, _, _ = select.select([sys.stdin], [], [], max(timeout, 0) / 1000)
    return bool(readable)


def until_end_of_frame(start_time: int, target_frame_time: int) -> int:
    """Milliseconds left in a frame that started at ``start_time``."""
    return target_frame_time - (now() - start_time)