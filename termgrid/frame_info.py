"""Ring buffer of per-frame timings used for FPS and load statistics."""

from __future__ import annotations

from dataclasses import dataclass

UNSET = -1


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


@dataclass
class FrameInfo:
    """Start and end timestamps of one frame, in milliseconds (-1 when unset)."""

    start: int = UNSET
    end: int = UNSET

    @property
    def complete(self) -> bool:
        return self.start != UNSET and self.end != UNSET


class FrameInfoBuffer:
    """Fixed-size ring of recent frames with one frame marked as current."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("frame buffer size must be at least 1")
        self.frames = [FrameInfo() for _ in range(size)]
        self.current_index = 0

    def __len__(self) -> int:
        return len(self.frames)

    @property
    def length(self) -> int:
        return len(self.frames)

    @property
    def current(self) -> FrameInfo:
        return self.frames[self.current_index]

    def advance(self) -> FrameInfo:
        """Move to the next slot, wrapping around, and return it."""
        self.current_index = (self.current_index + 1) % len(self.frames)
        return self.current

    def average_active_time(self) -> int:
        """Mean of end - start over completed frames other than the current one."""
        durations = [
            frame.end - frame.start
            for index, frame in enumerate(self.frames)
            if index != self.current_index and frame.complete
        ]
        if not durations:
            return 0
        return _trunc_div(sum(durations), len(durations))

    def average_fps(self) -> int:
        """Frame-rate figure derived from the spread of recorded start times."""
        starts = [frame.start for frame in self.frames]
        minimum_start = min(0, *starts)
        maximum_start = max(0, *starts)
        duration = maximum_start - minimum_start
        if duration == 0:
            raise ZeroDivisionError("no elapsed time between recorded frames")
        return self.length - _trunc_div(1000, duration)