"""Frame-time smoothing.

Turns the raw, possibly spiky per-frame elapsed time into a stable delta
for physics integration. A single stalled frame (window drag, GC pause,
dropped vsync) would otherwise inject a huge step and make particles
teleport or tunnel through the ground.

Algorithm: keep the last ``window_size`` raw samples; for each new sample
push it, take the median of the window (``sorted[len // 2]``, the upper
median for even lengths) and, when the sample exceeds
``spike_multiplier * median``, return the median instead. The result is
therefore always a value currently in the window.

Negative and non-finite samples never enter the window: a backwards or
corrupted timer degrades to "use the recent median".
"""

from __future__ import annotations

import math
from collections import deque
from typing import Deque, List

from explosion.constants import FRAME_WINDOW_SIZE, SPIKE_MULTIPLIER
from explosion.logger import get_logger

log = get_logger("frame_filter")


class FrameTimeFilter:
    def __init__(self, window_size: int = FRAME_WINDOW_SIZE, spike_multiplier: float = SPIKE_MULTIPLIER):
        if window_size < 1:
            raise ValueError(f"window_size must be >= 1, got {window_size}")
        self.spike_multiplier = spike_multiplier
        self._window: Deque[float] = deque(maxlen=window_size)
        self.spike_count = 0

    def __len__(self) -> int:
        return len(self._window)

    @property
    def window_size(self) -> int:
        return self._window.maxlen or 0

    @property
    def samples(self) -> List[float]:
        """Window contents, oldest first."""
        return list(self._window)

    @property
    def median(self) -> float | None:
        if not self._window:
            return None
        ordered = sorted(self._window)
        return ordered[len(ordered) // 2]

    def filter(self, raw_dt: float) -> float:
        """Return the stable dt for this frame."""
        if not math.isfinite(raw_dt) or raw_dt < 0:
            fallback = self.median
            log.warn(f"Rejected frame time {raw_dt!r}; using {fallback!r}")
            return fallback if fallback is not None else 0.0

        self._window.append(raw_dt)
        median = self.median
        if raw_dt > median * self.spike_multiplier:
            self.spike_count += 1
            log.debug(f"Frame spike {raw_dt:.4f}s replaced by median {median:.4f}s")
            return median
        return raw_dt

    def reset(self) -> None:
        self._window.clear()
        self.spike_count = 0


__all__ = ["FrameTimeFilter"]
