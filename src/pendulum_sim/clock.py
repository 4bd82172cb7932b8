# MIT License (see LICENSE)
"""
Host-side frame clock.

Animation loops are usually handed a monotonically increasing timestamp in
milliseconds once per frame. FrameClock turns those into frame deltas in
seconds for IntegrationEngine.advance(), and optionally caps them so a
backgrounded window does not trigger a long catch-up burst.

Example:
    clock = FrameClock(max_frame_delta=0.1)
    def on_frame(timestamp_ms):
        clock.drive(engine, timestamp_ms)
        renderer.render_engine(engine)
"""
from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .engine import IntegrationEngine


class FrameClock:
    """
    Converts animation-frame timestamps (ms) into frame deltas (s).

    The first tick after construction or reset() yields 0. The last timestamp
    is updated on every tick, paused or not, so paused wall time is never
    fed into the engine after resuming.
    """

    def __init__(self, max_frame_delta: float | None = None) -> None:
        if max_frame_delta is not None and max_frame_delta <= 0:
            raise ValueError(f"max_frame_delta must be positive, got {max_frame_delta}")
        self.max_frame_delta = max_frame_delta
        self._last_ms: float | None = None

    @property
    def last_timestamp(self) -> float | None:
        return self._last_ms

    def reset(self) -> None:
        self._last_ms = None

    def tick(self, timestamp_ms: float) -> float:
        """
        Record a frame timestamp and return seconds since the previous one.

        Backwards jumps return 0.
        """
        timestamp_ms = float(timestamp_ms)
        if self._last_ms is None:
            self._last_ms = timestamp_ms
            return 0.0

        delta = max(0.0, (timestamp_ms - self._last_ms) / 1000.0)
        self._last_ms = timestamp_ms
        if self.max_frame_delta is not None:
            delta = min(delta, self.max_frame_delta)
        return delta

    def drive(self, engine: "IntegrationEngine", timestamp_ms: float) -> int:
        """Tick and advance the engine; returns the number of fixed steps taken."""
        return engine.advance(self.tick(timestamp_ms))
