"""Frames-per-second counter averaged over a time interval."""

from __future__ import annotations


class FramesPerSecondCounter:
    """Counts frames and reports the average rate once per interval."""

    def __init__(self, avg_interval: float = 0.5):
        if not avg_interval > 0.0:
            raise ValueError("avg_interval must be positive")
        self.avg_interval = avg_interval
        self.num_frames = 0
        self.accumulated_time = 0.0
        self.current_fps = 0.0
        self.print_fps = True

    @property
    def fps(self) -> float:
        return self.current_fps

    def tick(self, delta_seconds: float, frame_rendered: bool = True) -> bool:
        """Advance by ``delta_seconds``; return True when a new rate is ready."""
        if frame_rendered:
            self.num_frames += 1
        self.accumulated_time += delta_seconds

        if self.accumulated_time > self.avg_interval:
            self.current_fps = self.num_frames / self.accumulated_time
            if self.print_fps:
                print(f"FPS: {self.current_fps:.1f}")
            self.num_frames = 0
            self.accumulated_time = 0.0
            return True
        return False