"""Frame counting for the fixed-rate game loop."""

from __future__ import annotations

from dataclasses import dataclass

_FRAME_INDEX_LIMIT = 1 << 64


@dataclass
class FrameManager:
    """Counts frames and the time they took, at a fixed frame-rate limit."""

    frame_index: int = 0
    frame_time: float = 0.0
    frame_rate_limit: float = 60.0

    def update_frame(self, delta_seconds: float) -> None:
        """Advance by one frame that lasted ``delta_seconds``."""
        self.frame_time += delta_seconds
        self.frame_index = (self.frame_index + 1) % _FRAME_INDEX_LIMIT