"""A camera that frames two fighters and zooms with their distance."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence

Vector = tuple[float, float, float]

_SMALL_NUMBER = 1.0e-8


def finterp_to(current: float, target: float, delta_time: float, speed: float) -> float:
    """Move ``current`` toward ``target`` at ``speed``; non-positive speed jumps there."""
    if speed <= 0.0:
        return target
    distance = target - current
    if distance * distance < _SMALL_NUMBER:
        return target
    alpha = min(max(delta_time * speed, 0.0), 1.0)
    return current + distance * alpha


def _clamp(value: float, low: float, high: float) -> float:
    if value < low:
        return low
    return value if value < high else high


@dataclass
class CameraRig:
    """Camera on a spring arm placed between two players."""

    arm_length: float = 1200.0
    default_distance: float = 1200.0
    zoom_speed: float = 5.0
    max_distance: float = 2000.0
    min_distance: float = 800.0
    location: Vector = (0.0, 0.0, 0.0)

    def update_position(
        self,
        player1: Optional[Sequence[float]],
        player2: Optional[Sequence[float]],
    ) -> Vector:
        """Place the camera midway between the players; return its location."""
        if player1 is None or player2 is None:
            return self.location
        x1, y1, z1 = player1
        x2, y2, z2 = player2
        self.location = ((x1 + x2) / 2, (y1 + y2) / 2, (z1 + z2) / 2)
        return self.location

    def update_zoom(
        self,
        player1: Optional[Sequence[float]],
        player2: Optional[Sequence[float]],
        delta_time: float,
    ) -> float:
        """Ease the arm length toward the clamped player distance; return it."""
        if player1 is None or player2 is None:
            return self.arm_length
        distance = math.dist(tuple(player1), tuple(player2))
        target = _clamp(distance, self.min_distance, self.max_distance)
        self.arm_length = finterp_to(self.arm_length, target, delta_time, self.zoom_speed)
        return self.arm_length

    def tick(
        self,
        player1: Optional[Sequence[float]],
        player2: Optional[Sequence[float]],
        delta_time: float,
    ) -> None:
        """Update position and zoom when both players are present."""
        if player1 is not None and player2 is not None:
            self.update_position(player1, player2)
            self.update_zoom(player1, player2, delta_time)