"""
Spatial queries used by strategies.

Every argument named *a*, *b*, *target* or *center* is anything with
integer ``x`` / ``y`` attributes (a :class:`Position` or a :class:`Unit`).
None of these helpers raise on odd input; guarding against dead or
missing units is the caller's job.

Range checks are axis-aligned squares, not circles.  Strategy thresholds
were tuned against the square, so keep it.
"""

from __future__ import annotations

import math
from typing import Any, Optional

import numpy as np

from botters_engine.utils.constants import NEAR_FACTOR


def distance_from(a: Any, b: Any) -> int:
    """Euclidean distance truncated to an integer."""
    dx = a.x - b.x
    dy = a.y - b.y
    return math.isqrt(dx * dx + dy * dy)


def in_square(center: Any, target: Any, half_width: float) -> bool:
    """True if *target* lies in the square of *half_width* around *center* (edges included)."""
    return (
        center.x - half_width <= target.x <= center.x + half_width
        and center.y - half_width <= target.y <= center.y + half_width
    )


def square_mask(positions: np.ndarray, center: Any, half_width: float) -> np.ndarray:
    """Vectorised :func:`in_square` over an ``(n, 2)`` array of positions."""
    if positions.size == 0:
        return np.zeros(0, dtype=bool)
    dx = np.abs(positions[:, 0] - center.x)
    dy = np.abs(positions[:, 1] - center.y)
    return (dx <= half_width) & (dy <= half_width)


def can_attack(attacker: Any, target: Any, buffer: int = 0) -> bool:
    """True if *target* is inside *attacker*'s attack square (range + *buffer*)."""
    return in_square(attacker, target, attacker.attack_range + buffer)


def is_near(unit: Any, target: Any, factor: float = NEAR_FACTOR) -> bool:
    """True if *target* is roughly one move away: square of ``factor * movement_speed``."""
    return in_square(unit, target, unit.movement_speed * factor)


def is_in_front_of(unit: Any, target: Any, team: Optional[int] = None) -> bool:
    """
    True if *unit* is ahead of *target* along the lane.

    Team 0 advances toward larger X, team 1 toward smaller X.  *team*
    defaults to the unit's own team.  Equal X counts as in front.
    """
    if team is None:
        team = unit.team
    if team == 0:
        return unit.x >= target.x
    return unit.x <= target.x
