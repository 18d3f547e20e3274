"""Frame-rate independent exponential smoothing.

Every smoothing driver blends its previous output toward a new target with

    factor = 1 - exp(-dt / max(smoothness, SMOOTHNESS_EPSILON))

where ``smoothness`` is a time constant in seconds. A larger time constant
responds more slowly. ``dt == 0`` gives ``factor == 0`` (previous output kept)
and a vanishing time constant gives ``factor == 1`` (target reproduced).
"""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Generic, TypeVar

import numpy as np
from scipy.spatial.transform import Rotation, Slerp

from camrig.conf import settings

T = TypeVar("T")


def smoothing_factor(delta_time_seconds: float, smoothness: float) -> float:
    """Return the per-frame interpolation weight toward the target, in [0, 1]."""
    if delta_time_seconds <= 0.0:
        return 0.0
    return 1.0 - math.exp(-delta_time_seconds / max(smoothness, settings.SMOOTHNESS_EPSILON))


def lerp(start: np.ndarray, end: np.ndarray, t: float) -> np.ndarray:
    """Linear interpolation between two vectors."""
    return start + (end - start) * t


def slerp(start: Rotation, end: Rotation, t: float) -> Rotation:
    """Spherical interpolation along the shortest arc between two rotations."""
    interpolator = Slerp([0.0, 1.0], Rotation.concatenate([start, end]))
    return interpolator([t])[0]


class ExpSmoothed(Generic[T]):
    """Holds the previous smoothed value of one quantity.

    The first call has nothing to smooth from and returns the target as is.

    Example:
        smoothed = ExpSmoothed(lerp)
        position = smoothed.smooth_towards(raw_position, delta_time, smoothness=0.5)
    """

    def __init__(self, interpolate: Callable[[T, T, float], T]) -> None:
        self._interpolate = interpolate
        self.value: T | None = None

    def smooth_towards(self, target: T, delta_time_seconds: float, smoothness: float) -> T:
        """Blend the stored value toward ``target`` and return the result."""
        previous = target if self.value is None else self.value
        factor = smoothing_factor(delta_time_seconds, smoothness)
        if factor <= 0.0:
            smoothed = previous
        elif factor >= 1.0:
            smoothed = target
        else:
            smoothed = self._interpolate(previous, target, factor)
        self.value = smoothed
        return smoothed

    def reset(self) -> None:
        """Forget the previous value so the next call snaps to its target."""
        self.value = None
