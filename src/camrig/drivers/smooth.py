"""Exponential smoothing of position and rotation.

Smooth lags behind its parent: each frame it moves a fraction of the way from
its previous output toward the parent transform, with the fraction derived
from a time constant so the motion looks the same at any frame rate. Position
is blended linearly, rotation spherically.

Predictive mode:
    Plain smoothing always trails a moving target. With ``predictive=True``
    the driver first extrapolates the parent position along the velocity seen
    between the last two raw inputs, ``lookahead`` seconds ahead, and smooths
    toward that point. The camera feels more responsive but overshoots when
    the target reverses direction abruptly.

A common pattern is to chain a predictive Smooth with a plain one:

    CameraRig.builder()
        .with_driver(Position(start))
        .with_driver(Smooth.position(1.25, predictive=True))
        .with_driver(Smooth.position(2.5))
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Self

import numpy as np

from camrig.conf import settings
from camrig.driver import RigDriver
from camrig.registry import DriverRegistry
from camrig.smoothing import ExpSmoothed, lerp, slerp
from camrig.transform import H, Transform

if TYPE_CHECKING:
    from scipy.spatial.transform import Rotation

logger = logging.getLogger(__name__)


@DriverRegistry.register("smooth")
class Smooth(RigDriver[H]):
    """Smooths the parent's position and/or rotation.

    Attributes:
        position_smoothness: Time constant in seconds for position. 0 follows
            the parent exactly.
        rotation_smoothness: Time constant in seconds for rotation.
        predictive: Whether position is extrapolated before smoothing.
        lookahead: Seconds of velocity extrapolation in predictive mode.
    """

    def __init__(
        self,
        position_smoothness: float = 0.0,
        rotation_smoothness: float = 0.0,
        *,
        predictive: bool = False,
        lookahead: float | None = None,
    ) -> None:
        """Initialize the smoothing driver.

        Args:
            position_smoothness: Time constant for position, in seconds.
            rotation_smoothness: Time constant for rotation, in seconds.
            predictive: Extrapolate parent position along its velocity first.
            lookahead: Extrapolation horizon in seconds. None uses
                settings.PREDICTIVE_LOOKAHEAD.

        Raises:
            ValueError: If a smoothness or the lookahead is negative.
        """
        if position_smoothness < 0.0 or rotation_smoothness < 0.0:
            msg = (
                f"Smoothness must be non-negative, got position={position_smoothness}, "
                f"rotation={rotation_smoothness}"
            )
            raise ValueError(msg)
        if lookahead is None:
            lookahead = settings.PREDICTIVE_LOOKAHEAD
        if lookahead < 0.0:
            msg = f"Lookahead must be non-negative, got {lookahead}"
            raise ValueError(msg)

        self.position_smoothness = position_smoothness
        self.rotation_smoothness = rotation_smoothness
        self.predictive = predictive
        self.lookahead = lookahead

        self._smoothed_position: ExpSmoothed[np.ndarray] = ExpSmoothed(lerp)
        self._smoothed_rotation: ExpSmoothed[Rotation] = ExpSmoothed(slerp)
        self._previous_raw_position: np.ndarray | None = None
        self._velocity = np.zeros(3)

    @classmethod
    def position(cls, smoothness: float, *, predictive: bool = False, lookahead: float | None = None) -> Self:
        """Smooth position only; rotation follows the parent exactly."""
        return cls(smoothness, 0.0, predictive=predictive, lookahead=lookahead)

    @classmethod
    def rotation(cls, smoothness: float) -> Self:
        """Smooth rotation only; position follows the parent exactly."""
        return cls(0.0, smoothness)

    @classmethod
    def position_rotation(
        cls,
        position_smoothness: float,
        rotation_smoothness: float,
        *,
        predictive: bool = False,
        lookahead: float | None = None,
    ) -> Self:
        """Smooth both position and rotation."""
        return cls(position_smoothness, rotation_smoothness, predictive=predictive, lookahead=lookahead)

    def update(self, parent: Transform[H], delta_time_seconds: float) -> Transform[H]:
        """Ease the stored position and rotation toward the parent's."""
        target_position = parent.position
        if self.predictive:
            target_position = self._predict(parent.position, delta_time_seconds)

        position = self._smoothed_position.smooth_towards(
            target_position, delta_time_seconds, self.position_smoothness
        )
        rotation = self._smoothed_rotation.smooth_towards(
            parent.rotation, delta_time_seconds, self.rotation_smoothness
        )
        return Transform(position, rotation, parent.handedness)

    def _predict(self, raw_position: np.ndarray, delta_time_seconds: float) -> np.ndarray:
        """Extrapolate ``raw_position`` along the velocity of the raw input."""
        if self._previous_raw_position is None:
            self._previous_raw_position = raw_position
        elif delta_time_seconds > 0.0:
            self._velocity = (raw_position - self._previous_raw_position) / delta_time_seconds
            self._previous_raw_position = raw_position
        # Zero elapsed time keeps the last velocity; the smoothing factor is 0 anyway
        return raw_position + self._velocity * self.lookahead

    def reset(self) -> None:
        """Drop smoothing history so the next update snaps to the parent."""
        self._smoothed_position.reset()
        self._smoothed_rotation.reset()
        self._previous_raw_position = None
        self._velocity = np.zeros(3)
        logger.debug("Smooth: history reset")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create a Smooth driver from a dictionary.

        Example:
            {"type": "smooth", "position_smoothness": 1.25, "predictive": true}
        """
        return cls(
            float(data.get("position_smoothness", 0.0)),
            float(data.get("rotation_smoothness", 0.0)),
            predictive=bool(data.get("predictive", False)),
            lookahead=data.get("lookahead"),
        )
