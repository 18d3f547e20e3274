"""Turn the camera to face a target point."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Self

from camrig.driver import RigDriver
from camrig.registry import DriverRegistry
from camrig.smoothing import ExpSmoothed, slerp
from camrig.transform import H, Transform, as_vector

if TYPE_CHECKING:
    import numpy as np
    from numpy.typing import ArrayLike
    from scipy.spatial.transform import Rotation

logger = logging.getLogger(__name__)


@DriverRegistry.register("look_at")
class LookAt(RigDriver[H]):
    """Rotates the camera toward ``target``, keeping the parent position.

    The rotation eases toward the exact look direction with its own time
    constant, so retargeting produces a smooth pan instead of a cut. When the
    camera sits on the target, or the target is straight above or below, no
    look direction exists and the previous rotation is kept.

    Attributes:
        target: World-space point to face. Set it between updates to retarget.
        smoothness: Time constant in seconds for the rotation. 0 snaps.
    """

    def __init__(self, target: ArrayLike, smoothness: float = 0.0) -> None:
        if smoothness < 0.0:
            msg = f"Smoothness must be non-negative, got {smoothness}"
            raise ValueError(msg)
        self.target = target
        self.smoothness = smoothness
        self._smoothed_rotation: ExpSmoothed[Rotation] = ExpSmoothed(slerp)

    @property
    def target(self) -> np.ndarray:
        """World-space point the camera turns toward."""
        return self._target

    @target.setter
    def target(self, value: ArrayLike) -> None:
        self._target = as_vector(value)

    def update(self, parent: Transform[H], delta_time_seconds: float) -> Transform[H]:
        """Ease the rotation toward the look direction from the parent position."""
        look_rotation = parent.handedness.look_rotation(self._target - parent.position)
        if look_rotation is None:
            logger.debug("LookAt: no unique direction to target %s, keeping rotation", self._target.tolist())
            previous = self._smoothed_rotation.value
            look_rotation = parent.rotation if previous is None else previous

        rotation = self._smoothed_rotation.smooth_towards(look_rotation, delta_time_seconds, self.smoothness)
        return Transform(parent.position, rotation, parent.handedness)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create from the keys target and smoothness."""
        return cls(data.get("target", (0.0, 0.0, 0.0)), float(data.get("smoothness", 0.0)))
