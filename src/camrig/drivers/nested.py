"""Drivers that wrap a whole rig as a single stage.

A sub-pipeline (say smoothing, a distance constraint and a look-at) can be
packaged as one named driver and dropped into other rigs. The outer rig's
driver() lookup stops at the wrapper, so subclasses expose their own methods
for the inner drivers host code needs to reach:

    class Orbit(NestedRig):
        def __init__(self, focal):
            super().__init__(
                CameraRig.builder()
                .with_driver(YawPitch())
                .with_driver(Arm((0.0, 0.0, 6.0)))
                .with_driver(LookAt(focal))
                .build()
            )

        def set_focal(self, focal):
            self._rig.driver(LookAt).target = focal
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self

import numpy as np

from camrig.driver import RigDriver
from camrig.drivers.look_at import LookAt
from camrig.drivers.maintain_distance import MaintainDistance
from camrig.drivers.position import Position
from camrig.drivers.smooth import Smooth
from camrig.handedness import UP, Handedness
from camrig.registry import DriverRegistry
from camrig.rig import CameraRig
from camrig.transform import H, Transform, as_vector

if TYPE_CHECKING:
    from numpy.typing import ArrayLike


class NestedRig(RigDriver[H]):
    """Runs a privately owned inner rig as one stage of an outer rig.

    The inner rig starts each frame from its own identity transform, so the
    parent transform is not fed into it; place the wrapper first, or build the
    inner rig so it does not need upstream input.
    """

    def __init__(self, rig: CameraRig[H]) -> None:
        self._rig = rig

    @property
    def handedness(self) -> type[H]:
        """The inner rig's convention, which the outer rig must share."""
        return self._rig.handedness

    def update(self, parent: Transform[H], delta_time_seconds: float) -> Transform[H]:
        """Advance the inner rig and return its final transform."""
        return self._rig.update(delta_time_seconds)


@DriverRegistry.register("movable_look_at")
class MovableLookAt(NestedRig[H]):
    """A movable camera that keeps a target in view at a comfortable distance.

    Inner pipeline: Position, predictive Smooth, Smooth, MaintainDistance
    around the target, LookAt just above the target.
    """

    def __init__(
        self,
        camera_position: ArrayLike,
        target_position: ArrayLike,
        handedness: str | type[Handedness] | None = None,
    ) -> None:
        target_position = as_vector(target_position)
        super().__init__(
            CameraRig.builder(handedness)
            .with_driver(Position(camera_position))
            # Predict camera movement to make the subsequent smoothing reactive
            .with_driver(Smooth.position(1.25, predictive=True))
            .with_driver(Smooth.position(2.5))
            .with_driver(MaintainDistance(target_position, min_distance=4.0, max_distance=10.0, plane_normal=UP))
            .with_driver(LookAt(target_position + UP, smoothness=1.25))
            .build()
        )

    def set_position_target(self, camera_position: ArrayLike, target_position: ArrayLike) -> None:
        """Move the camera and the point it frames."""
        self._rig.driver(Position).position = camera_position
        self._rig.driver(LookAt).target = np.asarray(target_position, dtype=float) + UP
        self._rig.driver(MaintainDistance).focal = target_position

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create from config keys camera_position, target_position and handedness."""
        return cls(
            data.get("camera_position", (0.0, 0.0, 0.0)),
            data.get("target_position", (0.0, 0.0, 0.0)),
            data.get("handedness"),
        )
