"""Keep the camera within a distance band around a focal point."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Any, Self

import numpy as np

from camrig.conf import settings
from camrig.driver import RigDriver
from camrig.handedness import UP
from camrig.registry import DriverRegistry
from camrig.transform import H, Transform, as_vector

if TYPE_CHECKING:
    from numpy.typing import ArrayLike

logger = logging.getLogger(__name__)


@DriverRegistry.register("maintain_distance")
class MaintainDistance(RigDriver[H]):
    """Clamps the camera's in-plane distance to ``focal`` into [min, max].

    Distance is measured after removing the component along ``plane_normal``,
    so with the default +Y normal only horizontal distance is constrained and
    the camera height is left alone. A zero ``plane_normal`` measures the full
    3D distance instead.

    A camera farther than ``max_distance`` is pulled toward the focal point,
    one closer than ``min_distance`` is pushed away, both along the in-plane
    direction. Inside the band the parent transform is returned unchanged.
    Rotation is never touched.

    When the camera's in-plane position coincides with the focal point there
    is no direction to push along; the correction is skipped for that frame.
    """

    def __init__(
        self,
        focal: ArrayLike,
        min_distance: float = 0.0,
        max_distance: float = math.inf,
        plane_normal: ArrayLike = UP,
    ) -> None:
        """Initialize the distance constraint.

        Raises:
            ValueError: If ``min_distance`` exceeds ``max_distance`` or is negative.
        """
        if min_distance < 0.0 or min_distance > max_distance:
            msg = f"Invalid distance band [{min_distance}, {max_distance}]"
            raise ValueError(msg)
        self.focal = focal
        self.plane_normal = plane_normal
        self.min_distance = min_distance
        self.max_distance = max_distance

    @property
    def focal(self) -> np.ndarray:
        """Point the camera keeps its distance from."""
        return self._focal

    @focal.setter
    def focal(self, value: ArrayLike) -> None:
        self._focal = as_vector(value)

    @property
    def plane_normal(self) -> np.ndarray:
        """Normal of the plane distances are measured in. Zero measures in 3D."""
        return self._plane_normal

    @plane_normal.setter
    def plane_normal(self, value: ArrayLike) -> None:
        self._plane_normal = as_vector(value)

    def vector_to_focal(self, position: np.ndarray) -> np.ndarray:
        """In-plane vector from ``position`` to the focal point."""
        to_focal = self._focal - position
        normal = self._plane_normal
        normal_length_squared = float(np.dot(normal, normal))
        if normal_length_squared <= settings.DISTANCE_EPSILON**2:
            return to_focal
        return to_focal - normal * (np.dot(to_focal, normal) / normal_length_squared)

    def update(self, parent: Transform[H], delta_time_seconds: float) -> Transform[H]:
        """Push or pull the parent position back into the distance band."""
        to_focal = self.vector_to_focal(parent.position)
        distance = float(np.linalg.norm(to_focal))

        if distance > self.max_distance:
            correction = distance - self.max_distance
        elif distance < self.min_distance:
            # Negative: moves away from the focal point
            correction = distance - self.min_distance
        else:
            return parent

        if distance <= settings.DISTANCE_EPSILON:
            logger.debug("MaintainDistance: camera on focal axis, skipping correction")
            return parent

        position = parent.position + to_focal * (correction / distance)
        return Transform(position, parent.rotation, parent.handedness)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create a MaintainDistance driver from a dictionary.

        Example:
            {
                "type": "maintain_distance",
                "focal": [0, 0, 0],
                "plane_normal": [0, 1, 0],
                "min_distance": 4,
                "max_distance": 10
            }
        """
        return cls(
            data.get("focal", (0.0, 0.0, 0.0)),
            min_distance=float(data.get("min_distance", 0.0)),
            max_distance=float(data.get("max_distance", math.inf)),
            plane_normal=data.get("plane_normal", UP),
        )
