"""Offset the camera along its own axes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self

from camrig.driver import RigDriver
from camrig.registry import DriverRegistry
from camrig.transform import H, Transform, as_vector

if TYPE_CHECKING:
    import numpy as np
    from numpy.typing import ArrayLike


@DriverRegistry.register("arm")
class Arm(RigDriver[H]):
    """Offsets the parent position by a vector expressed in the parent's local space.

    The offset turns with the camera, which makes this the driver for over the
    shoulder or boom-arm framing:

        # Half a unit to the right, a bit up, four units behind (right-handed)
        Arm((0.5, 0.3, 4.0))
    """

    def __init__(self, offset: ArrayLike) -> None:
        self.offset = offset

    @property
    def offset(self) -> np.ndarray:
        """Offset in the parent's local space."""
        return self._offset

    @offset.setter
    def offset(self, value: ArrayLike) -> None:
        self._offset = as_vector(value)

    def update(self, parent: Transform[H], delta_time_seconds: float) -> Transform[H]:
        """Move the parent position by the offset turned into world space."""
        position = parent.position + parent.rotation.apply(self._offset)
        return Transform(position, parent.rotation, parent.handedness)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create an Arm from ``{"offset": [x, y, z]}``."""
        return cls(data.get("offset", (0.0, 0.0, 0.0)))
