"""Directly settable camera position."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self

from camrig.driver import RigDriver
from camrig.registry import DriverRegistry
from camrig.transform import H, Transform, as_vector

if TYPE_CHECKING:
    import numpy as np
    from numpy.typing import ArrayLike


@DriverRegistry.register("position")
class Position(RigDriver[H]):
    """Sets the position, keeping the parent's rotation.

    This is where host code pushes the raw camera (or tracked object) position
    into the rig each frame, usually as the first driver.
    """

    def __init__(self, position: ArrayLike = (0.0, 0.0, 0.0)) -> None:
        self.position = position

    @property
    def position(self) -> np.ndarray:
        """World-space position handed to the next driver."""
        return self._position

    @position.setter
    def position(self, value: ArrayLike) -> None:
        self._position = as_vector(value)

    def translate(self, delta: ArrayLike) -> None:
        """Move the position by ``delta``."""
        self._position = self._position + as_vector(delta)

    def update(self, parent: Transform[H], delta_time_seconds: float) -> Transform[H]:
        """Replace the parent position, keeping its rotation."""
        return Transform(self._position, parent.rotation, parent.handedness)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create a Position from ``{"position": [x, y, z]}``."""
        return cls(data.get("position", (0.0, 0.0, 0.0)))
