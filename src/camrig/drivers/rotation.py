"""Directly settable camera rotation."""

from __future__ import annotations

from typing import Any, Self

from scipy.spatial.transform import Rotation as Quaternion

from camrig.driver import RigDriver
from camrig.registry import DriverRegistry
from camrig.transform import H, Transform


@DriverRegistry.register("rotation")
class Rotation(RigDriver[H]):
    """Sets the rotation, keeping the parent's position.

    The orientation counterpart of Position.
    """

    def __init__(self, rotation: Quaternion | None = None) -> None:
        self.rotation = Quaternion.identity() if rotation is None else rotation

    def update(self, parent: Transform[H], delta_time_seconds: float) -> Transform[H]:
        """Replace the parent rotation, keeping its position."""
        return Transform(parent.position, self.rotation, parent.handedness)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create a Rotation driver from a dictionary.

        Accepts either ``{"quaternion": [x, y, z, w]}`` (scalar last) or
        ``{"euler_degrees": [yaw, pitch, roll]}`` applied as intrinsic Y, X, Z.
        """
        if "quaternion" in data:
            return cls(Quaternion.from_quat(data["quaternion"]))
        if "euler_degrees" in data:
            return cls(Quaternion.from_euler("YXZ", data["euler_degrees"], degrees=True))
        return cls()
