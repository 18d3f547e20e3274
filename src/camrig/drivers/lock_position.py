"""Pin selected position axes to fixed values."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self

from camrig.driver import RigDriver
from camrig.registry import DriverRegistry
from camrig.transform import H, Transform, as_vector

if TYPE_CHECKING:
    from numpy.typing import ArrayLike


@DriverRegistry.register("lock_position")
class LockPosition(RigDriver[H]):
    """Replaces locked position components with their set values.

    Unlocked axes (None) and the rotation pass through from the parent.

    Example:
        # Keep the camera at a fixed height while it follows in x and z
        LockPosition(y=1.8)

        # Freeze the whole position
        LockPosition.from_position(rig.final_transform.position)
    """

    def __init__(self, x: float | None = None, y: float | None = None, z: float | None = None) -> None:
        self.x = x
        self.y = y
        self.z = z

    @classmethod
    def from_position(cls, position: ArrayLike) -> Self:
        """Lock all three axes at ``position``."""
        x, y, z = as_vector(position)
        return cls(float(x), float(y), float(z))

    def update(self, parent: Transform[H], delta_time_seconds: float) -> Transform[H]:
        """Overwrite the locked axes of the parent position."""
        position = parent.position.copy()
        for axis, locked in enumerate((self.x, self.y, self.z)):
            if locked is not None:
                position[axis] = locked
        return Transform(position, parent.rotation, parent.handedness)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create from ``{"position": [...]}`` or any of the keys x, y and z."""
        if "position" in data:
            return cls.from_position(data["position"])
        return cls(data.get("x"), data.get("y"), data.get("z"))
