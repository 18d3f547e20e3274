"""Built-in rig drivers.

Importing this package registers every driver below with the DriverRegistry.
"""

from camrig.drivers.arm import Arm
from camrig.drivers.lock_position import LockPosition
from camrig.drivers.look_at import LookAt
from camrig.drivers.maintain_distance import MaintainDistance
from camrig.drivers.nested import MovableLookAt, NestedRig
from camrig.drivers.position import Position
from camrig.drivers.rotation import Rotation
from camrig.drivers.smooth import Smooth
from camrig.drivers.yaw_pitch import YawPitch

__all__ = [
    "Arm",
    "LockPosition",
    "LookAt",
    "MaintainDistance",
    "MovableLookAt",
    "NestedRig",
    "Position",
    "Rotation",
    "Smooth",
    "YawPitch",
]
