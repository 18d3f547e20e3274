"""camrig - composable camera rigs for real-time 3D applications.

A camera rig is an ordered pipeline of small drivers (position tracking,
exponential smoothing, distance constraints, look-at and so on). Each frame
the rig folds the elapsed time through its drivers and hands back the final
camera transform.

Quick start:
    from camrig import CameraRig, LookAt, Position, Smooth

    rig = (
        CameraRig.builder()
        .with_driver(Position((4.0, 3.0, 8.0)))
        .with_driver(Smooth.position(1.0))
        .with_driver(LookAt((0.0, 1.0, 0.0), smoothness=0.5))
        .build()
    )

    # Every frame
    rig.driver(Position).position = player_camera_position
    transform = rig.update(delta_time)
    render(transform.position, transform.rotation)

Configuration:
    from camrig.conf import settings

    settings.configure(DEFAULT_HANDEDNESS="left")
"""

__version__ = "0.1.0"

from camrig.conf import settings
from camrig.driver import RigDriver
from camrig.drivers import (
    Arm,
    LockPosition,
    LookAt,
    MaintainDistance,
    MovableLookAt,
    NestedRig,
    Position,
    Rotation,
    Smooth,
    YawPitch,
)
from camrig.handedness import Handedness, LeftHanded, RightHanded
from camrig.registry import DriverRegistry
from camrig.rig import CameraRig, CameraRigBuilder, DriverNotFoundError
from camrig.transform import Transform

__all__ = [
    "Arm",
    "CameraRig",
    "CameraRigBuilder",
    "DriverNotFoundError",
    "DriverRegistry",
    "Handedness",
    "LeftHanded",
    "LockPosition",
    "LookAt",
    "MaintainDistance",
    "MovableLookAt",
    "NestedRig",
    "Position",
    "RightHanded",
    "RigDriver",
    "Rotation",
    "Smooth",
    "Transform",
    "YawPitch",
    "__version__",
    "settings",
]
