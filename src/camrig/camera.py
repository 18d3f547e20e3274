"""Feed a camera rig into an Arcade camera.

This module bridges the rig and Arcade's 3D camera description. Each frame
the manager advances the rig and copies the resulting position and axes into
an ``arcade.camera.CameraData``, which projectors such as
``arcade.camera.PerspectiveProjector`` read when rendering.

Usage Example:
    projector = arcade.camera.PerspectiveProjector()
    camera_manager = RigCameraManager(rig, projector.view)

    def on_update(self, delta_time):
        camera_manager.rig.driver(YawPitch).rotate_yaw_pitch(dx, dy)
        camera_manager.update(delta_time)

    def on_draw(self):
        with projector.activate():
            ...

Integration:
    - Created once the rig is built
    - Updated every frame in on_update(), after input has been pushed into drivers
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import arcade

if TYPE_CHECKING:
    import numpy as np

    from camrig.rig import CameraRig
    from camrig.transform import Transform

logger = logging.getLogger(__name__)


class RigCameraManager:
    """Drives an Arcade CameraData from a camera rig.

    Attributes:
        rig: The rig evaluated every frame.
        camera_data: The Arcade view description written after each update.
    """

    def __init__(self, rig: CameraRig, camera_data: arcade.camera.CameraData | None = None) -> None:
        """Initialize the camera manager.

        Args:
            rig: Camera rig to evaluate.
            camera_data: CameraData to write into, usually a projector's ``view``.
                A new one is created when None.
        """
        self.rig = rig
        self.camera_data = camera_data if camera_data is not None else arcade.camera.CameraData()
        self.apply(rig.final_transform)
        logger.debug("RigCameraManager: attached rig with %d drivers", len(rig.drivers))

    def update(self, delta_time: float) -> Transform:
        """Advance the rig and copy its result into the camera."""
        transform = self.rig.update(delta_time)
        self.apply(transform)
        return transform

    def apply(self, transform: Transform) -> None:
        """Write a transform's position and view axes into the camera data."""
        self.camera_data.position = _point(transform.position)
        self.camera_data.forward = _point(transform.forward())
        self.camera_data.up = _point(transform.up())


def _point(vector: np.ndarray) -> tuple[float, float, float]:
    x, y, z = (float(component) for component in vector)
    return (x, y, z)
