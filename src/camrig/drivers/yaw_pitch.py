"""Accumulated yaw/pitch orientation, typically driven by mouse or stick input."""

from __future__ import annotations

import logging
import warnings
from typing import Any, Self

import numpy as np
from scipy.spatial.transform import Rotation

from camrig.conf import settings
from camrig.driver import RigDriver
from camrig.registry import DriverRegistry
from camrig.transform import H, Transform

logger = logging.getLogger(__name__)

YAW_WRAP_DEGREES = 720.0


@DriverRegistry.register("yaw_pitch")
class YawPitch(RigDriver[H]):
    """Sets the rotation from yaw (about +Y) then pitch (about local +X).

    Attributes:
        yaw_degrees: Heading, wrapped into [0, 720).
        pitch_degrees: Elevation, clamped to +/- settings.PITCH_LIMIT_DEGREES.
    """

    def __init__(self, yaw_degrees: float = 0.0, pitch_degrees: float = 0.0) -> None:
        self.yaw_degrees = 0.0
        self.pitch_degrees = 0.0
        self.rotate_yaw_pitch(yaw_degrees, pitch_degrees)

    def rotate_yaw_pitch(self, yaw_degrees: float, pitch_degrees: float) -> None:
        """Add yaw and pitch deltas, e.g. from this frame's mouse movement."""
        limit = settings.PITCH_LIMIT_DEGREES
        self.yaw_degrees = (self.yaw_degrees + yaw_degrees) % YAW_WRAP_DEGREES
        self.pitch_degrees = float(np.clip(self.pitch_degrees + pitch_degrees, -limit, limit))

    def set_rotation(self, rotation: Rotation) -> None:
        """Take yaw and pitch from an existing orientation, dropping any roll."""
        with warnings.catch_warnings():
            # At +/-90 degrees pitch yaw and roll share an axis; roll is dropped anyway
            warnings.filterwarnings("ignore", message="Gimbal lock detected", category=UserWarning)
            yaw, pitch, _roll = rotation.as_euler("YXZ", degrees=True)
        self.yaw_degrees = 0.0
        self.pitch_degrees = 0.0
        self.rotate_yaw_pitch(float(yaw), float(pitch))
        logger.debug("YawPitch: set to yaw=%.2f pitch=%.2f", self.yaw_degrees, self.pitch_degrees)

    def rotation(self) -> Rotation:
        """The current yaw and pitch as a rotation."""
        return Rotation.from_euler("YXZ", [self.yaw_degrees, self.pitch_degrees, 0.0], degrees=True)

    def update(self, parent: Transform[H], delta_time_seconds: float) -> Transform[H]:
        """Replace the parent rotation, keeping its position."""
        return Transform(parent.position, self.rotation(), parent.handedness)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create from the keys yaw_degrees and pitch_degrees."""
        return cls(float(data.get("yaw_degrees", 0.0)), float(data.get("pitch_degrees", 0.0)))
