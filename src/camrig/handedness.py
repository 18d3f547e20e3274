"""Coordinate-system chirality markers.

A rig and every driver in it share one handedness for their whole lifetime.
The marker classes are used as type parameters (``Transform[RightHanded]``,
``CameraRig[LeftHanded]``) so a type checker rejects mixing transforms of
different conventions. At runtime they only answer axis questions: where
"forward" points and how to build an orthonormal camera basis.

Both conventions share +X as right and +Y as up. Right-handed cameras look
down -Z, left-handed cameras look down +Z.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

import numpy as np
from scipy.spatial.transform import Rotation

from camrig.conf import settings

if TYPE_CHECKING:
    from numpy.typing import ArrayLike

UP = np.array([0.0, 1.0, 0.0])
RIGHT = np.array([1.0, 0.0, 0.0])


class Handedness(ABC):
    """Base class for handedness markers. Never instantiated."""

    name: ClassVar[str]
    FORWARD_Z_SIGN: ClassVar[float]

    _by_name: ClassVar[dict[str, type[Handedness]]] = {}

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        Handedness._by_name[cls.name] = cls

    @classmethod
    def forward_axis(cls) -> np.ndarray:
        """Local-space forward direction."""
        return np.array([0.0, 0.0, cls.FORWARD_Z_SIGN])

    @classmethod
    @abstractmethod
    def right_from_up_and_forward(cls, up: np.ndarray, forward: np.ndarray) -> np.ndarray:
        """Return the (unnormalized) right vector for a view basis."""

    @classmethod
    @abstractmethod
    def up_from_right_and_forward(cls, right: np.ndarray, forward: np.ndarray) -> np.ndarray:
        """Return the up vector completing a basis from unit right and forward."""

    @classmethod
    def look_rotation(cls, direction: ArrayLike, up: ArrayLike = UP) -> Rotation | None:
        """Build the rotation whose forward axis points along ``direction``.

        Args:
            direction: World-space view direction, any length.
            up: World-space up hint.

        Returns:
            The look rotation, or None when ``direction`` is zero-length or
            parallel to ``up`` and no unique orientation exists.
        """
        epsilon = settings.DISTANCE_EPSILON
        direction = np.asarray(direction, dtype=float)
        length = np.linalg.norm(direction)
        if length <= epsilon:
            return None
        forward = direction / length

        right = cls.right_from_up_and_forward(np.asarray(up, dtype=float), forward)
        right_length = np.linalg.norm(right)
        if right_length <= epsilon:
            return None
        right = right / right_length
        basis_up = cls.up_from_right_and_forward(right, forward)

        # Local +Z maps to forward (left-handed) or back (right-handed)
        basis = np.column_stack([right, basis_up, forward * cls.FORWARD_Z_SIGN])
        return Rotation.from_matrix(basis)

    @staticmethod
    def resolve(value: str | type[Handedness] | None) -> type[Handedness]:
        """Turn a handedness name (or None for the configured default) into its marker class.

        Raises:
            ValueError: If the name is not a known handedness.
        """
        if value is None:
            value = settings.DEFAULT_HANDEDNESS
        if isinstance(value, type) and issubclass(value, Handedness):
            return value
        try:
            return Handedness._by_name[str(value).lower()]
        except KeyError:
            msg = f"Unknown handedness '{value}' (expected one of {sorted(Handedness._by_name)})"
            raise ValueError(msg) from None


class RightHanded(Handedness):
    """Right-handed coordinates: forward is -Z."""

    name = "right"
    FORWARD_Z_SIGN = -1.0

    @classmethod
    def right_from_up_and_forward(cls, up: np.ndarray, forward: np.ndarray) -> np.ndarray:
        """Right vector from an up hint and a unit forward."""
        return np.cross(forward, up)

    @classmethod
    def up_from_right_and_forward(cls, right: np.ndarray, forward: np.ndarray) -> np.ndarray:
        """Up vector completing an orthonormal basis."""
        return np.cross(right, forward)


class LeftHanded(Handedness):
    """Left-handed coordinates: forward is +Z."""

    name = "left"
    FORWARD_Z_SIGN = 1.0

    @classmethod
    def right_from_up_and_forward(cls, up: np.ndarray, forward: np.ndarray) -> np.ndarray:
        """Right vector from an up hint and a unit forward."""
        return np.cross(up, forward)

    @classmethod
    def up_from_right_and_forward(cls, right: np.ndarray, forward: np.ndarray) -> np.ndarray:
        """Up vector completing an orthonormal basis."""
        return np.cross(forward, right)
