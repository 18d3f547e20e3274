"""The position + rotation value passed between rig drivers."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, TypeVar

import numpy as np
from scipy.spatial.transform import Rotation

from camrig.handedness import UP, Handedness, RightHanded

if TYPE_CHECKING:
    from numpy.typing import ArrayLike

H = TypeVar("H", bound=Handedness)


def as_vector(value: ArrayLike) -> np.ndarray:
    """Copy any 3-element sequence into a new float vector.

    Raises:
        ValueError: If ``value`` does not hold exactly three numbers.
    """
    vector = np.array(value, dtype=float)
    if vector.shape != (3,):
        msg = f"Expected a 3D vector, got shape {vector.shape}"
        raise ValueError(msg)
    return vector


@dataclass(frozen=True, eq=False)
class Transform(Generic[H]):
    """Camera position and orientation for one pipeline stage.

    Transforms are immutable: ``position`` is stored as a read-only array and
    scipy ``Rotation`` objects are never mutated in place. Drivers build a new
    Transform rather than editing their parent.

    Attributes:
        position: World-space position as a float array of shape (3,).
        rotation: Unit quaternion orientation.
        handedness: Marker class for the coordinate convention of the owning rig.
    """

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    rotation: Rotation = field(default_factory=Rotation.identity)
    handedness: type[H] = RightHanded  # type: ignore[assignment]

    def __post_init__(self) -> None:
        position = as_vector(self.position)
        position.setflags(write=False)
        object.__setattr__(self, "position", position)

    @classmethod
    def identity(cls, handedness: type[H]) -> Transform[H]:
        """Origin position, identity rotation."""
        return cls(np.zeros(3), Rotation.identity(), handedness)

    def with_position(self, position: ArrayLike) -> Transform[H]:
        """Copy with a new position."""
        return dataclasses.replace(self, position=position)

    def with_rotation(self, rotation: Rotation) -> Transform[H]:
        """Copy with a new rotation."""
        return dataclasses.replace(self, rotation=rotation)

    def forward(self) -> np.ndarray:
        """World-space direction the camera is looking."""
        return self.rotation.apply(self.handedness.forward_axis())

    def right(self) -> np.ndarray:
        """World-space direction of the camera's local +X."""
        return self.rotation.apply(np.array([1.0, 0.0, 0.0]))

    def up(self) -> np.ndarray:
        """World-space direction of the camera's local +Y."""
        return self.rotation.apply(UP)

    def __repr__(self) -> str:
        return (
            f"Transform(position={self.position.tolist()}, "
            f"rotation={self.rotation.as_quat().tolist()}, handedness={self.handedness.__name__})"
        )
