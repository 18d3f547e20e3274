"""Base class for rig drivers.

A driver is one stage of a camera rig. Each frame the rig hands every driver
the transform produced by the stage before it (identity for the first stage)
and the elapsed time, and the driver returns the transform for the next stage.

Example:
    Creating a custom driver::

        from camrig.driver import RigDriver
        from camrig.registry import DriverRegistry

        @DriverRegistry.register("bob")
        class Bob(RigDriver):
            def __init__(self, amplitude=0.1):
                self.amplitude = amplitude
                self.elapsed = 0.0

            def update(self, parent, delta_time_seconds):
                self.elapsed += delta_time_seconds
                offset = (0.0, self.amplitude * math.sin(self.elapsed), 0.0)
                return parent.with_position(parent.position + offset)

            @classmethod
            def from_dict(cls, data):
                return cls(amplitude=data.get("amplitude", 0.1))
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, Self

from camrig.transform import H

if TYPE_CHECKING:
    from camrig.handedness import Handedness
    from camrig.transform import Transform


class RigDriver(ABC, Generic[H]):
    """Base class for all rig drivers.

    Contract for implementers:
        - Return a transform whose rotation is a unit quaternion.
        - With ``delta_time_seconds == 0`` return the same result as the
          previous call. Never produce NaN or infinity.
        - Depend only on ``parent`` and the driver's own state, never on
          drivers later in the rig.

    A driver instance belongs to exactly one rig. The builder marks it as
    owned when the rig is built and refuses to hand it to a second rig.

    Attributes:
        handedness: Convention the driver is fixed to, or None when it follows
            whatever rig it is placed in. The builder rejects a fixed driver
            whose convention differs from the rig's.
    """

    handedness: type[Handedness] | None = None
    _owned: bool = False

    @abstractmethod
    def update(self, parent: Transform[H], delta_time_seconds: float) -> Transform[H]:
        """Produce this stage's transform.

        Args:
            parent: Output of the previous driver in the rig.
            delta_time_seconds: Time elapsed since the last rig update. May be zero.

        Returns:
            The transform handed to the next driver.
        """

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create a driver from a config dictionary.

        Drivers that can be built from rig configs override this.

        Raises:
            NotImplementedError: If the driver cannot be created from a dict.
        """
        msg = f"{cls.__name__} cannot be created from a config dictionary"
        raise NotImplementedError(msg)
