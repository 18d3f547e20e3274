"""Camera rigs: ordered pipelines of drivers.

A CameraRig owns a fixed sequence of drivers. Every frame, update(dt) starts
from the identity transform and feeds each driver the output of the one before
it. The last driver's output is cached as ``final_transform`` for the renderer.

Usage Example:
    rig = (
        CameraRig.builder()
        .with_driver(Position((0.0, 2.0, 8.0)))
        .with_driver(YawPitch())
        .with_driver(Smooth.position_rotation(1.0, 1.0))
        .build()
    )

    # Each frame: push input into drivers, then advance the rig
    rig.driver(YawPitch).rotate_yaw_pitch(-mouse_dx * 0.1, -mouse_dy * 0.1)
    transform = rig.update(delta_time)

Driver order matters: a Smooth placed before a constraint makes the constraint
act on smoothed motion, while placing it after smooths the constrained result.
The order is fixed once the rig is built.

Threading:
    A rig is not synchronized. Call update() from one thread and read
    ``final_transform`` only between updates. Separate rigs share no state and
    may be updated from different threads.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Generic, Self, TypeVar

from camrig.handedness import Handedness
from camrig.registry import DriverRegistry
from camrig.transform import H, Transform

if TYPE_CHECKING:
    from collections.abc import Iterable

    from camrig.driver import RigDriver

logger = logging.getLogger(__name__)

D = TypeVar("D", bound="RigDriver")


class DriverNotFoundError(LookupError):
    """Raised when a rig holds no driver of the requested type.

    This is a configuration mistake in the code that built the rig, not a
    runtime condition to recover from.
    """


class CameraRig(Generic[H]):
    """An ordered, immutable-order pipeline of drivers.

    Attributes:
        handedness: Coordinate convention shared by every driver of the rig.
        final_transform: Result of the latest update(). Overwritten by each call.
    """

    def __init__(self, drivers: Iterable[RigDriver[H]], handedness: type[H]) -> None:
        """Create a rig. Prefer CameraRig.builder(), which also validates ownership.

        Args:
            drivers: Drivers in evaluation order.
            handedness: Marker class for the rig's coordinate convention.
        """
        self._drivers: tuple[RigDriver[H], ...] = tuple(drivers)
        self.handedness = handedness
        self.final_transform: Transform[H] = Transform.identity(handedness)

    @classmethod
    def builder(cls, handedness: str | type[Handedness] | None = None) -> CameraRigBuilder:
        """Start building a rig.

        Args:
            handedness: Marker class or name ("right"/"left"). None uses
                settings.DEFAULT_HANDEDNESS.
        """
        return CameraRigBuilder(handedness)

    @property
    def drivers(self) -> tuple[RigDriver[H], ...]:
        """The rig's drivers in evaluation order."""
        return self._drivers

    def driver(self, driver_type: type[D]) -> D:
        """Return the first driver whose concrete type is ``driver_type``.

        Use the returned reference to mutate driver state between updates,
        e.g. ``rig.driver(LookAt).target = enemy_position``. Drivers wrapped
        inside a nested rig are not searched; the wrapping driver exposes its
        own accessors for them.

        Raises:
            DriverNotFoundError: If the rig holds no driver of that type.
        """
        for driver in self._drivers:
            if type(driver) is driver_type:
                return driver

        logger.error(
            "CameraRig: no %s driver among [%s]",
            driver_type.__name__,
            ", ".join(type(driver).__name__ for driver in self._drivers),
        )
        msg = f"Camera rig has no driver of type {driver_type.__name__}"
        raise DriverNotFoundError(msg)

    def update(self, delta_time_seconds: float) -> Transform[H]:
        """Run every driver once and cache the result.

        Args:
            delta_time_seconds: Time since the previous update, in seconds. Zero
                re-evaluates the rig without advancing any smoothing.

        Returns:
            The new ``final_transform``.
        """
        transform = Transform.identity(self.handedness)
        for driver in self._drivers:
            transform = driver.update(transform, delta_time_seconds)
        self.final_transform = transform
        return transform


class CameraRigBuilder(Generic[H]):
    """Collects drivers in call order and finalizes them into a CameraRig."""

    def __init__(self, handedness: str | type[Handedness] | None = None) -> None:
        """Initialize an empty builder.

        Raises:
            ValueError: If ``handedness`` names no known convention.
        """
        self.handedness: type[H] = Handedness.resolve(handedness)  # type: ignore[assignment]
        self._drivers: list[RigDriver[H]] = []

    def with_driver(self, driver: RigDriver[H]) -> Self:
        """Append a driver. Drivers run in the order they were added."""
        self._drivers.append(driver)
        return self

    def build(self) -> CameraRig[H]:
        """Create the rig and evaluate it once with zero elapsed time.

        The initial evaluation makes ``final_transform`` meaningful before the
        first frame and seeds every smoothing driver with its starting value.

        Raises:
            ValueError: If a driver instance was added twice, already belongs
                to another rig, or is fixed to a different handedness.
        """
        seen: set[int] = set()
        for driver in self._drivers:
            if driver.handedness is not None and driver.handedness is not self.handedness:
                msg = (
                    f"{type(driver).__name__} is {driver.handedness.name}-handed "
                    f"but the rig is {self.handedness.name}-handed"
                )
                raise ValueError(msg)
            if id(driver) in seen:
                msg = f"{type(driver).__name__} instance was added to the rig more than once"
                raise ValueError(msg)
            if driver._owned:  # noqa: SLF001
                msg = f"{type(driver).__name__} instance already belongs to another rig"
                raise ValueError(msg)
            seen.add(id(driver))

        for driver in self._drivers:
            driver._owned = True  # noqa: SLF001

        rig = CameraRig(self._drivers, self.handedness)
        rig.update(0.0)
        logger.debug(
            "Built %s-handed camera rig: [%s]",
            self.handedness.name,
            ", ".join(type(driver).__name__ for driver in self._drivers),
        )
        return rig

    @classmethod
    def from_config(
        cls,
        entries: Iterable[dict[str, Any]],
        handedness: str | type[Handedness] | None = None,
    ) -> CameraRig:
        """Build a rig from a list of driver config dictionaries.

        Each entry names a registered driver under "type"; the remaining keys
        go to that driver's from_dict(). Entries without a "handedness" key
        receive the rig's, so composite drivers build their inner rigs in the
        same convention.

        Example:
            rig = CameraRigBuilder.from_config(
                [
                    {"type": "position", "position": [4.0, 3.0, 8.0]},
                    {"type": "maintain_distance", "focal": [0, 0, 0], "min_distance": 4, "max_distance": 10},
                    {"type": "look_at", "target": [0.0, 1.0, 0.0], "smoothness": 1.25},
                ],
                handedness="right",
            )

        Raises:
            ValueError: If an entry names an unknown driver type or a
                handedness other than the rig's.
        """
        DriverRegistry.autodiscover()
        builder = cls(handedness)
        for entry in entries:
            builder.with_driver(DriverRegistry.create({"handedness": builder.handedness, **entry}))
        return builder.build()
