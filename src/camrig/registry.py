"""Registry for drivers that can be created from rig configs.

Drivers register themselves under a config name with the
@DriverRegistry.register decorator, enabling CameraRigBuilder.from_config to
turn a list of dictionaries into a rig:

    rig = CameraRigBuilder.from_config(
        [
            {"type": "position", "position": [0.0, 2.0, 8.0]},
            {"type": "smooth", "position_smoothness": 0.5},
            {"type": "look_at", "target": [0.0, 1.0, 0.0]},
        ]
    )

Modules holding drivers are discovered through settings.INSTALLED_DRIVERS, so
projects can add their own:

    INSTALLED_DRIVERS = [
        *global_settings.INSTALLED_DRIVERS,
        "mygame.camera.drivers",
    ]
"""

from __future__ import annotations

import importlib
import logging
from typing import TYPE_CHECKING, Any, ClassVar, TypeVar

from camrig.conf import settings

if TYPE_CHECKING:
    from collections.abc import Callable

    from camrig.driver import RigDriver

logger = logging.getLogger(__name__)

D = TypeVar("D", bound="type[RigDriver]")


class DriverRegistry:
    """Central registry mapping config names to driver classes.

    Class Attributes:
        _drivers: Dictionary mapping config names to driver classes.
    """

    _drivers: ClassVar[dict[str, type[RigDriver]]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[D], D]:
        """Register a driver class under a config name.

        Used as a decorator on driver classes.

        Args:
            name: Value of the "type" key that selects this driver in a config.

        Returns:
            A decorator returning the same class.

        Raises:
            ValueError: If ``name`` is empty.
        """
        if not name:
            msg = "Drivers must be registered under a non-empty name"
            raise ValueError(msg)

        def decorator(driver_class: D) -> D:
            if name in cls._drivers and cls._drivers[name] is not driver_class:
                logger.warning(
                    "Driver '%s' is being re-registered (was %s, now %s)",
                    name,
                    cls._drivers[name].__name__,
                    driver_class.__name__,
                )
            cls._drivers[name] = driver_class
            logger.debug("Registered driver: %s", name)
            return driver_class

        return decorator

    @classmethod
    def get(cls, name: str) -> type[RigDriver] | None:
        """Get a registered driver class by name."""
        return cls._drivers.get(name)

    @classmethod
    def get_all(cls) -> dict[str, type[RigDriver]]:
        """Get all registered drivers."""
        return cls._drivers.copy()

    @classmethod
    def is_registered(cls, name: str) -> bool:
        """Check if a driver name is registered."""
        return name in cls._drivers

    @classmethod
    def create(cls, data: dict[str, Any]) -> RigDriver:
        """Instantiate the driver described by a config entry.

        Args:
            data: Dictionary with a "type" key naming a registered driver. The
                remaining keys are passed to the driver's from_dict().

        Raises:
            ValueError: If "type" is missing or names no registered driver.
        """
        name = data.get("type")
        driver_class = cls.get(name) if name else None
        if driver_class is None:
            msg = f"Unknown driver type '{name}' (registered: {sorted(cls._drivers)})"
            raise ValueError(msg)
        params = {key: value for key, value in data.items() if key != "type"}
        return driver_class.from_dict(params)

    @classmethod
    def autodiscover(cls) -> None:
        """Import every module in settings.INSTALLED_DRIVERS so their drivers register."""
        for module_path in settings.INSTALLED_DRIVERS:
            importlib.import_module(module_path)

    @classmethod
    def clear(cls) -> None:
        """Clear the registry (for testing)."""
        cls._drivers.clear()
        logger.debug("Driver registry cleared")
