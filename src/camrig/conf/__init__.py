"""Settings for camrig, loaded lazily from a project module.

Usage:
    # In your project's camrig_settings.py
    SMOOTHNESS_EPSILON = 1e-4
    PREDICTIVE_LOOKAHEAD = 0.1
    DEFAULT_HANDEDNESS = "left"

    # In your game code
    from camrig.conf import settings

    print(settings.PREDICTIVE_LOOKAHEAD)  # 0.1

Values for the built-in settings are checked when they are loaded or
configured, so a typo in a settings module fails at startup instead of
producing NaN transforms mid-game.
"""

import importlib
import logging
import numbers
import os
from typing import Any

from camrig.conf import global_settings

logger = logging.getLogger(__name__)

NON_NEGATIVE_SETTINGS = frozenset(
    {"SMOOTHNESS_EPSILON", "PREDICTIVE_LOOKAHEAD", "DISTANCE_EPSILON", "PITCH_LIMIT_DEGREES"}
)


def validate_setting(name: str, value: Any) -> None:  # noqa: ANN401
    """Check a value for one of camrig's own settings.

    Unknown names pass unchecked so projects can keep their own settings
    alongside camrig's.

    Raises:
        TypeError: If the value has the wrong type.
        ValueError: If a numeric setting is negative or a handedness name is unknown.
    """
    if name in NON_NEGATIVE_SETTINGS:
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            msg = f"{name} must be a number, got {value!r}"
            raise TypeError(msg)
        if value < 0:
            msg = f"{name} must be non-negative, got {value}"
            raise ValueError(msg)
    elif name == "INSTALLED_DRIVERS":
        if isinstance(value, str) or not all(isinstance(path, str) for path in value):
            msg = f"INSTALLED_DRIVERS must be a list of module paths, got {value!r}"
            raise TypeError(msg)
    elif name == "DEFAULT_HANDEDNESS":
        from camrig.handedness import Handedness  # noqa: PLC0415

        if value is None:
            msg = "DEFAULT_HANDEDNESS cannot be None"
            raise TypeError(msg)
        Handedness.resolve(value)


class Settings:
    """Container for all settings with attribute access."""

    def __init__(self) -> None:
        """Initialize settings with defaults from global_settings."""
        for setting in dir(global_settings):
            if setting.isupper():
                setattr(self, setting, getattr(global_settings, setting))

    def update(self, options: dict[str, Any]) -> None:
        """Validate and apply upper-case settings, ignoring anything else."""
        for name, value in options.items():
            if name.isupper():
                validate_setting(name, value)
                setattr(self, name, value)


class LazySettings:
    """Proxy that loads settings the first time one is read or written.

    The project module is named by the CAMRIG_SETTINGS_MODULE environment
    variable and defaults to "camrig_settings". Without one, the defaults in
    global_settings apply.
    """

    def __init__(self) -> None:
        """Initialize the lazy settings proxy."""
        self._wrapped: Settings | None = None

    def _load(self) -> Settings:
        if self._wrapped is not None:
            return self._wrapped

        wrapped = Settings()
        settings_module = os.environ.get("CAMRIG_SETTINGS_MODULE", "camrig_settings")
        try:
            mod = importlib.import_module(settings_module)
        except ImportError:
            logger.debug("No settings module '%s', using camrig defaults", settings_module)
        else:
            wrapped.update(vars(mod))
            logger.debug("Loaded camrig settings from '%s'", settings_module)
        self._wrapped = wrapped
        return wrapped

    def __getattr__(self, name: str) -> Any:  # noqa: ANN401
        """Get a setting value, loading settings if not yet loaded."""
        return getattr(self._load(), name)

    def __setattr__(self, name: str, value: Any) -> None:  # noqa: ANN401
        """Set a setting value."""
        if name == "_wrapped":
            self.__dict__["_wrapped"] = value
        else:
            self._load().update({name: value})

    def configure(self, **options: Any) -> None:  # noqa: ANN401
        """Override settings in code, skipping the project module.

        Example:
            settings.configure(
                SMOOTHNESS_EPSILON=1e-6,
                PREDICTIVE_LOOKAHEAD=0.5,
            )

        Raises:
            TypeError: If a built-in setting gets a value of the wrong type.
            ValueError: If a built-in setting gets an out-of-range value.
        """
        if self._wrapped is None:
            self._wrapped = Settings()
        self._wrapped.update(options)

    def is_configured(self) -> bool:
        """Check if settings have been loaded."""
        return self._wrapped is not None


# Global singleton instance
settings = LazySettings()

__all__ = ["LazySettings", "Settings", "global_settings", "settings", "validate_setting"]
