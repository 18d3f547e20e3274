"""Default settings for camrig.

Users can override these in their project's camrig_settings.py file, or in the
module named by the CAMRIG_SETTINGS_MODULE environment variable.

Example:
    # In your project's camrig_settings.py:
    DEFAULT_HANDEDNESS = "left"
    PREDICTIVE_LOOKAHEAD = 0.1
"""

# Coordinate conventions
DEFAULT_HANDEDNESS = "right"
"""Handedness used by builders and rig configs that do not name one ("right" or "left")."""

# Smoothing
SMOOTHNESS_EPSILON = 1e-5
"""Smallest smoothing time constant in seconds. Smaller values are clamped to this."""

PREDICTIVE_LOOKAHEAD = 0.25
"""Seconds of observed velocity a predictive Smooth driver extrapolates ahead."""

# Geometry
DISTANCE_EPSILON = 1e-6
"""Vectors shorter than this are treated as zero-length and never normalized."""

# Orientation
PITCH_LIMIT_DEGREES = 90.0
"""YawPitch clamps accumulated pitch to +/- this many degrees."""

# Installed drivers (like Django's INSTALLED_APPS)
INSTALLED_DRIVERS = [
    "camrig.drivers",
]
"""Modules imported before building a rig from config, so their drivers register.

Example:
    INSTALLED_DRIVERS = [
        *global_settings.INSTALLED_DRIVERS,
        "myproject.camera.drivers",
    ]
"""
