"""Shared pytest configuration and fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from camrig.conf import settings

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def configure_test_settings() -> Generator[None]:
    """Configure settings for each test and reset them afterwards.

    Yields:
        None
    """
    settings.configure(
        DEFAULT_HANDEDNESS="right",
        SMOOTHNESS_EPSILON=1e-5,
        PREDICTIVE_LOOKAHEAD=0.25,
        DISTANCE_EPSILON=1e-6,
        PITCH_LIMIT_DEGREES=90.0,
        INSTALLED_DRIVERS=["camrig.drivers"],
    )
    yield
    # Reset settings after test
    settings._wrapped = None
