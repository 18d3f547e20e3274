"""Unit tests for exponential smoothing helpers."""

import math
import unittest

import numpy as np
import pytest
from scipy.spatial.transform import Rotation

from camrig.conf import settings
from camrig.smoothing import ExpSmoothed, lerp, slerp, smoothing_factor


class TestSmoothingFactor(unittest.TestCase):
    """Test smoothing_factor."""

    def test_zero_elapsed_time(self) -> None:
        """Test that no time means no movement."""
        assert smoothing_factor(0.0, 1.0) == 0.0

    def test_time_constant(self) -> None:
        """Test the exponential response."""
        assert smoothing_factor(1.0, 1.0) == pytest.approx(1.0 - math.exp(-1.0))
        assert smoothing_factor(math.log(2.0), 1.0) == pytest.approx(0.5)

    def test_zero_smoothness_snaps(self) -> None:
        """Test that a vanishing time constant reaches the target in one frame."""
        assert smoothing_factor(1.0 / 60.0, 0.0) == 1.0

    def test_epsilon_from_settings(self) -> None:
        """Test that the time constant is clamped to SMOOTHNESS_EPSILON."""
        settings.configure(SMOOTHNESS_EPSILON=1.0)

        assert smoothing_factor(1.0, 0.0) == pytest.approx(1.0 - math.exp(-1.0))

    def test_infinite_smoothness_freezes(self) -> None:
        """Test that an infinite time constant never moves."""
        assert smoothing_factor(1.0 / 60.0, math.inf) == 0.0


class TestInterpolation(unittest.TestCase):
    """Test lerp and slerp."""

    def test_lerp(self) -> None:
        """Test linear interpolation of vectors."""
        result = lerp(np.array([0.0, 0.0, 0.0]), np.array([2.0, 4.0, -2.0]), 0.25)

        np.testing.assert_allclose(result, [0.5, 1.0, -0.5])

    def test_slerp_halfway(self) -> None:
        """Test spherical interpolation halfway between two yaws."""
        start = Rotation.identity()
        end = Rotation.from_euler("y", 90, degrees=True)

        result = slerp(start, end, 0.5)

        expected = Rotation.from_euler("y", 45, degrees=True)
        assert (result.inv() * expected).magnitude() < 1e-9


class TestExpSmoothed(unittest.TestCase):
    """Test ExpSmoothed."""

    def test_first_value_snaps(self) -> None:
        """Test that the first call returns the target."""
        smoothed = ExpSmoothed(lerp)
        target = np.array([1.0, 2.0, 3.0])

        result = smoothed.smooth_towards(target, 0.1, smoothness=10.0)

        np.testing.assert_array_equal(result, target)

    def test_moves_toward_target(self) -> None:
        """Test that later calls blend from the previous value."""
        smoothed = ExpSmoothed(lerp)
        smoothed.smooth_towards(np.array([0.0, 0.0, 0.0]), 0.0, smoothness=1.0)

        result = smoothed.smooth_towards(np.array([10.0, 0.0, 0.0]), math.log(2.0), smoothness=1.0)

        np.testing.assert_allclose(result, [5.0, 0.0, 0.0])

    def test_zero_time_keeps_previous(self) -> None:
        """Test that zero elapsed time returns the previous value unchanged."""
        smoothed = ExpSmoothed(lerp)
        first = smoothed.smooth_towards(np.array([1.0, 1.0, 1.0]), 0.0, smoothness=1.0)

        result = smoothed.smooth_towards(np.array([9.0, 9.0, 9.0]), 0.0, smoothness=1.0)

        assert result is first

    def test_reset(self) -> None:
        """Test that reset snaps to the next target."""
        smoothed = ExpSmoothed(lerp)
        smoothed.smooth_towards(np.array([0.0, 0.0, 0.0]), 0.0, smoothness=1.0)
        smoothed.reset()

        result = smoothed.smooth_towards(np.array([4.0, 0.0, 0.0]), 0.01, smoothness=1.0)

        np.testing.assert_array_equal(result, [4.0, 0.0, 0.0])
