"""Unit tests for the MaintainDistance driver."""

import math
import unittest

import numpy as np
import pytest
from scipy.spatial.transform import Rotation

from camrig.drivers import MaintainDistance
from camrig.handedness import RightHanded
from camrig.transform import Transform


class TestMaintainDistance(unittest.TestCase):
    """Test clamping the in-plane distance to a focal point."""

    def setUp(self) -> None:
        """Create the constraint used by most tests."""
        self.driver = MaintainDistance(
            (0.0, 0.0, 0.0),
            min_distance=4.0,
            max_distance=10.0,
            plane_normal=(0.0, 1.0, 0.0),
        )
        self.rotation = Rotation.from_euler("yx", [35.0, -12.0], degrees=True)

    def parent_at(self, position: tuple[float, float, float]) -> Transform:
        return Transform(position, self.rotation, RightHanded)

    def in_plane_distance(self, transform: Transform) -> float:
        return float(np.linalg.norm(self.driver.vector_to_focal(transform.position)))

    def test_too_far_pulled_in(self) -> None:
        """Test that a camera beyond max_distance lands on it."""
        parent = self.parent_at((0.0, 0.0, 15.0))

        result = self.driver.update(parent, 1.0 / 60.0)

        assert self.in_plane_distance(result) == pytest.approx(10.0)
        np.testing.assert_allclose(result.position, [0.0, 0.0, 10.0])
        assert result.rotation is parent.rotation

    def test_too_close_pushed_out(self) -> None:
        """Test that a camera inside min_distance is pushed away."""
        parent = self.parent_at((0.0, 0.0, 2.0))

        result = self.driver.update(parent, 1.0 / 60.0)

        assert self.in_plane_distance(result) == pytest.approx(4.0)
        np.testing.assert_allclose(result.position, [0.0, 0.0, 4.0])
        assert result.rotation is parent.rotation

    def test_inside_band_passes_through(self) -> None:
        """Test that a camera within the band is returned untouched."""
        parent = self.parent_at((0.0, 0.0, 7.0))

        result = self.driver.update(parent, 1.0 / 60.0)

        assert result is parent

    def test_height_unchanged(self) -> None:
        """Test that only the in-plane component is corrected."""
        parent = self.parent_at((9.0, 3.0, 12.0))

        result = self.driver.update(parent, 1.0 / 60.0)

        assert result.position[1] == 3.0
        assert self.in_plane_distance(result) == pytest.approx(10.0)
        # Direction toward the focal point is preserved
        np.testing.assert_allclose(result.position[[0, 2]], [6.0, 8.0])

    def test_camera_above_focal_skips_correction(self) -> None:
        """Test the zero-length in-plane vector fallback."""
        parent = self.parent_at((0.0, 5.0, 0.0))

        with self.assertLogs("camrig.drivers.maintain_distance", level="DEBUG"):
            result = self.driver.update(parent, 1.0 / 60.0)

        assert result is parent

    def test_zero_plane_normal_measures_3d_distance(self) -> None:
        """Test that a zero normal constrains full 3D distance."""
        driver = MaintainDistance((0.0, 0.0, 0.0), max_distance=10.0, plane_normal=(0.0, 0.0, 0.0))

        result = driver.update(self.parent_at((0.0, 12.0, 0.0)), 1.0 / 60.0)

        np.testing.assert_allclose(result.position, [0.0, 10.0, 0.0])

    def test_tilted_plane(self) -> None:
        """Test a constraint measured in a plane other than the ground plane."""
        driver = MaintainDistance((0.0, 0.0, 0.0), max_distance=5.0, plane_normal=(0.0, 0.0, 2.0))

        result = driver.update(self.parent_at((0.0, 20.0, 7.0)), 1.0 / 60.0)

        np.testing.assert_allclose(result.position, [0.0, 5.0, 7.0])

    def test_zero_time_is_noop(self) -> None:
        """Test that zero elapsed time gives the same result."""
        parent = self.parent_at((3.0, 0.0, 20.0))

        first = self.driver.update(parent, 1.0 / 60.0)
        second = self.driver.update(parent, 0.0)

        np.testing.assert_array_equal(first.position, second.position)

    def test_retarget_focal(self) -> None:
        """Test moving the focal point between frames."""
        self.driver.focal = (0.0, 0.0, 20.0)

        result = self.driver.update(self.parent_at((0.0, 0.0, 18.0)), 1.0 / 60.0)

        np.testing.assert_allclose(result.position, [0.0, 0.0, 16.0])

    def test_invalid_band_rejected(self) -> None:
        """Test that inverted or negative bands are rejected."""
        with self.assertRaises(ValueError):
            MaintainDistance((0.0, 0.0, 0.0), min_distance=5.0, max_distance=1.0)
        with self.assertRaises(ValueError):
            MaintainDistance((0.0, 0.0, 0.0), min_distance=-1.0)

    def test_defaults_never_clamp(self) -> None:
        """Test that the default band accepts any distance."""
        driver = MaintainDistance((0.0, 0.0, 0.0))
        parent = self.parent_at((1e6, 0.0, 0.0))

        assert driver.max_distance == math.inf
        assert driver.update(parent, 0.1) is parent
