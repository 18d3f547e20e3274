"""Unit tests for the Smooth driver."""

import math
import unittest

import numpy as np
import pytest
from scipy.spatial.transform import Rotation as Quaternion

from camrig.conf import settings
from camrig.drivers import Position, Rotation, Smooth
from camrig.rig import CameraRig


def position_rig(smooth: Smooth, start: tuple[float, float, float] = (0.0, 0.0, 0.0)) -> CameraRig:
    return CameraRig.builder().with_driver(Position(start)).with_driver(smooth).build()


class TestSmoothPosition(unittest.TestCase):
    """Test position smoothing."""

    def test_starts_at_parent(self) -> None:
        """Test that a new rig starts exactly at the raw position."""
        rig = position_rig(Smooth.position(5.0), start=(1.0, 2.0, 3.0))

        np.testing.assert_array_equal(rig.final_transform.position, [1.0, 2.0, 3.0])

    def test_exponential_approach(self) -> None:
        """Test that one time constant covers 1 - 1/e of the distance."""
        rig = position_rig(Smooth.position(1.0))
        rig.driver(Position).position = (10.0, 0.0, 0.0)

        transform = rig.update(1.0)

        assert transform.position[0] == pytest.approx(10.0 * (1.0 - math.exp(-1.0)))

    def test_zero_smoothness_reproduces_parent(self) -> None:
        """Test that smoothness 0 follows the raw input every frame."""
        rig = position_rig(Smooth.position(0.0))

        for frame in range(1, 10):
            raw = (frame * 1.5, -frame * 0.5, frame * frame * 0.1)
            rig.driver(Position).position = raw

            transform = rig.update(1.0 / 60.0)

            np.testing.assert_array_equal(transform.position, raw)

    def test_huge_smoothness_barely_moves(self) -> None:
        """Test that a very large time constant leaves the output unchanged frame to frame."""
        rig = position_rig(Smooth.position(1e9), start=(1.0, 1.0, 1.0))

        for frame in range(1, 10):
            rig.driver(Position).position = (100.0 * frame, 0.0, 0.0)
            transform = rig.update(1.0 / 60.0)

            np.testing.assert_allclose(transform.position, [1.0, 1.0, 1.0], atol=1e-6)

    def test_zero_time_is_noop(self) -> None:
        """Test that update with no elapsed time repeats the previous output."""
        rig = position_rig(Smooth.position(0.5))
        rig.driver(Position).position = (4.0, 0.0, 0.0)
        previous = rig.update(0.1)

        rig.driver(Position).position = (50.0, 0.0, 0.0)
        transform = rig.update(0.0)

        np.testing.assert_array_equal(transform.position, previous.position)

    def test_rotation_follows_parent(self) -> None:
        """Test that a position-only Smooth passes rotation through."""
        rig = (
            CameraRig.builder()
            .with_driver(Rotation())
            .with_driver(Smooth.position(1.0))
            .build()
        )
        yaw = Quaternion.from_euler("y", 70, degrees=True)
        rig.driver(Rotation).rotation = yaw

        transform = rig.update(0.01)

        assert (transform.rotation.inv() * yaw).magnitude() < 1e-9

    def test_negative_smoothness_rejected(self) -> None:
        """Test that negative time constants are rejected."""
        with self.assertRaises(ValueError):
            Smooth.position(-1.0)
        with self.assertRaises(ValueError):
            Smooth(0.0, -0.5)


class TestSmoothRotation(unittest.TestCase):
    """Test rotation smoothing."""

    def test_halfway_after_half_life(self) -> None:
        """Test spherical interpolation with a factor of one half."""
        rig = CameraRig.builder().with_driver(Rotation()).with_driver(Smooth.rotation(1.0)).build()
        rig.driver(Rotation).rotation = Quaternion.from_euler("y", 90, degrees=True)

        transform = rig.update(math.log(2.0))

        expected = Quaternion.from_euler("y", 45, degrees=True)
        assert (transform.rotation.inv() * expected).magnitude() < 1e-9

    def test_rotation_stays_unit(self) -> None:
        """Test that smoothed rotations remain unit quaternions."""
        rig = CameraRig.builder().with_driver(Rotation()).with_driver(Smooth.rotation(0.3)).build()

        for frame in range(1, 50):
            rig.driver(Rotation).rotation = Quaternion.from_euler("yx", [frame * 13.0, frame * -7.0], degrees=True)
            transform = rig.update(1.0 / 60.0)

            assert np.linalg.norm(transform.rotation.as_quat()) == pytest.approx(1.0)


class TestSmoothPredictive(unittest.TestCase):
    """Test predictive smoothing."""

    def test_extrapolates_observed_velocity(self) -> None:
        """Test that the target is pushed ahead along the raw velocity."""
        rig = position_rig(Smooth.position(0.0, predictive=True, lookahead=0.25))
        rig.driver(Position).position = (1.0, 0.0, 0.0)

        transform = rig.update(0.1)

        # Velocity 10 units/s, 0.25 s ahead
        np.testing.assert_allclose(transform.position, [3.5, 0.0, 0.0])

    def test_lookahead_default_from_settings(self) -> None:
        """Test that the lookahead defaults to PREDICTIVE_LOOKAHEAD."""
        settings.configure(PREDICTIVE_LOOKAHEAD=0.5)

        assert Smooth.position(1.0, predictive=True).lookahead == 0.5

    def test_leads_plain_smoothing(self) -> None:
        """Test that predictive smoothing trails a moving target less than plain smoothing."""
        plain = position_rig(Smooth.position(0.5))
        predictive = position_rig(Smooth.position(0.5, predictive=True))

        for frame in range(1, 60):
            raw = (frame * 0.1, 0.0, 0.0)
            for rig in (plain, predictive):
                rig.driver(Position).position = raw
                rig.update(1.0 / 60.0)

        raw_x = 59 * 0.1
        plain_lag = raw_x - plain.final_transform.position[0]
        predictive_lag = raw_x - predictive.final_transform.position[0]
        assert abs(predictive_lag) < plain_lag

    def test_zero_time_is_noop(self) -> None:
        """Test that zero elapsed time repeats the previous predictive output."""
        rig = position_rig(Smooth.position(0.3, predictive=True))
        for frame in range(1, 5):
            rig.driver(Position).position = (frame * 1.0, 0.0, 0.0)
            rig.update(0.05)
        previous = rig.final_transform

        rig.driver(Position).position = (100.0, 0.0, 0.0)
        transform = rig.update(0.0)

        np.testing.assert_array_equal(transform.position, previous.position)

    def test_reset_snaps_to_parent(self) -> None:
        """Test that reset drops history."""
        rig = position_rig(Smooth.position(2.0, predictive=True))
        rig.driver(Position).position = (5.0, 0.0, 0.0)
        rig.update(0.1)

        rig.driver(Smooth).reset()
        transform = rig.update(0.1)

        np.testing.assert_array_equal(transform.position, [5.0, 0.0, 0.0])
