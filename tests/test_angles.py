"""Tests for view angle conversion and unit helpers."""

import math

import numpy as np
import pytest

import pyhpm.model as mdl
import pyhpm.model.angles as angles
import pyhpm.utils as utils


class TestDirection:
    """Tests for direction (radians) and forward (degrees)."""

    def test_axes(self):
        np.testing.assert_allclose(angles.direction([0.0, 0.0]), [1.0, 0.0, 0.0], atol=1e-12)
        np.testing.assert_allclose(angles.direction([math.pi / 2, 0.0]), [0.0, 1.0, 0.0], atol=1e-12)
        np.testing.assert_allclose(angles.direction([0.0, math.pi / 2]), [0.0, 0.0, -1.0], atol=1e-12)

    def test_increasing_pitch_lowers_z(self):
        z = angles.direction(np.array([[0.0, -0.5], [0.0, 0.0], [0.0, 0.5]]))[:, mdl.IZ]
        assert z[0] > z[1] > z[2]

    def test_periodic_yaw(self):
        np.testing.assert_allclose(
            angles.direction([0.3 + 2 * math.pi, 0.2]), angles.direction([0.3, 0.2]), atol=1e-12
        )

    def test_unit_length(self):
        vs = angles.direction(np.random.default_rng(7).uniform(-10.0, 10.0, (50, 2)))
        np.testing.assert_allclose(np.linalg.norm(vs, axis=-1), 1.0, atol=1e-12)

    def test_forward_degrees(self):
        np.testing.assert_allclose(angles.forward([90.0, 0.0]), [0.0, 1.0, 0.0], atol=1e-12)
        np.testing.assert_allclose(angles.forward([0.0, 45.0]), [math.sqrt(0.5), 0.0, -math.sqrt(0.5)])

    def test_batch_shape(self):
        assert angles.direction(np.zeros((4, 2))).shape == (4, 3)

    def test_bad_shape(self):
        with pytest.raises(mdl.ModelException, match="Invalid 'angles' shape"):
            angles.direction([0.0, 0.0, 0.0])


class TestUtils:
    """Tests for the unit conversions and vector helpers."""

    def test_degree_radian(self):
        assert utils.d2r(180.0) == pytest.approx(math.pi)
        assert utils.r2d(math.pi) == pytest.approx(180.0)
        np.testing.assert_allclose(utils.d2r(np.array([90.0, -90.0])), [math.pi / 2, -math.pi / 2])

    def test_lerp(self):
        assert utils.lerp(2.5, 17.5, 0.0) == 2.5
        assert utils.lerp(2.5, 17.5, 1.0) == 17.5
        assert utils.lerp(2.5, 17.5, 2.0) == pytest.approx(32.5)
        assert utils.lerp(2.5, 17.5, -1.0) == pytest.approx(-12.5)

    def test_horizontal_unit(self):
        v = np.array([3.0, 4.0, 7.0])
        u, ok = utils.horizontal_unit(v)
        np.testing.assert_allclose(u, [0.6, 0.8, 0.0])
        assert ok
        np.testing.assert_array_equal(v, [3.0, 4.0, 7.0])

    def test_horizontal_unit_degenerate(self):
        u, ok = utils.horizontal_unit(np.array([[0.0, 0.0, 1.0], [1e-17, 0.0, -1.0], [0.0, 2.0, 0.0]]))
        np.testing.assert_array_equal(ok, [False, False, True])
        np.testing.assert_array_equal(u, [[0.0, 0.0, 0.0], [0.0, 0.0, 0.0], [0.0, 1.0, 0.0]])

    @pytest.mark.parametrize("pitch", [-89.9, -45.0, 0.0, 30.0, 89.9])
    @pytest.mark.parametrize("yaw", [-170.0, 0.0, 33.0, 270.0])
    def test_view_horizontal_unit_length(self, yaw, pitch):
        """XY projection of any view short of straight up/down has unit length."""
        u, ok = utils.horizontal_unit(angles.forward([yaw, pitch]))
        assert ok
        assert np.linalg.norm(u) == pytest.approx(1.0, abs=1e-9)

    @pytest.mark.parametrize("pitch", [90.0 - 1e-8, -(90.0 - 1e-8), 90.0 - 1e-12])
    @pytest.mark.parametrize("yaw", [0.0, 30.0, -135.0])
    def test_near_vertical_keeps_direction(self, yaw, pitch):
        """Only exactly straight up/down loses the horizontal direction."""
        u, ok = utils.horizontal_unit(angles.forward([yaw, pitch]))
        assert ok
        assert np.linalg.norm(u) == pytest.approx(1.0, abs=1e-9)
        np.testing.assert_allclose(
            u[:2], [math.cos(math.radians(yaw)), math.sin(math.radians(yaw))], atol=1e-6
        )

    @pytest.mark.parametrize("pitch", [90.0, -90.0])
    def test_exactly_vertical_is_degenerate(self, pitch):
        u, ok = utils.horizontal_unit(angles.forward([30.0, pitch]))
        assert not ok
        np.testing.assert_array_equal(u, [0.0, 0.0, 0.0])
