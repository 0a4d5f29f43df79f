"""
Tests for core/rules.py

Separation, alignment, cohesion, and seek.
"""

import numpy as np
import pytest

from flock_swarm.core.unit import Unit
from flock_swarm.core.rules import separation, alignment, cohesion, steer


def make_unit(x, y, vx=0.0, vy=0.0):
    return Unit(position=[x, y], velocity=[vx, vy])


class TestSeparation:
    """Tests for the separation rule."""

    def test_no_neighbors(self):
        unit = make_unit(0.0, 0.0)
        np.testing.assert_array_equal(separation(unit, [unit], 100.0), [0.0, 0.0])

    def test_inverse_distance_weighting(self):
        """Each neighbor pushes with strength 1/distance."""
        unit = make_unit(0.0, 0.0)
        near = make_unit(10.0, 0.0)
        far = make_unit(0.0, -20.0)

        force = separation(unit, [unit, near, far], 100.0)
        np.testing.assert_allclose(force, [-0.1, 0.05])

    def test_sum_not_average(self):
        unit = make_unit(0.0, 0.0)
        others = [make_unit(10.0, 0.0), make_unit(10.0, 0.0001)]
        force = separation(unit, [unit] + others, 100.0)
        assert force[0] == pytest.approx(-0.2, rel=1e-6)

    def test_coincident_units_ignore_each_other(self):
        """Two units at the same position add nothing to each other's sum."""
        a = make_unit(5.0, 5.0)
        b = make_unit(5.0, 5.0, 1.0, 0.0)

        np.testing.assert_array_equal(separation(a, [a, b], 100.0), [0.0, 0.0])
        np.testing.assert_array_equal(separation(b, [a, b], 100.0), [0.0, 0.0])

    def test_coincident_units_still_feel_others(self):
        a = make_unit(5.0, 5.0)
        b = make_unit(5.0, 5.0)
        c = make_unit(8.0, 9.0)

        force = separation(a, [a, b, c], 100.0)
        np.testing.assert_allclose(force, [-0.12, -0.16])

    def test_outside_radius_ignored(self):
        unit = make_unit(0.0, 0.0)
        other = make_unit(150.0, 0.0)
        np.testing.assert_array_equal(separation(unit, [unit, other], 100.0), [0.0, 0.0])


class TestAlignment:
    """Tests for the alignment rule."""

    def test_zero_when_alone(self):
        unit = make_unit(0.0, 0.0, 1.0, 1.0)
        np.testing.assert_array_equal(alignment(unit, [unit], 50.0), [0.0, 0.0])

    def test_zero_when_all_out_of_range(self):
        flock = [make_unit(0.0, 0.0), make_unit(100.0, 0.0, 1.0, 0.0), make_unit(0.0, 100.0, 0.0, 1.0)]
        for unit in flock:
            np.testing.assert_array_equal(alignment(unit, flock, 50.0), [0.0, 0.0])

    def test_average_velocity(self):
        unit = make_unit(0.0, 0.0, 5.0, 5.0)
        flock = [unit, make_unit(10.0, 0.0, 1.0, 0.0), make_unit(0.0, 20.0, 0.0, 1.0)]
        np.testing.assert_allclose(alignment(unit, flock, 50.0), [0.5, 0.5])

    def test_only_within_radius(self):
        unit = make_unit(0.0, 0.0)
        flock = [unit, make_unit(10.0, 0.0, 1.0, 0.0), make_unit(0.0, 20.0, 0.0, 1.0)]
        np.testing.assert_allclose(alignment(unit, flock, 15.0), [1.0, 0.0])


class TestCohesion:
    """Tests for the cohesion rule."""

    def test_zero_when_alone(self):
        unit = make_unit(3.0, 4.0)
        np.testing.assert_array_equal(cohesion(unit, [unit], 40.0), [0.0, 0.0])

    def test_zero_when_all_out_of_range(self):
        flock = [make_unit(0.0, 0.0), make_unit(100.0, 0.0)]
        np.testing.assert_array_equal(cohesion(flock[0], flock, 40.0), [0.0, 0.0])

    def test_unit_vector_toward_center(self):
        unit = make_unit(0.0, 0.0)
        flock = [unit, make_unit(10.0, 0.0), make_unit(10.0, 20.0)]
        force = cohesion(unit, flock, 40.0)
        np.testing.assert_allclose(force, [1 / np.sqrt(2), 1 / np.sqrt(2)])

    def test_center_on_self_gives_zero(self):
        """Neighbors balanced around the unit leave no direction to go."""
        unit = make_unit(0.0, 0.0)
        flock = [unit, make_unit(-1.0, 0.0), make_unit(1.0, 0.0)]
        np.testing.assert_array_equal(cohesion(unit, flock, 40.0), [0.0, 0.0])


class TestSteer:
    """Tests for seek steering."""

    def test_desired_minus_velocity(self):
        unit = make_unit(0.0, 0.0, 0.5, 0.0)
        force = steer(unit, np.array([0.0, 10.0]))
        np.testing.assert_allclose(force, [-0.5, 1.0])

    def test_on_target_brakes(self):
        """Sitting on the target leaves only the braking term."""
        unit = make_unit(4.0, 4.0, 1.0, -2.0)
        force = steer(unit, [4.0, 4.0])
        np.testing.assert_allclose(force, [-1.0, 2.0])
