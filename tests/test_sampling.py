"""
Tests for grid sampling of the aggregated influence field.
"""

import numpy as np
import pytest

from phosphor.emitter import (
    Confetti,
    HeightPulse,
    grid_axes,
    sample_influence_grid,
)
from phosphor.geometry import Vector3


class TestGridAxes:

    def test_axes_centered_on_origin(self):
        xs, zs = grid_axes(24.0, 12.0, 5, 3)
        np.testing.assert_allclose(xs, [-12.0, -6.0, 0.0, 6.0, 12.0])
        np.testing.assert_allclose(zs, [-6.0, 0.0, 6.0])

    def test_single_cell(self):
        xs, zs = grid_axes(10.0, 10.0, 1, 1)
        np.testing.assert_allclose(xs, [0.0])
        np.testing.assert_allclose(zs, [0.0])

    def test_nonpositive_resolution_becomes_one(self):
        xs, zs = grid_axes(10.0, 10.0, 0, -4)
        assert xs.shape == (1,)
        assert zs.shape == (1,)


class TestSampleInfluenceGrid:

    def test_empty_registry_is_quiet(self, manager):
        xs, zs = grid_axes(24.0, 12.0, 8, 4)
        field = sample_influence_grid(manager, xs, zs)
        assert field.shape == (4, 8)
        assert field.is_quiet()
        assert not field.overrides

    def test_pulse_raises_center(self, manager):
        manager.emit(HeightPulse(), Vector3.ZERO)
        manager.update(0.2)
        xs, zs = grid_axes(24.0, 12.0, 5, 3)
        field = sample_influence_grid(manager, xs, zs)

        assert not field.is_quiet()
        assert field.height[1, 2] > 0.0
        # corners are further than the pulse radius
        assert field.height[0, 0] == 0.0
        assert field.intensity[2, 4] == 0.0

    def test_matches_point_queries(self, manager):
        manager.emit(HeightPulse(), Vector3(1.0, 0.0, -1.0))
        manager.update(0.3)
        xs, zs = grid_axes(8.0, 6.0, 4, 3)
        field = sample_influence_grid(manager, xs, zs)
        for row, z in enumerate(zs):
            for col, x in enumerate(xs):
                expected = manager.aggregate_influence_at(float(x), float(z))
                assert field.intensity[row, col] == pytest.approx(expected.intensity)
                assert field.height[row, col] == pytest.approx(expected.height_modifier)

    def test_confetti_glyphs_land_in_overrides(self, manager):
        manager.emit(Confetti(), Vector3.ZERO)
        manager.update(0.1)
        xs, zs = grid_axes(24.0, 12.0, 5, 3)
        field = sample_influence_grid(manager, xs, zs)

        assert (1, 2) in field.overrides
        assert field.overrides[(1, 2)].character_override in Confetti().characters
        assert (0, 0) not in field.overrides

    def test_accepts_plain_lists(self, manager):
        field = sample_influence_grid(manager, [0.0, 1.0, 2.0], [0.0])
        assert field.shape == (1, 3)
