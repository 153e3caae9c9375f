"""Tests for the radial grid and the eigenfunction series temperature field."""

import numpy as np
import numpy.testing as npt
import pytest

from fla_droplet.core import RadialGrid, RadialGridParameters, ConfigurationError
from fla_droplet.solvers import SeriesTemperatureField, EigenvalueSolver


@pytest.fixture
def grid():
    return RadialGrid(RadialGridParameters(n_int=100, n_lambda=44))


class TestRadialGrid:
    def test_positions(self, grid):
        assert grid.positions.shape == (101,)
        npt.assert_allclose(grid.positions[0], 0.0)
        npt.assert_allclose(grid.positions[-1], 1.0)
        npt.assert_allclose(grid.dr, 0.01)

    def test_volume_weights_sum_to_one(self, grid):
        npt.assert_allclose(np.sum(grid.volume_weights), 1.0, rtol=1e-12)
        assert grid.volume_weights[0] == 0.0

    @pytest.mark.parametrize("n_int", [0, 3, 101])
    def test_odd_or_small_layer_count_rejected(self, n_int):
        with pytest.raises(ConfigurationError):
            RadialGridParameters(n_int=n_int)

    def test_no_eigenvalues_rejected(self):
        with pytest.raises(ConfigurationError):
            RadialGridParameters(n_lambda=0)


class TestVolumeAverage:
    def test_uniform_profile(self, grid):
        field = SeriesTemperatureField(grid)
        field.initialize(345.6)
        npt.assert_allclose(field.volume_average(), 345.6, rtol=1e-12)

    def test_linear_profile(self, grid):
        """3*int_0^1 r^3 dr = 3/4, Simpson's rule is exact for cubics."""
        field = SeriesTemperatureField(grid, grid.positions.copy())
        npt.assert_allclose(field.volume_average(), 0.75, rtol=1e-12)

    def test_repeatable(self, grid):
        field = SeriesTemperatureField(grid)
        field.initialize(300.0)
        field.advance(1.0e-3, -0.4, 420.0, 5.0)
        assert field.volume_average() == field.volume_average()


class TestSeriesTemperatureField:
    def test_profile_shape_checked(self, grid):
        with pytest.raises(ValueError):
            SeriesTemperatureField(grid, np.zeros(50))

    def test_profile_updated_in_place(self, grid):
        profile = np.full(101, 300.0)
        field = SeriesTemperatureField(grid, profile)
        field.advance(1.0e-3, -0.5, 400.0, 10.0)
        assert field.profile is profile
        assert profile[-1] > 300.0

    def test_modal_integrals_uniform(self, grid):
        """int_0^1 r*sin(lambda*r) dr = sin(lambda)/lambda^2 - cos(lambda)/lambda."""
        field = SeriesTemperatureField(grid)
        field.initialize(1.0)
        lam = EigenvalueSolver(5).solve(0.0)
        expected = np.sin(lam) / lam ** 2 - np.cos(lam) / lam
        npt.assert_allclose(field.modal_integrals(lam), expected, rtol=1e-5)

    def test_uniform_equilibrium_preserved(self, grid):
        """a uniform profile at T_eff with h0 = 0 is a steady state."""
        field = SeriesTemperatureField(grid)
        field.initialize(320.0)
        field.advance(1.0, 0.0, 320.0, 10.0)
        npt.assert_allclose(field.profile, 320.0, rtol=1e-9)

    def test_uniform_equilibrium_preserved_over_many_steps(self, grid):
        """truncation of the series must not build up over repeated short steps."""
        field = SeriesTemperatureField(grid)
        field.initialize(320.0)
        for _ in range(50):
            field.advance(1.0e-3, 0.0, 320.0, 10.0)
        npt.assert_allclose(field.profile, 320.0, atol=1e-4)
        npt.assert_allclose(field.volume_average(), 320.0, atol=1e-4)

    def test_long_step_relaxes_to_forcing(self, grid):
        field = SeriesTemperatureField(grid)
        field.initialize(300.0)
        field.advance(10.0, 0.2, 450.0, 10.0)
        npt.assert_allclose(field.profile, 450.0, rtol=1e-9)

    def test_short_step_heats_surface_first(self, grid):
        field = SeriesTemperatureField(grid)
        field.initialize(300.0)
        field.advance(1.0e-2, 0.0, 400.0, 1.0)
        assert field.surface_temperature > 305.0
        assert abs(field.center_temperature - 300.0) < 1.0
        assert field.center_temperature < field.surface_temperature
        assert 300.0 < field.volume_average() < 400.0

    def test_sentinel_modes_skipped(self, grid):
        field = SeriesTemperatureField(grid)
        field.initialize(300.0)
        field.advance(1.0e-3, -2.0, 350.0, 1.0)
        assert field.eigenvalues[0] == EigenvalueSolver.SENTINEL
        assert np.all(np.isfinite(field.profile))
