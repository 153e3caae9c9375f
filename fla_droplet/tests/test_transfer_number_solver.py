"""Tests for the Abramzon-Sirignano transfer number solver."""

import numpy as np
import numpy.testing as npt
import pytest

from fla_droplet.core import SurfaceSaturationError, TransferNumberDivergenceError
from fla_droplet.solvers import TransferNumberSolver
from fla_droplet.solvers.transfer_number_solver import film_correction, blowing_factor


# Fixtures

@pytest.fixture
def solver():
    return TransferNumberSolver(accuracy=1e-6, max_iterations=200)


@pytest.fixture
def film():
    """film state of a hydrocarbon droplet in hot air"""
    return dict(reynolds=50.0, schmidt=2.0, prandtl=0.7, cp_vapour=2000.0,
                gas_density=0.5, diffusivity=2.0e-5, gas_conductivity=0.05)


class TestCorrections:
    def test_zero_limits(self):
        assert film_correction(0.0) == 1.0
        assert blowing_factor(0.0) == 1.0

    def test_film_correction_value(self):
        b = 0.5
        npt.assert_allclose(film_correction(b), 1.5 ** 0.7 * np.log(1.5) / 0.5)

    def test_stagnant_factor_vanishes_without_flow(self, solver):
        assert solver.stagnant_factor(0.0, 0.7) == 0.0


class TestTransferNumberSolver:
    def test_no_evaporation(self, solver):
        """B_M = 0 gives B_T = 0 after one iteration, Nu = Nu* = 2 at rest."""
        result = solver.solve(0.0, 0.0, 1.0, 0.7, 2000.0, 0.5, 2.0e-5, 0.05)
        assert result.iterations == 1
        assert result.bt == 0.0
        assert result.sherwood == 0.0
        npt.assert_allclose(result.nusselt, 2.0)
        npt.assert_allclose(result.sherwood_star, 2.0)

    def test_stagnant_sherwood(self, solver):
        bm = 0.3
        result = solver.solve(bm, 0.0, 1.0, 0.7, 2000.0, 0.5, 2.0e-5, 0.05)
        npt.assert_allclose(result.sherwood, 2.0 * np.log1p(bm))

    def test_fixed_point_satisfied(self, solver, film):
        bm = 0.5
        r = solver.solve(bm, **film)
        assert r.bt > 0.0
        npt.assert_allclose(r.bt, (1.0 + bm) ** (r.coef / r.nusselt_star) - 1.0, rtol=1e-12)
        nu_star = solver.nusselt_star(film["reynolds"], film["prandtl"], r.bt)
        assert abs(r.bt - ((1.0 + bm) ** (r.coef / nu_star) - 1.0)) < 1e-5

    def test_derived_numbers(self, solver, film):
        bm = 0.5
        r = solver.solve(bm, **film)
        npt.assert_allclose(r.sherwood, np.log1p(bm) * r.sherwood_star)
        npt.assert_allclose(r.nusselt, np.log1p(r.bt) / r.bt * r.nusselt_star)
        expected_coef = (film["cp_vapour"] * film["gas_density"] * film["diffusivity"]
                         / film["gas_conductivity"] * r.sherwood_star)
        npt.assert_allclose(r.coef, expected_coef)

    def test_weak_evaporation_converges_quickly(self, solver, film):
        r = solver.solve(0.1, **film)
        assert 1 <= r.iterations < 50
        assert 0.0 < r.bt < 0.1 * 10.0
        assert np.isfinite(r.nusselt) and r.nusselt > 0.0
        assert np.isfinite(r.sherwood) and r.sherwood > 0.0

    def test_convection_raises_sherwood(self, solver, film):
        stagnant = solver.solve(0.5, **dict(film, reynolds=0.0))
        convective = solver.solve(0.5, **film)
        assert convective.sherwood > stagnant.sherwood
        assert convective.nusselt > stagnant.nusselt

    @pytest.mark.parametrize("bm", [-1.0, -2.0, 1.0e21, np.inf])
    def test_singular_bm_rejected(self, solver, film, bm):
        with pytest.raises(SurfaceSaturationError):
            solver.solve(bm, **film, surface_temperature=500.0)

    def test_divergence_reported(self):
        solver = TransferNumberSolver(accuracy=1e-6, max_iterations=1)
        with pytest.raises(TransferNumberDivergenceError) as excinfo:
            solver.solve_bt(1.0, 0.0, 0.7, 1.0)
        assert excinfo.value.iterations == 1
        assert excinfo.value.bm == 1.0
