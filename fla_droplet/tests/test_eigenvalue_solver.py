"""Tests for the eigenvalue solver of the Robin boundary condition."""

import numpy as np
import numpy.testing as npt
import pytest

from fla_droplet.solvers import EigenvalueSolver
from fla_droplet.solvers.math_utils import bisect_eigenvalues, eigenvalue_residual


class TestBisectionKernel:
    def test_residual_definition(self):
        lam, h0 = 2.3, 0.7
        npt.assert_allclose(eigenvalue_residual(lam, h0), lam * np.cos(lam) + h0 * np.sin(lam))

    def test_insulating_limit(self):
        """h0 = 0 reduces to cos(lambda) = 0."""
        roots = bisect_eigenvalues(0.0, 10)
        expected = (np.arange(10) + 0.5) * np.pi
        npt.assert_allclose(roots, expected, atol=1e-8)


class TestEigenvalueSolver:
    @pytest.mark.parametrize("h0", [-0.67, -0.2, 0.0, 0.5, 2.0, 25.0])
    def test_residual_small(self, h0):
        solver = EigenvalueSolver(44)
        eigs = solver.valid(solver.solve(h0))
        assert len(eigs) == 44
        assert np.all(np.abs(solver.residual(eigs, h0)) < 1e-6)

    @pytest.mark.parametrize("h0", [-0.5, 0.0, 3.0])
    def test_increasing_and_positive(self, h0):
        eigs = EigenvalueSolver(20).solve(h0)
        assert np.all(eigs > 0.0)
        assert np.all(np.diff(eigs) > 0.0)

    def test_one_root_per_bracket(self):
        h0 = 1.5
        eigs = EigenvalueSolver(12).solve(h0)
        i = np.arange(12)
        assert np.all(eigs > i * np.pi + 0.5 * np.pi)
        assert np.all(eigs < (i + 1) * np.pi + 0.5 * np.pi)

    def test_unshifted_brackets_for_negative_h0(self):
        h0 = -0.5
        eigs = EigenvalueSolver(12).solve(h0)
        i = np.arange(12)
        assert np.all(eigs > i * np.pi)
        assert np.all(eigs < (i + 1) * np.pi)

    def test_first_bracket_empty_below_minus_one(self):
        """h0 < -1 has no root in the first bracket, it is left as the sentinel."""
        solver = EigenvalueSolver(10)
        eigs = solver.solve(-2.0)
        assert eigs[0] == EigenvalueSolver.SENTINEL
        valid = solver.valid(eigs)
        assert len(valid) == 9
        assert np.all(np.abs(solver.residual(valid, -2.0)) < 1e-6)

    def test_output_size(self):
        assert EigenvalueSolver(7).solve(0.3).shape == (7,)
