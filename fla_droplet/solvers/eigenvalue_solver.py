"""
eigenvalue solver module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.

eigenvalues of the heat conduction problem in a sphere with a convective (Robin) boundary
condition linearized by h0: the positive roots of lambda*cos(lambda) + h0*sin(lambda) = 0.
"""

import numpy as np
from .math_utils import bisect_eigenvalues, EIGENVALUE_SENTINEL


class EigenvalueSolver:
    """bisection multi-root solver

    Attributes:
        n_lambda: number of brackets searched, i.e. the maximum number of eigenvalues
    """
    SENTINEL = EIGENVALUE_SENTINEL

    def __init__(self, n_lambda: int = 44):
        self.n_lambda = n_lambda

    def solve(self, h0: float) -> np.ndarray:
        """
        find the eigenvalues for the boundary parameter h0

        Args:
            h0: boundary parameter, any sign [-]

        Returns:
            np.ndarray: eigenvalue set, one entry per bracket, SENTINEL for a bracket without a root
        """
        return bisect_eigenvalues(float(h0), self.n_lambda)

    @staticmethod
    def valid(eigenvalues: np.ndarray) -> np.ndarray:
        """eigenvalues without the sentinel entries"""
        return eigenvalues[eigenvalues > 0.0]

    @staticmethod
    def residual(eigenvalues: np.ndarray, h0: float) -> np.ndarray:
        """lambda*cos(lambda) + h0*sin(lambda) of each eigenvalue"""
        return eigenvalues * np.cos(eigenvalues) + h0 * np.sin(eigenvalues)
