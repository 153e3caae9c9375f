"""
math utils module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.

numba kernels of the heat/mass transfer and FLA cores:
1. eigenvalue_residual / bisect_eigenvalues: roots of lambda*cos(lambda) + h0*sin(lambda) = 0
2. jacobian_rhs / rk4_jacobian_step: classical Runge-Kutta step of the trajectory Jacobian system
"""

import numpy as np
from numba import jit

EIGENVALUE_SENTINEL = -1.0      # marker of a bracket without a root
BRACKET_MARGIN = 1.0e-7         # brackets are shrunk by this margin at both ends
BISECTION_WIDTH = 1.0e-8        # bisection stops below this bracket width


@jit(nopython=True, cache=True)
def eigenvalue_residual(lam: float, h0: float) -> float:
    """f(lambda) = lambda*cos(lambda) + h0*sin(lambda)"""
    return lam * np.cos(lam) + h0 * np.sin(lam)


@jit(nopython=True, cache=True)
def bisect_eigenvalues(h0: float, n_lambda: int) -> np.ndarray:
    """find one root of f(lambda) per bracket by bisection

    the i-th bracket is [i*pi, (i+1)*pi], shifted by pi/2 when h0 > 0, both ends shrunk by
    BRACKET_MARGIN. The left endpoint of the final bracket is returned as the root, brackets
    without a sign change are marked with EIGENVALUE_SENTINEL.

    Args:
        h0: boundary parameter [-]
        n_lambda: number of brackets [-]

    Returns:
        np.ndarray: roots in increasing order, sentinel where no root exists [n_lambda]
    """
    roots = np.full(n_lambda, EIGENVALUE_SENTINEL)
    shift = 0.5 * np.pi if h0 > 0.0 else 0.0
    for i in range(n_lambda):
        lam_left = i * np.pi + shift + BRACKET_MARGIN
        lam_right = (i + 1) * np.pi + shift - BRACKET_MARGIN
        f_left = eigenvalue_residual(lam_left, h0)
        f_right = eigenvalue_residual(lam_right, h0)
        if f_left * f_right < 0.0:
            while lam_right - lam_left > BISECTION_WIDTH:
                lam_mid = 0.5 * (lam_left + lam_right)
                f_mid = eigenvalue_residual(lam_mid, h0)
                if f_left * f_mid < 0.0:
                    lam_right = lam_mid
                else:
                    lam_left = lam_mid
                    f_left = f_mid
            roots[i] = lam_left
    return roots


@jit(nopython=True, cache=True)
def jacobian_rhs(y: np.ndarray, tau: float, dudx: float, dudy: float,
                 dvdx: float, dvdy: float) -> np.ndarray:
    """right hand side of dJ/dt = W, dW/dt = (G.J - W)/tau

    y = (J11, J12, J21, J22, W11, W12, W21, W22), G = [[du/dx, du/dy], [dv/dx, dv/dy]]
    """
    f = np.empty(8)
    f[0] = y[4]
    f[1] = y[5]
    f[2] = y[6]
    f[3] = y[7]
    f[4] = (y[0] * dudx + y[2] * dudy - y[4]) / tau
    f[5] = (y[1] * dudx + y[3] * dudy - y[5]) / tau
    f[6] = (y[0] * dvdx + y[2] * dvdy - y[6]) / tau
    f[7] = (y[1] * dvdx + y[3] * dvdy - y[7]) / tau
    return f


@jit(nopython=True, cache=True)
def rk4_jacobian_step(y: np.ndarray, h: float, tau: float, dudx: float, dudy: float,
                      dvdx: float, dvdy: float) -> np.ndarray:
    """one classical RK4 step of length h, weights (1, 2, 2, 1)/6"""
    k1 = jacobian_rhs(y, tau, dudx, dudy, dvdx, dvdy)
    k2 = jacobian_rhs(y + 0.5 * h * k1, tau, dudx, dudy, dvdx, dvdy)
    k3 = jacobian_rhs(y + 0.5 * h * k2, tau, dudx, dudy, dvdx, dvdy)
    k4 = jacobian_rhs(y + h * k3, tau, dudx, dudy, dvdx, dvdy)
    return y + (k1 + 2.0 * k2 + 2.0 * k3 + k4) * h / 6.0
