"""
transfer number solver module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.

Spalding mass/heat transfer numbers of the Abramzon-Sirignano vaporization model:

    F(B) = (1+B)^0.7 * ln(1+B)/B
    Sh* = 2 + (max(1, Re^0.077)*(1+Re*Sc)^(1/3) - 1)/F(B_M),  Sh = ln(1+B_M)*Sh*
    Nu* = 2 + (max(1, Re^0.077)*(1+Re*Pr)^(1/3) - 1)/F(B_T),  Nu = ln(1+B_T)*Nu*/B_T
    B_T = (1+B_M)^phi - 1, phi = coef/Nu*, coef = cp_vap*rho_gas*D/k_gas*Sh*

B_T is found by a fixed-point iteration seeded at B_M.

Abramzon B, Sirignano WA. Droplet vaporization model for spray combustion calculations.
Int J Heat Mass Transfer 1989;32:1605-18.
"""

import numpy as np
from dataclasses import dataclass
from fla_droplet.core.errors import TransferNumberDivergenceError, SurfaceSaturationError

BM_MIN = -0.99999
BM_MAX = 1.0e20


@dataclass
class TransferNumbers:
    """transfer numbers and the derived Sherwood/Nusselt numbers of one step

    Attributes:
        bm: Spalding mass transfer number [-]
        bt: Spalding heat transfer number [-]
        sherwood: Sherwood number [-]
        sherwood_star: Sherwood number of the non-evaporating droplet [-]
        nusselt: Nusselt number [-]
        nusselt_star: Nusselt number of the non-evaporating droplet [-]
        coef: coupling coefficient cp_vap*rho_gas*D/k_gas*Sh* [-]
        iterations: number of fixed-point iterations [-]
    """
    bm: float
    bt: float
    sherwood: float
    sherwood_star: float
    nusselt: float
    nusselt_star: float
    coef: float
    iterations: int


def film_correction(b: float) -> float:
    """F(B) = (1+B)^0.7*ln(1+B)/B, F(0) = 1"""
    if b == 0.0:
        return 1.0
    return (1.0 + b) ** 0.7 * np.log1p(b) / b


def blowing_factor(b: float) -> float:
    """ln(1+B)/B, 1 at B = 0"""
    if b == 0.0:
        return 1.0
    return np.log1p(b) / b


class TransferNumberSolver:
    """solver of the Abramzon-Sirignano transfer numbers

    Attributes:
        accuracy: convergence criterion |B_T_new - B_T_old| [-]
        max_iterations: maximum number of fixed-point iterations [-]
    """

    def __init__(self, accuracy: float = 1.0e-6, max_iterations: int = 200):
        self.accuracy = accuracy
        self.max_iterations = max_iterations

    @staticmethod
    def stagnant_factor(reynolds: float, number: float) -> float:
        """max(1, Re^0.077)*(1+Re*Sc)^(1/3) - 1, Sc or Pr as the number"""
        return (1.0 + reynolds * number) ** (1.0 / 3.0) * max(1.0, reynolds ** 0.077) - 1.0

    def sherwood_star(self, reynolds: float, schmidt: float, bm: float) -> float:
        return 2.0 + self.stagnant_factor(reynolds, schmidt) / film_correction(bm)

    def nusselt_star(self, reynolds: float, prandtl: float, bt: float) -> float:
        return 2.0 + self.stagnant_factor(reynolds, prandtl) / film_correction(bt)

    def solve_bt(self, bm: float, reynolds: float, prandtl: float, coef: float) -> tuple[float, float, int]:
        """
        solve B_T = (1+B_M)^(coef/Nu*(B_T)) - 1 by fixed-point iteration seeded at B_M

        Args:
            bm: mass transfer number [-]
            reynolds: Reynolds number [-]
            prandtl: Prandtl number [-]
            coef: coupling coefficient [-]

        Returns:
            tuple[float, float, int]: B_T, Nu* at B_T, number of iterations

        Raises:
            TransferNumberDivergenceError: no convergence within max_iterations
        """
        bt = bm
        for iteration in range(1, self.max_iterations + 1):
            nu_star = self.nusselt_star(reynolds, prandtl, bt)
            bt_new = (1.0 + bm) ** (coef / nu_star) - 1.0
            if not np.isfinite(bt_new):
                raise TransferNumberDivergenceError(bm, bt_new, iteration)
            converged = abs(bt_new - bt) < self.accuracy
            bt = bt_new
            if converged:
                return bt, nu_star, iteration
        raise TransferNumberDivergenceError(bm, bt, self.max_iterations)

    def solve(self, bm: float, reynolds: float, schmidt: float, prandtl: float,
              cp_vapour: float, gas_density: float, diffusivity: float, gas_conductivity: float,
              surface_temperature: float = np.nan) -> TransferNumbers:
        """
        calculate the transfer numbers of one step

        Args:
            bm: mass transfer number [-]
            reynolds: Reynolds number [-]
            schmidt: Schmidt number [-]
            prandtl: Prandtl number [-]
            cp_vapour: vapour specific heat at the film temperature [J/(kg K)]
            gas_density: gas density at the film temperature [kg/m^3]
            diffusivity: vapour binary diffusivity [m^2/s]
            gas_conductivity: gas thermal conductivity [W/(m K)]
            surface_temperature: surface temperature, only reported in errors [K]

        Returns:
            TransferNumbers: transfer numbers and Sherwood/Nusselt numbers

        Raises:
            SurfaceSaturationError: B_M outside (BM_MIN, BM_MAX)
            TransferNumberDivergenceError: the B_T iteration does not converge
        """
        if not BM_MIN < bm < BM_MAX:
            raise SurfaceSaturationError(surface_temperature, bm, quantity="B_M")

        sh_star = self.sherwood_star(reynolds, schmidt, bm)
        sherwood = np.log1p(bm) * sh_star
        coef = cp_vapour * gas_density * diffusivity / gas_conductivity * sh_star

        bt, nu_star, iterations = self.solve_bt(bm, reynolds, prandtl, coef)
        nusselt = blowing_factor(bt) * nu_star
        return TransferNumbers(
            bm=bm,
            bt=bt,
            sherwood=float(sherwood),
            sherwood_star=sh_star,
            nusselt=float(nusselt),
            nusselt_star=nu_star,
            coef=coef,
            iterations=iterations
        )
