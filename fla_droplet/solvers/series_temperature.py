"""
series temperature module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.

transient heat conduction inside a spherical droplet solved by the eigenfunction series (Sazhin):

    T(r, t+dt) = T_eff + sum_n q_n * sin(lambda_n*r)/r
    q_n = (I_n - sin(lambda_n)/lambda_n^2 * zeta) * exp(-kappa*lambda_n^2*dt) / b_n
    I_n = int_0^1 T(r, t)*r*sin(lambda_n*r) dr
    zeta = (h0 + 1)*T_eff, b_n = 0.5*(1 + h0/(h0^2 + lambda_n^2))

r is normalized by the droplet radius, lambda_n are the roots of lambda*cos(lambda) + h0*sin(lambda) = 0.
the update is a closed form per mode and is stable for any time step.

Sazhin, S.S., Advanced models of fuel droplet heating and evaporation. Progress in Energy and
Combustion Science, 2006. 32(2): p. 162-214.
"""

import numpy as np
from scipy.integrate import simpson
from fla_droplet.core.grid import RadialGrid, RadialGridParameters
from .eigenvalue_solver import EigenvalueSolver


class SeriesTemperatureField:
    """radial temperature profile of one droplet advanced by the eigenfunction series

    Attributes:
        grid: normalized radial grid
        profile: temperature samples at grid.positions, the last sample is the surface [K]
        eigenvalue_solver: eigenvalue solver of the Robin boundary condition
        eigenvalues: eigenvalue set of the last advance (sentinel entries included)
    """

    def __init__(self, grid: RadialGrid = None, profile: np.ndarray = None,
                 eigenvalue_solver: EigenvalueSolver = None):
        """
        initialize the temperature field

        Args:
            grid: radial grid, default 100 layers and 44 eigenvalues
            profile: profile array, modified in place so that it can be the droplet's own record
            eigenvalue_solver: shared eigenvalue solver
        """
        self.grid = RadialGrid(RadialGridParameters()) if grid is None else grid
        if profile is None:
            profile = np.zeros(self.grid.n_int + 1)
        if profile.shape != (self.grid.n_int + 1,):
            raise ValueError(f"profile size error: expected {self.grid.n_int + 1}, actual {profile.size}")
        self.profile = profile
        self.eigenvalue_solver = EigenvalueSolver(self.grid.params.n_lambda) if eigenvalue_solver is None else eigenvalue_solver
        self.eigenvalues = None

    def initialize(self, temperature: float):
        """set every sample of the profile to the temperature"""
        self.profile.fill(temperature)

    @property
    def surface_temperature(self) -> float:
        return float(self.profile[-1])

    @property
    def center_temperature(self) -> float:
        return float(self.profile[0])

    def modal_integrals(self, eigenvalues: np.ndarray) -> np.ndarray:
        """calculate I_n = int_0^1 T*r*sin(lambda_n*r) dr by Simpson's rule over the layers"""
        r = self.grid.positions
        integrand = self.profile * r * np.sin(np.outer(eigenvalues, r))
        return simpson(integrand, dx=self.grid.dr, axis=-1)

    def advance(self, dt: float, h0: float, surface_effective_temperature: float,
                thermal_diffusivity: float) -> np.ndarray:
        """
        advance the profile over one time step

        Args:
            dt: time step [s]
            h0: boundary parameter k_gas*Nu/(2*k_eff) - 1 [-]
            surface_effective_temperature: effective ambient temperature seen by the surface [K]
            thermal_diffusivity: k_eff/(cp_l*rho_l*R^2), normalized by the radius squared [1/s]

        Returns:
            np.ndarray: updated profile [K]
        """
        self.eigenvalues = self.eigenvalue_solver.solve(h0)
        lam = EigenvalueSolver.valid(self.eigenvalues)

        zeta = (h0 + 1.0) * surface_effective_temperature
        b = 0.5 * (1.0 + h0 / (h0 * h0 + lam * lam))
        # large kappa*lambda^2*dt underflows to a zero mode
        decay = np.exp(-thermal_diffusivity * lam * lam * dt)
        series = (self.modal_integrals(lam) - np.sin(lam) / (lam * lam) * zeta) * decay / b

        # rebuild the profile: T = T_eff + sum series_n*sin(lambda_n*r)/r, lambda_n at the center
        r = self.grid.positions[1:]
        self.profile.fill(surface_effective_temperature)
        self.profile[0] += np.dot(series, lam)
        self.profile[1:] += series @ (np.sin(np.outer(lam, r)) / r)
        return self.profile

    def volume_average(self) -> float:
        """volume averaged temperature 3*int_0^1 T r^2 dr by Simpson's rule [K]"""
        return float(np.dot(self.grid.volume_weights, self.profile))
