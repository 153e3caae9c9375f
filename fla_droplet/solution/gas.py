"""
ambient gas module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.

the continuous phase seen by the droplets of the reference host is air, its transport and thermal
properties are evaluated with cantera.
"""

import numpy as np
import cantera as ct
from fla_droplet.core.particle import CellState
from .fluid_utils import validate_temperature, validate_pressure


class AmbientGas:
    """ambient gas (air) of the reference host

    Attributes:
        gas: cantera solution object of the mechanism
        velocity: uniform gas velocity [m/s]
        velocity_gradient: constant gas velocity gradient [[du/dx, du/dy], [dv/dx, dv/dy]] [1/s]
        vapour_mass_fraction: fuel vapour mass fraction far from the droplet [-]
    """

    def __init__(self, temperature: float, pressure: float, velocity=None, velocity_gradient=None,
                 mechanism_file: str = 'air.yaml', composition: str = 'O2:0.21, N2:0.79',
                 vapour_mass_fraction: float = 0.0):
        validate_temperature(temperature)
        validate_pressure(pressure)
        if not 0.0 <= vapour_mass_fraction < 1.0:
            raise ValueError(f"vapour mass fraction must be in [0, 1), got {vapour_mass_fraction}")
        self.gas = ct.Solution(mechanism_file)
        self.gas.TPX = temperature, pressure, composition
        self.velocity = np.zeros(3) if velocity is None else np.asarray(velocity, dtype=float)
        self.velocity_gradient = np.zeros((2, 2)) if velocity_gradient is None else np.asarray(velocity_gradient, dtype=float)
        self.vapour_mass_fraction = vapour_mass_fraction

    @property
    def temperature(self) -> float:
        return self.gas.T

    @property
    def pressure(self) -> float:
        return self.gas.P

    def velocity_at(self, position: np.ndarray) -> np.ndarray:
        """gas velocity at a position, linear in x and y with the constant gradient"""
        velocity = self.velocity.copy()
        velocity[:2] += self.velocity_gradient @ np.asarray(position, dtype=float)[:2]
        return velocity

    def cell_state(self, position=None) -> CellState:
        """continuous phase state seen by a droplet at the position"""
        velocity = self.velocity if position is None else self.velocity_at(position)
        return CellState(
            temperature=self.gas.T,
            pressure=self.gas.P,
            density=self.gas.density_mass,
            viscosity=self.gas.viscosity,
            conductivity=self.gas.thermal_conductivity,
            cp=self.gas.cp_mass,
            velocity=velocity,
            dudx=self.velocity_gradient[0, 0],
            dudy=self.velocity_gradient[0, 1],
            dvdx=self.velocity_gradient[1, 0],
            dvdy=self.velocity_gradient[1, 1],
            vapour_mass_fraction=self.vapour_mass_fraction
        )
