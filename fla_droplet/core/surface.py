"""
surface module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.


This module contains two main classes:
1. SurfaceComposition: surface state data class
2. Surface: gas-liquid interface equilibrium of a single component droplet in air

main functions:
- surface vapour mole and mass fractions from the saturation pressure (Raoult's law)
- effective latent heat at the surface temperature
"""

import numpy as np
from dataclasses import dataclass
from fla_droplet.solution.fluid import FluidPropertyProvider
from fla_droplet.solution.fluid_para import AIR_MOLECULAR_WEIGHT
from .errors import SurfaceSaturationError


@dataclass
class SurfaceComposition:
    """surface state data class

    Attributes:
        temperature: surface temperature [K]
        saturation_pressure: saturation pressure of each component [Pa]
        x_surf: surface vapour mole fraction of each component [-]
        y_surf: surface vapour mass fraction of each component [-]
        ys_tot: total surface vapour mass fraction [-]
        mean_molecular_weight: molecular weight of the surface gas mixture [kg/kmol]
        latent_heat: mass fraction weighted latent heat [J/kg]
    """
    temperature: float
    saturation_pressure: np.ndarray
    x_surf: np.ndarray
    y_surf: np.ndarray
    ys_tot: float
    mean_molecular_weight: float
    latent_heat: float


class Surface:
    """gas-liquid interface equilibrium class

    the surface gas is a binary vapour/air mixture, the vapour partial pressure equals the
    saturation pressure at the surface temperature.
    """

    def __init__(self, fluid: FluidPropertyProvider, n_components: int = 1,
                 air_molecular_weight: float = AIR_MOLECULAR_WEIGHT):
        """initialize the surface object

        Args:
            fluid: property correlations of the droplet fluid
            n_components: number of liquid components
            air_molecular_weight: molecular weight of the carrier gas [kg/kmol]
        """
        self.fluid = fluid
        self.n_components = n_components
        self.air_molecular_weight = air_molecular_weight
        self.molecular_weights = np.full(n_components, fluid.molecular_weight)

    def calculate_composition(self, surface_temperature: float, pressure: float) -> SurfaceComposition:
        """
        calculate the surface vapour composition

        Args:
            surface_temperature: surface temperature [K]
            pressure: gas pressure [Pa]

        Returns:
            SurfaceComposition: surface state

        Raises:
            SurfaceSaturationError: the vapour mole or mass fraction reaches 1
        """
        saturation_pressure = np.full(self.n_components, self.fluid.saturation_pressure(surface_temperature))
        x_surf = saturation_pressure / pressure
        xs_sum = np.sum(x_surf)
        if xs_sum >= 1.0:
            raise SurfaceSaturationError(surface_temperature, xs_sum, quantity="x_surf")

        mean_molecular_weight = np.dot(x_surf, self.molecular_weights) + (1.0 - xs_sum) * self.air_molecular_weight
        y_surf = x_surf * self.molecular_weights / mean_molecular_weight
        ys_tot = float(np.sum(y_surf))
        if not ys_tot < 1.0:
            raise SurfaceSaturationError(surface_temperature, ys_tot)

        if ys_tot > 0.0:
            latent_heat = np.dot(y_surf, np.full(self.n_components, self.fluid.latent_heat(surface_temperature))) / ys_tot
        else:
            latent_heat = self.fluid.latent_heat(surface_temperature)

        return SurfaceComposition(
            temperature=surface_temperature,
            saturation_pressure=saturation_pressure,
            x_surf=x_surf,
            y_surf=y_surf,
            ys_tot=ys_tot,
            mean_molecular_weight=float(mean_molecular_weight),
            latent_heat=float(latent_heat)
        )
