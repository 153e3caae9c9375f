"""
fluid property module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.

This module provides the single component property correlations used by the evaporation model.

main classes:
- FluidPropertyProvider: abstract interface of the property correlations
- Water: water / water vapour in air
- NDodecane: n-dodecane / n-dodecane vapour in air
- IsoOctane: iso-octane / iso-octane vapour in air

all properties are in SI units; correlations are evaluated at most at 0.99 * critical temperature.
"""

from abc import ABC, abstractmethod
import numpy as np
from . import fluid_para as para
from .fluid_utils import (clamp_temperature, ambrose_walton_pressure, wilke_lee_diffusivity,
                          validate_temperature, validate_pressure)


class FluidPropertyProvider(ABC):
    """property correlations of a single component fluid and its vapour in air

    Attributes:
        name: fluid name
        molecular_weight: molecular weight [kg/kmol]
        critical_temperature: critical temperature [K]
    """
    name: str = ""
    molecular_weight: float = 0.0
    critical_temperature: float = 0.0

    def __str__(self) -> str:
        return f"{self.name} (M = {self.molecular_weight:.2f} kg/kmol, Tc = {self.critical_temperature:.2f} K)"

    # 1. vapour properties
    @abstractmethod
    def saturation_pressure(self, temperature: float) -> float:
        """saturation pressure [Pa]"""

    @abstractmethod
    def vapour_cp(self, temperature: float) -> float:
        """vapour specific heat [J/(kg K)]"""

    @abstractmethod
    def binary_diffusivity(self, pressure: float, temperature: float) -> float:
        """vapour-air binary diffusivity [m^2/s]"""

    # 2. liquid properties
    @abstractmethod
    def latent_heat(self, temperature: float) -> float:
        """latent heat of vaporization [J/kg]"""

    @abstractmethod
    def liquid_density(self, temperature: float) -> float:
        """liquid density [kg/m^3]"""

    @abstractmethod
    def liquid_viscosity(self, temperature: float) -> float:
        """liquid dynamic viscosity [Pa s]"""

    @abstractmethod
    def liquid_conductivity(self, temperature: float) -> float:
        """liquid thermal conductivity [W/(m K)]"""

    @abstractmethod
    def liquid_cp(self, temperature: float) -> float:
        """liquid specific heat [J/(kg K)]"""


class Water(FluidPropertyProvider):
    """water, Yaws (2008) and Incropera & DeWitt (2002)"""
    name = "water"
    molecular_weight = para.WATER_MOLECULAR_WEIGHT
    critical_temperature = para.WATER_TC

    def saturation_pressure(self, temperature: float) -> float:
        validate_temperature(temperature)
        return ambrose_walton_pressure(temperature, para.WATER_TC, para.WATER_PC, para.WATER_OMEGA)

    def vapour_cp(self, temperature: float) -> float:
        cp_mole = np.polynomial.polynomial.polyval(temperature, para.WATER_CP_VAPOUR)
        return float(cp_mole / self.molecular_weight * 1.0e3)

    def binary_diffusivity(self, pressure: float, temperature: float) -> float:
        validate_pressure(pressure)
        return wilke_lee_diffusivity(pressure, temperature, self.molecular_weight,
                                     para.WATER_LJ_SIGMA, para.WATER_LJ_EPSILON)

    def latent_heat(self, temperature: float) -> float:
        T = clamp_temperature(temperature, para.WATER_TC)
        return float(para.WATER_LATENT_A * (1.0 - T / para.WATER_TC) ** para.WATER_LATENT_N
                     / self.molecular_weight * 1.0e6)

    def liquid_density(self, temperature: float) -> float:
        return 1.0 / para.WATER_SPECIFIC_VOLUME

    def liquid_viscosity(self, temperature: float) -> float:
        a, b, c, d = para.WATER_VISCOSITY
        return float(10.0 ** (a + b / temperature + c * temperature + d * temperature ** 2) * 1.0e-3)

    def liquid_conductivity(self, temperature: float) -> float:
        return para.WATER_CONDUCTIVITY

    def liquid_cp(self, temperature: float) -> float:
        return para.WATER_CP_LIQUID


class NDodecane(FluidPropertyProvider):
    """n-dodecane, Abramzon & Sazhin (2006)"""
    name = "n-dodecane"
    molecular_weight = para.DODECANE_MOLECULAR_WEIGHT
    critical_temperature = para.DODECANE_TC

    def saturation_pressure(self, temperature: float) -> float:
        validate_temperature(temperature)
        x = 300.0 / temperature
        c0, c1, c2 = para.DODECANE_PSAT
        psat = np.exp(c0 + c1 * x + c2 * x * x) * 1.0e5
        # exponential extrapolation above the near-critical clamp
        if temperature > para.CLAMP_RATIO * para.DODECANE_TC:
            psat *= np.exp(para.DODECANE_PSAT_EXTRAPOLATION
                           * (temperature / para.CLAMP_RATIO / para.DODECANE_TC - 1.0))
        return float(psat)

    def vapour_cp(self, temperature: float) -> float:
        cp = np.polynomial.polynomial.polyval(temperature / 300.0, para.DODECANE_CP_VAPOUR)
        return float(cp * 1000.0)

    def binary_diffusivity(self, pressure: float, temperature: float) -> float:
        validate_pressure(pressure)
        a, n = para.DODECANE_DIFFUSIVITY
        return float(a * (temperature / 300.0) ** n / pressure)

    def latent_heat(self, temperature: float) -> float:
        a, n = para.DODECANE_LATENT
        if temperature > para.CLAMP_RATIO * para.DODECANE_TC:
            temperature = para.DODECANE_LATENT_CLAMP_T
        return float(a * (para.DODECANE_TC - temperature) ** n * 1000.0)

    def liquid_density(self, temperature: float) -> float:
        a, b = para.DODECANE_DENSITY
        return a + b * (temperature - 300.0)

    def liquid_viscosity(self, temperature: float) -> float:
        x = 300.0 / temperature
        a, b, c = para.DODECANE_VISCOSITY
        return float(1.0e-3 * np.exp(a * x * x + b * x + c))

    def liquid_conductivity(self, temperature: float) -> float:
        a, b = para.DODECANE_CONDUCTIVITY
        return a + b * (temperature - 300.0)

    def liquid_cp(self, temperature: float) -> float:
        a, b = para.DODECANE_CP_LIQUID
        return (a + b * (temperature - 300.0)) * 1000.0


class IsoOctane(FluidPropertyProvider):
    """iso-octane, Poling, Prausnitz & O'Connell (2000)"""
    name = "iso-octane"
    molecular_weight = para.ISOOCTANE_MOLECULAR_WEIGHT
    critical_temperature = para.ISOOCTANE_TC

    def saturation_pressure(self, temperature: float) -> float:
        validate_temperature(temperature)
        return ambrose_walton_pressure(temperature, para.ISOOCTANE_TC, para.ISOOCTANE_PC,
                                       para.ISOOCTANE_OMEGA)

    def vapour_cp(self, temperature: float) -> float:
        # NIST value at 400K, no temperature dependence
        return para.ISOOCTANE_CP_VAPOUR / self.molecular_weight * 1000.0

    def binary_diffusivity(self, pressure: float, temperature: float) -> float:
        validate_pressure(pressure)
        d_cm2 = np.polynomial.polynomial.polyval(temperature, para.ISOOCTANE_DIFFUSIVITY)
        return float(d_cm2 * 1.0e-4)

    def latent_heat(self, temperature: float) -> float:
        T = clamp_temperature(temperature, para.ISOOCTANE_TC)
        a, n = para.ISOOCTANE_LATENT
        return float(a * (1.0 - T / para.ISOOCTANE_TC) ** n / self.molecular_weight * 1.0e6)

    def liquid_density(self, temperature: float) -> float:
        T = clamp_temperature(temperature, para.ISOOCTANE_TC)
        carbon = np.array([para.ISOOCTANE_CARBON_NUMBER ** 2, para.ISOOCTANE_CARBON_NUMBER, 1.0])
        a = np.dot(para.ISOOCTANE_DENSITY_A, carbon)
        b = np.dot(para.ISOOCTANE_DENSITY_B, carbon)
        n = np.dot(para.ISOOCTANE_DENSITY_N, carbon)
        return float(1000.0 * a * b ** (-(1.0 - T / para.ISOOCTANE_TC) ** n))

    def liquid_viscosity(self, temperature: float) -> float:
        a, b, c, d = para.ISOOCTANE_VISCOSITY
        return float(10.0 ** (a + b / temperature + c * temperature + d * temperature ** 2 - 3.0))

    def liquid_conductivity(self, temperature: float) -> float:
        T = clamp_temperature(temperature, para.ISOOCTANE_TC)
        Tr = T / para.ISOOCTANE_TC
        return float(para.ISOOCTANE_CONDUCTIVITY * para.ISOOCTANE_TB ** 1.2
                     * self.molecular_weight ** -0.5 * para.ISOOCTANE_TC ** -0.167
                     * (1.0 - Tr) ** 0.38 * Tr ** (-1.0 / 6.0))

    def liquid_cp(self, temperature: float) -> float:
        # the published iso-octane correlation has a typo, the n-dodecane one is used instead
        a, b = para.DODECANE_CP_LIQUID
        return (a + b * (temperature - 300.0)) * 1000.0
