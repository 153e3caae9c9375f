"""
evaporation solver module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.

convection-diffusion controlled vaporization of a single component droplet (Abramzon-Sirignano)
with the transient temperature field inside the droplet solved by the eigenfunction series.
One call of EvaporationHeatModel.compute per droplet per time step:

1. surface vapour composition from the saturation pressure at the surface temperature
2. film temperature (T_gas + 2*T_s)/3, gas density, vapour specific heat and diffusivity
3. B_M, Sherwood number and total evaporation rate
4. B_T and Nusselt number
5. effective liquid conductivity corrected for internal circulation (Peclet number)
6. boundary forcing T_eff, h0 and thermal diffusivity of the series solution
7. profile update, the volume average becomes the droplet temperature
8. species/energy source terms and mass transfer coefficient
9. time step ceiling for the next step

the property hooks (surface_latent_heat, film_binary_diffusivity, liquid_density,
liquid_specific_heat) are also used by the host to evaluate the droplet properties.
"""

import numpy as np
from dataclasses import dataclass
from fla_droplet.core.errors import ConfigurationError
from fla_droplet.core.grid import RadialGrid, RadialGridParameters
from fla_droplet.core.particle import Droplet, CellState, SourceTerms
from fla_droplet.core.surface import Surface
from fla_droplet.solution.fluid import FluidPropertyProvider
from fla_droplet.solution.fluid_para import AIR_MOLECULAR_WEIGHT, AIR_GAS_CONSTANT
from fla_droplet.solution.mapping_utils import create_fluid
from .eigenvalue_solver import EigenvalueSolver
from .series_temperature import SeriesTemperatureField
from .transfer_number_solver import TransferNumberSolver

DPM_SMALL = 1.0e-20
PECLET_SMALL = 1.0e-12


@dataclass
class EvaporationParameters:
    """evaporation model parameters class

    Attributes:
        fluid: fluid name ('water'/'n-dodecane'/'iso-octane')
        n_lambda: number of terms of the series solution [-]
        n_int: number of layers inside a droplet [-]
        accuracy: convergence criterion of the B_T iteration [-]
        max_iterations: maximum number of B_T iterations [-]
        fractional_change_factor_mass: maximum fractional mass change per step [-]
        fractional_change_factor_heat: maximum fractional temperature change per step [-]
        n_components: number of liquid components, only 1 is supported [-]
        air_molecular_weight: carrier gas molecular weight [kg/kmol]
        air_gas_constant: carrier gas specific gas constant [J/(kg K)]
        conductivity_multiplier: factor on the liquid conductivity, 1000 mimics an infinitely conducting droplet [-]
    """
    fluid: str = 'n-dodecane'
    n_lambda: int = 44
    n_int: int = 100
    accuracy: float = 1.0e-6
    max_iterations: int = 200
    fractional_change_factor_mass: float = 0.3
    fractional_change_factor_heat: float = 0.3
    n_components: int = 1
    air_molecular_weight: float = AIR_MOLECULAR_WEIGHT
    air_gas_constant: float = AIR_GAS_CONSTANT
    conductivity_multiplier: float = 1.0

    def __post_init__(self):
        """check the parameters"""
        if self.n_components != 1:
            raise ConfigurationError(
                f"only single component droplets are supported, n_components: {self.n_components}")
        if self.accuracy <= 0.0 or self.max_iterations < 1:
            raise ConfigurationError(
                f"invalid B_T iteration settings: accuracy {self.accuracy}, max_iterations {self.max_iterations}")
        if self.conductivity_multiplier <= 0.0:
            raise ConfigurationError(f"conductivity_multiplier must be positive, current value: {self.conductivity_multiplier}")


# property hooks

def surface_reference_temperature(droplet: Droplet) -> float:
    """surface sample of the profile once initialized, the droplet temperature before [K]"""
    surface_temperature = droplet.thermal.surface_temperature
    if surface_temperature < droplet.temperature:
        return droplet.temperature
    return surface_temperature


def surface_latent_heat(droplet: Droplet, fluid: FluidPropertyProvider) -> float:
    """latent heat at the surface temperature [J/kg]"""
    return fluid.latent_heat(surface_reference_temperature(droplet))


def film_binary_diffusivity(droplet: Droplet, cell: CellState, fluid: FluidPropertyProvider) -> float:
    """vapour binary diffusivity at the film temperature (T_gas + 2*T_s)/3 [m^2/s]"""
    film_temperature = (2.0 * surface_reference_temperature(droplet) + cell.temperature) / 3.0
    return fluid.binary_diffusivity(cell.pressure, film_temperature)


def liquid_density(droplet: Droplet, fluid: FluidPropertyProvider) -> float:
    """liquid density at the droplet temperature [kg/m^3]"""
    return fluid.liquid_density(droplet.temperature)


def liquid_specific_heat(droplet: Droplet, fluid: FluidPropertyProvider) -> float:
    """liquid specific heat at the droplet temperature [J/(kg K)]"""
    return fluid.liquid_cp(droplet.temperature)


class EvaporationHeatModel:
    """heat and mass transfer of a droplet, one call per droplet per time step

    the model object holds only configuration and can be shared by all droplets, the per-droplet
    state lives in droplet.thermal.
    """

    def __init__(self, params: EvaporationParameters = None, fluid: FluidPropertyProvider = None):
        """
        initialize the model

        Args:
            params: model parameters
            fluid: property correlations, default selected by params.fluid
        """
        self.params = EvaporationParameters() if params is None else params
        self.fluid = create_fluid(self.params.fluid) if fluid is None else fluid
        self.grid = RadialGrid(RadialGridParameters(n_int=self.params.n_int, n_lambda=self.params.n_lambda))
        self.eigenvalue_solver = EigenvalueSolver(self.params.n_lambda)
        self.transfer_solver = TransferNumberSolver(self.params.accuracy, self.params.max_iterations)
        self.surface = Surface(self.fluid, self.params.n_components, self.params.air_molecular_weight)

    def _check_droplet(self, droplet: Droplet):
        """check the droplet against the configuration before any state is modified"""
        if droplet.n_components != self.params.n_components:
            raise ConfigurationError(
                f"droplet has {droplet.n_components} components, model is configured for {self.params.n_components}")
        if droplet.thermal is None or droplet.thermal.profile.shape != (self.grid.n_int + 1,):
            raise ConfigurationError(f"droplet temperature profile must have {self.grid.n_int + 1} samples")
        if not droplet.cp > 0.0 or not droplet.mass > 0.0 or not droplet.diameter > 0.0:
            raise ConfigurationError(
                f"droplet mass, diameter and specific heat must be positive: "
                f"m = {droplet.mass}, d = {droplet.diameter}, cp = {droplet.cp}")

    def effective_conductivity(self, liquid_conductivity: float, peclet: float) -> float:
        """liquid conductivity corrected for internal circulation [W/(m K)]

        k_eff = (1.86 + 0.86*tanh(2.225*log10(Pe/30)))*k_l, k_l when |Pe| < 1e-12
        """
        if abs(peclet) < PECLET_SMALL:
            return liquid_conductivity
        return (1.86 + 0.86 * np.tanh(2.225 * np.log10(peclet / 30.0))) * liquid_conductivity

    def compute(self, droplet: Droplet, cell: CellState, dt: float = None,
                sources: SourceTerms = None) -> SourceTerms:
        """
        heat and mass transfer of one droplet over one time step

        Args:
            droplet: droplet state, droplet.temperature and droplet.thermal are updated
            cell: continuous phase state seen by the droplet
            dt: time step, default droplet.dt [s]
            sources: source term accumulators, a new one when None

        Returns:
            SourceTerms: source terms with this droplet's contribution added

        Raises:
            ConfigurationError: component count or profile size does not match the configuration
            SurfaceSaturationError: surface vapour mass fraction at or above 1
            TransferNumberDivergenceError: the B_T iteration does not converge
        """
        self._check_droplet(droplet)
        params = self.params
        fluid = self.fluid
        thermal = droplet.thermal
        dt = droplet.dt if dt is None else dt
        if sources is None:
            sources = SourceTerms.create(params.n_components)

        # 1. surface composition
        surface_temperature = thermal.surface_temperature
        composition = self.surface.calculate_composition(surface_temperature, cell.pressure)
        ys_tot = composition.ys_tot

        # increase the time step ceiling for the next integration step
        if not droplet.in_rk:
            droplet.limiting_time = droplet.dt * 1.01

        # 2. film properties at (T_gas + 2*T_s)/3, ideal gas law for the density
        film_temperature = (cell.temperature + 2.0 * surface_temperature) / 3.0
        gas_density = cell.pressure / (params.air_gas_constant * film_temperature)
        cp_vapour = fluid.vapour_cp(film_temperature)
        diffusivity = fluid.binary_diffusivity(cell.pressure, film_temperature)
        schmidt = cell.viscosity / (gas_density * diffusivity)
        gas_conductivity = cell.conductivity
        prandtl = cell.cp * cell.viscosity / gas_conductivity

        # 3-4. transfer numbers
        bm = (ys_tot - cell.vapour_mass_fraction) / (1.0 - ys_tot)
        numbers = self.transfer_solver.solve(bm, droplet.reynolds, schmidt, prandtl, cp_vapour,
                                             gas_density, diffusivity, gas_conductivity,
                                             surface_temperature=surface_temperature)
        diameter = droplet.diameter
        area = droplet.area
        tot_vap_rate = area * diffusivity * gas_density * numbers.sherwood / diameter
        nusselt = numbers.nusselt

        # 5. liquid properties at the previous average temperature
        t_average = thermal.t_average
        liquid_viscosity = fluid.liquid_viscosity(t_average)
        liquid_conductivity = fluid.liquid_conductivity(t_average) * params.conductivity_multiplier
        liquid_cp = fluid.liquid_cp(t_average)
        relative_velocity = float(np.linalg.norm(cell.velocity - droplet.velocity))
        peclet = (12.69 / 16.0 * droplet.density * 0.5 * diameter * liquid_cp / liquid_conductivity
                  * relative_velocity * cell.viscosity / liquid_viscosity
                  * droplet.reynolds ** (1.0 / 3.0) / (1.0 + bm))
        k_eff = self.effective_conductivity(liquid_conductivity, peclet)

        # 6. boundary forcing, the latent heat sink is folded into T_eff
        latent_heat = composition.latent_heat
        t_eff = cell.temperature - tot_vap_rate * latent_heat / (np.pi * diameter * nusselt * gas_conductivity)
        h0 = gas_conductivity * nusselt * 0.5 / k_eff - 1.0
        kappa = k_eff / (liquid_cp * droplet.density * 0.25 * diameter * diameter)

        # 7. temperature field
        field = SeriesTemperatureField(self.grid, thermal.profile, self.eigenvalue_solver)
        field.advance(dt, h0, t_eff, kappa)
        t_average = field.volume_average()
        surface_temperature = field.surface_temperature
        droplet.temperature = t_average
        sources.htc = 0.0
        sources.temperature_rate = 0.0

        # 8. evaporation rates and source terms
        vap_rate = composition.y_surf * tot_vap_rate / ys_tot if ys_tot > 0.0 else np.zeros(params.n_components)
        for i in range(params.n_components):
            if not droplet.in_rk and abs(vap_rate[i]) > 0.0:
                droplet.limiting_time = min(droplet.limiting_time,
                                            params.fractional_change_factor_mass * droplet.mass
                                            / vap_rate[i] * droplet.mass_fractions[i])
            sources.component_mass_rates[i] -= vap_rate[i]
            sources.species[i] += vap_rate[i]
            sources.mtc[i] = cell.density * np.pi * diameter * numbers.sherwood_star * diffusivity

        dh_dt = nusselt * gas_conductivity * area / diameter * (cell.temperature - t_average)
        sources.energy -= dh_dt

        # 9. time step ceiling for the heating rate
        htc = nusselt * gas_conductivity / diameter
        convective_heating_rate = htc * area / (droplet.mass * droplet.cp)
        if not droplet.in_rk and abs(convective_heating_rate) > DPM_SMALL:
            factor = params.fractional_change_factor_heat
            if abs(cell.temperature - surface_temperature) > surface_temperature:
                factor = params.fractional_change_factor_heat * surface_temperature / (cell.temperature - surface_temperature)
            droplet.limiting_time = min(droplet.limiting_time, factor / abs(convective_heating_rate))

        # bookkeeping
        thermal.x_surf[:] = composition.x_surf
        thermal.y_surf[:] = composition.y_surf
        thermal.vap_rate[:] = vap_rate
        thermal.ys_tot = ys_tot
        thermal.tot_vap_rate = tot_vap_rate
        thermal.bm = numbers.bm
        thermal.bt = numbers.bt
        thermal.latent_heat = latent_heat
        thermal.nusselt = nusselt
        thermal.t_average = t_average
        thermal.coef = numbers.coef
        thermal.nusselt_star = numbers.nusselt_star
        thermal.diffusivity = diffusivity
        thermal.gas_conductivity = gas_conductivity
        thermal.htc = htc
        thermal.peclet = peclet
        thermal.dhdt = dh_dt
        thermal.dmdt = float(np.sum(vap_rate))
        return sources
