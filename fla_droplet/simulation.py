"""
droplet heating and evaporation simulation module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.
"""

"""
Main classes:
- SimulationParameters: simulation setting parameters class
- DropletParameters: droplet holistic parameters class
- Simulation: reference host, one droplet in a uniform ambient gas with a constant velocity gradient

the host owns the trajectory (drag only, Schiller-Naumann) and the droplet mass, the heat/mass
transfer model and the scalar update hook own the droplet temperature and extended state.
"""

import copy
import numpy as np
import warnings
from typing import Optional
from dataclasses import dataclass, field
from fla_droplet.solution import AmbientGas, FluidPropertyProvider, create_fluid
from fla_droplet.core import (Runtime, RadialGrid, RadialGridParameters, DataManager, Droplet,
                              CellState, EvaporationModelError, drag_coefficient, relative_reynolds)
from fla_droplet.solvers import EvaporationHeatModel, EvaporationParameters, ScalarUpdate
from fla_droplet.solvers.evaporation_solver import liquid_density, liquid_specific_heat


@dataclass
class DropletParameters:
    """droplet holistic parameters class

    Attributes:
        mass_0: initial mass [kg]
        diameter_0: initial diameter [m]
        mass: current mass [kg]
        diameter: current diameter [m]
        evaporated_mass: total evaporated mass [kg]
    """
    mass_0: float = 0.0
    diameter_0: float = 0.0
    mass: float = 0.0
    diameter: float = 0.0
    evaporated_mass: float = 0.0


@dataclass
class SimulationParameters:
    """simulation setting parameters class

    Attributes:
        case_name: case name
        fluid: droplet fluid ('water'/'n-dodecane'/'iso-octane')
        droplet_diameter: initial droplet diameter [m]
        droplet_temperature: initial droplet temperature [K]
        gas_temperature: ambient gas temperature [K]
        gas_pressure: ambient gas pressure [Pa]
        gas_vapour_mass_fraction: fuel vapour mass fraction of the ambient gas [-]
        time_step: base time step [s]
        end_time: end time [s]
        droplet_velocity: initial droplet velocity [m/s]
        droplet_position: initial droplet position [m]
        gas_velocity: ambient gas velocity at the origin [m/s]
        velocity_gradient: constant gas velocity gradient [[du/dx, du/dy], [dv/dx, dv/dy]] [1/s]
        n_int: number of layers inside the droplet [-]
        n_lambda: number of terms of the series solution [-]
        conductivity_multiplier: factor on the liquid conductivity [-]
        mechanism_file: cantera input file of the ambient gas
        profile_save_interval: temperature profile save interval [steps]
        droplet_save_interval: droplet history save interval [steps]
        print_interval: progress print interval [steps]
        max_step_retries: maximum number of time step halvings of a rejected step [-]
        max_temperature_jump: largest accepted temperature change per step, fraction of the surface temperature [-]
        result_root: root directory of the results
    """
    case_name: str
    fluid: str = 'n-dodecane'
    droplet_diameter: float = 1.0e-4
    droplet_temperature: float = 300.0
    gas_temperature: float = 800.0
    gas_pressure: float = 101325.0
    gas_vapour_mass_fraction: float = 0.0
    time_step: float = 1.0e-4
    end_time: float = 1.0
    droplet_velocity: np.ndarray = field(default_factory=lambda: np.zeros(3))
    droplet_position: np.ndarray = field(default_factory=lambda: np.array([0.0, 1.0e-3, 0.0]))
    gas_velocity: np.ndarray = field(default_factory=lambda: np.array([10.0, 0.0, 0.0]))
    velocity_gradient: np.ndarray = field(default_factory=lambda: np.zeros((2, 2)))
    n_int: int = 100
    n_lambda: int = 44
    conductivity_multiplier: float = 1.0
    mechanism_file: str = 'air.yaml'
    profile_save_interval: int = 100
    droplet_save_interval: int = 10
    print_interval: int = 1000
    max_step_retries: int = 12
    max_temperature_jump: float = 0.1
    result_root: str = 'result'


class Simulation:
    """droplet heating and evaporation simulation main class

    Features:
    - initialize simulation
    - execute time advance
    - trajectory, mass and diameter update of the droplet
    - heat/mass transfer and FLA number density through the hooks
    """
    def __init__(self, params: SimulationParameters):
        """initialize simulation """
        self.params = params
        # runtime
        self.runtime: Optional[Runtime] = None
        self.data_manager: Optional[DataManager] = None

        # fluid and gas
        self.fluid: Optional[FluidPropertyProvider] = None
        self.gas: Optional[AmbientGas] = None

        # droplet
        self.grid: Optional[RadialGrid] = None
        self.droplet: Optional[Droplet] = None
        self.droplet_params: Optional[DropletParameters] = None

        # models
        self.evaporation_model: Optional[EvaporationHeatModel] = None
        self.scalar_update: Optional[ScalarUpdate] = None

        # flag
        self.flag_near_critical_warned: bool = False
        self.flag_step_failed: bool = False
        self.failure_reason: Optional[str] = None

    def initialize(self, save_results: bool = True):
        """initialize simulation components with the following order:
        1. runtime
        2. fluid and ambient gas
        3. models
        4. droplet and its extended state
        5. data manager
        """
        self.runtime = Runtime(time_step=self.params.time_step, end_time=self.params.end_time)

        self.fluid = create_fluid(self.params.fluid)
        self.gas = AmbientGas(
            temperature=self.params.gas_temperature,
            pressure=self.params.gas_pressure,
            velocity=self.params.gas_velocity,
            velocity_gradient=self.params.velocity_gradient,
            mechanism_file=self.params.mechanism_file,
            vapour_mass_fraction=self.params.gas_vapour_mass_fraction
        )

        evaporation_params = EvaporationParameters(
            fluid=self.params.fluid,
            n_lambda=self.params.n_lambda,
            n_int=self.params.n_int,
            conductivity_multiplier=self.params.conductivity_multiplier
        )
        self.evaporation_model = EvaporationHeatModel(evaporation_params, self.fluid)
        self.scalar_update = ScalarUpdate(self.fluid)
        self.grid = RadialGrid(RadialGridParameters(n_int=self.params.n_int, n_lambda=self.params.n_lambda))

        # initialize the droplet at injection
        temperature = self.params.droplet_temperature
        self.droplet = Droplet.create(
            diameter=self.params.droplet_diameter,
            density=self.fluid.liquid_density(temperature),
            temperature=temperature,
            n_int=self.params.n_int,
            velocity=self.params.droplet_velocity,
            position=self.params.droplet_position,
            cp=self.fluid.liquid_cp(temperature),
            dt=self.runtime.time_step
        )
        cell = self.gas.cell_state(self.droplet.position)
        self._update_reynolds(cell)
        self.scalar_update.update(self.droplet, cell, initialize=True)
        self.droplet_params = DropletParameters(
            mass_0=self.droplet.mass,
            diameter_0=self.droplet.diameter,
            mass=self.droplet.mass,
            diameter=self.droplet.diameter
        )

        if save_results:
            self.data_manager = DataManager(
                case_name=self.params.case_name,
                grid=self.grid,
                simulation_params=self.params,
                profile_save_interval=self.params.profile_save_interval,
                droplet_save_interval=self.params.droplet_save_interval,
                result_root=self.params.result_root
            )

        print("\n=== the droplet is initialized ===")
        print(f"* fluid: {self.fluid}")
        print(f"* diameter: {self.droplet.diameter*1e6:.4f} um, mass: {self.droplet.mass:.6e} kg")
        print(f"* density: {self.droplet.density:.4f} kg/m^3, temperature: {self.droplet.temperature:.2f} K")
        print(f"* Reynolds number: {self.droplet.reynolds:.4f}, latent heat: {self.droplet.thermal.latent_heat:.2f} J/kg")
        print(f"* gas: {self.gas.temperature:.2f} K, {self.gas.pressure/1e5:.4f} bar, "
              f"density {cell.density:.4f} kg/m^3, viscosity {cell.viscosity:.4e} Pa s")
        print("="*50+"\n")

    def _update_reynolds(self, cell: CellState):
        """Reynolds number based on the relative velocity"""
        self.droplet.reynolds = relative_reynolds(cell.density, cell.viscosity, self.droplet.diameter,
                                                  cell.velocity - self.droplet.velocity)

    def _update_properties(self):
        """droplet density and specific heat at the droplet temperature, the diameter follows the mass"""
        self.droplet.density = liquid_density(self.droplet, self.fluid)
        self.droplet.cp = liquid_specific_heat(self.droplet, self.fluid)
        self.droplet.diameter = self.droplet.volume_equivalent_diameter()

    def _advance_trajectory(self, cell: CellState, drag: float, dt: float):
        """drag only trajectory, exact relaxation towards the local gas velocity"""
        tau = self.scalar_update.integrator.relaxation_time(
            self.droplet.density, self.droplet.diameter, cell.viscosity, drag)
        relaxation = np.exp(-dt / tau)
        velocity_old = self.droplet.velocity.copy()
        self.droplet.velocity = cell.velocity + (velocity_old - cell.velocity) * relaxation
        self.droplet.position = self.droplet.position + 0.5 * (velocity_old + self.droplet.velocity) * dt

    def _check_near_critical(self):
        """warn once when the surface temperature enters the clamped correlation range"""
        surface_temperature = self.droplet.thermal.surface_temperature
        if not self.flag_near_critical_warned and surface_temperature > 0.99 * self.fluid.critical_temperature:
            warnings.warn(
                f"surface temperature {surface_temperature:.2f}K exceeds 0.99*Tc of {self.fluid.name}, "
                f"property correlations are clamped", RuntimeWarning)
            self.flag_near_critical_warned = True

    def _advance_droplet(self, dt: float) -> bool:
        """
        one attempt of a time step: FLA step, heat/mass transfer, trajectory and mass

        Returns:
            bool: False when the droplet mass is exhausted
        """
        self.droplet.dt = dt
        cell = self.gas.cell_state(self.droplet.position)
        self._update_reynolds(cell)
        drag = drag_coefficient(self.droplet.reynolds)

        # scalar update hook: FLA step with the heat/mass rates of the previous step
        self.scalar_update.update(self.droplet, cell, initialize=False, drag_coefficient=drag)

        # heat and mass transfer
        sources = self.evaporation_model.compute(self.droplet, cell, dt)
        self._check_near_critical()

        # trajectory and mass
        self._advance_trajectory(cell, drag, dt)
        mass_change = float(np.sum(sources.component_mass_rates)) * dt
        self.droplet.mass += mass_change
        self.droplet_params.evaporated_mass -= mass_change
        if self.droplet.mass <= 0.0:
            self.droplet.mass = 0.0
            self.droplet.diameter = 0.0
            return False
        self._update_properties()
        self.droplet_params.mass = self.droplet.mass
        self.droplet_params.diameter = self.droplet.diameter
        return True

    def _temperature_jump(self, saved: Droplet) -> Optional[str]:
        """describe a rejected temperature change of the last attempt, None when accepted"""
        limit = self.params.max_temperature_jump * saved.thermal.surface_temperature
        surface_change = self.droplet.thermal.surface_temperature - saved.thermal.surface_temperature
        if abs(surface_change) > limit:
            return f"surface temperature changes by {surface_change:.2f}K"
        average_change = self.droplet.thermal.t_average - saved.thermal.t_average
        if abs(average_change) > limit:
            return f"average temperature changes by {average_change:.2f}K"
        return None

    def step(self) -> bool:
        """
        advance the droplet by one time step

        the surface forcing of the temperature series is explicit, an attempt that saturates the
        surface or moves the temperature by more than max_temperature_jump*T_s is discarded and
        repeated from the saved state with half the time step. The accepted time step is stored
        in runtime.time_step, the next ceiling grows from it by 1% per step.

        Returns:
            bool: False when the droplet has evaporated or no attempt is accepted
        """
        dt = self.runtime.time_step
        saved_droplet = copy.deepcopy(self.droplet)
        saved_params = copy.deepcopy(self.droplet_params)
        for retry in range(self.params.max_step_retries + 1):
            try:
                alive = self._advance_droplet(dt)
            except EvaporationModelError as e:
                reason = str(e)
            else:
                reason = None if not alive else self._temperature_jump(saved_droplet)
                if reason is None:
                    self.runtime.time_step = dt
                    return alive

            # restore the saved state and retry with half the time step
            self.droplet = copy.deepcopy(saved_droplet)
            self.droplet_params = copy.deepcopy(saved_params)
            self.failure_reason = reason
            if retry < self.params.max_step_retries:
                dt *= 0.5
                print(f"* step {self.runtime.step_count + 1} is rejected ({reason}), retry with time step {dt:.3e}s")

        self.flag_step_failed = True
        return False

    def run(self):
        """run simulation"""
        while self.runtime.is_running():
            if not self.step():
                if self.flag_step_failed:
                    print("\n=== heat/mass transfer step failed ===")
                    print(f"* no time step is accepted after {self.params.max_step_retries} halvings "
                          f"at {self.runtime.current_time:.6e}s: {self.failure_reason}")
                    print("* the droplet state of the last accepted step is kept, simulation ends.")
                else:
                    print("\n=== droplet evaporation performance ===")
                    print(f"* droplet mass is exhausted at {self.runtime.current_time:.6e}s, simulation ends.")
                print("="*50)
                break

            self.runtime.advance()
            if self.data_manager is not None:
                self.data_manager.save_all(self.runtime.current_time, self.runtime.time_step,
                                           self.droplet, self.droplet_params.diameter_0)
            if self.runtime.step_count % self.params.print_interval == 0:
                self._print_progress()
            self.runtime.limit_time_step(self.droplet.limiting_time)

            if self.droplet.diameter < 0.1 * self.droplet_params.diameter_0:
                print("\n=== droplet evaporation performance ===")
                print(f"* droplet diameter ({self.droplet.diameter:.10f}) is less than 1/10 of the initial diameter ({self.droplet_params.diameter_0:.10f}), simulation ends.")
                print(f"* evaporation time is {self.runtime.current_time:.10f}s")
                print(f"* normalized evaporation time is {self.runtime.current_time/self.droplet_params.diameter_0**2:.10f}s/m^2")
                print("="*50)
                self.runtime.stop()

        print(f"\nsimulation ends at {self.runtime.current_time:.6e}s after {self.runtime.step_count} steps, "
              f"trajectory crossings: {self.droplet.jacobian.sign_changes}")
        print("="*50)
        if self.data_manager is not None:
            self.data_manager.close()

    def _print_progress(self):
        """print the state of the droplet"""
        thermal = self.droplet.thermal
        print(f"\n=== time {self.runtime.current_time:.6e}s, step {self.runtime.step_count} ===")
        print(f"* d^2/d0^2: {(self.droplet.diameter/self.droplet_params.diameter_0)**2:.6f}, "
              f"T_av: {thermal.t_average:.4f}K, T_s: {thermal.surface_temperature:.4f}K, "
              f"T_c: {thermal.profile[0]:.4f}K")
        print(f"* B_M: {thermal.bm:.6e}, B_T: {thermal.bt:.6e}, Nu: {thermal.nusselt:.4f}, "
              f"mdot: {thermal.tot_vap_rate:.6e}kg/s")
        print(f"* det(J): {self.droplet.jacobian.det:.6f}, n: {self.droplet.jacobian.number_density:.6f}, "
              f"time step: {self.runtime.time_step:.3e}s")
        print("="*50+"\n")
