"""
jacobian solver module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.

Fully Lagrangian Approach (Osiptsov): the deformation gradient J = dx/dx0 of the droplet
trajectory map is advanced along each trajectory with

    dJ/dt = W
    dW/dt = (G.J - W)/tau,  G = [[du/dx, du/dy], [dv/dx, dv/dy]]

by one classical Runge-Kutta step per host time step. The number density relative to the
injection is 1/|det(J)|, every sign change of det(J) marks a crossing of trajectories (caustic).

tau must be the relaxation time of the drag law used by the host trajectory integrator.

main classes:
- TrajectoryJacobianIntegrator: initialization and RK4 step of the Jacobian record
- ScalarUpdate: per-step scalar update hook of the host (injection initialization or FLA step)
"""

import numpy as np
from fla_droplet.core.particle import Droplet, CellState, JacobianState
from fla_droplet.solution.fluid import FluidPropertyProvider
from .math_utils import rk4_jacobian_step
from .evaporation_solver import surface_latent_heat


class TrajectoryJacobianIntegrator:
    """RK4 integrator of the trajectory Jacobian"""

    @staticmethod
    def initialize(state: JacobianState, r0: float = 0.0):
        """identity Jacobian, W = 0, det = 1, number density 1, no sign change (Advancing)"""
        state.j[:, :] = np.eye(2)
        state.w[:, :] = 0.0
        state.det = 1.0
        state.number_density = 1.0
        state.sign_changes = 0
        state.beta = 0.0
        state.r0 = r0
        state.initialized = True

    @staticmethod
    def relaxation_time(density: float, diameter: float, viscosity: float, drag_coefficient: float) -> float:
        """tau = rho_p*d^2/(mu*drag_coefficient), drag_coefficient = 18*C_D*Re/24 of the host [s]"""
        return density * diameter * diameter / (viscosity * drag_coefficient)

    @staticmethod
    def step(state: JacobianState, dt: float, tau: float, velocity_gradient: np.ndarray) -> JacobianState:
        """
        advance J and W by one RK4 step

        Args:
            state: Jacobian record, must be initialized
            dt: step length, the host time step [s]
            tau: relaxation time [s]
            velocity_gradient: [[du/dx, du/dy], [dv/dx, dv/dy]] [1/s]

        Returns:
            JacobianState: the updated record
        """
        if not state.initialized:
            raise RuntimeError("Jacobian record is not initialized")
        g = np.asarray(velocity_gradient, dtype=float)
        y = rk4_jacobian_step(state.to_vector(), dt, tau, g[0, 0], g[0, 1], g[1, 0], g[1, 1])
        state.from_vector(y)

        det = state.j[0, 0] * state.j[1, 1] - state.j[0, 1] * state.j[1, 0]
        if np.signbit(state.det) != np.signbit(det):
            state.sign_changes += 1
        state.det = float(det)
        state.number_density = 1.0 / abs(det) if det != 0.0 else np.inf
        state.beta = 1.0 / tau
        return state

    def advance(self, droplet: Droplet, cell: CellState, drag_coefficient: float, dt: float = None) -> JacobianState:
        """
        advance the Jacobian record of a droplet over its time step

        Args:
            droplet: droplet state
            cell: continuous phase state seen by the droplet
            drag_coefficient: host drag function value 18*C_D*Re/24 [-]
            dt: step length, default droplet.dt [s]

        Returns:
            JacobianState: the updated record
        """
        tau = self.relaxation_time(droplet.density, droplet.diameter, cell.viscosity, drag_coefficient)
        dt = droplet.dt if dt is None else dt
        return self.step(droplet.jacobian, dt, tau, cell.velocity_gradient)

    @staticmethod
    def axisymmetric_number_density(state: JacobianState, r: float) -> float:
        """number density of the axisymmetric reduction r0/(r*|det|)"""
        denominator = r * abs(state.det)
        if denominator == 0.0:
            return np.inf
        return state.r0 / denominator


class ScalarUpdate:
    """per-step scalar update hook of the host

    on injection the thermal and Jacobian records are initialized, otherwise the Jacobian is
    advanced by one step, the heat/mass rates are scaled by the number density and the explicit
    average temperature is applied to the droplet.
    """

    def __init__(self, fluid: FluidPropertyProvider, integrator: TrajectoryJacobianIntegrator = None):
        self.fluid = fluid
        self.integrator = TrajectoryJacobianIntegrator() if integrator is None else integrator

    def initialize_droplet(self, droplet: Droplet, r0: float = None):
        """injection initialization of the extended state"""
        thermal = droplet.thermal
        thermal.profile.fill(droplet.temperature)
        thermal.t_average = droplet.temperature
        thermal.nusselt = 2.0
        thermal.latent_heat = surface_latent_heat(droplet, self.fluid)
        thermal.bm = 0.0
        thermal.bt = 0.0
        thermal.tot_vap_rate = 0.0
        thermal.injection_diameter = droplet.diameter
        thermal.equivalent_diameter = droplet.volume_equivalent_diameter()
        if r0 is None:
            r0 = float(np.hypot(droplet.position[1], droplet.position[2]))
        self.integrator.initialize(droplet.jacobian, r0)

    def update(self, droplet: Droplet, cell: CellState, initialize: bool, drag_coefficient: float = None):
        """
        scalar update of one droplet

        Args:
            droplet: droplet state
            cell: continuous phase state seen by the droplet
            initialize: True at injection
            drag_coefficient: host drag function value 18*C_D*Re/24, required when advancing [-]
        """
        if initialize:
            self.initialize_droplet(droplet)
            return
        if drag_coefficient is None:
            raise ValueError("drag_coefficient is required to advance the Jacobian")
        state = self.integrator.advance(droplet, cell, drag_coefficient)
        thermal = droplet.thermal
        thermal.dhdt_scaled = thermal.dhdt * state.number_density
        thermal.dmdt_scaled = thermal.dmdt * state.number_density
        droplet.temperature = thermal.t_average
