"""
particle module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.

This module contains the per-droplet data structures exchanged between the host tracker and the
heat/mass transfer and FLA cores:
1. DropletThermalState: radial temperature profile and evaporation bookkeeping of one droplet
2. JacobianState: deformation gradient of the trajectory map (Fully Lagrangian Approach)
3. Droplet: droplet state owned by the host, carrying the two records above
4. CellState: continuous phase state seen by one droplet
5. SourceTerms: source terms returned to the host

every record is owned by exactly one droplet, records of different droplets never share arrays.
"""

import numpy as np
from dataclasses import dataclass, field


@dataclass
class DropletThermalState:
    """radial temperature profile and evaporation bookkeeping of one droplet

    Attributes:
        profile: temperature at the radii j/n_int, j = 0..n_int, the last sample is the surface [K]
        x_surf: surface mole fraction of each component [-]
        y_surf: surface mass fraction of each component [-]
        vap_rate: evaporation rate of each component [kg/s]
        ys_tot: total surface vapour mass fraction [-]
        tot_vap_rate: total evaporation rate [kg/s]
        bm: Spalding mass transfer number [-]
        bt: Spalding heat transfer number [-]
        latent_heat: effective latent heat [J/kg]
        nusselt: Nusselt number [-]
        t_average: volume averaged droplet temperature [K]
        coef: coupling coefficient of the B_T iteration [-]
        nusselt_star: Nusselt number of the non-evaporating droplet [-]
        diffusivity: vapour binary diffusivity at the film temperature [m^2/s]
        gas_conductivity: gas thermal conductivity [W/(m K)]
        htc: heat transfer coefficient Nu*k/d [W/(m^2 K)]
        peclet: internal circulation Peclet number [-]
        injection_diameter: diameter at injection [m]
        equivalent_diameter: volume equivalent diameter at injection [m]
        dhdt: convective heat rate [W]
        dmdt: droplet mass loss rate by evaporation [kg/s]
        dhdt_scaled: dhdt times the number density [W]
        dmdt_scaled: dmdt times the number density [kg/s]
    """
    profile: np.ndarray
    x_surf: np.ndarray
    y_surf: np.ndarray
    vap_rate: np.ndarray
    ys_tot: float = 0.0
    tot_vap_rate: float = 0.0
    bm: float = 0.0
    bt: float = 0.0
    latent_heat: float = 0.0
    nusselt: float = 2.0
    t_average: float = 0.0
    coef: float = 0.0
    nusselt_star: float = 2.0
    diffusivity: float = 0.0
    gas_conductivity: float = 0.0
    htc: float = 0.0
    peclet: float = 0.0
    injection_diameter: float = 0.0
    equivalent_diameter: float = 0.0
    dhdt: float = 0.0
    dmdt: float = 0.0
    dhdt_scaled: float = 0.0
    dmdt_scaled: float = 0.0

    @classmethod
    def create(cls, n_int: int, n_components: int = 1) -> 'DropletThermalState':
        """create an uninitialized record, the profile is zero until the injection initialization"""
        return cls(
            profile=np.zeros(n_int + 1),
            x_surf=np.zeros(n_components),
            y_surf=np.zeros(n_components),
            vap_rate=np.zeros(n_components)
        )

    @property
    def surface_temperature(self) -> float:
        """surface sample of the profile [K]"""
        return float(self.profile[-1])


@dataclass
class JacobianState:
    """deformation gradient of the droplet trajectory map

    Attributes:
        j: Jacobian components dx_i/dx0_j, [[J11, J12], [J21, J22]]
        w: time derivative of the Jacobian du_i/dx0_j, [[W11, W12], [W21, W22]]
        det: Jacobian determinant [-]
        number_density: 1/|det|, normalized by the number density at injection [-]
        sign_changes: number of sign changes of det since injection [-]
        beta: inverse relaxation time 1/tau [1/s]
        r0: radial position at injection, used by the axisymmetric reduction [m]
        initialized: False until the injection initialization (Uninitialized / Advancing)
    """
    __slots__ = ('j', 'w', 'det', 'number_density', 'sign_changes', 'beta', 'r0', 'initialized')

    j: np.ndarray
    w: np.ndarray
    det: float
    number_density: float
    sign_changes: int
    beta: float
    r0: float
    initialized: bool

    @classmethod
    def create(cls) -> 'JacobianState':
        """create an uninitialized record"""
        return cls(
            j=np.zeros((2, 2)),
            w=np.zeros((2, 2)),
            det=0.0,
            number_density=0.0,
            sign_changes=0,
            beta=0.0,
            r0=0.0,
            initialized=False
        )

    def to_vector(self) -> np.ndarray:
        """pack J and W as (J11, J12, J21, J22, W11, W12, W21, W22)"""
        return np.concatenate((self.j.ravel(), self.w.ravel()))

    def from_vector(self, y: np.ndarray) -> None:
        """unpack J and W from (J11, J12, J21, J22, W11, W12, W21, W22)"""
        self.j[:, :] = y[:4].reshape(2, 2)
        self.w[:, :] = y[4:].reshape(2, 2)


@dataclass
class Droplet:
    """droplet state owned by the host tracker

    Attributes:
        diameter: diameter [m]
        mass: mass [kg]
        density: liquid density [kg/m^3]
        temperature: bulk temperature [K]
        velocity: velocity [m/s]
        position: position [m]
        cp: liquid specific heat [J/(kg K)]
        mass_fractions: component mass fractions in the droplet [-]
        reynolds: Reynolds number based on the relative velocity [-]
        dt: current integration time step [s]
        in_rk: True during the internal sub-iterations of the host integrator
        limiting_time: time step ceiling recommended for the next step [s]
        thermal: heat/mass transfer record
        jacobian: FLA record
    """
    diameter: float
    mass: float
    density: float
    temperature: float
    velocity: np.ndarray = field(default_factory=lambda: np.zeros(3))
    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    cp: float = 0.0
    mass_fractions: np.ndarray = field(default_factory=lambda: np.ones(1))
    reynolds: float = 0.0
    dt: float = 1.0e-4
    in_rk: bool = False
    limiting_time: float = np.inf
    thermal: DropletThermalState = None
    jacobian: JacobianState = None

    @classmethod
    def create(cls, diameter: float, density: float, temperature: float, n_int: int,
               velocity=None, position=None, cp: float = 0.0, n_components: int = 1,
               dt: float = 1.0e-4) -> 'Droplet':
        """create a droplet with a spherical mass and uninitialized extended state"""
        mass = density * np.pi * diameter ** 3 / 6.0
        return cls(
            diameter=diameter,
            mass=mass,
            density=density,
            temperature=temperature,
            velocity=np.zeros(3) if velocity is None else np.asarray(velocity, dtype=float),
            position=np.zeros(3) if position is None else np.asarray(position, dtype=float),
            cp=cp,
            mass_fractions=np.full(n_components, 1.0 / n_components),
            dt=dt,
            thermal=DropletThermalState.create(n_int, n_components),
            jacobian=JacobianState.create()
        )

    @property
    def n_components(self) -> int:
        return len(self.mass_fractions)

    @property
    def area(self) -> float:
        """surface area [m^2]"""
        return np.pi * self.diameter ** 2

    def volume_equivalent_diameter(self) -> float:
        """diameter of the sphere with the droplet mass and density [m]"""
        return (6.0 * self.mass / (np.pi * self.density)) ** (1.0 / 3.0)


@dataclass
class CellState:
    """continuous phase state seen by one droplet

    Attributes:
        temperature: gas temperature [K]
        pressure: gas pressure [Pa]
        density: gas density [kg/m^3]
        viscosity: gas dynamic viscosity [Pa s]
        conductivity: gas thermal conductivity [W/(m K)]
        cp: gas specific heat [J/(kg K)]
        velocity: gas velocity [m/s]
        dudx, dudy, dvdx, dvdy: gas velocity gradient components [1/s]
        vapour_mass_fraction: vapour mass fraction of the cell [-]
    """
    temperature: float
    pressure: float
    density: float
    viscosity: float
    conductivity: float
    cp: float
    velocity: np.ndarray = field(default_factory=lambda: np.zeros(3))
    dudx: float = 0.0
    dudy: float = 0.0
    dvdx: float = 0.0
    dvdy: float = 0.0
    vapour_mass_fraction: float = 0.0

    @property
    def velocity_gradient(self) -> np.ndarray:
        """[[du/dx, du/dy], [dv/dx, dv/dy]]"""
        return np.array([[self.dudx, self.dudy], [self.dvdx, self.dvdy]])


@dataclass
class SourceTerms:
    """source terms returned to the host by the heat/mass transfer model

    Attributes:
        species: mass source of each vapour species [kg/s]
        energy: energy source of the cell [W]
        mtc: mass transfer coefficient of each vapour species [kg/(m s)]
        htc: heat transfer coefficient, held at zero [W/K]
        temperature_rate: droplet temperature derivative, held at zero [K/s]
        component_mass_rates: droplet component mass derivatives [kg/s]
    """
    species: np.ndarray
    energy: float
    mtc: np.ndarray
    htc: float
    temperature_rate: float
    component_mass_rates: np.ndarray

    @classmethod
    def create(cls, n_components: int = 1) -> 'SourceTerms':
        return cls(
            species=np.zeros(n_components),
            energy=0.0,
            mtc=np.zeros(n_components),
            htc=0.0,
            temperature_rate=0.0,
            component_mass_rates=np.zeros(n_components)
        )
