"""
drag law module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.

drag law of the reference host trajectory integrator. The FLA relaxation time
tau = rho_p*d^2/(mu*drag_coefficient(Re)) must be evaluated with the same function the trajectory
uses, otherwise the deformation gradient decouples from the true trajectory map.
"""

import numpy as np


def schiller_naumann_cd(reynolds: float) -> float:
    """Schiller-Naumann drag coefficient C_D [-]"""
    if reynolds <= 1000.0:
        return 24.0 / max(reynolds, 1e-12) * (1.0 + 0.15 * reynolds ** 0.687)
    return 0.44


def drag_coefficient(reynolds: float) -> float:
    """drag factor 18*C_D*Re/24 [-], tends to 18 in the Stokes limit"""
    if reynolds <= 0.0:
        return 18.0
    return 18.0 * schiller_naumann_cd(reynolds) * reynolds / 24.0


def relative_reynolds(gas_density: float, gas_viscosity: float, diameter: float,
                      relative_velocity: np.ndarray) -> float:
    """droplet Reynolds number rho*|u - u_p|*d/mu [-]"""
    return float(gas_density * np.linalg.norm(relative_velocity) * diameter / gas_viscosity)
