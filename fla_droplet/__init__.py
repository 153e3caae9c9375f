"""
fla_droplet simulation framework

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.

This module provides the droplet heating and evaporation model with the Fully Lagrangian
Approach number density tracking, including:
1. core function module (core)
2. property calculation module (solution)
3. solver module (solvers)
4. reference host of a single droplet (simulation)
"""

from . import core
from . import solution
from . import solvers
from .simulation import Simulation, SimulationParameters

__all__ = ['core', 'solution', 'solvers', 'Simulation', 'SimulationParameters']
