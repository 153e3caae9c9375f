"""
solver module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.
"""

"""
solver module for droplet heating, evaporation and number density tracking

This module provides the solver functions for the simulation framework, including:
1. eigenvalue solver and series temperature field (eigenvalue_solver, series_temperature)
2. transfer number solver (transfer_number_solver)
3. evaporation heat/mass transfer model (evaporation_solver)
4. trajectory Jacobian integrator of the Fully Lagrangian Approach (jacobian_solver)

"""
from .eigenvalue_solver import EigenvalueSolver
from .series_temperature import SeriesTemperatureField
from .transfer_number_solver import TransferNumberSolver, TransferNumbers
from .evaporation_solver import EvaporationHeatModel, EvaporationParameters
from .jacobian_solver import TrajectoryJacobianIntegrator, ScalarUpdate

__all__ = [
    'EigenvalueSolver',
    'SeriesTemperatureField',
    'TransferNumberSolver',
    'TransferNumbers',
    'EvaporationHeatModel',
    'EvaporationParameters',
    'TrajectoryJacobianIntegrator',
    'ScalarUpdate'
]
