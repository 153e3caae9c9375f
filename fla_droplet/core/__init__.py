"""
core module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.

This module provides the core functions of the droplet heating and evaporation framework, including:
1. time management (runtime)
2. radial grid inside the droplet (grid)
3. per-droplet data structures (particle)
4. gas-liquid interface equilibrium (surface)
5. drag law of the reference host (drag)
6. data management and logging (data_manager, logger)
7. exception kinds (errors)
"""

from .errors import (EvaporationModelError, TransferNumberDivergenceError,
                     SurfaceSaturationError, ConfigurationError)
from .runtime import Runtime
from .grid import RadialGrid, RadialGridParameters
from .particle import Droplet, DropletThermalState, JacobianState, CellState, SourceTerms
from .drag import drag_coefficient, schiller_naumann_cd, relative_reynolds
from .logger import TeeLogger
from .data_manager import DataManager
from .surface import Surface, SurfaceComposition

__all__ = [
    'EvaporationModelError', 'TransferNumberDivergenceError',
    'SurfaceSaturationError', 'ConfigurationError',
    'Runtime',
    'RadialGrid', 'RadialGridParameters',
    'Droplet', 'DropletThermalState', 'JacobianState', 'CellState', 'SourceTerms',
    'drag_coefficient', 'schiller_naumann_cd', 'relative_reynolds',
    'TeeLogger',
    'DataManager',
    'Surface', 'SurfaceComposition'
]
