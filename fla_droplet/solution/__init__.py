"""
solution module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.

This module provides the property related functions, including:
1. fluid_para: fluid property parameter definition
2. fluid_utils: validation and correlation tools
3. fluid: single component fluid property correlations
4. mapping_utils: mapping from fluid names to correlation classes
5. gas: ambient gas state evaluated with cantera
"""
from .fluid import FluidPropertyProvider, Water, NDodecane, IsoOctane
from .mapping_utils import create_fluid, FLUID_NAMES
from .gas import AmbientGas

__all__ = ['FluidPropertyProvider', 'Water', 'NDodecane', 'IsoOctane',
           'create_fluid', 'FLUID_NAMES', 'AmbientGas']
