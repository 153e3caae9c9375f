"""
mapping utils module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.


This module provides the mapping between fluid names and property correlation classes, the fluid
is selected once by name when the evaporation model is configured.

"""
from .fluid import FluidPropertyProvider, Water, NDodecane, IsoOctane
from fla_droplet.core.errors import ConfigurationError

# fluid name dictionary, several spellings per fluid
FLUID_NAMES = {
    "water": Water, "h2o": Water,
    "n-dodecane": NDodecane, "dodecane": NDodecane, "nc12h26": NDodecane,
    "iso-octane": IsoOctane, "isooctane": IsoOctane, "ic8h18": IsoOctane,
}


def create_fluid(name: str) -> FluidPropertyProvider:
    """
    create the property correlations of a fluid by name

    Args:
        name: fluid name (case insensitive), see FLUID_NAMES

    Returns:
        FluidPropertyProvider: property correlation object

    Raises:
        ConfigurationError: unknown fluid name
    """
    fluid_class = FLUID_NAMES.get(name.strip().lower())
    if fluid_class is None:
        raise ConfigurationError(
            f"unknown fluid '{name}', available fluids: {sorted(set(c.name for c in FLUID_NAMES.values()))}")
    return fluid_class()
