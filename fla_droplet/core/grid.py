"""
grid system module - manage the radial grid inside the droplet

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.

the temperature profile of a droplet is sampled at the normalized radii r_j = j*dr, j = 0..n_int,
dr = 1/n_int (r = 0 is the center, r = 1 is the surface).

main classes:
- RadialGridParameters: grid parameter configuration
- RadialGrid: normalized radial grid and quadrature weights
"""

import numpy as np
from dataclasses import dataclass, field
from .errors import ConfigurationError


@dataclass
class RadialGridParameters:
    """radial grid parameter configuration class

    Attributes:
        n_int: number of layers inside a droplet [-], even (Simpson's rule)
        n_lambda: number of terms of the series solution [-]
        dr: normalized layer thickness 1/n_int [-]
    """
    n_int: int = 100                    # number of layers inside a droplet [-]
    n_lambda: int = 44                  # number of terms in the series [-]
    dr: float = field(init=False)       # normalized layer thickness [-]

    def __post_init__(self):
        """check and initialize the calculation parameters"""
        if self.n_int < 2 or self.n_int % 2 != 0:
            raise ConfigurationError(f"n_int must be a positive even number, current value: {self.n_int}")
        if self.n_lambda < 1:
            raise ConfigurationError(f"n_lambda must be positive, current value: {self.n_lambda}")
        self.dr = 1.0 / self.n_int


class RadialGrid:
    """normalized radial grid class

    functions:
    - sample positions of the temperature profile
    - Simpson weights of the volume average
    """
    __slots__ = ('params', 'positions', 'volume_weights')

    def __init__(self, params: RadialGridParameters):
        """initialize the grid"""
        self.params = params
        self.positions = np.arange(params.n_int + 1) * params.dr
        self.volume_weights = self._simpson_volume_weights()

    @property
    def n_int(self) -> int:
        return self.params.n_int

    @property
    def dr(self) -> float:
        return self.params.dr

    def _simpson_volume_weights(self) -> np.ndarray:
        """calculate the weights of 3*int_0^1 T r^2 dr by Simpson's rule

        center r^2 = 0, odd interior 4r^2, even interior 2r^2, surface r^2 = 1, all times dr
        """
        weights = np.zeros(self.params.n_int + 1)
        r2 = self.positions ** 2
        weights[1:-1:2] = 4.0 * r2[1:-1:2]
        weights[2:-1:2] = 2.0 * r2[2:-1:2]
        weights[-1] = r2[-1]
        return weights * self.params.dr
