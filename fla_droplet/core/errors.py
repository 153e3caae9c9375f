"""
errors module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.

exception kinds raised by the heat/mass transfer core:
1. EvaporationModelError: base class of the numerical failures
   - TransferNumberDivergenceError: the B_T fixed-point iteration did not converge
   - SurfaceSaturationError: the surface vapour mass fraction reached 1 (B_M blows up)
2. ConfigurationError: invalid model configuration (component count, fluid name, grid)
"""


class EvaporationModelError(RuntimeError):
    """base class of the numerical failures of the evaporation model"""


class TransferNumberDivergenceError(EvaporationModelError):
    """the heat transfer number iteration did not converge

    Attributes:
        bm: mass transfer number used in the iteration
        bt: last iterate of the heat transfer number
        iterations: number of iterations performed
    """

    def __init__(self, bm: float, bt: float, iterations: int):
        self.bm = bm
        self.bt = bt
        self.iterations = iterations
        super().__init__(
            f"B_T iteration does not converge after {iterations} iterations "
            f"(B_M = {bm:.6g}, last B_T = {bt:.6g})"
        )


class SurfaceSaturationError(EvaporationModelError):
    """surface vapour mass fraction is at or above 1, the transfer number B_M is singular

    Attributes:
        surface_temperature: droplet surface temperature [K]
        value: the offending value (total surface mass fraction or B_M)
    """

    def __init__(self, surface_temperature: float, value: float, quantity: str = "Ys_tot"):
        self.surface_temperature = surface_temperature
        self.value = value
        self.quantity = quantity
        super().__init__(
            f"surface saturation singularity: {quantity} = {value:.6g} "
            f"at surface temperature {surface_temperature:.2f}K"
        )


class ConfigurationError(ValueError):
    """invalid configuration of the evaporation / FLA model"""
