"""
fluid utils module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.

This module provides utility functions for the fluid property correlations, including:

1. setting validation functions:
   - validate_pressure: validate the validity of pressure
   - validate_temperature: validate the validity of temperature

2. correlation helpers:
   - clamp_temperature: limit the temperature to the near-critical clamp
   - ambrose_walton_pressure: corresponding states saturation pressure
   - wilke_lee_diffusivity: binary diffusivity of a vapour in air
"""

import numpy as np
import numba
from .fluid_para import (CLAMP_RATIO, AMBROSE_WALTON_COEFFS, AMBROSE_WALTON_EXPONENTS,
                         AIR_MOLECULAR_WEIGHT, AIR_LJ_SIGMA, AIR_LJ_EPSILON)


# constant definition
PRESSURE_MIN = 0.0
TEMPERATURE_MIN = 0.0

# 1. setting validation functions:

@numba.njit(cache=True)
def _validate_pressure_impl(pressure: float) -> None:
    """validate the implementation function of the pressure"""
    if not pressure > PRESSURE_MIN:
        raise ValueError("Invalid pressure")

@numba.njit(cache=True)
def _validate_temperature_impl(temperature: float) -> None:
    """validate the implementation function of the temperature"""
    if not temperature > TEMPERATURE_MIN:
        raise ValueError("Invalid temperature")


def validate_pressure(pressure: float) -> None:
    """validate the validity of the pressure"""
    try:
        _validate_pressure_impl(float(pressure))
    except ValueError:
        raise ValueError(f"pressure must be greater than {PRESSURE_MIN}Pa, current value: {pressure}Pa")

def validate_temperature(temperature: float) -> None:
    """validate the validity of the temperature"""
    try:
        _validate_temperature_impl(float(temperature))
    except ValueError:
        raise ValueError(f"temperature must be greater than {TEMPERATURE_MIN}K, current value: {temperature}K")


# 2. correlation helpers:

def clamp_temperature(temperature: float, critical_temperature: float) -> float:
    """limit the temperature to CLAMP_RATIO * critical temperature"""
    return min(temperature, CLAMP_RATIO * critical_temperature)


def ambrose_walton_pressure(temperature: float, critical_temperature: float,
                            critical_pressure: float, omega: float) -> float:
    """calculate the saturation pressure with the Ambrose-Walton corresponding states method

    formula:
    ln(P_sat/P_c) = f0 + omega*f1 + omega^2*f2
    f_k = (a_k*tau + b_k*tau^1.5 + c_k*tau^2.5 + d_k*tau^5) / Tr, tau = 1 - Tr

    Args:
        temperature: temperature [K]
        critical_temperature: critical temperature [K]
        critical_pressure: critical pressure [Pa]
        omega: acentric factor [-]

    Returns:
        float: saturation pressure [Pa]
    """
    reduced_temperature = clamp_temperature(temperature, critical_temperature) / critical_temperature
    tau = 1.0 - reduced_temperature
    tau_powers = np.power(tau, AMBROSE_WALTON_EXPONENTS)
    f0, f1, f2 = (np.dot(coeffs, tau_powers) / reduced_temperature for coeffs in AMBROSE_WALTON_COEFFS)
    return float(np.exp(f0 + f1 * omega + f2 * omega * omega) * critical_pressure)


def wilke_lee_diffusivity(pressure: float, temperature: float, molecular_weight: float,
                          sigma: float, epsilon: float) -> float:
    """calculate the vapour-air binary diffusivity with the Wilke-Lee method

    Args:
        pressure: pressure [Pa]
        temperature: temperature [K]
        molecular_weight: vapour molecular weight [kg/kmol]
        sigma: vapour Lennard-Jones diameter [angstrom]
        epsilon: vapour Lennard-Jones energy / Boltzmann constant [K]

    Returns:
        float: binary diffusivity [m^2/s]
    """
    m_va = 2.0 / (1.0 / molecular_weight + 1.0 / AIR_MOLECULAR_WEIGHT)
    sqrt_m_va = np.sqrt(m_va)
    sigma_va = 0.5 * (sigma + AIR_LJ_SIGMA)
    t_n = temperature / np.sqrt(AIR_LJ_EPSILON * epsilon)
    omega_d = (1.06036 * t_n ** -0.1561 + 0.193 * np.exp(-0.47635 * t_n)
               + 1.03587 * np.exp(-1.52996 * t_n) + 1.76474 * np.exp(-3.89411 * t_n))
    return float((3.03 - 0.98 / sqrt_m_va) / (pressure * sqrt_m_va * sigma_va ** 2 * omega_d)
                 * 1.0e-2 * temperature ** 1.5)
