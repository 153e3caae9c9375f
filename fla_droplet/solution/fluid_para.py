"""
Fluid physical property parameter module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.

constants of the single component fluids supported by the evaporation model:
water, n-dodecane and iso-octane, and of the carrier gas (air).
"""

# near-critical clamp: correlations are evaluated at most at CLAMP_RATIO * critical temperature
CLAMP_RATIO: float = 0.99

# carrier gas (air)
AIR_MOLECULAR_WEIGHT: float = 28.967        # [kg/kmol]
AIR_GAS_CONSTANT: float = 287.01625988193461525183829875375  # specific gas constant [J/(kg K)]
AIR_LJ_SIGMA: float = 3.711                 # Lennard-Jones diameter [angstrom]
AIR_LJ_EPSILON: float = 78.6                # Lennard-Jones energy / Boltzmann constant [K]

# Ambrose-Walton corresponding states coefficients (saturation pressure)
# rows: f0, f1, f2; columns: tau, tau^1.5, tau^2.5, tau^5
AMBROSE_WALTON_COEFFS = (
    (-5.97616, 1.29874, -0.60394, -1.06841),
    (-5.03365, 1.11505, -5.41217, -7.46628),
    (-0.64771, 2.41539, -4.26979, 3.25259),
)
AMBROSE_WALTON_EXPONENTS = (1.0, 1.5, 2.5, 5.0)

# water
# Carl L. Yaws, Thermophysical Properties of Chemicals and Hydrocarbons, William Andrew (2008)
# Incropera FP, DeWitt DP. Introduction to Heat Transfer, 4th ed., Wiley (2002)
WATER_MOLECULAR_WEIGHT: float = 18.0        # [kg/kmol]
WATER_TC: float = 647.13                    # critical temperature [K]
WATER_TB: float = 373.15                    # normal boiling temperature [K]
WATER_OMEGA: float = 0.3449                 # acentric factor [-]
WATER_PC: float = 220.55e5                  # critical pressure [Pa]
WATER_LJ_SIGMA: float = 2.641               # Lennard-Jones diameter [angstrom]
WATER_LJ_EPSILON: float = 809.1             # Lennard-Jones energy / Boltzmann constant [K]
WATER_CP_VAPOUR = (33.174, -3.2463e-3, 1.7437e-5, -5.9796e-9)   # J/(mol K), polynomial in T
WATER_LATENT_A: float = 54.0                # Watson form, [kJ/mol]
WATER_LATENT_N: float = 0.34
WATER_SPECIFIC_VOLUME: float = 1.058e-3     # [m^3/kg]
WATER_VISCOSITY = (-11.6225, 1.949e3, 2.1641e-2, -1.5990e-5)    # log10(mu [cP])
WATER_CONDUCTIVITY: float = 686.0e-3        # [W/(m K)]
WATER_CP_LIQUID: float = 4239.0             # [J/(kg K)]

# n-dodecane
# Abramzon, B. and S. Sazhin, Convective vaporization of a fuel droplet with
# thermal radiation absorption. Fuel, 2006. 85(1): p. 32-46.
DODECANE_MOLECULAR_WEIGHT: float = 170.34   # [kg/kmol]
DODECANE_TC: float = 659.0                  # critical temperature [K]
DODECANE_LATENT_CLAMP_T: float = 653.0      # temperature used in the latent heat above the clamp [K]
DODECANE_PSAT = (8.1948, -7.8099, -9.0098)  # ln(p [bar]) polynomial in 300/T
DODECANE_PSAT_EXTRAPOLATION: float = 15.0   # exponential slope above the clamp
DODECANE_CP_VAPOUR = (0.2979, 1.4394, -0.1351)  # kJ/(kg K), polynomial in T/300
DODECANE_DIFFUSIVITY = (0.527, 1.583)       # D * p = 0.527 (T/300)^1.583 [m^2 Pa/s]
DODECANE_LATENT = (37.44, 0.38)             # kJ/kg, (Tc - T)^0.38
DODECANE_DENSITY = (744.11, -0.771)         # kg/m^3, linear in (T - 300)
DODECANE_VISCOSITY = (2.0303, 1.1769, -2.929)   # ln(mu [mPa s]) polynomial in 300/T
DODECANE_CONDUCTIVITY = (0.1405, -0.00022)  # W/(m K), linear in (T - 300)
DODECANE_CP_LIQUID = (2.18, 0.0041)         # kJ/(kg K), linear in (T - 300)

# iso-octane
# Bruce E. Poling, John M. Prausnitz, John P. O'Connell, The Properties of Gases
# and Liquids, Fifth Edition, McGraw-Hill Professional (2000)
ISOOCTANE_MOLECULAR_WEIGHT: float = 114.23  # [kg/kmol]
ISOOCTANE_TC: float = 543.9                 # critical temperature [K]
ISOOCTANE_TB: float = 372.39                # normal boiling temperature [K]
ISOOCTANE_OMEGA: float = 0.303              # acentric factor [-]
ISOOCTANE_CARBON_NUMBER: float = 8.0
ISOOCTANE_PC: float = (-0.0186 * 64.0 * 8.0 + 0.459 * 64.0 - 5.924 * 8.0 + 54.071) * 1.0e5  # [Pa]
ISOOCTANE_CP_VAPOUR: float = 244.60         # J/(mol K) at 400K
ISOOCTANE_DIFFUSIVITY = (-0.0578, 3.0455e-4, 3.4265e-7)  # cm^2/s, polynomial in T
ISOOCTANE_LATENT = (49.32456, 0.382229)     # kJ/mol, Watson form
# modified Rackett density, coefficients are quadratic in the carbon number
ISOOCTANE_DENSITY_A = (-0.000981411583995317, 0.0167403553403262, 0.175683060992056)
ISOOCTANE_DENSITY_B = (-0.000706081955526297, 0.00873629109926122, 0.249117016533684)
ISOOCTANE_DENSITY_N = (0.00114456989247312, -0.0174424731182795, 0.343958172043011)
ISOOCTANE_VISCOSITY = (-10.2217, 1423.586, 0.024242, -2.33636e-05)  # log10(mu [cP])
ISOOCTANE_CONDUCTIVITY: float = 0.0035      # Latini correlation prefactor
