"""Tests for the fluid property correlations and the surface equilibrium."""

import numpy as np
import numpy.testing as npt
import pytest

from fla_droplet.core import ConfigurationError, SurfaceSaturationError, Surface
from fla_droplet.solution import (create_fluid, FLUID_NAMES, Water, NDodecane, IsoOctane,
                                  FluidPropertyProvider)
from fla_droplet.solution.fluid_para import AIR_MOLECULAR_WEIGHT


class TestFluidMapping:
    @pytest.mark.parametrize("name, cls", [
        ("water", Water), ("H2O", Water),
        ("n-dodecane", NDodecane), ("NC12H26", NDodecane),
        ("iso-octane", IsoOctane), (" isooctane ", IsoOctane),
    ])
    def test_aliases(self, name, cls):
        assert isinstance(create_fluid(name), cls)

    def test_unknown_fluid(self):
        with pytest.raises(ConfigurationError, match="unknown fluid"):
            create_fluid("kerosene")

    def test_all_providers_concrete(self):
        for cls in set(FLUID_NAMES.values()):
            fluid = cls()
            assert isinstance(fluid, FluidPropertyProvider)
            assert fluid.molecular_weight > 0.0
            assert fluid.critical_temperature > 0.0


class TestWater:
    def test_normal_boiling_point(self):
        npt.assert_allclose(Water().saturation_pressure(373.15), 101325.0, rtol=0.1)

    def test_latent_heat_at_boiling(self):
        npt.assert_allclose(Water().latent_heat(373.15), 2.257e6, rtol=0.05)

    def test_liquid_specific_heat(self):
        assert Water().liquid_cp(300.0) == 4239.0

    def test_diffusivity_magnitude(self):
        d = Water().binary_diffusivity(101325.0, 300.0)
        assert 1.0e-5 < d < 5.0e-5

    def test_diffusivity_inverse_pressure(self):
        water = Water()
        npt.assert_allclose(water.binary_diffusivity(2 * 101325.0, 350.0),
                            0.5 * water.binary_diffusivity(101325.0, 350.0))


class TestNDodecane:
    def test_saturation_pressure(self):
        fluid = NDodecane()
        npt.assert_allclose(fluid.saturation_pressure(300.0), 18.0, rtol=0.02)
        npt.assert_allclose(fluid.saturation_pressure(489.0), 101325.0, rtol=0.02)

    def test_liquid_properties_at_reference(self):
        fluid = NDodecane()
        npt.assert_allclose(fluid.liquid_density(300.0), 744.11)
        npt.assert_allclose(fluid.liquid_cp(300.0), 2180.0)
        npt.assert_allclose(fluid.liquid_conductivity(300.0), 0.1405)
        npt.assert_allclose(fluid.binary_diffusivity(101325.0, 300.0), 0.527 / 101325.0)

    def test_latent_heat_clamped(self):
        fluid = NDodecane()
        assert fluid.latent_heat(660.0) == fluid.latent_heat(653.0)
        assert fluid.latent_heat(653.0) > 0.0

    def test_saturation_pressure_monotonic(self):
        fluid = NDodecane()
        temperatures = np.linspace(280.0, 700.0, 50)
        psat = np.array([fluid.saturation_pressure(t) for t in temperatures])
        assert np.all(np.diff(psat) > 0.0)


class TestIsoOctane:
    def test_density(self):
        npt.assert_allclose(IsoOctane().liquid_density(300.0), 695.0, rtol=0.02)

    def test_near_critical_clamp(self):
        fluid = IsoOctane()
        tc = fluid.critical_temperature
        for method in (fluid.saturation_pressure, fluid.latent_heat, fluid.liquid_density,
                       fluid.liquid_conductivity):
            above = method(1.1 * tc)
            assert np.isfinite(above)
            npt.assert_allclose(above, method(0.99 * tc))


class TestValidation:
    @pytest.mark.parametrize("fluid", [Water(), NDodecane(), IsoOctane()])
    def test_invalid_temperature(self, fluid):
        with pytest.raises(ValueError, match="temperature"):
            fluid.saturation_pressure(-10.0)

    @pytest.mark.parametrize("fluid", [Water(), NDodecane(), IsoOctane()])
    def test_invalid_pressure(self, fluid):
        with pytest.raises(ValueError, match="pressure"):
            fluid.binary_diffusivity(0.0, 300.0)


class TestSurface:
    def test_raoult_composition(self):
        fluid = NDodecane()
        surface = Surface(fluid)
        comp = surface.calculate_composition(300.0, 101325.0)
        x = fluid.saturation_pressure(300.0) / 101325.0
        npt.assert_allclose(comp.x_surf[0], x)
        mw = x * fluid.molecular_weight + (1.0 - x) * AIR_MOLECULAR_WEIGHT
        npt.assert_allclose(comp.ys_tot, x * fluid.molecular_weight / mw)
        npt.assert_allclose(comp.latent_heat, fluid.latent_heat(300.0))

    def test_saturated_surface_rejected(self):
        """water above its boiling point at 1 atm has x_surf >= 1."""
        surface = Surface(Water())
        with pytest.raises(SurfaceSaturationError) as excinfo:
            surface.calculate_composition(400.0, 101325.0)
        assert excinfo.value.surface_temperature == 400.0
        assert excinfo.value.value >= 1.0
