"""Tests for the single droplet reference host."""

import numpy as np
import numpy.testing as npt
import pytest

from fla_droplet import Simulation, SimulationParameters
from fla_droplet.core import SurfaceSaturationError
from fla_droplet.solution import AmbientGas


# Fixtures

@pytest.fixture
def params(tmp_path):
    return SimulationParameters(
        case_name="short",
        fluid="n-dodecane",
        droplet_diameter=1.0e-4,
        droplet_temperature=300.0,
        gas_temperature=800.0,
        gas_pressure=101325.0,
        time_step=1.0e-4,
        end_time=2.0e-3,
        gas_velocity=np.array([5.0, 0.0, 0.0]),
        profile_save_interval=5,
        droplet_save_interval=1,
        result_root=str(tmp_path)
    )


class TestAmbientGas:
    def test_air_properties(self):
        gas = AmbientGas(800.0, 101325.0)
        cell = gas.cell_state()
        npt.assert_allclose(cell.density, 101325.0 / (287.0 * 800.0), rtol=0.01)
        assert 3.0e-5 < cell.viscosity < 4.5e-5
        assert 0.04 < cell.conductivity < 0.07

    def test_linear_velocity_field(self):
        gas = AmbientGas(300.0, 101325.0, velocity=[1.0, 0.0, 0.0],
                         velocity_gradient=[[0.0, 10.0], [0.0, 0.0]])
        cell = gas.cell_state(np.array([0.0, 0.1, 0.0]))
        npt.assert_allclose(cell.velocity, [2.0, 0.0, 0.0])
        npt.assert_allclose(cell.velocity_gradient, [[0.0, 10.0], [0.0, 0.0]])


class TestSimulation:
    def test_initialize(self, params):
        simulation = Simulation(params)
        simulation.initialize(save_results=False)
        droplet = simulation.droplet
        npt.assert_array_equal(droplet.thermal.profile, 300.0)
        assert droplet.jacobian.initialized
        assert droplet.reynolds > 0.0
        npt.assert_allclose(droplet.jacobian.r0, 1.0e-3)

    def test_short_run(self, params, tmp_path):
        simulation = Simulation(params)
        simulation.initialize()
        simulation.run()
        droplet = simulation.droplet
        assert simulation.runtime.step_count >= 20
        assert droplet.mass < simulation.droplet_params.mass_0
        assert simulation.droplet_params.evaporated_mass > 0.0
        assert droplet.temperature > 300.0
        assert droplet.velocity[0] > 0.0
        # uniform gas, the trajectory map stays the identity
        npt.assert_allclose(droplet.jacobian.det, 1.0)
        assert droplet.jacobian.sign_changes == 0
        assert (tmp_path / "short" / "droplet-short.csv").exists()
        assert (tmp_path / "short" / "jacobian-short.csv").exists()

    def test_shear_flow_run(self, params):
        params.velocity_gradient = np.array([[0.0, 100.0], [0.0, 0.0]])
        simulation = Simulation(params)
        simulation.initialize(save_results=False)
        simulation.run()
        jacobian = simulation.droplet.jacobian
        assert jacobian.j[0, 1] > 0.0
        npt.assert_allclose(jacobian.det, 1.0, rtol=1e-10)

    def test_ambient_vapour_reaches_cell(self, params):
        params.gas_vapour_mass_fraction = 1.0e-3
        simulation = Simulation(params)
        simulation.initialize(save_results=False)
        assert simulation.gas.cell_state().vapour_mass_fraction == 1.0e-3


def _recording_compute(simulation, failures, time_steps, surface_kick=0.0):
    """wrap the heat/mass transfer step, the first attempts fail or overshoot"""
    compute = simulation.evaporation_model.compute

    def wrapped(droplet, cell, dt=None, sources=None):
        time_steps.append(dt)
        attempt = len(time_steps)
        if attempt <= failures:
            if surface_kick == 0.0:
                raise SurfaceSaturationError(400.0, 1.2, quantity="x_surf")
            result = compute(droplet, cell, dt, sources)
            droplet.thermal.profile[-1] += surface_kick
            return result
        return compute(droplet, cell, dt, sources)

    simulation.evaporation_model.compute = wrapped


class TestStepRejection:
    def test_saturated_attempt_retried_with_half_step(self, params):
        simulation = Simulation(params)
        simulation.initialize(save_results=False)
        time_steps = []
        _recording_compute(simulation, 1, time_steps)
        assert simulation.step()
        npt.assert_allclose(time_steps, [1.0e-4, 5.0e-5])
        npt.assert_allclose(simulation.runtime.time_step, 5.0e-5)
        npt.assert_allclose(simulation.droplet.dt, 5.0e-5)
        assert not simulation.flag_step_failed

    def test_temperature_jump_retried(self, params):
        simulation = Simulation(params)
        simulation.initialize(save_results=False)
        time_steps = []
        _recording_compute(simulation, 1, time_steps, surface_kick=100.0)
        assert simulation.step()
        assert len(time_steps) == 2
        assert simulation.droplet.thermal.surface_temperature < 330.0

    def test_rejected_attempt_restores_state(self, params):
        simulation = Simulation(params)
        simulation.initialize(save_results=False)
        mass_0 = simulation.droplet.mass
        time_steps = []
        _recording_compute(simulation, 100, time_steps)
        assert not simulation.step()
        assert simulation.flag_step_failed
        assert simulation.droplet.mass == mass_0
        assert simulation.droplet_params.evaporated_mass == 0.0
        assert simulation.droplet.dt == 1.0e-4
        npt.assert_array_equal(simulation.droplet.thermal.profile, 300.0)
        npt.assert_array_equal(simulation.droplet.jacobian.j, np.eye(2))

    def test_exhausted_retries_stop_cleanly(self, params):
        params.max_step_retries = 3
        simulation = Simulation(params)
        simulation.initialize(save_results=False)
        time_steps = []
        _recording_compute(simulation, 100, time_steps)
        simulation.run()
        assert simulation.flag_step_failed
        assert "x_surf" in simulation.failure_reason
        assert simulation.runtime.step_count == 0
        assert len(time_steps) == 4
        npt.assert_allclose(time_steps[-1], 1.0e-4 / 8.0)
        npt.assert_array_equal(simulation.droplet.thermal.profile, 300.0)

    def test_isooctane_reaches_diameter_stop(self, params):
        """the explicit surface forcing needs shorter steps as the droplet shrinks"""
        params.fluid = "iso-octane"
        params.end_time = 1.0
        params.velocity_gradient = np.array([[0.0, 100.0], [0.0, 0.0]])
        params.print_interval = 1000000
        simulation = Simulation(params)
        simulation.initialize(save_results=False)
        simulation.run()
        assert not simulation.flag_step_failed
        assert simulation.droplet.diameter < 0.1 * simulation.droplet_params.diameter_0
        assert simulation.runtime.current_time < params.end_time
        assert np.all(np.isfinite(simulation.droplet.thermal.profile))
        assert simulation.droplet.thermal.profile.min() > 250.0
