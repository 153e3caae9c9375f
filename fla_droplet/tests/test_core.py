"""Tests for the runtime, drag law, particle records and result output."""

import os

import numpy as np
import numpy.testing as npt
import pytest

from fla_droplet.core import (Runtime, Droplet, JacobianState, RadialGrid, RadialGridParameters,
                              DataManager, TeeLogger, drag_coefficient, schiller_naumann_cd,
                              relative_reynolds)
from fla_droplet.simulation import SimulationParameters


class TestRuntime:
    def test_advance(self):
        runtime = Runtime(time_step=0.1, end_time=0.25)
        assert runtime.is_running()
        runtime.advance()
        runtime.advance()
        runtime.advance()
        assert runtime.step_count == 3
        assert not runtime.is_running()

    def test_stop(self):
        runtime = Runtime()
        runtime.stop()
        assert not runtime.is_running()

    def test_limit_time_step(self):
        runtime = Runtime(time_step=1e-4)
        assert runtime.limit_time_step(5e-5) == 5e-5
        assert runtime.limit_time_step(1.0) == 1e-4
        assert runtime.limit_time_step(np.inf) == 1e-4
        assert runtime.limit_time_step(0.0) == 1e-4


class TestDrag:
    def test_stokes_limit(self):
        npt.assert_allclose(drag_coefficient(0.0), 18.0)
        npt.assert_allclose(drag_coefficient(1e-8), 18.0, rtol=1e-5)

    def test_newton_regime(self):
        assert schiller_naumann_cd(2000.0) == 0.44
        npt.assert_allclose(drag_coefficient(2000.0), 18.0 * 0.44 * 2000.0 / 24.0)

    def test_relative_reynolds(self):
        re = relative_reynolds(1.2, 1.8e-5, 1e-4, np.array([3.0, 4.0, 0.0]))
        npt.assert_allclose(re, 1.2 * 5.0 * 1e-4 / 1.8e-5)


class TestParticleRecords:
    def test_droplet_mass(self):
        droplet = Droplet.create(1e-4, 800.0, 300.0, 10)
        npt.assert_allclose(droplet.mass, 800.0 * np.pi * 1e-12 / 6.0)
        npt.assert_allclose(droplet.volume_equivalent_diameter(), 1e-4)
        assert droplet.thermal.profile.shape == (11,)
        assert droplet.n_components == 1

    def test_records_not_shared(self):
        a = Droplet.create(1e-4, 800.0, 300.0, 10)
        b = Droplet.create(1e-4, 800.0, 300.0, 10)
        a.thermal.profile[:] = 1.0
        a.jacobian.j[0, 0] = 5.0
        assert b.thermal.profile[0] == 0.0
        assert b.jacobian.j[0, 0] == 0.0

    def test_jacobian_vector_layout(self):
        state = JacobianState.create()
        y = np.arange(8.0)
        state.from_vector(y)
        npt.assert_array_equal(state.j, [[0.0, 1.0], [2.0, 3.0]])
        npt.assert_array_equal(state.w, [[4.0, 5.0], [6.0, 7.0]])
        npt.assert_array_equal(state.to_vector(), y)


class TestOutput:
    def test_data_manager_files(self, tmp_path):
        grid = RadialGrid(RadialGridParameters(n_int=10))
        params = SimulationParameters(case_name="unit")
        manager = DataManager("unit", grid, params, profile_save_interval=1,
                              droplet_save_interval=1, result_root=str(tmp_path))
        droplet = Droplet.create(1e-4, 800.0, 300.0, 10)
        droplet.thermal.profile[:] = 300.0
        droplet.jacobian.j[:, :] = np.eye(2)
        manager.save_all(0.0, 1e-4, droplet, 1e-4)
        manager.close()
        result_dir = tmp_path / "unit"
        droplet_lines = (result_dir / "droplet-unit.csv").read_text().splitlines()
        profile_lines = (result_dir / "profile-unit.csv").read_text().splitlines()
        jacobian_lines = (result_dir / "jacobian-unit.csv").read_text().splitlines()
        assert len(droplet_lines) == 2
        assert len(profile_lines) == 1 + 11
        assert len(jacobian_lines) == 2
        assert droplet_lines[0].startswith("Time,TimeStep,Diameter")

    def test_tee_logger(self, tmp_path, capsys):
        filename = os.path.join(tmp_path, "case.log")
        logger = TeeLogger(filename)
        logger.write("hello\n")
        logger.flush()
        logger.close()
        assert open(filename).read() == "hello\n"
        assert "hello" in capsys.readouterr().out
