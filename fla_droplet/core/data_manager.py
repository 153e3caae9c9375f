"""
data manager module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.
"""

import csv
import os


class DataManager:
    def __init__(self, case_name: str, grid, simulation_params, profile_save_interval=100,
                 droplet_save_interval=10, result_root="result"):
        """
        initialize the data manager

        Args:
            case_name: case name
            grid: radial grid object
            simulation_params: simulation parameters object
            profile_save_interval: temperature profile save interval, default is 100
            droplet_save_interval: droplet history and Jacobian save interval, default is 10
            result_root: root directory of the results
        """
        self.case_name = case_name
        self.grid = grid
        self.simulation_params = simulation_params
        self.iteration_count = 0
        self.profile_save_interval = profile_save_interval
        self.droplet_save_interval = droplet_save_interval
        self.result_dir = os.path.join(result_root, case_name)
        os.makedirs(self.result_dir, exist_ok=True)

        # 1. droplet history
        self.droplet_header = [
            'Time', 'TimeStep', 'Diameter', 'D2_d0_2', 'Mass', 'Temperature', 'SurfaceTemp',
            'CenterTemp', 'Reynolds', 'B_M', 'B_T', 'Nusselt', 'EvaporationRate', 'LatentHeat',
            'HeatRate', 'LimitingTime', 'PositionX', 'PositionY', 'VelocityX', 'VelocityY'
        ]
        self.droplet_file = open(os.path.join(self.result_dir, f"droplet-{case_name}.csv"), "w", newline='')
        csv.writer(self.droplet_file).writerow(self.droplet_header)
        self.droplet_file.flush()

        # 2. temperature profile inside the droplet
        self.profile_header = ['Time', 'Layer_Index', 'Position', 'Temperature']
        self.profile_file = open(os.path.join(self.result_dir, f"profile-{case_name}.csv"), "w", newline='')
        csv.writer(self.profile_file).writerow(self.profile_header)
        self.profile_file.flush()

        # 3. trajectory Jacobian
        self.jacobian_header = ['Time', 'J11', 'J12', 'J21', 'J22', 'W11', 'W12', 'W21', 'W22',
                                'Det', 'NumberDensity', 'SignChanges', 'Beta',
                                'HeatRateScaled', 'EvaporationRateScaled']
        self.jacobian_file = open(os.path.join(self.result_dir, f"jacobian-{case_name}.csv"), "w", newline='')
        csv.writer(self.jacobian_file).writerow(self.jacobian_header)
        self.jacobian_file.flush()

        # print the initialization parameters
        self._print_initialization_parameters()

    def _print_initialization_parameters(self):
        """print the initialization parameters of the data manager"""
        print("\n=== the initialization parameters of the data manager ===")
        print(f"    case name: {self.case_name}")
        print(f"    profile save interval: {self.profile_save_interval}")
        print(f"    droplet save interval: {self.droplet_save_interval}")
        print(f"    result directory: {self.result_dir}")
        print(f"    fluid: {self.simulation_params.fluid}")
        print(f"    gas pressure: {self.simulation_params.gas_pressure/1e5:.2f} bar")
        print(f"    gas temperature: {self.simulation_params.gas_temperature:.2f} K")
        print(f"    droplet initial temperature: {self.simulation_params.droplet_temperature:.2f} K")
        print(f"    droplet initial diameter: {self.simulation_params.droplet_diameter*1e6:.2f} um")
        print(f"    layers inside the droplet: {self.grid.n_int}")
        print("="*50+"\n")

    def save_profile(self, time, droplet):
        if self.iteration_count % self.profile_save_interval == 0:
            writer = csv.writer(self.profile_file)
            for i in range(self.grid.n_int + 1):
                writer.writerow([time, i, self.grid.positions[i], droplet.thermal.profile[i]])

    def save_droplet(self, time, time_step, droplet, initial_diameter):
        if self.iteration_count % self.droplet_save_interval == 0:
            thermal = droplet.thermal
            row = [
                time, time_step, droplet.diameter, (droplet.diameter / initial_diameter) ** 2,
                droplet.mass, droplet.temperature, thermal.surface_temperature, thermal.profile[0],
                droplet.reynolds, thermal.bm, thermal.bt, thermal.nusselt, thermal.tot_vap_rate,
                thermal.latent_heat, thermal.dhdt, droplet.limiting_time,
                droplet.position[0], droplet.position[1], droplet.velocity[0], droplet.velocity[1]
            ]
            csv.writer(self.droplet_file).writerow(row)

    def save_jacobian(self, time, droplet):
        if self.iteration_count % self.droplet_save_interval == 0:
            state = droplet.jacobian
            row = [time] + list(state.to_vector()) + [
                state.det, state.number_density, state.sign_changes, state.beta,
                droplet.thermal.dhdt_scaled, droplet.thermal.dmdt_scaled
            ]
            csv.writer(self.jacobian_file).writerow(row)

    def save_all(self, time, time_step, droplet, initial_diameter):
        """save the data of one step and flush the files"""
        self.save_droplet(time, time_step, droplet, initial_diameter)
        self.save_profile(time, droplet)
        self.save_jacobian(time, droplet)
        self.iteration_count += 1
        for f in (self.droplet_file, self.profile_file, self.jacobian_file):
            f.flush()

    def close(self):
        """close the result files"""
        for f in (self.droplet_file, self.profile_file, self.jacobian_file):
            if not f.closed:
                f.close()
