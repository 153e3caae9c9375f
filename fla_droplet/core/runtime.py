"""
runtime module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.

This module provides the basic control functions of the simulation runtime, including time stepping, running state control, etc.

main functions:
1. time control
   - set and update the time step
   - track the current simulation time
   - control the simulation end time

2. running state management
   - control the start and stop of the simulation
   - provide the running state query interface

3. time step limiting
   - the evaporation model recommends a time step ceiling after each step
   - the next step uses the smaller of the base time step and the ceiling
"""

import numpy as np


class Runtime:
    def __init__(self, time_step: float = 1e-4, end_time: float = 1.0):
        """
        initialize the runtime class

        Args:
            time_step: base time step, default 0.1ms
            end_time: end time, default 1s
        """
        self.base_time_step = time_step
        self.time_step = time_step
        self.end_time = end_time
        self.current_time = 0.0
        self.step_count = 0
        self.running = True

    def is_running(self) -> bool:
        """
        check if the simulation is still running

        Returns:
            bool: if the current time is less than the total time and running is True, return True
        """
        return self.current_time < self.end_time and self.running

    def stop(self):
        """
        manually stop the simulation
        """
        self.running = False

    def limit_time_step(self, limiting_time: float) -> float:
        """
        set the next time step to the smaller of the base time step and the recommended ceiling

        Args:
            limiting_time: time step ceiling recommended by the evaporation model [s]

        Returns:
            float: the next time step [s]
        """
        if np.isfinite(limiting_time) and limiting_time > 0.0:
            self.time_step = min(self.base_time_step, limiting_time)
        else:
            self.time_step = self.base_time_step
        return self.time_step

    def advance(self):
        """
        advance the current time by one time step
        """
        self.current_time += self.time_step
        self.step_count += 1
