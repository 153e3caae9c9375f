"""
Main entry point for droplet heating and evaporation simulation

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.
"""

import numpy as np
from fla_droplet.simulation import Simulation, SimulationParameters
import os
import time
import sys
from datetime import datetime
from fla_droplet.core.logger import TeeLogger

# !important: set the OPENBLAS_NUM_THREADS to 1 will improve the performance of the code, if you use other blas library, you would better also to set the number of threads to 1
os.environ['OPENBLAS_NUM_THREADS'] = '1'


#* about the fluids
# the droplet fluid is selected by name: 'water', 'n-dodecane' or 'iso-octane' (aliases in fla_droplet/solution/mapping_utils.py).
# the correlations and constants are in fla_droplet/solution/fluid.py and fluid_para.py, a new fluid is a new FluidPropertyProvider subclass.
#* about the ambient gas
# the ambient gas properties are evaluated with cantera from the mechanism file, 'air.yaml' is shipped with cantera.
# the carrier gas of the evaporation model is air (molecular weight and gas constant in fluid_para.py).
#* about the velocity gradient
# the gas velocity is u(x) = u0 + G.x in the x-y plane, G = [[du/dx, du/dy], [dv/dx, dv/dy]] is constant,
# the number density of the droplet relative to the injection is 1/|det(J)| of the trajectory Jacobian.

def main():
    case_name = "dodecane_800K"  # case name
    # create the result directory and log file
    result_dir = os.path.join("result", case_name)
    os.makedirs(result_dir, exist_ok=True)
    log_filename = os.path.join(result_dir, f"{case_name}.log")

    # set the log recording
    logger = TeeLogger(log_filename)
    sys.stdout = logger

    try:
        # record the start time and basic information
        start_datetime = datetime.now()
        print(f"=== Droplet Heating and Evaporation Simulation Log ===")
        print(f"Case Name: {case_name}")
        print(f"Start Time: {start_datetime.strftime('%Y-%m-%d %H:%M:%S')}")
        print(f"Log File: {log_filename}")
        print("="*50)

        params = SimulationParameters(
            case_name=case_name,
            fluid='n-dodecane',  # droplet fluid: water, n-dodecane, iso-octane
            droplet_diameter=1.0e-4,  # droplet diameter, unit[m]
            droplet_temperature=300.0,  # initial droplet temperature, unit[K]
            gas_temperature=800.0,  # ambient gas temperature, unit[K]
            gas_pressure=101325.0,  # ambient gas pressure, unit[Pa]
            time_step=1.0e-4,  # base time step, unit[s]
            end_time=2.0,  # end time, unit[s]
            droplet_velocity=np.array([0.0, 0.0, 0.0]),  # initial droplet velocity, unit[m/s]
            droplet_position=np.array([0.0, 1.0e-3, 0.0]),  # injection position, unit[m]
            gas_velocity=np.array([5.0, 0.0, 0.0]),  # gas velocity at the origin, unit[m/s]
            velocity_gradient=np.array([[0.0, 100.0], [0.0, 0.0]]),  # simple shear, unit[1/s]
            n_int=100,  # layers inside the droplet
            n_lambda=44,  # terms of the series solution
            mechanism_file='air.yaml'  # ambient gas mechanism file
        )

        # create simulation instance
        simulation = Simulation(params)

        # initialize simulation
        simulation.initialize()

        # start simulation
        start_time = time.time()
        simulation.run()
        end_time = time.time()
        total_time = end_time - start_time

        # end output
        end_datetime = datetime.now()
        print("="*50)
        print(f"Simulation completed successfully!")
        print(f"End Time: {end_datetime.strftime('%Y-%m-%d %H:%M:%S')}")
        print(f"Total Simulation Time: {total_time:.2f} seconds")
        print(f"Total Wall Clock Time: {(end_datetime - start_datetime).total_seconds():.2f} seconds")
        print("="*50)

    except Exception as e:
        # record the error information
        print(f"ERROR: Simulation failed with exception: {str(e)}")
        import traceback
        print("Traceback:")
        print(traceback.format_exc())
        raise
    finally:
        # restore the standard output and close the log file
        sys.stdout = logger.terminal
        logger.close()

if __name__ == "__main__":
    main()
