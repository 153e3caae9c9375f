"""
logger module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.

TeeLogger duplicates everything written to stdout into the case log file:

    logger = TeeLogger(log_filename)
    sys.stdout = logger
    ...
    sys.stdout = logger.terminal
    logger.close()
"""

import sys


class TeeLogger:
    def __init__(self, filename: str, mode: str = "w"):
        """
        initialize the logger

        Args:
            filename: log file name
            mode: file open mode, default overwrite
        """
        self.terminal = sys.stdout
        self.log = open(filename, mode, encoding="utf-8")

    def write(self, message: str):
        self.terminal.write(message)
        self.log.write(message)

    def flush(self):
        self.terminal.flush()
        self.log.flush()

    def isatty(self) -> bool:
        return False

    def close(self):
        """close the log file, the terminal stream is left open"""
        if not self.log.closed:
            self.log.close()
