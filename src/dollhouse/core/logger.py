import logging
import os
from datetime import datetime
from typing import Optional


class SimLogger:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(SimLogger, cls).__new__(cls)
            cls._instance._setup()
        return cls._instance

    def _setup(self):
        self.echo = False
        self.log_path: Optional[str] = None

        # Simulation Log
        self.sim_logger = logging.getLogger('dollhouse_sim')
        self.sim_logger.setLevel(logging.INFO)

    def attach_file(self, log_dir: str = 'logs') -> str:
        """Start writing the simulation log to a dated file under log_dir."""
        if self.log_path:
            return self.log_path
        if not os.path.exists(log_dir):
            os.makedirs(log_dir)

        self.log_path = os.path.join(
            log_dir, f'sim_{datetime.now().strftime("%Y%m%d")}.log'
        )
        fh = logging.FileHandler(self.log_path)
        fh.setFormatter(logging.Formatter('%(asctime)s [%(levelname)s] %(message)s'))
        self.sim_logger.addHandler(fh)
        return self.log_path

    def close(self):
        """Detach and close every handler; the next attach_file starts fresh."""
        for handler in list(self.sim_logger.handlers):
            self.sim_logger.removeHandler(handler)
            handler.close()
        self.log_path = None
        self.echo = False

    def log_event(self, category: str, message: str):
        if self.echo:
            print(f"[{category}] {message}")
        self.sim_logger.info(f"[{category}] {message}")

    def warn(self, category: str, message: str):
        if self.echo:
            print(f"[{category}] WARNING: {message}")
        self.sim_logger.warning(f"[{category}] {message}")
