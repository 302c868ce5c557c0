"""
Configuration for the 2-qubit Grover simulator.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import numpy as np


@dataclass
class SimulatorConfig:
    """Settings shared by the sequencer and the command line."""

    # Grover iterations used when run() is called without a count
    iterations: int = 1

    # Amplitude dtype for every recorded state
    dtype: type = np.complex128

    # Normalisation diagnostic after each recorded step; the tolerance is
    # raised to 100 * eps of dtype when that is looser (complex64)
    check_norm: bool = True
    norm_tol: float = 1e-9

    # Where exported CSVs and plots go
    data_dir: Path = field(default_factory=lambda: Path("data"))

    def csv_path(self, iterations: int) -> Path:
        """Default export path: data/grover_k{K}.csv"""
        return self.data_dir / f"grover_k{iterations}.csv"

    def ensure_paths(self):
        self.data_dir.mkdir(parents=True, exist_ok=True)


# Default configuration instance
DEFAULT_CONFIG = SimulatorConfig()
