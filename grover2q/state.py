# grover2q/state.py
import math
from dataclasses import dataclass
from typing import Iterable, List, NamedTuple, Tuple

import numpy as np

from .complex_num import Complex

DIM = 4  # basis order 00,01,10,11 ; index = 2*bit(q1) + bit(q0)
BASIS_LABELS = ("|00⟩", "|01⟩", "|10⟩", "|11⟩")


class BlochVector(NamedTuple):
    x: float
    y: float
    z: float


NORTH_POLE = BlochVector(0.0, 0.0, 1.0)


@dataclass(frozen=True, eq=False)
class State:
    psi: np.ndarray  # shape (4,), read-only

    def __post_init__(self):
        psi = np.array(self.psi)
        if not np.iscomplexobj(psi):
            psi = psi.astype(np.complex128)
        if psi.shape != (DIM,):
            raise ValueError(f"2-qubit state needs {DIM} amplitudes, got shape {psi.shape}")
        psi.setflags(write=False)
        object.__setattr__(self, "psi", psi)

    @staticmethod
    def zero(dtype=np.complex128) -> "State":
        psi = np.zeros(DIM, dtype=dtype)
        psi[0] = 1.0 + 0.0j
        return State(psi)

    @staticmethod
    def from_amplitudes(amps: Iterable, dtype=np.complex128) -> "State":
        """Build a state from Complex, complex or real amplitudes (reals get imag=0)."""
        return State(np.array([complex(Complex.from_value(a)) for a in amps], dtype=dtype))

    @property
    def dtype(self):
        return self.psi.dtype

    @property
    def amplitudes(self) -> Tuple[Complex, ...]:
        return tuple(Complex.from_value(a) for a in self.psi)

    def amplitude(self, i: int) -> Complex:
        return Complex.from_value(self.psi[i])

    def probabilities(self) -> List[float]:
        return [a.magnitude() ** 2 for a in self.amplitudes]

    def norm2(self) -> float:
        return float(np.vdot(self.psi, self.psi).real)

    def check_normalized(self, tol=1e-9):
        n2 = self.norm2()
        if not (abs(1.0 - n2) <= tol):
            raise AssertionError(f"Normalization failed: ||psi||^2={n2}")

    def qubit_reduced_state(self, qubit: int) -> Tuple[Complex, Complex]:
        """(alpha, beta) for one qubit, summing amplitude pairs over the other qubit.

        This is only the true reduced state for product states. Once Oracle and
        Diffusion entangle the register the result is an approximation; callers
        must not read it as a reduced density matrix.
        """
        a = self.amplitudes
        if qubit == 0:
            return a[0] + a[1], a[2] + a[3]
        return a[0] + a[2], a[1] + a[3]

    def qubit_states(self) -> List[Tuple[Complex, Complex]]:
        return [self.qubit_reduced_state(0), self.qubit_reduced_state(1)]

    def bloch_coordinates(self, qubit: int) -> BlochVector:
        alpha, beta = self.qubit_reduced_state(qubit)
        norm = math.sqrt(alpha.magnitude() ** 2 + beta.magnitude() ** 2)
        if norm == 0:
            return NORTH_POLE
        alpha = alpha * (1 / norm)
        beta = beta * (1 / norm)
        ab = alpha.conjugate() * beta
        return BlochVector(2 * ab.real, 2 * ab.imag,
                           alpha.magnitude() ** 2 - beta.magnitude() ** 2)

    def copy(self) -> "State":
        return State(self.psi.copy())

    def as_numpy(self) -> np.ndarray:
        return self.psi.copy()

    def __repr__(self) -> str:
        return "State(" + ", ".join(str(a) for a in self.amplitudes) + ")"
