# grover2q/gates.py
from enum import Enum

import numpy as np

from .apply_serial import apply_two_qubit_4x4
from .state import State

def H(dtype=np.complex128) -> np.ndarray:
    s = np.sqrt(0.5)
    return np.array([[s, s],
                     [s, -s]], dtype=dtype)

def I(dtype=np.complex128) -> np.ndarray:
    return np.eye(2, dtype=dtype)

# 4x4 operators in order 00,01,10,11 ; qubit 0 is the LSB so it is the
# right-hand factor of the Kronecker product.

def H0(dtype=np.complex128) -> np.ndarray:
    # blocks pair (0,1) and (2,3)
    return np.kron(I(dtype), H(dtype))

def H1(dtype=np.complex128) -> np.ndarray:
    # blocks pair (0,2) and (1,3)
    return np.kron(H(dtype), I(dtype))

def ORACLE(dtype=np.complex128) -> np.ndarray:
    # phase flip of |11> only
    mat = np.eye(4, dtype=dtype)
    mat[3,3] = -1
    return mat

def DIFFUSION(dtype=np.complex128) -> np.ndarray:
    # 2|s><s| - I : inversion about the mean
    mat = np.full((4, 4), 0.5, dtype=dtype)
    np.fill_diagonal(mat, -0.5)
    return mat

def is_unitary(U: np.ndarray, tol: float = 1e-12) -> bool:
    U = np.asarray(U)
    return np.allclose(U.conj().T @ U, np.eye(U.shape[0]), atol=tol, rtol=0)


class Gate(Enum):
    """The closed set of operators used by the 2-qubit Grover run."""
    H0 = "H0"
    H1 = "H1"
    ORACLE = "Oracle"
    DIFFUSION = "Diffusion"

    @property
    def matrix(self) -> np.ndarray:
        return _MATRICES[self]

    def apply(self, state: State) -> State:
        # result keeps the state's precision
        return apply_two_qubit_4x4(state, self.matrix.astype(state.dtype, copy=False))


def _frozen(mat: np.ndarray) -> np.ndarray:
    mat.setflags(write=False)
    return mat

_MATRICES = {
    Gate.H0: _frozen(H0()),
    Gate.H1: _frozen(H1()),
    Gate.ORACLE: _frozen(ORACLE()),
    Gate.DIFFUSION: _frozen(DIFFUSION()),
}
