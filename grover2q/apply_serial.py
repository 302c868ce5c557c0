# grover2q/apply_serial.py
import numpy as np
from .state import State, DIM

def apply_two_qubit_4x4(state: State, U4: np.ndarray) -> State:
    """Return U4 @ psi as a new state. Row i: sum_j U4[i,j] * psi[j]."""
    U4 = np.asarray(U4)
    if U4.shape != (DIM, DIM):
        raise ValueError(f"expected a {DIM}x{DIM} gate, got shape {U4.shape}")
    psi = state.psi
    a00, a01, a10, a11 = psi[0], psi[1], psi[2], psi[3]
    out = np.empty(DIM, dtype=np.result_type(psi.dtype, U4.dtype))
    out[0] = U4[0,0]*a00 + U4[0,1]*a01 + U4[0,2]*a10 + U4[0,3]*a11
    out[1] = U4[1,0]*a00 + U4[1,1]*a01 + U4[1,2]*a10 + U4[1,3]*a11
    out[2] = U4[2,0]*a00 + U4[2,1]*a01 + U4[2,2]*a10 + U4[2,3]*a11
    out[3] = U4[3,0]*a00 + U4[3,1]*a01 + U4[3,2]*a10 + U4[3,3]*a11
    return State(out)

def apply_single_qubit(state: State, U2: np.ndarray, k: int) -> State:
    """Apply 2x2 gate U2 to qubit k (little-endian: bit k) and return a new state."""
    if k not in (0, 1):
        raise ValueError(f"qubit index must be 0 or 1, got {k}")
    U2 = np.asarray(U2)
    assert U2.shape == (2,2)
    psi = state.as_numpy()
    step = 1 << k
    block = step << 1
    # pairs (i0, i0+step) differ only in bit k
    for base in range(0, DIM, block):
        for off in range(step):
            i0 = base + off
            i1 = i0 + step
            a0 = psi[i0]
            a1 = psi[i1]
            psi[i0] = U2[0,0]*a0 + U2[0,1]*a1
            psi[i1] = U2[1,0]*a0 + U2[1,1]*a1
    return State(psi)
