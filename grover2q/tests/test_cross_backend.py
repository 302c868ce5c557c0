# grover2q/tests/test_cross_backend.py
import numpy as np
import pytest
from grover2q.state import State
from grover2q.gates import Gate, H, is_unitary
from grover2q.apply_serial import apply_single_qubit, apply_two_qubit_4x4

S = 1 / np.sqrt(2)

def max_abs_diff(a, b):
    return float(np.max(np.abs(a - b)))

def random_state(rng):
    v = rng.normal(size=4) + 1j * rng.normal(size=4)
    return State(v / np.linalg.norm(v))

def test_catalog_entries():
    assert np.allclose(Gate.H0.matrix, [[S, S, 0, 0], [S, -S, 0, 0], [0, 0, S, S], [0, 0, S, -S]], atol=1e-15)
    assert np.allclose(Gate.H1.matrix, [[S, 0, S, 0], [0, S, 0, S], [S, 0, -S, 0], [0, S, 0, -S]], atol=1e-15)
    assert np.array_equal(Gate.ORACLE.matrix, np.diag([1, 1, 1, -1]))
    expect = np.full((4, 4), 0.5); np.fill_diagonal(expect, -0.5)
    assert np.array_equal(Gate.DIFFUSION.matrix, expect)

def test_catalog_is_read_only():
    with pytest.raises(ValueError):
        Gate.ORACLE.matrix[0, 0] = 2

def test_catalog_is_unitary():
    for g in Gate:
        assert is_unitary(g.matrix)

def test_gate_labels():
    assert [g.value for g in Gate] == ["H0", "H1", "Oracle", "Diffusion"]

@pytest.mark.parametrize("gate,k", [(Gate.H0, 0), (Gate.H1, 1)])
def test_catalog_vs_single_qubit_kernel(gate, k):
    rng = np.random.default_rng(123)
    for _ in range(10):
        st = random_state(rng)
        a = gate.apply(st).as_numpy()
        b = apply_single_qubit(st, H(), k).as_numpy()
        assert max_abs_diff(a, b) < 1e-12

def test_4x4_kernel_vs_matmul():
    rng = np.random.default_rng(7)
    U = rng.normal(size=(4, 4)) + 1j * rng.normal(size=(4, 4))
    st = random_state(rng)
    assert np.allclose(apply_two_qubit_4x4(st, U).as_numpy(), U @ st.psi, atol=1e-12, rtol=0)

def test_kernel_shape_checks():
    with pytest.raises(ValueError):
        apply_two_qubit_4x4(State.zero(), np.eye(2))
    with pytest.raises(ValueError):
        apply_single_qubit(State.zero(), H(), 2)

@pytest.mark.parametrize("gate", list(Gate))
def test_involution(gate):
    rng = np.random.default_rng(99)
    for _ in range(10):
        st = random_state(rng)
        twice = gate.apply(gate.apply(st))
        assert np.allclose(twice.psi, st.psi, atol=1e-12, rtol=0)

def test_hadamards_commute():
    rng = np.random.default_rng(2024)
    for _ in range(20):
        st = random_state(rng)
        a = Gate.H0.apply(Gate.H1.apply(st))
        b = Gate.H1.apply(Gate.H0.apply(st))
        assert np.allclose(a.psi, b.psi, atol=1e-12, rtol=0)
        assert abs(a.norm2() - 1.0) < 1e-12
