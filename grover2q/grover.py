# grover2q/grover.py
import operator
from dataclasses import dataclass
from numbers import Integral
from typing import List, Optional, Tuple

import numpy as np

from .config import DEFAULT_CONFIG, SimulatorConfig
from .gates import Gate
from .log import get_logger
from .state import State

logger = get_logger("grover")


@dataclass(frozen=True)
class StepInfo:
    name: str
    description: str


@dataclass(frozen=True)
class CircuitStep:
    """Every gate applied from |00> up to a step, with a short title."""
    title: str
    gates: Tuple[Gate, ...] = ()


INITIAL_STEP = StepInfo("Initial", "Start with |00⟩ state")
SUPERPOSITION_STEP = StepInfo("Superposition", "Apply H gates to create equal superposition")
INITIAL_CIRCUIT = CircuitStep("Initial State |00⟩")
EMPTY_CIRCUIT = CircuitStep("Circuit Diagram")

ORDINALS = {2: "Second", 3: "Third"}

# one recorded step = the gates applied since the previous record, its label and title
Op = Tuple[Tuple[Gate, ...], StepInfo, str]


def _titles(i: int) -> Tuple[str, str]:
    if i == 1:
        return "Oracle: Mark |11⟩", "Diffusion: Amplitude Amplification"
    which = f"{ORDINALS[i]} Iteration" if i in ORDINALS else f"Iteration {i}"
    return f"Oracle: {which}", f"Diffusion: {which}"


def schedule(iterations: int) -> List[Op]:
    """Gate order for a run: H1 then H0, then Oracle/Diffusion per iteration."""
    ops: List[Op] = [((Gate.H1, Gate.H0), SUPERPOSITION_STEP, "Superposition: H ⊗ H")]
    for i in range(1, iterations + 1):
        oracle_title, diffusion_title = _titles(i)
        ops.append(((Gate.ORACLE,), StepInfo(f"Oracle {i}", "Oracle marks the target state |11⟩"), oracle_title))
        ops.append(((Gate.DIFFUSION,), StepInfo(f"Diffusion {i}", "Diffusion operator amplifies marked state"), diffusion_title))
    return ops


def _iteration_count(iterations) -> int:
    try:
        return operator.index(iterations)
    except TypeError:
        if isinstance(iterations, float) and iterations.is_integer():
            logger.warning("iteration count %r converted to %d", iterations, int(iterations))
            return int(iterations)
        raise TypeError(f"iteration count must be an integer, got {iterations!r}") from None


class GroverAlgorithm:
    """Grover search for |11> on two qubits, recorded step by step.

    run() builds the full history of (state, step info) pairs once; the
    cursor methods then move over it. Navigation and accessors never raise:
    out-of-range or non-integer moves return False and an empty history
    falls back to the initial |00> record.
    """

    def __init__(self, config: Optional[SimulatorConfig] = None):
        self.config = config or DEFAULT_CONFIG
        self.reset()

    def reset(self):
        self._states: List[State] = []
        self._steps: List[StepInfo] = []
        self._circuits: List[CircuitStep] = []
        self.current_step = 0
        self.iterations = 0

    def run(self, iterations: Optional[int] = None) -> List[State]:
        """Record a fresh history. ``iterations`` must be an integer (a whole float is accepted)."""
        if iterations is None:
            iterations = self.config.iterations
        iterations = _iteration_count(iterations)
        self.reset()
        if iterations < 0:
            logger.warning("negative iteration count %d treated as 0", iterations)
            iterations = 0
        self.iterations = iterations

        state = State.zero(dtype=self.config.dtype)
        applied: Tuple[Gate, ...] = ()
        self._record(state, INITIAL_STEP, INITIAL_CIRCUIT)
        for gates, info, title in schedule(iterations):
            for gate in gates:
                state = gate.apply(state)
            applied += gates
            self._record(state, info, CircuitStep(title, applied))

        logger.debug("run(%d) recorded %d steps", iterations, len(self._states))
        return list(self._states)

    def _record(self, state: State, info: StepInfo, circuit: CircuitStep):
        if self.config.check_norm:
            # single precision cannot hold 1e-9
            tol = max(self.config.norm_tol, 100 * np.finfo(state.dtype).eps)
            state.check_normalized(tol=tol)
        self._states.append(state.copy())
        self._steps.append(info)
        self._circuits.append(circuit)

    # ------------------------------------------------------------------
    # accessors

    @property
    def states(self) -> Tuple[State, ...]:
        return tuple(self._states)

    @property
    def steps(self) -> Tuple[StepInfo, ...]:
        return tuple(self._steps)

    def history(self) -> List[Tuple[State, StepInfo]]:
        return list(zip(self._states, self._steps))

    def current_state(self) -> State:
        if 0 <= self.current_step < len(self._states):
            return self._states[self.current_step]
        return State.zero(dtype=self.config.dtype)

    def current_step_info(self) -> StepInfo:
        if 0 <= self.current_step < len(self._steps):
            return self._steps[self.current_step]
        return INITIAL_STEP

    def circuit_at(self, step: int) -> CircuitStep:
        if _is_index(step) and 0 <= step < len(self._circuits):
            return self._circuits[int(step)]
        return EMPTY_CIRCUIT

    def current_circuit(self) -> CircuitStep:
        if not self._circuits:
            return INITIAL_CIRCUIT
        return self.circuit_at(self.current_step)

    def total_steps(self) -> int:
        return len(self._states)

    # ------------------------------------------------------------------
    # navigation

    def next_step(self) -> bool:
        if self.current_step < len(self._states) - 1:
            self.current_step += 1
            return True
        return False

    def prev_step(self) -> bool:
        if self.current_step > 0:
            self.current_step -= 1
            return True
        return False

    def set_step(self, step: int) -> bool:
        if _is_index(step) and 0 <= step < len(self._states):
            self.current_step = int(step)
            return True
        logger.debug("set_step(%r) outside [0, %d)", step, len(self._states))
        return False


def _is_index(step) -> bool:
    return isinstance(step, Integral) and not isinstance(step, bool)
