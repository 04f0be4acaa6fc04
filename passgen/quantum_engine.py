from __future__ import annotations

"""
Quantum random source: builds a circuit, puts qubits in superposition,
measures them in alternating bases, and serves the mixed bits as a RandomSource.
"""
from loguru import logger
from qiskit import QuantumCircuit, transpile
from qiskit_aer import AerSimulator

from .config import QuantumSourceConfig, DEFAULT_QUANTUM_CONFIG
from .entropy import amplify_entropy, bits_to_int, combine_streams
from .randomness import RandomSource


class QuantumEngine:
    """
    Encapsulates all quantum-circuit-related logic.
    """

    def __init__(self, config: QuantumSourceConfig | None = None) -> None:
        self.config = config or DEFAULT_QUANTUM_CONFIG
        self.backend = AerSimulator()

        if self.config.num_qubits < 1:
            raise ValueError("num_qubits must be at least 1.")

        max_qubits = getattr(self.backend, "num_qubits", None)
        if max_qubits is not None and self.config.num_qubits > max_qubits:
            raise ValueError(
                f"Configured num_qubits={self.config.num_qubits} exceeds "
                f"backend limit ({max_qubits}). "
                "Lower num_qubits in QuantumSourceConfig."
            )

    def _build_circuit(self) -> QuantumCircuit:
        """
        Prepare N qubits with H, then measure in alternating bases (Z, X, Z, X, …).
        """
        n = self.config.num_qubits
        qc = QuantumCircuit(n, n)

        for i in range(n):
            qc.h(i)

        for i in range(n):
            # Odd indices: extra H turns the measurement into an X-basis one.
            if i % 2 == 1:
                qc.h(i)
            qc.measure(i, i)

        return qc

    def measure(self) -> list[int]:
        """
        Run the circuit for a single shot and return one bit per qubit.
        """
        tqc = transpile(self._build_circuit(), self.backend)
        counts = self.backend.run(tqc, shots=1).result().get_counts()

        # Qiskit orders bits as [q_(n-1) ... q_0]; reverse so index 0 is first qubit.
        bitstring = next(iter(counts.keys()))[::-1]
        return [int(b) for b in bitstring]


class QuantumRandomSource(RandomSource):
    """
    RandomSource fed by simulated qubit measurements.

    Each refill runs `quantum_streams` circuits, XORs them and mixes the
    result with SHA-256. randbelow uses rejection sampling so indices stay
    uniform for any bound.
    """

    def __init__(
        self,
        config: QuantumSourceConfig | None = None,
        engine: QuantumEngine | None = None,
    ) -> None:
        self.config = config or DEFAULT_QUANTUM_CONFIG
        self.engine = engine or QuantumEngine(self.config)
        self._pool: list[int] = []
        self._batches = 0

    def _refill(self) -> None:
        streams = [self.engine.measure() for _ in range(max(1, self.config.quantum_streams))]
        mixed = amplify_entropy(
            combine_streams(streams), self.config.entropy_rounds, counter=self._batches
        )
        self._batches += 1
        self._pool.extend(mixed)
        logger.debug("quantum pool refilled with {} bits (batch {})", len(mixed), self._batches)

    def getrandbits(self, k: int) -> int:
        while len(self._pool) < k:
            self._refill()
        bits, self._pool = self._pool[:k], self._pool[k:]
        return bits_to_int(bits)

    def randbelow(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"randbelow() needs a positive bound, got {n}")
        if n == 1:
            return 0

        k = (n - 1).bit_length()
        value = self.getrandbits(k)
        while value >= n:
            value = self.getrandbits(k)
        return value
