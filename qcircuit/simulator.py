"""A simulator back end that logs every operation it receives."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from qcircuit.gatemath import Matrix


class Simulator:
    """Writes a line per qubit allocation and per gate to a text stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    def alloc_qubit(self, n: int) -> None:
        """Record the allocation of ``n`` qubits."""
        self.stream.write(f"[qubit declare] {n}\n")

    def gate_matrix(
        self,
        matrix: Matrix,
        target: int,
        pos_ctrls: Iterable[int],
        neg_ctrls: Iterable[int],
    ) -> None:
        """Record a controlled single-qubit gate."""
        entries = ", ".join(f"{{{z.real:f}, {z.imag:f}}}" for z in map(complex, matrix))
        pcs = ", ".join(str(q) for q in pos_ctrls)
        ncs = ", ".join(str(q) for q in neg_ctrls)
        self.stream.write(f"gate matrix={{{entries}}} tgt={target} pc={{{pcs}}} nc={{{ncs}}}\n")