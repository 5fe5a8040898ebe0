"""Command that runs the example circuit against the logging simulator."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from qcircuit.qasm import Qasm, qslice
from qcircuit.simulator import Simulator


class ExampleCircuit(Qasm):
    """A short circuit exercising controls, powers and inverses."""

    def circuit(self) -> None:
        q1 = self.qalloc(8)
        q2 = self.qalloc(8)
        (self.negctrl(2) * self.ctrl(2) * self.h())(q1[0], q1[qslice(1, 2)], q1[[3, 4]])
        self.u(0, 0, 1.0)(q1[0])
        self.u(0, 0, 0.5)(q1[0])
        (self.ctrl(2) * self.pow(0.5) * self.u(0, 0, 1.0))(q1[0], q1[1], q1[2])
        (self.inv() * self.h())(q1[0])
        (self.ctrl(2) * self.h())(q2[0], q2[1], q2[2])


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="qcircuit", description="Run the example circuit and log its gates to stderr."
    )
    parser.parse_args(argv)
    circuit = ExampleCircuit()
    circuit.register_simulator(Simulator())
    circuit.circuit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())