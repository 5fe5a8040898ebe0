# qcircuit

`qcircuit` lets you describe quantum circuits in Python as chains of gate
expressions. To write a circuit, subclass `qcircuit.qasm.Qasm` and override
`circuit()`. Each gate expression is turned into a 2x2 matrix with its
positive and negative controls. That matrix is then handed to a registered
simulator.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Writing a circuit

```python
import sys

from qcircuit.qasm import Qasm, QubitSet, qslice
from qcircuit.simulator import Simulator


class Example(Qasm):
    def circuit(self):
        q = self.qalloc(5)
        self.h()(q[0])
        (self.ctrl(1) * self.h())(q[0], q[1])
        (self.negctrl(2) * self.ctrl(1) * self.h())(q[qslice(1, 2)], q[QubitSet(3)], q[4])


example = Example()
example.register_simulator(Simulator(sys.stderr))
example.circuit()
```

### Building blocks (methods of `Qasm`)

- `qalloc(n)` reserves `n` qubits and returns a `Qubits` register. Qubit ids
  are numbered consecutively across every register of a circuit, so the
  second register starts where the first one ends. A register needs `n > 0`,
  and a simulator must already be registered. Otherwise `ValueError` or
  `RuntimeError` is raised.
- You can index a register in several ways:
  - An integer gives one qubit id.
  - `qslice(first, last)` gives an inclusive range as an `Indices` value.
  - `QubitSet(...)`, a list or a tuple gives those qubits in the order given.

  An index outside the register raises `IndexError`.
- `h()` and `u(theta, phi, lam)` produce gate matrices.
- `ctrl(n=1)` and `negctrl(n=1)` add `n` positive or negative controls.
- `pow(exponent)` and `inv()` modify the next matrix in the chain. The
  exponents of several `pow` terms multiply together, and each `inv` toggles
  inversion. `sqrt()` is `pow(0.5) * inv()`.
- Combine expressions with `*` to get a `Builder`. Call the builder with the
  qubits it acts on, in the order of its terms: each control, then the target
  of each matrix. `Indices` arguments are expanded in place. If the number
  of qubits does not match the expression, `ValueError` is raised.

```python
(self.negctrl(2) * self.ctrl(2) * self.h())(q[0], q[qslice(1, 2)], q[[3, 4]])
(self.ctrl(2) * self.pow(0.5) * self.u(0, 0, 1.0))(q[0], q[1], q[2])
(self.inv() * self.h())(q[0])
```

The base `Qasm.circuit()` raises `RuntimeError`. Subclasses provide the
real circuit.

### Simulator

`qcircuit.simulator.Simulator(stream=None)` writes a line for every qubit
allocation and a line for every gate to `stream`. It writes to standard
error when no stream is given. Each gate line holds the matrix, the target,
the positive controls and the negative controls:

```
[qubit declare] 2
gate matrix={{0.707107, 0.000000}, {0.707107, 0.000000}, {0.707107, 0.000000}, {-0.707107, 0.000000}} tgt=1 pc={0} nc={}
```

You can register any object with `alloc_qubit(n)` and
`gate_matrix(matrix, target, pos_ctrls, neg_ctrls)` methods instead.

### Matrix helpers

`qcircuit.gatemath` provides these functions:

- `hadamard_matrix()`
- `u_matrix(theta, phi, lam)`
- `matrix_pow(matrix, exponent)`, which works by eigen-decomposition and
  raises `ValueError` for a matrix it cannot diagonalise.
- `matrix_inv(matrix)`, which raises `ValueError` for a singular matrix.

They work on 2x2 matrices stored as flat 4-tuples of complex numbers in
row-major order.

## Demo

Run the bundled `ExampleCircuit` from `qcircuit.main`. It prints its gate
log to standard error:

```
qcircuit-demo
```

## What this package does not do

The bundled `Simulator` only logs what it receives. It keeps no quantum
state, computes no amplitudes, and performs no measurement. There is no
parser for QASM text files. Circuits are written as Python subclasses of
`Qasm`.