from qcircuit.gatemath import hadamard_matrix, matrix_inv
from qcircuit.main import ExampleCircuit, main


class Recorder:
    def __init__(self):
        self.allocs = []
        self.gates = []

    def alloc_qubit(self, n):
        self.allocs.append(n)

    def gate_matrix(self, matrix, target, pos_ctrls, neg_ctrls):
        self.gates.append((matrix, target, list(pos_ctrls), list(neg_ctrls)))


def _run():
    rec = Recorder()
    circuit = ExampleCircuit()
    circuit.register_simulator(rec)
    circuit.circuit()
    return rec


def test_example_allocations():
    assert _run().allocs == [8, 8]


def test_example_gate_sequence():
    gates = _run().gates
    assert len(gates) == 6
    assert gates[0][1:] == (4, [2, 3], [0, 1])
    assert gates[3][1:] == (2, [0, 1], [])
    assert gates[4] == (matrix_inv(hadamard_matrix()), 0, [], [])
    assert gates[5] == (hadamard_matrix(), 10, [8, 9], [])


def test_main_logs_to_stderr(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().err.splitlines()
    assert lines[:2] == ["[qubit declare] 8", "[qubit declare] 8"]
    assert sum(line.startswith("gate matrix=") for line in lines) == 6
    assert lines[-1].endswith("tgt=10 pc={8, 9} nc={}")