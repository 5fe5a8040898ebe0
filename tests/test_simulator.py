import io

from qcircuit.gatemath import hadamard_matrix
from qcircuit.simulator import Simulator


def test_alloc_qubit_line():
    out = io.StringIO()
    Simulator(out).alloc_qubit(8)
    assert out.getvalue() == "[qubit declare] 8\n"


def test_gate_matrix_format():
    out = io.StringIO()
    Simulator(out).gate_matrix((1 + 0j, 0j, 0j, 1 + 0j), 3, [1, 2], [])
    assert out.getvalue() == (
        "gate matrix={{1.000000, 0.000000}, {0.000000, 0.000000}, "
        "{0.000000, 0.000000}, {1.000000, 0.000000}} tgt=3 pc={1, 2} nc={}\n"
    )


def test_gate_matrix_negative_controls_listed():
    out = io.StringIO()
    Simulator(out).gate_matrix(hadamard_matrix(), 4, [], [0, 1])
    line = out.getvalue()
    assert line.endswith("tgt=4 pc={} nc={0, 1}\n")
    assert line.count("\n") == 1


def test_default_stream_is_stderr(capsys):
    Simulator().alloc_qubit(2)
    captured = capsys.readouterr()
    assert captured.err == "[qubit declare] 2\n"
    assert captured.out == ""