import math

import pytest

from qcircuit.gatemath import hadamard_matrix, matrix_inv, matrix_pow, u_matrix

IDENTITY = (1 + 0j, 0j, 0j, 1 + 0j)


def _dagger(m):
    return (m[0].conjugate(), m[2].conjugate(), m[1].conjugate(), m[3].conjugate())


def _approx(m):
    return pytest.approx(list(m), abs=1e-9)


def test_hadamard_entries():
    h = hadamard_matrix()
    r = math.sqrt(0.5)
    assert h == (complex(r), complex(r), complex(r), complex(-r))


def test_hadamard_is_involution():
    h = hadamard_matrix()
    assert list(matrix_inv(h)) == _approx(h)


def test_u_zero_angles_is_identity():
    assert list(u_matrix(0.0, 0.0, 0.0)) == _approx(IDENTITY)


@pytest.mark.parametrize("angles", [(0.3, 1.1, -0.7), (2.0, 0.0, 1.0), (math.pi, 0.5, 0.25)])
def test_u_is_unitary(angles):
    m = u_matrix(*angles)
    assert list(matrix_inv(m)) == _approx(_dagger(m))


def test_pow_one_returns_same_matrix():
    m = u_matrix(0.4, 0.2, 0.9)
    assert list(matrix_pow(m, 1.0)) == _approx(m)


def test_pow_two_matches_product():
    m = hadamard_matrix()
    assert list(matrix_pow(m, 2.0)) == _approx(IDENTITY)


def test_square_root_squares_back():
    h = hadamard_matrix()
    root = matrix_pow(h, 0.5)
    assert list(matrix_pow(root, 2.0)) == _approx(h)


def test_pow_diagonal_branch():
    m = (4 + 0j, 0j, 0j, 9 + 0j)
    result = matrix_pow(m, 0.5)
    assert result[1] == 0 and result[2] == 0
    assert [result[0], result[3]] == pytest.approx([2, 3], abs=1e-9)


def test_pow_non_diagonalisable_raises():
    with pytest.raises(ValueError):
        matrix_pow((1 + 0j, 1 + 0j, 0j, 1 + 0j), 0.5)


def test_inverse_times_matrix_is_identity():
    m = u_matrix(1.2, -0.3, 0.8)
    assert list(matrix_inv(matrix_inv(m))) == _approx(m)
    assert list(matrix_inv(m)) == _approx(_dagger(m))


def test_inverse_of_singular_raises():
    with pytest.raises(ValueError):
        matrix_inv((1 + 0j, 2 + 0j, 2 + 0j, 4 + 0j))