"""Single-qubit gate matrices and the operations applied to them.

A matrix is a tuple of four complex numbers in row-major order:
``(m00, m01, m10, m11)``.
"""

from __future__ import annotations

import cmath
import math

Matrix = tuple[complex, complex, complex, complex]

_DIAGONAL_EPS = 1e-12


def hadamard_matrix() -> Matrix:
    """Return the Hadamard gate matrix."""
    r = math.sqrt(0.5)
    return (complex(r), complex(r), complex(r), complex(-r))


def u_matrix(theta: float, phi: float, lam: float) -> Matrix:
    """Return the generic single-qubit rotation U(theta, phi, lambda)."""
    return (
        complex(0.5 * (1 + math.cos(theta)), 0.5 * math.sin(theta)),
        complex(
            0.5 * (math.sin(lam) - math.sin(lam + theta)),
            -0.5 * (math.cos(lam) - math.cos(lam + theta)),
        ),
        complex(
            -0.5 * (math.sin(phi) - math.sin(phi + theta)),
            0.5 * (math.cos(phi) - math.cos(phi + theta)),
        ),
        complex(
            0.5 * (math.cos(phi + lam) + math.cos(phi + lam + theta)),
            0.5 * (math.sin(phi + lam) + math.sin(phi + lam + theta)),
        ),
    )


def matrix_pow(matrix: Matrix, exponent: float) -> Matrix:
    """Raise a 2x2 matrix to a real power by eigen-decomposition.

    Raises ValueError if the matrix cannot be diagonalised.
    """
    a, b, c, d = (complex(v) for v in matrix)
    if abs(b) < _DIAGONAL_EPS and abs(c) < _DIAGONAL_EPS:
        return (a ** exponent, 0j, 0j, d ** exponent)

    trace = a + d
    det = a * d - b * c
    disc = cmath.sqrt(trace * trace - 4 * det)
    lam1 = (trace + disc) / 2
    lam2 = (trace - disc) / 2

    if b != 0:
        p0, p2 = 1 + 0j, (lam1 - a) / b
        p1, p3 = 1 + 0j, (lam2 - a) / b
    else:
        p0, p2 = -(lam1 - d) / c, 1 + 0j
        p1, p3 = -(lam2 - d) / c, 1 + 0j

    det_p = p0 * p3 - p1 * p2
    if det_p == 0:
        raise ValueError("matrix is not diagonalisable")
    ip0 = p3 / det_p
    ip1 = -p1 / det_p
    ip2 = -p2 / det_p
    ip3 = p0 / det_p

    d1 = lam1 ** exponent
    d2 = lam2 ** exponent

    b0 = d1 * ip0
    b1 = d1 * ip1
    b2 = d2 * ip2
    b3 = d2 * ip3

    return (
        p0 * b0 + p1 * b2,
        p0 * b1 + p1 * b3,
        p2 * b0 + p3 * b2,
        p2 * b1 + p3 * b3,
    )


def matrix_inv(matrix: Matrix) -> Matrix:
    """Return the inverse of a 2x2 matrix; ValueError if it is singular."""
    a, b, c, d = (complex(v) for v in matrix)
    det = a * d - b * c
    if det == 0:
        raise ValueError("matrix is singular")
    return (d / det, -b / det, -c / det, a / det)