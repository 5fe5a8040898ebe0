"""A small embedded language for describing quantum circuits."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Protocol, Sequence

from qcircuit.gatemath import Matrix, hadamard_matrix, matrix_inv, matrix_pow, u_matrix


class SimulatorLike(Protocol):
    def alloc_qubit(self, n: int) -> None: ...

    def gate_matrix(
        self, matrix: Matrix, target: int, pos_ctrls: Sequence[int], neg_ctrls: Sequence[int]
    ) -> None: ...


@dataclass(frozen=True)
class QubitSlice:
    """An inclusive range of register indices."""

    first: int
    last: int


def qslice(first: int, last: int) -> QubitSlice:
    """Select register indices ``first`` to ``last`` inclusive."""
    return QubitSlice(first, last)


class QubitSet:
    """An explicit list of register indices."""

    def __init__(self, *args: int) -> None:
        self.indices = tuple(args)

    def __iter__(self) -> Iterator[int]:
        return iter(self.indices)

    def __repr__(self) -> str:
        return f"QubitSet{self.indices!r}"


@dataclass(frozen=True)
class Indices:
    """Several global qubit ids used as consecutive gate arguments."""

    values: tuple[int, ...]

    def __iter__(self) -> Iterator[int]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)


class TokenKind(enum.Enum):
    POS_CTRL = enum.auto()
    NEG_CTRL = enum.auto()
    MATRIX = enum.auto()
    POW = enum.auto()
    INV = enum.auto()


_ZERO_MATRIX: Matrix = (0j, 0j, 0j, 0j)
_ARG_KINDS = frozenset({TokenKind.POS_CTRL, TokenKind.NEG_CTRL, TokenKind.MATRIX})


@dataclass(frozen=True)
class Token:
    """One element of a gate expression."""

    kind: TokenKind
    matrix: Matrix = _ZERO_MATRIX
    value: float = 1.0


class Qubits:
    """A register of consecutively numbered qubits."""

    def __init__(self, ctx: Qasm, n: int) -> None:
        if n <= 0:
            raise ValueError("a register needs at least one qubit")
        simulator = ctx._require_simulator()
        self._base = ctx._next_id
        self._size = n
        ctx._next_id += n
        simulator.alloc_qubit(n)

    @property
    def base(self) -> int:
        return self._base

    def __len__(self) -> int:
        return self._size

    def _id(self, i: int) -> int:
        if isinstance(i, bool) or not isinstance(i, int):
            raise TypeError(f"qubit index must be an int, not {type(i).__name__}")
        if not 0 <= i < self._size:
            raise IndexError(f"qubit index {i} out of range for register of {self._size}")
        return self._base + i

    def __getitem__(self, key: int | QubitSlice | QubitSet | Iterable[int]) -> int | Indices:
        if isinstance(key, int) and not isinstance(key, bool):
            return self._id(key)
        if isinstance(key, QubitSlice):
            if not 0 <= key.first <= key.last < self._size:
                raise IndexError(f"slice {key.first}..{key.last} out of range for register of {self._size}")
            return Indices(tuple(range(self._base + key.first, self._base + key.last + 1)))
        if isinstance(key, (QubitSet, list, tuple)):
            return Indices(tuple(self._id(i) for i in key))
        raise TypeError(f"cannot index qubits with {type(key).__name__}")


class Builder:
    """A composable gate expression, applied by calling it with qubits."""

    def __init__(self, ctx: Qasm, tokens: Iterable[Token] = ()) -> None:
        self._ctx = ctx
        self.tokens = tuple(tokens)

    def __mul__(self, other: Builder) -> Builder:
        if not isinstance(other, Builder):
            return NotImplemented
        return Builder(self._ctx, self.tokens + other.tokens)

    def __call__(self, *args: int | Indices) -> None:
        if not args:
            raise TypeError("at least one qubit is required")
        qubits = list(_flatten(args))
        expected = sum(1 for t in self.tokens if t.kind in _ARG_KINDS)
        if len(qubits) != expected:
            raise ValueError(f"gate expression takes {expected} qubits, got {len(qubits)}")

        remaining = iter(qubits)
        pos_ctrls: list[int] = []
        neg_ctrls: list[int] = []
        exponent = 1.0
        invert = False
        for token in self.tokens:
            if token.kind is TokenKind.POS_CTRL:
                pos_ctrls.append(next(remaining))
            elif token.kind is TokenKind.NEG_CTRL:
                neg_ctrls.append(next(remaining))
            elif token.kind is TokenKind.POW:
                exponent *= token.value
            elif token.kind is TokenKind.INV:
                invert = not invert
            else:
                matrix = token.matrix
                if exponent != 1.0:
                    matrix = matrix_pow(matrix, exponent)
                if invert:
                    matrix = matrix_inv(matrix)
                self._ctx._dispatch(next(remaining), matrix, pos_ctrls, neg_ctrls)
                pos_ctrls = []
                neg_ctrls = []
                exponent = 1.0
                invert = False


def _flatten(args: Iterable[int | Indices]) -> Iterator[int]:
    for arg in args:
        if isinstance(arg, Indices):
            yield from arg.values
        elif isinstance(arg, int) and not isinstance(arg, bool):
            yield arg
        else:
            raise TypeError(f"gate argument must be a qubit id or Indices, not {type(arg).__name__}")


class Qasm:
    """Base class for circuits; subclasses describe gates in ``circuit``."""

    def __init__(self) -> None:
        self._simulator: SimulatorLike | None = None
        self._next_id = 0

    def register_simulator(self, simulator: SimulatorLike) -> None:
        self._simulator = simulator

    def _require_simulator(self) -> SimulatorLike:
        if self._simulator is None:
            raise RuntimeError("simulator not registered")
        return self._simulator

    def qalloc(self, n: int) -> Qubits:
        return Qubits(self, n)

    def h(self) -> Builder:
        return Builder(self, [Token(TokenKind.MATRIX, matrix=hadamard_matrix())])

    def u(self, theta: float, phi: float, lam: float) -> Builder:
        return Builder(self, [Token(TokenKind.MATRIX, matrix=u_matrix(theta, phi, lam))])

    def pow(self, exponent: float) -> Builder:
        return Builder(self, [Token(TokenKind.POW, value=exponent)])

    def inv(self) -> Builder:
        return Builder(self, [Token(TokenKind.INV)])

    def sqrt(self) -> Builder:
        return self.pow(0.5) * self.inv()

    def ctrl(self, n: int = 1) -> Builder:
        return Builder(self, [Token(TokenKind.POS_CTRL)] * max(n, 0))

    def negctrl(self, n: int = 1) -> Builder:
        return Builder(self, [Token(TokenKind.NEG_CTRL)] * max(n, 0))

    def circuit(self) -> None:
        """Describe the circuit; subclasses must override this."""
        raise RuntimeError(f"{type(self).__name__} defines no circuit")

    def _dispatch(
        self, target: int, matrix: Matrix, pos_ctrls: Sequence[int], neg_ctrls: Sequence[int]
    ) -> None:
        self._require_simulator().gate_matrix(matrix, target, list(pos_ctrls), list(neg_ctrls))