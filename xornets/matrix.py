"""A small dense matrix type and the logistic activation."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Callable, Iterable

_RAND_MAX = 2**31 - 1


def _draw(rng: random.Random) -> float:
    return rng.getrandbits(32) / _RAND_MAX - 0.5


def sigmoid(x: float) -> float:
    """The logistic function, safe against overflow for large |x|."""
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    e = math.exp(x)
    return e / (1.0 + e)


def sigmoid_derivative(x: float) -> float:
    """Derivative of the logistic function at x."""
    s = sigmoid(x)
    return s * (1.0 - s)


@dataclass
class Matrix:
    """A rectangular matrix stored as a list of rows."""

    data: list[list[float]]

    def __post_init__(self) -> None:
        self.data = [[float(v) for v in row] for row in self.data]
        if len({len(row) for row in self.data}) > 1:
            raise ValueError("all rows must have the same length")

    @property
    def rows(self) -> int:
        return len(self.data)

    @property
    def cols(self) -> int:
        return len(self.data[0]) if self.data else 0

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    @classmethod
    def random(cls, rows: int, cols: int, rng: random.Random | None = None) -> Matrix:
        """A matrix filled column by column with random values."""
        if rows < 0 or cols < 0:
            raise ValueError("dimensions must not be negative")
        rng = rng or random.Random()
        if cols == 0:
            return cls([[] for _ in range(rows)])
        columns = [[_draw(rng) for _ in range(rows)] for _ in range(cols)]
        return cls([list(row) for row in zip(*columns)])

    @classmethod
    def column(cls, values: Iterable[float]) -> Matrix:
        """A column vector holding the given values."""
        return cls([[v] for v in values])

    def matmul(self, other: Matrix) -> Matrix:
        """The matrix product self · other."""
        if self.cols != other.rows:
            raise ValueError(f"cannot multiply {self.shape} by {other.shape}")
        other_columns = list(zip(*other.data))
        return Matrix(
            [[sum(a * b for a, b in zip(row, col)) for col in other_columns] for row in self.data]
        )

    def add(self, other: Matrix) -> Matrix:
        """The element-wise sum of two matrices of equal shape."""
        if self.shape != other.shape:
            raise ValueError(f"cannot add {self.shape} and {other.shape}")
        return Matrix([[a + b for a, b in zip(r1, r2)] for r1, r2 in zip(self.data, other.data)])

    def map(self, func: Callable[[float], float]) -> Matrix:
        """A new matrix with func applied to every element."""
        return Matrix([[func(v) for v in row] for row in self.data])

    def format(self) -> str:
        """Rows of six-decimal values, each followed by a space, then a blank line."""
        body = "".join("".join(f"{v:f} " for v in row) + "\n" for row in self.data)
        return body + "\n"

    __matmul__ = matmul
    __add__ = add