"""A network with two hidden layers trained by backpropagation on XOR."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass
from typing import Sequence

from .matrix import Matrix, sigmoid, sigmoid_derivative

EPOCHS = 1_000_000
LEARNING_RATE = 1.0

XOR_INPUTS: tuple[tuple[float, float], ...] = (
    (0.01, 0.01),
    (0.01, 1.01),
    (1.01, 0.01),
    (1.01, 1.01),
)
XOR_OUTPUTS: tuple[int, ...] = (0, 1, 1, 0)


def _as_column(x: Matrix | Sequence[float]) -> Matrix:
    return x if isinstance(x, Matrix) else Matrix.column(x)


def _values(m: Matrix) -> list[float]:
    return [row[0] for row in m.data]


@dataclass(frozen=True)
class ForwardPass:
    """Every intermediate vector of one forward pass."""

    x: Matrix
    z1: Matrix
    a1: Matrix
    z2: Matrix
    a2: Matrix
    z3: Matrix
    a3: Matrix

    @property
    def output(self) -> float:
        return self.a3.data[0][0]


@dataclass
class ThreeLayerNetwork:
    """Two sigmoid hidden layers and a single sigmoid output neuron."""

    w1: Matrix
    b1: Matrix
    w2: Matrix
    b2: Matrix
    w3: Matrix
    b3: Matrix

    @classmethod
    def create(
        cls,
        inputs: int = 2,
        hidden1: int = 3,
        hidden2: int = 2,
        rng: random.Random | None = None,
    ) -> ThreeLayerNetwork:
        """A network with randomly initialised weights and biases."""
        rng = rng or random.Random()
        return cls(
            w1=Matrix.random(hidden1, inputs, rng),
            b1=Matrix.random(hidden1, 1, rng),
            w2=Matrix.random(hidden2, hidden1, rng),
            b2=Matrix.random(hidden2, 1, rng),
            w3=Matrix.random(1, hidden2, rng),
            b3=Matrix.random(1, 1, rng),
        )

    def forward(self, x: Matrix | Sequence[float]) -> ForwardPass:
        """Run the input through all three layers."""
        x = _as_column(x)
        z1 = self.w1 @ x + self.b1
        a1 = z1.map(sigmoid)
        z2 = self.w2 @ a1 + self.b2
        a2 = z2.map(sigmoid)
        z3 = self.w3 @ a2 + self.b3
        a3 = z3.map(sigmoid)
        return ForwardPass(x, z1, a1, z2, a2, z3, a3)

    def predict(self, x: Matrix | Sequence[float]) -> float:
        """The network's output for one input."""
        return self.forward(x).output

    def train_step(
        self,
        x: Matrix | Sequence[float],
        y: float,
        learning_rate: float = LEARNING_RATE,
    ) -> float:
        """One gradient step on the squared error for a sample; returns the prediction made."""
        p = self.forward(x)
        xs, a1, a2 = _values(p.x), _values(p.a1), _values(p.a2)
        ds1 = [sigmoid_derivative(z) for z in _values(p.z1)]
        ds2 = [sigmoid_derivative(z) for z in _values(p.z2)]
        ds3 = [sigmoid_derivative(z) for z in _values(p.z3)]
        d_err_3 = -2.0 * (y - p.output)

        self.w3.data = [
            [w - learning_rate * d_err_3 * d * a for w, a in zip(row, a2)]
            for row, d in zip(self.w3.data, ds3)
        ]
        for row, d in zip(self.b3.data, ds3):
            row[0] -= learning_rate * d_err_3 * d

        d_err_2 = [
            sum(d_err_3 * d * w_row[i] for d, w_row in zip(ds3, self.w3.data))
            for i in range(len(a2))
        ]

        self.w2.data = [
            [w - learning_rate * e * d * a for w, a in zip(row, a1)]
            for row, e, d in zip(self.w2.data, d_err_2, ds2)
        ]
        # Only as many bias entries as the output layer has rows are adjusted.
        for i in range(min(self.w3.rows, self.b2.rows)):
            self.b2.data[i][0] -= learning_rate * d_err_2[i] * ds2[i]

        d_err_1 = [
            sum(e * d * w_row[i] for e, d, w_row in zip(d_err_2, ds2, self.w2.data))
            for i in range(len(a1))
        ]

        self.w1.data = [
            [w - learning_rate * e * d * xv for w, xv in zip(row, xs)]
            for row, e, d in zip(self.w1.data, d_err_1, ds1)
        ]
        for row, e, d in zip(self.b1.data, d_err_1, ds1):
            row[0] -= learning_rate * e * d

        return p.output

    def train(
        self,
        inputs: Sequence[Sequence[float]],
        outputs: Sequence[float],
        epochs: int = EPOCHS,
        learning_rate: float = LEARNING_RATE,
    ) -> None:
        """Run train_step over every sample, epochs times."""
        if len(inputs) != len(outputs):
            raise ValueError("inputs and outputs must have the same length")
        if epochs < 0:
            raise ValueError("epochs must not be negative")
        for _ in range(epochs):
            for x, y in zip(inputs, outputs):
                self.train_step(x, y, learning_rate)


def main(argv: Sequence[str] | None = None) -> int:
    """Train the network on XOR and print its predictions."""
    parser = argparse.ArgumentParser(description="Train a two-hidden-layer network on XOR.")
    parser.add_argument("--epochs", type=int, default=EPOCHS)
    parser.add_argument("--learning-rate", type=float, default=LEARNING_RATE)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    net = ThreeLayerNetwork.create(rng=random.Random(args.seed))
    net.train(XOR_INPUTS, XOR_OUTPUTS, args.epochs, args.learning_rate)
    for (x1, x2), expected in zip(XOR_INPUTS, XOR_OUTPUTS):
        predicted = net.predict((x1, x2))
        print(f"Input: {{{x1:f}, {x2:f}}}; Expected: {expected}; Predicted: {predicted:f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())