"""A fixed two-hidden-neuron sigmoid network trained on XOR."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass
from typing import Sequence

from .matrix import sigmoid, sigmoid_derivative

LEARNING_RATE = 0.01
EPOCHS = 1_000_000

XOR_INPUTS: tuple[tuple[int, int], ...] = ((0, 0), (0, 1), (1, 0), (1, 1))
XOR_OUTPUTS: tuple[int, ...] = (0, 1, 1, 0)

_RAND_MAX = 2**31 - 1


def _draw(rng: random.Random) -> float:
    return rng.getrandbits(32) / _RAND_MAX * 0.1 - 0.05


@dataclass
class TinyNetwork:
    """Rows 0 and 1 are the hidden neurons, row 2 the output; the last column is the bias."""

    weights: list[list[float]]

    @classmethod
    def create(cls, rng: random.Random | None = None) -> TinyNetwork:
        """A network with small random weights."""
        rng = rng or random.Random()
        return cls([[_draw(rng) for _ in range(3)] for _ in range(3)])

    def forward(self, x1: float, x2: float) -> tuple[tuple[float, float, float], tuple[float, float, float]]:
        """The weighted sums and activations of the three neurons."""
        (a, b, c), (d, e, f), (g, h, k) = self.weights
        s0 = a * x1 + b * x2 + c
        s1 = d * x1 + e * x2 + f
        o0, o1 = sigmoid(s0), sigmoid(s1)
        s2 = g * o0 + h * o1 + k
        return (s0, s1, s2), (o0, o1, sigmoid(s2))

    def fit(
        self,
        inputs: Sequence[Sequence[float]],
        expected: Sequence[float],
        epochs: int = EPOCHS,
        learning_rate: float = LEARNING_RATE,
    ) -> None:
        """Train by backpropagation, one sample at a time."""
        if len(inputs) != len(expected):
            raise ValueError("inputs and expected outputs must have the same length")
        if epochs < 0:
            raise ValueError("epochs must not be negative")
        for _ in range(epochs):
            for (x1, x2), target in zip(inputs, expected):
                (s0, s1, s2), (o0, o1, o2) = self.forward(x1, x2)
                delta = (target - o2) * sigmoid_derivative(s2)
                out = self.weights[2]
                hidden_deltas = (
                    delta * out[0] * sigmoid_derivative(s0),
                    delta * out[1] * sigmoid_derivative(s1),
                )
                for row, hd in zip(self.weights[:2], hidden_deltas):
                    row[0] += learning_rate * hd * x1
                    row[1] += learning_rate * hd * x2
                    row[2] += learning_rate * hd
                out[0] += learning_rate * delta * o0
                out[1] += learning_rate * delta * o1
                out[2] += learning_rate * delta

    def predict(self, inputs: Sequence[Sequence[float]]) -> list[float]:
        """The network's output for each input pair."""
        return [self.forward(x1, x2)[1][2] for x1, x2 in inputs]


def main(argv: Sequence[str] | None = None) -> int:
    """Train the tiny network on XOR and print its predictions."""
    parser = argparse.ArgumentParser(description="Train a tiny sigmoid network on XOR.")
    parser.add_argument("--epochs", type=int, default=EPOCHS)
    parser.add_argument("--learning-rate", type=float, default=LEARNING_RATE)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    net = TinyNetwork.create(random.Random(args.seed))
    net.fit(XOR_INPUTS, XOR_OUTPUTS, args.epochs, args.learning_rate)
    for (x1, x2), expected, predicted in zip(XOR_INPUTS, XOR_OUTPUTS, net.predict(XOR_INPUTS)):
        print(f"Input: ({x1}, {x2}); Expected: {expected}; Predicted: {predicted:.4f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())