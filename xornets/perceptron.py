"""A single threshold neuron trained with the perceptron learning rule."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Sequence

LEARNING_RATE = 0.1
EPOCHS = 100

XOR_INPUTS: tuple[tuple[int, int], ...] = ((0, 0), (0, 1), (1, 0), (1, 1))
XOR_LABELS: tuple[int, ...] = (0, 1, 1, 0)


@dataclass(frozen=True)
class EpochWeights:
    """The neuron's weights as they stood at the end of one epoch."""

    epoch: int
    bias: float
    w1: float
    w2: float


@dataclass
class Perceptron:
    """A two-input neuron with a bias weight and a step activation."""

    bias: float = 0.0
    w1: float = 0.0
    w2: float = 0.0

    def output(self, i1: float, i2: float) -> bool:
        """Fire when the weighted sum of the inputs is strictly positive."""
        return self.bias + self.w1 * i1 + self.w2 * i2 > 0

    def train(
        self,
        inputs: Sequence[Sequence[float]],
        labels: Sequence[int],
        epochs: int = EPOCHS,
        learning_rate: float = LEARNING_RATE,
    ) -> list[EpochWeights]:
        """Apply the perceptron rule and return the weights after each epoch."""
        if len(inputs) != len(labels):
            raise ValueError("inputs and labels must have the same length")
        if epochs < 0:
            raise ValueError("epochs must not be negative")
        history: list[EpochWeights] = []
        for epoch in range(1, epochs + 1):
            for (i1, i2), label in zip(inputs, labels):
                error = label - int(self.output(i1, i2))
                self.bias += learning_rate * error
                self.w1 += learning_rate * error * i1
                self.w2 += learning_rate * error * i2
            history.append(EpochWeights(epoch, self.bias, self.w1, self.w2))
        return history


def main(argv: Sequence[str] | None = None) -> int:
    """Train a single neuron on XOR and print its progress and answers."""
    parser = argparse.ArgumentParser(description="Train a single neuron on XOR.")
    parser.add_argument("--epochs", type=int, default=EPOCHS)
    parser.add_argument("--learning-rate", type=float, default=LEARNING_RATE)
    args = parser.parse_args(argv)

    neuron = Perceptron()
    for snapshot in neuron.train(XOR_INPUTS, XOR_LABELS, args.epochs, args.learning_rate):
        print(f"Weights after epoch {snapshot.epoch}")
        print(f"Biased weight: {snapshot.bias:f}")
        print(f"Weight 1: {snapshot.w1:f}")
        print(f"Weight 2: {snapshot.w2:f}")
        print("----------------------")

    for i1, i2 in XOR_INPUTS:
        print(f"Input: ({i1}, {i2}) -> Output: {int(neuron.output(i1, i2))}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())