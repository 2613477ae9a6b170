"""Small neural networks that learn XOR: a perceptron, a tiny sigmoid net and a two-hidden-layer matrix network."""

__version__ = "0.1.0"
__all__ = ["perceptron", "matrix", "ann", "sigmoid_net"]