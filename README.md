# xornets

Three small neural networks in plain Python that try to learn the XOR
function:

| Input  | XOR |
|--------|-----|
| (0, 0) | 0   |
| (0, 1) | 1   |
| (1, 0) | 1   |
| (1, 1) | 0   |

The package needs no third-party libraries.

## Modules

- **`xornets.perceptron`**: `Perceptron`, one neuron with a bias weight and a
  step activation. `output(i1, i2)` is true when the weighted sum is strictly
  positive. `train(inputs, labels, epochs, learning_rate)` applies the
  perceptron rule and returns an `EpochWeights` record (epoch, bias, w1, w2)
  for each epoch. One neuron cannot separate XOR, so its final answers stay
  wrong for some inputs.
- **`xornets.matrix`**: `Matrix`, a dense matrix kept as a list of rows, with
  `random(rows, cols, rng)`, `column(values)`, `matmul` (also `a @ b`),
  `add` (also `a + b`), `map(func)` and `format()`. It also holds the
  `sigmoid` and `sigmoid_derivative` functions.
- **`xornets.sigmoid_net`**: `TinyNetwork`, a 2-2-1 network of sigmoid
  neurons held as a 3×3 weight table (the last column is the bias), with
  `create(rng)`, `forward(x1, x2)`, `fit(inputs, expected, epochs,
  learning_rate)` and `predict(inputs)`.
- **`xornets.ann`**: `ThreeLayerNetwork`, two sigmoid hidden layers and one
  sigmoid output built on `Matrix`, trained on the squared error. It has
  `create(inputs, hidden1, hidden2, rng)`, `forward(x)` (returns a
  `ForwardPass` with every intermediate vector), `predict(x)`,
  `train_step(x, y, learning_rate)` and `train(inputs, outputs, epochs,
  learning_rate)`. In each step only as many entries of the second hidden
  layer's bias are adjusted as the output layer has rows.

The training methods raise `ValueError` when inputs and targets differ in
length or when `epochs` is negative. `Matrix` raises `ValueError` for ragged
rows and for mismatched shapes.

## Installation

```
pip install .
```

## Commands

```
xornets-perceptron [--epochs N] [--learning-rate R]
xornets-sigmoid    [--epochs N] [--learning-rate R] [--seed S]
xornets-ann        [--epochs N] [--learning-rate R] [--seed S]
```

- `xornets-perceptron` trains the neuron for 100 epochs at rate 0.1 by
  default. It prints the weights after each epoch and then the output for
  each XOR input.
- `xornets-sigmoid` fits `TinyNetwork` for 1,000,000 epochs at rate 0.01 by
  default and prints the predictions to four decimals.
- `xornets-ann` trains `ThreeLayerNetwork` (2 inputs, 3 and 2 hidden
  neurons) for 1,000,000 epochs at rate 1 by default. It trains on the inputs
  0.01 and 1.01 in place of 0 and 1, then prints the predictions.

With the default epoch counts the two multi-layer commands run for a long
time in pure Python. Use `--epochs` to shorten them and `--seed` to make a
run repeatable.

## Library use

```python
import random

from xornets.sigmoid_net import TinyNetwork
from xornets.ann import ThreeLayerNetwork
from xornets.matrix import Matrix

inputs = [(0, 0), (0, 1), (1, 0), (1, 1)]
expected = [0, 1, 1, 0]

net = TinyNetwork.create(random.Random(1))
net.fit(inputs, expected, epochs=20_000, learning_rate=0.5)
print(net.predict(inputs))

deep = ThreeLayerNetwork.create(2, 3, 2, random.Random(1))
deep.train([(0.01, 0.01), (0.01, 1.01), (1.01, 0.01), (1.01, 1.01)],
           expected, epochs=5_000, learning_rate=1)
print(deep.predict(Matrix.column([1.01, 0.01])))
```

All random starting weights come from the `random.Random` instance you pass
in, so you can repeat a run exactly.

## What it does not do

Trained networks exist only in memory. The package cannot save or load
weights, and it does not train on data sets other than the ones you pass in
code. The commands train on XOR only.