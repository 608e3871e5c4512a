# tinynet

A small, fully connected feed-forward neural network trained by gradient
descent with backpropagation. Vectors and matrices are numpy arrays of
`float64`.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Building blocks

- `tinynet.activations`: `ActivationFn`, the abstract interface for an
  element-wise activation function (`apply(x)` and
  `derivative(x, activation)`), and `Sigmoid`, the logistic function. Both
  methods take a scalar or an array; a scalar gives back a `float`.
- `tinynet.losses`: `LossFn`, the abstract interface for a loss function
  (`apply(output, expected_output)` and
  `partial_gradient(output, expected_output)`), and `MSE`, the mean squared
  error. When the output and the expected output differ in length,
  `OutputSizeMismatchError` (a `LossFnError`) is raised; it carries
  `given_output_size` and `expected_output_size`.
- `tinynet.dataset`: `Sample`, a frozen dataclass pairing `inputs` with the
  `expected_outputs` the network should produce. Both are stored as flat,
  read-only arrays.
- `tinynet.layer`: `Layer`, one fully connected layer. `weights` has shape
  `(output_size, input_size)`; `biases`, `weight_gradient`,
  `bias_gradient` and `activation_fn` are attributes, and `input_size`,
  `output_size` and `previous_input` (the inputs of the last forward pass,
  read-only) are properties. Build one with `Layer.zeros(...)`,
  `Layer.random(...)` or `Layer(weights, biases, activation_fn)`.
  `forward` computes activations and remembers the pass;
  `backpropagation_step` accumulates gradients and returns the gradient for
  the layer's inputs; `apply_gradient(scale)` adds the scaled gradients and
  resets them to zero. Errors derive from `LayerError`:
  `InputSizeMismatchError`, `ZeroInputSizeError` and `ZeroOutputSizeError`.
  Weights that are not a matrix with one row per bias raise `ValueError`.
- `tinynet.network`: `Network`, a list of layers (`layers`). Layer sizes
  include the input size, so `[2, 50, 1]` gives two layers. Build one with
  `Network.zeros(layer_sizes, activation_fn)` or
  `Network.random(layer_sizes, activation_fn, distribution)`. Errors derive
  from `NetworkError`: `TooFewLayersError` (fewer than two sizes) and
  `ZeroLayerSizeError` (a size that is not positive). Layer and loss errors
  raised while running pass through unchanged.

A `distribution` is any callable that takes a count and returns that many
values; a `ValueError` is raised if it returns a different number.

## Example

This example learns a point classifier on the plane:

```python
import numpy as np

from tinynet.activations import Sigmoid
from tinynet.dataset import Sample
from tinynet.losses import MSE
from tinynet.network import Network

rng = np.random.default_rng(0)

# Layer sizes: 2 inputs, 50 hidden neurons, 1 output.
network = Network.random(
    [2, 50, 1],
    Sigmoid(),
    lambda size: rng.uniform(-0.5, 0.5, size),
)

dataset = [
    Sample(np.array([0.5, 0.5]), np.array([1.0])),
    Sample(np.array([-0.5, -0.5]), np.array([0.0])),
]

for _ in range(1000):
    network.learn(dataset, MSE(), 0.01)

print(network.forward(np.array([0.5, 0.5])))
```

`Network.backpropagate(dataset, loss)` accumulates the gradients of every
sample in the layers. `Network.learn(dataset, loss, rate)` does that and
then applies the gradients scaled by `-rate / len(dataset)`. An empty
dataset leaves the network unchanged.

## What it does not do

tinynet is a library only. It has no command-line tool, no window or
plotting of what a network has learned, and no way to save or load a
trained network.