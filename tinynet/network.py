"""A feed-forward network of fully connected layers."""

from __future__ import annotations

from typing import Callable, Iterable, Sequence

import numpy as np

from tinynet.activations import ActivationFn
from tinynet.dataset import Sample
from tinynet.layer import Distribution, Layer
from tinynet.losses import LossFn


class NetworkError(Exception):
    """Base class of network construction errors."""


class TooFewLayersError(NetworkError):
    """Fewer than two layer sizes were given."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(
            f"too few layers ({count}) were specified in the constructor, "
            "at least two (input layer and output layer) are needed"
        )


class ZeroLayerSizeError(NetworkError):
    """One of the layer sizes is zero."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"layer {index}'s size has to be more than 0")


def _check_layer_sizes(layer_sizes: Sequence[int]) -> None:
    if len(layer_sizes) < 2:
        raise TooFewLayersError(len(layer_sizes))
    for index, size in enumerate(layer_sizes):
        if size <= 0:
            raise ZeroLayerSizeError(index)


def _build_layers(layer_sizes: Sequence[int], make: Callable[[int, int], Layer]) -> list[Layer]:
    sizes = list(layer_sizes)
    _check_layer_sizes(sizes)
    return [make(inputs, outputs) for inputs, outputs in zip(sizes, sizes[1:])]


class Network:
    """Layers applied in order; ``layer_sizes`` include the input size.

    Errors from layers (wrong input size) and from the loss function
    (output size mismatch) propagate unchanged.
    """

    def __init__(self, layers: Iterable[Layer]) -> None:
        self.layers = list(layers)

    @classmethod
    def zeros(cls, layer_sizes: Sequence[int], activation_fn: ActivationFn) -> "Network":
        """Create a network whose weights and biases are all zero."""
        return cls(
            _build_layers(layer_sizes, lambda i, o: Layer.zeros(i, o, activation_fn))
        )

    @classmethod
    def random(
        cls,
        layer_sizes: Sequence[int],
        activation_fn: ActivationFn,
        distribution: Distribution,
    ) -> "Network":
        """Create a network with weights and biases drawn from ``distribution``."""
        return cls(
            _build_layers(
                layer_sizes, lambda i, o: Layer.random(i, o, activation_fn, distribution)
            )
        )

    def forward(self, inputs) -> np.ndarray:
        """Run ``inputs`` through every layer and return the output."""
        activations = np.asarray(inputs, dtype=np.float64)
        for layer in self.layers:
            activations = layer.forward(activations)
        return activations

    def backpropagate(self, dataset: Sequence[Sample], loss: LossFn) -> None:
        """Accumulate the loss gradients of every sample in the layers."""
        for sample in dataset:
            outputs = self.forward(sample.inputs)
            gradient = loss.partial_gradient(outputs, sample.expected_outputs)
            gradient = self.layers[-1].backpropagation_step(outputs, gradient)
            for layer, following in zip(reversed(self.layers[:-1]), reversed(self.layers[1:])):
                gradient = layer.backpropagation_step(following.previous_input, gradient)

    def learn(self, dataset: Sequence[Sample], loss: LossFn, rate: float) -> None:
        """Take one gradient descent step over ``dataset``; no-op if empty."""
        if not dataset:
            return
        self.backpropagate(dataset, loss)
        scale = -rate / len(dataset)
        for layer in self.layers:
            layer.apply_gradient(scale)