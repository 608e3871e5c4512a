"""A fully connected layer with its own gradient accumulators."""

from __future__ import annotations

from typing import Callable

import numpy as np

from tinynet.activations import ActivationFn

Distribution = Callable[[int], "np.typing.ArrayLike"]


class LayerError(Exception):
    """Base class of layer errors."""


class InputSizeMismatchError(LayerError):
    """The layer was given the wrong number of inputs."""

    def __init__(self, layer_input_size: int, given_input_size: int) -> None:
        self.layer_input_size = layer_input_size
        self.given_input_size = given_input_size
        super().__init__(
            f"this layer takes {layer_input_size} inputs, but {given_input_size} were given"
        )


class ZeroInputSizeError(LayerError):
    """A layer was requested with no inputs."""

    def __init__(self) -> None:
        super().__init__("input size has to be more than 0")


class ZeroOutputSizeError(LayerError):
    """A layer was requested with no outputs."""

    def __init__(self) -> None:
        super().__init__("output size has to be more than 0")


def _check_sizes(input_size: int, output_size: int) -> None:
    if input_size <= 0:
        raise ZeroInputSizeError()
    if output_size <= 0:
        raise ZeroOutputSizeError()


def _sample(distribution: Distribution, count: int) -> np.ndarray:
    values = np.asarray(distribution(count), dtype=np.float64).reshape(-1)
    if values.size != count:
        raise ValueError(f"distribution returned {values.size} values, {count} were requested")
    return values


class Layer:
    """Weights of shape (output_size, input_size), biases and an activation.

    The layer remembers the inputs and weighted sums of its last forward
    pass; backpropagation steps use them and accumulate gradients until
    ``apply_gradient`` is called.
    """

    def __init__(self, weights: np.ndarray, biases: np.ndarray, activation_fn: ActivationFn) -> None:
        self.weights = np.array(weights, dtype=np.float64)
        self.biases = np.array(biases, dtype=np.float64).reshape(-1)
        if self.weights.ndim != 2 or self.weights.shape[0] != self.biases.size:
            raise ValueError("weights must be a matrix with one row per bias")
        output_size, input_size = self.weights.shape
        _check_sizes(input_size, output_size)
        self.activation_fn = activation_fn
        self.weight_gradient = np.zeros_like(self.weights)
        self.bias_gradient = np.zeros_like(self.biases)
        self._previous_inputs = np.zeros(input_size)
        self._previous_weighted_sums = np.zeros(output_size)

    @classmethod
    def zeros(cls, input_size: int, output_size: int, activation_fn: ActivationFn) -> "Layer":
        """Create a layer whose weights and biases are all zero."""
        _check_sizes(input_size, output_size)
        return cls(np.zeros((output_size, input_size)), np.zeros(output_size), activation_fn)

    @classmethod
    def random(
        cls,
        input_size: int,
        output_size: int,
        activation_fn: ActivationFn,
        distribution: Distribution,
    ) -> "Layer":
        """Create a layer with weights and biases drawn from ``distribution``.

        ``distribution`` is called with a count and returns that many values.
        """
        _check_sizes(input_size, output_size)
        weights = _sample(distribution, output_size * input_size).reshape(output_size, input_size)
        biases = _sample(distribution, output_size)
        return cls(weights, biases, activation_fn)

    @property
    def input_size(self) -> int:
        return self.weights.shape[1]

    @property
    def output_size(self) -> int:
        return self.weights.shape[0]

    @property
    def previous_input(self) -> np.ndarray:
        """The inputs of the last forward pass, read-only."""
        view = self._previous_inputs.view()
        view.setflags(write=False)
        return view

    def forward(self, inputs) -> np.ndarray:
        """Return the activations for ``inputs`` and remember the pass."""
        values = np.array(inputs, dtype=np.float64).reshape(-1)
        if values.size != self.input_size:
            raise InputSizeMismatchError(self.input_size, values.size)
        self._previous_weighted_sums = self.weights @ values + self.biases
        self._previous_inputs = values
        return np.asarray(self.activation_fn.apply(self._previous_weighted_sums), dtype=np.float64)

    def backpropagation_step(self, previous_outputs, output_partial_gradient) -> np.ndarray:
        """Accumulate gradients and return the gradient for this layer's inputs.

        ``previous_outputs`` are the activations this layer produced in its
        last forward pass; ``output_partial_gradient`` is the loss gradient
        with respect to them.
        """
        outputs = np.asarray(previous_outputs, dtype=np.float64).reshape(-1)
        upstream = np.asarray(output_partial_gradient, dtype=np.float64).reshape(-1)
        derivative = np.asarray(
            self.activation_fn.derivative(self._previous_weighted_sums, outputs), dtype=np.float64
        )
        delta = derivative * upstream
        self.bias_gradient += delta
        self.weight_gradient += np.outer(delta, self._previous_inputs)
        return self.weights.T @ delta

    def apply_gradient(self, scale: float) -> None:
        """Add the scaled accumulated gradients and reset them to zero."""
        self.weights += self.weight_gradient * scale
        self.biases += self.bias_gradient * scale
        self.weight_gradient.fill(0.0)
        self.bias_gradient.fill(0.0)