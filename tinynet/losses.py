"""Loss functions comparing network output with expected output."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np


class LossFnError(Exception):
    """Base class of loss function errors."""


class OutputSizeMismatchError(LossFnError):
    """The output and the expected output differ in length."""

    def __init__(self, given_output_size: int, expected_output_size: int) -> None:
        self.given_output_size = given_output_size
        self.expected_output_size = expected_output_size
        super().__init__(
            f"given output size ({given_output_size}) does not equal "
            f"expected output size ({expected_output_size})"
        )


def _vectors(output, expected_output) -> tuple[np.ndarray, np.ndarray]:
    out = np.asarray(output, dtype=np.float64).reshape(-1)
    expected = np.asarray(expected_output, dtype=np.float64).reshape(-1)
    if out.size != expected.size:
        raise OutputSizeMismatchError(out.size, expected.size)
    return out, expected


class LossFn(ABC):
    """A loss function and its gradient with respect to the output."""

    @abstractmethod
    def apply(self, output, expected_output) -> float:
        """Return the loss of ``output`` against ``expected_output``."""

    @abstractmethod
    def partial_gradient(self, output, expected_output) -> np.ndarray:
        """Return the gradient of the loss with respect to ``output``."""


class MSE(LossFn):
    """Mean squared error."""

    def apply(self, output, expected_output) -> float:
        out, expected = _vectors(output, expected_output)
        return float(np.sum((out - expected) ** 2) / out.size)

    def partial_gradient(self, output, expected_output) -> np.ndarray:
        out, expected = _vectors(output, expected_output)
        return 2.0 * (out - expected) / out.size

    def __repr__(self) -> str:
        return "MSE()"