"""Activation functions applied element-wise by network layers."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np


def _unwrap(value: np.ndarray) -> float | np.ndarray:
    return float(value) if value.ndim == 0 else value


class ActivationFn(ABC):
    """An element-wise activation function and its derivative.

    Both methods accept a scalar or a NumPy array and work element-wise.
    """

    @abstractmethod
    def apply(self, x):
        """Return the activation of the weighted input ``x``."""

    @abstractmethod
    def derivative(self, x, activation):
        """Return the derivative at ``x``, given ``activation == apply(x)``."""


class Sigmoid(ActivationFn):
    """The logistic function 1 / (1 + e^-x)."""

    def apply(self, x):
        values = np.asarray(x, dtype=np.float64)
        return _unwrap(1.0 / (1.0 + np.exp(-values)))

    def derivative(self, x, activation):
        values = np.asarray(activation, dtype=np.float64)
        return _unwrap(values * (1.0 - values))

    def __repr__(self) -> str:
        return "Sigmoid()"