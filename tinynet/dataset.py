"""Training samples."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


def _frozen_vector(values) -> np.ndarray:
    array = np.array(values, dtype=np.float64).reshape(-1)
    array.setflags(write=False)
    return array


@dataclass(frozen=True, eq=False)
class Sample:
    """An input vector paired with the output a network should produce."""

    inputs: np.ndarray
    expected_outputs: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "inputs", _frozen_vector(self.inputs))
        object.__setattr__(self, "expected_outputs", _frozen_vector(self.expected_outputs))